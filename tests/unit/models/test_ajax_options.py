"""Tests for AjaxOptions unobtrusive attribute generation"""
import pytest
from models.ajax_options import AjaxOptions, InsertionMode, escape_id_selector


class TestEscapeIdSelector:
    """Test id selector escaping"""

    def test_plain_id(self):
        assert escape_id_selector("grid") == "#grid"

    @pytest.mark.parametrize("element_id, expected", [
        ("a.b", "#a\\.b"),
        ("a:b", "#a\\:b"),
        ("list[0]", "#list\\[0\\]"),
        ("x.y:z[1]", "#x\\.y\\:z\\[1\\]"),
    ])
    def test_selector_characters_are_escaped(self, element_id, expected):
        assert escape_id_selector(element_id) == expected

    def test_other_characters_untouched(self):
        assert escape_id_selector("my-grid_2") == "#my-grid_2"


class TestAjaxOptions:
    """Test suite for AjaxOptions"""

    def test_defaults(self):
        attributes = AjaxOptions().to_unobtrusive_attributes()

        assert attributes == {"data-ajax": "true", "data-ajax-method": "Post"}

    def test_marker_comes_first(self):
        attributes = AjaxOptions(update_target_id="grid").to_unobtrusive_attributes()
        assert list(attributes)[0] == "data-ajax"

    def test_all_options(self):
        options = AjaxOptions(
            confirm="Are you sure?",
            http_method="Get",
            insertion_mode=InsertionMode.INSERT_AFTER,
            loading_element_duration=300,
            loading_element_id="spinner",
            on_begin="onBegin",
            on_complete="onComplete",
            on_failure="onFailure",
            on_success="onSuccess",
            update_target_id="grid.body",
            url="/products/partial",
            allow_cache=True,
        )

        assert options.to_unobtrusive_attributes() == {
            "data-ajax": "true",
            "data-ajax-url": "/products/partial",
            "data-ajax-method": "Get",
            "data-ajax-confirm": "Are you sure?",
            "data-ajax-begin": "onBegin",
            "data-ajax-complete": "onComplete",
            "data-ajax-failure": "onFailure",
            "data-ajax-success": "onSuccess",
            "data-ajax-cache": "true",
            "data-ajax-loading": "#spinner",
            "data-ajax-loading-duration": "300",
            "data-ajax-update": "#grid\\.body",
            "data-ajax-mode": "after",
        }

    def test_blank_values_are_skipped(self):
        attributes = AjaxOptions(confirm="   ", on_begin="", http_method="").to_unobtrusive_attributes()
        assert attributes == {"data-ajax": "true"}

    def test_cache_only_when_allowed(self):
        assert "data-ajax-cache" not in AjaxOptions().to_unobtrusive_attributes()

    def test_loading_duration_requires_loading_element(self):
        attributes = AjaxOptions(loading_element_duration=500).to_unobtrusive_attributes()
        assert "data-ajax-loading-duration" not in attributes

    def test_zero_loading_duration_is_omitted(self):
        attributes = AjaxOptions(loading_element_id="spinner").to_unobtrusive_attributes()

        assert attributes["data-ajax-loading"] == "#spinner"
        assert "data-ajax-loading-duration" not in attributes

    def test_mode_requires_update_target(self):
        attributes = AjaxOptions(insertion_mode=InsertionMode.REPLACE_WITH).to_unobtrusive_attributes()
        assert "data-ajax-mode" not in attributes

    @pytest.mark.parametrize("mode, token", [
        (InsertionMode.REPLACE, "replace"),
        (InsertionMode.INSERT_BEFORE, "before"),
        (InsertionMode.INSERT_AFTER, "after"),
        (InsertionMode.REPLACE_WITH, "replace-with"),
    ])
    def test_insertion_mode_tokens(self, mode, token):
        attributes = AjaxOptions(update_target_id="grid", insertion_mode=mode).to_unobtrusive_attributes()
        assert attributes["data-ajax-mode"] == token
