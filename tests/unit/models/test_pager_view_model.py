"""Tests for the pager view model formatting"""
from db.services.pager_link_service import LinkDescriptor, LinkKind, PagerLinkService, PagingRequest
from models.pager_view_model import (
    format_link_for_view,
    format_pager_for_view,
    link_aria_label,
    link_css_class,
)


def build_pager(page, page_size, total_items):
    request = PagingRequest(page=page, page_size=page_size, total_items=total_items, base_url="/p")
    return PagerLinkService().build_pager(request)


class TestLinkCssClass:

    def test_disabled(self):
        link = LinkDescriptor(kind=LinkKind.NEXT, label="Next ›", target_page=None, enabled=False)
        assert link_css_class(link) == "disabled"

    def test_current_page(self):
        link = LinkDescriptor(kind=LinkKind.PAGE, label="3", target_page=3, enabled=True, is_current=True, url="/p?page=3")
        assert link_css_class(link) == "active"

    def test_plain_link(self):
        link = LinkDescriptor(kind=LinkKind.PAGE, label="4", target_page=4, enabled=True, url="/p?page=4")
        assert link_css_class(link) == ""


class TestLinkAriaLabel:

    def test_current_page_label(self):
        link = LinkDescriptor(kind=LinkKind.PAGE, label="3", target_page=3, enabled=True, is_current=True, url="/p?page=3")
        assert link_aria_label(link) == "Page 3, current page"

    def test_skip_back_label_names_target(self):
        link = LinkDescriptor(kind=LinkKind.SKIP_BACK, label="2", target_page=2, enabled=True, url="/p?page=2")
        assert link_aria_label(link) == "Skip back to page 2"

    def test_disabled_label(self):
        link = LinkDescriptor(kind=LinkKind.FIRST, label="«", target_page=None, enabled=False)
        assert link_aria_label(link) == "First page unavailable"

    def test_every_kind_has_a_label(self):
        for page in (1, 5, 10):
            for link in build_pager(page, 5, 50).links:
                assert link_aria_label(link)


class TestFormatPager:

    def test_format_link_for_view(self):
        link = LinkDescriptor(
            kind=LinkKind.NEXT,
            label="Next ›",
            target_page=2,
            enabled=True,
            url="/p?page=2&pageSize=10",
            attributes={"data-ajax": "true"}
        )

        assert format_link_for_view(link) == {
            "kind": "next",
            "text": "Next ›",
            "href": "/p?page=2&pageSize=10",
            "css_class": "",
            "aria_label": "Go to next page, page 2",
            "aria_current": None,
            "attributes": {"data-ajax": "true"},
        }

    def test_current_page_gets_aria_current(self):
        view = format_pager_for_view(build_pager(1, 10, 50))
        current = [item for item in view if item["aria_current"] == "page"]

        assert len(current) == 1
        assert current[0]["text"] == "1"

    def test_suppressed_pager_formats_to_nothing(self):
        assert format_pager_for_view(build_pager(1, 10, 0)) == []
