"""Unobtrusive AJAX options attached to pager links.

The attribute names follow the jquery-unobtrusive-ajax conventions
(``data-ajax``, ``data-ajax-update``, ...) so links rendered with them are
picked up by that script without any page-specific JavaScript.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional

_ID_SELECTOR_CHARS = re.compile(r"[.:\[\]]")


class InsertionMode(Enum):
    """How the AJAX response is inserted into the target element."""
    REPLACE = "replace"
    INSERT_BEFORE = "before"
    INSERT_AFTER = "after"
    REPLACE_WITH = "replace-with"


def escape_id_selector(element_id: str) -> str:
    """Turn an element id into a selector, escaping characters meaningful in CSS.

    ``a.b`` becomes ``#a\\.b`` so the dot is not read as a class selector.
    """
    return "#" + _ID_SELECTOR_CHARS.sub(lambda match: "\\" + match.group(0), element_id)


def _is_specified(value: Optional[str]) -> bool:
    return value is not None and value.strip() != ""


@dataclass(frozen=True)
class AjaxOptions:
    """Options controlling how pager links issue AJAX requests."""

    confirm: Optional[str] = None
    http_method: str = "Post"
    insertion_mode: InsertionMode = InsertionMode.REPLACE
    loading_element_duration: int = 0
    loading_element_id: Optional[str] = None
    on_begin: Optional[str] = None
    on_complete: Optional[str] = None
    on_failure: Optional[str] = None
    on_success: Optional[str] = None
    update_target_id: Optional[str] = None
    url: Optional[str] = None
    allow_cache: bool = False

    def to_unobtrusive_attributes(self) -> Dict[str, str]:
        """Return the options as an ordered mapping of HTML attributes."""
        attributes = {"data-ajax": "true"}

        optional = [
            ("data-ajax-url", self.url),
            ("data-ajax-method", self.http_method),
            ("data-ajax-confirm", self.confirm),
            ("data-ajax-begin", self.on_begin),
            ("data-ajax-complete", self.on_complete),
            ("data-ajax-failure", self.on_failure),
            ("data-ajax-success", self.on_success),
        ]
        for name, value in optional:
            if _is_specified(value):
                attributes[name] = value

        # The client treats a missing data-ajax-cache as false
        if self.allow_cache:
            attributes["data-ajax-cache"] = "true"

        if _is_specified(self.loading_element_id):
            attributes["data-ajax-loading"] = escape_id_selector(self.loading_element_id)
            if self.loading_element_duration > 0:
                attributes["data-ajax-loading-duration"] = str(self.loading_element_duration)

        if _is_specified(self.update_target_id):
            attributes["data-ajax-update"] = escape_id_selector(self.update_target_id)
            attributes["data-ajax-mode"] = self.insertion_mode.value

        return attributes
