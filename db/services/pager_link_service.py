"""
Service for building pager navigation links.

Turns a PageWindow plus the incoming request's query parameters into an
ordered list of link descriptors. Nothing here produces markup; templates
decide how a descriptor looks.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple, Union
from urllib.parse import urlencode

from db.services.pagination_service import PaginationService, PageWindow
from models.ajax_options import AjaxOptions

logger = logging.getLogger(__name__)

# Query keys that never carry over into pager links
AJAX_MARKER_KEYS = ("x-requested-with", "_")
ANTI_FORGERY_KEY = "csrf_token"


class LinkKind(str, Enum):
    FIRST = "first"
    PREVIOUS = "previous"
    SKIP_BACK = "skip_back"
    PAGE = "page"
    SKIP_FORWARD = "skip_forward"
    NEXT = "next"
    LAST = "last"


@dataclass(frozen=True)
class LinkDescriptor:
    """One rendered anchor in the pager."""

    kind: LinkKind
    label: str
    target_page: Optional[int]
    enabled: bool
    is_current: bool = False
    url: Optional[str] = None
    attributes: Dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class PagerOptions:
    """Which slots to render and what to call them."""

    first_last_navigation: bool = True
    skip_forward_back_navigation: bool = True
    page_param: str = "page"
    page_size_param: str = "pageSize"
    first_text: str = "«"
    previous_text: str = "‹ Previous"
    # None labels an enabled skip link with its target page
    skip_back_text: Optional[str] = None
    skip_forward_text: Optional[str] = None
    disabled_skip_text: str = ".."
    next_text: str = "Next ›"
    last_text: str = "»"


QuerySource = Union[Mapping[str, Any], Iterable[Tuple[str, Any]]]


def _is_page_size(value: Optional[str]) -> bool:
    return value is not None and value.isdecimal() and int(value) >= 1


def _iter_query_pairs(query: QuerySource) -> Iterable[Tuple[str, Any]]:
    # werkzeug MultiDict.items() yields the first value per key
    if hasattr(query, "items"):
        return query.items()
    return query


@dataclass(frozen=True)
class PagingRequest:
    """Per-call paging input."""

    page: int
    page_size: int
    total_items: int
    pages_to_display: int = 5
    base_url: str = ""
    existing_params: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_query(
        cls,
        query: Optional[QuerySource],
        base_url: str,
        page: int,
        page_size: int,
        total_items: int,
        pages_to_display: int = 5
    ) -> "PagingRequest":
        """
        Build a request from an incoming query string source.

        Args:
            query: Query parameters (Flask request.args, a dict, or key/value pairs)
            base_url: Path the pager links point at
            page: Current page
            page_size: Items per page
            total_items: Total number of items
            pages_to_display: Maximum number of page links

        Returns:
            PagingRequest with AJAX marker and anti-forgery keys removed

        Raises:
            ValueError: If no query source is available
        """
        if query is None:
            raise ValueError("A query parameter source is required to build pager links")

        params: Dict[str, str] = {}
        for key, value in _iter_query_pairs(query):
            if key is None or key in params:
                continue
            if key.lower() in AJAX_MARKER_KEYS or key == ANTI_FORGERY_KEY:
                continue
            params[key] = "" if value is None else str(value)

        return cls(
            page=page,
            page_size=page_size,
            total_items=total_items,
            pages_to_display=pages_to_display,
            base_url=base_url,
            existing_params=params
        )


@dataclass(frozen=True)
class Pager:
    """A computed window together with its links."""

    window: PageWindow
    links: List[LinkDescriptor]

    @property
    def is_empty(self) -> bool:
        return self.window.suppress


class PagerLinkService:
    """Builds the ordered link set for a pager."""

    def __init__(
        self,
        pagination_service: Optional[PaginationService] = None,
        options: Optional[PagerOptions] = None,
        ajax_options: Optional[AjaxOptions] = None,
        default_page_size: int = 10
    ):
        """Initialize with optional collaborators.

        Args:
            pagination_service: PaginationService instance (or None for default)
            options: Slot visibility and labels (or None for defaults)
            ajax_options: When given, enabled links carry AJAX attributes
            default_page_size: Fallback when a request has an invalid page size
        """
        self.pagination_service = pagination_service or PaginationService()
        self.options = options or PagerOptions()
        self.ajax_options = ajax_options
        self.default_page_size = default_page_size

    def build_pager(self, request: PagingRequest) -> Pager:
        """Normalize the request, compute its window and build its links."""
        page, page_size, pages_to_display = self.pagination_service.normalize_params(
            request.page,
            request.page_size,
            self.default_page_size,
            request.pages_to_display
        )
        if (page, page_size, pages_to_display) != (request.page, request.page_size, request.pages_to_display):
            request = PagingRequest(
                page=page,
                page_size=page_size,
                total_items=request.total_items,
                pages_to_display=pages_to_display,
                base_url=request.base_url,
                existing_params=request.existing_params
            )

        window = self.pagination_service.calculate_window(
            page, page_size, request.total_items, pages_to_display
        )
        return Pager(window=window, links=self.build(window, request))

    def build(self, window: PageWindow, request: PagingRequest) -> List[LinkDescriptor]:
        """
        Build link descriptors for every pager slot.

        Slot order: first, previous, skip back, pages, skip forward, next, last.

        Args:
            window: Window computed for this request
            request: The paging request the window was computed from

        Returns:
            Ordered list of LinkDescriptor (empty when the window is suppressed)
        """
        if window.suppress:
            return []

        options = self.options
        current = window.current_page
        total = window.total_pages
        attributes = self.ajax_options.to_unobtrusive_attributes() if self.ajax_options else {}

        def skip_label(text, target, enabled):
            if text is not None:
                return text
            return str(target) if enabled else options.disabled_skip_text

        def link(kind, label, target, enabled, is_current=False):
            if not enabled:
                return LinkDescriptor(kind=kind, label=label, target_page=None, enabled=False)
            return LinkDescriptor(
                kind=kind,
                label=label,
                target_page=target,
                enabled=True,
                is_current=is_current,
                url=self.build_url(request, target),
                attributes=dict(attributes)
            )

        links: List[LinkDescriptor] = []

        if options.first_last_navigation:
            links.append(link(LinkKind.FIRST, options.first_text, 1, total > 1 and current > 1))

        links.append(link(LinkKind.PREVIOUS, options.previous_text, current - 1, current > 1))

        if options.skip_forward_back_navigation:
            enabled = current > 1 and window.first_visible_page > 1
            links.append(link(
                LinkKind.SKIP_BACK,
                skip_label(options.skip_back_text, window.skip_back_target, enabled),
                window.skip_back_target,
                enabled
            ))

        for page_number in window.visible_pages:
            links.append(link(
                LinkKind.PAGE,
                str(page_number),
                page_number,
                True,
                is_current=page_number == current
            ))

        if options.skip_forward_back_navigation:
            enabled = total > 1 and window.last_visible_page < total
            links.append(link(
                LinkKind.SKIP_FORWARD,
                skip_label(options.skip_forward_text, window.skip_forward_target, enabled),
                window.skip_forward_target,
                enabled
            ))

        links.append(link(LinkKind.NEXT, options.next_text, current + 1, current < total))

        if options.first_last_navigation:
            links.append(link(LinkKind.LAST, options.last_text, total, total > 1 and current < total))

        logger.debug(f"Built {len(links)} pager links for page {current} of {total}")
        return links

    def build_url(self, request: PagingRequest, target_page: int) -> str:
        """
        Build the URL for a target page, keeping the other query parameters.

        Args:
            request: Paging request holding the base URL and existing params
            target_page: Page the link navigates to

        Returns:
            base_url followed by the percent-encoded query string
        """
        params = dict(request.existing_params)
        params[self.options.page_param] = str(target_page)
        if not _is_page_size(params.get(self.options.page_size_param)):
            # Replaced in place when present, appended otherwise
            params[self.options.page_size_param] = str(request.page_size)

        return f"{request.base_url}?{urlencode(list(params.items()))}"
