"""
Service for handling pagination logic.

Provides pure, testable pagination functions independent of HTTP/Flask context.
Follows Single Responsibility Principle - only handles pagination math.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Tuple

logger = logging.getLogger(__name__)


class SummaryMode(str, Enum):
    """Text modes for the paging summary line."""
    PAGE_NUMBERS = "page_numbers"
    PAGE_ITEMS = "page_items"


@dataclass(frozen=True)
class PageWindow:
    """Derived page window; the single source of truth for rendering a pager."""

    total_pages: int
    current_page: int
    first_visible_page: int
    last_visible_page: int
    skip_back_target: int
    skip_forward_target: int
    suppress: bool

    @property
    def visible_pages(self) -> range:
        """Page numbers to render, in order (empty when suppressed)."""
        if self.suppress:
            return range(0)
        return range(self.first_visible_page, self.last_visible_page + 1)


class PaginationService:
    """Service for pagination calculations."""

    def calculate_total_pages(self, total_items: int, page_size: int) -> int:
        """
        Calculate the number of pages needed for a number of items.

        Args:
            total_items: Total number of items
            page_size: Items per page

        Returns:
            Page count (0 when there are no items or no valid page size)
        """
        if total_items <= 0 or page_size <= 0:
            return 0

        # Ceiling division
        return (total_items + page_size - 1) // page_size

    def normalize_params(
        self,
        page: int,
        page_size: int,
        default_page_size: int,
        pages_to_display: int = 5
    ) -> Tuple[int, int, int]:
        """
        Coerce caller-supplied paging values to safe defaults.

        Args:
            page: Requested page number (1-indexed)
            page_size: Requested items per page
            default_page_size: Page size used when the requested one is invalid
            pages_to_display: Requested number of page links

        Returns:
            (page, page_size, pages_to_display) with page >= 1, page_size >= 1
            and pages_to_display >= 1
        """
        page = page if page and page >= 1 else 1
        page_size = page_size if page_size and page_size >= 1 else default_page_size
        pages_to_display = pages_to_display if pages_to_display and pages_to_display >= 1 else 1
        return page, page_size, pages_to_display

    def validate_page(self, page: int, page_count: int) -> int:
        """
        Validate and clamp page number to valid range.

        Args:
            page: Requested page number
            page_count: Total number of pages

        Returns:
            Valid page number (1 to page_count, or 1 if no pages)
        """
        if page_count == 0:
            return 1

        return max(1, min(page, page_count))

    def calculate_window(
        self,
        page: int,
        page_size: int,
        total_items: int,
        pages_to_display: int = 5
    ) -> PageWindow:
        """
        Calculate the visible page window around the current page.

        The window is centred on the current page where possible and shifted
        so that it never runs past the last page. Skip targets point one page
        outside the window on either side.

        Args:
            page: Current page (already coerced to >= 1)
            page_size: Items per page (already coerced to >= 1)
            total_items: Total number of items
            pages_to_display: Maximum number of page links in the window

        Returns:
            PageWindow describing what to render
        """
        total_pages = self.calculate_total_pages(total_items, page_size)

        if total_pages == 0:
            return PageWindow(
                total_pages=0,
                current_page=page,
                first_visible_page=1,
                last_visible_page=0,
                skip_back_target=1,
                skip_forward_target=0,
                suppress=True
            )

        if page > total_pages:
            logger.debug(f"Requested page {page} exceeds {total_pages} pages, clamping to last page")
            page = total_pages

        first_visible = page - (pages_to_display // 2)
        if first_visible + pages_to_display > total_pages:
            first_visible = total_pages + 1 - pages_to_display
        if first_visible < 1:
            first_visible = 1

        last_visible = min(first_visible + pages_to_display - 1, total_pages)

        skip_back = max(first_visible - 1, 1)
        skip_forward = min(first_visible + pages_to_display, total_pages)

        return PageWindow(
            total_pages=total_pages,
            current_page=page,
            first_visible_page=first_visible,
            last_visible_page=last_visible,
            skip_back_target=skip_back,
            skip_forward_target=skip_forward,
            suppress=False
        )

    def describe(
        self,
        page: int,
        page_size: int,
        total_items: int,
        mode: SummaryMode = SummaryMode.PAGE_ITEMS
    ) -> str:
        """
        Build the paging summary line shown next to a pager.

        Args:
            page: Current page number
            page_size: Items per page
            total_items: Total number of items
            mode: Whether to describe page numbers or the item range

        Returns:
            "Page 2 of 50" or "Showing 11 – 20 of 500 items"
        """
        if mode == SummaryMode.PAGE_NUMBERS:
            total_pages = self.calculate_total_pages(total_items, page_size)
            return f"Page {page} of {total_pages}"

        if total_items <= 0:
            first_item = 0
            last_item = 0
        else:
            first_item = (page * page_size) - (page_size - 1)
            last_item = min(first_item + page_size - 1, total_items)

        return f"Showing {first_item} – {last_item} of {total_items} items"
