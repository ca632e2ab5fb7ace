"""ProductController - paged product listings with a pager

Handles only routing and HTTP concerns: reading the query string, asking the
product service for a page, and handing the computed pager to templates.
"""

import logging
from dataclasses import asdict
from typing import Any, Dict, Optional, Tuple

from flask import render_template, request, url_for

from config import (
    PAGER_DEFAULT_PAGE_SIZE,
    PAGER_FIRST_LAST_NAVIGATION,
    PAGER_PAGES_TO_DISPLAY,
    PAGER_SKIP_NAVIGATION,
)
from forms import PageSizeForm
from db.services.pagination_service import PaginationService, SummaryMode
from db.services.pager_link_service import PagerLinkService, PagerOptions, PagingRequest, Pager
from db.services.product_service import PagedList, ProductService
from models.ajax_options import AjaxOptions, InsertionMode
from models.pager_view_model import format_pager_for_view
from utils import is_ajax_request

logger = logging.getLogger(__name__)

GRID_ELEMENT_ID = "product-grid"
LOADING_ELEMENT_ID = "grid-loading"


def default_ajax_options() -> AjaxOptions:
    """AJAX options used by the grid page: fetch the partial and swap the grid."""
    return AjaxOptions(
        http_method="Get",
        update_target_id=GRID_ELEMENT_ID,
        insertion_mode=InsertionMode.REPLACE,
        loading_element_id=LOADING_ELEMENT_ID,
        loading_element_duration=200,
    )


class ProductController:
    """Controller for the paged product views"""

    def __init__(
        self,
        product_service=None,
        pagination_service=None,
        pager_options=None,
        ajax_options=None,
        pages_to_display=PAGER_PAGES_TO_DISPLAY
    ):
        """Initialize controller with optional service injection

        Args:
            product_service: ProductService instance (or None for default)
            pagination_service: PaginationService instance (or None for default)
            pager_options: PagerOptions for slot visibility and labels
            ajax_options: AjaxOptions for the AJAX grid (or None for default)
            pages_to_display: Number of page links in the window
        """
        self.product_service = product_service or ProductService(default_page_size=PAGER_DEFAULT_PAGE_SIZE)
        self.pagination_service = pagination_service or PaginationService()
        self.pager_options = pager_options or PagerOptions(
            first_last_navigation=PAGER_FIRST_LAST_NAVIGATION,
            skip_forward_back_navigation=PAGER_SKIP_NAVIGATION,
        )
        self.ajax_options = ajax_options or default_ajax_options()
        self.pages_to_display = pages_to_display

    def index(self):
        """Paged product list with plain pager links

        Returns:
            Flask Response (rendered template)
        """
        try:
            context = self._page_context(base_url=request.path)
            return render_template("index.html", **context)
        except Exception as e:
            logger.error(f"Failed to render product list: {e}", exc_info=True)
            return "Unable to load products", 500

    def ajax_grid(self):
        """Paged product grid whose pager links update the grid in place

        Returns:
            Flask Response (rendered template)
        """
        try:
            context = self._page_context(
                base_url=url_for("ajax_pager"),
                ajax_options=self.ajax_options
            )
            return render_template("ajax_grid.html", **context)
        except Exception as e:
            logger.error(f"Failed to render AJAX grid: {e}", exc_info=True)
            return "Unable to load products", 500

    def ajax_pager(self):
        """Grid partial for AJAX requests, full grid page otherwise

        Returns:
            Flask Response (rendered partial or full template)
        """
        try:
            context = self._page_context(
                base_url=request.path,
                ajax_options=self.ajax_options
            )
            if is_ajax_request(request):
                return render_template("_product_grid.html", **context)
            return render_template("ajax_grid.html", **context)
        except Exception as e:
            logger.error(f"Failed to render AJAX pager: {e}", exc_info=True)
            return "Unable to load products", 500

    def api_products(self) -> Tuple[Dict[str, Any], int]:
        """
        GET /api/products?page=2&pageSize=10

        Returns one page of products together with the computed pager.
        """
        try:
            products, pager = self._load_page(base_url=request.path)
            return {
                "items": products.results,
                "window": asdict(pager.window),
                "links": [
                    {**asdict(link), "kind": link.kind.value}
                    for link in pager.links
                ],
                "summary": {
                    "items": self._describe(products, SummaryMode.PAGE_ITEMS),
                    "pages": self._describe(products, SummaryMode.PAGE_NUMBERS),
                },
            }, 200
        except Exception as e:
            logger.error(f"Failed to get products: {e}")
            return {"error": str(e), "items": [], "links": []}, 500

    # ===== Helpers =====

    def _read_paging_args(self) -> Tuple[int, int]:
        page = request.args.get("page", 1, type=int)
        page_size = request.args.get("pageSize", PAGER_DEFAULT_PAGE_SIZE, type=int)
        return page, page_size

    def _load_page(self, base_url: str, ajax_options: Optional[AjaxOptions] = None) -> Tuple[PagedList, Pager]:
        page, page_size = self._read_paging_args()
        products = self.product_service.get_products_paged(page, page_size)

        paging_request = PagingRequest.from_query(
            request.args,
            base_url=base_url,
            page=products.current_page,
            page_size=products.page_size,
            total_items=products.total_item_count,
            pages_to_display=self.pages_to_display
        )
        link_service = PagerLinkService(
            pagination_service=self.pagination_service,
            options=self.pager_options,
            ajax_options=ajax_options,
            default_page_size=PAGER_DEFAULT_PAGE_SIZE
        )
        return products, link_service.build_pager(paging_request)

    def _describe(self, products: PagedList, mode: SummaryMode) -> str:
        return self.pagination_service.describe(
            products.current_page,
            products.page_size,
            products.total_item_count,
            mode
        )

    def _page_context(self, base_url: str, ajax_options: Optional[AjaxOptions] = None) -> Dict[str, Any]:
        products, pager = self._load_page(base_url, ajax_options)

        form = PageSizeForm(formdata=None)
        form.pageSize.data = products.page_size

        return {
            "products": products,
            "pager_links": format_pager_for_view(pager),
            "items_summary": self._describe(products, SummaryMode.PAGE_ITEMS),
            "pages_summary": self._describe(products, SummaryMode.PAGE_NUMBERS),
            "page_size_form": form,
            "grid_element_id": GRID_ELEMENT_ID,
            "loading_element_id": LOADING_ELEMENT_ID,
        }
