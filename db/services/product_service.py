"""
Service for paged access to the demo product catalogue.

The data source is injected as a unit-of-work factory so each call owns its
own session; nothing is cached between requests.
"""

import logging
import random
import string
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

from config import PRODUCTS_DEFAULT_PAGE_SIZE
from db.repositories.unit_of_work import UnitOfWork
from db.services.pagination_service import PaginationService

logger = logging.getLogger(__name__)

PRODUCT_ADJECTIVES = [
    "Small", "Ergonomic", "Rustic", "Intelligent", "Gorgeous", "Incredible",
    "Fantastic", "Practical", "Sleek", "Awesome", "Generic", "Handcrafted",
    "Handmade", "Licensed", "Refined", "Unbranded", "Tasty"
]

PRODUCT_MATERIALS = [
    "Steel", "Wooden", "Concrete", "Plastic", "Cotton", "Granite", "Rubber",
    "Metal", "Soft", "Fresh", "Frozen"
]

PRODUCT_NOUNS = [
    "Chair", "Car", "Computer", "Keyboard", "Mouse", "Bike", "Ball", "Gloves",
    "Pants", "Shirt", "Table", "Shoes", "Hat", "Towels", "Soap", "Tuna",
    "Chicken", "Fish", "Cheese", "Bacon", "Pizza", "Salad", "Sausages", "Chips"
]

SKU_ALPHABET = string.ascii_uppercase + string.digits


@dataclass
class PagedList:
    """One page of results plus the numbers a pager needs."""

    current_page: int
    page_size: int
    total_item_count: int
    results: List[Any] = field(default_factory=list)

    @property
    def page_count(self) -> int:
        if self.total_item_count > 0 and self.page_size > 0:
            return (self.total_item_count + self.page_size - 1) // self.page_size
        return 0


def generate_products(count: int, seed: int = 42) -> List[Dict[str, Any]]:
    """
    Generate a deterministic fake catalogue.

    Args:
        count: Number of products to generate
        seed: Random seed, so the same seed always yields the same catalogue

    Returns:
        List of product row dicts with id, name, price and sku
    """
    rng = random.Random(seed)
    used_skus = set()
    rows = []

    for product_id in range(1, count + 1):
        sku = "".join(rng.choice(SKU_ALPHABET) for _ in range(8))
        while sku in used_skus:
            sku = "".join(rng.choice(SKU_ALPHABET) for _ in range(8))
        used_skus.add(sku)

        rows.append({
            "id": product_id,
            "name": f"{rng.choice(PRODUCT_ADJECTIVES)} {rng.choice(PRODUCT_MATERIALS)} {rng.choice(PRODUCT_NOUNS)}",
            "price": round(rng.uniform(1, 1000), 2),
            "sku": sku,
        })

    return rows


class ProductService:
    """Service for paging through products."""

    def __init__(
        self,
        uow_factory: Optional[Callable[[], UnitOfWork]] = None,
        pagination_service: Optional[PaginationService] = None,
        default_page_size: int = PRODUCTS_DEFAULT_PAGE_SIZE
    ):
        """
        Initialize with injectable collaborators.

        Args:
            uow_factory: Callable returning a UnitOfWork (or None for a fresh session per call)
            pagination_service: PaginationService instance (or None for default)
            default_page_size: Page size used when the requested one is invalid
        """
        self.uow_factory = uow_factory or UnitOfWork
        self.pagination_service = pagination_service or PaginationService()
        self.default_page_size = default_page_size

    def get_products_paged(self, page: int = 1, page_size: Optional[int] = None) -> PagedList:
        """
        Get one page of products.

        Args:
            page: Requested page (values below 1 become 1, values past the end
                become the last page)
            page_size: Requested items per page (values below 1 become the default)

        Returns:
            PagedList with the products for the resolved page, as dicts
        """
        page, page_size, _ = self.pagination_service.normalize_params(
            page, page_size if page_size is not None else self.default_page_size, self.default_page_size
        )

        with self.uow_factory() as uow:
            total = uow.products.count()
            page_count = self.pagination_service.calculate_total_pages(total, page_size)
            current_page = self.pagination_service.validate_page(page, page_count)

            offset = (current_page - 1) * page_size
            results = [product.to_dict() for product in uow.products.get_page(offset, page_size)]

        if current_page != page:
            logger.debug(f"Requested product page {page} resolved to {current_page}")

        return PagedList(
            current_page=current_page,
            page_size=page_size,
            total_item_count=total,
            results=results
        )

    def seed_products(self, count: int, seed: int = 42, reset: bool = False) -> int:
        """
        Fill the catalogue with generated products.

        Args:
            count: Number of products to create
            seed: Random seed for the generated catalogue
            reset: Remove existing products first; otherwise seeding is skipped
                when the catalogue already has products

        Returns:
            Number of products inserted
        """
        with self.uow_factory() as uow:
            if reset:
                removed = uow.products.delete_all()
                logger.info(f"Removed {removed} existing products")
            elif uow.products.count() > 0:
                logger.info("Product catalogue already seeded, skipping")
                return 0

            inserted = uow.products.bulk_create(generate_products(count, seed))

        logger.info(f"Seeded {inserted} products")
        return inserted
