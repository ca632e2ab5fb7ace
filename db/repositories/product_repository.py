"""
Repository for the demo product catalogue.
"""

from typing import List, Dict, Any
from sqlalchemy.orm import Session

from db.models.models import Product


class ProductRepository:
    """Product queries in catalogue (ID) order."""

    def __init__(self, session: Session):
        self.session = session

    def count(self) -> int:
        return self.session.query(Product).count()

    def get_page(self, offset: int, limit: int) -> List[Product]:
        """Get `limit` products starting after the first `offset`."""
        return (
            self.session.query(Product)
            .order_by(Product.id)
            .offset(offset)
            .limit(limit)
            .all()
        )

    def bulk_create(self, rows: List[Dict[str, Any]]) -> int:
        """Insert many products at once and return how many were added."""
        self.session.add_all([Product(**row) for row in rows])
        self.session.flush()
        return len(rows)

    def delete_all(self) -> int:
        """Remove every product and return how many were deleted."""
        deleted = self.session.query(Product).delete()
        self.session.flush()
        return deleted
