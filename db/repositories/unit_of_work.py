"""
Transaction scope for catalogue reads and writes.
"""

import logging
from typing import Optional

from sqlalchemy.orm import Session

from db.database import get_session
from db.repositories.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class UnitOfWork:
    """
    One catalogue transaction, used as a context manager.

    A session passed in is borrowed: it is committed or rolled back on exit
    but left open for its owner. Without one, a session is opened on entry
    and closed on exit.
    """

    def __init__(self, session: Optional[Session] = None):
        self._borrowed_session = session
        self.session: Optional[Session] = None
        self.products: Optional[ProductRepository] = None

    def __enter__(self) -> "UnitOfWork":
        self.session = self._borrowed_session or get_session()
        self.products = ProductRepository(self.session)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        try:
            if exc_type is None:
                self.session.commit()
            else:
                logger.warning(f"Rolling back catalogue changes after {exc_type.__name__}: {exc_val}")
                self.session.rollback()
        finally:
            if self._borrowed_session is None:
                self.session.close()
            self.session = None
            self.products = None
