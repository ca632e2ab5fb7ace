"""
Tests for the product repository and unit of work.
"""

import pytest
from unittest.mock import MagicMock, patch

from db.models.models import Product
from db.repositories.unit_of_work import UnitOfWork


def rows(*ids):
    return [
        {"id": product_id, "name": f"Product {product_id}", "price": float(product_id), "sku": f"SKU{product_id:05d}"}
        for product_id in ids
    ]


class TestProductRepository:

    def test_get_page_orders_by_id(self, uow):
        uow.products.bulk_create(rows(3, 1, 2))

        assert [product.id for product in uow.products.get_page(offset=0, limit=2)] == [1, 2]
        assert [product.id for product in uow.products.get_page(offset=2, limit=2)] == [3]

    def test_get_page_past_end_is_empty(self, uow):
        uow.products.bulk_create(rows(1, 2))
        assert uow.products.get_page(offset=10, limit=5) == []

    def test_count_and_delete_all(self, uow):
        assert uow.products.bulk_create(rows(1, 2)) == 2

        assert uow.products.count() == 2
        assert uow.products.delete_all() == 2
        assert uow.products.count() == 0

    def test_to_dict(self):
        product = Product(id=7, name="Rustic Wooden Table", price=99.99, sku="TABLE007")
        assert product.to_dict() == {"id": 7, "name": "Rustic Wooden Table", "price": 99.99, "sku": "TABLE007"}


class TestUnitOfWork:

    def test_commits_borrowed_session_and_leaves_it_open(self):
        session = MagicMock()

        with UnitOfWork(session=session) as uow:
            assert uow.products.session is session

        session.commit.assert_called_once()
        session.rollback.assert_not_called()
        session.close.assert_not_called()

    def test_rolls_back_when_block_raises(self):
        session = MagicMock()

        with pytest.raises(RuntimeError):
            with UnitOfWork(session=session):
                raise RuntimeError("boom")

        session.rollback.assert_called_once()
        session.commit.assert_not_called()

    def test_owned_session_is_closed(self):
        session = MagicMock()

        with patch("db.repositories.unit_of_work.get_session", return_value=session):
            with UnitOfWork() as uow:
                assert uow.session is session

        session.commit.assert_called_once()
        session.close.assert_called_once()
        assert uow.session is None
        assert uow.products is None

    def test_owned_session_is_closed_when_commit_fails(self):
        session = MagicMock()
        session.commit.side_effect = RuntimeError("disk full")

        with patch("db.repositories.unit_of_work.get_session", return_value=session):
            with pytest.raises(RuntimeError):
                with UnitOfWork():
                    pass

        session.close.assert_called_once()

    def test_changes_visible_through_borrowed_session(self, db_session):
        with UnitOfWork(session=db_session) as uow:
            uow.products.bulk_create(rows(1, 2, 3))

        with UnitOfWork(session=db_session) as uow:
            assert uow.products.count() == 3
