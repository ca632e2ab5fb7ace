"""
Test configuration and fixtures
"""
import pytest
import os
import sys
from typing import Generator
from sqlalchemy import create_engine
from sqlalchemy.orm import Session
from sqlalchemy.pool import StaticPool

# Add the project root to the path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app import create_app
from db.models.models import Base
from db.repositories.unit_of_work import UnitOfWork
from db.services.product_service import ProductService


@pytest.fixture(scope="session")
def app():
    """Create application for testing over an in-memory catalogue of 500 products"""
    app = create_app(database_url="sqlite://", seed_count=500)
    app.config.update({
        "TESTING": True,
        "WTF_CSRF_ENABLED": False,
    })

    with app.app_context():
        yield app


@pytest.fixture(scope="session")
def client(app):
    """Create test client"""
    return app.test_client()


# ===== Isolated Database Fixtures =====

@pytest.fixture(scope="session")
def test_db_engine():
    """
    Create a separate in-memory database engine.

    Kept apart from the application engine so repository and service tests
    control exactly what is in the catalogue.
    """
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        echo=False
    )
    Base.metadata.create_all(engine)

    yield engine

    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture(scope="function")
def db_session(test_db_engine) -> Generator[Session, None, None]:
    """
    Provide a clean database session for each test.

    Uses transaction rollback to ensure test isolation.
    """
    connection = test_db_engine.connect()
    transaction = connection.begin()
    session = Session(bind=connection)

    yield session

    # Rollback transaction to undo all changes
    session.close()
    transaction.rollback()
    connection.close()


@pytest.fixture
def uow(db_session) -> Generator[UnitOfWork, None, None]:
    """Provide an entered Unit of Work borrowing the test database session."""
    with UnitOfWork(session=db_session) as unit_of_work:
        yield unit_of_work


@pytest.fixture
def product_service(db_session) -> ProductService:
    """Provide a ProductService bound to the test database session."""
    return ProductService(uow_factory=lambda: UnitOfWork(session=db_session))
