"""
Database connection and session management.
"""

from sqlalchemy import create_engine, text
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool
from contextlib import contextmanager
import logging

from config import DATABASE_URL, SQL_ECHO

logger = logging.getLogger(__name__)

engine = None

# Session factory, bound once the engine is configured
SessionFactory = sessionmaker()


def is_memory_database(url) -> bool:
    """True for SQLite URLs whose data lives only as long as the process."""
    if not url.startswith("sqlite"):
        return False
    location = url.split("?")[0].partition("://")[2]
    return location in ("", "/:memory:") or "mode=memory" in url


def configure_engine(database_url=None):
    """Create the engine and bind the session factory to it.

    Args:
        database_url: Optional database URL override. If not provided, uses config default.
    """
    global engine

    url = database_url or DATABASE_URL
    engine_kwargs = {"echo": SQL_ECHO}
    if url.startswith("sqlite"):
        engine_kwargs["connect_args"] = {"check_same_thread": False}
        # In-memory databases live on a single connection
        if is_memory_database(url):
            engine_kwargs["poolclass"] = StaticPool

    if engine is not None:
        engine.dispose()

    engine = create_engine(url, **engine_kwargs)
    SessionFactory.configure(bind=engine)
    logger.debug(f"Database engine configured for {engine.url.render_as_string(hide_password=True)}")
    return engine


def get_engine():
    """Get the configured engine, creating it from config if needed."""
    if engine is None:
        configure_engine()
    return engine


def get_session() -> Session:
    """Get a new database session."""
    get_engine()
    return SessionFactory()


@contextmanager
def get_session_context():
    """Context manager for database sessions with automatic cleanup."""
    session = get_session()
    try:
        yield session
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def test_connection() -> bool:
    """Test database connection and return True if successful."""
    try:
        with get_session_context() as session:
            result = session.execute(text("SELECT 1"))
            return result.scalar() == 1
    except Exception as e:
        logger.error(f"Database connection test failed: {e}")
        return False


def create_tables():
    """Create all tables defined in the ORM models."""
    try:
        from db.models.models import Base
        Base.metadata.create_all(get_engine())
        logger.info("All tables created successfully")
    except Exception as e:
        logger.error(f"Failed to create tables: {e}")
        raise
