"""
Database connection pool and session management.

One SQLAlchemy Engine per process, backed by a bounded QueuePool:
pool_size = MAX_DB_CONNECTIONS, no overflow. Checkout blocks up to
DB_POOL_TIMEOUT_SEC when every connection is in use. The pool is verified at
startup so an unreachable database stops the service before it serves.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import QueuePool

from backend_soltx.config import Settings
from backend_soltx.core.exceptions import DatabaseUnavailableError
from backend_soltx.soltx_logging import get_logger

logger = get_logger(__name__)


def create_pool(settings: Settings) -> Engine:
    """
    Build the shared engine and check out one connection to prove the database is reachable.
    Raises DatabaseUnavailableError if it is not.
    """
    url = settings.database_url
    connect_args = {}
    if url.startswith("sqlite"):
        connect_args["check_same_thread"] = False
    engine = create_engine(
        url,
        poolclass=QueuePool,
        pool_size=settings.max_db_connections,
        max_overflow=0,
        pool_timeout=settings.db_pool_timeout_sec,
        pool_pre_ping=True,
        connect_args=connect_args,
    )
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        engine.dispose()
        logger.error("db_pool_connect_failed", url=settings.masked_database_url, error=str(e))
        raise DatabaseUnavailableError(f"Failed to create pool: {e}") from e
    logger.info(
        "db_pool_ready",
        url=settings.masked_database_url,
        max_connections=settings.max_db_connections,
        pool_timeout_sec=settings.db_pool_timeout_sec,
    )
    return engine


def create_session_factory(engine: Engine) -> sessionmaker:
    """Return session factory bound to the pool. Sessions are read-only by convention."""
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


@contextmanager
def session_scope(factory: sessionmaker) -> Iterator[Session]:
    """Borrow a pooled connection for one unit of work; always returned, never committed."""
    session = factory()
    try:
        yield session
    finally:
        session.close()


def dispose_pool(engine: Engine) -> None:
    """Close every pooled connection. Called once at shutdown."""
    engine.dispose()
    logger.info("db_pool_disposed")
