"""
Database layer: connection pool, sol_transactions model, and read queries.

PostgreSQL in production (DATABASE_URL); SQLite works for local runs and tests.
"""

from backend_soltx.database.connection import (
    create_pool,
    create_session_factory,
    dispose_pool,
    session_scope,
)
from backend_soltx.database.models import Base, SolTransaction
from backend_soltx.database.repositories import (
    DEFAULT_LATEST_COUNT,
    MAX_LATEST_COUNT,
    effective_latest_count,
    get_latest_transactions,
    get_transaction_by_signature,
    get_transactions_by_date,
)

__all__ = [
    "Base",
    "DEFAULT_LATEST_COUNT",
    "MAX_LATEST_COUNT",
    "SolTransaction",
    "create_pool",
    "create_session_factory",
    "dispose_pool",
    "effective_latest_count",
    "get_latest_transactions",
    "get_transaction_by_signature",
    "get_transactions_by_date",
    "session_scope",
]
