"""
Pytest tests for the database layer: pool creation, session scope, read queries.
"""

from __future__ import annotations

from datetime import date

import pytest
from sqlalchemy import text

from backend_soltx.config import Settings
from backend_soltx.core.exceptions import DatabaseUnavailableError


@pytest.fixture
def pool(db_url):
    from backend_soltx.database import create_pool, dispose_pool

    engine = create_pool(Settings(database_url=db_url, max_db_connections=2, db_pool_timeout_sec=5))
    yield engine
    dispose_pool(engine)


@pytest.fixture
def session_factory(pool):
    from backend_soltx.database import create_session_factory

    return create_session_factory(pool)


def test_create_pool_is_bounded(pool):
    """Pool size comes from max_db_connections with no overflow."""
    assert pool.pool.size() == 2
    assert pool.pool._max_overflow == 0


def test_create_pool_unreachable_database_is_fatal(tmp_path):
    """An unreachable database raises DatabaseUnavailableError instead of returning a pool."""
    from backend_soltx.database import create_pool

    url = f"sqlite:///{tmp_path / 'missing' / 'nested' / 'db.sqlite'}"
    with pytest.raises(DatabaseUnavailableError, match="Failed to create pool"):
        create_pool(Settings(database_url=url))


def test_session_scope_returns_connection_on_error(pool, session_factory):
    from backend_soltx.database import session_scope

    with pytest.raises(RuntimeError):
        with session_scope(session_factory) as session:
            session.execute(text("SELECT 1"))
            assert pool.pool.checkedout() == 1
            raise RuntimeError("boom")
    assert pool.pool.checkedout() == 0


def test_session_scope_returns_connection_on_success(pool, session_factory):
    from backend_soltx.database import session_scope

    with session_scope(session_factory) as session:
        assert session.execute(text("SELECT 1")).scalar() == 1
        assert pool.pool.checkedout() == 1
    assert pool.pool.checkedout() == 0


def test_get_transaction_by_signature(session_factory, sample_ledger):
    from backend_soltx.database import get_transaction_by_signature, session_scope

    with session_scope(session_factory) as session:
        row = get_transaction_by_signature(session, "A")
        assert row is not None
        assert row.fee_payer == "9QCfNuQuxct1Xk9ytFYgxc5fThmTzL4pHQnSjjrVUrka"
        assert row.transaction == {"message": {"instructions": [{"program": "system"}]}, "meta": {"err": None}}
        assert get_transaction_by_signature(session, "Z") is None


def test_get_transactions_by_date(session_factory, sample_ledger):
    from backend_soltx.database import get_transactions_by_date, session_scope

    with session_scope(session_factory) as session:
        rows = get_transactions_by_date(session, date(2024, 1, 2))
        assert [r.signature for r in rows] == ["B", "C"]
        assert get_transactions_by_date(session, date(2024, 3, 3)) == []


def test_get_latest_transactions_projection(session_factory, sample_ledger):
    from backend_soltx.database import get_latest_transactions, session_scope

    with session_scope(session_factory) as session:
        rows = get_latest_transactions(session, 2)
    assert [r["signature"] for r in rows] == ["C", "B"]
    assert set(rows[0]) == {"timestamp", "signature", "slot"}
    assert rows[0]["slot"] == 240_210_500


def test_get_latest_transactions_zero(session_factory, sample_ledger):
    from backend_soltx.database import get_latest_transactions, session_scope

    with session_scope(session_factory) as session:
        assert get_latest_transactions(session, 0) == []


@pytest.mark.parametrize(
    "requested,expected",
    [(None, 5), (1, 1), (5, 5), (99, 99), (100, 100), (101, 100), (250, 100), (0, 0)],
)
def test_effective_latest_count(requested, expected):
    from backend_soltx.database import effective_latest_count

    assert effective_latest_count(requested) == expected
