"""
Pytest fixtures for SolTx tests. Uses a temporary SQLite DB standing in for the
ingestion pipeline's sol_transactions table.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

# Example ledger: A on 2024-01-01, B and C on 2024-01-02 (C is the newest)
SAMPLE_ROWS = [
    {
        "signature": "A",
        "timestamp": datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc),
        "slot": 240_000_001,
        "fee": 5000,
        "fee_payer": "9QCfNuQuxct1Xk9ytFYgxc5fThmTzL4pHQnSjjrVUrka",
        "transaction_type": "TRANSFER",
        "transaction": {"message": {"instructions": [{"program": "system"}]}, "meta": {"err": None}},
        "date": date(2024, 1, 1),
    },
    {
        "signature": "B",
        "timestamp": datetime(2024, 1, 2, 9, 0, tzinfo=timezone.utc),
        "slot": 240_150_000,
        "fee": 5000,
        "fee_payer": "7F1WzVNQ1Qpurqxxdyv3UrFQR3uoNepULVW9A4bAJ5nZ",
        "transaction_type": "SWAP",
        "transaction": {"message": {"instructions": []}, "meta": {"fee": 5000}},
        "date": date(2024, 1, 2),
    },
    {
        "signature": "C",
        "timestamp": datetime(2024, 1, 2, 18, 30, tzinfo=timezone.utc),
        "slot": 240_210_500,
        "fee": 10000,
        "fee_payer": "9QCfNuQuxct1Xk9ytFYgxc5fThmTzL4pHQnSjjrVUrka",
        "transaction_type": "NFT_SALE",
        "transaction": {"message": {"instructions": [{"program": "token"}]}, "meta": {"logs": ["ok"]}},
        "date": date(2024, 1, 2),
    },
]


def _bulk_rows(n: int) -> list[dict]:
    """n rows one minute apart on 2024-02-01, signature tx-000 oldest."""
    start = datetime(2024, 2, 1, 0, 0, tzinfo=timezone.utc)
    rows = []
    for i in range(n):
        ts = start + timedelta(minutes=i)
        rows.append({
            "signature": f"tx-{i:03d}",
            "timestamp": ts,
            "slot": 250_000_000 + i,
            "fee": 5000,
            "fee_payer": "7F1WzVNQ1Qpurqxxdyv3UrFQR3uoNepULVW9A4bAJ5nZ",
            "transaction_type": "TRANSFER",
            "transaction": {"index": i},
            "date": ts.date(),
        })
    return rows


@pytest.fixture
def db_url(tmp_path, monkeypatch):
    """
    Point the service at a temporary SQLite file and create sol_transactions.
    Clears cached settings so each test reads its own env.
    """
    from backend_soltx.config import get_settings
    from backend_soltx.database import Base

    url = f"sqlite:///{tmp_path / 'sol_transactions.db'}"
    monkeypatch.delenv("SOLTX_DB_URL", raising=False)
    monkeypatch.setenv("DATABASE_URL", url)
    monkeypatch.setenv("MAX_DB_CONNECTIONS", "2")
    monkeypatch.setenv("DB_POOL_TIMEOUT_SEC", "5")
    get_settings.cache_clear()

    engine = create_engine(url)
    Base.metadata.create_all(bind=engine)
    engine.dispose()
    yield url
    get_settings.cache_clear()


@pytest.fixture
def seed(db_url):
    """Insert rows the way the ingestion pipeline would. Returns an insert(rows) callable."""
    from backend_soltx.database import SolTransaction

    engine = create_engine(db_url)
    factory = sessionmaker(bind=engine)

    def insert(rows: list[dict]) -> None:
        with factory() as session:
            session.add_all([SolTransaction(**row) for row in rows])
            session.commit()

    yield insert
    engine.dispose()


@pytest.fixture
def sample_ledger(seed):
    seed(SAMPLE_ROWS)
    return SAMPLE_ROWS


@pytest.fixture
def bulk_ledger(seed):
    rows = _bulk_rows(120)
    seed(rows)
    return rows


@pytest.fixture
def client(db_url):
    """FastAPI TestClient run as a context manager so the lifespan builds the pool."""
    from fastapi.testclient import TestClient

    from backend_soltx.api_server.server import app

    with TestClient(app) as test_client:
        yield test_client
