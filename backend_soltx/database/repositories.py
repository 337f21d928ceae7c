"""
Read queries over sol_transactions.

One parameterized query per API operation. Callers own the session; errors
from the driver propagate as SQLAlchemyError.
"""

from __future__ import annotations

from datetime import date
from typing import Any

from sqlalchemy.orm import Session

from backend_soltx.database.models import SolTransaction
from backend_soltx.soltx_logging import get_logger

logger = get_logger(__name__)

DEFAULT_LATEST_COUNT = 5
MAX_LATEST_COUNT = 100


def effective_latest_count(count: int | None) -> int:
    """Default to 5 when absent; never more than 100."""
    if count is None:
        return DEFAULT_LATEST_COUNT
    return min(count, MAX_LATEST_COUNT)


def get_transaction_by_signature(session: Session, signature: str) -> SolTransaction | None:
    """Exact-match lookup. Returns None when no row has this signature."""
    return (
        session.query(SolTransaction)
        .filter(SolTransaction.signature == signature)
        .one_or_none()
    )


def get_transactions_by_date(session: Session, day: date) -> list[SolTransaction]:
    """All rows recorded on the given UTC calendar date, oldest first."""
    return (
        session.query(SolTransaction)
        .filter(SolTransaction.date == day)
        .order_by(SolTransaction.timestamp.asc(), SolTransaction.signature.asc())
        .all()
    )


def get_latest_transactions(session: Session, count: int) -> list[dict[str, Any]]:
    """
    Newest rows first, projected to (timestamp, signature, slot) so full payloads
    are not transferred. count is the already-clamped limit.
    """
    if count <= 0:
        return []
    rows = (
        session.query(SolTransaction.timestamp, SolTransaction.signature, SolTransaction.slot)
        .order_by(SolTransaction.timestamp.desc())
        .limit(count)
        .all()
    )
    logger.debug("latest_transactions_loaded", requested=count, count=len(rows))
    return [{"timestamp": r[0], "signature": r[1], "slot": r[2]} for r in rows]
