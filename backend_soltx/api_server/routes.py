"""
API route definitions — transaction lookups.

GET /transactions/by-id/{signature}   one transaction or null (never 404)
GET /transactions/by-date/{date}      all transactions on a UTC date; 404 when none
GET /transactions/latest?count=N      newest N (default 5, max 100), narrow projection

Every handler borrows one pooled session through get_session, runs a single
query, and converts failures to HTTPException before returning.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Iterator

from fastapi import APIRouter, Depends, HTTPException, Path, Query, Request
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from backend_soltx.api_server.schemas import (
    LatestTransactionOut,
    LatestTransactionsParams,
    TransactionOut,
)
from backend_soltx.core.exceptions import InvalidDateError, TransactionsNotFoundError
from backend_soltx.database import (
    get_latest_transactions as query_latest_transactions,
    get_transaction_by_signature,
    get_transactions_by_date as query_transactions_by_date,
    session_scope,
)
from backend_soltx.soltx_logging import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/transactions", tags=["transactions"])

DATE_FORMAT = "%Y-%m-%d"


def get_session(request: Request) -> Iterator[Session]:
    """Dependency: one pooled session per request, returned to the pool on every exit path."""
    with session_scope(request.app.state.session_factory) as session:
        yield session


def parse_date(raw: str) -> date:
    """Parse YYYY-MM-DD. Raises InvalidDateError carrying the parser message."""
    try:
        return datetime.strptime(raw, DATE_FORMAT).date()
    except ValueError as e:
        raise InvalidDateError(raw, str(e)) from e


@router.get("/by-id/{signature}", response_model=TransactionOut | None)
def get_transaction_by_id(signature: str, session: Session = Depends(get_session)):
    """
    Return the transaction with this signature, or null with 200 when there is none.
    """
    try:
        row = get_transaction_by_signature(session, signature)
    except SQLAlchemyError as e:
        logger.exception("transaction_by_id_failed", signature=signature[:16], error=str(e))
        raise HTTPException(status_code=500, detail=str(e)) from e
    if row is None:
        logger.debug("transaction_by_id_missing", signature=signature[:16])
        return None
    return TransactionOut.model_validate(row)


@router.get("/by-date/{date}", response_model=list[TransactionOut])
def get_transactions_by_date(
    raw_date: str = Path(..., alias="date", description="Calendar date, YYYY-MM-DD"),
    session: Session = Depends(get_session),
):
    """
    Return every transaction recorded on the given date (YYYY-MM-DD).

    400 on a malformed date (no query issued), 404 when the date has no rows.
    """
    logger.info("transactions_by_date_requested", date=raw_date)
    try:
        day = parse_date(raw_date)
        rows = query_transactions_by_date(session, day)
        if not rows:
            raise TransactionsNotFoundError(day)
    except InvalidDateError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    except TransactionsNotFoundError as e:
        logger.info("transactions_by_date_empty", date=raw_date)
        raise HTTPException(status_code=404, detail=str(e)) from e
    except SQLAlchemyError as e:
        logger.exception("transactions_by_date_failed", date=raw_date, error=str(e))
        raise HTTPException(status_code=500, detail=str(e)) from e

    logger.info("transactions_by_date_found", date=day.isoformat(), count=len(rows))
    return [TransactionOut.model_validate(r) for r in rows]


@router.get("/latest", response_model=list[LatestTransactionOut])
def get_latest_transactions(
    count: int | None = Query(None, ge=0, description="How many to return (default 5, max 100)"),
    session: Session = Depends(get_session),
):
    """Return the newest transactions first, projected to timestamp, signature, slot."""
    params = LatestTransactionsParams(count=count)
    try:
        rows = query_latest_transactions(session, params.effective_count)
    except SQLAlchemyError as e:
        logger.exception("latest_transactions_failed", count=params.effective_count, error=str(e))
        raise HTTPException(status_code=500, detail=str(e)) from e
    return [LatestTransactionOut.model_validate(r) for r in rows]
