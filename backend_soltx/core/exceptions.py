"""
Application-level exceptions.

Each carries the message the API returns; the API server maps them to HTTP
status codes at the handler boundary.
"""

from __future__ import annotations

from datetime import date


class SolTxError(Exception):
    """Base class for SolTx errors."""


class InvalidDateError(SolTxError, ValueError):
    """Date path parameter is not a valid YYYY-MM-DD string."""

    def __init__(self, raw: str, reason: str) -> None:
        self.raw = raw
        self.reason = reason
        super().__init__(f"Invalid date format: {reason}")


class TransactionsNotFoundError(SolTxError, LookupError):
    """No transactions recorded on the requested date."""

    def __init__(self, day: date) -> None:
        self.day = day
        super().__init__(f"No transactions found for date: {day.isoformat()}")


class DatabaseUnavailableError(SolTxError, RuntimeError):
    """Initial connection pool could not reach the database; the service must not start."""
