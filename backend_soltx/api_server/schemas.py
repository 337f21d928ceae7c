"""
Response and parameter models for the transactions API.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from backend_soltx.database.repositories import effective_latest_count


class TransactionOut(BaseModel):
    """Full transaction row as returned by by-id and by-date."""

    model_config = ConfigDict(from_attributes=True)

    signature: str = Field(..., description="Transaction signature (base58), unique")
    timestamp: datetime = Field(..., description="Block time (UTC)")
    slot: int = Field(..., description="Slot the transaction landed in")
    fee: int = Field(..., description="Fee charged, in lamports")
    fee_payer: str = Field(..., description="Account that paid the fee")
    transaction_type: str = Field(..., description="Classification label from ingestion")
    transaction: Any = Field(..., description="Full transaction body as stored")


class LatestTransactionOut(BaseModel):
    """Narrow projection for the latest listing."""

    model_config = ConfigDict(from_attributes=True)

    timestamp: datetime
    signature: str
    slot: int


class LatestTransactionsParams(BaseModel):
    """Query parameters for GET /transactions/latest."""

    count: int | None = Field(None, ge=0, description="How many to return (default 5, max 100)")

    @property
    def effective_count(self) -> int:
        return effective_latest_count(self.count)
