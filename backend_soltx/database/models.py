"""
SQLAlchemy model for the sol_transactions table.

The table is owned and populated by the ingestion pipeline; this service maps
it read-only and never calls create_all in production code.
"""

from __future__ import annotations

from sqlalchemy import JSON, BigInteger, Column, Date, DateTime, String
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import declarative_base

Base = declarative_base()

# JSONB on PostgreSQL, generic JSON elsewhere (SQLite in tests and local dev)
JsonPayload = JSON().with_variant(JSONB(), "postgresql")


class SolTransaction(Base):
    """
    One ingested Solana transaction. signature is unique; rows are immutable.
    """

    __tablename__ = "sol_transactions"

    signature = Column(String(128), primary_key=True)
    timestamp = Column(DateTime(timezone=True), nullable=False, index=True)
    slot = Column(BigInteger, nullable=False)
    fee = Column(BigInteger, nullable=False)  # Lamports
    fee_payer = Column(String(64), nullable=False)
    transaction_type = Column(String(64), nullable=False)
    transaction = Column(JsonPayload, nullable=False)
    date = Column(Date, nullable=False, index=True)  # UTC calendar date of timestamp
