"""
Backend SolTx — read-only HTTP API over ingested Solana transactions.

Serves lookups by signature, by calendar date, and the latest N transactions
from the sol_transactions table. Ingestion and schema management live elsewhere;
this package only reads.
"""

__version__ = "0.1.0"
