"""
Environment variable loading for SolTx.

- SOLTX_DB_URL / DATABASE_URL: database URL (PostgreSQL in production)
- DATABASE_PATH: SQLite file used when no URL is set (local development)
- API_HOST, API_PORT: listen address
- MAX_DB_CONNECTIONS, DB_POOL_TIMEOUT_SEC: connection pool bounds
- Loads .env from project root when available.
"""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

# Project root: config is backend_soltx/config/, root is 2 levels up
_CONFIG_DIR = Path(__file__).resolve().parent
_BACKEND_DIR = _CONFIG_DIR.parent
_ROOT = _BACKEND_DIR.parent
_ENV_PATH = _ROOT / ".env"

DEFAULT_SQLITE_PATH = "sol_transactions.db"


def load_soltx_env() -> None:
    """Load .env from project root. Does not override variables already set."""
    load_dotenv(_ENV_PATH, override=False)


def get_env(name: str, default: str = "") -> str:
    """Return a stripped env value, falling back to default when unset or blank."""
    return (os.getenv(name) or "").strip() or default


def get_database_url() -> str:
    """Return SOLTX_DB_URL or DATABASE_URL if set; else SQLite from DATABASE_PATH or default."""
    load_soltx_env()
    url = get_env("SOLTX_DB_URL") or get_env("DATABASE_URL")
    if url:
        return url
    return f"sqlite:///{get_env('DATABASE_PATH', DEFAULT_SQLITE_PATH)}"


def mask_database_url(url: str) -> str:
    """Hide credentials and query string: postgresql://user:pw@host/db -> host/db."""
    return url.split("?")[0].split("@")[-1].split("//")[-1]
