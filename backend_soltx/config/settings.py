"""
Application settings.

Typed view over the environment (database URL, listen address, pool bounds,
log level), built once and cached for the process.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache

from backend_soltx.config.env import get_database_url, get_env, load_soltx_env, mask_database_url

DEFAULT_API_HOST = "127.0.0.1"
DEFAULT_API_PORT = 8000
DEFAULT_MAX_DB_CONNECTIONS = 10
DEFAULT_DB_POOL_TIMEOUT_SEC = 30.0


def _parse_int(name: str, default: int, *, minimum: int | None = None) -> int:
    raw = get_env(name, str(default))
    try:
        value = int(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from e
    if minimum is not None and value < minimum:
        raise ValueError(f"{name} must be >= {minimum}, got {value}")
    return value


def _parse_float(name: str, default: float) -> float:
    raw = get_env(name, str(default))
    try:
        value = float(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be a number, got {raw!r}") from e
    if value <= 0:
        raise ValueError(f"{name} must be > 0, got {value}")
    return value


@dataclass(frozen=True)
class Settings:
    """Service configuration: where to listen and which database to read."""

    database_url: str
    api_host: str = DEFAULT_API_HOST
    api_port: int = DEFAULT_API_PORT
    max_db_connections: int = DEFAULT_MAX_DB_CONNECTIONS
    db_pool_timeout_sec: float = DEFAULT_DB_POOL_TIMEOUT_SEC
    log_level: str = "INFO"

    @property
    def masked_database_url(self) -> str:
        return mask_database_url(self.database_url)

    @classmethod
    def from_env(cls) -> "Settings":
        """Load settings from environment variables (and .env). Raises ValueError on bad numbers."""
        load_soltx_env()
        return cls(
            database_url=get_database_url(),
            api_host=get_env("API_HOST", DEFAULT_API_HOST),
            api_port=_parse_int("API_PORT", DEFAULT_API_PORT, minimum=1),
            max_db_connections=_parse_int(
                "MAX_DB_CONNECTIONS", DEFAULT_MAX_DB_CONNECTIONS, minimum=1
            ),
            db_pool_timeout_sec=_parse_float("DB_POOL_TIMEOUT_SEC", DEFAULT_DB_POOL_TIMEOUT_SEC),
            log_level=get_env("LOG_LEVEL", "INFO").upper(),
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the cached Settings instance (call get_settings.cache_clear() after env changes)."""
    return Settings.from_env()
