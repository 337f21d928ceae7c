"""
Main entrypoint: FastAPI server over the sol_transactions table.

Env: DATABASE_URL (or SOLTX_DB_URL / DATABASE_PATH), API_HOST, API_PORT,
MAX_DB_CONNECTIONS, DB_POOL_TIMEOUT_SEC, LOG_LEVEL, LOG_FORMAT.

Equivalent: uvicorn backend_soltx.api_server.app:app --host 127.0.0.1 --port 8000
"""

# Configure structured JSON logging before other imports that may log
from backend_soltx.soltx_logging import get_logger

logger = get_logger("main")


def main() -> None:
    """Run the API server. Exits non-zero if the database is unreachable at startup."""
    from backend_soltx.config import get_settings

    settings = get_settings()

    from backend_soltx.api_server.app import app
    import uvicorn

    logger.info(
        "main_server_starting",
        host=settings.api_host,
        port=settings.api_port,
        db=settings.masked_database_url,
    )
    uvicorn.run(
        app,
        host=settings.api_host,
        port=settings.api_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
