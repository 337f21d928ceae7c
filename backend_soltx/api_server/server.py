"""
FastAPI server — read-only API over sol_transactions.

The lifespan builds the connection pool once (startup fails if the database
is unreachable), keeps it on app.state for the request dependencies, and
disposes it at shutdown. Config via env (see backend_soltx.config).
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, HTTPException
from fastapi.responses import JSONResponse

from backend_soltx import __version__
from backend_soltx.api_server.middleware import request_logging_middleware
from backend_soltx.api_server.routes import router as transactions_router
from backend_soltx.config import get_settings
from backend_soltx.database import create_pool, create_session_factory, dispose_pool
from backend_soltx.soltx_logging import get_logger

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create the shared pool before serving; dispose it on shutdown."""
    settings = get_settings()
    engine = create_pool(settings)
    app.state.engine = engine
    app.state.session_factory = create_session_factory(engine)
    logger.info("api_started", version=__version__, db=settings.masked_database_url)

    try:
        yield
    finally:
        dispose_pool(engine)
        logger.info("api_stopped")


app = FastAPI(
    title="Backend SolTx API",
    description="Read-only API for ingested Solana transactions (data from database).",
    version=__version__,
    lifespan=lifespan,
)

app.middleware("http")(request_logging_middleware)
app.include_router(transactions_router)


@app.get("/health")
def health() -> dict[str, str]:
    """Liveness probe: API is up."""
    return {"status": "ok"}


@app.exception_handler(HTTPException)
def http_exception_handler(request: Any, exc: HTTPException) -> JSONResponse:
    """Consistent JSON error response for HTTPException; keeps any headers it carries."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail},
        headers=exc.headers,
    )
