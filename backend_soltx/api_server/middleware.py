"""
HTTP middleware — request logging and correlation IDs.

Binds request_id into the structlog context for the duration of a request,
logs one http_request line with status and timing, and echoes X-Request-ID.
"""

from __future__ import annotations

import time
import uuid
from typing import Awaitable, Callable

from fastapi import Request, Response

from backend_soltx.soltx_logging import bind_request, clear_request, get_logger

logger = get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


async def request_logging_middleware(
    request: Request,
    call_next: Callable[[Request], Awaitable[Response]],
) -> Response:
    request_id = (request.headers.get(REQUEST_ID_HEADER) or "").strip() or uuid.uuid4().hex
    bind_request(request_id, method=request.method, path=request.url.path)
    started = time.perf_counter()
    try:
        response = await call_next(request)
    except Exception:
        logger.exception("http_request_failed", duration_ms=round((time.perf_counter() - started) * 1000, 2))
        clear_request()
        raise
    response.headers[REQUEST_ID_HEADER] = request_id
    logger.info(
        "http_request",
        status_code=response.status_code,
        duration_ms=round((time.perf_counter() - started) * 1000, 2),
    )
    clear_request()
    return response
