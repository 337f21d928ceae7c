"""
Structured logging for Backend SolTx.

JSON logs with timestamp, event_type, and request context (request_id).
Use get_logger() in all modules so API and database logs aggregate the same way.
"""

from backend_soltx.soltx_logging.logger import bind_request, clear_request, get_logger

__all__ = ["bind_request", "clear_request", "get_logger"]
