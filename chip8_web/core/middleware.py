"""Middleware configuration."""

import time

from fastapi import FastAPI, Request

from chip8_web.logging_config import get_logger, log_with_context

logger = get_logger(__name__)


def setup_middleware(app: FastAPI) -> None:
    """Configure all middleware for the application.

    Args:
        app: FastAPI application instance
    """

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        """Log one access record per request, failed ones included."""
        started = time.perf_counter()
        status_code = 500
        try:
            response = await call_next(request)
            status_code = response.status_code
            return response
        finally:
            log_with_context(
                logger,
                "info" if status_code < 500 else "error",
                "HTTP Request",
                method=request.method,
                path=request.url.path,
                status_code=status_code,
                duration_ms=round((time.perf_counter() - started) * 1000, 2),
                client=request.client.host if request.client else "unknown",
                event_type="http_request",
            )
