"""Exception handlers for the application."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse

from chip8_web.exceptions import ErrorCode, TemplateRenderException
from chip8_web.logging_config import get_logger, log_with_context

logger = get_logger(__name__)


async def template_render_exception_handler(request: Request, exc: TemplateRenderException) -> PlainTextResponse:
    """Answer a failed page render with the raw error text.

    The error text goes to the client as-is; this front-end is a local demo
    tool, not a hardened service.
    """
    log_with_context(
        logger,
        "warning",
        "Template render error",
        error_code=exc.code.value,
        error_message=exc.message,
        error_type=exc.details.get("error_type"),
        method=request.method,
        url=str(request.url),
        event_type="template_render_failed",
    )
    return PlainTextResponse(exc.message, status_code=exc.status_code)


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle general exceptions with logging."""
    log_with_context(
        logger,
        "error",
        "Unhandled exception",
        error=str(exc),
        error_type=type(exc).__name__,
        method=request.method,
        url=str(request.url),
        event_type="unhandled_error",
    )
    logger.error("Exception traceback:", exc_info=exc)

    # Don't expose internal error details to clients
    return JSONResponse(
        status_code=500,
        content={"error": {"code": ErrorCode.INTERNAL_ERROR.value, "message": "Internal server error"}},
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the application.

    Args:
        app: FastAPI application instance
    """
    app.add_exception_handler(TemplateRenderException, template_render_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)
