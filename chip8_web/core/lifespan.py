"""Application lifespan management."""

import time
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from chip8_web import __version__
from chip8_web.logging_config import get_logger, log_with_context

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Log startup and shutdown.

    The index page is loaded before the app is built, so nothing here can
    fail the startup. Exceptions after yield are re-raised.
    """
    app.state.startup_time = time.time()

    log_with_context(
        logger,
        "info",
        "Starting Chip-8 front-end",
        version=__version__,
        template=app.state.index_page.name,
        event_type="app_startup",
    )

    try:
        yield
    except Exception as e:
        log_with_context(
            logger,
            "error",
            "Application error during lifespan",
            error=str(e),
            error_type=type(e).__name__,
            event_type="app_error",
        )
        raise
    finally:
        log_with_context(
            logger,
            "info",
            "Shutting down Chip-8 front-end",
            uptime_seconds=int(time.time() - app.state.startup_time),
            event_type="app_shutdown",
        )
