"""Application factory for creating and configuring the FastAPI app."""

from fastapi import FastAPI

from chip8_web import __version__
from chip8_web.config import Settings, get_settings
from chip8_web.core.lifespan import lifespan
from chip8_web.core.middleware import setup_middleware
from chip8_web.logging_config import get_logger, log_with_context
from chip8_web.middleware.error_handlers import register_error_handlers
from chip8_web.routers import view_router
from chip8_web.static_files import STATIC_PREFIX, AssetFiles
from chip8_web.views.template_renderer import IndexPage, load_index_page

logger = get_logger(__name__)


def create_app(settings: Settings | None = None, page: IndexPage | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    The index template is loaded first; if that fails no application is
    built and the caller decides what to do with the error.

    Args:
        settings: Settings to use, defaults to the process-wide settings
        page: Pre-loaded index page, loaded from settings when omitted

    Returns:
        Configured FastAPI application instance

    Raises:
        TemplateLoadException: If the index template cannot be loaded
    """
    if settings is None:
        settings = get_settings()
    if page is None:
        page = load_index_page(settings)

    app = FastAPI(
        title="Chip-8",
        description="Web front-end for the Chip-8 emulator: the emulator page and its static assets.",
        version=__version__,
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.index_page = page

    setup_middleware(app)
    register_error_handlers(app)

    # Missing asset directory only affects individual requests
    app.mount(
        STATIC_PREFIX,
        AssetFiles(directory=settings.assets_dir, check_dir=False),
        name="static",
    )
    log_with_context(
        logger,
        "info",
        "Serving static assets",
        prefix=STATIC_PREFIX,
        directory=str(settings.assets_dir),
        exists=settings.assets_dir.is_dir(),
        event_type="static_config",
    )

    # Catch-all page routes go last so /static keeps precedence
    app.include_router(view_router.router, tags=["views"])

    return app
