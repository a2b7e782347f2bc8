"""Entry point: load the page, then serve it with uvicorn."""

import uvicorn
from dotenv import load_dotenv
from fastapi import FastAPI
from pydantic import ValidationError

from chip8_web.config import BASE_DIR, Settings, get_settings
from chip8_web.core.app_factory import create_app
from chip8_web.exceptions import ConfigurationException, FrontendException
from chip8_web.logging_config import get_logger, log_with_context, setup_logging

logger = get_logger(__name__)


def load_settings() -> Settings:
    """Read settings from the environment and the .env file.

    Raises:
        ConfigurationException: If a setting fails validation
    """
    load_dotenv(BASE_DIR / ".env")
    try:
        return get_settings()
    except ValidationError as e:
        raise ConfigurationException(
            "Invalid configuration",
            details={"errors": e.errors(include_url=False, include_context=False)},
        ) from e


def bootstrap() -> tuple[Settings, FastAPI]:
    """Run the loading phase.

    Returns:
        Settings and the ready application

    Raises:
        FrontendException: If configuration or the index template cannot be loaded
    """
    settings = load_settings()
    setup_logging(settings.log_level, settings.log_file)
    return settings, create_app(settings)


def main() -> None:
    """Start the server, exiting with status 1 if startup fails."""
    setup_logging()

    try:
        settings, app = bootstrap()
    except FrontendException as e:
        log_with_context(
            logger,
            "critical",
            "Startup failed",
            error=e.message,
            error_code=e.code.value,
            details=e.details,
            event_type="startup_failed",
        )
        raise SystemExit(1) from e

    log_with_context(
        logger,
        "info",
        "Starting HTTP server",
        host=settings.host,
        port=settings.port,
        event_type="server_start",
    )
    # uvicorn logs bind errors and exits non-zero on its own
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
