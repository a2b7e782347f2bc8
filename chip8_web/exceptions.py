"""Custom exceptions for the Chip-8 front-end with HTTP status codes."""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Error codes for structured error responses."""

    # Generic errors
    FRONTEND_ERROR = "FRONTEND_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"

    # Template errors
    TEMPLATE_LOAD_ERROR = "TEMPLATE_LOAD_ERROR"
    TEMPLATE_RENDER_ERROR = "TEMPLATE_RENDER_ERROR"

    # Configuration errors
    CONFIG_ERROR = "CONFIG_ERROR"


class FrontendException(Exception):
    """Base exception for front-end errors with HTTP status code support.

    All custom exceptions inherit from this class so the error handlers
    can turn them into responses consistently.
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.FRONTEND_ERROR,
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ):
        """Initialize front-end exception.

        Args:
            message: Human-readable error message
            code: Error code from ErrorCode enum
            status_code: HTTP status code (default 500)
            details: Additional error context/details
        """
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}
        super().__init__(message)


class TemplateException(FrontendException):
    """Template errors."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.TEMPLATE_LOAD_ERROR,
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, code, status_code, details)


class TemplateLoadException(TemplateException):
    """Index template could not be read or compiled at startup."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(
            message,
            code=ErrorCode.TEMPLATE_LOAD_ERROR,
            status_code=500,
            details=details,
        )


class TemplateRenderException(TemplateException):
    """Index template failed while rendering a request."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(
            message,
            code=ErrorCode.TEMPLATE_RENDER_ERROR,
            status_code=500,
            details=details,
        )


class ConfigurationException(FrontendException):
    """Configuration errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message, code=ErrorCode.CONFIG_ERROR, status_code=500, details=details)
