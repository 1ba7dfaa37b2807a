"""
Custom exception classes and error handling.

This module provides custom exceptions and utilities for consistent
error handling across the application.
"""
import logging
from typing import Any, Dict, Optional

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class HackTemplateException(Exception):
    """Base exception for all HackTemplate-specific errors."""

    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


class ValidationError(HackTemplateException):
    """Raised when input validation fails."""

    def __init__(self, message: str, field: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, status.HTTP_400_BAD_REQUEST, details)
        self.field = field


class ConfigurationError(HackTemplateException):
    """Raised when a required setting (e.g. a provider credential) is missing."""

    def __init__(self, message: str = "Service is not configured", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, status.HTTP_500_INTERNAL_SERVER_ERROR, details)


class RateLimitError(HackTemplateException):
    """Raised when an upstream provider reports rate limiting."""

    def __init__(
        self,
        message: str = "Rate limit exceeded. Please try again later.",
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message, status.HTTP_429_TOO_MANY_REQUESTS, details)


class AIServiceError(HackTemplateException):
    """Raised when the LLM provider fails for any other reason."""

    def __init__(
        self,
        message: str = "An error occurred processing your request",
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message, status.HTTP_500_INTERNAL_SERVER_ERROR, details)


# =============================================================================
# Exception Handlers
# =============================================================================

async def hacktemplate_exception_handler(request: Request, exc: HackTemplateException) -> JSONResponse:
    """Handle HackTemplateException instances."""
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "error": exc.message,
            "details": exc.details
        }
    )


async def request_validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Render malformed request bodies as 400 instead of FastAPI's default 422."""
    errors = [
        {
            "field": ".".join(str(part) for part in err.get("loc", ()) if part != "body"),
            "message": err.get("msg", ""),
        }
        for err in exc.errors()
    ]
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "error": "Invalid request body",
            "details": {"errors": errors}
        }
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle uncaught exceptions."""
    logger.error(f"Unhandled exception: {exc}", exc_info=True)

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": "Internal server error",
            "details": {}
        }
    )


def register_exception_handlers(app):
    """
    Register all custom exception handlers with the FastAPI app.

    Call this during app initialization:
        from hacktemplate.exceptions import register_exception_handlers
        register_exception_handlers(app)
    """
    app.add_exception_handler(HackTemplateException, hacktemplate_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)
