"""
Application exception handlers for the action-tracker FastAPI app.

Every error leaves the service with the body ``{"message": "..."}``.
"""
import logging
from typing import Any, Callable, Dict, Optional, Sequence

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ..core.exceptions import ActionTrackerError, get_http_status_code

logger = logging.getLogger(__name__)

ResponseFormatter = Callable[[str], Dict[str, Any]]


# Request sections as they are named in validation messages
LOCATION_NAMES: Dict[str, str] = {
    "path": "params",
}


def _allowed_values(ctx: Dict[str, Any]) -> str:
    """Turn pydantic's ``'a', 'b' or 'c'`` into ``a, b, c``."""
    expected = str(ctx.get("expected", "")).replace(" or ", ", ")
    return ", ".join(value.strip().strip("'") for value in expected.split(", "))


# Reasons keyed by pydantic error type, reported against the failing field
FIELD_REASONS: Dict[str, Callable[[Dict[str, Any]], str]] = {
    "greater_than_equal": lambda ctx: f"should be >= {ctx.get('ge')}",
    "less_than_equal": lambda ctx: f"should be <= {ctx.get('le')}",
    "enum": lambda ctx: f"should be equal to one of the allowed values: {_allowed_values(ctx)}",
    "literal_error": lambda ctx: f"should be equal to one of the allowed values: {_allowed_values(ctx)}",
    "dict_type": lambda ctx: "should be object",
    "model_attributes_type": lambda ctx: "should be object",
    "int_type": lambda ctx: "should be integer",
    "int_parsing": lambda ctx: "should be integer",
    "int_from_float": lambda ctx: "should be integer",
    "string_type": lambda ctx: "should be string",
    "string_too_short": lambda ctx: f"should NOT be shorter than {ctx.get('min_length')} characters",
    "uuid_parsing": lambda ctx: 'should match format "uuid"',
    "uuid_type": lambda ctx: 'should match format "uuid"',
}


def _format_location(loc: Sequence[Any]) -> str:
    parts = [LOCATION_NAMES.get(loc[0], loc[0])] + list(loc[1:]) if loc else []
    location = "request"
    for part in parts:
        location += f"[{part}]" if isinstance(part, int) else f".{part}"
    return location


def format_validation_error(exc: RequestValidationError) -> str:
    """Describe the first validation error as ``request.<location> <reason>``.

    Missing and unexpected properties are reported against the object that
    holds them, e.g. ``request.body should have required property 'service'``.
    """
    errors = exc.errors()
    if not errors:
        return "request validation failed"

    error = errors[0]
    loc = tuple(error.get("loc", ()))
    error_type = error.get("type", "")
    ctx = error.get("ctx") or {}

    if error_type == "missing" and len(loc) > 1:
        return f"{_format_location(loc[:-1])} should have required property '{loc[-1]}'"
    if error_type == "extra_forbidden" and len(loc) > 1:
        return f"{_format_location(loc[:-1])} should NOT have additional properties"

    if error_type in FIELD_REASONS:
        reason = FIELD_REASONS[error_type](ctx)
    else:
        reason = error.get("msg", "is invalid")
        if reason.startswith("Value error, "):
            reason = reason[len("Value error, "):]
    return f"{_format_location(loc)} {reason}"


class ExceptionHandlerRegistry:
    """Registry for managing the application's exception handlers."""

    def __init__(
        self,
        response_formatter: Optional[ResponseFormatter] = None,
        is_production: bool = True
    ):
        """
        Initialize exception handler registry.

        Args:
            response_formatter: Function to format error responses
            is_production: Whether running in production mode
        """
        self.response_formatter = response_formatter or self._default_response_formatter
        self.is_production = is_production

    def _default_response_formatter(self, message: str) -> Dict[str, Any]:
        """Default error response formatter."""
        return {"message": message}

    def register_handlers(self, app: FastAPI) -> None:
        """Register exception handlers for the application.

        Args:
            app: FastAPI application instance
        """
        @app.exception_handler(ActionTrackerError)
        async def action_tracker_error_handler(request: Request, exc: ActionTrackerError):
            """Handle action-tracker exceptions."""
            status_code = get_http_status_code(exc)
            if status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
                logger.error(f"{exc.error_code} on {request.method} {request.url.path}: {exc.message}")
            return JSONResponse(
                status_code=status_code,
                content=self.response_formatter(exc.message)
            )

        @app.exception_handler(RequestValidationError)
        async def validation_error_handler(request: Request, exc: RequestValidationError):
            """Handle request validation errors."""
            message = format_validation_error(exc)
            logger.debug(f"Rejected {request.method} {request.url.path}: {message}")
            return JSONResponse(
                status_code=status.HTTP_400_BAD_REQUEST,
                content=self.response_formatter(message)
            )

        @app.exception_handler(StarletteHTTPException)
        async def http_exception_handler(request: Request, exc: StarletteHTTPException):
            """Handle HTTP exceptions raised by routes and dependencies."""
            return JSONResponse(
                status_code=exc.status_code,
                content=self.response_formatter(str(exc.detail)),
                headers=getattr(exc, "headers", None)
            )

        @app.exception_handler(Exception)
        async def general_exception_handler(request: Request, exc: Exception):
            """Handle unexpected exceptions."""
            logger.error(f"Unhandled exception: {exc}", exc_info=True)

            if self.is_production:
                message = "An unexpected error occurred"
            else:
                message = str(exc)

            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content=self.response_formatter(message)
            )


def register_exception_handlers(
    app: FastAPI,
    response_formatter: Optional[ResponseFormatter] = None,
    is_production: bool = True
) -> None:
    """
    Register exception handlers for a FastAPI application.

    This is a convenience function that creates an ExceptionHandlerRegistry
    and registers handlers in one call.

    Args:
        app: FastAPI application instance
        response_formatter: Custom response formatter function
        is_production: Whether running in production mode
    """
    registry = ExceptionHandlerRegistry(response_formatter, is_production)
    registry.register_handlers(app)
