"""FastAPI integration for action-tracker."""

from .exception_handlers import (
    ExceptionHandlerRegistry,
    format_validation_error,
    register_exception_handlers,
)

__all__ = [
    "ExceptionHandlerRegistry",
    "format_validation_error",
    "register_exception_handlers",
]
