"""Core exceptions for action-tracker."""

from .base import ActionTrackerError, create_error_response, get_http_status_code
from .domain import (
    ConfigurationError,
    ConflictError,
    DatabaseError,
    ResourceNotFoundError,
)
from .http_mapping import HTTP_STATUS_MAP, HttpStatusMapper

__all__ = [
    # Base Exception
    "ActionTrackerError",

    # Common Exceptions
    "ConfigurationError",
    "ConflictError",
    "DatabaseError",
    "ResourceNotFoundError",

    # Utility Functions
    "HTTP_STATUS_MAP",
    "HttpStatusMapper",
    "create_error_response",
    "get_http_status_code",
]
