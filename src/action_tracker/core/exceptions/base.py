"""Base exceptions for action-tracker.

This module defines the base exception hierarchy. All exceptions inherit
from ActionTrackerError and carry an error code and structured details
that are used for logging and API responses.
"""

from typing import Any, Dict, Optional


class ActionTrackerError(Exception):
    """Base exception for all action-tracker errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for logging and responses."""
        return {
            "code": self.error_code,
            "message": self.message,
            "details": self.details,
            "type": self.__class__.__name__,
        }


def get_http_status_code(exception: Exception) -> int:
    """Get HTTP status code for exception.

    Args:
        exception: The exception instance

    Returns:
        HTTP status code
    """
    from .http_mapping import get_http_status_code as get_mapped_status_code
    return get_mapped_status_code(exception)


def create_error_response(exception: ActionTrackerError) -> Dict[str, Any]:
    """Create the error body rendered for an exception.

    Args:
        exception: The action-tracker exception

    Returns:
        Error response dictionary
    """
    return {"message": exception.message}
