"""HTTP status code mapping for exceptions.

Status codes are resolved by walking the exception's MRO so that feature
specific exceptions inherit the code of their category.
"""

from typing import Dict, Type

from .base import ActionTrackerError
from .domain import (
    ConfigurationError,
    ConflictError,
    DatabaseError,
    ResourceNotFoundError,
)


HTTP_STATUS_MAP: Dict[Type[Exception], int] = {
    # 404 Not Found
    ResourceNotFoundError: 404,

    # 409 Conflict
    ConflictError: 409,

    # 500 Internal Server Error
    DatabaseError: 500,
    ConfigurationError: 500,

    # Default for ActionTrackerError
    ActionTrackerError: 500,
}


class HttpStatusMapper:
    """Exception-to-status-code mapper with a per-type cache."""

    def __init__(self, status_map: Dict[Type[Exception], int] = None):
        self._status_map = status_map if status_map is not None else HTTP_STATUS_MAP
        self._cache: Dict[Type[Exception], int] = {}

    def get_status_code(self, exception: Exception) -> int:
        """Get HTTP status code for exception."""
        exception_type = type(exception)

        if exception_type in self._cache:
            return self._cache[exception_type]

        status_code = 500
        for klass in exception_type.__mro__:
            if klass in self._status_map:
                status_code = self._status_map[klass]
                break

        self._cache[exception_type] = status_code
        return status_code

    def register(self, exception_type: Type[Exception], status_code: int) -> None:
        """Register or override the status code for an exception type."""
        self._status_map = {**self._status_map, exception_type: status_code}
        self._cache.clear()


_global_mapper = HttpStatusMapper()


def get_http_status_code(exception: Exception) -> int:
    """Get HTTP status code for exception using the global mapper."""
    return _global_mapper.get_status_code(exception)
