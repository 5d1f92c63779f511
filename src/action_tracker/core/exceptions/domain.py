"""Domain-level exceptions shared across features.

Feature packages derive their own exceptions from these so that status
code mapping and logging can work on the category alone.
"""

from .base import ActionTrackerError


# Configuration Errors
class ConfigurationError(ActionTrackerError):
    """Raised when there's a configuration issue."""
    pass


# Database Errors
class DatabaseError(ActionTrackerError):
    """Base class for database-related errors."""
    pass


# Resource Errors
class ResourceNotFoundError(ActionTrackerError):
    """Raised when a requested resource does not exist."""
    pass


class ConflictError(ActionTrackerError):
    """Raised when a request conflicts with the current state of a resource."""
    pass
