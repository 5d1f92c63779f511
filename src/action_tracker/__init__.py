"""Action Tracker - lifecycle tracking for actions performed by external services.

Services registered with the tracker open actions, update their metadata
while they run and close them once with a terminal status. The package
ships a FastAPI surface, a PostgreSQL store built on asyncpg and an
in-memory store.
"""

# Initialize logging configuration on import
from .config.logging_config import setup_logging
setup_logging()

from .__version__ import __version__

from .config import (
    ActionTrackerSettings,
    StoreBackend,
    get_settings,
)

from .core.exceptions import (
    # Base Exception
    ActionTrackerError,

    # Common Exceptions
    ConfigurationError,
    ConflictError,
    DatabaseError,
    ResourceNotFoundError,

    # Utility Functions
    get_http_status_code,
    create_error_response,
)

from .platform.actions import (
    Action,
    ActionAlreadyClosedError,
    ActionFilter,
    ActionId,
    ActionNotFoundError,
    ActionOutcome,
    ActionPatch,
    ActionPersistenceError,
    ActionService,
    ActionStatus,
    AsyncPGActionRepository,
    InMemoryActionRepository,
    OutcomeKind,
    ServiceNotRecognizedError,
    SortOrder,
    StaticServiceRegistry,
)

from .app import create_app

__all__ = [
    "__version__",

    # Configuration
    "ActionTrackerSettings",
    "StoreBackend",
    "get_settings",

    # Exceptions
    "ActionTrackerError",
    "ConfigurationError",
    "ConflictError",
    "DatabaseError",
    "ResourceNotFoundError",
    "get_http_status_code",
    "create_error_response",

    # Actions
    "Action",
    "ActionAlreadyClosedError",
    "ActionFilter",
    "ActionId",
    "ActionNotFoundError",
    "ActionOutcome",
    "ActionPatch",
    "ActionPersistenceError",
    "ActionService",
    "ActionStatus",
    "AsyncPGActionRepository",
    "InMemoryActionRepository",
    "OutcomeKind",
    "ServiceNotRecognizedError",
    "SortOrder",
    "StaticServiceRegistry",

    # Application
    "create_app",
]
