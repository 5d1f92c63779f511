"""Action lifecycle tracking.

Actions are units of work performed by external services. A service
registered with the tracker opens an action, may update its metadata
while it is active and finally closes it with a terminal status.
"""

from .application import (
    ActionRepositoryProtocol,
    ActionService,
    ServiceRegistryProtocol,
)
from .core import (
    Action,
    ActionAlreadyClosedError,
    ActionFilter,
    ActionId,
    ActionNotFoundError,
    ActionOutcome,
    ActionPatch,
    ActionPersistenceError,
    ActionStatus,
    OutcomeKind,
    ServiceNotRecognizedError,
    SortOrder,
    can_transition,
)
from .infrastructure import (
    AsyncPGActionRepository,
    InMemoryActionRepository,
    StaticServiceRegistry,
)

__all__ = [
    # Entities and value objects
    "Action",
    "ActionFilter",
    "ActionId",
    "ActionOutcome",
    "ActionPatch",
    "ActionStatus",
    "OutcomeKind",
    "SortOrder",
    "can_transition",

    # Exceptions
    "ActionAlreadyClosedError",
    "ActionNotFoundError",
    "ActionPersistenceError",
    "ServiceNotRecognizedError",

    # Application
    "ActionRepositoryProtocol",
    "ActionService",
    "ServiceRegistryProtocol",

    # Infrastructure
    "AsyncPGActionRepository",
    "InMemoryActionRepository",
    "StaticServiceRegistry",
]
