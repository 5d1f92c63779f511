"""Action core components.

This module contains the core domain components for actions including
entities, value objects and exceptions.
"""

from .entities import Action
from .exceptions import (
    ActionAlreadyClosedError,
    ActionNotFoundError,
    ActionPersistenceError,
    ServiceNotRecognizedError,
)
from .value_objects import (
    ActionFilter,
    ActionId,
    ActionOutcome,
    ActionPatch,
    ActionStatus,
    Metadata,
    OutcomeKind,
    SortOrder,
    can_transition,
)

__all__ = [
    # Entities
    "Action",

    # Value Objects
    "ActionFilter",
    "ActionId",
    "ActionOutcome",
    "ActionPatch",
    "ActionStatus",
    "Metadata",
    "OutcomeKind",
    "SortOrder",
    "can_transition",

    # Exceptions
    "ActionAlreadyClosedError",
    "ActionNotFoundError",
    "ActionPersistenceError",
    "ServiceNotRecognizedError",
]
