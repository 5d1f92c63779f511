"""Action value objects."""

from .action_filter import ActionFilter
from .action_id import ActionId
from .action_outcome import ActionOutcome, OutcomeKind
from .action_patch import ActionPatch, JsonValue, Metadata
from .action_status import ActionStatus, can_transition
from .sort_order import SortOrder

__all__ = [
    # Identifiers
    "ActionId",

    # Lifecycle
    "ActionStatus",
    "can_transition",

    # Queries and updates
    "ActionFilter",
    "ActionPatch",
    "SortOrder",
    "JsonValue",
    "Metadata",

    # Results
    "ActionOutcome",
    "OutcomeKind",
]
