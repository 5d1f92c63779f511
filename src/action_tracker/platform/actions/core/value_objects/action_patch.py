"""Action patch value object describing an update request."""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from .action_status import ActionStatus

# JSON values stored in metadata are passed through untouched
JsonValue = Any
Metadata = Dict[str, JsonValue]

_UNSET: Any = object()


@dataclass(frozen=True)
class ActionPatch:
    """Fields to change on an active action.

    ``status`` is None when the status is left as is. ``metadata`` replaces
    the stored metadata wholesale when ``has_metadata`` is set; an explicit
    None clears it.
    """

    status: Optional[ActionStatus] = None
    metadata: Optional[Metadata] = field(default=None)
    has_metadata: bool = False

    @classmethod
    def create(cls, status: Optional[ActionStatus] = None, metadata: Any = _UNSET) -> 'ActionPatch':
        """Build a patch; metadata counts as provided only when passed."""
        if metadata is _UNSET:
            return cls(status=ActionStatus(status) if status is not None else None)
        return cls(
            status=ActionStatus(status) if status is not None else None,
            metadata=metadata,
            has_metadata=True,
        )

    @property
    def is_empty(self) -> bool:
        return self.status is None and not self.has_metadata

    @property
    def closes(self) -> bool:
        """Check if applying this patch closes the action."""
        return self.status is not None and self.status.is_closed
