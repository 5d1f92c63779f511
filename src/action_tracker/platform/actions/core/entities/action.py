"""Action entity for platform actions.

An action is a unit of work performed by an external service. It is
created active and may be closed exactly once with a terminal status.
"""

from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Any, Dict, Optional

from .....utils import ensure_utc, format_iso8601, utc_now
from ..exceptions import ActionAlreadyClosedError
from ..value_objects import ActionId, ActionPatch, ActionStatus, Metadata, can_transition


@dataclass
class Action:
    """Action domain entity.

    ``service``, ``state`` and ``created_at`` never change after creation.
    ``status``, ``metadata`` and ``updated_at`` change through ``apply``
    while the action is active; ``closed_at`` is set once, to the same
    instant as ``updated_at``, when the status leaves ACTIVE.
    """

    service: str
    state: int
    id: ActionId = field(default_factory=ActionId.generate)
    status: ActionStatus = ActionStatus.ACTIVE
    metadata: Optional[Metadata] = None
    closed_at: Optional[datetime] = None
    created_at: datetime = field(default_factory=utc_now)
    updated_at: Optional[datetime] = None

    def __post_init__(self):
        """Post-initialization validation and setup."""
        if not isinstance(self.service, str) or not self.service:
            raise ValueError("Action service cannot be empty")

        if isinstance(self.state, bool) or not isinstance(self.state, int):
            raise ValueError(f"Action state must be an integer, got {type(self.state).__name__}")

        self.status = ActionStatus(self.status)

        # Ensure timestamps are timezone-aware
        self.created_at = ensure_utc(self.created_at)
        self.updated_at = ensure_utc(self.updated_at) if self.updated_at else self.created_at
        self.closed_at = ensure_utc(self.closed_at)

        if self.status.is_closed != (self.closed_at is not None):
            raise ValueError(
                f"Action {self.id} has status {self.status} but closed_at is {self.closed_at}"
            )

    @classmethod
    def open(cls, service: str, state: int, metadata: Optional[Metadata] = None) -> 'Action':
        """Create a new active action with created_at equal to updated_at."""
        now = utc_now()
        return cls(
            service=service,
            state=state,
            metadata=metadata,
            status=ActionStatus.ACTIVE,
            closed_at=None,
            created_at=now,
            updated_at=now,
        )

    @property
    def is_closed(self) -> bool:
        return self.status.is_closed

    def apply(self, patch: ActionPatch, at: Optional[datetime] = None) -> 'Action':
        """Return a copy of this action with the patch applied.

        Args:
            patch: Status and/or metadata to set
            at: Update instant, defaults to now

        Returns:
            Updated copy; this instance is left untouched

        Raises:
            ActionAlreadyClosedError: If the action is no longer active
        """
        requested = patch.status or self.status
        if not can_transition(self.status, requested):
            raise ActionAlreadyClosedError(self.id, self.status)

        now = ensure_utc(at) if at else utc_now()
        changes: Dict[str, Any] = {"updated_at": now}
        if patch.status is not None:
            changes["status"] = patch.status
            if patch.closes:
                changes["closed_at"] = now
        if patch.has_metadata:
            changes["metadata"] = patch.metadata

        return replace(self, **changes)

    def to_dict(self) -> Dict[str, Any]:
        """Convert action to dictionary for serialization."""
        return {
            "action_id": str(self.id),
            "service": self.service,
            "state": self.state,
            "status": self.status.value,
            "metadata": self.metadata,
            "closed_at": format_iso8601(self.closed_at),
            "created_at": format_iso8601(self.created_at),
            "updated_at": format_iso8601(self.updated_at),
        }
