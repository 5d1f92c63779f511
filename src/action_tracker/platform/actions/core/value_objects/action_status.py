"""Action status value object and the lifecycle state machine."""

from enum import Enum


class ActionStatus(str, Enum):
    """Action lifecycle status.

    - ACTIVE: the action is in progress; the only valid initial status
    - COMPLETED: the action finished successfully (terminal)
    - FAILED: the action finished with an error (terminal)
    - CANCELED: the action was abandoned (terminal)

    Once an action leaves ACTIVE it is closed and never changes again.
    """

    ACTIVE = "active"
    COMPLETED = "completed"
    FAILED = "failed"
    CANCELED = "canceled"

    def __str__(self) -> str:
        """String representation."""
        return self.value

    @property
    def is_closed(self) -> bool:
        """Check if this status closes the action."""
        return self is not ActionStatus.ACTIVE

    @property
    def is_modifiable(self) -> bool:
        """Check if an action in this status accepts updates."""
        return self is ActionStatus.ACTIVE

    @classmethod
    def terminal_statuses(cls) -> frozenset:
        """All statuses that close an action."""
        return frozenset(status for status in cls if status.is_closed)


def can_transition(current: ActionStatus, requested: ActionStatus) -> bool:
    """Check whether an action in ``current`` may be updated to ``requested``.

    Only active actions accept updates. Requesting ACTIVE for an active
    action is allowed and leaves the action open; any request against a
    closed action is rejected, including re-asserting its own status.
    """
    return current is ActionStatus.ACTIVE
