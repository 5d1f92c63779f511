"""Action already closed exception."""

from typing import Any, Dict, Optional

from .....core.exceptions import ConflictError
from ..value_objects import ActionStatus


class ActionAlreadyClosedError(ConflictError):
    """Raised when an update targets an action that is no longer active.

    The message names the action and the status it was closed with.
    """

    def __init__(
        self,
        action_id: Any,
        status: ActionStatus,
        details: Optional[Dict[str, Any]] = None
    ):
        status_value = ActionStatus(status).value
        super().__init__(
            message=f"action {action_id} has already been closed with status {status_value}",
            error_code="ACTION_ALREADY_CLOSED",
            details={"action_id": str(action_id), "status": status_value, **(details or {})}
        )
        self.action_id = action_id
        self.status = ActionStatus(status)
