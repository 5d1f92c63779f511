"""Action not found exception."""

from typing import Any, Dict, Optional

from .....core.exceptions import ResourceNotFoundError


class ActionNotFoundError(ResourceNotFoundError):
    """Raised when an action id does not exist in the store."""

    def __init__(self, action_id: Any, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=f"actionId {action_id} not found",
            error_code="ACTION_NOT_FOUND",
            details={"action_id": str(action_id), **(details or {})}
        )
        self.action_id = action_id
