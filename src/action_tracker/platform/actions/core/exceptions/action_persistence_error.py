"""Action persistence failure exception."""

from typing import Any, Dict, Optional

from .....core.exceptions import DatabaseError


class ActionPersistenceError(DatabaseError):
    """Raised when the action store cannot complete an operation.

    The message is the underlying error's message so callers can surface
    it unchanged; the action id and attempted operation go into details.
    """

    def __init__(
        self,
        message: str,
        operation: Optional[str] = None,
        action_id: Any = None,
        original_error: Optional[Exception] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        enhanced_details = details or {}
        if operation:
            enhanced_details["operation"] = operation
        if action_id is not None:
            enhanced_details["action_id"] = str(action_id)
        if original_error is not None:
            enhanced_details["original_error_type"] = type(original_error).__name__

        super().__init__(
            message=message,
            error_code="ACTION_PERSISTENCE_FAILED",
            details=enhanced_details
        )
        self.operation = operation
        self.action_id = action_id
        self.original_error = original_error
