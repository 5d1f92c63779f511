"""Action API request models."""

from .create_action_request import CreateActionRequest
from .update_action_request import UpdateActionRequest

__all__ = [
    "CreateActionRequest",
    "UpdateActionRequest",
]
