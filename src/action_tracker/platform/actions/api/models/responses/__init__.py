"""Action API response models."""

from .action_response import ActionResponse
from .create_action_response import CreateActionResponse

__all__ = [
    "ActionResponse",
    "CreateActionResponse",
]
