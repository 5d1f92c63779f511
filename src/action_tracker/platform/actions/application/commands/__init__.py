"""Action commands."""

from .create_action import CreateActionCommand, CreateActionRequest
from .update_action import UpdateActionCommand

__all__ = [
    "CreateActionCommand",
    "CreateActionRequest",
    "UpdateActionCommand",
]
