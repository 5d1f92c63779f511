"""Action API models."""

from .requests import CreateActionRequest, UpdateActionRequest
from .responses import ActionResponse, CreateActionResponse

__all__ = [
    # Requests
    "CreateActionRequest",
    "UpdateActionRequest",

    # Responses
    "ActionResponse",
    "CreateActionResponse",
]
