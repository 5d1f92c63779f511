"""Action API layer: FastAPI router, request/response models and dependencies."""

from .dependencies import get_action_service
from .models import ActionResponse, CreateActionRequest, CreateActionResponse, UpdateActionRequest
from .routers import actions_router

__all__ = [
    # Routers
    "actions_router",

    # Models
    "ActionResponse",
    "CreateActionRequest",
    "CreateActionResponse",
    "UpdateActionRequest",

    # Dependencies
    "get_action_service",
]
