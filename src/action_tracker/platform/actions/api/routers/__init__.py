"""Action API routers."""

from .actions_router import OUTCOME_STATUS_CODES, raise_for_outcome, router as actions_router

__all__ = [
    "OUTCOME_STATUS_CODES",
    "actions_router",
    "raise_for_outcome",
]
