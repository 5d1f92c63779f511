"""Action queries."""

from .get_action import GetActionQuery
from .list_actions import ListActionsQuery

__all__ = [
    "GetActionQuery",
    "ListActionsQuery",
]
