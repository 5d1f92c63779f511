"""Action API dependencies."""

from .action_dependencies import (
    LIST_ACTIONS_QUERY_PARAMS,
    get_action_service,
    validate_list_actions_query,
)

__all__ = [
    "LIST_ACTIONS_QUERY_PARAMS",
    "get_action_service",
    "validate_list_actions_query",
]
