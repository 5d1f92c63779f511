"""Action dependencies for dependency injection."""

from typing import FrozenSet

from fastapi import HTTPException, Request, status

from ...application.services import ActionService

LIST_ACTIONS_QUERY_PARAMS: FrozenSet[str] = frozenset({"service", "status", "sort", "limit"})


# Service Dependencies
def get_action_service(request: Request) -> ActionService:
    """Get the action service built by the application factory."""
    return request.app.state.action_service


# Validation Dependencies
def validate_list_actions_query(request: Request) -> None:
    """Reject unknown query parameters and empty values for known ones."""
    for name, value in request.query_params.multi_items():
        if name not in LIST_ACTIONS_QUERY_PARAMS:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"Unknown query parameter '{name}'"
            )
        if value == "":
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"Empty value found for query parameter '{name}'"
            )
