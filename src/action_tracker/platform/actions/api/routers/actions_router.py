"""Actions router."""

from typing import Dict, List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Path, Query, status

from ...application.services import ActionService
from ...core.value_objects import (
    ActionFilter,
    ActionId,
    ActionOutcome,
    ActionStatus,
    OutcomeKind,
    SortOrder,
)
from ..dependencies import get_action_service, validate_list_actions_query
from ..models.requests import CreateActionRequest, UpdateActionRequest
from ..models.responses import ActionResponse, CreateActionResponse

# HTTP status for every failed outcome kind
OUTCOME_STATUS_CODES: Dict[OutcomeKind, int] = {
    OutcomeKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    OutcomeKind.ALREADY_CLOSED: status.HTTP_409_CONFLICT,
    OutcomeKind.REGISTRY_CONFLICT: status.HTTP_409_CONFLICT,
}


router = APIRouter(
    prefix="/action",
    tags=["Actions"]
)


def raise_for_outcome(outcome: ActionOutcome) -> None:
    """Raise an HTTPException carrying the outcome message unless it is OK."""
    if outcome.is_ok:
        return
    raise HTTPException(
        status_code=OUTCOME_STATUS_CODES.get(outcome.kind, status.HTTP_500_INTERNAL_SERVER_ERROR),
        detail=outcome.message
    )


@router.get(
    "",
    response_model=List[ActionResponse],
    dependencies=[Depends(validate_list_actions_query)]
)
async def list_actions(
    service: Optional[str] = Query(None, min_length=1, description="Filter by service"),
    action_status: Optional[List[ActionStatus]] = Query(None, alias="status", description="Filter by status, repeatable"),
    sort: SortOrder = Query(SortOrder.DESC, description="Order by last update time"),
    limit: Optional[int] = Query(None, ge=1, description="Maximum number of actions to return"),
    action_service: ActionService = Depends(get_action_service)
) -> List[ActionResponse]:
    """List actions with filtering, ordering and a result cap."""
    action_filter = ActionFilter.create(
        service=service,
        statuses=action_status,
        sort=sort,
        limit=limit
    )
    outcome = await action_service.list_actions(action_filter)
    raise_for_outcome(outcome)
    return [ActionResponse.from_domain(action) for action in outcome.value]


@router.post("", response_model=CreateActionResponse, status_code=status.HTTP_201_CREATED)
async def create_action(
    request: CreateActionRequest,
    action_service: ActionService = Depends(get_action_service)
) -> CreateActionResponse:
    """Create a new active action for a registered service."""
    outcome = await action_service.create_action(
        service=request.service,
        state=request.state,
        metadata=request.metadata
    )
    raise_for_outcome(outcome)
    return CreateActionResponse.from_domain(outcome.value)


@router.get("/{actionId}", response_model=ActionResponse)
async def get_action(
    action_id: UUID = Path(..., alias="actionId", description="Action ID"),
    action_service: ActionService = Depends(get_action_service)
) -> ActionResponse:
    """Get a specific action by ID."""
    outcome = await action_service.get_action(ActionId(action_id))
    raise_for_outcome(outcome)
    return ActionResponse.from_domain(outcome.value)


@router.patch("/{actionId}", response_model=ActionResponse)
async def update_action(
    request: UpdateActionRequest,
    action_id: UUID = Path(..., alias="actionId", description="Action ID"),
    action_service: ActionService = Depends(get_action_service)
) -> ActionResponse:
    """Update the status and/or metadata of an active action."""
    outcome = await action_service.update_action(ActionId(action_id), request.to_patch())
    raise_for_outcome(outcome)
    return ActionResponse.from_domain(outcome.value)
