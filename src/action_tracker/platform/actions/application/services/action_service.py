"""Action service orchestrating the action lifecycle."""

from typing import Optional, Sequence

from ...core.entities import Action
from ...core.value_objects import (
    ActionFilter,
    ActionId,
    ActionOutcome,
    ActionPatch,
    Metadata,
)
from ..commands import CreateActionCommand, CreateActionRequest, UpdateActionCommand
from ..protocols import ActionRepositoryProtocol, ServiceRegistryProtocol
from ..queries import GetActionQuery, ListActionsQuery


class ActionService:
    """Entry point for creating, listing, reading and updating actions.

    The repository and the service registry are supplied by the caller;
    the service holds no other state. Domain failures come back as
    ActionOutcome kinds, persistence failures propagate as
    ActionPersistenceError.
    """

    def __init__(
        self,
        action_repository: ActionRepositoryProtocol,
        service_registry: ServiceRegistryProtocol
    ):
        self.action_repository = action_repository
        self.service_registry = service_registry

        self._create_action = CreateActionCommand(action_repository, service_registry)
        self._update_action = UpdateActionCommand(action_repository)
        self._get_action = GetActionQuery(action_repository)
        self._list_actions = ListActionsQuery(action_repository)

    async def create_action(
        self,
        service: str,
        state: int,
        metadata: Optional[Metadata] = None
    ) -> ActionOutcome[ActionId]:
        """Create an active action for a registered service."""
        request = CreateActionRequest(service=service, state=state, metadata=metadata)
        return await self._create_action.execute(request)

    async def list_actions(self, action_filter: Optional[ActionFilter] = None) -> ActionOutcome[Sequence[Action]]:
        """List actions; no filter lists everything newest first."""
        return await self._list_actions.execute(action_filter or ActionFilter())

    async def get_action(self, action_id: ActionId) -> ActionOutcome[Action]:
        """Get a single action."""
        return await self._get_action.execute(action_id)

    async def update_action(self, action_id: ActionId, patch: ActionPatch) -> ActionOutcome[Action]:
        """Update an active action's status and/or metadata."""
        return await self._update_action.execute(action_id, patch)
