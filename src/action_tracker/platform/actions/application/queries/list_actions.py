"""List actions query."""

from typing import Sequence

from ...core.entities import Action
from ...core.value_objects import ActionFilter, ActionOutcome
from ..protocols import ActionRepositoryProtocol


class ListActionsQuery:
    """Query to list actions with filtering, ordering and a result cap."""

    def __init__(self, action_repository: ActionRepositoryProtocol):
        self.action_repository = action_repository

    async def execute(self, action_filter: ActionFilter) -> ActionOutcome[Sequence[Action]]:
        """
        List actions matching a filter.

        Args:
            action_filter: Service, status, sort and limit criteria

        Returns:
            OK outcome with the matching actions
        """
        actions = await self.action_repository.find(action_filter)
        return ActionOutcome.ok(actions)
