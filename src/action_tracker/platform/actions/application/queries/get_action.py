"""Get action query."""

from ...core.entities import Action
from ...core.exceptions import ActionNotFoundError
from ...core.value_objects import ActionId, ActionOutcome, OutcomeKind
from ..protocols import ActionRepositoryProtocol


class GetActionQuery:
    """Query to get a single action by ID."""

    def __init__(self, action_repository: ActionRepositoryProtocol):
        self.action_repository = action_repository

    async def execute(self, action_id: ActionId) -> ActionOutcome[Action]:
        """Get action by ID, NOT_FOUND if it does not exist."""
        action = await self.action_repository.find_by_id(action_id)
        if action is None:
            return ActionOutcome.from_error(OutcomeKind.NOT_FOUND, ActionNotFoundError(action_id))
        return ActionOutcome.ok(action)
