"""Update action command."""

import logging

from ...core.entities import Action
from ...core.exceptions import ActionAlreadyClosedError, ActionNotFoundError
from ...core.value_objects import (
    ActionId,
    ActionOutcome,
    ActionPatch,
    OutcomeKind,
    can_transition,
)
from ..protocols import ActionRepositoryProtocol

logger = logging.getLogger(__name__)


class UpdateActionCommand:
    """Command to update, and possibly close, an active action."""

    def __init__(self, action_repository: ActionRepositoryProtocol):
        self.action_repository = action_repository

    async def execute(self, action_id: ActionId, patch: ActionPatch) -> ActionOutcome[Action]:
        """
        Update an action.

        Performs one read to check the action is still active and, when it
        is, one conditional write. The repository rejects the write if a
        concurrent request closed the action between the two, and that
        rejection is reported the same way as the up-front check.

        Args:
            action_id: Action to update
            patch: Status and/or metadata to set

        Returns:
            OK outcome with the updated action, NOT_FOUND or ALREADY_CLOSED

        Raises:
            ActionPersistenceError: If the store fails
        """
        current = await self.action_repository.find_by_id(action_id)
        if current is None:
            logger.info(f"Update rejected, action {action_id} not found")
            return ActionOutcome.from_error(OutcomeKind.NOT_FOUND, ActionNotFoundError(action_id))

        requested = patch.status or current.status
        if not can_transition(current.status, requested):
            logger.info(f"Update rejected, action {action_id} already closed with {current.status}")
            return ActionOutcome.from_error(
                OutcomeKind.ALREADY_CLOSED,
                ActionAlreadyClosedError(action_id, current.status)
            )

        try:
            updated = await self.action_repository.update(action_id, patch)
        except ActionNotFoundError as e:
            return ActionOutcome.from_error(OutcomeKind.NOT_FOUND, e)
        except ActionAlreadyClosedError as e:
            logger.warning(f"Concurrent close detected for action {action_id}: {e.message}")
            return ActionOutcome.from_error(OutcomeKind.ALREADY_CLOSED, e)

        if updated.is_closed:
            logger.info(f"Closed action {action_id} with status {updated.status}")
        return ActionOutcome.ok(updated)
