"""Create action command."""

import logging
from dataclasses import dataclass
from typing import Optional

from ...core.entities import Action
from ...core.exceptions import ServiceNotRecognizedError
from ...core.value_objects import ActionId, ActionOutcome, Metadata, OutcomeKind
from ..protocols import ActionRepositoryProtocol, ServiceRegistryProtocol

logger = logging.getLogger(__name__)


@dataclass
class CreateActionRequest:
    """Request to create a new action."""

    service: str
    state: int
    metadata: Optional[Metadata] = None


class CreateActionCommand:
    """Command to create a new action for a registered service."""

    def __init__(
        self,
        action_repository: ActionRepositoryProtocol,
        service_registry: ServiceRegistryProtocol
    ):
        self.action_repository = action_repository
        self.service_registry = service_registry

    async def execute(self, request: CreateActionRequest) -> ActionOutcome[ActionId]:
        """
        Create a new action.

        The registry is consulted before anything is persisted; an
        unrecognized service leaves the store untouched.

        Args:
            request: Action creation request

        Returns:
            OK outcome with the new action id, or REGISTRY_CONFLICT

        Raises:
            ActionPersistenceError: If the store fails
        """
        if not await self.service_registry.is_known(request.service):
            logger.warning(f"Rejected action creation for unrecognized service {request.service!r}")
            return ActionOutcome.from_error(
                OutcomeKind.REGISTRY_CONFLICT, ServiceNotRecognizedError(request.service)
            )

        action = Action.open(
            service=request.service,
            state=request.state,
            metadata=request.metadata,
        )
        stored = await self.action_repository.create(action)

        logger.info(f"Created action {stored.id} for service {stored.service}")
        return ActionOutcome.ok(stored.id)
