"""In-process implementation of ActionRepositoryProtocol."""

import asyncio
import logging
from copy import deepcopy
from typing import Dict, List, Optional, Sequence

from .....utils import utc_now
from ...application.protocols import ActionRepositoryProtocol
from ...core.entities import Action
from ...core.exceptions import ActionNotFoundError, ActionPersistenceError
from ...core.value_objects import ActionFilter, ActionId, ActionPatch

logger = logging.getLogger(__name__)


class InMemoryActionRepository(ActionRepositoryProtocol):
    """
    Action store kept in process memory.

    Mutations are serialized by a lock so that a check of the current
    status and the write that depends on it happen as one step. Stored
    actions are private copies; callers only ever receive copies. Actions
    are kept in insertion order, which breaks ties when sorting.
    """

    def __init__(self):
        self._actions: List[Action] = []
        self._positions: Dict[ActionId, int] = {}
        self._lock = asyncio.Lock()

    def __len__(self) -> int:
        return len(self._actions)

    async def create(self, action: Action) -> Action:
        """Store a new action stamped with the current time."""
        async with self._lock:
            if action.id in self._positions:
                raise ActionPersistenceError(
                    f"actionId {action.id} already exists",
                    operation="create",
                    action_id=action.id
                )

            now = utc_now()
            stored = Action(
                id=action.id,
                service=action.service,
                state=action.state,
                status=action.status,
                metadata=deepcopy(action.metadata),
                closed_at=action.closed_at,
                created_at=now,
                updated_at=now
            )
            self._positions[stored.id] = len(self._actions)
            self._actions.append(stored)

        logger.debug(f"Stored action {stored.id} for service {stored.service}")
        return deepcopy(stored)

    async def find(self, action_filter: ActionFilter) -> Sequence[Action]:
        """List actions matching the filter ordered by updated_at."""
        matching = [
            action for action in self._actions
            if action_filter.matches(action.service, action.status)
        ]
        # sorted() is stable, so equal timestamps keep insertion order
        ordered = sorted(
            matching,
            key=lambda action: action.updated_at,
            reverse=action_filter.sort.is_descending
        )
        if action_filter.limit is not None:
            ordered = ordered[:action_filter.limit]

        return tuple(deepcopy(action) for action in ordered)

    async def find_by_id(self, action_id: ActionId) -> Optional[Action]:
        position = self._positions.get(action_id)
        return deepcopy(self._actions[position]) if position is not None else None

    async def update(self, action_id: ActionId, patch: ActionPatch) -> Action:
        """Apply a patch to an action that is still active.

        Raises:
            ActionNotFoundError: If no action has this id
            ActionAlreadyClosedError: If the action has already been closed
        """
        async with self._lock:
            position = self._positions.get(action_id)
            if position is None:
                raise ActionNotFoundError(action_id)

            updated = self._actions[position].apply(patch)
            updated.metadata = deepcopy(updated.metadata)
            self._actions[position] = updated

        return deepcopy(updated)

    async def clear(self) -> None:
        async with self._lock:
            self._actions.clear()
            self._positions.clear()
        logger.warning("Cleared all in-memory actions")

