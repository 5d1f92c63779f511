"""Action repository protocol for data persistence."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from ...core.entities import Action
from ...core.value_objects import ActionFilter, ActionId, ActionPatch


class ActionRepositoryProtocol(ABC):
    """Protocol for action persistence operations.

    Implementations perform no input validation; callers hand them
    well-formed values. Every operation either completes or raises
    ActionPersistenceError within the lifetime of a request.
    """

    @abstractmethod
    async def create(self, action: Action) -> Action:
        """
        Persist a new action.

        The store stamps created_at and updated_at with the same instant.

        Args:
            action: Active action to persist

        Returns:
            The stored action

        Raises:
            ActionPersistenceError: If the action cannot be stored
        """
        ...

    @abstractmethod
    async def find(self, action_filter: ActionFilter) -> Sequence[Action]:
        """
        List actions matching a filter.

        Args:
            action_filter: Service, status, sort and limit criteria

        Returns:
            Matching actions ordered by updated_at in the filter's sort
            direction, ties kept in insertion order, capped at the limit
        """
        ...

    @abstractmethod
    async def find_by_id(self, action_id: ActionId) -> Optional[Action]:
        """
        Get action by ID.

        Args:
            action_id: Action ID to retrieve

        Returns:
            Action if found, None otherwise
        """
        ...

    @abstractmethod
    async def update(self, action_id: ActionId, patch: ActionPatch) -> Action:
        """
        Apply a patch to an active action.

        The write only succeeds while the stored status is still ACTIVE, so
        two concurrent closes cannot both win.

        Args:
            action_id: Action to update
            patch: Status and/or metadata to set

        Returns:
            The updated action

        Raises:
            ActionNotFoundError: If the action does not exist at write time
            ActionAlreadyClosedError: If the action was closed in the meantime
            ActionPersistenceError: If the update cannot be stored
        """
        ...

    @abstractmethod
    async def clear(self) -> None:
        """Remove every action. Administrative reset, not part of the lifecycle."""
        ...
