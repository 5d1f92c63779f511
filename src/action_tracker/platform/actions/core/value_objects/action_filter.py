"""Action filter value object used for listing actions."""

from dataclasses import dataclass
from typing import FrozenSet, Iterable, Optional

from .action_status import ActionStatus
from .sort_order import SortOrder


@dataclass(frozen=True)
class ActionFilter:
    """Filter, sort and limit criteria for listing actions.

    Attributes:
        service: Exact service name to match, or None for every service
        statuses: Statuses to match, or None for every status
        sort: Order by last update time, newest first by default
        limit: Maximum number of results, or None for no cap

    Values are expected to be validated by the caller; the filter itself
    only normalises the status collection.
    """

    service: Optional[str] = None
    statuses: Optional[FrozenSet[ActionStatus]] = None
    sort: SortOrder = SortOrder.DESC
    limit: Optional[int] = None

    def __post_init__(self):
        """Normalise statuses into a frozenset of ActionStatus."""
        if self.statuses is not None:
            object.__setattr__(
                self, "statuses", frozenset(ActionStatus(status) for status in self.statuses)
            )
        object.__setattr__(self, "sort", SortOrder(self.sort))

    @classmethod
    def create(
        cls,
        service: Optional[str] = None,
        statuses: Optional[Iterable[ActionStatus]] = None,
        sort: SortOrder = SortOrder.DESC,
        limit: Optional[int] = None,
    ) -> 'ActionFilter':
        """Build a filter, treating an empty status collection as no status filter."""
        status_set = frozenset(statuses) if statuses else None
        return cls(service=service, statuses=status_set, sort=sort, limit=limit)

    def matches(self, service: str, status: ActionStatus) -> bool:
        """Check if an action with the given service and status passes the filter."""
        if self.service is not None and service != self.service:
            return False
        if self.statuses is not None and status not in self.statuses:
            return False
        return True
