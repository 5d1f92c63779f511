"""Sort order value object for action listings."""

from enum import Enum


class SortOrder(str, Enum):
    """Ordering of listed actions by their last update time."""

    ASC = "asc"
    DESC = "desc"

    def __str__(self) -> str:
        """String representation."""
        return self.value

    @property
    def is_descending(self) -> bool:
        return self is SortOrder.DESC

    @property
    def sql(self) -> str:
        """SQL keyword for this order."""
        return "DESC" if self.is_descending else "ASC"
