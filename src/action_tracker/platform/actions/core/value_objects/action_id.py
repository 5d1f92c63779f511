"""Action ID value object."""

from dataclasses import dataclass
from uuid import UUID

from .....utils import generate_uuid_v7


@dataclass(frozen=True)
class ActionId:
    """
    Action ID value object.

    Wraps the UUID that identifies an action. Generated ids are UUIDv7 so
    that primary keys stay roughly time ordered.
    """

    value: UUID

    def __post_init__(self):
        """Validate action ID on creation."""
        if not isinstance(self.value, UUID):
            raise TypeError(f"ActionId value must be UUID, got {type(self.value)}")

    @classmethod
    def generate(cls) -> 'ActionId':
        """Generate a new ActionId using UUIDv7."""
        return cls(generate_uuid_v7())

    @classmethod
    def from_string(cls, uuid_str: str) -> 'ActionId':
        """Create ActionId from UUID string."""
        try:
            return cls(UUID(uuid_str))
        except (ValueError, TypeError, AttributeError) as e:
            raise ValueError(f"Invalid UUID string: {uuid_str}") from e

    def __str__(self) -> str:
        """String representation returns UUID string."""
        return str(self.value)
