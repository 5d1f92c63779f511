"""Action outcome value object.

Every Action Service operation returns an ActionOutcome instead of raising
for domain failures. The API layer maps the outcome kind to a transport
status code.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Generic, Optional, TypeVar

T = TypeVar("T")


class OutcomeKind(str, Enum):
    """Kinds of results an Action Service operation can produce."""
    OK = "ok"
    NOT_FOUND = "not_found"
    ALREADY_CLOSED = "already_closed"
    REGISTRY_CONFLICT = "registry_conflict"


@dataclass(frozen=True)
class ActionOutcome(Generic[T]):
    """Immutable tagged result of an Action Service operation.

    On success ``value`` carries the operation's result. On failure
    ``message`` is a human readable explanation and ``details`` holds the
    context needed to render a precise error (action id, service name,
    attempted operation).
    """

    kind: OutcomeKind
    value: Optional[T] = None
    message: Optional[str] = None
    details: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def ok(cls, value: T) -> 'ActionOutcome[T]':
        """Create a successful outcome."""
        return cls(kind=OutcomeKind.OK, value=value)

    @classmethod
    def failure(
        cls,
        kind: OutcomeKind,
        message: str,
        details: Optional[Dict[str, Any]] = None
    ) -> 'ActionOutcome[T]':
        """Create a failed outcome.

        Args:
            kind: Failure kind, anything but OK
            message: Human readable explanation
            details: Context for the caller

        Returns:
            ActionOutcome carrying no value
        """
        if kind is OutcomeKind.OK:
            raise ValueError("A failure outcome cannot have kind OK")
        return cls(kind=kind, message=message, details=details or {})

    @classmethod
    def from_error(cls, kind: OutcomeKind, error: Exception) -> 'ActionOutcome[T]':
        """Create a failed outcome from a domain exception's message and details."""
        return cls.failure(
            kind,
            getattr(error, "message", str(error)),
            dict(getattr(error, "details", {}) or {})
        )

    @property
    def is_ok(self) -> bool:
        return self.kind is OutcomeKind.OK

    def unwrap(self) -> T:
        """Return the value of a successful outcome.

        Raises:
            ValueError: If the outcome is a failure
        """
        if not self.is_ok:
            raise ValueError(f"Cannot unwrap {self.kind.value} outcome: {self.message}")
        return self.value
