"""Action repository implementations."""

from .asyncpg_action_repository import AsyncPGActionRepository
from .in_memory_action_repository import InMemoryActionRepository

__all__ = [
    "AsyncPGActionRepository",
    "InMemoryActionRepository",
]
