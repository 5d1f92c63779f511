"""Action infrastructure layer: stores and service registries."""

from .registries import StaticServiceRegistry
from .repositories import AsyncPGActionRepository, InMemoryActionRepository

__all__ = [
    # Repositories
    "AsyncPGActionRepository",
    "InMemoryActionRepository",

    # Registries
    "StaticServiceRegistry",
]
