"""Action application layer: protocols, commands, queries and services."""

from .commands import CreateActionCommand, CreateActionRequest, UpdateActionCommand
from .protocols import ActionRepositoryProtocol, ServiceRegistryProtocol
from .queries import GetActionQuery, ListActionsQuery
from .services import ActionService

__all__ = [
    # Protocols
    "ActionRepositoryProtocol",
    "ServiceRegistryProtocol",

    # Commands
    "CreateActionCommand",
    "CreateActionRequest",
    "UpdateActionCommand",

    # Queries
    "GetActionQuery",
    "ListActionsQuery",

    # Services
    "ActionService",
]
