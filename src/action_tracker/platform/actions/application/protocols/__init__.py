"""Action application protocols."""

from .action_repository import ActionRepositoryProtocol
from .service_registry import ServiceRegistryProtocol

__all__ = [
    "ActionRepositoryProtocol",
    "ServiceRegistryProtocol",
]
