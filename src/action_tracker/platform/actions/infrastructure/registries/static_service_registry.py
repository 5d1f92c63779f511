"""Service registry backed by a fixed set of service names."""

import logging
from typing import FrozenSet, Iterable

from .....config import ActionTrackerSettings
from ...application.protocols import ServiceRegistryProtocol

logger = logging.getLogger(__name__)


class StaticServiceRegistry(ServiceRegistryProtocol):
    """Recognizes exactly the service names it was built with.

    Names are matched case-sensitively and without trimming, so
    ``"billing"`` and ``"Billing "`` are different services.
    """

    def __init__(self, services: Iterable[str] = ()):
        self._services: FrozenSet[str] = frozenset(services)

    @classmethod
    def from_settings(cls, settings: ActionTrackerSettings) -> "StaticServiceRegistry":
        """Build a registry from the SERVICE_REGISTRY_SERVICES setting."""
        registry = cls(settings.registered_services)
        if not registry.services:
            logger.warning("Service registry is empty, every action creation will be rejected")
        else:
            logger.info(f"Service registry loaded with {len(registry.services)} services")
        return registry

    @property
    def services(self) -> FrozenSet[str]:
        return self._services

    async def is_known(self, service: str) -> bool:
        return service in self._services
