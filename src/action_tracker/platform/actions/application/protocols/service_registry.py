"""Service registry protocol."""

from abc import ABC, abstractmethod


class ServiceRegistryProtocol(ABC):
    """Answers whether a service name is recognized and may create actions."""

    @abstractmethod
    async def is_known(self, service: str) -> bool:
        """
        Check if a service is registered.

        Args:
            service: Service name claimed by the caller

        Returns:
            True if the service is recognized, False otherwise
        """
        ...
