"""Service registry implementations."""

from .static_service_registry import StaticServiceRegistry

__all__ = [
    "StaticServiceRegistry",
]
