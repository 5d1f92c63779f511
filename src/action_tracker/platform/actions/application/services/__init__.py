"""Action application services."""

from .action_service import ActionService

__all__ = ["ActionService"]
