"""Action tracker application factory.

The action service and its collaborators are built explicitly here and
stored on ``app.state``; routes reach them through FastAPI dependencies.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from .api.exception_handlers import register_exception_handlers
from .config import ActionTrackerSettings, StoreBackend, get_settings
from .core.exceptions import ConfigurationError
from .database import DatabaseManager, apply_schema
from .platform.actions.api import actions_router
from .platform.actions.application import (
    ActionRepositoryProtocol,
    ActionService,
    ServiceRegistryProtocol,
)
from .platform.actions.infrastructure import (
    AsyncPGActionRepository,
    InMemoryActionRepository,
    StaticServiceRegistry,
)

logger = logging.getLogger(__name__)


def build_action_repository(
    settings: ActionTrackerSettings,
    database: Optional[DatabaseManager] = None
) -> ActionRepositoryProtocol:
    """Build the action store selected by ACTION_STORE."""
    if settings.action_store is StoreBackend.MEMORY:
        logger.info("Using in-memory action store")
        return InMemoryActionRepository()

    if database is None:
        raise ConfigurationError("A DatabaseManager is required for the postgres action store")
    logger.info(f"Using PostgreSQL action store in schema '{settings.database_schema}'")
    return AsyncPGActionRepository(database, schema=settings.database_schema)


def create_app(
    settings: Optional[ActionTrackerSettings] = None,
    action_repository: Optional[ActionRepositoryProtocol] = None,
    service_registry: Optional[ServiceRegistryProtocol] = None
) -> FastAPI:
    """Create the action tracker API.

    Args:
        settings: Application settings, read from the environment if omitted
        action_repository: Store to use instead of the configured one
        service_registry: Registry to use instead of the configured one

    Returns:
        Configured FastAPI application
    """
    settings = settings or get_settings()

    database: Optional[DatabaseManager] = None
    if action_repository is None and settings.action_store is StoreBackend.POSTGRES:
        database = DatabaseManager.from_settings(settings)

    action_repository = action_repository or build_action_repository(settings, database)
    service_registry = service_registry or StaticServiceRegistry.from_settings(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan handler."""
        if database is not None:
            await database.create_pool()
            if settings.database_auto_migrate:
                await apply_schema(database, settings.database_schema)

        logger.info(f"{settings.app_name} {settings.app_version} started ({settings.environment})")

        yield

        if database is not None:
            await database.close_pool()
        logger.info(f"{settings.app_name} stopped")

    app = FastAPI(
        title="Action Tracker",
        version=settings.app_version,
        description="Tracks the lifecycle of actions performed by external services",
        debug=settings.debug,
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.database = database
    app.state.action_service = ActionService(action_repository, service_registry)

    register_exception_handlers(app, is_production=settings.is_production)

    app.include_router(actions_router)

    @app.get("/liveness", tags=["Health"])
    async def liveness():
        """Report that the process is up."""
        return {"status": "ok"}

    return app
