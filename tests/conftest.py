"""Pytest configuration and fixtures for action-tracker tests."""

import pytest
from datetime import datetime, timedelta, timezone
from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

from fastapi.testclient import TestClient

from action_tracker.app import create_app
from action_tracker.config import ActionTrackerSettings, StoreBackend
from action_tracker.platform.actions import (
    ActionId,
    ActionService,
    InMemoryActionRepository,
    StaticServiceRegistry,
)
from action_tracker.platform.actions.application.protocols import ActionRepositoryProtocol

REGISTERED_SERVICES = ("svc1", "svc2", "svc3")


class FakeClock:
    """Callable standing in for utc_now; every call advances by ``step``."""

    def __init__(self, start=None, step=timedelta(seconds=1)):
        self.current = start or datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)
        self.step = step

    def __call__(self) -> datetime:
        value = self.current
        self.current = self.current + self.step
        return value

    def freeze(self) -> None:
        self.step = timedelta(0)


@pytest.fixture
def clock(monkeypatch):
    """Deterministic clock for entity updates and the in-memory store."""
    fake = FakeClock()
    monkeypatch.setattr(
        "action_tracker.platform.actions.core.entities.action.utc_now", fake
    )
    monkeypatch.setattr(
        "action_tracker.platform.actions.infrastructure.repositories.in_memory_action_repository.utc_now",
        fake
    )
    return fake


@pytest.fixture
def settings():
    """Settings wired for the in-memory store."""
    return ActionTrackerSettings(
        _env_file=None,
        action_store=StoreBackend.MEMORY,
        service_registry_services=",".join(REGISTERED_SERVICES),
        environment="test",
    )


@pytest.fixture
def repository():
    """Empty in-memory action store."""
    return InMemoryActionRepository()


@pytest.fixture
def registry():
    """Registry recognizing the test services."""
    return StaticServiceRegistry(REGISTERED_SERVICES)


@pytest.fixture
def action_service(repository, registry):
    """Action service over the in-memory store."""
    return ActionService(repository, registry)


@pytest.fixture
def mock_action_repository():
    """Mock action repository for testing."""
    mock_repo = MagicMock(spec=ActionRepositoryProtocol)
    mock_repo.create = AsyncMock()
    mock_repo.find = AsyncMock(return_value=())
    mock_repo.find_by_id = AsyncMock(return_value=None)
    mock_repo.update = AsyncMock()
    mock_repo.clear = AsyncMock()
    return mock_repo


@pytest.fixture
def sample_action_id():
    """Sample action ID for testing."""
    return ActionId(uuid4())


@pytest.fixture
def app(settings, repository, registry):
    """Create FastAPI test app."""
    return create_app(settings=settings, action_repository=repository, service_registry=registry)


@pytest.fixture
def client(app):
    """Create test client."""
    return TestClient(app)
