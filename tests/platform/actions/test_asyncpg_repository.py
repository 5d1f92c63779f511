"""Tests for the asyncpg action repository."""

import asyncpg
import pytest
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

from action_tracker.database import DatabaseManager
from action_tracker.platform.actions import (
    Action,
    ActionAlreadyClosedError,
    ActionFilter,
    ActionNotFoundError,
    ActionPatch,
    ActionPersistenceError,
    ActionStatus,
    AsyncPGActionRepository,
    SortOrder,
)

NOW = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)


def make_row(action_id=None, status="active", metadata='{"key": "value"}', closed_at=None):
    """Row shaped like an asyncpg Record for the action table."""
    return {
        "action_id": action_id or uuid4(),
        "service": "svc1",
        "state": 1,
        "action_status": status,
        "metadata": metadata,
        "closed_at": closed_at,
        "created_at": NOW,
        "updated_at": closed_at or NOW,
    }


@pytest.fixture
def connection():
    """Mock asyncpg connection."""
    conn = MagicMock()
    conn.fetchrow = AsyncMock()
    conn.fetch = AsyncMock(return_value=[])
    conn.fetchval = AsyncMock()
    conn.execute = AsyncMock()
    return conn


@pytest.fixture
def database(connection):
    """Mock DatabaseManager handing out the mock connection."""
    db = MagicMock(spec=DatabaseManager)

    @asynccontextmanager
    async def acquire():
        yield connection

    db.acquire = acquire
    db.transaction = acquire
    return db


@pytest.fixture
def pg_repository(database):
    return AsyncPGActionRepository(database, schema="action")


class TestAsyncPGCreate:
    """Test inserting actions."""

    @pytest.mark.asyncio
    async def test_create(self, pg_repository, connection):
        action = Action.open("svc1", 1, {"key": "value"})
        connection.fetchrow.return_value = make_row(action_id=action.id.value)

        stored = await pg_repository.create(action)

        query, *params = connection.fetchrow.call_args[0]
        assert "INSERT INTO action.action" in query
        assert "$7, $7" in query
        assert params[0] == action.id.value
        assert params[3] == "active"
        assert params[4] == '{"key": "value"}'
        assert stored.id == action.id
        assert stored.metadata == {"key": "value"}

    @pytest.mark.asyncio
    async def test_driver_error_becomes_persistence_error(self, pg_repository, connection):
        connection.fetchrow.side_effect = asyncpg.PostgresError("failed")

        with pytest.raises(ActionPersistenceError) as exc_info:
            await pg_repository.create(Action.open("svc1", 1))

        assert exc_info.value.message == "failed"
        assert exc_info.value.details["operation"] == "create"

    @pytest.mark.asyncio
    async def test_connection_error_becomes_persistence_error(self, pg_repository, connection):
        connection.fetch.side_effect = OSError("connection refused")

        with pytest.raises(ActionPersistenceError, match="connection refused"):
            await pg_repository.find(ActionFilter())


class TestAsyncPGFind:
    """Test listing queries."""

    @pytest.mark.asyncio
    async def test_unfiltered(self, pg_repository, connection):
        connection.fetch.return_value = [make_row(), make_row()]

        result = await pg_repository.find(ActionFilter())

        query, *params = connection.fetch.call_args[0]
        assert "WHERE" not in query
        assert "LIMIT" not in query
        assert "ORDER BY updated_at DESC, seq ASC" in query
        assert params == []
        assert isinstance(result, tuple)
        assert len(result) == 2

    @pytest.mark.asyncio
    async def test_all_criteria(self, pg_repository, connection):
        await pg_repository.find(ActionFilter.create(
            service="svc2",
            statuses=[ActionStatus.FAILED, ActionStatus.COMPLETED],
            sort=SortOrder.ASC,
            limit=5
        ))

        query, *params = connection.fetch.call_args[0]
        assert "service = $1" in query
        assert "action_status::text = ANY($2::text[])" in query
        assert "ORDER BY updated_at ASC, seq ASC" in query
        assert "LIMIT $3" in query
        assert params == ["svc2", ["completed", "failed"], 5]

    @pytest.mark.asyncio
    async def test_find_by_id_missing(self, pg_repository, connection, sample_action_id):
        connection.fetchrow.return_value = None

        assert await pg_repository.find_by_id(sample_action_id) is None

    @pytest.mark.asyncio
    async def test_row_with_decoded_metadata(self, pg_repository, connection, sample_action_id):
        connection.fetchrow.return_value = make_row(
            action_id=sample_action_id.value, metadata={"already": "decoded"}
        )

        action = await pg_repository.find_by_id(sample_action_id)

        assert action.id == sample_action_id
        assert action.metadata == {"already": "decoded"}


class TestAsyncPGUpdate:
    """Test conditional updates."""

    @pytest.mark.asyncio
    async def test_close_is_conditional_on_active(self, pg_repository, connection, sample_action_id):
        connection.fetchrow.return_value = make_row(
            action_id=sample_action_id.value, status="completed", closed_at=NOW
        )

        updated = await pg_repository.update(
            sample_action_id, ActionPatch.create(status=ActionStatus.COMPLETED)
        )

        query, *params = connection.fetchrow.call_args[0]
        assert "WHERE action_id = $1 AND action_status = 'active'" in query
        assert "closed_at = $2" in query
        assert "metadata" not in query.split("RETURNING")[0]
        assert params[0] == sample_action_id.value
        assert params[2] == "completed"
        assert updated.status == ActionStatus.COMPLETED
        assert updated.closed_at == updated.updated_at

    @pytest.mark.asyncio
    async def test_metadata_only_does_not_close(self, pg_repository, connection, sample_action_id):
        connection.fetchrow.return_value = make_row(action_id=sample_action_id.value)

        await pg_repository.update(sample_action_id, ActionPatch.create(metadata=None))

        query, *params = connection.fetchrow.call_args[0]
        assert "metadata = $3::jsonb" in query
        assert "closed_at" not in query.split("RETURNING")[0]
        assert params[2] is None

    @pytest.mark.asyncio
    async def test_missing_row(self, pg_repository, connection, sample_action_id):
        connection.fetchrow.return_value = None
        connection.fetchval.return_value = None

        with pytest.raises(ActionNotFoundError):
            await pg_repository.update(sample_action_id, ActionPatch.create(status=ActionStatus.FAILED))

    @pytest.mark.asyncio
    async def test_lost_race(self, pg_repository, connection, sample_action_id):
        connection.fetchrow.return_value = None
        connection.fetchval.return_value = "canceled"

        with pytest.raises(ActionAlreadyClosedError) as exc_info:
            await pg_repository.update(sample_action_id, ActionPatch.create(status=ActionStatus.FAILED))

        assert exc_info.value.status == ActionStatus.CANCELED


class TestAsyncPGClear:
    """Test administrative reset."""

    @pytest.mark.asyncio
    async def test_clear(self, pg_repository, connection):
        await pg_repository.clear()

        connection.execute.assert_called_once_with("DELETE FROM action.action")
