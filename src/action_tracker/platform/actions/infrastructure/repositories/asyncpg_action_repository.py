"""AsyncPG implementation of ActionRepositoryProtocol."""

import asyncio
import json
import logging
from contextlib import asynccontextmanager
from typing import Any, List, Optional, Sequence
from uuid import UUID

import asyncpg

from .....database import ACTION_TABLE, DatabaseManager
from .....utils import utc_now
from ...application.protocols import ActionRepositoryProtocol
from ...core.entities import Action
from ...core.exceptions import (
    ActionAlreadyClosedError,
    ActionNotFoundError,
    ActionPersistenceError,
)
from ...core.value_objects import ActionFilter, ActionId, ActionPatch, ActionStatus

logger = logging.getLogger(__name__)

ACTION_COLUMNS = (
    "action_id, service, state, action_status, metadata, closed_at, created_at, updated_at"
)

# Failures that mean the database could not complete the operation
PERSISTENCE_ERRORS = (
    asyncpg.PostgresError,
    asyncpg.InterfaceError,
    asyncio.TimeoutError,
    OSError,
)


class AsyncPGActionRepository(ActionRepositoryProtocol):
    """
    PostgreSQL implementation of ActionRepositoryProtocol using asyncpg.

    Updates are conditional on the stored status still being active and
    run in a transaction together with the follow-up lookup that explains
    a rejected write.
    """

    def __init__(self, database: DatabaseManager, schema: str = "action"):
        self.database = database
        self.schema = schema

    @property
    def table(self) -> str:
        return f"{self.schema}.{ACTION_TABLE}"

    @asynccontextmanager
    async def _persistence(self, operation: str, action_id: Any = None):
        """Translate driver failures into ActionPersistenceError."""
        try:
            yield
        except PERSISTENCE_ERRORS as e:
            logger.error(f"Action {operation} failed: {e}")
            raise ActionPersistenceError(
                str(e) or type(e).__name__,
                operation=operation,
                action_id=action_id,
                original_error=e
            ) from e

    async def create(self, action: Action) -> Action:
        """Persist a new action with created_at equal to updated_at."""
        query = f"""
            INSERT INTO {self.table} (
                action_id, service, state, action_status, metadata,
                closed_at, created_at, updated_at
            ) VALUES ($1, $2, $3, $4, $5::jsonb, $6, $7, $7)
            RETURNING {ACTION_COLUMNS}
        """
        now = utc_now()

        async with self._persistence("create", action.id):
            async with self.database.acquire() as conn:
                row = await conn.fetchrow(
                    query,
                    action.id.value,
                    action.service,
                    action.state,
                    action.status.value,
                    self._dump_metadata(action.metadata),
                    action.closed_at,
                    now
                )

        return self._row_to_action(row)

    async def find(self, action_filter: ActionFilter) -> Sequence[Action]:
        """List actions matching the filter ordered by updated_at."""
        where_conditions = []
        params: List[Any] = []
        param_count = 0

        if action_filter.service is not None:
            param_count += 1
            where_conditions.append(f"service = ${param_count}")
            params.append(action_filter.service)

        if action_filter.statuses is not None:
            param_count += 1
            where_conditions.append(f"action_status::text = ANY(${param_count}::text[])")
            params.append(sorted(status.value for status in action_filter.statuses))

        where_clause = f"WHERE {' AND '.join(where_conditions)}" if where_conditions else ""

        limit_clause = ""
        if action_filter.limit is not None:
            param_count += 1
            limit_clause = f"LIMIT ${param_count}"
            params.append(action_filter.limit)

        query = f"""
            SELECT {ACTION_COLUMNS} FROM {self.table}
            {where_clause}
            ORDER BY updated_at {action_filter.sort.sql}, seq ASC
            {limit_clause}
        """

        async with self._persistence("find"):
            async with self.database.acquire() as conn:
                rows = await conn.fetch(query, *params)

        return tuple(self._row_to_action(row) for row in rows)

    async def find_by_id(self, action_id: ActionId) -> Optional[Action]:
        """Get action by ID."""
        query = f"SELECT {ACTION_COLUMNS} FROM {self.table} WHERE action_id = $1"

        async with self._persistence("find_by_id", action_id):
            async with self.database.acquire() as conn:
                row = await conn.fetchrow(query, action_id.value)

        return self._row_to_action(row) if row else None

    async def update(self, action_id: ActionId, patch: ActionPatch) -> Action:
        """Apply a patch to an action that is still active."""
        now = utc_now()
        set_clauses = ["updated_at = $2"]
        params: List[Any] = [action_id.value, now]
        param_count = 2

        if patch.status is not None:
            param_count += 1
            set_clauses.append(f"action_status = ${param_count}")
            params.append(patch.status.value)
            if patch.closes:
                set_clauses.append("closed_at = $2")

        if patch.has_metadata:
            param_count += 1
            set_clauses.append(f"metadata = ${param_count}::jsonb")
            params.append(self._dump_metadata(patch.metadata))

        query = f"""
            UPDATE {self.table}
            SET {', '.join(set_clauses)}
            WHERE action_id = $1 AND action_status = 'active'
            RETURNING {ACTION_COLUMNS}
        """

        async with self._persistence("update", action_id):
            async with self.database.transaction() as conn:
                row = await conn.fetchrow(query, *params)
                if row is None:
                    current_status = await conn.fetchval(
                        f"SELECT action_status FROM {self.table} WHERE action_id = $1",
                        action_id.value
                    )
                    if current_status is None:
                        raise ActionNotFoundError(action_id)
                    raise ActionAlreadyClosedError(action_id, ActionStatus(current_status))

        return self._row_to_action(row)

    async def clear(self) -> None:
        """Remove every action."""
        async with self._persistence("clear"):
            async with self.database.acquire() as conn:
                await conn.execute(f"DELETE FROM {self.table}")
        logger.warning(f"Cleared all actions from {self.table}")

    @staticmethod
    def _dump_metadata(metadata: Optional[dict]) -> Optional[str]:
        return json.dumps(metadata) if metadata is not None else None

    def _row_to_action(self, row: asyncpg.Record) -> Action:
        """Convert database row to Action entity."""
        metadata = row['metadata']
        if isinstance(metadata, str):
            metadata = json.loads(metadata)

        return Action(
            id=ActionId(UUID(str(row['action_id']))),
            service=row['service'],
            state=row['state'],
            status=ActionStatus(row['action_status']),
            metadata=metadata,
            closed_at=row['closed_at'],
            created_at=row['created_at'],
            updated_at=row['updated_at']
        )
