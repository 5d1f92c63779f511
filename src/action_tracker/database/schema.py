"""
Schema DDL for the action table.

Every statement is idempotent so the schema can be applied on each
startup when ``DATABASE_AUTO_MIGRATE`` is enabled.
"""
import logging
from typing import List

from .connection import DatabaseManager

logger = logging.getLogger(__name__)

ACTION_STATUS_ENUM = "action_action_status_enum"
ACTION_TABLE = "action"


def build_schema_statements(schema: str) -> List[str]:
    """Build the DDL statements for the given schema name.

    Args:
        schema: Target schema, validated as an identifier by the settings

    Returns:
        Ordered list of SQL statements
    """
    return [
        f"CREATE SCHEMA IF NOT EXISTS {schema}",
        f"""
        DO $$ BEGIN
            CREATE TYPE {schema}.{ACTION_STATUS_ENUM} AS ENUM ('active', 'completed', 'failed', 'canceled');
        EXCEPTION
            WHEN duplicate_object THEN NULL;
        END $$
        """,
        f"""
        CREATE TABLE IF NOT EXISTS {schema}.{ACTION_TABLE} (
            action_id uuid NOT NULL,
            service character varying NOT NULL,
            state integer NOT NULL,
            action_status {schema}.{ACTION_STATUS_ENUM} NOT NULL,
            metadata jsonb,
            closed_at timestamptz,
            created_at timestamptz NOT NULL DEFAULT now(),
            updated_at timestamptz NOT NULL DEFAULT now(),
            seq bigint GENERATED ALWAYS AS IDENTITY,
            CONSTRAINT action_pkey PRIMARY KEY (action_id),
            CONSTRAINT action_closed_at_matches_status
                CHECK ((action_status = 'active') = (closed_at IS NULL))
        )
        """,
        f"CREATE INDEX IF NOT EXISTS action_service_idx ON {schema}.{ACTION_TABLE} (service)",
        f"CREATE INDEX IF NOT EXISTS action_updated_at_idx ON {schema}.{ACTION_TABLE} (updated_at, seq)",
    ]


async def apply_schema(database: DatabaseManager, schema: str) -> None:
    """Create the action schema, enum type, table and indexes if missing."""
    async with database.transaction() as connection:
        for statement in build_schema_statements(schema):
            await connection.execute(statement)
    logger.info(f"Action schema '{schema}' is up to date")
