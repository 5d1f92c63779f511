"""Database connection management and schema for action-tracker."""

from .connection import DatabaseManager
from .schema import ACTION_STATUS_ENUM, ACTION_TABLE, apply_schema, build_schema_statements

__all__ = [
    "ACTION_STATUS_ENUM",
    "ACTION_TABLE",
    "DatabaseManager",
    "apply_schema",
    "build_schema_statements",
]
