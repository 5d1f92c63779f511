"""Utility helpers for action-tracker."""

from .datetime import ensure_utc, format_iso8601, utc_now
from .uuid import generate_uuid_v7

__all__ = [
    "ensure_utc",
    "format_iso8601",
    "generate_uuid_v7",
    "utc_now",
]
