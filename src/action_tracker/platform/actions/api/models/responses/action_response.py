"""Action response model."""

from datetime import datetime
from typing import Any, Dict, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_serializer
from pydantic.alias_generators import to_camel

from ......utils import format_iso8601
from ....core.entities import Action
from ....core.value_objects import ActionStatus


class ActionResponse(BaseModel):
    """Response model for action data."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    action_id: UUID = Field(..., description="Action ID")
    service: str = Field(..., description="Service that owns the action")
    state: int = Field(..., description="Caller defined state")
    status: ActionStatus = Field(..., description="Lifecycle status")
    metadata: Optional[Dict[str, Any]] = Field(None, description="Free form JSON object")
    closed_at: Optional[datetime] = Field(None, description="When the action left the active status")
    created_at: datetime = Field(..., description="Creation timestamp")
    updated_at: datetime = Field(..., description="Last update timestamp")

    @field_serializer("closed_at", "created_at", "updated_at")
    def serialize_timestamp(self, value: Optional[datetime]) -> Optional[str]:
        return format_iso8601(value)

    @classmethod
    def from_domain(cls, action: Action) -> "ActionResponse":
        """Create response from domain action."""
        return cls(
            action_id=action.id.value,
            service=action.service,
            state=action.state,
            status=action.status,
            metadata=action.metadata,
            closed_at=action.closed_at,
            created_at=action.created_at,
            updated_at=action.updated_at
        )
