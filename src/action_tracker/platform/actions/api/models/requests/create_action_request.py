"""Create action request model."""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class CreateActionRequest(BaseModel):
    """Request model for creating a new action."""

    model_config = ConfigDict(extra="forbid")

    service: str = Field(..., min_length=1, description="Name of the service performing the action")
    state: int = Field(..., strict=True, description="Caller defined state of the action")
    metadata: Optional[Dict[str, Any]] = Field(None, description="Free form JSON object")
