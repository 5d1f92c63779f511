"""Update action request model."""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ....core.value_objects import ActionPatch, ActionStatus


class UpdateActionRequest(BaseModel):
    """Request model for updating an active action.

    ``metadata`` replaces the stored metadata wholesale, an explicit null
    clears it. At least one of the two fields must be present.
    """

    model_config = ConfigDict(extra="forbid")

    status: Optional[ActionStatus] = Field(None, description="New status, closing the action unless active")
    metadata: Optional[Dict[str, Any]] = Field(None, description="Replacement metadata")

    @model_validator(mode="after")
    def validate_not_empty(self) -> "UpdateActionRequest":
        """Reject bodies that would change nothing."""
        if self.status is None and "metadata" not in self.model_fields_set:
            raise ValueError("should NOT have fewer than 1 properties")
        return self

    def to_patch(self) -> ActionPatch:
        """Convert to the domain patch, keeping track of whether metadata was sent."""
        if "metadata" in self.model_fields_set:
            return ActionPatch.create(status=self.status, metadata=self.metadata)
        return ActionPatch.create(status=self.status)
