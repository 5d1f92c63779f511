"""Create action response model."""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from ....core.value_objects import ActionId


class CreateActionResponse(BaseModel):
    """Response model returned after an action is created."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    action_id: UUID = Field(..., description="ID assigned to the new action")

    @classmethod
    def from_domain(cls, action_id: ActionId) -> "CreateActionResponse":
        return cls(action_id=action_id.value)
