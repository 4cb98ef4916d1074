"""Action notifications: the data-change events that drive publishing."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ActionType(str, Enum):
    """Kinds of resource actions."""

    create = "create"
    read = "read"
    update = "update"
    destroy = "destroy"
    action = "action"


class Action(BaseModel):
    """The action that produced a notification."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Action name (e.g. 'publish_post')")
    type: ActionType = Field(..., description="Action type")


class Notification(BaseModel):
    """A single changed record, as handed to the notifier."""

    model_config = ConfigDict(frozen=True)

    resource_type: str = Field(..., min_length=1, description="Kind of entity that changed")
    action: Action
    data: dict[str, Any] = Field(
        default_factory=dict,
        description="Record as it exists after the change",
    )
    previous_data: dict[str, Any] | None = Field(
        default=None,
        description="Record before the change (updates only)",
    )
    tenant: Any = Field(default=None, description="Active tenant, if any")
    metadata: dict[str, Any] = Field(default_factory=dict)

    @field_validator("data", mode="before")
    @classmethod
    def _none_is_empty(cls, v: Any) -> Any:
        return {} if v is None else v

    def value_before(self, field: str) -> Any:
        if self.previous_data is None:
            return None
        return self.previous_data.get(field)

    def value_after(self, field: str) -> Any:
        return self.data.get(field)
