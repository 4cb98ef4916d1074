"""Publication rules and per-resource pub/sub configuration."""

from __future__ import annotations

from typing import Any, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .notification import ActionType
from .template import TemplateNode, parse_template


class Publication(BaseModel):
    """Maps an action (by name or by type) to a topic template.

    ``topic`` is either a bare string, published as-is, or a sequence of
    template nodes expanded against each notification.
    """

    model_config = ConfigDict(frozen=True)

    action: str | None = Field(default=None, description="Exact action name to publish")
    type: ActionType | None = Field(default=None, description="Action type to publish")
    topic: Union[str, tuple[TemplateNode, ...]] = Field(..., description="Topic template")
    event: str | None = Field(default=None, description="Event name; defaults to the action name")
    dispatcher_args: tuple[Any, ...] = Field(
        default=(),
        description="Extra positional arguments passed to every broadcast",
    )

    @field_validator("topic", mode="before")
    @classmethod
    def _parse_topic(cls, v: Any) -> Any:
        return parse_template(v)

    @field_validator("dispatcher_args", mode="before")
    @classmethod
    def _none_is_empty(cls, v: Any) -> Any:
        return () if v is None else v

    @model_validator(mode="after")
    def _requires_filter(self) -> Publication:
        if self.action is None and self.type is None:
            raise ValueError("publication requires an action or a type")
        return self

    @classmethod
    def publish(cls, action: str, topic: Any, **options: Any) -> Publication:
        """Publish a single named action."""
        return cls(action=action, topic=topic, **options)

    @classmethod
    def publish_all(cls, type: ActionType | str, topic: Any, **options: Any) -> Publication:
        """Publish every action of the given type."""
        return cls(type=type, topic=topic, **options)

    @property
    def is_literal(self) -> bool:
        return isinstance(self.topic, str)


class PubSubConfig(BaseModel):
    """Pub/sub settings for one resource."""

    model_config = ConfigDict(frozen=True)

    prefix: str | None = Field(
        default=None,
        description="Prefix for every topic, e.g. 'post' turns 'created' into 'post:created'",
    )
    name: str | None = Field(
        default=None,
        description=(
            "Named pub/sub transport. When set it is passed as the first broadcast "
            "argument and the payload is sent wrapped in an envelope"
        ),
    )
    publications: tuple[Publication, ...] = Field(default=())


class NotifierConfig(BaseModel):
    """Pub/sub configuration for every resource, keyed by resource type."""

    model_config = ConfigDict(frozen=True)

    resources: dict[str, PubSubConfig] = Field(default_factory=dict)

    def for_resource(self, resource_type: str) -> PubSubConfig | None:
        return self.resources.get(resource_type)
