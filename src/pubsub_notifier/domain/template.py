"""Topic template nodes.

A topic template is an ordered sequence of nodes. Each node is one of a
closed set of variants, discriminated on ``kind``:

- ``LiteralSegment``: a fixed string segment.
- ``FieldRef``: the value of a record field.
- ``TenantRef``: the tenant active for the change.
- ``SkipSegment``: occupies a position but renders nothing; only useful
  inside ``Alternatives`` to produce the pattern without that segment.
- ``Alternatives``: every option is tried in this position.

Raw configuration forms are turned into nodes by :func:`parse_node`.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..errors import TemplateError


class _Node(BaseModel):
    model_config = ConfigDict(frozen=True)


class LiteralSegment(_Node):
    """A fixed topic segment."""

    kind: Literal["literal"] = "literal"
    value: str


class FieldRef(_Node):
    """Reference to a field of the changed record."""

    kind: Literal["field"] = "field"
    name: str = Field(..., min_length=1, description="Record field name")


class TenantRef(_Node):
    """Placeholder for the notification tenant."""

    kind: Literal["tenant"] = "tenant"


class SkipSegment(_Node):
    """Placeholder that renders to nothing."""

    kind: Literal["skip"] = "skip"


class Alternatives(_Node):
    """A list of nodes, each tried in turn at this position."""

    kind: Literal["alternatives"] = "alternatives"
    options: tuple[TemplateNode, ...] = Field(..., min_length=1)

    @field_validator("options", mode="before")
    @classmethod
    def _parse_options(cls, v: Any) -> Any:
        if isinstance(v, (list, tuple)):
            return tuple(parse_node(item) for item in v)
        return v


TemplateNode = Annotated[
    Union[LiteralSegment, FieldRef, TenantRef, SkipSegment, Alternatives],
    Field(discriminator="kind"),
]

Alternatives.model_rebuild()

NODE_TYPES = (LiteralSegment, FieldRef, TenantRef, SkipSegment, Alternatives)

TENANT = TenantRef()
SKIP = SkipSegment()


def field_ref(name: str) -> FieldRef:
    return FieldRef(name=name)


def _from_kind(raw: dict[str, Any]) -> _Node:
    kind = raw["kind"]
    if kind == "tenant":
        return TENANT
    if kind == "skip":
        return SKIP
    try:
        if kind == "literal":
            return LiteralSegment(value=raw.get("value"))
        if kind == "field":
            return FieldRef(name=raw.get("name"))
        if kind == "alternatives":
            return Alternatives(options=raw.get("options") or ())
    except ValidationError as e:
        raise TemplateError(f"invalid {kind!r} template node: {raw!r}") from e
    raise TemplateError(f"unknown template node kind: {kind!r}")


def parse_node(raw: Any) -> _Node:
    """Turn one raw template element into a node.

    Accepted forms: an existing node, a string (literal), ``None`` or
    ``{"skip": true}`` (skip), ``{"field": name}``, ``{"tenant": true}``,
    a list (alternatives), or the ``{"kind": ...}`` dump of any node.
    """
    if isinstance(raw, NODE_TYPES):
        return raw
    if raw is None:
        return SKIP
    if isinstance(raw, str):
        return LiteralSegment(value=raw)
    if isinstance(raw, (list, tuple)):
        if not raw:
            raise TemplateError("a list of alternatives must not be empty")
        return Alternatives(options=tuple(parse_node(item) for item in raw))
    if isinstance(raw, dict):
        if "kind" in raw:
            return _from_kind(raw)
        if set(raw) == {"field"} and isinstance(raw["field"], str):
            return _from_kind({"kind": "field", "name": raw["field"]})
        if raw == {"tenant": True}:
            return TENANT
        if raw == {"skip": True}:
            return SKIP
    raise TemplateError(f"unrecognised template node: {raw!r}")


def parse_template(raw: Any) -> str | tuple[_Node, ...]:
    """Parse a whole topic template.

    A bare string stays a string (the literal fast path); a list becomes a
    tuple of nodes.
    """
    if isinstance(raw, str):
        return raw
    if isinstance(raw, (list, tuple)):
        if not raw:
            raise TemplateError("topic template must not be empty")
        return tuple(parse_node(item) for item in raw)
    raise TemplateError(f"topic template must be a string or a list, got {type(raw).__name__}")
