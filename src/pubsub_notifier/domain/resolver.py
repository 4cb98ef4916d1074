"""ValueResolver: candidate values for a single template node."""

from __future__ import annotations

from typing import Any

from ..errors import TemplateError
from .notification import ActionType, Notification
from .template import FieldRef, LiteralSegment, SkipSegment, TenantRef


class _Omit:
    """Marker for a segment that is present in the template but renders nothing."""

    _instance: _Omit | None = None

    def __new__(cls) -> _Omit:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "OMIT"


OMIT = _Omit()


def _distinct(values: list[Any]) -> list[Any]:
    """Drop None and repeated values, keeping first-seen order.

    Equal values of different types (1 and 1.0) are both kept.
    """
    out: list[Any] = []
    for value in values:
        if value is None:
            continue
        if any(type(seen) is type(value) and seen == value for seen in out):
            continue
        out.append(value)
    return out


class ValueResolver:
    """Resolve a node to the values it can take for one notification.

    An empty result prunes the branch. ``[OMIT]`` keeps the branch but
    contributes no segment.
    """

    def resolve(
        self,
        node: Any,
        notification: Notification,
        action_type: ActionType | None = None,
    ) -> list[Any]:
        action_type = action_type or notification.action.type
        if isinstance(node, LiteralSegment):
            return [node.value]
        if isinstance(node, FieldRef):
            return self.resolve_field(node.name, notification, action_type)
        if isinstance(node, TenantRef):
            return _distinct([notification.tenant])
        if isinstance(node, SkipSegment):
            return [OMIT]
        raise TemplateError(f"cannot resolve template node: {node!r}")

    def resolve_field(
        self, field: str, notification: Notification, action_type: ActionType
    ) -> list[Any]:
        if action_type == ActionType.update:
            return _distinct([notification.value_before(field), notification.value_after(field)])
        return _distinct([notification.value_after(field)])
