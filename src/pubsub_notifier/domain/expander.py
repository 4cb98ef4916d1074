"""TemplateExpander: every combination of values a template can take."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from ..errors import TemplateError
from .notification import ActionType, Notification
from .resolver import ValueResolver
from .template import NODE_TYPES, Alternatives


class TemplateExpander:
    """Expand a template into ordered segment sequences.

    Each node multiplies the branches by its number of candidate values.
    A node with no candidates prunes every branch through it, and an
    ``Alternatives`` node splices each option into its own position.
    """

    def __init__(self, resolver: ValueResolver | None = None) -> None:
        self._resolver = resolver or ValueResolver()

    def expand(
        self,
        nodes: Sequence[Any],
        notification: Notification,
        action_type: ActionType | None = None,
    ) -> list[tuple[Any, ...]]:
        action_type = action_type or notification.action.type
        return self._expand(tuple(nodes), notification, action_type)

    def _expand(
        self,
        nodes: tuple[Any, ...],
        notification: Notification,
        action_type: ActionType,
    ) -> list[tuple[Any, ...]]:
        if not nodes:
            return [()]

        head, rest = nodes[0], nodes[1:]
        if not isinstance(head, NODE_TYPES):
            raise TemplateError(f"unrecognised template node: {head!r}")

        if isinstance(head, Alternatives):
            sequences: list[tuple[Any, ...]] = []
            for option in head.options:
                sequences.extend(self._expand((option, *rest), notification, action_type))
            return sequences

        candidates = self._resolver.resolve(head, notification, action_type)
        if not candidates:
            return []

        tails = self._expand(rest, notification, action_type)
        return [(candidate, *tail) for candidate in candidates for tail in tails]
