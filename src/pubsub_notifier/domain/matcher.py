"""RuleMatcher: decides which publications apply to a notification."""

from __future__ import annotations

from collections.abc import Iterable

from .notification import Notification
from .publication import Publication


class RuleMatcher:
    """Match publications against a notification's action."""

    def matches(self, rule: Publication, notification: Notification) -> bool:
        action = notification.action
        if rule.action is not None:
            if rule.action != action.name:
                return False
            return rule.type is None or rule.type == action.type
        return rule.type == action.type

    def select(
        self, rules: Iterable[Publication], notification: Notification
    ) -> list[Publication]:
        """Return every matching rule, in configuration order."""
        return [rule for rule in rules if self.matches(rule, notification)]
