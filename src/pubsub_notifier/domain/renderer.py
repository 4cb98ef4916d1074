"""TopicRenderer: turns segment sequences into topic strings."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from .expander import TemplateExpander
from .notification import Notification
from .publication import Publication
from .resolver import OMIT

DELIMITER = ":"


class TopicRenderer:
    """Join expanded segments into topics and apply the resource prefix."""

    def __init__(self, expander: TemplateExpander | None = None) -> None:
        self._expander = expander or TemplateExpander()

    def join(self, sequence: Iterable[Any]) -> str:
        return DELIMITER.join(str(segment) for segment in sequence if segment is not OMIT)

    def apply_prefix(self, topic: str, prefix: str | None) -> str:
        if not prefix:
            return topic
        return f"{prefix}{DELIMITER}{topic}"

    def render(self, sequences: Iterable[Iterable[Any]], prefix: str | None = None) -> list[str]:
        """Render sequences to deduplicated, prefixed topics."""
        topics = (self.apply_prefix(self.join(sequence), prefix) for sequence in sequences)
        return list(dict.fromkeys(topics))

    def topics_for(self, publication: Publication, notification: Notification) -> list[str]:
        """Deduplicated, un-prefixed topics a publication yields for a notification."""
        if publication.is_literal:
            return [publication.topic]
        sequences = self._expander.expand(publication.topic, notification)
        return self.render(sequences)
