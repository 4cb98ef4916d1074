"""Composition root: the one place a notifier is put together.

Call ``build_notifier()`` to get a fully-constructed ``PubSubNotifier``.
"""

from __future__ import annotations

from .adapters.logging_broadcaster import LoggingBroadcaster
from .config.loader import load_config
from .config.runtime import RuntimeSettings, get_settings
from .domain.publication import NotifierConfig
from .observability import get_logger
from .ports.broadcaster import Broadcaster
from .services.notifier import PubSubNotifier


def build_notifier(
    config: NotifierConfig | None = None,
    broadcaster: Broadcaster | None = None,
    settings: RuntimeSettings | None = None,
) -> PubSubNotifier:
    """Construct a PubSubNotifier.

    Publication rules default to ``settings.rules_path`` and the sink
    defaults to a ``LoggingBroadcaster``.
    """
    settings = settings or get_settings()
    config = config if config is not None else load_config(settings.rules_path)
    return PubSubNotifier(
        config=config,
        broadcaster=broadcaster or LoggingBroadcaster(),
        typed_envelope=settings.typed_envelope,
        logger=get_logger(),
    )
