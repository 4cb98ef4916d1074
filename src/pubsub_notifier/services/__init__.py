"""Application services."""

from .notifier import PubSubNotifier

__all__ = ["PubSubNotifier"]
