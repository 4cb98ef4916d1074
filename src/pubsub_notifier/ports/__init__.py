"""Ports: interfaces the notifier depends on."""

from .broadcaster import Broadcaster

__all__ = ["Broadcaster"]
