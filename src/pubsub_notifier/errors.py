"""Exception hierarchy for the notifier."""

from __future__ import annotations


class PubSubError(Exception):
    """Base class for all notifier errors."""


class ConfigurationError(PubSubError):
    """Raised when publication configuration cannot be loaded."""


class TemplateError(PubSubError, ValueError):
    """Raised for a topic template node of an unrecognised shape."""
