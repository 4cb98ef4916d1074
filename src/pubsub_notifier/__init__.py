"""Rule-driven topic generation for pub/sub notifications."""

from .domain import (
    SKIP,
    TENANT,
    Action,
    ActionType,
    Alternatives,
    FieldRef,
    Notification,
    NotifierConfig,
    Publication,
    PubSubConfig,
    field_ref,
)
from .errors import ConfigurationError, PubSubError, TemplateError
from .services.notifier import PubSubNotifier

__version__ = "0.1.0"
__all__ = [
    "Action",
    "ActionType",
    "Alternatives",
    "ConfigurationError",
    "FieldRef",
    "Notification",
    "NotifierConfig",
    "Publication",
    "PubSubConfig",
    "PubSubError",
    "PubSubNotifier",
    "SKIP",
    "TENANT",
    "TemplateError",
    "field_ref",
]
