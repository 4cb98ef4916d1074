"""Domain layer: notifications, publication rules and topic expansion."""

from .expander import TemplateExpander
from .matcher import RuleMatcher
from .notification import Action, ActionType, Notification
from .publication import NotifierConfig, Publication, PubSubConfig
from .renderer import DELIMITER, TopicRenderer
from .resolver import OMIT, ValueResolver
from .template import (
    SKIP,
    TENANT,
    Alternatives,
    FieldRef,
    LiteralSegment,
    SkipSegment,
    TemplateNode,
    TenantRef,
    field_ref,
    parse_node,
    parse_template,
)

__all__ = [
    "Action",
    "ActionType",
    "Alternatives",
    "DELIMITER",
    "FieldRef",
    "LiteralSegment",
    "NotifierConfig",
    "Notification",
    "OMIT",
    "Publication",
    "PubSubConfig",
    "RuleMatcher",
    "SKIP",
    "SkipSegment",
    "TENANT",
    "TemplateExpander",
    "TemplateNode",
    "TenantRef",
    "TopicRenderer",
    "ValueResolver",
    "field_ref",
    "parse_node",
    "parse_template",
]
