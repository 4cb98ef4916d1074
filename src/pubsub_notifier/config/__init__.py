"""Runtime settings and publication rule loading."""

from .loader import load_config, parse_config
from .runtime import RuntimeSettings, get_settings

__all__ = ["RuntimeSettings", "get_settings", "load_config", "parse_config"]
