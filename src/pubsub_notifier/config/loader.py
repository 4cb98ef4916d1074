"""Load publication rules from JSON files."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from ..domain.publication import NotifierConfig
from ..errors import ConfigurationError


def parse_config(raw: Any) -> NotifierConfig:
    """Validate already-decoded configuration data."""
    try:
        return NotifierConfig.model_validate(raw)
    except ValidationError as e:
        raise ConfigurationError(f"invalid pub/sub configuration: {e}") from e


def load_config(path: str | Path) -> NotifierConfig:
    """Read and validate a configuration file.

    The file holds ``{"resources": {<resource_type>: {"prefix": ...,
    "name": ..., "publications": [...]}}}``.
    """
    path = Path(path)
    if not path.exists():
        raise ConfigurationError(f"configuration file not found: {path}")
    try:
        with open(path, encoding="utf-8") as f:
            raw = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"{path} is not valid JSON: {e}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigurationError(f"cannot read configuration file {path}: {e}") from e
    return parse_config(raw)
