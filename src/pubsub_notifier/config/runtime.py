"""Pydantic-based runtime settings for the notifier.

Loads from environment variables prefixed ``PUBSUB_`` (with optional
.env file).
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


class RuntimeSettings(BaseSettings):
    """All notifier configuration, validated at startup."""

    model_config = {"env_prefix": "PUBSUB_", "env_file": ".env", "env_file_encoding": "utf-8"}

    # --- Publications ---
    rules_path: str = Field(
        default="config/pubsub.json",
        description="JSON file with the per-resource publication rules",
    )

    # --- Transport ---
    typed_envelope: bool = Field(
        default=True,
        description=(
            "Envelope shape for named transports: a BroadcastEnvelope model "
            "when True, a plain dict when False"
        ),
    )

    # --- Logging ---
    log_level: str = Field(default="INFO", description="Level for the pubsub_notifier logger")

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, v: str) -> str:
        level = v.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {sorted(_LOG_LEVELS)}, got {v!r}")
        return level


@lru_cache(maxsize=1)
def get_settings() -> RuntimeSettings:
    """Return the singleton RuntimeSettings (cached after first call)."""
    return RuntimeSettings()
