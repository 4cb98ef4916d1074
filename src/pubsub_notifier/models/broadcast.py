"""Broadcast payloads and dispatch records."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from ..domain.notification import Notification


class BroadcastEnvelope(BaseModel):
    """Payload sent over a named pub/sub transport."""

    model_config = ConfigDict(frozen=True)

    topic: str = Field(..., description="Topic without the resource prefix")
    event: str = Field(..., description="Event name")
    payload: Notification


def plain_envelope(topic: str, event: str, notification: Notification) -> dict[str, Any]:
    return {"topic": topic, "event": event, "payload": notification}


@dataclass(frozen=True)
class Dispatch:
    """One broadcast performed for a notification."""

    topic: str
    event: str
    args: tuple[Any, ...]
