"""Broadcaster adapters."""

from .logging_broadcaster import LoggingBroadcaster
from .recording_broadcaster import RecordingBroadcaster

__all__ = ["LoggingBroadcaster", "RecordingBroadcaster"]
