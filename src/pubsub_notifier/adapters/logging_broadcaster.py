"""Broadcaster that only emits a structured log record per message."""

from __future__ import annotations

import logging
from typing import Any

from ..observability import get_logger


class LoggingBroadcaster:
    def __init__(self, logger: logging.Logger | None = None, level: int = logging.INFO) -> None:
        self._logger = logger or get_logger()
        self._level = level

    def broadcast(self, *args: Any) -> None:
        self._logger.log(
            self._level,
            "broadcast_sink",
            extra={"broadcast_args": [repr(arg) for arg in args]},
        )
