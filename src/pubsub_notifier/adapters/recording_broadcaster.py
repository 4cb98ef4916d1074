"""In-memory broadcaster that keeps every call (dry runs and tests)."""

from __future__ import annotations

from typing import Any


class RecordingBroadcaster:
    """Record broadcast arguments instead of delivering them."""

    def __init__(self) -> None:
        self.calls: list[tuple[Any, ...]] = []

    def broadcast(self, *args: Any) -> None:
        self.calls.append(args)

    def clear(self) -> None:
        self.calls.clear()
