"""Port: the transport that delivers a message on a topic."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Broadcaster(Protocol):
    """Deliver one message.

    Called as ``broadcast(topic, event, notification, *extra)`` or, for a
    named transport, ``broadcast(name, topic, envelope, *extra)``.
    """

    def broadcast(self, *args: Any) -> Any: ...
