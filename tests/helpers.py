"""Builders shared by the test modules."""

from __future__ import annotations

from typing import Any

from pubsub_notifier.domain.notification import Notification


def make_notification(
    action: str = "create",
    type: str | None = None,
    data: dict[str, Any] | None = None,
    previous_data: dict[str, Any] | None = None,
    tenant: Any = None,
    resource_type: str = "post",
) -> Notification:
    return Notification(
        resource_type=resource_type,
        action={"name": action, "type": type or action},
        data=data or {},
        previous_data=previous_data,
        tenant=tenant,
    )
