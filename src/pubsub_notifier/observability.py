"""Observability: structured logs and a metrics counter stub."""

from __future__ import annotations

import logging
import sys
from typing import Any

_LOGGER = logging.getLogger("pubsub_notifier")

# broadcasts[resource] = count, errors[resource] = count
METRICS: dict[str, dict[str, int]] = {"broadcasts": {}, "errors": {}}


def get_logger() -> logging.Logger:
    return _LOGGER


def configure_logging(level: str = "INFO") -> logging.Logger:
    """Attach a stderr handler to the package logger (once)."""
    logger = get_logger()
    logger.setLevel(level.upper())
    if logger.handlers:
        return logger

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s: %(message)s"))
    logger.addHandler(handler)
    return logger


def record_broadcast(
    resource_type: str,
    topic: str,
    event: str,
    error: str | None = None,
    logger: logging.Logger | None = None,
) -> None:
    """Emit a structured log line and update the metrics stub."""
    logger = logger or _LOGGER
    payload: dict[str, Any] = {
        "resource_type": resource_type,
        "topic": topic,
        "event": event,
    }
    if error:
        payload["error"] = error
        logger.error("broadcast_failed", extra=payload)
        METRICS["errors"][resource_type] = METRICS["errors"].get(resource_type, 0) + 1
        return
    logger.debug("broadcast", extra=payload)
    METRICS["broadcasts"][resource_type] = METRICS["broadcasts"].get(resource_type, 0) + 1


def metrics_snapshot() -> dict[str, dict[str, int]]:
    return {k: dict(v) for k, v in METRICS.items()}


def reset_metrics() -> None:
    for counters in METRICS.values():
        counters.clear()
