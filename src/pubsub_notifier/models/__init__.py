"""Payload models passed to the broadcast sink."""

from .broadcast import BroadcastEnvelope, Dispatch, plain_envelope

__all__ = [
    "BroadcastEnvelope",
    "Dispatch",
    "plain_envelope",
]
