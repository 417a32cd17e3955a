# app/gateway/errors.py
from __future__ import annotations
from typing import Tuple, Type

from core.buffer.ring_buffer import BufferEmpty, BufferFull
from core.wire.codec import MalformedRequest, SerializationFailure


class MethodNotAllowed(Exception):
    def __init__(self, method: str, path: str):
        super().__init__("Method not allowed")
        self.method = method
        self.path = path


# error kind -> HTTP status; first match wins
STATUS_BY_ERROR: Tuple[Tuple[Type[Exception], int], ...] = (
    (MethodNotAllowed, 405),
    (MalformedRequest, 400),
    (BufferFull, 500),
    (BufferEmpty, 500),
    (SerializationFailure, 500),
)

HANDLED_ERRORS: Tuple[Type[Exception], ...] = tuple(kind for kind, _ in STATUS_BY_ERROR)


def status_for(exc: Exception) -> int:
    for kind, status in STATUS_BY_ERROR:
        if isinstance(exc, kind):
            return status
    return 500


def error_text(exc: Exception) -> str:
    """Text placed in the plain-text error body (a trailing newline is added by the caller)."""
    if isinstance(exc, SerializationFailure):
        return "failed to encode response"
    return str(exc)
