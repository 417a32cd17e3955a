# app/controller/shared_buffer.py
from __future__ import annotations
import threading
from dataclasses import dataclass
import structlog

from core.buffer.ring_buffer import RingBuffer

log = structlog.get_logger()

@dataclass(frozen=True)
class BufferStatus:
    size: int
    capacity: int
    is_empty: bool
    is_full: bool

class SharedBuffer:
    """The one handle every request handler uses; all access is serialized on a single lock."""
    def __init__(self, capacity: int):
        self._lock = threading.RLock()
        self._rb = RingBuffer(capacity)
        log.info("buffer.created", capacity=capacity)

    def enqueue(self, event: str) -> None:
        with self._lock:
            self._rb.enqueue(event)

    def dequeue(self) -> str:
        with self._lock:
            return self._rb.dequeue()

    def size(self) -> int:
        with self._lock:
            return self._rb.size()

    def capacity(self) -> int:
        with self._lock:
            return self._rb.capacity()

    def is_empty(self) -> bool:
        with self._lock:
            return self._rb.is_empty()

    def is_full(self) -> bool:
        with self._lock:
            return self._rb.is_full()

    def status(self) -> BufferStatus:
        with self._lock:
            return BufferStatus(
                size=self._rb.size(),
                capacity=self._rb.capacity(),
                is_empty=self._rb.is_empty(),
                is_full=self._rb.is_full(),
            )
