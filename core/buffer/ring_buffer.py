# core/buffer/ring_buffer.py
from __future__ import annotations
from typing import List, Optional


class RingBufferError(Exception):
    """Base class for buffer occupancy errors."""


class BufferFull(RingBufferError):
    def __init__(self, message: str = "error: cannot enqueue to a full buffer"):
        super().__init__(message)


class BufferEmpty(RingBufferError):
    def __init__(self, message: str = "error: cannot dequeue from an empty buffer"):
        super().__init__(message)


class RingBuffer:
    """
    Fixed-capacity FIFO over a preallocated slot list.
    - head: oldest occupied slot
    - tail: next slot to write, always (head + size) % capacity
    Not thread-safe on its own; share it through SharedBuffer.
    """
    def __init__(self, capacity: int):
        if isinstance(capacity, bool) or not isinstance(capacity, int):
            raise ValueError(f"capacity must be an int, got {type(capacity).__name__}")
        if capacity <= 0:
            raise ValueError(f"capacity must be positive, got {capacity}")

        self._slots: List[Optional[str]] = [None] * capacity
        self._capacity = capacity
        self._head = 0
        self._tail = 0
        self._size = 0

    def enqueue(self, event: str) -> None:
        if self._size == self._capacity:
            raise BufferFull()
        self._slots[self._tail] = event
        self._tail = (self._tail + 1) % self._capacity
        self._size += 1

    def dequeue(self) -> str:
        if self._size == 0:
            raise BufferEmpty()
        event = self._slots[self._head]
        self._slots[self._head] = None  # vacated slot must not leak a stale event
        self._head = (self._head + 1) % self._capacity
        self._size -= 1
        return event  # type: ignore[return-value]

    def size(self) -> int:
        return self._size

    def capacity(self) -> int:
        return self._capacity

    def is_empty(self) -> bool:
        return self._size == 0

    def is_full(self) -> bool:
        return self._size == self._capacity

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"RingBuffer(size={self._size}/{self._capacity}, head={self._head}, tail={self._tail})"
