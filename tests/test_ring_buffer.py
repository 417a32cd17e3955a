# tests/test_ring_buffer.py
# How to run (from repo root):  pytest -q
#
# What this covers:
#   - Round trip and fill-to-full on a small buffer
#   - Full / empty errors leave state untouched
#   - FIFO order across index wraparound
#   - size == enqueues - dequeues over a random op sequence
#   - Rejection of non-positive / non-int capacity

import random
import pytest

from core.buffer.ring_buffer import RingBuffer, BufferFull, BufferEmpty, RingBufferError


def test_new_buffer_is_empty():
    rb = RingBuffer(3)
    assert rb.capacity() == 3
    assert rb.size() == 0
    assert rb.is_empty()
    assert not rb.is_full()
    assert len(rb) == 0

def test_round_trip_single_event():
    rb = RingBuffer(3)
    rb.enqueue("event1")
    assert rb.size() == 1
    assert not rb.is_empty()
    assert not rb.is_full()

    assert rb.dequeue() == "event1"
    assert rb.size() == 0
    assert rb.is_empty()

def test_fill_to_full_then_reject():
    rb = RingBuffer(3)
    for i in range(3):
        rb.enqueue(f"event{i}")
    assert rb.is_full()
    assert not rb.is_empty()

    with pytest.raises(BufferFull) as exc:
        rb.enqueue("overflow")
    assert str(exc.value) == "error: cannot enqueue to a full buffer"
    # state unchanged: still full and FIFO contents intact
    assert rb.size() == 3
    assert [rb.dequeue() for _ in range(3)] == ["event0", "event1", "event2"]

def test_dequeue_empty_raises_and_keeps_state():
    rb = RingBuffer(2)
    with pytest.raises(BufferEmpty) as exc:
        rb.dequeue()
    assert str(exc.value) == "error: cannot dequeue from an empty buffer"
    assert rb.size() == 0

    # buffer still works after the failed dequeue
    rb.enqueue("a")
    assert rb.dequeue() == "a"
    with pytest.raises(RingBufferError):
        rb.dequeue()

def test_fifo_across_wraparound():
    rb = RingBuffer(3)
    rb.enqueue("a")
    rb.enqueue("b")
    assert rb.dequeue() == "a"
    rb.enqueue("c")
    rb.enqueue("d")  # wraps to slot 0
    assert rb.is_full()
    assert [rb.dequeue() for _ in range(3)] == ["b", "c", "d"]
    assert rb.is_empty()

def test_capacity_one_alternates_full_and_empty():
    rb = RingBuffer(1)
    for i in range(5):
        rb.enqueue(str(i))
        assert rb.is_full() and not rb.is_empty()
        assert rb.dequeue() == str(i)
        assert rb.is_empty() and not rb.is_full()

def test_empty_string_event_is_accepted():
    rb = RingBuffer(2)
    rb.enqueue("")
    assert rb.size() == 1
    assert rb.dequeue() == ""

def test_size_tracks_ops_on_random_sequence():
    rng = random.Random(1234)
    cap = 5
    rb = RingBuffer(cap)
    expected = []
    n = 0
    for _ in range(2000):
        if rng.random() < 0.5:
            try:
                rb.enqueue(f"e{n}")
                expected.append(f"e{n}")
            except BufferFull:
                assert len(expected) == cap
            n += 1
        else:
            try:
                assert rb.dequeue() == expected.pop(0)
            except BufferEmpty:
                assert not expected
        assert rb.size() == len(expected)
        assert 0 <= rb.size() <= cap
        assert rb.is_full() == (len(expected) == cap)
        assert rb.is_empty() == (not expected)

def test_vacated_slot_is_cleared():
    rb = RingBuffer(2)
    rb.enqueue("secret")
    rb.dequeue()
    assert "secret" not in repr(rb)
    assert all(s is None for s in rb._slots)

@pytest.mark.parametrize("bad", [0, -1, 2.5, "3", True])
def test_invalid_capacity_rejected(bad):
    with pytest.raises(ValueError):
        RingBuffer(bad)
