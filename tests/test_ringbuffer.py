import pytest

from tcpfighter.ringbuffer import RINGBUFFER_SIZE, RingBuffer


def test_default_capacity():
    assert RingBuffer().capacity == RINGBUFFER_SIZE


def test_invalid_capacity():
    with pytest.raises(ValueError):
        RingBuffer(0)


def test_enqueue_dequeue_round_trip():
    ring = RingBuffer(16)
    assert ring.enqueue(b"hello") == 5
    assert len(ring) == 5
    assert ring.free_size == 11
    assert ring.dequeue(5) == b"hello"
    assert len(ring) == 0


def test_enqueue_truncates_to_free_space():
    ring = RingBuffer(8)
    assert ring.enqueue(b"0123456789") == 8
    assert ring.free_size == 0
    assert ring.dequeue(100) == b"01234567"


def test_wrap_around_preserves_order():
    ring = RingBuffer(8)
    ring.enqueue(b"abcdef")
    assert ring.dequeue(4) == b"abcd"
    assert ring.enqueue(b"ghijk") == 5
    assert ring.peek(7) == b"efghijk"
    assert ring.dequeue(7) == b"efghijk"


def test_peek_does_not_remove():
    ring = RingBuffer(8)
    ring.enqueue(b"xyz")
    assert ring.peek(2) == b"xy"
    assert len(ring) == 3


def test_peek_negative_rejected():
    with pytest.raises(ValueError):
        RingBuffer(4).peek(-1)


def test_clear_empties():
    ring = RingBuffer(8)
    ring.enqueue(b"data")
    ring.clear()
    assert len(ring) == 0
    assert ring.dequeue(4) == b""


def test_resize_keeps_wrapped_data():
    ring = RingBuffer(8)
    ring.enqueue(b"abcdef")
    ring.dequeue(4)
    ring.enqueue(b"ghij")
    ring.resize(32)
    assert ring.capacity == 32
    assert ring.dequeue(100) == b"efghij"


def test_resize_too_small_raises():
    ring = RingBuffer(8)
    ring.enqueue(b"abcdef")
    with pytest.raises(ValueError):
        ring.resize(4)


def test_resize_ignores_non_positive():
    ring = RingBuffer(8)
    ring.resize(0)
    assert ring.capacity == 8


def test_direct_sizes_cover_contiguous_regions():
    ring = RingBuffer(8)
    ring.enqueue(b"abcdef")
    ring.dequeue(4)
    ring.enqueue(b"ghij")
    front = ring.direct_dequeue_size()
    assert front + (len(ring) - front) == len(ring)
    assert ring.peek(front) == b"efgh"
    assert ring.direct_enqueue_size() + len(ring) <= ring.capacity


def test_direct_sizes_empty_and_full():
    ring = RingBuffer(8)
    assert ring.direct_dequeue_size() == 0
    ring.enqueue(b"12345678")
    assert ring.direct_enqueue_size() == 0


def test_move_rear_and_front_are_bounded():
    ring = RingBuffer(8)
    assert ring.move_rear(20) == 8
    assert len(ring) == 8
    assert ring.move_front(3) == 3
    assert ring.move_front(20) == 5
    assert len(ring) == 0