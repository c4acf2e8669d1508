import threading
import time

import pytest

from ugkit.ring_buffer import BufferEmpty, BufferFull, RingBuffer


def _producer(buffer, total):
    for i in range(total):
        while True:
            try:
                buffer.push(i)
                break
            except BufferFull:
                time.sleep(0)


def _consumer(buffer, total, received):
    for _ in range(total):
        while True:
            try:
                received.append(buffer.pop())
                break
            except BufferEmpty:
                time.sleep(0)


@pytest.mark.parametrize("capacity, total", [(100000, 100000), (1024, 100), (1024, 10000)])
def test_producer_consumer_preserves_order(capacity, total):
    buffer = RingBuffer(capacity)
    received = []
    producer = threading.Thread(target=_producer, args=(buffer, total))
    consumer = threading.Thread(target=_consumer, args=(buffer, total, received))
    producer.start()
    consumer.start()
    producer.join(timeout=60)
    consumer.join(timeout=60)
    assert received == list(range(total))
    assert len(buffer) == 0


def test_push_until_full_then_raises():
    buffer = RingBuffer(3)
    for i in range(3):
        buffer.push(i)
    assert len(buffer) == 3
    with pytest.raises(BufferFull):
        buffer.push(99)


def test_pop_empty_raises():
    buffer = RingBuffer(2)
    with pytest.raises(BufferEmpty):
        buffer.pop()


def test_wraps_around():
    buffer = RingBuffer(2)
    out = []
    for i in range(7):
        buffer.push(i)
        out.append(buffer.pop())
    assert out == list(range(7))
    assert len(buffer) == 0


def test_len_tracks_contents():
    buffer = RingBuffer(4)
    buffer.push("a")
    buffer.push("b")
    assert len(buffer) == 2
    assert buffer.pop() == "a"
    assert len(buffer) == 1


def test_zero_capacity_is_always_full():
    buffer = RingBuffer(0)
    with pytest.raises(BufferFull):
        buffer.push(1)


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        RingBuffer(-1)