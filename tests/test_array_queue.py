import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.array_queue import ArrayQueue, QueueEmpty, QueueFull


def test_source_walkthrough():
    q = ArrayQueue(5)
    q.enqueue(11)
    q.enqueue(15)
    q.enqueue(13)
    assert q.peek() == 11
    assert q.dequeue() == 11
    assert q.peek() == 15
    assert q.is_empty() is False
    assert len(q) == 2


@given(st.lists(st.integers(), max_size=20))
def test_fifo_order(values):
    q = ArrayQueue(len(values))
    for value in values:
        q.enqueue(value)
    assert list(q) == values
    assert [q.dequeue() for _ in values] == values
    assert q.is_empty()


def test_slots_not_reused_until_empty():
    q = ArrayQueue(3)
    for value in [1, 2, 3]:
        q.enqueue(value)
    q.dequeue()
    with pytest.raises(QueueFull):
        q.enqueue(4)
    q.dequeue()
    q.dequeue()
    q.enqueue(4)
    assert list(q) == [4]


@given(st.integers(0, 10))
def test_full_at_capacity(size):
    q = ArrayQueue(size)
    for i in range(size):
        q.enqueue(i)
    with pytest.raises(QueueFull):
        q.enqueue(size)
    assert len(q) == size


def test_empty_queue_errors():
    q = ArrayQueue(2)
    with pytest.raises(QueueEmpty):
        q.dequeue()
    with pytest.raises(QueueEmpty):
        q.peek()


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        ArrayQueue(-2)