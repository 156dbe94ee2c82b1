import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.stack import ArrayStack, StackOverflow, StackUnderflow


def test_source_walkthrough():
    st_ = ArrayStack(5)
    st_.push(22)
    st_.push(43)
    st_.push(44)
    assert st_.peek() == 44
    st_.pop()
    assert st_.peek() == 43
    st_.pop()
    assert st_.peek() == 22
    st_.pop()
    with pytest.raises(StackUnderflow):
        st_.peek()
    assert st_.is_empty() is True


def test_stl_walkthrough():
    s = ArrayStack(10)
    s.push(2)
    s.push(3)
    assert s.pop() == 3
    assert s.peek() == 2
    assert s.is_empty() is False
    assert len(s) == 1


@given(st.lists(st.integers(), max_size=20))
def test_lifo_order(values):
    s = ArrayStack(len(values))
    for value in values:
        s.push(value)
    assert len(s) == len(values)
    assert [s.pop() for _ in values] == values[::-1]
    assert s.is_empty()


@given(st.integers(0, 10))
def test_overflow_at_capacity(size):
    s = ArrayStack(size)
    for i in range(size):
        s.push(i)
    with pytest.raises(StackOverflow):
        s.push(size)
    assert len(s) == size


def test_pop_empty_raises():
    with pytest.raises(StackUnderflow):
        ArrayStack(3).pop()


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        ArrayStack(-1)


def test_iteration_top_first():
    s = ArrayStack(3)
    for value in ["a", "b", "c"]:
        s.push(value)
    assert list(s) == ["c", "b", "a"]