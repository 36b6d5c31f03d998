import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.stack import Stack, StackOverflowError, StackUnderflowError


def test_push_pop_is_lifo():
    s = Stack(3)
    for value in (1, 2, 3):
        s.push(value)
    assert list(s) == [1, 2, 3]
    assert s.peek() == 3
    assert [s.pop(), s.pop(), s.pop()] == [3, 2, 1]
    assert s.is_empty()


def test_overflow():
    s = Stack(1)
    s.push("a")
    assert s.is_full()
    with pytest.raises(StackOverflowError):
        s.push("b")
    assert list(s) == ["a"]


def test_underflow():
    s = Stack(2)
    with pytest.raises(StackUnderflowError):
        s.pop()
    with pytest.raises(StackUnderflowError):
        s.peek()


def test_zero_capacity_is_always_full():
    s = Stack(0)
    with pytest.raises(StackOverflowError):
        s.push(1)


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        Stack(-1)


@given(st.lists(st.integers(), max_size=20))
def test_round_trip_reverses(values):
    s = Stack(len(values))
    for value in values:
        s.push(value)
    assert len(s) == len(values)
    assert list(s) == values
    assert [s.pop() for _ in values] == values[::-1]