"""Tests for Ok/Err result values."""

import pytest

from arenalist import EmptyListError, Err, LinkedList, NullIteratorError, Ok


def test_ok() -> None:
    """Test a successful result."""
    result = Ok(5)
    assert result.is_ok()
    assert result.unwrap() == 5
    assert result.unwrap_or(0) == 5


def test_err() -> None:
    """Test a failed result."""
    error = EmptyListError("empty")
    result = Err(error)
    assert not result.is_ok()
    assert result.unwrap_or(0) == 0
    with pytest.raises(EmptyListError):
        result.unwrap()


def test_result_immutability() -> None:
    """Test that results are immutable."""
    result = Ok(1)
    with pytest.raises(AttributeError):  # FrozenInstanceError
        result.value = 2  # type: ignore[misc]


def test_try_front_and_back() -> None:
    """Test non-raising access on the list."""
    lst = LinkedList[int]()
    front = lst.try_front()
    assert isinstance(front, Err)
    assert isinstance(front.error, EmptyListError)
    assert isinstance(lst.try_back(), Err)

    lst.push_back(1)
    lst.push_back(2)
    assert lst.try_front() == Ok(1)
    assert lst.try_back() == Ok(2)


def test_try_get_on_end_iterator() -> None:
    """Test non-raising dereference of the end iterator."""
    lst = LinkedList([1])
    result = lst.end().try_get()
    assert isinstance(result, Err)
    assert isinstance(result.error, NullIteratorError)
    assert lst.begin().try_get() == Ok(1)
