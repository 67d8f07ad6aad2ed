"""Tests for merge-in-place copy and move assignment."""

import itertools

import pytest

from arenalist import LinkedList, StaleHandleError


def test_assign_shorter_sequence_releases_surplus() -> None:
    """Test assigning [1, 2] onto [9, 9, 9, 9]."""
    lst = LinkedList([9, 9, 9, 9])
    surplus = lst.rbegin()

    result = lst.assign([1, 2])
    assert result is lst
    assert list(lst) == [1, 2]
    assert len(lst) == 2
    assert lst.back() == 2
    with pytest.raises(StaleHandleError):
        surplus.get()
    lst.validate()


def test_assign_longer_sequence_reuses_and_appends() -> None:
    """Test assigning [1, 2, 3, 4] onto [9, 9]."""
    lst = LinkedList([9, 9])
    first = lst.begin()
    second = lst.begin().increment()

    lst.assign([1, 2, 3, 4])
    assert list(lst) == [1, 2, 3, 4]
    assert len(lst) == 4
    # The two original nodes were overwritten, not replaced
    assert first == lst.begin()
    assert first.value == 1
    assert second.value == 2
    lst.validate()


def test_assign_equal_length() -> None:
    """Test overwriting every node."""
    lst = LinkedList([1, 2, 3])
    lst.assign(LinkedList([4, 5, 6]))
    assert list(lst) == [4, 5, 6]


def test_assign_empty_source_clears() -> None:
    """Test assigning an empty source."""
    lst = LinkedList([1, 2, 3])
    lst.assign([])
    assert lst.empty()
    assert lst.begin() == lst.end()
    lst.validate()


def test_assign_onto_empty_list() -> None:
    """Test assigning into an empty destination."""
    lst = LinkedList[int]()
    lst.assign(LinkedList([1, 2]))
    assert list(lst) == [1, 2]
    lst.validate()


def test_assign_consumes_generator_once() -> None:
    """Test that a one-shot iterable is fully read exactly once."""
    lst = LinkedList([0, 0, 0])
    lst.assign(x + 1 for x in range(5))
    assert list(lst) == [1, 2, 3, 4, 5]


def test_copy_assign_independence() -> None:
    """Test that lists stay independent after copy-assignment."""
    source = LinkedList([1, 2, 3])
    dest = LinkedList([7])
    dest.assign(source)

    dest.push_back(4)
    dest.begin().value = 100
    source.pop_front()

    assert list(source) == [2, 3]
    assert list(dest) == [100, 2, 3, 4]


def test_self_assignment() -> None:
    """Test that assigning a list to itself changes nothing."""
    lst = LinkedList([1, 2, 3])
    it = lst.begin()
    lst.assign(lst)
    lst.move_assign(lst)
    assert list(lst) == [1, 2, 3]
    assert it.value == 1


def test_move_assign_shorter_source() -> None:
    """Test move-assigning a shorter list."""
    source = LinkedList([1, 2])
    dest = LinkedList([9, 9, 9, 9])

    result = dest.move_assign(source)
    assert result is dest
    assert list(dest) == [1, 2]
    assert source.empty()
    assert len(source) == 0
    dest.validate()
    source.validate()


def test_move_assign_longer_source() -> None:
    """Test move-assigning a longer list."""
    source = LinkedList([1, 2, 3, 4])
    source_cursor = source.begin()
    dest = LinkedList([9])

    dest.move_assign(source)
    assert list(dest) == [1, 2, 3, 4]
    assert source.empty()
    # Source nodes were released, not transferred
    with pytest.raises(StaleHandleError):
        source_cursor.get()


def test_move_assign_empty_source() -> None:
    """Test move-assigning an empty list clears the destination."""
    dest = LinkedList([1, 2])
    dest.move_assign(LinkedList())
    assert dest.empty()


def test_move_assign_into_empty() -> None:
    """Test move-assigning into an empty destination."""
    source = LinkedList(["a", "b"])
    dest = LinkedList[str]()
    dest.move_assign(source)
    assert list(dest) == ["a", "b"]
    assert source.empty()


def test_assign_from_view_of_itself() -> None:
    """Test assigning an iterable that reads the destination list."""
    lst = LinkedList([1, 2, 3])
    lst.assign(reversed(lst))
    assert list(lst) == [3, 2, 1]
    lst.validate()


def test_assign_from_growing_view_of_itself() -> None:
    """Test that a self-derived source longer than the list terminates."""
    lst = LinkedList([1, 2])
    lst.assign(itertools.chain(lst, lst))
    assert list(lst) == [1, 2, 1, 2]
    assert len(lst) == 4
    lst.validate()
