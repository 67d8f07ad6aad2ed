"""Doubly-linked list container with node-identity cursors."""

import logging
from collections.abc import Iterable, Iterator
from typing import Generic

from arenalist.arena import Handle, NodeArena
from arenalist.errors import CorruptListError, EmptyListError, ForeignIteratorError
from arenalist.iterator import ListIterator
from arenalist.result import Err, Ok, Result
from arenalist.types import Factory, T

logger = logging.getLogger(__name__)


class LinkedList(Generic[T]):
    """
    Doubly-linked list owning its nodes through a NodeArena.

    Push, pop, insert, erase and swap are O(1). Cursors returned by begin(),
    end(), rbegin(), insert() and erase() name nodes, not indexes, and stay
    valid until the node they name is released.
    """

    def __init__(self, iterable: Iterable[T] | None = None, *, strict: bool = False) -> None:
        """
        Initialize the list.

        Args:
            iterable: Elements to push to the back, in order
            strict: Run validate() after every mutating operation
        """
        self._arena: NodeArena[T] = NodeArena()
        self._head: Handle | None = None
        self._tail: Handle | None = None
        self._size = 0
        self._strict = strict
        if iterable is not None:
            for item in iterable:
                self.push_back(item)

    # Construction

    @classmethod
    def filled(cls, count: int, value: T, *, strict: bool = False) -> "LinkedList[T]":
        """Build a list holding value count times."""
        lst: LinkedList[T] = cls(strict=strict)
        for _ in range(count):
            lst.push_back(value)
        return lst

    @classmethod
    def with_defaults(
        cls, count: int, factory: Factory[T], *, strict: bool = False
    ) -> "LinkedList[T]":
        """Build a list of count elements, each a fresh factory() result."""
        lst: LinkedList[T] = cls(strict=strict)
        for _ in range(count):
            lst.push_back(factory())
        return lst

    @classmethod
    def from_range(
        cls, first: ListIterator[T], last: ListIterator[T], *, strict: bool = False
    ) -> "LinkedList[T]":
        """Build a list from the half-open cursor range [first, last)."""
        lst: LinkedList[T] = cls(strict=strict)
        cursor = first.copy()
        while cursor != last and not cursor.is_end:
            lst.push_back(cursor.value)
            cursor.increment()
        return lst

    @classmethod
    def copy_of(cls, source: "LinkedList[T]", *, strict: bool | None = None) -> "LinkedList[T]":
        """Build an independent copy of source with its own nodes."""
        lst: LinkedList[T] = cls(strict=source._strict if strict is None else strict)
        return lst.assign(source)

    @classmethod
    def moved_from(
        cls, source: "LinkedList[T]", *, strict: bool | None = None
    ) -> "LinkedList[T]":
        """
        Take over every node of source in O(1).

        Source is left empty. Cursors into the taken nodes keep working and
        now observe the new list.
        """
        lst: LinkedList[T] = cls(strict=source._strict if strict is None else strict)
        lst._arena, lst._head, lst._tail, lst._size = (
            source._arena,
            source._head,
            source._tail,
            source._size,
        )
        source._arena = NodeArena()
        source._head = source._tail = None
        source._size = 0
        logger.debug("Moved %d nodes into a new list", lst._size)
        return lst

    def copy(self) -> "LinkedList[T]":
        return type(self).copy_of(self)

    def __copy__(self) -> "LinkedList[T]":
        return self.copy()

    # Assignment

    def assign(self, source: "LinkedList[T] | Iterable[T]") -> "LinkedList[T]":
        """
        Make this list equal to source, reusing existing nodes.

        Existing nodes are overwritten in order, missing ones appended and
        surplus ones released. Source is iterated at most once; an iterable
        that is not a LinkedList is read in full before any node changes, so
        it may be derived from this list.

        Returns:
            self
        """
        if source is self:
            return self
        logger.debug("Assigning onto list of size %d", self._size)
        values = source if isinstance(source, LinkedList) else list(source)
        self._merge(iter(values))
        return self

    def move_assign(self, source: "LinkedList[T]") -> "LinkedList[T]":
        """
        Merge source into this list like assign(), then empty source.

        Returns:
            self
        """
        if source is self:
            return self
        logger.debug("Move-assigning %d elements onto list of size %d", source._size, self._size)
        self._merge(iter(source))
        source.clear()
        return self

    def _merge(self, values: Iterator[T]) -> None:
        cursor = self._head
        consumed = False
        for value in values:
            consumed = True
            if cursor is None:
                self._link_back(value)
            else:
                node = self._arena.get(cursor)
                node.data = value
                cursor = node.next

        if not consumed:
            self.clear()
            return
        while cursor is not None:
            cursor = self._unlink(cursor)
        self._after_mutation()

    def swap(self, other: "LinkedList[T]") -> None:
        """Exchange contents with other in O(1). No cursor is invalidated."""
        logger.debug("Swapping lists of size %d and %d", self._size, other._size)
        self._arena, other._arena = other._arena, self._arena
        self._head, other._head = other._head, self._head
        self._tail, other._tail = other._tail, self._tail
        self._size, other._size = other._size, self._size

    # Cursors

    def begin(self) -> ListIterator[T]:
        return ListIterator(self._arena, self._head)

    def end(self) -> ListIterator[T]:
        return ListIterator(self._arena)

    def rbegin(self) -> ListIterator[T]:
        """Return a cursor at the last element (end if empty)."""
        return ListIterator(self._arena, self._tail)

    def rend(self) -> ListIterator[T]:
        return ListIterator(self._arena)

    # Access

    def front(self) -> T:
        """
        Return the first element.

        Raises:
            EmptyListError: If the list is empty
        """
        if self._head is None:
            raise EmptyListError("unable to access data from an empty list")
        return self._arena.get(self._head).data

    def back(self) -> T:
        """
        Return the last element.

        Raises:
            EmptyListError: If the list is empty
        """
        if self._tail is None:
            raise EmptyListError("unable to access data from an empty list")
        return self._arena.get(self._tail).data

    def try_front(self) -> Result[T, EmptyListError]:
        try:
            return Ok(self.front())
        except EmptyListError as exc:
            return Err(exc)

    def try_back(self) -> Result[T, EmptyListError]:
        try:
            return Ok(self.back())
        except EmptyListError as exc:
            return Err(exc)

    # Insert

    def push_front(self, value: T) -> None:
        """Prepend value. O(1)."""
        handle = self._arena.allocate(value)
        if self._head is None:
            self._head = self._tail = handle
        else:
            self._arena.get(handle).next = self._head
            self._arena.get(self._head).prev = handle
            self._head = handle
        self._size += 1
        self._after_mutation()

    def push_back(self, value: T) -> None:
        """Append value. O(1)."""
        self._link_back(value)
        self._after_mutation()

    def _link_back(self, value: T) -> Handle:
        handle = self._arena.allocate(value)
        if self._tail is None:
            self._head = self._tail = handle
        else:
            self._arena.get(handle).prev = self._tail
            self._arena.get(self._tail).next = handle
            self._tail = handle
        self._size += 1
        return handle

    def insert(self, position: ListIterator[T], value: T) -> ListIterator[T]:
        """
        Insert value immediately before position. O(1).

        Inserting into an empty list ignores position; inserting at end()
        appends.

        Returns:
            A cursor at the new element

        Raises:
            ForeignIteratorError: If position belongs to another list
            StaleHandleError: If position names a released node
        """
        if self._size == 0:
            handle = self._link_back(value)
        elif position.position is None:
            handle = self._link_back(value)
        else:
            self._check_owned(position)
            successor_handle = position.position
            successor = self._arena.get(successor_handle)
            handle = self._arena.allocate(value)
            node = self._arena.get(handle)
            node.prev = successor.prev
            node.next = successor_handle
            if node.prev is not None:
                self._arena.get(node.prev).next = handle
            else:
                self._head = handle
            successor.prev = handle
            self._size += 1
        self._after_mutation()
        return ListIterator(self._arena, handle)

    # Remove

    def erase(self, position: ListIterator[T]) -> ListIterator[T]:
        """
        Remove the element at position. O(1).

        Erasing end() is a no-op.

        Returns:
            A cursor at the element that followed the erased one

        Raises:
            ForeignIteratorError: If position belongs to another list
            StaleHandleError: If position names a released node
        """
        if position.position is None:
            return self.end()
        self._check_owned(position)
        following = self._unlink(position.position)
        self._after_mutation()
        return ListIterator(self._arena, following)

    def _unlink(self, handle: Handle) -> Handle | None:
        """Splice out and release the node at handle; return its successor."""
        node = self._arena.get(handle)
        prev, following = node.prev, node.next
        if prev is not None:
            self._arena.get(prev).next = following
        else:
            self._head = following
        # A single node takes both fallback branches and empties the list
        if following is not None:
            self._arena.get(following).prev = prev
        else:
            self._tail = prev
        self._arena.release(handle)
        self._size -= 1
        return following

    def pop_front(self) -> None:
        """Remove the first element. No-op on an empty list."""
        self.erase(ListIterator(self._arena, self._head))

    def pop_back(self) -> None:
        """Remove the last element. No-op on an empty list."""
        self.erase(ListIterator(self._arena, self._tail))

    def clear(self) -> None:
        """
        Release every node. O(n).

        The emptied list starts over with a fresh arena, returning slot
        capacity. Cursors into the old nodes stay stale, and insert() or
        erase() treat them as foreign.
        """
        released = self._size
        handle = self._head
        while handle is not None:
            following = self._arena.get(handle).next
            self._arena.release(handle)
            self._size -= 1
            handle = following
        self._head = self._tail = None
        self._arena = NodeArena()
        if released:
            logger.debug("Cleared %d nodes", released)
        self._after_mutation()

    def _check_owned(self, position: ListIterator[T]) -> None:
        if not position.belongs_to(self._arena):
            raise ForeignIteratorError("Iterator does not belong to this list")

    # Status

    def empty(self) -> bool:
        return self._size == 0

    def size(self) -> int:
        return self._size

    def __len__(self) -> int:
        """Return the number of elements in the list."""
        return self._size

    def __bool__(self) -> bool:
        """Return True if the list is non-empty."""
        return self._size > 0

    def __iter__(self) -> Iterator[T]:
        handle = self._head
        while handle is not None:
            node = self._arena.get(handle)
            yield node.data
            handle = node.next

    def __reversed__(self) -> Iterator[T]:
        handle = self._tail
        while handle is not None:
            node = self._arena.get(handle)
            yield node.data
            handle = node.prev

    def __contains__(self, value: object) -> bool:
        return any(item == value for item in self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LinkedList):
            return NotImplemented
        if self._size != other._size:
            return False
        return all(a == b for a, b in zip(self, other))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    # Invariants

    def validate(self) -> None:
        """
        Walk the node graph and check it against head, tail and size.

        Raises:
            CorruptListError: If links are asymmetric, an end pointer is
                wrong, or size disagrees with the reachable node count
        """
        try:
            self._check_links()
        except CorruptListError as exc:
            logger.warning("List failed validation: %s", exc)
            raise

    def _check_links(self) -> None:
        if (self._head is None) != (self._tail is None) or (self._head is None) != (
            self._size == 0
        ):
            raise CorruptListError(
                f"head={self._head!r}, tail={self._tail!r} and size={self._size} disagree"
            )
        count = 0
        prev: Handle | None = None
        handle = self._head
        while handle is not None:
            if handle not in self._arena:
                raise CorruptListError(f"Link to released node {handle!r}")
            node = self._arena.get(handle)
            if node.prev != prev:
                raise CorruptListError(f"Node {handle!r} has prev {node.prev!r}, expected {prev!r}")
            count += 1
            if count > self._size:
                raise CorruptListError(f"More than {self._size} nodes reachable from head")
            prev, handle = handle, node.next
        if prev != self._tail:
            raise CorruptListError(f"Last reachable node {prev!r} is not tail {self._tail!r}")
        if count != self._size:
            raise CorruptListError(f"Size is {self._size} but {count} nodes are reachable")

    def _after_mutation(self) -> None:
        if self._strict:
            self.validate()


def swap(lhs: LinkedList[T], rhs: LinkedList[T]) -> None:
    """Exchange the contents of two lists in O(1)."""
    lhs.swap(rhs)
