"""Bidirectional cursor naming a list position by node identity."""

from typing import Generic

from arenalist.arena import Handle, Node, NodeArena
from arenalist.errors import ListAccessError, NullIteratorError, StaleHandleError
from arenalist.result import Err, Ok, Result
from arenalist.types import T


class ListIterator(Generic[T]):
    """
    Cursor over a LinkedList.

    Holds the arena of the list it came from and the handle of one node. A
    position of None is the end sentinel; stepping past either end of the
    list lands there and further steps stay there.

    The cursor does not own anything. Once its node is released, every
    lookup through it raises StaleHandleError.
    """

    __slots__ = ("_arena", "_position")

    def __init__(
        self, arena: NodeArena[T] | None = None, position: Handle | None = None
    ) -> None:
        self._arena = arena
        self._position = position if arena is not None else None

    @property
    def position(self) -> Handle | None:
        """Handle of the referenced node, or None for the end iterator."""
        return self._position

    @property
    def is_end(self) -> bool:
        return self._position is None

    def belongs_to(self, arena: NodeArena[T]) -> bool:
        """Return True if this cursor was issued by the list owning arena."""
        return self._arena is arena

    def _node(self) -> Node[T]:
        if self._position is None or self._arena is None:
            raise NullIteratorError("unable to access data from an end iterator")
        return self._arena.get(self._position)

    @property
    def value(self) -> T:
        """
        The referenced element.

        Raises:
            NullIteratorError: If this is the end iterator
            StaleHandleError: If the referenced node was released
        """
        return self._node().data

    @value.setter
    def value(self, data: T) -> None:
        self._node().data = data

    def get(self) -> T:
        return self.value

    def try_get(self) -> Result[T, ListAccessError]:
        """Dereference without raising."""
        try:
            return Ok(self._node().data)
        except (NullIteratorError, StaleHandleError) as exc:
            return Err(exc)

    def increment(self) -> "ListIterator[T]":
        """Advance to the next node in place and return self."""
        if self._position is not None:
            self._position = self._node().next
        return self

    def decrement(self) -> "ListIterator[T]":
        """Step back to the previous node in place and return self."""
        if self._position is not None:
            self._position = self._node().prev
        return self

    def post_increment(self) -> "ListIterator[T]":
        """Advance in place and return a cursor at the prior position."""
        prior = self.copy()
        self.increment()
        return prior

    def post_decrement(self) -> "ListIterator[T]":
        """Step back in place and return a cursor at the prior position."""
        prior = self.copy()
        self.decrement()
        return prior

    def copy(self) -> "ListIterator[T]":
        return ListIterator(self._arena, self._position)

    def __copy__(self) -> "ListIterator[T]":
        return self.copy()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ListIterator):
            return NotImplemented
        if self._position is None or other._position is None:
            return self._position is None and other._position is None
        return self._arena is other._arena and self._position == other._position

    def __repr__(self) -> str:
        if self._position is None:
            return "ListIterator(end)"
        return f"ListIterator(index={self._position.index}, generation={self._position.generation})"
