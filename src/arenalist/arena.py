"""Slot arena that owns list nodes and hands out generation-checked handles."""

from dataclasses import dataclass
from typing import Generic

from arenalist.errors import StaleHandleError
from arenalist.types import T


@dataclass(frozen=True)
class Handle:
    """Immutable name for one occupancy of one arena slot."""

    index: int
    generation: int


class Node(Generic[T]):
    """A node in the doubly-linked list. Links are handles, not references."""

    __slots__ = ("data", "prev", "next")

    def __init__(self, data: T) -> None:
        self.data = data
        self.prev: Handle | None = None
        self.next: Handle | None = None


class NodeArena(Generic[T]):
    """
    Exclusive owner of every node of one list.

    Freed slots are recycled, and each release bumps the slot's generation so
    handles issued before the release no longer resolve.

    Slot storage keeps its peak capacity after releases, like a vector's;
    the generation counters must outlive the nodes for stale handles to miss.
    LinkedList.clear() gives the capacity back by replacing the arena.
    """

    __slots__ = ("_slots", "_generations", "_free", "_live")

    def __init__(self) -> None:
        self._slots: list[Node[T] | None] = []
        self._generations: list[int] = []
        self._free: list[int] = []
        self._live = 0

    def allocate(self, data: T) -> Handle:
        """Store data in a new node and return its handle. O(1) amortised."""
        # Node is built before any slot bookkeeping changes
        node = Node(data)
        if self._free:
            index = self._free.pop()
            self._slots[index] = node
        else:
            index = len(self._slots)
            self._slots.append(node)
            self._generations.append(0)
        self._live += 1
        return Handle(index, self._generations[index])

    def get(self, handle: Handle) -> Node[T]:
        """
        Resolve a handle to its node.

        Raises:
            StaleHandleError: If the slot was released or reused since the
                handle was issued, or never belonged to this arena.
        """
        index = handle.index
        if 0 <= index < len(self._slots) and self._generations[index] == handle.generation:
            node = self._slots[index]
            if node is not None:
                return node
        raise StaleHandleError(f"Handle {handle!r} does not name a live node")

    def release(self, handle: Handle) -> T:
        """Free the node named by handle and return its data."""
        node = self.get(handle)
        index = handle.index
        self._slots[index] = None
        self._generations[index] += 1
        self._free.append(index)
        self._live -= 1
        node.prev = None
        node.next = None
        return node.data

    def __contains__(self, handle: object) -> bool:
        if not isinstance(handle, Handle):
            return False
        try:
            self.get(handle)
        except StaleHandleError:
            return False
        return True

    def __len__(self) -> int:
        """Return the number of live nodes."""
        return self._live
