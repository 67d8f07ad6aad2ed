"""Exception classes for arenalist."""


class ArenaListError(Exception):
    """Base exception for all arenalist errors."""


class ListAccessError(ArenaListError):
    """Raised when an element cannot be reached through a list or cursor."""


class EmptyListError(ListAccessError):
    """Raised when front() or back() is called on an empty list."""


class NullIteratorError(ListAccessError):
    """Raised when dereferencing an end iterator."""


class StaleHandleError(ListAccessError):
    """Raised when a handle names a node that has already been released."""


class ForeignIteratorError(ArenaListError):
    """Raised when an iterator from another list is passed to insert() or erase()."""


class CorruptListError(ArenaListError):
    """Raised by validate() when the node links disagree with the list bookkeeping."""
