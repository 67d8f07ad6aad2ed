"""arenalist - Doubly-linked list with arena-owned nodes and node-identity cursors."""

import logging

from arenalist.arena import Handle, Node, NodeArena
from arenalist.errors import (
    ArenaListError,
    CorruptListError,
    EmptyListError,
    ForeignIteratorError,
    ListAccessError,
    NullIteratorError,
    StaleHandleError,
)
from arenalist.iterator import ListIterator
from arenalist.linkedlist import LinkedList, swap
from arenalist.result import Err, Ok, Result

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.0.1"

__all__ = [
    "LinkedList",
    "ListIterator",
    "swap",
    "Handle",
    "Node",
    "NodeArena",
    "Ok",
    "Err",
    "Result",
    "ArenaListError",
    "ListAccessError",
    "EmptyListError",
    "NullIteratorError",
    "StaleHandleError",
    "ForeignIteratorError",
    "CorruptListError",
]
