"""Type definitions for arenalist."""

from typing import Callable, TypeAlias, TypeVar

# Element type stored in a list
T = TypeVar("T")

# Error type carried by a failed Result
E = TypeVar("E", bound=BaseException)

# Zero-argument constructor used in place of a default-constructed element
Factory: TypeAlias = Callable[[], T]
