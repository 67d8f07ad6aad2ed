"""Explicit success/failure values for non-raising element access."""

from dataclasses import dataclass
from typing import Generic, Literal, NoReturn, TypeAlias, Union

from arenalist.types import E, T


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful access carrying the element."""

    value: T

    def is_ok(self) -> Literal[True]:
        return True

    def unwrap(self) -> T:
        """Return the carried element."""
        return self.value

    def unwrap_or(self, default: T) -> T:
        """Return the carried element; default is ignored."""
        return self.value


@dataclass(frozen=True)
class Err(Generic[E]):
    """Failed access carrying the exception that would have been raised."""

    error: E

    def is_ok(self) -> Literal[False]:
        return False

    def unwrap(self) -> NoReturn:
        """Raise the carried error."""
        raise self.error

    def unwrap_or(self, default: T) -> T:
        return default


Result: TypeAlias = Union[Ok[T], Err[E]]
