from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

from mediatypes.core.errors import MediaTypesError, OnError, raise_error

T = TypeVar("T")


@dataclass(frozen=True)
class Refinement(Generic[T]):
    """A validation rule that a raw value has to pass before it is wrapped into a value type."""

    guard: Callable[[T], bool]
    make_error: Callable[[T], MediaTypesError]

    __slots__ = ("guard", "make_error")

    def check(self, value: T, on_error: OnError = raise_error) -> T:
        """Return `value` unchanged if it passes the guard.

        Otherwise the error goes to `on_error`, and whatever it returns is returned instead.
        """
        if self.guard(value):
            return value
        return on_error(self.make_error(value))

    def enforce(self, value: T, on_error: OnError = raise_error) -> T:
        """Like `check`, but never returns an invalid value.

        Used by constructors: if `on_error` does not raise, the original error is raised.
        """
        if self.guard(value):
            return value
        error = self.make_error(value)
        on_error(error)
        raise error
