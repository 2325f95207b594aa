"""Two-variant outcome type used instead of raising for expected failures."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, TypeVar, Union

__all__ = ["Ok", "Err", "Result", "UnwrapError"]

T = TypeVar("T")
E = TypeVar("E")
K = TypeVar("K")
U = TypeVar("U")


class UnwrapError(Exception):
    """Raised by ``unwrap`` on an error result."""

    def __init__(self, error: object):
        super().__init__(str(error))
        self.error = error


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def map(self, mapper: Callable[[T], K]) -> "Ok[K]":
        return Ok(mapper(self.value))

    def map_err(self, mapper: Callable[[object], K]) -> "Ok[T]":
        return self

    def match(self, *, ok: Callable[[T], U], err: Callable[[object], U]) -> U:
        return ok(self.value)

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Err(Generic[E]):
    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def map(self, mapper: Callable[[object], K]) -> "Err[E]":
        return self

    def map_err(self, mapper: Callable[[E], K]) -> "Err[K]":
        return Err(mapper(self.error))

    def match(self, *, ok: Callable[[object], U], err: Callable[[E], U]) -> U:
        return err(self.error)

    def unwrap(self):
        raise UnwrapError(self.error)


Result = Union[Ok[T], Err[E]]
