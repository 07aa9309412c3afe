"""Success-or-errors results carrying a value or a list of errors."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Iterable, TypeVar

DEFAULT_ERROR_MESSAGE = "DEFAULT ERROR"

T = TypeVar("T")


@dataclass(frozen=True)
class Error:
    """A single error description."""

    message: str = DEFAULT_ERROR_MESSAGE

    def __str__(self) -> str:
        return self.message


class Result(Generic[T]):
    """Either a successful value or a non-empty collection of errors."""

    __slots__ = ("_value", "_errors")

    def __init__(self, value: T | None = None, errors: Iterable[Error] = ()) -> None:
        self._value = value
        self._errors: tuple[Error, ...] = tuple(errors)

    @classmethod
    def ok(cls, value: T | None = None) -> Result[T]:
        """Build a successful result holding ``value``."""
        return cls(value)

    @classmethod
    def fail(cls, errors: Error | Iterable[Error]) -> Result[T]:
        """Build a failed result from one error or several."""
        collected = (errors,) if isinstance(errors, Error) else tuple(errors)
        if not collected:
            raise ValueError("a failed result needs at least one error")
        return cls(None, collected)

    def is_success(self) -> bool:
        """True when the result carries no errors."""
        return not self._errors

    def value(self) -> T | None:
        """The carried value, or None for a failed result."""
        return self._value if self.is_success() else None

    def errors(self) -> list[Error]:
        """A fresh list of the carried errors."""
        return list(self._errors)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Result):
            return NotImplemented
        return self._value == other._value and self._errors == other._errors

    def __repr__(self) -> str:
        if self.is_success():
            return f"Result.ok({self._value!r})"
        return f"Result.fail({list(self._errors)!r})"