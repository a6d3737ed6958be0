"""
Result of a validation attempt.

A tagged union: Passed carries the validated value, Failed carries a
non-empty tuple of Failure records. A result can never hold both.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Generic, TypeVar

from .errors import ValidationFailedError
from .failure import Failure

T = TypeVar("T")
R = TypeVar("R")


class Result(ABC, Generic[T]):
    """
    Base for Passed and Failed. Not instantiated directly; use Result.of().

    Subclasses provide `validated`, `failures`, `either` and
    `raise_if_failed`; the field-scoped queries below are shared.
    """

    __slots__ = ()

    if TYPE_CHECKING:

        @property
        def validated(self) -> T | None: ...

        @property
        def failures(self) -> tuple[Failure, ...]: ...

    @staticmethod
    def of(value: T, failures: Iterable[Failure] = ()) -> Result[T]:
        """
        Build a result from a candidate value and the failures found for it.

        No failures -> Passed(value). Any failures -> Failed(failures), and
        the candidate value is dropped.

        Usage:
            Result.of(cmd, [])                               # Passed(cmd)
            Result.of(cmd, [Failure("email", "is blank")])   # Failed(...)
        """
        found = tuple(failures)
        if found:
            return Failed(found)
        return Passed(value)

    @abstractmethod
    def either(
        self,
        on_success: Callable[[T], R],
        on_failure: Callable[[tuple[Failure, ...]], R],
    ) -> R:
        """Call exactly one handler: on_success(value) or on_failure(failures)."""

    @abstractmethod
    def raise_if_failed(self) -> T:
        """Return the validated value, or raise ValidationFailedError."""

    def passed(self, field: str | None = None) -> bool:
        """True if nothing failed, or if nothing failed for `field` when given."""
        if field is None:
            return not self.failures
        return not any(f.field == field for f in self.failures)

    def failed(self, field: str | None = None) -> bool:
        return not self.passed(field)

    def failed_fields(self) -> tuple[str, ...]:
        """Distinct failing field names, in the order first reported."""
        return tuple(dict.fromkeys(f.field for f in self.failures))

    def messages_for(self, field: str) -> tuple[str, ...]:
        """All messages reported against `field`, across every matching failure."""
        return tuple(msg for f in self.failures if f.field == field for msg in f.messages)


@dataclass(frozen=True, slots=True)
class Passed(Result[T]):
    """Success variant holding the validated value."""

    value: T

    @property
    def validated(self) -> T:
        return self.value

    @property
    def failures(self) -> tuple[Failure, ...]:
        return ()

    def either(
        self,
        on_success: Callable[[T], R],
        on_failure: Callable[[tuple[Failure, ...]], R],
    ) -> R:
        return on_success(self.value)

    def raise_if_failed(self) -> T:
        return self.value


@dataclass(frozen=True, slots=True)
class Failed(Result[T]):
    """Failure variant holding at least one Failure."""

    failures: tuple[Failure, ...]

    def __init__(self, failures: Iterable[Failure]):
        found = tuple(failures)
        if not found:
            raise ValueError("Failed result needs at least one Failure")
        for f in found:
            if not isinstance(f, Failure):
                raise TypeError(f"Expected Failure, got {type(f).__name__}")
        object.__setattr__(self, "failures", found)

    @property
    def validated(self) -> None:
        return None

    def either(
        self,
        on_success: Callable[[T], R],
        on_failure: Callable[[tuple[Failure, ...]], R],
    ) -> R:
        return on_failure(self.failures)

    def raise_if_failed(self) -> T:
        raise ValidationFailedError(self.failures)
