"""
The Validatable capability and the check() entry point.
"""

from __future__ import annotations

import logging
from typing import Protocol, TypeVar, runtime_checkable

from .result import Result

logger = logging.getLogger(__name__)

V = TypeVar("V")


@runtime_checkable
class Validatable(Protocol[V]):
    """
    Anything that can validate itself.

    No base class is needed; a `validate()` method returning a Result is
    enough. The validated form may be the object itself or a sibling type,
    e.g. a raw command validating into a well-formed command.
    """

    def validate(self) -> Result[V]: ...


def check(subject: Validatable[V]) -> Result[V]:
    """
    Run `subject.validate()` once and return its result.

    A failed result is returned like a passed one; callers decide what to
    do with it via either(), passed()/failed() or raise_if_failed().

    Raises:
        TypeError: validate() returned something other than a Result
    """
    result = subject.validate()
    if not isinstance(result, Result):
        raise TypeError(
            f"{type(subject).__name__}.validate() must return a Result, "
            f"got {type(result).__name__}"
        )

    name = type(subject).__name__
    if result.passed():
        logger.debug("%s passed validation", name)
    else:
        logger.debug(
            "%s failed validation on fields %s", name, list(result.failed_fields())
        )
    return result
