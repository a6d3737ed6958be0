"""
Wire records for failures.

Pydantic models used at the serialization boundary (e.g., an HTTP error
body). Unlike Failure, a FailureRecord may be built empty and filled in
afterwards; it only has to be valid once converted back with to_failure().
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .failure import Failure
from .result import Result


class FailureRecord(BaseModel):
    """Plain field + messages record."""

    model_config = ConfigDict(validate_assignment=True)

    field: str = ""
    messages: list[str] = Field(default_factory=list)

    @classmethod
    def from_failure(cls, failure: Failure) -> FailureRecord:
        return cls(field=failure.field, messages=list(failure.messages))

    def to_failure(self) -> Failure:
        """Convert back to a Failure; raises ValueError if no messages were set."""
        return Failure(self.field, self.messages)


class FailureReport(BaseModel):
    """All failures of one result, in reported order."""

    failures: list[FailureRecord] = Field(default_factory=list)

    @classmethod
    def from_result(cls, result: Result[Any]) -> FailureReport:
        return cls(failures=[FailureRecord.from_failure(f) for f in result.failures])

    def to_failures(self) -> tuple[Failure, ...]:
        return tuple(record.to_failure() for record in self.failures)


def dump_failures(result: Result[Any]) -> list[dict[str, Any]]:
    """JSON-ready list of {"field": ..., "messages": [...]} dicts."""
    return FailureReport.from_result(result).model_dump(mode="json")["failures"]
