"""
Failure record: a field name plus the messages explaining why it failed.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Failure:
    """
    Field-scoped validation failure.

    Carried inside a Failed result, never raised. An empty field name
    conventionally refers to the whole object.

    Usage:
        Failure("email", "must not be blank")
        Failure("age", ["must be positive", "must be integer"])
    """

    field: str
    messages: tuple[str, ...]

    def __init__(self, field: str, messages: str | Sequence[str]):
        if not isinstance(field, str):
            raise TypeError(f"Failure field must be str, got {type(field).__name__}")

        if isinstance(messages, str):
            normalized: tuple[str, ...] = (messages,)
        else:
            normalized = tuple(messages)

        if not normalized:
            raise ValueError(f"Failure for field {field!r} needs at least one message")
        for msg in normalized:
            if not isinstance(msg, str):
                raise TypeError(
                    f"Failure messages must be str, got {type(msg).__name__}"
                )

        object.__setattr__(self, "field", field)
        object.__setattr__(self, "messages", normalized)

    @classmethod
    def of(cls, field: str, message: str) -> Failure:
        """Single-message failure."""
        return cls(field, (message,))

    def __str__(self) -> str:
        return f"{self.field or '<object>'}: {'; '.join(self.messages)}"
