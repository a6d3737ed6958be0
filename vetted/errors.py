"""
Exception raised when a caller opts to treat a failed result as an error.
"""

from __future__ import annotations

from collections.abc import Sequence

from .failure import Failure


class ValidationFailedError(ValueError):
    """Failed result converted to an exception by raise_if_failed()."""

    def __init__(self, failures: Sequence[Failure]):
        self.failures: tuple[Failure, ...] = tuple(failures)
        summary = "; ".join(str(f) for f in self.failures)
        super().__init__(f"Validation failed: {summary}")
