"""
vetted - validation outcomes as values.

Usage:
    from vetted import Failure, Failed, Passed, Result

    class SignupCommand:
        def validate(self) -> Result["SignupCommand"]:
            failures = []
            if not self.email:
                failures.append(Failure("email", "must not be blank"))
            return Result.of(self, failures)

    SignupCommand(...).validate().either(handle, report)
"""

import logging

from .errors import ValidationFailedError
from .failure import Failure
from .protocol import Validatable, check
from .records import FailureRecord, FailureReport, dump_failures
from .result import Failed, Passed, Result

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Result types
    "Result",
    "Passed",
    "Failed",
    "Failure",
    # Capability
    "Validatable",
    "check",
    # Errors
    "ValidationFailedError",
    # Wire records
    "FailureRecord",
    "FailureReport",
    "dump_failures",
]
