"""
Tests for the pydantic wire records.
"""

import pytest
from pydantic import ValidationError

from vetted import Failure, FailureRecord, FailureReport, Result, dump_failures


class TestFailureRecord:
    def test_empty_construction_then_populate(self):
        record = FailureRecord()
        assert record.field == ""
        assert record.messages == []

        record.field = "email"
        record.messages = ["must not be blank"]
        assert record.to_failure() == Failure("email", "must not be blank")

    def test_assignment_is_validated(self):
        record = FailureRecord()
        with pytest.raises(ValidationError):
            record.messages = "not a list"  # type: ignore[assignment]

    def test_to_failure_requires_messages(self):
        with pytest.raises(ValueError):
            FailureRecord(field="email").to_failure()

    def test_from_failure(self):
        record = FailureRecord.from_failure(Failure("age", ["a", "b"]))
        assert record.field == "age"
        assert record.messages == ["a", "b"]

    def test_from_json(self):
        record = FailureRecord.model_validate_json(
            '{"field": "email", "messages": ["must not be blank"]}'
        )
        assert record.to_failure() == Failure("email", "must not be blank")


class TestFailureReport:
    def test_from_failed_result(self):
        result = Result.of(
            None, [Failure("email", "must not be blank"), Failure("", "inconsistent")]
        )
        report = FailureReport.from_result(result)
        assert [r.field for r in report.failures] == ["email", ""]
        assert report.to_failures() == result.failures

    def test_from_passed_result(self):
        assert FailureReport.from_result(Result.of("x", [])).failures == []

    def test_json_shape(self):
        result = Result.of(None, [Failure("age", ["must be positive", "must be integer"])])
        assert dump_failures(result) == [
            {"field": "age", "messages": ["must be positive", "must be integer"]}
        ]

    def test_round_trip_through_json(self):
        result = Result.of(None, [Failure("email", "x"), Failure("name", ["y", "z"])])
        payload = FailureReport.from_result(result).model_dump_json()
        restored = FailureReport.model_validate_json(payload).to_failures()
        assert Result.of(None, restored) == result
