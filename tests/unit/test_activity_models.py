from __future__ import annotations

import pytest
from pydantic import ValidationError

from activity_tracker.storage.models import ActivityRecord


def test_date_truncates_utc_timestamp():
    record = ActivityRecord.model_validate({"timestamp": "2024-01-01T23:59:59Z", "project": "a"})
    assert record.date == "2024-01-01"


def test_date_converts_offset_to_utc_day():
    record = ActivityRecord.model_validate(
        {"timestamp": "2024-01-02T01:00:00+05:00", "project": "a"}
    )
    assert record.date == "2024-01-01"


def test_naive_timestamp_is_treated_as_utc():
    record = ActivityRecord.model_validate({"timestamp": "2024-03-05T00:30:00", "project": "a"})
    assert record.date == "2024-03-05"


def test_code_quality_absent_without_changes():
    record = ActivityRecord.model_validate({"timestamp": "2024-01-01T00:00:00Z", "project": "a"})
    assert record.code_quality is None


def test_code_quality_absent_when_changes_has_no_quality():
    record = ActivityRecord.model_validate(
        {"timestamp": "2024-01-01T00:00:00Z", "project": "a", "changes": {"linesAdded": 4}}
    )
    assert record.code_quality is None


def test_code_quality_parsed_from_camel_case():
    record = ActivityRecord.model_validate(
        {
            "timestamp": "2024-01-01T00:00:00Z",
            "project": "a",
            "changes": {"codeQuality": {"commentPercentage": 12.5, "complexity": 3}},
        }
    )
    assert record.code_quality is not None
    assert record.code_quality.comment_percentage == 12.5
    assert record.code_quality.complexity == 3


def test_missing_or_null_metrics_count_as_zero():
    record = ActivityRecord.model_validate(
        {
            "timestamp": "2024-01-01T00:00:00Z",
            "project": "a",
            "changes": {"codeQuality": {"commentPercentage": None}},
        }
    )
    assert record.code_quality.comment_percentage == 0
    assert record.code_quality.complexity == 0


def test_record_requires_project():
    with pytest.raises(ValidationError):
        ActivityRecord.model_validate({"timestamp": "2024-01-01T00:00:00Z"})


def test_records_are_frozen():
    record = ActivityRecord.model_validate({"timestamp": "2024-01-01T00:00:00Z", "project": "a"})
    with pytest.raises(ValidationError):
        record.project = "b"


@pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
def test_non_finite_metrics_are_rejected(value):
    with pytest.raises(ValidationError):
        ActivityRecord.model_validate(
            {
                "timestamp": "2024-01-01T00:00:00Z",
                "project": "a",
                "changes": {"codeQuality": {"complexity": value}},
            }
        )
