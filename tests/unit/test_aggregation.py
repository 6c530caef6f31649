"""
Tests for the daily/project counters and the quality averager.
"""

from __future__ import annotations

import pytest

from activity_tracker.activity.aggregation import (
    average_quality,
    count_by_date,
    count_by_project,
    summarize,
)
from activity_tracker.storage.models import ActivityRecord


def _record(timestamp: str, project: str, quality: dict | None = None) -> ActivityRecord:
    data: dict = {"timestamp": timestamp, "project": project}
    if quality is not None:
        data["changes"] = {"codeQuality": quality}
    return ActivityRecord.model_validate(data)


@pytest.fixture
def example_records():
    return [
        _record("2024-01-01T00:00:00Z", "a"),
        _record("2024-01-01T00:00:00Z", "b"),
        _record("2024-01-02T00:00:00Z", "a"),
    ]


def test_count_by_date_example(example_records):
    assert count_by_date(example_records) == {"2024-01-01": 2, "2024-01-02": 1}


def test_count_by_project_example(example_records):
    assert count_by_project(example_records) == {"a": 2, "b": 1}


def test_daily_bucket_keeps_first_seen_order():
    records = [
        _record("2024-01-05T00:00:00Z", "a"),
        _record("2024-01-01T00:00:00Z", "a"),
        _record("2024-01-05T08:00:00Z", "a"),
    ]
    assert list(count_by_date(records)) == ["2024-01-05", "2024-01-01"]


def test_project_names_are_not_normalized():
    records = [_record("2024-01-01T00:00:00Z", "API"), _record("2024-01-01T00:00:00Z", "api")]
    assert count_by_project(records) == {"API": 1, "api": 1}


def test_duplicates_double_count():
    record = _record("2024-01-01T00:00:00Z", "a")
    assert count_by_project([record, record]) == {"a": 2}


@pytest.mark.parametrize(
    "records",
    [
        [],
        [_record("2024-01-01T00:00:00Z", "a")],
        [_record(f"2024-02-{day:02d}T10:00:00Z", f"p{day % 3}") for day in range(1, 29)],
    ],
)
def test_bucket_totals_match_record_count(records):
    assert sum(count_by_date(records).values()) == len(records)
    assert sum(count_by_project(records).values()) == len(records)


def test_average_quality_averages_per_date():
    records = [
        _record("2024-01-01T01:00:00Z", "a", {"complexity": 2, "commentPercentage": 10}),
        _record("2024-01-01T02:00:00Z", "b", {"complexity": 5, "commentPercentage": 30}),
    ]

    [sample] = average_quality(records)

    assert sample.date == "2024-01-01"
    assert sample.complexity == (2 + 5) / 2
    assert sample.comment_percentage == (10 + 30) / 2
    assert sample.count == 2


def test_average_quality_skips_records_without_quality():
    records = [
        _record("2024-01-01T00:00:00Z", "a"),
        _record("2024-01-01T00:00:00Z", "a", {"complexity": 4, "commentPercentage": 8}),
        _record("2024-01-02T00:00:00Z", "a"),
    ]

    samples = average_quality(records)

    assert [s.date for s in samples] == ["2024-01-01"]
    assert samples[0].complexity == 4
    assert samples[0].count == 1


def test_average_quality_sorted_by_date():
    records = [
        _record("2024-03-01T00:00:00Z", "a", {"complexity": 1}),
        _record("2023-12-31T00:00:00Z", "a", {"complexity": 1}),
        _record("2024-01-15T00:00:00Z", "a", {"complexity": 1}),
    ]
    assert [s.date for s in average_quality(records)] == ["2023-12-31", "2024-01-15", "2024-03-01"]


def test_average_quality_empty():
    assert average_quality([]) == []


def test_summarize_bundles_all_datasets(example_records):
    summary = summarize(example_records)

    assert summary.total_records == 3
    assert summary.daily == {"2024-01-01": 2, "2024-01-02": 1}
    assert summary.projects == {"a": 2, "b": 1}
    assert summary.quality == []


def test_average_quality_count_is_integer():
    records = [
        _record("2024-01-01T00:00:00Z", "a", {"complexity": 1.5, "commentPercentage": 3}),
        _record("2024-01-01T06:00:00Z", "a", {"complexity": 2.5, "commentPercentage": 5}),
    ]

    [sample] = average_quality(records)

    assert sample.count == 2
    assert isinstance(sample.count, int)
    assert sample.complexity == 2.0
    assert sample.comment_percentage == 4.0
