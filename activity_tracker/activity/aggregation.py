"""
Aggregation of activity records into the datasets the charts draw.

Every function takes the full record sequence and returns a finished value;
accumulators are local to the call.
"""

from __future__ import annotations

from collections import Counter, defaultdict
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from activity_tracker.storage.models import ActivityRecord, QualitySample


def count_by_date(records: Iterable[ActivityRecord]) -> dict[str, int]:
    """Records per UTC day, keyed in first-seen order (not calendar order)."""
    return dict(Counter(record.date for record in records))


def count_by_project(records: Iterable[ActivityRecord]) -> dict[str, int]:
    """Records per project name, keyed in first-seen order."""
    return dict(Counter(record.project for record in records))


def average_quality(records: Iterable[ActivityRecord]) -> list[QualitySample]:
    """
    Average the quality metrics per day.

    Records without changes.codeQuality are skipped entirely.

    Returns:
        One QualitySample per day that had at least one quality record,
        sorted ascending by date.
    """
    # date -> [comment_sum, complexity_sum]
    sums: defaultdict[str, list[float]] = defaultdict(lambda: [0.0, 0.0])
    counts: Counter[str] = Counter()
    for record in records:
        quality = record.code_quality
        if quality is None:
            continue
        bucket = sums[record.date]
        bucket[0] += quality.comment_percentage
        bucket[1] += quality.complexity
        counts[record.date] += 1

    samples = []
    for date, (comment_sum, complexity_sum) in sums.items():
        count = counts[date]
        samples.append(
            QualitySample(
                date=date,
                comment_percentage=comment_sum / count if count else 0.0,
                complexity=complexity_sum / count if count else 0.0,
                count=count,
            )
        )
    # ISO dates sort chronologically as strings
    return sorted(samples, key=lambda sample: sample.date)


@dataclass(frozen=True)
class ActivitySummary:
    """All datasets derived from one run's records."""

    total_records: int
    daily: dict[str, int] = field(default_factory=dict)
    projects: dict[str, int] = field(default_factory=dict)
    quality: list[QualitySample] = field(default_factory=list)


def summarize(records: Sequence[ActivityRecord]) -> ActivitySummary:
    return ActivitySummary(
        total_records=len(records),
        daily=count_by_date(records),
        projects=count_by_project(records),
        quality=average_quality(records),
    )
