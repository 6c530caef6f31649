"""
Domain models (Pydantic v2) for activity logs and remote files.

Activity records arrive as camelCase JSON written by the editor-side tracker;
aliases keep the wire names while the Python attributes stay snake_case. All
models are frozen: they are read-only inputs to the aggregation functions.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class CodeQuality(BaseModel):
    """Quality metrics attached to a single activity event."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    comment_percentage: float = Field(default=0.0, alias="commentPercentage", allow_inf_nan=False)
    complexity: float = Field(default=0.0, allow_inf_nan=False)

    @field_validator("comment_percentage", "complexity", mode="before")
    @classmethod
    def _null_as_zero(cls, value: Any) -> Any:
        # The tracker writes null when a metric could not be computed
        return 0.0 if value is None else value


class Changes(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    code_quality: CodeQuality | None = Field(default=None, alias="codeQuality")


class ActivityRecord(BaseModel):
    """One logged coding event."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    timestamp: datetime
    project: str
    changes: Changes | None = None

    @property
    def date(self) -> str:
        """UTC calendar day of the event as YYYY-MM-DD (naive timestamps are UTC)."""
        ts = self.timestamp
        if ts.tzinfo is None:
            ts = ts.replace(tzinfo=UTC)
        return ts.astimezone(UTC).date().isoformat()

    @property
    def code_quality(self) -> CodeQuality | None:
        if self.changes is None:
            return None
        return self.changes.code_quality


class QualitySample(BaseModel):
    """Per-day averages of the quality metrics."""

    model_config = ConfigDict(frozen=True)

    date: str
    comment_percentage: float
    complexity: float
    count: int


class RemoteFile(BaseModel):
    """A file read from the contents API, with its content already decoded."""

    model_config = ConfigDict(frozen=True)

    path: str
    sha: str
    content: str = ""
