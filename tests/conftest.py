"""
Pytest configuration shared by the unit tests.

Provides helpers for laying out a projects/ tree and resets in-memory
telemetry between tests.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from activity_tracker.observability import telemetry


@pytest.fixture(autouse=True)
def reset_telemetry():
    telemetry.reset()
    yield
    telemetry.reset()


@pytest.fixture
def projects_dir(tmp_path) -> Path:
    path = tmp_path / "projects"
    path.mkdir()
    return path


@pytest.fixture
def write_log(projects_dir):
    """Write projects/<name>/activity-log.json from a list or raw text."""

    def _write(project: str, entries: list[dict[str, Any]] | str) -> Path:
        project_dir = projects_dir / project
        project_dir.mkdir(exist_ok=True)
        log_path = project_dir / "activity-log.json"
        text = entries if isinstance(entries, str) else json.dumps(entries)
        log_path.write_text(text, encoding="utf-8")
        return log_path

    return _write
