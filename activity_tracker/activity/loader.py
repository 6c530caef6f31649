"""
Activity log loading.

Reads projects/<name>/activity-log.json for every project directory and
concatenates the records. A broken log only costs that project its records;
it never aborts the run.
"""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from activity_tracker.config import ACTIVITY_LOG_FILENAME
from activity_tracker.observability.logging import get_logger
from activity_tracker.observability.telemetry import counter, log_event
from activity_tracker.storage.models import ActivityRecord

logger = get_logger(__name__)

_RECORD_LIST = TypeAdapter(list[ActivityRecord])


class ActivityLogError(ValueError):
    """A project's activity log exists but cannot be turned into records."""


def _reject_constant(token: str) -> float:
    # json accepts NaN and Infinity; activity logs are strict JSON
    raise ActivityLogError(f"non-standard JSON constant {token}")


def parse_activity_log(raw: str) -> list[ActivityRecord]:
    """
    Parse the text of one activity log.

    Raises:
        ActivityLogError: If the text is not a JSON array of valid records
    """
    try:
        data = json.loads(raw, parse_constant=_reject_constant)
    except json.JSONDecodeError as e:
        raise ActivityLogError(f"invalid JSON: {e}") from e

    if not isinstance(data, list):
        raise ActivityLogError(f"expected a JSON array, got {type(data).__name__}")

    try:
        return _RECORD_LIST.validate_python(data)
    except ValidationError as e:
        raise ActivityLogError(f"{e.error_count()} invalid record field(s): {e}") from e


def _project_dirs(projects_dir: Path) -> list[Path]:
    return sorted(entry for entry in projects_dir.iterdir() if entry.is_dir())


def load_activity(projects_dir: str | Path) -> list[ActivityRecord]:
    """
    Load every project's activity log under projects_dir.

    Args:
        projects_dir: Directory whose immediate subdirectories are projects

    Returns:
        All records, project by project (directories sorted by name), in file
        order within each log. Empty if projects_dir does not exist.

    Side Effects:
        - Reads files under projects_dir
        - Logs a warning for each unparsable log
    """
    root = Path(projects_dir)
    if not root.is_dir():
        logger.info("Projects directory %s not found; no activity to load", root)
        return []

    records: list[ActivityRecord] = []
    for project_dir in _project_dirs(root):
        log_path = project_dir / ACTIVITY_LOG_FILENAME
        if not log_path.is_file():
            logger.debug("No %s in %s", ACTIVITY_LOG_FILENAME, project_dir.name)
            continue

        try:
            project_records = parse_activity_log(log_path.read_text(encoding="utf-8"))
        except (ActivityLogError, OSError, UnicodeDecodeError) as e:
            logger.warning("Could not parse log file for project %s: %s", project_dir.name, e)
            counter("activity.log.unparsable")
            continue

        logger.debug("Loaded %d records for project %s", len(project_records), project_dir.name)
        records.extend(project_records)

    counter("activity.records.loaded", len(records))
    log_event("activity.loaded", projects_dir=str(root), records=len(records))
    return records
