"""Centralized configuration for the activity tracker jobs.

Typed constants for input/output layout, the GitHub API and the profile
README.  Environment variable overrides use safe defaults so both jobs start
without extra env configuration; only the credentials in
activity_tracker.infrastructure.env are mandatory.
"""

from __future__ import annotations

import os

# --- App ---
APP_VERSION: str = "0.1.0"

# --- Filesystem layout (relative to the working directory) ---
PROJECTS_DIR: str = os.getenv("ACTIVITY_TRACKER_PROJECTS_DIR", "projects")
VISUALIZATIONS_DIR: str = os.getenv("ACTIVITY_TRACKER_VISUALIZATIONS_DIR", "visualizations")
ACTIVITY_LOG_FILENAME: str = "activity-log.json"

HEATMAP_FILENAME: str = "heatmap.svg"
ACTIVITY_CHART_FILENAME: str = "activity-chart.svg"
CODE_QUALITY_FILENAME: str = "code-quality.svg"

# --- GitHub API ---
GITHUB_API_URL: str = os.getenv("ACTIVITY_TRACKER_GITHUB_API_URL", "https://api.github.com")
GITHUB_RAW_URL: str = os.getenv(
    "ACTIVITY_TRACKER_GITHUB_RAW_URL", "https://raw.githubusercontent.com"
)
HTTP_TIMEOUT_SECONDS: float = float(os.getenv("ACTIVITY_TRACKER_HTTP_TIMEOUT", "30"))
USER_AGENT: str = "Activity-Tracker"
GITHUB_ACCEPT: str = "application/vnd.github.v3+json"

# --- Profile README ---
VISUALIZATIONS_REPO: str = os.getenv("ACTIVITY_TRACKER_VISUALIZATIONS_REPO", "activity-tracker")
VISUALIZATIONS_BRANCH: str = os.getenv("ACTIVITY_TRACKER_VISUALIZATIONS_BRANCH", "main")
PROFILE_README_PATH: str = "README.md"
PROFILE_COMMIT_MESSAGE: str = "Update coding activity visualizations"
