"""
Profile Updater entry point.

Rewrites <login>/<login>/README.md so the GitHub profile page shows the
charts published by the activity-tracker repository. Runs after the
visualizer; the image URLs point at files that job commits.

Environment:
    GITHUB_REPOSITORY   owner/repo of the workflow run (required)
    GITHUB_TOKEN        token allowed to write the profile repository (required)

Usage:
    activity-update-profile
"""

from __future__ import annotations

import argparse
import sys
from datetime import UTC, datetime
from email.utils import format_datetime

from activity_tracker.config import (
    ACTIVITY_CHART_FILENAME,
    CODE_QUALITY_FILENAME,
    GITHUB_RAW_URL,
    HEATMAP_FILENAME,
    PROFILE_COMMIT_MESSAGE,
    PROFILE_README_PATH,
    VISUALIZATIONS_BRANCH,
    VISUALIZATIONS_DIR,
    VISUALIZATIONS_REPO,
)
from activity_tracker.github.client import GitHubContentsClient
from activity_tracker.infrastructure.env import get_required_env
from activity_tracker.observability.logging import get_logger
from activity_tracker.observability.telemetry import log_event

logger = get_logger(__name__)


def visualizations_url(
    username: str,
    repo_name: str = VISUALIZATIONS_REPO,
    branch: str = VISUALIZATIONS_BRANCH,
) -> str:
    return f"{GITHUB_RAW_URL}/{username}/{repo_name}/{branch}/{VISUALIZATIONS_DIR}"


def build_profile_readme(
    username: str,
    updated_at: datetime,
    repo_name: str = VISUALIZATIONS_REPO,
    branch: str = VISUALIZATIONS_BRANCH,
) -> str:
    """Markdown for the profile README; updated_at is rendered as an RFC 1123 GMT date."""
    base = visualizations_url(username, repo_name, branch)
    if updated_at.tzinfo is None:
        updated_at = updated_at.replace(tzinfo=UTC)

    return "\n".join(
        [
            "# Coding Activity Overview",
            "",
            "## Recent Coding Activity",
            "",
            "### Activity Heatmap",
            f"![Activity Heatmap]({base}/{HEATMAP_FILENAME})",
            "",
            "### Project Activity",
            f"![Project Activity]({base}/{ACTIVITY_CHART_FILENAME})",
            "",
            "### Code Quality",
            f"![Code Quality]({base}/{CODE_QUALITY_FILENAME})",
            "",
            f"Last updated: {format_datetime(updated_at.astimezone(UTC), usegmt=True)}",
        ]
    )


def update_profile(client: GitHubContentsClient, now: datetime | None = None) -> str:
    """
    Publish a fresh profile README for the token's owner.

    The current README sha is always read first so the write is accepted;
    a concurrent change between the two calls makes the write fail.

    Returns:
        sha of the written README

    Raises:
        RemoteStoreError: If any GitHub call fails (StaleRevisionError on conflict)
    """
    username = client.resolve_identity()
    logger.info("Visualizations URL: %s", visualizations_url(username))

    content = build_profile_readme(username, now or datetime.now(UTC))
    logger.info("Generated README content")

    current = client.read_file(username, username, PROFILE_README_PATH)
    sha = client.write_file(
        username,
        username,
        PROFILE_README_PATH,
        PROFILE_COMMIT_MESSAGE,
        content,
        current.sha if current else None,
    )
    log_event("profile.updated", username=username, created=current is None)
    logger.info("Profile README updated successfully")
    return sha


def main(argv: list[str] | None = None) -> int:
    argparse.ArgumentParser(
        description="Publish the coding activity charts to the GitHub profile README"
    ).parse_args(argv)

    try:
        repository = get_required_env("GITHUB_REPOSITORY")
        token = get_required_env("GITHUB_TOKEN")
        logger.info("Starting profile update from %s", repository)
        update_profile(GitHubContentsClient(token))
    except Exception:
        logger.exception("Error updating profile")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
