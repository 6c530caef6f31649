"""
Activity Visualizer entry point.

Loads projects/*/activity-log.json, aggregates it and writes the three chart
images into the visualizations directory:

    heatmap.svg         activity per day
    activity-chart.svg  activity per project
    code-quality.svg    average complexity / comment percentage per day

Usage:
    activity-visualize
    activity-visualize --projects-dir ./projects --output-dir ./visualizations
"""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from pathlib import Path

from activity_tracker.activity.aggregation import summarize
from activity_tracker.activity.loader import load_activity
from activity_tracker.config import (
    ACTIVITY_CHART_FILENAME,
    CODE_QUALITY_FILENAME,
    HEATMAP_FILENAME,
    PROJECTS_DIR,
    VISUALIZATIONS_DIR,
)
from activity_tracker.observability.logging import get_logger
from activity_tracker.observability.telemetry import log_event, time_block
from activity_tracker.visualization.charts import (
    render_activity_chart,
    render_heatmap,
    render_quality_chart,
)

logger = get_logger(__name__)


@dataclass(frozen=True)
class VisualizationPaths:
    heatmap: Path
    activity_chart: Path
    code_quality: Path


def _write_svg(path: Path, document: str) -> None:
    path.write_text(document, encoding="utf-8")
    logger.info("Wrote %s", path)


def generate_visualizations(
    projects_dir: str | Path = PROJECTS_DIR,
    output_dir: str | Path = VISUALIZATIONS_DIR,
) -> VisualizationPaths:
    """
    Render all charts for the activity found under projects_dir.

    Missing input is not an error: the charts are written in their empty or
    placeholder state.

    Returns:
        Paths of the three written files

    Side Effects:
        - Creates output_dir if needed
        - Overwrites heatmap.svg, activity-chart.svg and code-quality.svg
    """
    records = load_activity(projects_dir)
    summary = summarize(records)
    logger.info(
        "Aggregated %d records: %d days, %d projects, %d quality days",
        summary.total_records,
        len(summary.daily),
        len(summary.projects),
        len(summary.quality),
    )

    out = Path(output_dir)
    out.mkdir(parents=True, exist_ok=True)
    paths = VisualizationPaths(
        heatmap=out / HEATMAP_FILENAME,
        activity_chart=out / ACTIVITY_CHART_FILENAME,
        code_quality=out / CODE_QUALITY_FILENAME,
    )

    with time_block("visualization.render"):
        _write_svg(paths.heatmap, render_heatmap(summary.daily))
        _write_svg(paths.activity_chart, render_activity_chart(summary.projects))
        if not summary.quality:
            logger.info("No code quality data available yet for visualization")
        _write_svg(paths.code_quality, render_quality_chart(summary.quality))

    log_event("visualization.generated", records=summary.total_records, output_dir=str(out))
    return paths


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Render coding activity charts as SVG")
    parser.add_argument(
        "--projects-dir",
        type=Path,
        default=Path(PROJECTS_DIR),
        help=f"Directory holding <project>/activity-log.json (default: {PROJECTS_DIR})",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=Path(VISUALIZATIONS_DIR),
        help=f"Directory the SVG files are written to (default: {VISUALIZATIONS_DIR})",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    try:
        generate_visualizations(args.projects_dir, args.output_dir)
    except Exception:
        logger.exception("Failed to generate visualizations")
        return 1
    logger.info("Visualizations generated successfully")
    return 0


if __name__ == "__main__":
    sys.exit(main())
