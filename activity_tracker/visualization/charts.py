"""
Chart rendering for the activity datasets.

Each function turns one dataset into a complete SVG document. Layouts are
fixed-size; values are scaled against the dataset maximum, floored at 1 so an
empty or all-zero dataset still yields a finite scale.
"""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence

from activity_tracker.storage.models import QualitySample
from activity_tracker.visualization import svg

# --- Heatmap ---
HEATMAP_WIDTH = 800
HEATMAP_HEIGHT = 200
HEATMAP_COLUMNS = 52
CELL_SIZE = 10
CELL_PADDING = 2
HEATMAP_MARGIN = 20

# --- Project bars ---
BAR_CHART_WIDTH = 800
BAR_CHART_HEIGHT = 300
BAR_WIDTH = 40
BAR_GAP = 20
BAR_LEFT = 50
BAR_BASELINE = 250
BAR_MAX_HEIGHT = 200
BAR_LABEL_Y = 260
BAR_COLOR = "#4A90E2"

# --- Quality lines ---
QUALITY_WIDTH = 800
QUALITY_HEIGHT = 400
PLOT_LEFT = 50
PLOT_TOP = 50
PLOT_BOTTOM = 350
PLOT_RIGHT = 750
PLOT_WIDTH = PLOT_RIGHT - PLOT_LEFT
PLOT_HEIGHT = PLOT_BOTTOM - PLOT_TOP
AXIS_COLOR = "#888"
COMPLEXITY_COLOR = "#E74C3C"
COMMENTS_COLOR = "#2ECC71"
NO_QUALITY_DATA = "No code quality data available yet"


def scale_max(values: Sequence[float]) -> float:
    """Largest value, but never below 1."""
    return max([*values, 1])


def heatmap_color(intensity: float) -> str:
    return f"rgb(0,{math.floor(intensity * 155)},{math.floor(intensity * 255)})"


def heatmap_cell_origin(index: int) -> tuple[int, int]:
    """Top-left corner of the index-th cell; cells wrap every HEATMAP_COLUMNS."""
    step = CELL_SIZE + CELL_PADDING
    row, column = divmod(index, HEATMAP_COLUMNS)
    return column * step + HEATMAP_MARGIN, row * step + HEATMAP_MARGIN


def render_heatmap(daily: Mapping[str, int]) -> str:
    """One cell per day in the mapping's iteration order."""
    max_count = scale_max(list(daily.values()))
    body = []
    for index, (date, count) in enumerate(daily.items()):
        x, y = heatmap_cell_origin(index)
        body.append(
            svg.rect(
                x,
                y,
                CELL_SIZE,
                CELL_SIZE,
                heatmap_color(count / max_count),
                radius=2,
                title=f"{date}: {count}",
            )
        )
    return svg.document(HEATMAP_WIDTH, HEATMAP_HEIGHT, body)


def render_activity_chart(projects: Mapping[str, int]) -> str:
    """Vertical bar per project with its name centered underneath."""
    max_activity = scale_max(list(projects.values()))
    body = []
    for index, (name, activity) in enumerate(projects.items()):
        height = activity / max_activity * BAR_MAX_HEIGHT
        x = index * (BAR_WIDTH + BAR_GAP) + BAR_LEFT
        body.append(svg.rect(x, BAR_BASELINE - height, BAR_WIDTH, height, BAR_COLOR, radius=4))
        body.append(svg.text(x + BAR_WIDTH / 2, BAR_LABEL_Y, name, size=12, anchor="middle"))
    return svg.document(BAR_CHART_WIDTH, BAR_CHART_HEIGHT, body)


def _plot_points(values: Sequence[float]) -> list[tuple[float, float]]:
    x_step = PLOT_WIDTH / (len(values) - 1 or 1)
    peak = scale_max(values)
    return [
        (PLOT_LEFT + i * x_step, PLOT_BOTTOM - value / peak * PLOT_HEIGHT)
        for i, value in enumerate(values)
    ]


def render_quality_chart(samples: Sequence[QualitySample]) -> str:
    """
    Complexity and comment-percentage lines across the given days.

    Each line is scaled to its own maximum. Without samples the chart is a
    single placeholder label.
    """
    if not samples:
        body = [svg.text(QUALITY_WIDTH / 2, QUALITY_HEIGHT / 2, NO_QUALITY_DATA, size=14, anchor="middle")]
        return svg.document(QUALITY_WIDTH, QUALITY_HEIGHT, body)

    body = [
        svg.line(PLOT_LEFT, PLOT_TOP, PLOT_LEFT, PLOT_BOTTOM, AXIS_COLOR),
        svg.line(PLOT_LEFT, PLOT_BOTTOM, PLOT_RIGHT, PLOT_BOTTOM, AXIS_COLOR),
        svg.polyline(_plot_points([s.complexity for s in samples]), COMPLEXITY_COLOR),
        svg.polyline(_plot_points([s.comment_percentage for s in samples]), COMMENTS_COLOR),
    ]

    legend = [("Complexity", COMPLEXITY_COLOR), ("Comments %", COMMENTS_COLOR)]
    for offset, (label, color) in enumerate(legend):
        y = PLOT_TOP + offset * 20
        body.append(svg.rect(600, y, 10, 10, color))
        body.append(svg.text(620, y, label, size=12))

    return svg.document(QUALITY_WIDTH, QUALITY_HEIGHT, body)
