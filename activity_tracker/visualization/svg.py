"""Minimal helpers for writing standalone SVG documents as text."""

from __future__ import annotations

import html
from typing import Any

SVG_NS = "http://www.w3.org/2000/svg"


def esc(text: Any) -> str:
    """XML-escape any value, safe for both text content and attributes."""
    return html.escape(str(text), quote=True)


def document(width: int, height: int, body: list[str]) -> str:
    """Wrap body elements in a root <svg> of the given pixel size."""
    lines = [
        f'<svg xmlns="{SVG_NS}" width="{width}" height="{height}" viewBox="0 0 {width} {height}">',
        *body,
        "</svg>",
    ]
    return "\n".join(lines) + "\n"


def rect(
    x: float,
    y: float,
    width: float,
    height: float,
    fill: str,
    radius: float = 0,
    title: str | None = None,
) -> str:
    attrs = f'x="{x:.2f}" y="{y:.2f}" width="{width:.2f}" height="{height:.2f}" fill="{esc(fill)}"'
    if radius:
        attrs += f' rx="{radius:g}" ry="{radius:g}"'
    if title is None:
        return f"<rect {attrs}/>"
    return f"<rect {attrs}><title>{esc(title)}</title></rect>"


def line(x1: float, y1: float, x2: float, y2: float, color: str, width: float = 1) -> str:
    return (
        f'<line x1="{x1:.2f}" y1="{y1:.2f}" x2="{x2:.2f}" y2="{y2:.2f}"'
        f' stroke="{esc(color)}" stroke-width="{width:g}"/>'
    )


def polyline(points: list[tuple[float, float]], color: str, width: float = 2) -> str:
    coords = " ".join(f"{x:.2f},{y:.2f}" for x, y in points)
    return (
        f'<polyline points="{coords}" fill="none"'
        f' stroke="{esc(color)}" stroke-width="{width:g}"/>'
    )


def text(x: float, y: float, content: Any, size: int = 12, anchor: str = "start") -> str:
    # y is the top edge of the text box
    return (
        f'<text x="{x:.2f}" y="{y:.2f}" font-size="{size}" font-family="sans-serif"'
        f' text-anchor="{anchor}" dominant-baseline="hanging">{esc(content)}</text>'
    )
