# wordscatter/core/validate.py
"""
Independent check of a finished layout with shapely: every box inside the
canvas and no two boxes sharing interior area. Returns a list of issue
strings; empty means the layout is valid.
"""

from __future__ import annotations

from shapely.strtree import STRtree

from wordscatter.core.config import LayoutConfig
from wordscatter.core.geometry import canvas_polygon, rect_to_polygon
from wordscatter.core.types import LayoutOutcome, Placement

AREA_TOLERANCE: float = 1e-9
"""Intersections at or below this area count as edge contact."""


def find_overlaps(placements: list[Placement], tolerance: float = AREA_TOLERANCE) -> list[tuple[int, int]]:
    """Index pairs (i < j) of placements whose boxes share interior area."""
    if len(placements) < 2:
        return []
    polys = [rect_to_polygon(p.rect) for p in placements]
    tree = STRtree(polys)
    pairs = tree.query(polys, predicate="intersects")
    out: list[tuple[int, int]] = []
    for i, j in zip(pairs[0].tolist(), pairs[1].tolist()):
        if i >= j:
            continue
        if polys[i].intersection(polys[j]).area > tolerance:
            out.append((i, j))
    return sorted(out)


def find_out_of_bounds(placements: list[Placement], canvas_width: float, canvas_height: float) -> list[int]:
    canvas = canvas_polygon(canvas_width, canvas_height)
    return [i for i, p in enumerate(placements) if not canvas.covers(rect_to_polygon(p.rect))]


def validate_layout(
    placements: list[Placement],
    canvas_width: float,
    canvas_height: float,
    tokens: list[str] | None = None,
) -> list[str]:
    """
    Issues found in placements. When tokens is given, also checks that each
    token was placed exactly once with its text unchanged.
    """
    issues: list[str] = []
    for i in find_out_of_bounds(placements, canvas_width, canvas_height):
        issues.append(f"out_of_bounds: {placements[i].text!r}")
    for i, j in find_overlaps(placements):
        issues.append(f"overlap: {placements[i].text!r} / {placements[j].text!r}")
    if tokens is not None:
        placed = sorted(p.text for p in placements)
        if placed != sorted(tokens):
            issues.append(f"incomplete: placed {len(placed)} of {len(tokens)} tokens")
    return issues


def validate_outcome(outcome: LayoutOutcome, config: LayoutConfig, tokens: list[str]) -> list[str]:
    """Post-check of a successful layout against its config; failed outcomes yield no issues."""
    if not outcome.ok:
        return []
    return validate_layout(outcome.placements, config.canvas_width, config.canvas_height, tokens)
