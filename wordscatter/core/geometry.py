# wordscatter/core/geometry.py
"""
Rectangle helpers: overlap test, canvas bounds, shapely conversions.
"""

from __future__ import annotations

from shapely.geometry import Polygon, box

from wordscatter.core.types import Footprint, Rect


def rects_overlap(a: Rect, b: Rect) -> bool:
    """
    True when the interiors of a and b intersect.
    Rectangles whose edges touch exactly are not overlapping, so zero-gap
    neighbours are allowed; a strict "<" separation test would reject them.
    """
    return not (
        a.right <= b.x
        or b.right <= a.x
        or a.bottom <= b.y
        or b.bottom <= a.y
    )


def overlaps_any(rect: Rect, obstacles: list[Rect]) -> bool:
    return any(rects_overlap(rect, other) for other in obstacles)


def fits_canvas(footprint: Footprint, canvas_width: float, canvas_height: float) -> bool:
    """True if a box of this size can sit somewhere inside the canvas."""
    return footprint.width <= canvas_width and footprint.height <= canvas_height


def rect_within_canvas(rect: Rect, canvas_width: float, canvas_height: float) -> bool:
    return (
        rect.x >= 0
        and rect.y >= 0
        and rect.right <= canvas_width
        and rect.bottom <= canvas_height
    )


def rect_to_polygon(rect: Rect) -> Polygon:
    return box(rect.x, rect.y, rect.right, rect.bottom)


def canvas_polygon(canvas_width: float, canvas_height: float) -> Polygon:
    return box(0.0, 0.0, canvas_width, canvas_height)
