# wordscatter/core/placement.py
"""
Rejection sampling for a single token: draw uniform positions inside the
canvas until one clears every obstacle or the attempt budget runs out.
"""

from __future__ import annotations

import logging

import numpy as np

from wordscatter.core.geometry import fits_canvas, overlaps_any
from wordscatter.core.types import Footprint, Rect

logger = logging.getLogger(__name__)


def find_position(
    footprint: Footprint,
    obstacles: list[Rect],
    canvas_width: float,
    canvas_height: float,
    max_attempts: int,
    rng: np.random.Generator,
) -> Rect | None:
    """
    Return a Rect of footprint's size inside the canvas overlapping none of
    obstacles, or None after max_attempts misses. A footprint larger than the
    canvas returns None without sampling.
    """
    if not fits_canvas(footprint, canvas_width, canvas_height):
        logger.debug(
            "Footprint %.1fx%.1f does not fit canvas %sx%s",
            footprint.width, footprint.height, canvas_width, canvas_height,
        )
        return None

    span_x = canvas_width - footprint.width
    span_y = canvas_height - footprint.height
    for _ in range(max_attempts):
        x = float(rng.uniform(0.0, span_x))
        y = float(rng.uniform(0.0, span_y))
        candidate = Rect(x=x, y=y, width=footprint.width, height=footprint.height)
        if not overlaps_any(candidate, obstacles):
            return candidate
    return None
