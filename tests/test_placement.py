# tests/test_placement.py
"""
Placement search: bounded rejection sampling, oversize footprints rejected
without sampling, deterministic for a fixed seed.
"""

from __future__ import annotations

import numpy as np

from wordscatter.core.geometry import rect_within_canvas, rects_overlap
from wordscatter.core.placement import find_position
from wordscatter.core.types import Footprint, Rect


def test_empty_canvas_places_first_try() -> None:
    rng = np.random.default_rng(0)
    rect = find_position(Footprint(20, 10), [], 100, 100, max_attempts=1, rng=rng)
    assert rect is not None
    assert rect.width == 20 and rect.height == 10
    assert rect_within_canvas(rect, 100, 100)


def test_avoids_obstacles() -> None:
    rng = np.random.default_rng(1)
    obstacles = [Rect(0, 0, 100, 50)]
    for _ in range(20):
        rect = find_position(Footprint(10, 10), obstacles, 100, 100, max_attempts=1000, rng=rng)
        assert rect is not None
        assert not rects_overlap(rect, obstacles[0])
        assert rect.y >= 50


def test_fully_blocked_returns_none() -> None:
    rng = np.random.default_rng(2)
    rect = find_position(Footprint(10, 10), [Rect(0, 0, 100, 100)], 100, 100, max_attempts=50, rng=rng)
    assert rect is None


def test_oversize_footprint_returns_none_without_sampling() -> None:
    rng = np.random.default_rng(3)
    state = rng.bit_generator.state
    assert find_position(Footprint(101, 10), [], 100, 100, max_attempts=5000, rng=rng) is None
    assert find_position(Footprint(10, 101), [], 100, 100, max_attempts=5000, rng=rng) is None
    assert rng.bit_generator.state == state


def test_exact_fit_lands_at_origin() -> None:
    rng = np.random.default_rng(4)
    rect = find_position(Footprint(100, 100), [], 100, 100, max_attempts=1, rng=rng)
    assert rect == Rect(0.0, 0.0, 100, 100)


def test_zero_attempts_returns_none() -> None:
    rng = np.random.default_rng(5)
    assert find_position(Footprint(10, 10), [], 100, 100, max_attempts=0, rng=rng) is None


def test_same_seed_same_position() -> None:
    a = find_position(Footprint(10, 10), [], 500, 500, 10, np.random.default_rng(42))
    b = find_position(Footprint(10, 10), [], 500, 500, 10, np.random.default_rng(42))
    assert a == b
