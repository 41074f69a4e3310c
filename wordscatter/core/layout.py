# wordscatter/core/layout.py
"""
Layout orchestration. layout_once places every token in one shuffled pass;
layout repeats whole passes until one places everything or the retry budget
is spent. Earlier tokens claim space first, so a fresh order usually frees
room for tokens that got stuck in a previous pass.
"""

from __future__ import annotations

import logging
from typing import Sequence

import numpy as np

from wordscatter.core.config import LayoutConfig
from wordscatter.core.placement import find_position
from wordscatter.core.text_metrics import footprint_for
from wordscatter.core.types import AttemptResult, LayoutOutcome, Placement, Rect

logger = logging.getLogger(__name__)


def make_rng(seed: int | None = None) -> np.random.Generator:
    """Seedable random source; None draws fresh OS entropy."""
    return np.random.default_rng(seed)


def shuffle_tokens(tokens: Sequence[str], rng: np.random.Generator) -> list[str]:
    """Uniform random permutation of tokens; the input is left untouched."""
    order = rng.permutation(len(tokens))
    return [tokens[i] for i in order]


def _placement_for(text: str, rect: Rect, config: LayoutConfig, rng: np.random.Generator) -> Placement:
    cx, cy = rect.center
    spread = config.rotation_range_deg
    rotation = float(rng.uniform(-spread, spread)) if spread > 0 else 0.0
    return Placement(
        text=text,
        rect=rect,
        anchor_x=cx,
        anchor_y=cy + config.baseline_offset,
        rotation_deg=rotation,
    )


def layout_once(
    tokens: Sequence[str],
    config: LayoutConfig,
    rng: np.random.Generator,
) -> AttemptResult:
    """One layout attempt. A token that cannot be placed does not stop the pass."""
    result = AttemptResult()
    placed: list[Rect] = []
    for token in shuffle_tokens(tokens, rng):
        footprint = footprint_for(token, config)
        rect = find_position(
            footprint,
            placed,
            config.canvas_width,
            config.canvas_height,
            config.max_attempts,
            rng,
        )
        if rect is None:
            logger.debug("No position for %r after %d attempts", token, config.max_attempts)
            result.unplaced.append(token)
            continue
        placed.append(rect)
        result.placements.append(_placement_for(token, rect, config, rng))
    return result


def layout(
    tokens: Sequence[str],
    config: LayoutConfig | None = None,
    rng: np.random.Generator | None = None,
    seed: int | None = None,
) -> LayoutOutcome:
    """
    Run layout_once up to config.max_retries times and return the first
    complete attempt. After the last failed attempt the outcome carries that
    attempt's unplaced tokens. rng wins over seed when both are given.
    """
    config = config or LayoutConfig()
    if config.max_retries < 1:
        raise ValueError(f"max_retries must be >= 1, got {config.max_retries}")
    if rng is None:
        rng = make_rng(seed)

    tokens = list(tokens)
    if not tokens:
        return LayoutOutcome.success(AttemptResult(), attempts=0)

    attempt = AttemptResult()
    for n in range(1, config.max_retries + 1):
        attempt = layout_once(tokens, config, rng)
        if attempt.complete:
            logger.info("Placed all %d words on attempt %d", len(tokens), n)
            return LayoutOutcome.success(attempt, attempts=n)
        if n < config.max_retries:
            logger.info(
                "Attempt %d failed (%d unplaced), retrying with new random layout...",
                n, len(attempt.unplaced),
            )

    logger.warning(
        "Failed after %d attempts; unplaced: %s",
        config.max_retries, ", ".join(attempt.unplaced),
    )
    return LayoutOutcome.failure(attempt, attempts=config.max_retries)
