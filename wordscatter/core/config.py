# wordscatter/core/config.py
"""
Central configuration for word scatter layouts.
Module constants hold the defaults; LayoutConfig carries them into a run so
several layouts can use different settings side by side.
"""

from __future__ import annotations

import os
from dataclasses import asdict, dataclass
from typing import Literal

FootprintMode = Literal["estimate", "measured"]

# ----- Paths -----
DEFAULT_INPUT_PATH: str = "words.txt"
DEFAULT_OUTPUT_PATH: str = "reading.svg"
REPORTS_DIR: str = "reports"

# ----- Canvas (11 x 8.5 in landscape at 96 DPI) -----
CANVAS_WIDTH: int = 1056
CANVAS_HEIGHT: int = 816

# ----- Typography -----
FONT_SIZE: float = 24.0
"""Large font so single emoji/words read well when printed."""

FONT_FAMILY: str = "Arial, sans-serif"

PADDING_RATIO: float = 0.25
"""Padding on every side of a footprint = font_size * PADDING_RATIO."""

CHAR_WIDTH_RATIO: float = 0.9
"""Estimated advance per character as a fraction of font size."""

LINE_HEIGHT_RATIO: float = 1.2
"""Estimated line box height as a fraction of font size."""

BASELINE_OFFSET_RATIO: float = 1.0 / 3.0
"""Anchor y is shifted down by font_size * BASELINE_OFFSET_RATIO to center glyphs."""

# ----- Search budgets -----
MAX_ATTEMPTS: int = 5000
"""Random positions tried per token before it is reported unplaced."""

MAX_RETRIES: int = 10
"""Full layout attempts before the layout is declared infeasible."""

# ----- Rotation -----
ROTATION_RANGE_DEG: float = 15.0
"""Rotation is drawn from [-ROTATION_RANGE_DEG, +ROTATION_RANGE_DEG)."""

# ----- SVG -----
SVG_BACKGROUND: str = "#FFFFFF"
SVG_NS: str = "http://www.w3.org/2000/svg"

# ----- Preview (PNG) -----
PREVIEW_DPI: int = 96

# ----- Determinism -----
SEED: int | None = None
"""Random seed; None draws fresh entropy so each run gives a new arrangement."""

# ----- Logging -----
LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "INFO").upper()


@dataclass(frozen=True)
class LayoutConfig:
    """Canvas, typography and search budgets for one layout run."""
    canvas_width: float = CANVAS_WIDTH
    canvas_height: float = CANVAS_HEIGHT
    font_size: float = FONT_SIZE
    font_family: str = FONT_FAMILY
    max_attempts: int = MAX_ATTEMPTS
    max_retries: int = MAX_RETRIES
    rotation_range_deg: float = ROTATION_RANGE_DEG
    footprint_mode: FootprintMode = "estimate"

    def __post_init__(self) -> None:
        if self.canvas_width <= 0 or self.canvas_height <= 0:
            raise ValueError(
                f"Canvas size must be positive, got {self.canvas_width}x{self.canvas_height}"
            )
        if self.font_size <= 0:
            raise ValueError(f"Font size must be positive, got {self.font_size}")
        if self.max_attempts < 0:
            raise ValueError(f"max_attempts must be >= 0, got {self.max_attempts}")
        if self.max_retries < 1:
            raise ValueError(f"max_retries must be >= 1, got {self.max_retries}")
        if self.footprint_mode not in ("estimate", "measured"):
            raise ValueError(f"Unknown footprint mode: {self.footprint_mode!r}")

    @property
    def padding(self) -> float:
        return self.font_size * PADDING_RATIO

    @property
    def baseline_offset(self) -> float:
        return self.font_size * BASELINE_OFFSET_RATIO

    def to_dict(self) -> dict:
        return asdict(self)
