# wordscatter/core/text_metrics.py
"""
Token footprints. The default estimate needs no font files: every character
is treated as a fixed-width cell slightly narrower than the font size, which
suits roughly square pictographic glyphs. measure_footprint uses Pillow when
real metrics are wanted.
"""

from __future__ import annotations

import warnings

from wordscatter.core.config import (
    CHAR_WIDTH_RATIO,
    FONT_FAMILY,
    LINE_HEIGHT_RATIO,
    PADDING_RATIO,
    LayoutConfig,
)
from wordscatter.core.types import Footprint

_font_warning_emitted: set[str] = set()


def text_length_units(text: str) -> int:
    """Length in UTF-16 code units; astral emoji count as two cells."""
    return len(text.encode("utf-16-le")) // 2


def padding_for(font_size: float) -> float:
    return font_size * PADDING_RATIO


def estimate_footprint(text: str, font_size: float) -> Footprint:
    """
    width = length * font_size * 0.9 + 2 * padding
    height = font_size * 1.2 + 2 * padding, with padding = font_size / 4.
    """
    padding = padding_for(font_size)
    width = text_length_units(text) * font_size * CHAR_WIDTH_RATIO + padding * 2
    height = font_size * LINE_HEIGHT_RATIO + padding * 2
    return Footprint(width=width, height=height)


def _load_font(font_family: str, font_size: float):
    """Load PIL ImageFont; fallback with warning if font not found."""
    from PIL import ImageFont

    size = max(1, int(round(font_size)))
    primary = font_family.split(",")[0].strip().strip("'\"")
    candidates = [
        primary + ".ttf",
        primary.replace(" ", "") + ".ttf",
        "DejaVuSans.ttf",
        "arial.ttf",
        "Arial.ttf",
    ]
    for name in candidates:
        try:
            return ImageFont.truetype(name, size=size)
        except OSError:
            continue
    if font_family not in _font_warning_emitted:
        _font_warning_emitted.add(font_family)
        warnings.warn(f"Font not found: {font_family!r}; using default.", UserWarning)
    return ImageFont.load_default()


def measure_text(text: str, font_family: str, font_size: float) -> tuple[float, float]:
    """Return (width, height) of the rendered text ink box in canvas units."""
    from PIL import Image, ImageDraw

    font = _load_font(font_family, font_size)
    img = Image.new("RGB", (1, 1))
    draw = ImageDraw.Draw(img)
    bbox = draw.textbbox((0, 0), text, font=font)
    w = float(bbox[2] - bbox[0])
    h = float(bbox[3] - bbox[1])
    # Bitmap default fonts ignore the requested size; rescale to it.
    size_used = float(getattr(font, "size", font_size) or font_size)
    scale = font_size / max(1.0, size_used)
    return (w * scale, h * scale)


def measure_footprint(text: str, font_size: float, font_family: str = FONT_FAMILY) -> Footprint:
    """Pillow-measured footprint with the same padding as the estimate."""
    w, h = measure_text(text, font_family, font_size)
    padding = padding_for(font_size)
    # Never shorter than a line box, so rotated labels keep vertical room.
    h = max(h, font_size * LINE_HEIGHT_RATIO)
    return Footprint(width=w + padding * 2, height=h + padding * 2)


def footprint_for(text: str, config: LayoutConfig) -> Footprint:
    """Footprint for text according to config.footprint_mode."""
    if config.footprint_mode == "measured":
        return measure_footprint(text, config.font_size, config.font_family)
    return estimate_footprint(text, config.font_size)
