# wordscatter/core/render.py
"""
Matplotlib PNG preview of a layout. With debug boxes the footprint rectangles
are drawn under the text so crowding and padding are easy to inspect.
"""

from __future__ import annotations

import warnings
from pathlib import Path

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
from matplotlib.patches import Rectangle

from wordscatter.core.config import PREVIEW_DPI, SVG_BACKGROUND, LayoutConfig
from wordscatter.core.types import Placement


def _new_fig(width: float, height: float, dpi: int) -> tuple[plt.Figure, plt.Axes]:
    fig = plt.figure(figsize=(width / dpi, height / dpi), dpi=dpi, constrained_layout=False)
    ax = fig.add_axes([0, 0, 1, 1])
    ax.set_xlim(0, width)
    # Canvas y grows downward like SVG.
    ax.set_ylim(height, 0)
    ax.set_aspect("equal", adjustable="box")
    ax.axis("off")
    return fig, ax


def _draw_box(ax: plt.Axes, placement: Placement) -> None:
    r = placement.rect
    ax.add_patch(
        Rectangle(
            (r.x, r.y), r.width, r.height,
            facecolor="none", edgecolor="tab:red", linewidth=0.8, linestyle="--",
            zorder=2,
        )
    )


def render_preview(
    placements: list[Placement],
    config: LayoutConfig,
    output_path: str | Path,
    debug_boxes: bool = False,
    dpi: int = PREVIEW_DPI,
) -> Path:
    """Render placements to PNG at canvas size. Returns output path."""
    fig, ax = _new_fig(config.canvas_width, config.canvas_height, dpi)
    # Font size is in canvas px; matplotlib wants points.
    fontsize_pt = config.font_size * 72.0 / dpi
    for placement in placements:
        if debug_boxes:
            _draw_box(ax, placement)
        ax.text(
            placement.anchor_x, placement.anchor_y, placement.text,
            fontsize=fontsize_pt,
            ha="center", va="baseline",
            # SVG rotates clockwise for positive angles in a y-down frame.
            rotation=-placement.rotation_deg,
            rotation_mode="anchor",
            color="black",
            zorder=5,
        )
    out = Path(output_path)
    with warnings.catch_warnings():
        # Emoji glyphs missing from the default font are expected in previews.
        warnings.filterwarnings("ignore", message=".*[Gg]lyph.*missing.*", category=UserWarning)
        fig.savefig(out, dpi=dpi, facecolor=SVG_BACKGROUND)
    plt.close(fig)
    return out
