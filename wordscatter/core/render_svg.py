# wordscatter/core/render_svg.py
"""
Export a layout as a self-contained SVG: white background and one rotated,
centered <text> per placement. Markup characters in tokens are escaped by the
XML serializer: & < > become entities in text content, while " and ' stay
literal there (valid XML; attribute values still get &quot;). Output is
therefore not byte-identical to a writer that entity-encodes every quote.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from pathlib import Path

from wordscatter.core.config import SVG_BACKGROUND, SVG_NS, LayoutConfig
from wordscatter.core.types import Placement


def _num(value: float) -> str:
    """Canvas dimensions and font size: no trailing zeros."""
    return f"{value:g}"


def _text_element(parent: ET.Element, placement: Placement) -> ET.Element:
    x = f"{placement.anchor_x:.2f}"
    y = f"{placement.anchor_y:.2f}"
    el = ET.SubElement(
        parent,
        "text",
        {
            "x": x,
            "y": y,
            "transform": f"rotate({placement.rotation_deg:.2f} {x} {y})",
        },
    )
    el.text = placement.text
    return el


def build_svg(placements: list[Placement], config: LayoutConfig) -> str:
    """Return the SVG document as a string, XML declaration included."""
    w = _num(config.canvas_width)
    h = _num(config.canvas_height)
    root = ET.Element(
        "svg",
        {
            "xmlns": SVG_NS,
            "width": w,
            "height": h,
            "viewBox": f"0 0 {w} {h}",
        },
    )
    ET.SubElement(root, "rect", {"width": "100%", "height": "100%", "fill": SVG_BACKGROUND})
    words = ET.SubElement(
        root,
        "g",
        {
            "font-family": config.font_family,
            "font-size": _num(config.font_size),
            "text-anchor": "middle",
        },
    )
    for placement in placements:
        _text_element(words, placement)

    ET.indent(root, space="  ")
    body = ET.tostring(root, encoding="unicode", method="xml")
    return '<?xml version="1.0" encoding="UTF-8"?>\n' + body + "\n"


def write_svg(placements: list[Placement], config: LayoutConfig, out_path: str | Path) -> Path:
    """Write build_svg output to out_path (UTF-8). Returns the path."""
    path = Path(out_path)
    path.write_text(build_svg(placements, config), encoding="utf-8")
    return path
