"""word-scatter: random non-overlapping word layouts rendered as SVG."""

__version__ = "0.1.0"
