# sbsdiff/renderers/__init__.py
"""Diff renderers: side-by-side columns and the unified colorizer."""

from .base import (
    DIFF_COLORS,
    DEFAULT_COLOR_SCHEME,
    NO_COLOR_SCHEME,
    ColorScheme,
    color_scheme_for,
)
from .side_by_side import SideBySideRenderer
from .unified import classify_unified_line, colorize_unified

__all__ = [
    "ColorScheme",
    "DIFF_COLORS",
    "DEFAULT_COLOR_SCHEME",
    "NO_COLOR_SCHEME",
    "color_scheme_for",
    "SideBySideRenderer",
    "classify_unified_line",
    "colorize_unified",
]
