# sbsdiff/renderers/base.py
"""Color table shared by the diff renderers."""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from ..config import DisplaySettings


# Semantic color name -> ANSI escape. Resolved once at import, never mutated.
DIFF_COLORS: Mapping[str, str] = MappingProxyType({
    "reset": "\033[0m",
    "header": "\033[1;36m",      # Bold cyan
    "hunk": "\033[36m",          # Cyan
    "added": "\033[32m",         # Green
    "removed": "\033[31m",       # Red
    "line_number": "\033[90m",   # Gray
    "separator": "\033[90m",     # Gray
    "context": "\033[37m",       # White
    "empty_bg": "\033[100m",     # Dark gray bg
})


@dataclass(frozen=True)
class ColorScheme:
    """Color scheme for diff rendering.

    All values are ANSI escape codes (empty strings disable a color).
    """
    reset: str = DIFF_COLORS["reset"]
    header: str = DIFF_COLORS["header"]
    hunk: str = DIFF_COLORS["hunk"]
    added: str = DIFF_COLORS["added"]
    removed: str = DIFF_COLORS["removed"]
    line_number: str = DIFF_COLORS["line_number"]
    separator: str = DIFF_COLORS["separator"]
    context: str = DIFF_COLORS["context"]
    empty: str = DIFF_COLORS["empty_bg"]


# Default color scheme
DEFAULT_COLOR_SCHEME = ColorScheme()

# No-color scheme for plain output and tests
NO_COLOR_SCHEME = ColorScheme(
    reset="",
    header="",
    hunk="",
    added="",
    removed="",
    line_number="",
    separator="",
    context="",
    empty="",
)


def color_scheme_for(settings: DisplaySettings) -> ColorScheme:
    """Pick the color scheme matching settings.use_colors."""
    return DEFAULT_COLOR_SCHEME if settings.use_colors else NO_COLOR_SCHEME

