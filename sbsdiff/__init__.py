# sbsdiff/__init__.py
"""Side-by-side rendering of unified diffs for the terminal.

Parses one file's unified diff, aligns removed and added lines into rows
and renders them in two width-constrained, ANSI-colored columns. When
side-by-side display is off, the raw diff is colorized line by line.

Example:
    from sbsdiff import DisplaySettings, create_formatter

    formatter = create_formatter(DisplaySettings(terminal_width=100))
    formatter.show(diff_text)
"""

from .config import DisplaySettings, load_display_settings, save_display_settings
from .errors import GitCommandError, SbsdiffError
from .formatter import DiffFormatter, create_formatter, split_file_diffs
from .pairing import pair_file_diff, pair_hunk_lines
from .parser import (
    DiffHunk,
    DiffLine,
    FileDiff,
    LineType,
    parse_hunk_header,
    parse_unified_diff,
    sanitize_line,
)
from .renderers import (
    DEFAULT_COLOR_SCHEME,
    NO_COLOR_SCHEME,
    ColorScheme,
    SideBySideRenderer,
    colorize_unified,
)
from .terminal import fit_to_width, resolve_width, visible_length

__all__ = [
    # Formatter
    "DiffFormatter",
    "create_formatter",
    "split_file_diffs",
    # Settings
    "DisplaySettings",
    "load_display_settings",
    "save_display_settings",
    # Parser types
    "FileDiff",
    "DiffHunk",
    "DiffLine",
    "LineType",
    "parse_unified_diff",
    "parse_hunk_header",
    "sanitize_line",
    # Pairing
    "pair_hunk_lines",
    "pair_file_diff",
    # Rendering
    "SideBySideRenderer",
    "colorize_unified",
    "ColorScheme",
    "DEFAULT_COLOR_SCHEME",
    "NO_COLOR_SCHEME",
    # Terminal metrics
    "visible_length",
    "fit_to_width",
    "resolve_width",
    # Errors
    "SbsdiffError",
    "GitCommandError",
]
