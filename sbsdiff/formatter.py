# sbsdiff/formatter.py
"""Diff formatter: picks the rendering mode and applies the fallbacks.

Supports two rendering modes:
- Side-by-side (settings.side_by_side): two aligned columns
- Unified: the raw diff with per-line colors

Multi-file input is split at each "diff " header and every file is
rendered on its own. Fallbacks never raise: empty input reports "no
differences" and a piece without hunk markers is passed through unmodified.

Usage:
    from sbsdiff import create_formatter, DisplaySettings

    formatter = create_formatter(DisplaySettings(terminal_width=100))
    formatter.show(diff_text)          # writes to stdout
    text = formatter.format_output(diff_text)
"""

import logging
import re
import sys
from typing import List, Optional, TextIO

from .config import DisplaySettings
from .console import print_info
from .parser import parse_unified_diff
from .renderers.base import color_scheme_for
from .renderers.side_by_side import SideBySideRenderer
from .renderers.unified import colorize_unified

logger = logging.getLogger(__name__)

# Pattern to detect unified diff content
HUNK_HEADER = re.compile(r'^@@ -\d+(?:,\d+)? \+\d+(?:,\d+)? @@', re.MULTILINE)

# Zero-width split point before each "diff " file header line
FILE_BOUNDARY = re.compile(r"^(?=diff )", re.MULTILINE)

NO_DIFFERENCES_MESSAGE = "No differences to display"


class DiffFormatter:
    """Formats unified diff text for the terminal, one file at a time.

    The formatter holds only its settings; every call parses a fresh
    FileDiff, so one instance may format any number of inputs.
    """

    def __init__(self, settings: Optional[DisplaySettings] = None):
        self._settings = settings or DisplaySettings()
        self._console_width: Optional[int] = None
        self._renderer = SideBySideRenderer()

    @property
    def settings(self) -> DisplaySettings:
        """Display settings used for rendering."""
        return self._settings

    def set_console_width(self, width: Optional[int]) -> None:
        """Pin the rendering width instead of querying the terminal.

        Args:
            width: Terminal width in columns, or None to query the terminal.
        """
        self._console_width = width

    def get_current_mode(self) -> str:
        """Get the current rendering mode name: "side_by_side" or "unified"."""
        return "side_by_side" if self._settings.side_by_side else "unified"

    def is_diff(self, text: str) -> bool:
        """Check if text contains a unified diff hunk marker."""
        return bool(text) and HUNK_HEADER.search(text) is not None

    def format_output(self, text: Optional[str]) -> Optional[str]:
        """Format unified diff text according to the settings.

        Args:
            text: Unified diff text for one or more files.

        Returns:
            None for empty input. Otherwise each file is rendered in turn,
            with files that hold no hunk passed through raw.
        """
        if not text:
            return None

        if not self._settings.side_by_side:
            return colorize_unified(text, color_scheme_for(self._settings))

        return "".join(self._render_file(piece) for piece in split_file_diffs(text))

    def _render_file(self, text: str) -> str:
        """Render one file's diff, or return it raw when it has no hunks."""
        parsed = parse_unified_diff(text)
        if parsed is None:
            logger.debug("Falling back to raw output for %d chars of text", len(text))
            return text

        return self._renderer.render(parsed, self._settings, self._console_width)

    def show(self, text: Optional[str], stream: Optional[TextIO] = None) -> bool:
        """Write the formatted diff to stream (stdout by default).

        Args:
            text: Unified diff text.
            stream: Output stream.

        Returns:
            True if there was content to show, False for empty input.
        """
        stream = stream if stream is not None else sys.stdout
        output = self.format_output(text)
        if output is None:
            print_info(NO_DIFFERENCES_MESSAGE, file=stream)
            return False

        stream.write(output if output.endswith("\n") else output + "\n")
        return True


def split_file_diffs(text: str) -> List[str]:
    """Split diff text into one piece per file.

    A piece starts at each ``diff `` header line. Text before the first
    header (or text with no header at all) forms its own piece.

    Args:
        text: Unified diff text for one or more files.

    Returns:
        Non-empty pieces whose concatenation is the original text.
    """
    return [piece for piece in FILE_BOUNDARY.split(text) if piece]


def create_formatter(settings: Optional[DisplaySettings] = None) -> DiffFormatter:
    """Factory function to create a DiffFormatter instance."""
    return DiffFormatter(settings)
