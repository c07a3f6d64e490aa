# sbsdiff/terminal.py
"""Terminal metrics for diff rendering.

Measures and fits strings that may carry ANSI color escapes. Both the
length counter and the truncation scanner walk the string with an explicit
two-state machine (outside / inside an escape sequence) so an escape is
never split and never counted as visible text.
"""

import os
import sys
from typing import Optional, TextIO

ESC = "\033"
ESCAPE_END = "m"
ELLIPSIS = "..."

DEFAULT_TERMINAL_WIDTH = 120
MIN_COLUMN_WIDTH = 40
GUTTER_WIDTH = 4
COLUMN_SEPARATOR_WIDTH = 3  # " │ "


def visible_length(text: str) -> int:
    """Count the characters of text that are not part of an escape sequence.

    An escape sequence starts at ESC and ends at the next ``m``.

    Args:
        text: String that may contain ANSI color codes.

    Returns:
        Number of visible characters.
    """
    if not text:
        return 0

    length = 0
    in_escape = False
    for ch in text:
        if ch == ESC:
            in_escape = True
        elif in_escape and ch == ESCAPE_END:
            in_escape = False
        elif not in_escape:
            length += 1
    return length


def fit_to_width(text: str, width: int) -> str:
    """Truncate or pad text so its visible length is exactly width.

    Short text is padded with trailing spaces. Long text is copied up to
    ``width - 3`` visible characters, escape sequences included whole,
    and finished with ``"..."``.

    Args:
        text: String that may contain ANSI color codes.
        width: Target visible width.

    Returns:
        String whose visible length equals width (empty when width <= 0).
    """
    if width <= 0:
        return ""
    text = text or ""

    visible = visible_length(text)
    if visible <= width:
        return text + " " * (width - visible)

    limit = width - len(ELLIPSIS)
    out = []
    visible = 0
    in_escape = False
    for ch in text:
        if visible >= limit and not in_escape:
            break
        out.append(ch)
        if ch == ESC:
            in_escape = True
        elif in_escape and ch == ESCAPE_END:
            in_escape = False
        elif not in_escape:
            visible += 1

    if limit < 0:
        # Narrower than the ellipsis itself
        return ELLIPSIS[:width]

    result = "".join(out) + ELLIPSIS
    return result + " " * (width - visible_length(result))


def _terminal_columns() -> int:
    """Columns of the terminal attached to stdout, 0 when unknown."""
    try:
        return os.get_terminal_size(sys.stdout.fileno()).columns
    except (AttributeError, ValueError, OSError):
        return 0


def resolve_width(max_width: Optional[int] = None) -> int:
    """Determine the terminal width to render for.

    Args:
        max_width: Caller limit; applied when positive and smaller than
            the detected terminal width.

    Returns:
        Width in columns (DEFAULT_TERMINAL_WIDTH when the terminal size
        cannot be queried).
    """
    columns = _terminal_columns()
    if columns <= 0:
        columns = DEFAULT_TERMINAL_WIDTH

    if max_width is not None and 0 < max_width < columns:
        columns = max_width
    return columns


def column_width(terminal_width: int) -> int:
    """Width of each side column, never below MIN_COLUMN_WIDTH (80 columns gives 40)."""
    return max((terminal_width - COLUMN_SEPARATOR_WIDTH) // 2, MIN_COLUMN_WIDTH)


def supports_color(stream: Optional[TextIO] = None) -> bool:
    """Check whether ANSI colors should be emitted to stream.

    Mirrors the color-depth check used for interactive terminals: a TTY
    whose TERM is set and not ``dumb``, with NO_COLOR unset.
    """
    stream = stream if stream is not None else sys.stdout
    if os.environ.get("NO_COLOR"):
        return False
    isatty = getattr(stream, "isatty", None)
    if isatty is None or not isatty():
        return False
    term = os.environ.get("TERM", "").lower()
    return bool(term) and term != "dumb"
