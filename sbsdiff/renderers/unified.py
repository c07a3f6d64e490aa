# sbsdiff/renderers/unified.py
"""Unified diff colorizer - classic +/- format with colors.

Used when side-by-side display is disabled. Lines are classified by their
leading token only; nothing is parsed or paired.
"""

from .base import ColorScheme


def classify_unified_line(line: str, colors: ColorScheme) -> str:
    """Return the color code for a raw unified diff line ("" for none)."""
    if line.startswith("+++") or line.startswith("---"):
        return colors.header
    if line.startswith("+"):
        return colors.added
    if line.startswith("-"):
        return colors.removed
    if line.startswith("@@"):
        return colors.hunk
    if line.startswith("diff "):
        return colors.header
    return ""


def colorize_unified(diff_text: str, colors: ColorScheme) -> str:
    """Render raw unified diff text with colors (without parsing).

    Args:
        diff_text: Raw unified diff text.
        colors: Color scheme.

    Returns:
        Colorized diff text, one output line per input line. Only newlines
        split lines; form feeds and other control characters stay in place.
    """
    colored = []
    for line in diff_text.split("\n"):
        color = classify_unified_line(line, colors)
        if color:
            colored.append(f"{color}{line}{colors.reset}")
        else:
            colored.append(line)
    return "\n".join(colored)
