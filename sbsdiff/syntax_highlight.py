# sbsdiff/syntax_highlight.py
"""Syntax highlighting support for diff content.

Uses Pygments to apply syntax highlighting to context (unchanged) lines
while the renderer keeps its own diff colors for changed lines.
"""

import logging
import os
from functools import lru_cache

from pygments import highlight
from pygments.formatters import TerminalTrueColorFormatter
from pygments.lexers import get_lexer_by_name, get_lexer_for_filename
from pygments.util import ClassNotFound

logger = logging.getLogger(__name__)

# File extension to Pygments lexer name mapping for common cases
EXTENSION_MAP = {
    '.py': 'python',
    '.js': 'javascript',
    '.ts': 'typescript',
    '.tsx': 'tsx',
    '.jsx': 'jsx',
    '.rb': 'ruby',
    '.go': 'go',
    '.rs': 'rust',
    '.java': 'java',
    '.c': 'c',
    '.h': 'c',
    '.cpp': 'cpp',
    '.hpp': 'cpp',
    '.cs': 'csharp',
    '.sh': 'bash',
    '.json': 'json',
    '.yaml': 'yaml',
    '.yml': 'yaml',
    '.html': 'html',
    '.css': 'css',
    '.sql': 'sql',
    '.md': 'markdown',
    '.toml': 'toml',
    '.ini': 'ini',
    '.mk': 'make',
}


@lru_cache(maxsize=32)
def _get_lexer(filename: str):
    """Get Pygments lexer for a filename (cached).

    Args:
        filename: File path or name.

    Returns:
        Pygments lexer or None if not found.
    """
    _, ext = os.path.splitext(filename)
    if ext.lower() in EXTENSION_MAP:
        try:
            return get_lexer_by_name(EXTENSION_MAP[ext.lower()], stripnl=False)
        except ClassNotFound:
            pass

    try:
        return get_lexer_for_filename(filename, stripnl=False)
    except ClassNotFound:
        return None


@lru_cache(maxsize=1)
def _get_formatter() -> TerminalTrueColorFormatter:
    """Get Pygments terminal formatter (cached)."""
    return TerminalTrueColorFormatter(style='monokai')


def highlight_line(line: str, filename: str) -> str:
    """Apply syntax highlighting to a single line of code.

    Args:
        line: The code line to highlight.
        filename: Filename for language detection.

    Returns:
        Line with ANSI escape codes for syntax highlighting,
        or the original line if no lexer matches.
    """
    if not line or not filename:
        return line

    lexer = _get_lexer(filename)
    if lexer is None:
        return line

    try:
        highlighted = highlight(line, lexer, _get_formatter())
    except Exception as e:
        logger.debug("Highlighting failed for %s: %s", filename, e)
        return line

    # Pygments appends a newline; the renderer lays out lines itself
    if highlighted.endswith('\n'):
        highlighted = highlighted[:-1]
    return highlighted


def can_highlight(filename: str) -> bool:
    """Check if syntax highlighting is available for a file."""
    return bool(filename) and _get_lexer(filename) is not None
