# sbsdiff/console.py
"""Status messages printed around diff output.

Diff text itself is written verbatim to the output stream; these helpers
only print the short [INFO]/[ERROR] lines, styled with Rich.
"""

from typing import Optional, TextIO

from rich.console import Console
from rich.text import Text


def _console(file: Optional[TextIO], stderr: bool = False) -> Console:
    return Console(file=file, stderr=stderr, highlight=False, soft_wrap=True)


def print_info(message: str, file: Optional[TextIO] = None) -> None:
    """Print an informational message (cyan, stdout by default)."""
    _console(file).print(Text(f"[INFO] {message}", style="cyan"))


def print_error(message: str, file: Optional[TextIO] = None) -> None:
    """Print an error message (red, stderr by default)."""
    _console(file, stderr=True).print(Text(f"[ERROR] {message}", style="red"))
