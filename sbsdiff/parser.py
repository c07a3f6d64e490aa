# sbsdiff/parser.py
"""Parser for unified diff format to structured representation.

Converts one file's unified diff text into a FileDiff that the pairing
engine and renderers consume. The parser is a two-state machine:

- Preamble: file headers (``diff --git``, ``index``, ``---``/``+++``,
  extended git headers such as ``new file mode`` or ``rename from``).
- InHunk: body lines selected by their first character.

A ``@@`` line starts a new hunk from either state.
"""

import logging
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

logger = logging.getLogger(__name__)

MAX_LINE_LENGTH = 1023
MAX_HUNK_HEADER_LENGTH = 255
TAB_WIDTH = 4

DEV_NULL = "/dev/null"

# Lenient range patterns; a malformed header keeps the defaults below
HUNK_OLD_RANGE = re.compile(r"\s*-(\d+)(?:,(\d+))?")
HUNK_NEW_RANGE = re.compile(r"\+(\d+)(?:,(\d+))?")


class LineType(Enum):
    """Kind of a diff line or aligned row."""
    CONTEXT = "context"
    ADDED = "added"
    REMOVED = "removed"
    MODIFIED = "modified"
    HEADER = "header"
    HUNK = "hunk"
    BINARY = "binary"
    EMPTY = "empty"


_LEFT_TYPES = (LineType.CONTEXT, LineType.REMOVED, LineType.MODIFIED)
_RIGHT_TYPES = (LineType.CONTEXT, LineType.ADDED, LineType.MODIFIED)


@dataclass
class DiffLine:
    """A single diff line (or aligned row) with per-side text and numbers."""
    type: LineType
    left_line_no: Optional[int] = None
    right_line_no: Optional[int] = None
    left_text: str = ""
    right_text: str = ""

    @property
    def has_left(self) -> bool:
        """True when the old side of this line exists."""
        return self.type in _LEFT_TYPES

    @property
    def has_right(self) -> bool:
        """True when the new side of this line exists."""
        return self.type in _RIGHT_TYPES


@dataclass
class DiffHunk:
    """A hunk of changes with context."""
    old_start: int = 0
    old_count: int = 1
    new_start: int = 0
    new_count: int = 1
    header: str = ""
    lines: List[DiffLine] = field(default_factory=list)

    @property
    def section(self) -> str:
        """Text after the closing @@ marker (e.g. a function name)."""
        end = self.header.find("@@", 2)
        if end < 0:
            return ""
        return self.header[end + 2:].strip()


@dataclass
class FileDiff:
    """Complete parsed diff for a single file."""
    old_path: str = ""
    new_path: str = ""
    is_new: bool = False
    is_deleted: bool = False
    is_binary: bool = False
    is_renamed: bool = False
    hunks: List[DiffHunk] = field(default_factory=list)
    additions: int = 0
    deletions: int = 0

    @property
    def display_path(self) -> str:
        """Get the most relevant path for display."""
        if self.is_deleted or not self.new_path:
            return self.old_path
        return self.new_path


def sanitize_line(text: str) -> str:
    """Make a diff body line safe for fixed-width display.

    Tabs expand to the next multiple-of-4 column, CR/LF and other control
    characters are dropped, and the result is cut at MAX_LINE_LENGTH.
    Non-ASCII characters pass through untouched.

    Args:
        text: Raw line content without its diff prefix.

    Returns:
        Sanitized content, at most MAX_LINE_LENGTH characters long.
    """
    out: List[str] = []
    column = 0
    for ch in text:
        if column >= MAX_LINE_LENGTH:
            break
        if ch == "\t":
            spaces = min(TAB_WIDTH - column % TAB_WIDTH, MAX_LINE_LENGTH - column)
            out.append(" " * spaces)
            column += spaces
        elif ch < " ":
            continue
        else:
            out.append(ch)
            column += 1
    return "".join(out)


def parse_hunk_header(line: str) -> DiffHunk:
    """Parse an ``@@ -a[,b] +c[,d] @@`` line into an empty hunk.

    Omitted counts default to 1. Unparseable parts keep best-effort
    defaults (start 0, count 1) instead of failing.

    Args:
        line: Hunk header line starting with ``@@``.

    Returns:
        DiffHunk with ranges and header filled in and no lines.
    """
    # Tabs and control characters in the section text would skew centering
    hunk = DiffHunk(header=sanitize_line(line)[:MAX_HUNK_HEADER_LENGTH])
    rest = line[2:]

    old_match = HUNK_OLD_RANGE.match(rest)
    if old_match:
        hunk.old_start = int(old_match.group(1))
        if old_match.group(2) is not None:
            hunk.old_count = int(old_match.group(2))
        rest = rest[old_match.end():]
    else:
        logger.debug("Malformed old range in hunk header: %r", line)

    new_match = HUNK_NEW_RANGE.search(rest)
    if new_match:
        hunk.new_start = int(new_match.group(1))
        if new_match.group(2) is not None:
            hunk.new_count = int(new_match.group(2))
    else:
        logger.debug("Malformed new range in hunk header: %r", line)

    return hunk


def _header_path(line: str, prefix: str) -> Optional[str]:
    """Extract the path from a ``---``/``+++`` header line."""
    if len(line) <= 4:
        return None
    path = line[4:].split("\t", 1)[0]
    if path.startswith(prefix):
        path = path[len(prefix):]
    return path


def _parse_preamble_line(line: str, diff: FileDiff) -> None:
    """Apply a file header line to the diff being built."""
    if line.startswith("diff --git") or line.startswith("index "):
        return

    if line.startswith("---"):
        path = _header_path(line, "a/")
        if path is not None:
            diff.old_path = path
            if path == DEV_NULL:
                diff.is_new = True
    elif line.startswith("+++"):
        path = _header_path(line, "b/")
        if path is not None:
            diff.new_path = path
            if path == DEV_NULL:
                diff.is_deleted = True
    elif line.startswith("new file mode"):
        diff.is_new = True
    elif line.startswith("deleted file mode"):
        diff.is_deleted = True
    elif line.startswith("rename from "):
        diff.is_renamed = True
        diff.old_path = line[len("rename from "):]
    elif line.startswith("rename to "):
        diff.is_renamed = True
        diff.new_path = line[len("rename to "):]
    elif line.startswith("Binary files ") or line.startswith("GIT binary patch"):
        diff.is_binary = True


def parse_unified_diff(diff_text: Optional[str]) -> Optional[FileDiff]:
    """Parse unified diff text into structured form.

    Args:
        diff_text: Unified diff output for a single file.

    Returns:
        FileDiff with hunks and line information, or None when the text is
        empty, contains no hunk, or could not be parsed.
    """
    if not diff_text:
        return None

    try:
        diff = _parse(diff_text)
    except MemoryError:
        logger.warning("Out of memory while parsing diff (%d chars)", len(diff_text))
        return None

    if not diff.hunks:
        logger.debug("No hunk markers found; not a unified diff")
        return None

    logger.debug(
        "Parsed %d hunk(s) for %s (+%d -%d)",
        len(diff.hunks), diff.display_path, diff.additions, diff.deletions,
    )
    return diff


def _parse(diff_text: str) -> FileDiff:
    diff = FileDiff()
    current_hunk: Optional[DiffHunk] = None
    left_no = 0
    right_no = 0

    for raw_line in diff_text.split("\n"):
        line = raw_line.rstrip("\r")

        if line.startswith("@@"):
            current_hunk = parse_hunk_header(line)
            diff.hunks.append(current_hunk)
            left_no = current_hunk.old_start
            right_no = current_hunk.new_start
            continue

        if current_hunk is not None and line.startswith("diff "):
            # Next file header; paths are overwritten, hunks keep accumulating
            current_hunk = None

        if current_hunk is None:
            _parse_preamble_line(line, diff)
            continue

        if not line:
            continue

        prefix = line[0]
        content = sanitize_line(line[1:])

        if prefix == "-":
            current_hunk.lines.append(DiffLine(
                type=LineType.REMOVED,
                left_line_no=left_no,
                left_text=content,
            ))
            left_no += 1
            diff.deletions += 1
        elif prefix == "+":
            current_hunk.lines.append(DiffLine(
                type=LineType.ADDED,
                right_line_no=right_no,
                right_text=content,
            ))
            right_no += 1
            diff.additions += 1
        elif prefix == " ":
            current_hunk.lines.append(DiffLine(
                type=LineType.CONTEXT,
                left_line_no=left_no,
                right_line_no=right_no,
                left_text=content,
                right_text=content,
            ))
            left_no += 1
            right_no += 1
        elif prefix == "\\":
            # "\ No newline at end of file"
            current_hunk.lines.append(DiffLine(
                type=LineType.CONTEXT,
                left_text=content,
                right_text=content,
            ))

    return diff
