# sbsdiff/pairing.py
"""Align removed and added runs of a hunk into side-by-side rows.

Alignment is positional: the p-th line of a removed run sits next to the
p-th line of the added run that immediately follows it. No sequence
alignment is attempted, so runs of different length can pair unrelated
lines.
"""

from typing import List

from .parser import DiffHunk, DiffLine, FileDiff, LineType


def pair_hunk_lines(hunk: DiffHunk) -> List[DiffLine]:
    """Convert hunk lines to rows for side-by-side display.

    Each removed run ``[i, j)`` and the added run ``[j, k)`` right after it
    produce ``max(R, A)`` rows:

    - Modified: both sides populated (row p < min(R, A))
    - Removed: left side only (extra removed lines)
    - Added: right side only (extra added lines)

    Every other line is passed through as its own row.

    Args:
        hunk: A DiffHunk with lines.

    Returns:
        List of rows. Pass-through rows are the hunk's own DiffLine objects.
    """
    lines = hunk.lines
    rows: List[DiffLine] = []

    i = 0
    while i < len(lines):
        if lines[i].type != LineType.REMOVED:
            rows.append(lines[i])
            i += 1
            continue

        # Collect consecutive removals
        j = i
        while j < len(lines) and lines[j].type == LineType.REMOVED:
            j += 1

        # Collect consecutive additions after the removals
        k = j
        while k < len(lines) and lines[k].type == LineType.ADDED:
            k += 1

        removed = j - i
        added = k - j
        for p in range(max(removed, added)):
            row = DiffLine(type=LineType.EMPTY)
            if p < removed:
                old = lines[i + p]
                row.type = LineType.REMOVED
                row.left_line_no = old.left_line_no
                row.left_text = old.left_text
            if p < added:
                new = lines[j + p]
                row.type = LineType.MODIFIED if p < removed else LineType.ADDED
                row.right_line_no = new.right_line_no
                row.right_text = new.right_text
            rows.append(row)

        i = k

    return rows


def pair_file_diff(diff: FileDiff) -> List[List[DiffLine]]:
    """Pair every hunk of a file diff, one row list per hunk."""
    return [pair_hunk_lines(hunk) for hunk in diff.hunks]
