# sbsdiff/renderers/side_by_side.py
"""Side-by-side diff renderer.

Displays old and new versions in two fixed-width columns separated by
" │ ", with optional line-number gutters on both sides. Removed and added
runs are aligned by the positional pairing engine.
"""

from typing import List, Optional

from ..box_drawing import ARROW, BOX_DOUBLE_H, BOX_H, COLUMN_SEPARATOR, centered_label, rule
from ..config import DisplaySettings
from ..pairing import pair_hunk_lines
from ..parser import DiffHunk, DiffLine, FileDiff, LineType
from ..syntax_highlight import can_highlight, highlight_line
from ..terminal import GUTTER_WIDTH, column_width, fit_to_width, resolve_width
from .base import ColorScheme, color_scheme_for


class SideBySideRenderer:
    """Renders a FileDiff as two aligned columns.

    Output format (colors omitted):

        ════════════════════════════════════════════════════════════
          File: src/parser.py  +1 -1
        ────────────────────────────────────────────────────────────
        ──────────────────── @@ -10,3 +10,3 @@ ─────────────────────
          10 def parse(path):       │   10 def parse(path):
          11-    return load(path)  │   11+    return check(path)
          12 # end                  │   12 # end
        ════════════════════════════════════════════════════════════
    """

    def render(
        self,
        diff: FileDiff,
        settings: DisplaySettings,
        width: Optional[int] = None,
    ) -> str:
        """Render diff in side-by-side format.

        Args:
            diff: Parsed diff structure.
            settings: Display settings.
            width: Terminal width; resolved from the terminal (clamped to
                settings.terminal_width) when None.

        Returns:
            Formatted side-by-side diff.
        """
        if width is None:
            width = resolve_width(settings.terminal_width)
        colors = color_scheme_for(settings)
        col_width = column_width(width)

        lines = [""]
        lines.extend(self._render_header(diff, width, colors))

        # Context lines are highlighted only when a lexer matches the file
        filename = ""
        highlight = settings.syntax_highlighting and settings.use_colors
        if highlight and can_highlight(diff.display_path):
            filename = diff.display_path

        for hunk in diff.hunks:
            lines.append(self._render_hunk_header(hunk, width, colors))
            for row in pair_hunk_lines(hunk):
                lines.append(self._render_row(
                    row, col_width, settings.show_line_numbers, colors, filename
                ))

        lines.append(rule(width, BOX_DOUBLE_H, colors.header, colors.reset))
        lines.append("")
        return "\n".join(lines) + "\n"

    def _render_header(
        self, diff: FileDiff, width: int, colors: ColorScheme
    ) -> List[str]:
        """Render the rule, path/stats line and secondary rule."""
        if diff.is_renamed or diff.old_path != diff.new_path:
            path = (
                f"{colors.removed}{diff.old_path}{colors.reset} {ARROW} "
                f"{colors.added}{diff.new_path}{colors.reset}"
            )
        else:
            path = diff.new_path

        stats = (
            f"{colors.added}+{diff.additions}{colors.reset} "
            f"{colors.removed}-{diff.deletions}{colors.reset}"
        )

        return [
            rule(width, BOX_DOUBLE_H, colors.header, colors.reset),
            f"{colors.header}  File: {colors.reset}{path}  {stats}",
            rule(width, BOX_H, colors.header, colors.reset),
        ]

    def _render_hunk_header(
        self, hunk: DiffHunk, width: int, colors: ColorScheme
    ) -> str:
        """Render the @@ line centered within fill characters."""
        return centered_label(hunk.header, width, BOX_H, colors.hunk, colors.reset)

    def _render_row(
        self,
        row: DiffLine,
        col_width: int,
        show_line_numbers: bool,
        colors: ColorScheme,
        filename: str = "",
    ) -> str:
        """Render one aligned row as left cell, separator and right cell."""
        gutter_width = GUTTER_WIDTH if show_line_numbers else 0
        content_width = col_width - gutter_width - 1

        left = self._render_cell(
            row.has_left, row.left_line_no, row.left_text, "-",
            row.type, content_width, show_line_numbers, colors, filename,
        )
        right = self._render_cell(
            row.has_right, row.right_line_no, row.right_text, "+",
            row.type, content_width, show_line_numbers, colors, filename,
        )
        return f"{left}{colors.separator}{COLUMN_SEPARATOR}{colors.reset}{right}"

    def _render_cell(
        self,
        present: bool,
        line_no: Optional[int],
        text: str,
        change_marker: str,
        line_type: LineType,
        content_width: int,
        show_line_numbers: bool,
        colors: ColorScheme,
        filename: str,
    ) -> str:
        """Render one side of a row: gutter, marker and fitted content."""
        gutter = ""
        if show_line_numbers:
            if line_no is not None and line_no > 0:
                gutter = f"{colors.line_number}{line_no:>{GUTTER_WIDTH}}{colors.reset}"
            else:
                gutter = " " * GUTTER_WIDTH

        if not present:
            # Solid block marks the side that has no line
            return f"{gutter}{colors.empty}{' ' * (content_width + 1)}{colors.reset}"

        if line_type in (LineType.REMOVED, LineType.ADDED, LineType.MODIFIED):
            color = colors.removed if change_marker == "-" else colors.added
            return f"{gutter}{color}{change_marker}{fit_to_width(text, content_width)}{colors.reset}"

        color = colors.context
        if filename:
            text = highlight_line(text, filename)
            color = ""
        return f"{gutter}{color} {fit_to_width(text, content_width)}{colors.reset}"
