# sbsdiff/box_drawing.py
"""Unicode box drawing utilities for diff rendering.

Provides the rule lines and centered markers that frame a side-by-side
diff, using Unicode box-drawing characters.
"""

BOX_H = "─"         # Horizontal line
BOX_V = "│"         # Vertical line
BOX_DOUBLE_H = "═"  # Double horizontal line
ARROW = "→"

COLUMN_SEPARATOR = f" {BOX_V} "


def rule(width: int, char: str = BOX_H, color: str = "", reset: str = "") -> str:
    """Create a horizontal rule spanning width columns.

    Args:
        width: Number of rule characters.
        char: Character to repeat.
        color: ANSI color code for the rule.
        reset: ANSI reset code.

    Returns:
        Rule string like "══════════".
    """
    return f"{color}{char * max(width, 0)}{reset}"


def centered_label(
    label: str,
    width: int,
    fill: str = BOX_H,
    color: str = "",
    reset: str = "",
) -> str:
    """Center a label inside fill characters.

    The label is framed by one space on each side. When the label is wider
    than width, no fill is drawn on either side.

    Args:
        label: Plain text to center.
        width: Total width of the line.
        fill: Fill character for both sides.
        color: ANSI color code for the whole line.
        reset: ANSI reset code.

    Returns:
        Line like "──── @@ -1,3 +1,3 @@ ────".
    """
    left = max((width - len(label)) // 2, 0)
    right = max(width - left - len(label) - 2, 0)
    return f"{color}{fill * left} {label} {fill * right}{reset}"
