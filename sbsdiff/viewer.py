# sbsdiff/viewer.py
"""Review prompt shown after a rendered diff."""

from enum import IntEnum
from typing import Callable, Optional, TextIO

from prompt_toolkit import prompt as pt_prompt

from .config import DisplaySettings
from .formatter import create_formatter

REVIEW_MENU = "[a] Accept changes  [r] Reject changes  [q] Continue"
REVIEW_PROMPT = "Choice: "


class ReviewDecision(IntEnum):
    """Answer to the review prompt."""
    REJECT = -1
    CONTINUE = 0
    ACCEPT = 1


def parse_decision(answer: str) -> ReviewDecision:
    """Map a prompt answer to a decision (anything unknown continues)."""
    choice = answer.strip()[:1].lower()
    if choice == "a":
        return ReviewDecision.ACCEPT
    if choice == "r":
        return ReviewDecision.REJECT
    return ReviewDecision.CONTINUE


def interactive_diff_viewer(
    diff_text: Optional[str],
    settings: Optional[DisplaySettings] = None,
    prompt_fn: Optional[Callable[[str], str]] = None,
    stream: Optional[TextIO] = None,
) -> ReviewDecision:
    """Show a diff, then ask whether to accept or reject it.

    Args:
        diff_text: Unified diff text for one file.
        settings: Display settings.
        prompt_fn: Reads one answer given the prompt text
            (prompt_toolkit's prompt by default).
        stream: Output stream for the diff and menu (stdout by default).

    Returns:
        ACCEPT, REJECT or CONTINUE. Empty input, end of input and
        interrupts continue.
    """
    if diff_text is None:
        return ReviewDecision.CONTINUE

    create_formatter(settings).show(diff_text, stream)

    ask = prompt_fn if prompt_fn is not None else pt_prompt
    print(file=stream)
    print(REVIEW_MENU, file=stream)
    try:
        answer = ask(REVIEW_PROMPT)
    except (EOFError, KeyboardInterrupt):
        return ReviewDecision.CONTINUE

    return parse_decision(answer or "")
