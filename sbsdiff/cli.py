# sbsdiff/cli.py
"""Command-line entry point for sbsdiff."""

import argparse
import logging
import sys
from dataclasses import replace
from typing import List, Optional

from .config import DisplaySettings, load_display_settings
from .console import print_error
from .errors import GitCommandError
from .formatter import create_formatter
from .git import fetch_commit_diff, fetch_file_diff
from .terminal import supports_color
from .viewer import ReviewDecision, interactive_diff_viewer

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_REJECTED = 3


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sbsdiff",
        description="Side-by-side colored view of unified diffs",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Working-tree changes of one file
  sbsdiff src/app.py

  # Staged changes
  sbsdiff --staged src/app.py

  # Between two commits, or a single commit
  sbsdiff --commit HEAD~1 HEAD
  sbsdiff --commit HEAD

  # Diff text from a file or stdin
  git diff -- app.py | sbsdiff --input -
        """,
    )

    # Diff source
    parser.add_argument(
        "path",
        nargs="?",
        help="File to diff against the index (default: whole working tree)",
    )
    parser.add_argument(
        "--staged", "--cached",
        action="store_true",
        help="Show staged changes",
    )
    parser.add_argument(
        "--commit",
        nargs="+",
        metavar="COMMIT",
        help="Show one commit, or the diff between two commits",
    )
    parser.add_argument(
        "--input", "-i",
        metavar="FILE",
        help="Read unified diff text from FILE ('-' for stdin) instead of git",
    )

    # Display
    parser.add_argument(
        "--unified", "-u",
        action="store_true",
        help="Colorize the unified diff instead of the side-by-side view",
    )
    parser.add_argument(
        "--width", "-w",
        type=int,
        metavar="COLS",
        help="Maximum terminal width to render for",
    )
    parser.add_argument(
        "--context", "-U",
        type=int,
        metavar="N",
        help="Context lines requested from git",
    )
    parser.add_argument(
        "--no-line-numbers",
        action="store_true",
        help="Hide the line-number gutters",
    )
    parser.add_argument(
        "--no-syntax",
        action="store_true",
        help="Disable syntax highlighting of context lines",
    )
    parser.add_argument(
        "--color",
        choices=("auto", "always", "never"),
        default="auto",
        help="When to emit ANSI colors (default: auto)",
    )

    # Configuration
    parser.add_argument(
        "--config",
        metavar="FILE",
        help="JSON settings file (default: ~/.sbsdiff/config.json)",
    )
    parser.add_argument(
        "--env-file",
        metavar="FILE",
        help="Path to .env file with SBSDIFF_* overrides",
    )

    parser.add_argument(
        "--review",
        action="store_true",
        help="Ask to accept or reject the changes after showing them",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Verbose logging",
    )
    return parser


def resolve_settings(args: argparse.Namespace) -> DisplaySettings:
    """Apply command-line overrides on top of the loaded settings."""
    settings = load_display_settings(args.config, args.env_file)

    changes = {}
    if args.unified:
        changes["side_by_side"] = False
    if args.width is not None:
        changes["terminal_width"] = args.width
    if args.context is not None:
        changes["context_lines"] = args.context
    if args.no_line_numbers:
        changes["show_line_numbers"] = False
    if args.no_syntax:
        changes["syntax_highlighting"] = False

    if args.color == "always":
        changes["use_colors"] = True
    elif args.color == "never":
        changes["use_colors"] = False
    else:
        changes["use_colors"] = settings.use_colors and supports_color(sys.stdout)

    return replace(settings, **changes)


def _read_input(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    with open(source, "r", encoding="utf-8", errors="replace") as f:
        return f.read()


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.commit and len(args.commit) > 2:
        parser.error("--commit takes one or two commits")
    if args.input and (args.commit or args.path or args.staged):
        parser.error("--input cannot be combined with git options")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    settings = resolve_settings(args)

    try:
        if args.input:
            diff_text = _read_input(args.input)
        elif args.commit:
            commit2 = args.commit[1] if len(args.commit) > 1 else None
            diff_text = fetch_commit_diff(args.commit[0], commit2, settings)
        else:
            diff_text = fetch_file_diff(args.path, args.staged, settings)
    except GitCommandError as e:
        print_error(str(e))
        return EXIT_ERROR
    except OSError as e:
        print_error(f"Cannot read {args.input}: {e}")
        return EXIT_ERROR

    if args.review:
        decision = interactive_diff_viewer(diff_text, settings)
        return EXIT_REJECTED if decision == ReviewDecision.REJECT else EXIT_OK

    create_formatter(settings).show(diff_text)
    return EXIT_OK
