# sbsdiff/git.py
"""Fetch diff text from git and hand it to the formatter.

The git binary is run with an argument list (never through a shell).
Callers may pass their own runner, which is how the tests drive these
functions without a repository.
"""

import logging
import subprocess
from typing import Callable, List, NamedTuple, Optional, Sequence, TextIO

from .config import DisplaySettings
from .console import print_info
from .errors import GitCommandError
from .formatter import create_formatter

logger = logging.getLogger(__name__)


class CommandResult(NamedTuple):
    """Outcome of one git invocation."""
    exit_code: int
    stdout: str
    stderr: str


Runner = Callable[[Sequence[str]], CommandResult]


def run_git(args: Sequence[str], cwd: Optional[str] = None) -> CommandResult:
    """Run ``git <args>`` and capture its output.

    Args:
        args: Arguments after ``git``.
        cwd: Working directory for the command.

    Returns:
        CommandResult with exit code, stdout and stderr.

    Raises:
        GitCommandError: If the git binary could not be executed.
    """
    cmd = ["git", *args]
    logger.debug("Running %s", " ".join(cmd))
    try:
        proc = subprocess.run(
            cmd,
            capture_output=True,
            encoding="utf-8",
            errors="replace",
            cwd=cwd,
        )
    except (FileNotFoundError, OSError) as e:
        raise GitCommandError(f"Failed to run git: {e}") from e

    if proc.returncode != 0:
        logger.debug("git exited with %d: %s", proc.returncode, proc.stderr.strip())
    return CommandResult(proc.returncode, proc.stdout, proc.stderr)


def _context_args(settings: Optional[DisplaySettings]) -> List[str]:
    if settings is None:
        return []
    return [f"-U{max(settings.context_lines, 0)}"]


def fetch_file_diff(
    path: Optional[str] = None,
    staged: bool = False,
    settings: Optional[DisplaySettings] = None,
    runner: Runner = run_git,
) -> str:
    """Get the working-tree (or staged) diff text of a file.

    Args:
        path: File to diff; the whole tree when None or empty.
        staged: Diff the index against HEAD (``--cached``).
        settings: Display settings (context_lines becomes ``-U<n>``).
        runner: Command runner.

    Returns:
        Raw unified diff text (empty when there are no differences).

    Raises:
        GitCommandError: If git failed without producing output.
    """
    args = ["diff"]
    if staged:
        args.append("--cached")
    args.extend(_context_args(settings))
    if path:
        args.extend(["--", path])

    result = runner(args)
    if result.exit_code != 0 and not result.stdout:
        raise GitCommandError(
            result.stderr.strip() or f"git {' '.join(args)} failed",
            exit_code=result.exit_code,
            stderr=result.stderr,
        )
    return result.stdout


def fetch_commit_diff(
    commit1: str,
    commit2: Optional[str] = None,
    settings: Optional[DisplaySettings] = None,
    runner: Runner = run_git,
) -> str:
    """Get the diff text between two commits, or of a single commit.

    Args:
        commit1: First (or only) commit.
        commit2: Second commit; when omitted, commit1 is shown on its own.
        settings: Display settings (context_lines becomes ``-U<n>``).
        runner: Command runner.

    Returns:
        Raw unified diff text (empty when there are no differences).

    Raises:
        GitCommandError: If git exits with a non-zero status.
    """
    if commit2:
        args = ["diff", *_context_args(settings), commit1, commit2]
    else:
        args = ["show", "--format=", *_context_args(settings), commit1]

    result = runner(args)
    if result.exit_code != 0:
        raise GitCommandError(
            result.stderr.strip() or f"git {' '.join(args)} exited with {result.exit_code}",
            exit_code=result.exit_code,
            stderr=result.stderr,
        )
    return result.stdout


def _show(diff_text: str, settings: Optional[DisplaySettings], stream: Optional[TextIO]) -> bool:
    if not diff_text:
        print_info("No differences", file=stream)
        return False
    return create_formatter(settings).show(diff_text, stream)


def show_file_diff(
    path: Optional[str] = None,
    staged: bool = False,
    settings: Optional[DisplaySettings] = None,
    runner: Runner = run_git,
    stream: Optional[TextIO] = None,
) -> bool:
    """Show the working-tree (or staged) diff of a file.

    Returns:
        True if a diff was shown, False if there were no differences.

    Raises:
        GitCommandError: If git failed without producing output.
    """
    return _show(fetch_file_diff(path, staged, settings, runner), settings, stream)


def show_commit_diff(
    commit1: str,
    commit2: Optional[str] = None,
    settings: Optional[DisplaySettings] = None,
    runner: Runner = run_git,
    stream: Optional[TextIO] = None,
) -> bool:
    """Show the diff between two commits, or the changes of one commit.

    Returns:
        True if a diff was shown, False if there were no differences.

    Raises:
        GitCommandError: If git exits with a non-zero status.
    """
    return _show(fetch_commit_diff(commit1, commit2, settings, runner), settings, stream)
