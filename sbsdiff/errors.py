# sbsdiff/errors.py
"""Exception hierarchy for sbsdiff.

Parsing and rendering never raise; these errors come from the
collaborators that fetch diff text.
"""

from typing import Optional


class SbsdiffError(Exception):
    """Base exception for all sbsdiff errors."""


class GitCommandError(SbsdiffError):
    """A git command could not be run or failed without output.

    Attributes:
        exit_code: Exit status of the git process, or None if it never ran.
        stderr: Error output reported by git, if any.
    """

    def __init__(self, message: str, exit_code: Optional[int] = None, stderr: str = ""):
        super().__init__(message)
        self.exit_code = exit_code
        self.stderr = stderr
