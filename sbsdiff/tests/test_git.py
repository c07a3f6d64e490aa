# sbsdiff/tests/test_git.py
"""Tests for fetching diffs from git."""

import io

import pytest

from .. import git as git_module
from ..config import DisplaySettings
from ..errors import GitCommandError
from ..git import (
    CommandResult,
    fetch_commit_diff,
    fetch_file_diff,
    run_git,
    show_commit_diff,
    show_file_diff,
)


SAMPLE_DIFF = """--- a/app.py
+++ b/app.py
@@ -1 +1 @@
-a = 1
+a = 2
"""

PLAIN = DisplaySettings(use_colors=False, syntax_highlighting=False, context_lines=5)


class FakeRunner:
    """Records git arguments and replays a fixed result."""

    def __init__(self, exit_code=0, stdout="", stderr=""):
        self.result = CommandResult(exit_code, stdout, stderr)
        self.calls = []

    def __call__(self, args):
        self.calls.append(list(args))
        return self.result


class TestFetchFileDiff:
    """Tests for working-tree and staged diffs."""

    def test_working_tree_args(self):
        runner = FakeRunner(stdout=SAMPLE_DIFF)
        assert fetch_file_diff("app.py", runner=runner) == SAMPLE_DIFF
        assert runner.calls == [["diff", "--", "app.py"]]

    def test_staged_with_context(self):
        runner = FakeRunner(stdout=SAMPLE_DIFF)
        fetch_file_diff("app.py", staged=True, settings=PLAIN, runner=runner)
        assert runner.calls == [["diff", "--cached", "-U5", "--", "app.py"]]

    def test_whole_tree(self):
        runner = FakeRunner()
        assert fetch_file_diff(runner=runner) == ""
        assert runner.calls == [["diff"]]

    def test_failure_without_output_raises(self):
        runner = FakeRunner(exit_code=128, stderr="fatal: not a git repository\n")
        with pytest.raises(GitCommandError) as excinfo:
            fetch_file_diff("app.py", runner=runner)

        assert excinfo.value.exit_code == 128
        assert str(excinfo.value) == "fatal: not a git repository"

    def test_nonzero_exit_with_output_is_kept(self):
        runner = FakeRunner(exit_code=1, stdout=SAMPLE_DIFF)
        assert fetch_file_diff("app.py", runner=runner) == SAMPLE_DIFF


class TestFetchCommitDiff:
    """Tests for commit diffs."""

    def test_two_commits(self):
        runner = FakeRunner(stdout=SAMPLE_DIFF)
        fetch_commit_diff("HEAD~1", "HEAD", PLAIN, runner)
        assert runner.calls == [["diff", "-U5", "HEAD~1", "HEAD"]]

    def test_single_commit_uses_show(self):
        runner = FakeRunner(stdout=SAMPLE_DIFF)
        fetch_commit_diff("abc123", runner=runner)
        assert runner.calls == [["show", "--format=", "abc123"]]

    def test_failure_raises(self):
        runner = FakeRunner(exit_code=128, stderr="fatal: bad revision 'nope'")
        with pytest.raises(GitCommandError) as excinfo:
            fetch_commit_diff("nope", runner=runner)

        assert excinfo.value.stderr == "fatal: bad revision 'nope'"

    def test_failure_without_stderr_has_message(self):
        runner = FakeRunner(exit_code=2)
        with pytest.raises(GitCommandError, match="exited with 2"):
            fetch_commit_diff("a", "b", runner=runner)


class TestShow:
    """Tests for showing fetched diffs."""

    def test_show_file_diff(self):
        stream = io.StringIO()
        shown = show_file_diff(
            "app.py", settings=PLAIN, runner=FakeRunner(stdout=SAMPLE_DIFF), stream=stream,
        )

        assert shown is True
        assert "File: app.py" in stream.getvalue()

    def test_show_no_differences(self):
        stream = io.StringIO()
        shown = show_file_diff("app.py", runner=FakeRunner(), stream=stream)

        assert shown is False
        assert stream.getvalue() == "[INFO] No differences\n"

    def test_whole_tree_shows_every_file(self):
        two_files = (
            "diff --git a/one.py b/one.py\n--- a/one.py\n+++ b/one.py\n"
            "@@ -1 +1 @@\n-a\n+b\n"
            "diff --git a/two.py b/two.py\n--- a/two.py\n+++ b/two.py\n"
            "@@ -1 +1 @@\n-c\n+d\n"
        )
        stream = io.StringIO()
        runner = FakeRunner(stdout=two_files)

        assert show_file_diff(settings=PLAIN, runner=runner, stream=stream) is True
        output = stream.getvalue()
        assert "File: one.py  +1 -1" in output
        assert "File: two.py  +1 -1" in output
        assert runner.calls == [["diff", "-U5"]]

    def test_show_commit_diff(self):
        stream = io.StringIO()
        show_commit_diff(
            "HEAD", settings=PLAIN, runner=FakeRunner(stdout=SAMPLE_DIFF), stream=stream,
        )
        assert "-a = 1" in stream.getvalue()


class TestRunGit:
    """Tests for the subprocess runner."""

    def test_missing_binary_raises(self, monkeypatch):
        def missing(*args, **kwargs):
            raise FileNotFoundError("git")

        monkeypatch.setattr(git_module.subprocess, "run", missing)
        with pytest.raises(GitCommandError) as excinfo:
            run_git(["status"])
        assert excinfo.value.exit_code is None

    def test_captures_output(self, monkeypatch):
        captured = {}

        class Completed:
            returncode = 0
            stdout = "out"
            stderr = ""

        def fake_run(cmd, **kwargs):
            captured["cmd"] = cmd
            captured["kwargs"] = kwargs
            return Completed()

        monkeypatch.setattr(git_module.subprocess, "run", fake_run)
        result = run_git(["diff", "--", "x"], cwd="/tmp")

        assert result == CommandResult(0, "out", "")
        assert captured["cmd"] == ["git", "diff", "--", "x"]
        assert captured["kwargs"]["cwd"] == "/tmp"
        assert "shell" not in captured["kwargs"]
