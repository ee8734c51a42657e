"""Unit tests for CommandRunner implementations."""

import shutil
import subprocess
from pathlib import Path

import pytest

from gwc.runners import CommandDispatchError, DryRunRunner, ShellRunner


class TestDryRunRunner:
    def test_records_commands_in_order(self):
        runner = DryRunRunner()
        runner.run("git commit --allow-empty -m \"a\"")
        runner.run("git commit --allow-empty -m \"b\"")
        assert runner.commands == [
            "git commit --allow-empty -m \"a\"",
            "git commit --allow-empty -m \"b\"",
        ]


class TestShellRunner:
    def test_runs_in_given_directory(self, tmp_path: Path):
        """
        Given a working directory
        When a command writes a file relative to it
        Then the file appears in that directory
        """
        ShellRunner(cwd=tmp_path).run("echo hi > out.txt")
        assert (tmp_path / "out.txt").read_text().strip() == "hi"

    def test_nonzero_exit_raises(self, tmp_path: Path):
        """
        Given a command that exits non-zero
        When it is run
        Then CommandDispatchError carries the exit code and stderr
        """
        with pytest.raises(CommandDispatchError, match="exit 3") as exc_info:
            ShellRunner(cwd=tmp_path).run("echo broken >&2; exit 3")
        assert "broken" in str(exc_info.value)

    def test_missing_cwd_raises(self, tmp_path: Path):
        with pytest.raises(CommandDispatchError):
            ShellRunner(cwd=tmp_path / "missing").run("true")

    @pytest.mark.skipif(shutil.which("git") is None, reason="git not installed")
    def test_empty_commit_in_real_repo(self, tmp_path: Path):
        """
        Given a fresh git repository
        When the work commit command runs through the shell
        Then git records an empty commit with the message
        """
        subprocess.run(["git", "init", "-q", str(tmp_path)], check=True)
        ShellRunner(cwd=tmp_path).run(
            "git -c user.name='T' -c user.email='t@x' -c commit.gpgsign=false commit --allow-empty -m \"wip\""
        )
        log = subprocess.run(
            ["git", "log", "--format=%s"], cwd=tmp_path, capture_output=True, text=True, check=True
        )
        assert log.stdout.strip() == "wip"
