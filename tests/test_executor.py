"""Tests for the subprocess-backed git executor."""

from __future__ import annotations

import shutil
import subprocess
from pathlib import Path

import pytest

from gitsub.clone import CloneOrchestrator
from gitsub.errors import ExternalOperationError, ToolUnavailableError
from gitsub.executor import GitOperation, SubprocessGitExecutor
from gitsub.models.request import CloneRequest


def _completed(returncode: int = 0, stdout: str = "") -> subprocess.CompletedProcess[str]:
    return subprocess.CompletedProcess([], returncode, stdout, "")


class TestRun:
    """Tests for SubprocessGitExecutor.run."""

    def test_invokes_git_in_directory(self, monkeypatch: pytest.MonkeyPatch) -> None:
        calls = []

        def fake_run(cmd, **kwargs):
            calls.append((cmd, kwargs))
            return _completed()

        monkeypatch.setattr(subprocess, "run", fake_run)
        operation = GitOperation("checkout", ("checkout", "main"), Path("repo"))

        SubprocessGitExecutor("/usr/bin/git").run(operation)

        assert calls == [(["/usr/bin/git", "checkout", "main"], {"cwd": Path("repo")})]

    def test_nonzero_exit(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(subprocess, "run", lambda cmd, **kwargs: _completed(128))
        operation = GitOperation("fetch", ("fetch", "origin", "main"), Path("repo"))

        with pytest.raises(ExternalOperationError) as exc_info:
            SubprocessGitExecutor().run(operation)

        assert exc_info.value.operation is operation
        assert exc_info.value.returncode == 128
        assert str(exc_info.value) == "git fetch failed (exit code 128)"

    def test_missing_executable(self) -> None:
        operation = GitOperation("init", ("init", "repo"))

        with pytest.raises(ExternalOperationError) as exc_info:
            SubprocessGitExecutor("gitsub-no-such-git").run(operation)

        assert exc_info.value.returncode is None
        assert exc_info.value.diagnostic


class TestCheckAvailable:
    """Tests for the git version probe."""

    def test_version_line(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(
            subprocess, "run", lambda cmd, **kwargs: _completed(stdout="git version 2.43.0\n")
        )

        assert SubprocessGitExecutor().check_available() == "git version 2.43.0"

    def test_unexpected_output(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(subprocess, "run", lambda cmd, **kwargs: _completed(stdout="hello\n"))

        with pytest.raises(ToolUnavailableError, match="unable to detect git version"):
            SubprocessGitExecutor().check_available()

    def test_probe_fails(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(subprocess, "run", lambda cmd, **kwargs: _completed(1))

        with pytest.raises(ToolUnavailableError):
            SubprocessGitExecutor().check_available()

    def test_missing_executable(self) -> None:
        with pytest.raises(ToolUnavailableError, match="not found"):
            SubprocessGitExecutor("gitsub-no-such-git").check_available()


@pytest.mark.integration
@pytest.mark.skipif(shutil.which("git") is None, reason="git not installed")
class TestRealGit:
    """Runs the full sequence against a local repository."""

    @pytest.fixture
    def origin(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
        for var in ("GIT_AUTHOR_NAME", "GIT_COMMITTER_NAME"):
            monkeypatch.setenv(var, "gitsub")
        for var in ("GIT_AUTHOR_EMAIL", "GIT_COMMITTER_EMAIL"):
            monkeypatch.setenv(var, "gitsub@example.com")

        origin = tmp_path / "origin"
        for rel in ("src/lib/core.txt", "docs/index.txt", "other/skip.txt", "top.txt"):
            path = origin / rel
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(rel)

        subprocess.run(["git", "init", "-q", str(origin)], check=True)
        subprocess.run(["git", "symbolic-ref", "HEAD", "refs/heads/main"], cwd=origin, check=True)
        subprocess.run(["git", "add", "."], cwd=origin, check=True)
        subprocess.run(["git", "commit", "-q", "-m", "init"], cwd=origin, check=True)
        return origin

    def test_sparse_clone(self, origin: Path, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.chdir(tmp_path)
        request = CloneRequest(
            repo_url=origin.as_uri(),
            directories=("src/lib",),
            branch="main",
            output_dir="copy",
        )

        CloneOrchestrator(SubprocessGitExecutor()).clone(request)

        copy = tmp_path / "copy"
        assert (copy / "src" / "lib" / "core.txt").read_text() == "src/lib/core.txt"
        # cone mode always materializes top-level files
        assert (copy / "top.txt").exists()
        assert not (copy / "docs").exists()
        assert not (copy / "other").exists()
