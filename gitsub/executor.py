"""Git command execution."""

from __future__ import annotations

import logging
import shlex
import subprocess
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path

from gitsub.errors import ExternalOperationError, ToolUnavailableError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GitOperation:
    """A single git invocation: a step name, its arguments and where to run it."""

    name: str
    args: tuple[str, ...]
    cwd: Path | None = None

    @property
    def command_line(self) -> str:
        """Shell-quoted command for display."""
        command = shlex.join(("git", *self.args))
        if self.cwd is not None:
            return f"(cd {shlex.quote(str(self.cwd))} && {command})"
        return command


class GitExecutor(ABC):
    """Runs git operations on behalf of the orchestrator."""

    @abstractmethod
    def run(self, operation: GitOperation) -> None:
        """Run an operation to completion.

        Raises:
            ExternalOperationError: If git could not be started or exited non-zero.
        """
        ...

    @abstractmethod
    def check_available(self) -> str:
        """Probe the git executable and return its version line.

        Raises:
            ToolUnavailableError: If git is missing or the probe fails.
        """
        ...


class SubprocessGitExecutor(GitExecutor):
    """Executor backed by a local git binary.

    Output is not captured: git writes straight to this process's stdout
    and stderr so progress is visible live.
    """

    def __init__(self, git: str = "git") -> None:
        self.git = git

    def run(self, operation: GitOperation) -> None:
        cmd = [self.git, *operation.args]
        logger.debug(f"Running {operation.name}: {operation.command_line}")
        try:
            result = subprocess.run(cmd, cwd=operation.cwd)
        except OSError as e:
            raise ExternalOperationError(operation, diagnostic=str(e)) from e

        if result.returncode != 0:
            raise ExternalOperationError(operation, returncode=result.returncode)

    def check_available(self) -> str:
        try:
            result = subprocess.run(
                [self.git, "--version"],
                capture_output=True,
                text=True,
            )
        except OSError as e:
            raise ToolUnavailableError("git not found or not installed") from e

        if result.returncode != 0:
            raise ToolUnavailableError("git not found or not installed")

        version = result.stdout.strip()
        if "git version" not in version:
            raise ToolUnavailableError("unable to detect git version")

        logger.debug(f"Using {version}")
        return version
