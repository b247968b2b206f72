"""Error types raised while building and running a sparse clone."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from gitsub.executor import GitOperation


class GitsubError(Exception):
    """Base class for all gitsub errors.

    Every error is terminal for the invocation; the CLI turns it into a
    one-line diagnostic and a non-zero exit code.
    """


class UsageError(GitsubError):
    """Wrong number or shape of positional arguments."""


class InvalidURLError(GitsubError):
    """Repository URL does not use an accepted transport."""

    def __init__(self, url: str) -> None:
        super().__init__(f"invalid repository URL: {url}")
        self.url = url


class InvalidDirectoryError(GitsubError):
    """A requested directory normalizes to an empty path."""

    def __init__(self, raw: str) -> None:
        super().__init__(f"invalid directory path: {raw!r}")
        self.raw = raw


class MissingOutputDirectoryError(GitsubError):
    """No output directory was given and none could be derived."""

    def __init__(self, repo_url: str) -> None:
        super().__init__(f"unable to determine output directory for {repo_url}")
        self.repo_url = repo_url


class OutputExistsError(GitsubError):
    """The target output path is already present on disk."""

    def __init__(self, path: str) -> None:
        super().__init__(f"output directory already exists: {path}")
        self.path = path


class ToolUnavailableError(GitsubError):
    """The git executable is missing or did not answer a version probe."""


class ExternalOperationError(GitsubError):
    """A git operation exited unsuccessfully."""

    def __init__(
        self,
        operation: GitOperation,
        returncode: int | None = None,
        diagnostic: str | None = None,
    ) -> None:
        message = f"git {operation.name} failed"
        if returncode is not None:
            message += f" (exit code {returncode})"
        if diagnostic:
            message += f": {diagnostic}"
        super().__init__(message)
        self.operation = operation
        self.returncode = returncode
        self.diagnostic = diagnostic
