"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from gitsub.errors import ExternalOperationError, ToolUnavailableError
from gitsub.executor import GitExecutor, GitOperation

# Keep host configuration out of the tests
for _var in ("GITSUB_CONFIG", "GITSUB_DEFAULT_BRANCH", "GITSUB_GIT"):
    os.environ.pop(_var, None)


class FakeExecutor(GitExecutor):
    """Records operations instead of running git.

    ``fail_on`` names an operation that should fail; ``available`` controls
    the version probe.
    """

    def __init__(self, fail_on: str | None = None, available: bool = True) -> None:
        self.fail_on = fail_on
        self.available = available
        self.operations: list[GitOperation] = []
        self.probes = 0

    @property
    def names(self) -> list[str]:
        return [op.name for op in self.operations]

    def run(self, operation: GitOperation) -> None:
        self.operations.append(operation)
        if operation.name == self.fail_on:
            raise ExternalOperationError(operation, returncode=128, diagnostic="simulated failure")

    def check_available(self) -> str:
        self.probes += 1
        if not self.available:
            raise ToolUnavailableError("git not found or not installed")
        return "git version 2.43.0"


@pytest.fixture
def fake_executor() -> FakeExecutor:
    return FakeExecutor()


@pytest.fixture
def make_executor():
    """Factory for fake executors with custom failure behaviour."""
    return FakeExecutor


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test from an empty temporary directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


def pytest_configure(config):
    config.addinivalue_line("markers", "integration: tests that run a real git binary")
