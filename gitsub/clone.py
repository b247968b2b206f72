"""Sparse clone orchestration."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable

from gitsub.executor import GitExecutor, GitOperation
from gitsub.models.config import CloneDefaults
from gitsub.models.request import CloneRequest

logger = logging.getLogger(__name__)


class CloneOrchestrator:
    """Realizes a CloneRequest as a fixed sequence of git operations.

    The sequence is init, remote add, enable sparse checkout, set the cone
    paths, shallow blob-less fetch of the branch, checkout. Each step needs
    the side effects of the previous one, so they run strictly in order and
    the first failure stops the run. Nothing is retried or rolled back: a
    partial working copy stays on disk as git left it.
    """

    def __init__(
        self,
        executor: GitExecutor,
        defaults: CloneDefaults | None = None,
    ) -> None:
        self.executor = executor
        self.defaults = defaults or CloneDefaults()

    def plan(self, request: CloneRequest) -> list[GitOperation]:
        """Get the ordered git operations for a request without running them."""
        output = Path(request.output_dir)
        remote = self.defaults.remote_name

        return [
            GitOperation("init", ("init", str(output))),
            GitOperation("remote-add", ("remote", "add", remote, request.repo_url), output),
            GitOperation(
                "sparse-checkout-enable",
                ("config", "core.sparseCheckout", "true"),
                output,
            ),
            GitOperation(
                "sparse-checkout-set",
                ("sparse-checkout", "set", "--cone", *request.directories),
                output,
            ),
            GitOperation(
                "fetch",
                (
                    "fetch",
                    f"--filter={self.defaults.fetch_filter}",
                    f"--depth={self.defaults.fetch_depth}",
                    remote,
                    request.branch,
                ),
                output,
            ),
            GitOperation("checkout", ("checkout", request.branch), output),
        ]

    def clone(
        self,
        request: CloneRequest,
        progress_callback: Callable[[GitOperation], None] | None = None,
    ) -> None:
        """Run the clone.

        Args:
            request: The resolved clone request
            progress_callback: Optional callback(operation) before each step

        Raises:
            ExternalOperationError: From the first step that fails
        """
        operations = self.plan(request)
        logger.info(
            f"Sparse cloning {request.repo_url} ({request.branch}) into "
            f"{request.output_dir}: {', '.join(request.directories)}"
        )

        for index, operation in enumerate(operations, start=1):
            logger.debug(f"Step {index}/{len(operations)}: {operation.name}")
            if progress_callback:
                progress_callback(operation)
            self.executor.run(operation)

        logger.info(f"Sparse clone of {request.repo_url} complete")
