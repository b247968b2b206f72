"""Turning CLI input into a validated clone request."""

from __future__ import annotations

import logging
import os
from collections.abc import Sequence

from gitsub.errors import MissingOutputDirectoryError, OutputExistsError, UsageError
from gitsub.github import parse_github_dir_url
from gitsub.models.config import CloneDefaults
from gitsub.models.request import CloneRequest
from gitsub.paths import extract_repo_name, normalize_directories, validate_repo_url

logger = logging.getLogger(__name__)


def build_clone_request(
    args: Sequence[str],
    branch: str | None = None,
    output: str | None = None,
    defaults: CloneDefaults | None = None,
) -> CloneRequest:
    """Build a clone request from positional arguments and option overrides.

    A single argument is first tried as a GitHub tree/blob URL. Otherwise
    the first argument is the repository URL and the rest are directories.

    Args:
        args: Positional arguments (URL or repo URL followed by directories)
        branch: Branch override, wins over a branch parsed from the URL
        output: Output directory override
        defaults: Configured defaults (default branch, GitHub host)

    Returns:
        The immutable CloneRequest

    Raises:
        UsageError: Too few arguments for the explicit form
        InvalidURLError: Repository URL uses an unsupported transport
        InvalidDirectoryError: A directory normalizes to empty
        MissingOutputDirectoryError: No output given and none derivable
        OutputExistsError: The output path already exists
    """
    defaults = defaults or CloneDefaults()

    match = parse_github_dir_url(args, host=defaults.github_host)
    if match:
        parsed = match.parsed
        repo_url = parsed.repo_url
        raw_directories = parsed.directories
        branch = branch or parsed.branch
    else:
        if len(args) == 1:
            logger.debug(f"Not a GitHub directory URL ({match.reason})")
        if len(args) < 2:
            raise UsageError("missing required arguments")
        repo_url = args[0]
        raw_directories = list(args[1:])

    validate_repo_url(repo_url)
    directories = normalize_directories(raw_directories)

    branch = branch or defaults.default_branch

    if not output:
        output = extract_repo_name(repo_url)
    if not output:
        raise MissingOutputDirectoryError(repo_url)

    output = os.path.normpath(output)
    if os.path.lexists(output):
        raise OutputExistsError(output)

    return CloneRequest(
        repo_url=repo_url,
        directories=tuple(directories),
        branch=branch,
        output_dir=output,
    )
