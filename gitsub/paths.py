"""Path and repository URL helpers."""

from __future__ import annotations

import string
from collections.abc import Iterable
from urllib.parse import urlsplit

from gitsub.errors import InvalidDirectoryError, InvalidURLError

# Transports accepted for the remote: HTTPS and scp-like SSH
ACCEPTED_URL_PREFIXES = ("https://", "git@")

# Whitespace and separators are peeled together so "/ docs /" settles in one pass
_STRIP_CHARS = string.whitespace + "/"


def normalize_path(raw: str) -> str:
    """Normalize a directory into a sparse-checkout compatible relative path.

    Backslashes become forward slashes, surrounding whitespace and
    leading/trailing slashes are removed. Returns an empty string when
    nothing is left, which callers treat as invalid.
    """
    return raw.replace("\\", "/").strip(_STRIP_CHARS)


def normalize_directories(directories: Iterable[str]) -> list[str]:
    """Normalize directories and drop duplicates, keeping first-seen order.

    Raises:
        InvalidDirectoryError: If any directory normalizes to empty.
    """
    seen: set[str] = set()
    normalized: list[str] = []

    for raw in directories:
        path = normalize_path(raw)
        if not path:
            raise InvalidDirectoryError(raw)
        if path in seen:
            continue
        seen.add(path)
        normalized.append(path)

    return normalized


def validate_repo_url(url: str) -> None:
    """Check the repository URL uses HTTPS or the ``git@host:`` SSH form."""
    if not url.startswith(ACCEPTED_URL_PREFIXES):
        raise InvalidURLError(url)


def extract_repo_name(repo_url: str) -> str:
    """Get the repository name from a clone URL.

    Handles both HTTPS URLs and SSH URLs (``git@github.com:user/repo.git``).
    Returns an empty string when the URL has no path to take a name from.
    """
    name = repo_url.strip()
    if "://" in name:
        try:
            name = urlsplit(name).path
        except ValueError:
            return ""
    elif name.startswith("git@"):
        # SSH form: everything after the host separator
        name = name.partition(":")[2]

    name = name.removesuffix("/").removesuffix(".git")
    return name.rsplit("/", 1)[-1]
