"""Data models for gitsub."""

from gitsub.models.config import CloneDefaults
from gitsub.models.request import CloneRequest, GitHubURLMatch, ParsedGitHubURL

__all__ = [
    # Request models
    "CloneRequest",
    "ParsedGitHubURL",
    "GitHubURLMatch",
    # Config
    "CloneDefaults",
]
