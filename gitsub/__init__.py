"""gitsub - sparse checkout of selected directories from a git repository."""

from gitsub.clone import CloneOrchestrator
from gitsub.github import parse_github_dir_url
from gitsub.models.config import CloneDefaults
from gitsub.models.request import CloneRequest
from gitsub.request import build_clone_request

__version__ = "0.1.0"
__all__ = [
    "CloneOrchestrator",
    "CloneRequest",
    "CloneDefaults",
    "build_clone_request",
    "parse_github_dir_url",
]
