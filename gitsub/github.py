"""Recognition of GitHub web URLs that point at a directory or file."""

from __future__ import annotations

import logging
import posixpath
from collections.abc import Sequence
from urllib.parse import unquote, urlsplit

from gitsub.models.request import GitHubURLMatch, ParsedGitHubURL

logger = logging.getLogger(__name__)

GITHUB_HOST = "github.com"
URL_MODES = ("tree", "blob")


def parse_github_dir_url(args: Sequence[str], host: str = GITHUB_HOST) -> GitHubURLMatch:
    """Decompose a GitHub ``tree``/``blob`` URL into repo URL, branch and path.

    Accepts ``https://github.com/<owner>/<repo>/tree/<branch>/<path>`` and the
    ``blob`` equivalent, where the file's parent directory is used. Only a
    single positional argument is considered; anything that does not fit
    the pattern is reported as a miss and never raises.

    Args:
        args: Positional CLI arguments
        host: Host name GitHub web URLs are served from

    Returns:
        GitHubURLMatch, truthy when the URL was recognized
    """
    if len(args) != 1:
        return GitHubURLMatch.miss("expected a single URL argument")

    raw = args[0].strip()
    if not raw:
        return GitHubURLMatch.miss("empty URL")

    try:
        parts = urlsplit(raw)
    except ValueError as e:
        return GitHubURLMatch.miss(f"invalid URL: {e}")

    if parts.netloc != host:
        return GitHubURLMatch.miss(f"only {host} URLs are supported")

    segments = unquote(parts.path).strip("/").split("/")
    if len(segments) < 5:
        return GitHubURLMatch.miss("URL must include /tree/<branch>/<path> or /blob/<branch>/<path>")

    owner, repo, mode, branch, *rest = segments
    if repo.endswith(".git"):
        repo = repo[:-4]

    if mode not in URL_MODES:
        return GitHubURLMatch.miss("URL must be a tree or blob link")

    sub_path = posixpath.normpath("/".join(rest))

    # A file link checks out its enclosing folder
    if mode == "blob":
        sub_path = posixpath.dirname(sub_path)
        if sub_path in ("", ".", "/"):
            return GitHubURLMatch.miss("blob URL must point inside a directory")

    if not owner or not repo or not branch or sub_path in (".", "/"):
        return GitHubURLMatch.miss("missing owner, repo, branch or path")

    parsed = ParsedGitHubURL(
        repo_url=f"https://{host}/{owner}/{repo}",
        branch=branch,
        sub_path=sub_path,
    )
    logger.debug(f"Recognized GitHub URL: {parsed.repo_url} @ {branch} -> {sub_path}")
    return GitHubURLMatch.hit(parsed)
