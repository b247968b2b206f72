"""Clone request and GitHub URL models."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from gitsub.paths import normalize_path


class CloneRequest(BaseModel):
    """A fully resolved sparse clone request.

    Built once per invocation by ``build_clone_request`` and consumed once
    by the orchestrator. Instances are immutable.
    """

    repo_url: str = Field(..., description="Remote repository URL")
    directories: tuple[str, ...] = Field(
        ..., description="Normalized, de-duplicated sparse-checkout directories"
    )
    branch: str = Field(..., min_length=1)
    output_dir: str = Field(..., min_length=1, description="Local working copy path")

    model_config = {"frozen": True}

    @field_validator("directories")
    @classmethod
    def _check_directories(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        if not value:
            raise ValueError("at least one directory is required")
        for directory in value:
            if not directory or normalize_path(directory) != directory:
                raise ValueError(f"directory is not normalized: {directory!r}")
        if len(set(value)) != len(value):
            raise ValueError("directories must be unique")
        return value


class ParsedGitHubURL(BaseModel):
    """Components extracted from a GitHub tree/blob URL."""

    repo_url: str
    branch: str
    sub_path: str

    model_config = {"frozen": True}

    @property
    def directories(self) -> list[str]:
        return [self.sub_path]


class GitHubURLMatch(BaseModel):
    """Outcome of trying to recognize a GitHub directory URL.

    A miss is an expected result, not an error: the caller falls back to
    the explicit ``<repo-url> <dir>...`` form. ``reason`` explains a miss
    for debug output.
    """

    matched: bool
    parsed: ParsedGitHubURL | None = None
    reason: str | None = None

    model_config = {"frozen": True}

    @classmethod
    def hit(cls, parsed: ParsedGitHubURL) -> "GitHubURLMatch":
        return cls(matched=True, parsed=parsed)

    @classmethod
    def miss(cls, reason: str) -> "GitHubURLMatch":
        return cls(matched=False, reason=reason)

    def __bool__(self) -> bool:
        return self.matched
