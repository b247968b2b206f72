"""Configuration defaults for sparse clones."""

from __future__ import annotations

import os
from pathlib import Path

import yaml
from pydantic import BaseModel, Field

# Environment overrides applied on top of the YAML file
ENV_OVERRIDES = {
    "GITSUB_DEFAULT_BRANCH": "default_branch",
    "GITSUB_GIT": "git_executable",
}


class CloneDefaults(BaseModel):
    """Defaults threaded through request building and cloning."""

    default_branch: str = Field(default="main", min_length=1)
    remote_name: str = Field(default="origin", min_length=1)
    git_executable: str = Field(default="git", min_length=1)
    fetch_depth: int = Field(default=1, ge=1, description="History depth (1 for tip only)")
    fetch_filter: str = Field(
        default="blob:none", description="Partial clone filter spec for the fetch"
    )
    github_host: str = Field(default="github.com", description="Host of GitHub web URLs")

    model_config = {"extra": "forbid", "frozen": True}

    @classmethod
    def from_yaml(cls, path: Path) -> "CloneDefaults":
        """Load defaults from a YAML file."""
        with open(path) as f:
            data = yaml.safe_load(f)
        return cls.model_validate(data or {})

    @classmethod
    def load(cls, path: Path | None = None) -> "CloneDefaults":
        """Load defaults from an optional YAML file plus environment overrides."""
        data: dict[str, str | int] = {}
        if path is not None:
            data.update(cls.from_yaml(path).model_dump())

        for env_var, field_name in ENV_OVERRIDES.items():
            value = os.environ.get(env_var)
            if value:
                data[field_name] = value

        return cls.model_validate(data)
