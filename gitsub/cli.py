"""CLI commands for gitsub."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import NoReturn

import click
import yaml
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from gitsub.clone import CloneOrchestrator
from gitsub.errors import GitsubError, UsageError
from gitsub.executor import GitExecutor, GitOperation, SubprocessGitExecutor
from gitsub.models.config import CloneDefaults
from gitsub.request import build_clone_request

console = Console()
err_console = Console(stderr=True)

CLONE_USAGE = """\
Usage:
  gitsub clone <repo-url> <directory> [directory...]
  gitsub clone <github-tree-or-blob-url>
Options:
  -b, --branch <branch>   Specify branch (default: main)
  -o, --output <path>     Output directory (default: repo name)

Example:
  gitsub clone https://github.com/tensorflow/tensorflow tensorflow/core"""


def get_executor(git: str) -> GitExecutor:
    return SubprocessGitExecutor(git)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def _fail(message: str) -> NoReturn:
    err_console.print(f"[red]Error:[/red] {escape(message)}")
    raise SystemExit(1)


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
def main() -> None:
    """gitsub - clone only the directories you need from a git repository."""


@main.command()
@click.argument("args", nargs=-1)
@click.option("--branch", "-b", default=None, help="Branch name (default: main)")
@click.option("--output", "-o", default=None, help="Output directory (default: repo name)")
@click.option("--dry-run", is_flag=True, help="Print the git commands without running them")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    envvar="GITSUB_CONFIG",
    default=None,
    help="YAML file with clone defaults",
)
def clone(
    args: tuple[str, ...],
    branch: str | None,
    output: str | None,
    dry_run: bool,
    verbose: bool,
    config_path: Path | None,
) -> None:
    """Sparse-clone directories from a repository.

    Pass a repository URL followed by one or more directories, or a single
    GitHub tree/blob URL such as
    https://github.com/owner/repo/tree/main/src/lib.
    """
    _configure_logging(verbose)

    try:
        defaults = CloneDefaults.load(config_path)
    except (OSError, yaml.YAMLError, ValidationError) as e:
        _fail(f"invalid configuration: {e}")

    try:
        request = build_clone_request(args, branch=branch, output=output, defaults=defaults)
    except UsageError as e:
        click.echo(CLONE_USAGE)
        _fail(str(e))
    except GitsubError as e:
        _fail(str(e))

    executor = get_executor(defaults.git_executable)
    orchestrator = CloneOrchestrator(executor, defaults)

    if dry_run:
        for operation in orchestrator.plan(request):
            click.echo(operation.command_line)
        return

    def on_step(operation: GitOperation) -> None:
        if operation.name == "fetch":
            console.print("Fetching required files...")

    try:
        executor.check_available()

        console.print(f"Cloning repository: {escape(request.repo_url)}")
        console.print(f"Output directory: {escape(request.output_dir)}")
        console.print(f"Branch: {escape(request.branch)}")

        orchestrator.clone(request, progress_callback=on_step)
    except GitsubError as e:
        _fail(str(e))

    console.print("[green]Done.[/green]")


if __name__ == "__main__":
    main()
