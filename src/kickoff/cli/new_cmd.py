"""kickoff new -- bootstrap a project directory.

Creates the directory, a virtual environment with the configured
packages, boilerplate files, and an initial git commit, then
optionally creates a GitHub repository and pushes to it.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from kickoff.cli.output import render_summary
from kickoff.models.config import ConfigError, KickoffConfig, load_config
from kickoff.pipeline.errors import UsageError
from kickoff.pipeline.runner import Pipeline
from kickoff.providers.git import GitProvider
from kickoff.providers.github import GitHubCliProvider
from kickoff.providers.venv import VenvProvider

console = Console(soft_wrap=True)


def confirm_with_operator(question: str) -> bool:
    """Ask a yes/no question; an aborted prompt counts as no."""
    try:
        return typer.confirm(question, default=False)
    except typer.Abort:
        return False


def apply_overrides(
    config: KickoffConfig,
    *,
    packages: list[str] | None = None,
    remote: bool | None = None,
    private: bool = False,
    strict: bool = False,
) -> KickoffConfig:
    """Return a copy of config with command-line options applied."""
    update: dict[str, object] = {}
    if packages:
        update["packages"] = [*config.packages, *packages]
    if strict:
        update["strict_install"] = True

    remote_update: dict[str, object] = {}
    if remote is not None:
        remote_update["mode"] = "always" if remote else "never"
    if private:
        remote_update["visibility"] = "private"
    if remote_update:
        update["remote"] = config.remote.model_copy(update=remote_update)

    return config.model_copy(update=update)


def build_pipeline(config: KickoffConfig, out: Console) -> Pipeline:
    """Wire the default providers into a Pipeline rooted at the cwd."""
    return Pipeline(
        environment=VenvProvider(python=config.python),
        vcs=GitProvider(),
        remote=GitHubCliProvider(),
        confirm=confirm_with_operator,
        config=config,
        console=out,
    )


def new(
    project_name: Optional[str] = typer.Argument(
        None, help="Name of the project directory to create"
    ),
    packages: Optional[list[str]] = typer.Option(
        None, "--package", "-p", help="Extra package to install (repeatable)"
    ),
    remote: Optional[bool] = typer.Option(
        None,
        "--remote/--no-remote",
        help="Create the GitHub repository without asking, or never create it",
    ),
    private: bool = typer.Option(
        False, "--private", help="Create the GitHub repository as private"
    ),
    strict: bool = typer.Option(
        False, "--strict", help="Treat dependency install failure as fatal"
    ),
    config_path: Optional[Path] = typer.Option(
        None, "--config", "-c", help="Path to a kickoff YAML config file"
    ),
) -> None:
    """Create a new Python project in the current directory.

    Sets up .venv, installs python-dotenv, writes main.py, .env and
    .gitignore, and makes the first commit on branch main.
    """
    try:
        config = load_config(config_path)
    except ConfigError as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(code=1)

    config = apply_overrides(
        config, packages=packages, remote=remote, private=private, strict=strict
    )
    pipeline = build_pipeline(config, console)
    result = pipeline.provision(project_name)

    if isinstance(result.error, UsageError):
        console.print("Usage: kickoff new <project_name>", markup=False)
    else:
        render_summary(result, console)

    if result.exit_code != 0:
        raise typer.Exit(code=result.exit_code)
