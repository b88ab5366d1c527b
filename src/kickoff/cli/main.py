"""Kickoff CLI entry point."""

import typer

from kickoff import __version__
from kickoff.cli.new_cmd import new

app = typer.Typer(
    name="kickoff",
    help=(
        "Start a Python project in one command: a .venv with python-dotenv, "
        "main.py / .env / .gitignore, a first git commit, and optionally a "
        "GitHub repository created with the gh CLI."
    ),
    epilog="Example: kickoff new my_api --private --package requests",
    no_args_is_help=True,
)

app.command(
    epilog="Defaults can be set in .kickoff.yaml or ~/.config/kickoff/config.yaml."
)(new)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"kickoff {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show version and exit.",
        callback=version_callback,
        is_eager=True,
    ),
) -> None:
    """Start a Python project: venv, boilerplate, git, and optional GitHub repo.

    Nothing is left behind when a required step fails; the partly built
    project directory is removed.
    """
