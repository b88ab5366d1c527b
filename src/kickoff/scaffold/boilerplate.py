"""Boilerplate files written into every new project.

Generates main.py (import block, blank line, body), a commented .env
template, and a .gitignore. Files are created exclusively and are
never overwritten.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from rich.console import Console

console = Console()

# Import block at the top of main.py, one entry per line
DEFAULT_IMPORTS: list[str] = [
    "import os",
    "import sys",
    "import logging",
    "from dotenv import load_dotenv",
    "# Add other common imports here if desired, e.g.:",
    "# import json",
    "# import requests",
]

MAIN_FILE = "main.py"
ENV_FILE = ".env"
GITIGNORE_FILE = ".gitignore"


def _get_templates_dir() -> Path:
    """Return the path to the templates directory within the package."""
    return Path(__file__).parent / "templates"


def _read_template(name: str) -> str:
    return (_get_templates_dir() / name).read_text(encoding="utf-8")


def render_main(extra_imports: Sequence[str] = ()) -> str:
    """Compose main.py from the import block and the body template.

    Args:
        extra_imports: Additional import lines appended after the defaults.

    Returns:
        Full main.py source text.
    """
    imports = [*DEFAULT_IMPORTS, *extra_imports]
    return "\n".join(imports) + "\n\n" + _read_template("main_body.tmpl")


def render_env() -> str:
    """Return the .env template (commented examples only, no secrets)."""
    return _read_template("env.tmpl")


def render_gitignore() -> str:
    """Return the .gitignore content."""
    return _read_template("gitignore.tmpl")


def write_boilerplate(
    root: Path,
    extra_imports: Sequence[str] = (),
    out: Console | None = None,
) -> list[str]:
    """Write main.py, .env, and .gitignore into root.

    Args:
        root: Project root directory. Must already exist.
        extra_imports: Additional import lines for main.py.
        out: Console for progress lines. Defaults to the module console.

    Returns:
        List of created file names (relative to root).

    Raises:
        FileExistsError: If any target file already exists.
        OSError: If a file cannot be written.
    """
    out = out or console
    files: list[tuple[str, str]] = [
        (MAIN_FILE, render_main(extra_imports)),
        (ENV_FILE, render_env()),
        (GITIGNORE_FILE, render_gitignore()),
    ]

    created: list[str] = []
    for name, content in files:
        with open(root / name, "x", encoding="utf-8") as fh:
            fh.write(content)
        created.append(name)
        out.print(f"  [green]\u2713[/green] {name}")

    return created
