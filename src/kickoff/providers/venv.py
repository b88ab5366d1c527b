"""Environment provider backed by the standard venv module and pip."""

from __future__ import annotations

import os
import sys
from collections.abc import Sequence
from pathlib import Path

from kickoff.providers.base import EnvironmentProvider
from kickoff.providers.shell import CommandResult, run_command


def venv_python(env_path: Path) -> Path:
    """Return the interpreter path inside a virtual environment."""
    if os.name == "nt":
        return env_path / "Scripts" / "python.exe"
    return env_path / "bin" / "python"


def activate_command(env_dir: str) -> str:
    """Return the shell command that activates env_dir for this platform."""
    if os.name == "nt":
        return f"{env_dir}\\Scripts\\activate"
    return f"source {env_dir}/bin/activate"


class VenvProvider(EnvironmentProvider):
    """Create environments with ``<python> -m venv`` and install with pip.

    Args:
        python: Interpreter used to create the environment. Defaults to
            the interpreter running kickoff.
    """

    def __init__(self, python: str | None = None) -> None:
        self.python = python or sys.executable

    def create(self, env_path: Path) -> CommandResult:
        return run_command([self.python, "-m", "venv", str(env_path)])

    def install(self, env_path: Path, packages: Sequence[str]) -> CommandResult:
        # Run pip through the environment's own interpreter; no activation.
        args = [str(venv_python(env_path)), "-m", "pip", "install", *packages]
        return run_command(args, cwd=env_path.parent)
