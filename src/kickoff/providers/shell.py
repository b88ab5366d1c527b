"""Subprocess helper shared by all command-line providers.

Every external tool invocation goes through run_command(), which
never raises for a failing or missing executable. Callers inspect
the returned CommandResult instead.
"""

from __future__ import annotations

import subprocess
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

# Shell convention for "command not found"
COMMAND_NOT_FOUND = 127


@dataclass
class CommandResult:
    """Outcome of a single external command."""

    args: list[str]
    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0

    @property
    def command_line(self) -> str:
        """The command as a single printable string."""
        return " ".join(self.args)


def run_command(args: Sequence[str], cwd: Path | None = None) -> CommandResult:
    """Run a command to completion and capture its output.

    Args:
        args: Program and arguments. No shell is involved.
        cwd: Working directory for the child process.

    Returns:
        CommandResult with the exit status and captured output. A missing
        executable or an OS-level launch error is reported as a non-zero
        result rather than an exception.
    """
    argv = [str(a) for a in args]
    try:
        completed = subprocess.run(
            argv,
            cwd=str(cwd) if cwd is not None else None,
            capture_output=True,
            text=True,
            check=False,
        )
    except FileNotFoundError:
        return CommandResult(
            args=argv,
            returncode=COMMAND_NOT_FOUND,
            stderr=f"Command not found: {argv[0]}. Is it installed and on your PATH?",
        )
    except OSError as exc:
        return CommandResult(args=argv, returncode=1, stderr=str(exc))

    return CommandResult(
        args=argv,
        returncode=completed.returncode,
        stdout=completed.stdout or "",
        stderr=completed.stderr or "",
    )
