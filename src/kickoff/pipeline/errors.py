"""Fatal error types raised by the provisioning pipeline.

Each carries the step it came from and the process exit code the
CLI should use. Non-fatal failures are not exceptions; they are
recorded as step outcomes instead.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from kickoff.providers.shell import CommandResult


class ProvisionError(Exception):
    """Base class for errors that abort a provisioning run."""

    exit_code: int = 1

    def __init__(self, message: str, step: str | None = None) -> None:
        self.step = step
        super().__init__(message)


class UsageError(ProvisionError):
    """Raised when the project name is missing or invalid."""

    def __init__(self, message: str) -> None:
        super().__init__(message, step="validate")


class ProjectConflictError(ProvisionError):
    """Raised when the target project directory already exists."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Directory '{path}' already exists.", step="create_root")


class ProvisioningError(ProvisionError):
    """Raised when a fatal provisioning step fails.

    Attributes:
        result: The failing command's result, when the failure came from
            an external tool rather than the filesystem.
    """

    def __init__(
        self,
        message: str,
        step: str,
        result: CommandResult | None = None,
    ) -> None:
        self.result = result
        super().__init__(message, step=step)


class ProvisionInterrupted(ProvisionError):
    """Raised when the operator interrupts a run (Ctrl-C)."""

    exit_code = 130

    def __init__(self, step: str | None = None) -> None:
        super().__init__("Interrupted by operator.", step=step)
