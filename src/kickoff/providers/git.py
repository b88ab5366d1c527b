"""Version control provider backed by the git CLI."""

from __future__ import annotations

from pathlib import Path

from kickoff.providers.base import VersionControlProvider
from kickoff.providers.shell import CommandResult, run_command


class GitProvider(VersionControlProvider):
    """Run git commands with the project root as working directory."""

    def __init__(self, executable: str = "git") -> None:
        self.executable = executable

    def init(self, root: Path, branch: str) -> CommandResult:
        return run_command([self.executable, "init", "-b", branch], cwd=root)

    def stage_all(self, root: Path) -> CommandResult:
        return run_command([self.executable, "add", "."], cwd=root)

    def commit(self, root: Path, message: str) -> CommandResult:
        return run_command([self.executable, "commit", "-m", message], cwd=root)
