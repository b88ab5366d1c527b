"""Remote hosting provider backed by the GitHub CLI (gh).

gh must be installed and authenticated (``gh auth login``) for
repository creation to succeed. Availability is only a PATH probe.
"""

from __future__ import annotations

import shutil
from pathlib import Path

from kickoff.providers.base import RemoteHostingProvider
from kickoff.providers.shell import CommandResult, run_command

INSTALL_HINT = "Install 'gh' and run 'gh auth login' to enable this feature."


class GitHubCliProvider(RemoteHostingProvider):
    """Create GitHub repositories with ``gh repo create --push``."""

    def __init__(self, executable: str = "gh") -> None:
        self.executable = executable

    def is_available(self) -> bool:
        return shutil.which(self.executable) is not None

    def create_and_push(
        self,
        root: Path,
        name: str,
        visibility: str,
        description: str,
    ) -> CommandResult:
        args = [
            self.executable,
            "repo",
            "create",
            name,
            f"--source={root}",
            f"--{visibility}",
            f"--description={description}",
            "--push",
        ]
        return run_command(args, cwd=root)

    def provider_name(self) -> str:
        return "GitHub"
