"""Provider ABCs for the external tools the pipeline drives.

The pipeline depends only on these three narrow interfaces, so it can
be exercised against in-memory fakes. Concrete implementations wrap
python -m venv / pip, git, and the GitHub CLI.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from pathlib import Path

from kickoff.providers.shell import CommandResult


class EnvironmentProvider(ABC):
    """Creates isolated runtime environments and installs packages into them."""

    @abstractmethod
    def create(self, env_path: Path) -> CommandResult:
        """Create a new environment at env_path."""
        ...

    @abstractmethod
    def install(self, env_path: Path, packages: Sequence[str]) -> CommandResult:
        """Install packages into the environment at env_path."""
        ...


class VersionControlProvider(ABC):
    """Initializes a repository, stages files, and commits."""

    @abstractmethod
    def init(self, root: Path, branch: str) -> CommandResult:
        """Initialize a repository in root with the given default branch."""
        ...

    @abstractmethod
    def stage_all(self, root: Path) -> CommandResult:
        """Stage every file under root."""
        ...

    @abstractmethod
    def commit(self, root: Path, message: str) -> CommandResult:
        """Commit the staged files with message."""
        ...


class RemoteHostingProvider(ABC):
    """Creates a remote repository for a local one and pushes to it."""

    @abstractmethod
    def is_available(self) -> bool:
        """Return True when the hosting CLI can be invoked."""
        ...

    @abstractmethod
    def create_and_push(
        self,
        root: Path,
        name: str,
        visibility: str,
        description: str,
    ) -> CommandResult:
        """Create remote repository name, link it to root, and push.

        Args:
            root: Local repository directory.
            name: Remote repository name.
            visibility: public, private, or internal.
            description: One-line repository description.
        """
        ...

    def provider_name(self) -> str:
        """Return the provider name for operator messages.

        Default implementation returns the class name.
        """
        return type(self).__name__
