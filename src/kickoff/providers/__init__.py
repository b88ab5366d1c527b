"""Kickoff providers - external tool abstraction layer.

Re-exports the provider ABCs, the CommandResult type, and the
default implementations for venv/pip, git, and the GitHub CLI.
"""

from kickoff.providers.base import (
    EnvironmentProvider,
    RemoteHostingProvider,
    VersionControlProvider,
)
from kickoff.providers.git import GitProvider
from kickoff.providers.github import GitHubCliProvider
from kickoff.providers.shell import CommandResult, run_command
from kickoff.providers.venv import VenvProvider, activate_command, venv_python

__all__ = [
    "CommandResult",
    "EnvironmentProvider",
    "GitHubCliProvider",
    "GitProvider",
    "RemoteHostingProvider",
    "VenvProvider",
    "VersionControlProvider",
    "activate_command",
    "run_command",
    "venv_python",
]
