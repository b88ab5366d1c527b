"""Configuration model for kickoff.

Captures kickoff.yaml fields with sensible defaults for the packages
installed into new projects, git settings, and remote hosting policy.
"""

from __future__ import annotations

import os
from pathlib import Path, PurePosixPath, PureWindowsPath
from typing import Literal

from pydantic import BaseModel, Field, ValidationError, field_validator

CONFIG_FILENAME = ".kickoff.yaml"
CONFIG_ENV_VAR = "KICKOFF_CONFIG"


class ConfigError(Exception):
    """Raised when a config file cannot be parsed or fails validation."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid config {path}: {reason}")


class RemoteConfig(BaseModel):
    """Configuration for the optional remote hosting step.

    ``mode`` decides whether the operator is asked (prompt), the remote
    is always created (always), or the step is never attempted (never).
    """

    model_config = {"extra": "forbid"}

    mode: Literal["prompt", "always", "never"] = "prompt"
    visibility: Literal["public", "private", "internal"] = "public"
    description: str = "Python project: {name}"

    def render_description(self, name: str) -> str:
        """Return the repository description for the given project name."""
        return self.description.replace("{name}", name)


class KickoffConfig(BaseModel):
    """Tool-level configuration loaded from kickoff.yaml."""

    model_config = {"extra": "forbid"}

    packages: list[str] = Field(default_factory=lambda: ["python-dotenv"])
    extra_imports: list[str] = Field(default_factory=list)
    env_dir: str = ".venv"
    python: str | None = None
    default_branch: str = "main"
    commit_message: str = "Initial commit: project structure setup"
    strict_install: bool = False
    remote: RemoteConfig = Field(default_factory=RemoteConfig)

    @field_validator("env_dir")
    @classmethod
    def _env_dir_inside_project(cls, value: str) -> str:
        """The environment must be a relative path below the project root."""
        if not value.strip():
            raise ValueError("must not be empty")
        for flavour in (PurePosixPath, PureWindowsPath):
            path = flavour(value)
            if path.is_absolute() or path.anchor:
                raise ValueError(f"must be relative to the project root, got '{value}'")
            if ".." in path.parts:
                raise ValueError(f"must not contain '..', got '{value}'")
        if all(part == "." for part in PurePosixPath(value).parts):
            raise ValueError("must name a subdirectory of the project root")
        return value


def user_config_path() -> Path:
    """Return the per-user config file location (~/.config/kickoff/config.yaml)."""
    base = os.environ.get("XDG_CONFIG_HOME")
    root = Path(base) if base else Path.home() / ".config"
    return root / "kickoff" / "config.yaml"


def find_config_file(start: Path | None = None) -> Path | None:
    """Locate the config file to use, or None when there is none.

    Lookup order: the KICKOFF_CONFIG environment variable, a
    .kickoff.yaml found by walking up from start (default: cwd),
    then the per-user config file.

    Args:
        start: Starting directory for the upward search. Defaults to cwd.

    Returns:
        Path to an existing config file, or None.
    """
    env_value = os.environ.get(CONFIG_ENV_VAR)
    if env_value:
        return Path(env_value)

    current = (start or Path.cwd()).resolve()
    while True:
        candidate = current / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
        if current == current.parent:
            break
        current = current.parent

    user_path = user_config_path()
    if user_path.is_file():
        return user_path
    return None


def load_config(path: Path | None = None) -> KickoffConfig:
    """Load KickoffConfig from YAML. Returns defaults if no file is found.

    Args:
        path: Explicit config file. If None, uses find_config_file().

    Returns:
        Validated KickoffConfig instance.

    Raises:
        ConfigError: If the file is missing, is not valid YAML, or does
            not match the schema.
    """
    if path is None:
        path = find_config_file()
        if path is None:
            return KickoffConfig()
    if not path.is_file():
        raise ConfigError(path, "file not found")

    import yaml

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(path, f"YAML syntax error: {exc}") from exc
    if raw is None:
        return KickoffConfig()
    if not isinstance(raw, dict):
        raise ConfigError(path, "top level must be a mapping")
    try:
        return KickoffConfig.model_validate(raw)
    except ValidationError as exc:
        details = "; ".join(
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}"
            for err in exc.errors()
        )
        raise ConfigError(path, details) from exc
