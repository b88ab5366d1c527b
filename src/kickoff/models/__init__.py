"""Kickoff data models - re-exports all public model classes."""

from kickoff.models.config import ConfigError, KickoffConfig, RemoteConfig

__all__ = [
    "ConfigError",
    "KickoffConfig",
    "RemoteConfig",
]
