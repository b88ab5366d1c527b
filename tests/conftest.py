"""Shared fixtures for kickoff tests."""

from __future__ import annotations

import io

import pytest
from rich.console import Console

from kickoff.models.config import KickoffConfig
from kickoff.pipeline.runner import Pipeline
from tests.fakes import FakeEnvironment, FakeRemote, FakeVCS, RecordingConfirm


@pytest.fixture
def fake_env() -> FakeEnvironment:
    return FakeEnvironment()


@pytest.fixture
def fake_vcs() -> FakeVCS:
    return FakeVCS()


@pytest.fixture
def fake_remote() -> FakeRemote:
    return FakeRemote()


@pytest.fixture
def confirm() -> RecordingConfirm:
    return RecordingConfirm(answer=True)


@pytest.fixture
def console() -> Console:
    """Console writing to an in-memory buffer, wide enough to avoid wrapping."""
    return Console(file=io.StringIO(), width=400)


@pytest.fixture
def make_pipeline(tmp_path, fake_env, fake_vcs, fake_remote, confirm, console):
    """Factory for a Pipeline wired to the fakes and rooted at tmp_path."""

    def _make(config: KickoffConfig | None = None) -> Pipeline:
        return Pipeline(
            environment=fake_env,
            vcs=fake_vcs,
            remote=fake_remote,
            confirm=confirm,
            config=config,
            console=console,
            base_dir=tmp_path,
        )

    return _make


@pytest.fixture(autouse=True)
def isolated_config(tmp_path_factory, monkeypatch):
    """Keep tests from reading the developer's real kickoff config."""
    monkeypatch.delenv("KICKOFF_CONFIG", raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path_factory.mktemp("xdg")))
