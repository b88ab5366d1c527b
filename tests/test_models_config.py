"""Tests for kickoff.models.config - KickoffConfig, find_config_file, load_config."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from kickoff.models.config import (
    ConfigError,
    KickoffConfig,
    RemoteConfig,
    find_config_file,
    load_config,
    user_config_path,
)


class TestKickoffConfig:
    """Test KickoffConfig model."""

    def test_defaults(self):
        """KickoffConfig has sensible defaults."""
        config = KickoffConfig()
        assert config.packages == ["python-dotenv"]
        assert config.extra_imports == []
        assert config.env_dir == ".venv"
        assert config.python is None
        assert config.default_branch == "main"
        assert config.commit_message == "Initial commit: project structure setup"
        assert config.strict_install is False
        assert config.remote.mode == "prompt"
        assert config.remote.visibility == "public"

    def test_default_packages_not_shared(self):
        """Each instance gets its own package list."""
        a = KickoffConfig()
        a.packages.append("requests")
        assert KickoffConfig().packages == ["python-dotenv"]

    def test_rejects_unknown_keys(self):
        """Unknown top-level keys are rejected."""
        with pytest.raises(ValidationError, match="extra_forbidden"):
            KickoffConfig.model_validate({"unknown_field": True})

    def test_rejects_bad_remote_mode(self):
        """remote.mode must be prompt, always or never."""
        with pytest.raises(ValidationError):
            KickoffConfig.model_validate({"remote": {"mode": "sometimes"}})

    @pytest.mark.parametrize("env_dir", [".venv", "envs/py", "./venv"])
    def test_accepts_env_dir_inside_project(self, env_dir):
        """Relative env_dir values below the project root are allowed."""
        assert KickoffConfig(env_dir=env_dir).env_dir == env_dir

    @pytest.mark.parametrize(
        "env_dir",
        ["", "   ", ".", "../escaped_env", "a/../../b", "/tmp/venv", "C:\\venv", "..\\venv"],
    )
    def test_rejects_env_dir_outside_project(self, env_dir):
        """env_dir must not be empty, absolute, or climb out with '..'."""
        with pytest.raises(ValidationError, match="env_dir"):
            KickoffConfig(env_dir=env_dir)


class TestRemoteConfig:
    """Test RemoteConfig.render_description."""

    def test_default_description(self):
        """The default description embeds the project name."""
        assert RemoteConfig().render_description("demo") == "Python project: demo"

    def test_description_without_placeholder(self):
        assert RemoteConfig(description="Scratch repo").render_description("demo") == "Scratch repo"


class TestFindConfigFile:
    """Test config file lookup order."""

    def test_none_when_nothing_exists(self, tmp_path):
        """No env var, project file or user file means None."""
        assert find_config_file(tmp_path) is None

    def test_walks_up_from_start(self, tmp_path):
        """A .kickoff.yaml in a parent directory is found."""
        config_file = tmp_path / ".kickoff.yaml"
        config_file.write_text("packages: []\n", encoding="utf-8")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        assert find_config_file(nested) == config_file

    def test_env_var_wins(self, tmp_path, monkeypatch):
        """KICKOFF_CONFIG takes precedence over a project file."""
        (tmp_path / ".kickoff.yaml").write_text("packages: []\n", encoding="utf-8")
        explicit = tmp_path / "custom.yaml"
        monkeypatch.setenv("KICKOFF_CONFIG", str(explicit))
        assert find_config_file(tmp_path) == explicit

    def test_falls_back_to_user_config(self, tmp_path):
        """The per-user config file is the last fallback."""
        user_file = user_config_path()
        user_file.parent.mkdir(parents=True)
        user_file.write_text("default_branch: trunk\n", encoding="utf-8")
        assert find_config_file(tmp_path) == user_file


class TestLoadConfig:
    """Test load_config parsing and error reporting."""

    def test_defaults_without_file(self, tmp_path, monkeypatch):
        """No config file anywhere gives the defaults."""
        monkeypatch.chdir(tmp_path)
        assert load_config() == KickoffConfig()

    def test_loads_explicit_file(self, tmp_path: Path):
        """An explicit path is parsed and validated."""
        path = tmp_path / "kickoff.yaml"
        path.write_text(
            "packages: [python-dotenv, requests]\n"
            "strict_install: true\n"
            "remote:\n"
            "  mode: never\n",
            encoding="utf-8",
        )
        config = load_config(path)
        assert config.packages == ["python-dotenv", "requests"]
        assert config.strict_install is True
        assert config.remote.mode == "never"

    def test_empty_file_gives_defaults(self, tmp_path: Path):
        """An empty YAML file gives the defaults."""
        path = tmp_path / "kickoff.yaml"
        path.write_text("", encoding="utf-8")
        assert load_config(path) == KickoffConfig()

    def test_missing_explicit_file(self, tmp_path: Path):
        """A missing explicit path is a ConfigError."""
        with pytest.raises(ConfigError, match="file not found"):
            load_config(tmp_path / "nope.yaml")

    def test_yaml_syntax_error(self, tmp_path: Path):
        """Malformed YAML is a ConfigError."""
        path = tmp_path / "kickoff.yaml"
        path.write_text("packages: [unclosed\n", encoding="utf-8")
        with pytest.raises(ConfigError, match="YAML syntax error"):
            load_config(path)

    def test_non_mapping(self, tmp_path: Path):
        path = tmp_path / "kickoff.yaml"
        path.write_text("- just\n- a list\n", encoding="utf-8")
        with pytest.raises(ConfigError, match="mapping"):
            load_config(path)

    def test_validation_error_names_field(self, tmp_path: Path):
        """Schema errors name the offending dotted field."""
        path = tmp_path / "kickoff.yaml"
        path.write_text("remote:\n  visibility: secret\n", encoding="utf-8")
        with pytest.raises(ConfigError, match="remote.visibility"):
            load_config(path)

    def test_escaping_env_dir_names_field(self, tmp_path: Path):
        """An env_dir that leaves the project is a ConfigError naming the field."""
        path = tmp_path / "kickoff.yaml"
        path.write_text("env_dir: ../shared-venv\n", encoding="utf-8")
        with pytest.raises(ConfigError, match=r"env_dir: .*\.\.") as exc_info:
            load_config(path)
        assert exc_info.value.path == path
