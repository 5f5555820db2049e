"""Tests for profviz.config -- XDG paths, config loading, precedence."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from profviz.config import (
    get_config_dir,
    global_config_path,
    load_global_config,
    resolve_config,
)
from profviz.exceptions import ConfigError
from profviz.models import GlobalConfig


def _write_json(path: Path, data: Any) -> None:
    """Write *data* as JSON to *path*, creating parent dirs."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")


# ---------------------------------------------------------------------------
# XDG path resolution
# ---------------------------------------------------------------------------


class TestConfigDir:
    def test_xdg_default(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr("profviz.config._is_xdg_platform", lambda: True)
        monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
        monkeypatch.setattr(Path, "home", classmethod(lambda cls: tmp_path))

        assert get_config_dir() == tmp_path / ".config" / "profviz"

    def test_xdg_custom(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        custom = tmp_path / "custom_config"
        monkeypatch.setattr("profviz.config._is_xdg_platform", lambda: True)
        monkeypatch.setenv("XDG_CONFIG_HOME", str(custom))

        assert get_config_dir() == custom / "profviz"

    def test_empty_xdg_config_home(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr("profviz.config._is_xdg_platform", lambda: True)
        monkeypatch.setenv("XDG_CONFIG_HOME", "")
        monkeypatch.setattr(Path, "home", classmethod(lambda cls: tmp_path))

        assert get_config_dir() == tmp_path / ".config" / "profviz"

    def test_non_xdg_fallback(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr("profviz.config._is_xdg_platform", lambda: False)
        monkeypatch.setattr(Path, "home", classmethod(lambda cls: tmp_path))

        assert get_config_dir() == tmp_path / ".profviz"

    def test_dir_not_created(self, isolated_config: Path) -> None:
        assert get_config_dir() == isolated_config
        assert not isolated_config.exists()

    def test_config_path_override(
        self, isolated_config: Path, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        override = tmp_path / "elsewhere.json"
        monkeypatch.setenv("PROFVIZ_CONFIG", str(override))
        assert global_config_path() == override

    def test_default_config_path(self, isolated_config: Path) -> None:
        assert global_config_path() == isolated_config / "config.json"


# ---------------------------------------------------------------------------
# Loading
# ---------------------------------------------------------------------------


class TestLoadGlobalConfig:
    def test_missing_file_gives_defaults(self, isolated_config: Path) -> None:
        assert load_global_config() == GlobalConfig()

    def test_reads_file(self, isolated_config: Path) -> None:
        _write_json(
            isolated_config / "config.json",
            {"no_color": True, "suggestions_minimum_distance": 3},
        )
        config = load_global_config()
        assert config.no_color is True
        assert config.verbose is False
        assert config.suggestions_minimum_distance == 3

    def test_unknown_key_warns(self, isolated_config: Path, capfd) -> None:
        _write_json(isolated_config / "config.json", {"verbose": True, "colour": "none"})
        config = load_global_config()
        assert config.verbose is True
        assert "Ignoring unknown key 'colour'" in capfd.readouterr().err

    def test_invalid_json(self, isolated_config: Path) -> None:
        path = isolated_config / "config.json"
        path.parent.mkdir(parents=True)
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ConfigError, match="Invalid global config"):
            load_global_config()

    def test_invalid_field(self, isolated_config: Path) -> None:
        _write_json(isolated_config / "config.json", {"suggestions_minimum_distance": "far"})
        with pytest.raises(ConfigError):
            load_global_config()

    def test_reads_override_path(
        self, isolated_config: Path, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        override = tmp_path / "custom.json"
        _write_json(override, {"verbose": True})
        monkeypatch.setenv("PROFVIZ_CONFIG", str(override))
        assert load_global_config().verbose is True


# ---------------------------------------------------------------------------
# Precedence
# ---------------------------------------------------------------------------


class TestResolveConfig:
    def test_defaults(self, isolated_config: Path) -> None:
        assert resolve_config() == GlobalConfig()

    def test_no_color_env(self, isolated_config: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("NO_COLOR", "")
        assert resolve_config().no_color is True

    @pytest.mark.parametrize(("value", "expected"), [("1", True), ("yes", True), ("0", False)])
    def test_verbose_env(
        self, isolated_config: Path, monkeypatch: pytest.MonkeyPatch, value: str, expected: bool
    ) -> None:
        monkeypatch.setenv("PROFVIZ_VERBOSE", value)
        assert resolve_config().verbose is expected

    def test_env_overrides_file(self, isolated_config: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        _write_json(isolated_config / "config.json", {"verbose": True})
        monkeypatch.setenv("PROFVIZ_VERBOSE", "false")
        assert resolve_config().verbose is False
