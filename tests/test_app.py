"""Tests for the console-script entry point and the exception hierarchy."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from profviz import __version__, app
from profviz.exceptions import ConfigError, ProfvizError, UnknownCommandError
from profviz.exit_codes import EXIT_GENERIC_FAILURE, EXIT_SUCCESS


@pytest.fixture(autouse=True)
def _no_signal_handlers(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(app, "_setup_signal_handlers", lambda: None)


def _run_main(monkeypatch: pytest.MonkeyPatch, *args: str) -> int:
    monkeypatch.setattr("sys.argv", ["profviz", *args])
    with pytest.raises(SystemExit) as exc_info:
        app.main()
    return exc_info.value.code


class TestMain:
    def test_version(self, isolated_config: Path, monkeypatch, capsys) -> None:
        assert _run_main(monkeypatch, "version") == EXIT_SUCCESS
        assert capsys.readouterr().out == f"profviz version @ v{__version__}\n"

    def test_unknown_command_exits_one(self, isolated_config: Path, monkeypatch, capsys) -> None:
        assert _run_main(monkeypatch, "nope") == EXIT_GENERIC_FAILURE
        assert capsys.readouterr().out.startswith('unknown command "nope" for "profviz"\n')

    def test_invalid_config(self, isolated_config: Path, monkeypatch, capsys) -> None:
        path = isolated_config / "config.json"
        path.parent.mkdir(parents=True)
        path.write_text("[", encoding="utf-8")
        assert _run_main(monkeypatch, "version") == EXIT_GENERIC_FAILURE
        assert capsys.readouterr().out.startswith("Invalid global config at")

    def test_config_threshold_reaches_tree(self, isolated_config: Path, monkeypatch) -> None:
        path = isolated_config / "config.json"
        path.parent.mkdir(parents=True)
        path.write_text(json.dumps({"suggestions_minimum_distance": 4}), encoding="utf-8")
        seen = {}

        def fake_execute(root, argv=None, config=None):
            seen["distance"] = root.suggestions_minimum_distance
            return EXIT_SUCCESS

        monkeypatch.setattr(app, "execute", fake_execute)
        assert _run_main(monkeypatch) == EXIT_SUCCESS
        assert seen["distance"] == 4


class TestExceptions:
    def test_base_exit_code(self) -> None:
        assert ProfvizError("x").exit_code == EXIT_GENERIC_FAILURE
        assert ProfvizError("x", exit_code=3).exit_code == 3

    def test_unknown_command_message(self) -> None:
        exc = UnknownCommandError("biuld", "profviz")
        assert str(exc) == 'unknown command "biuld" for "profviz"'
        assert exc.reported is True
        assert exc.arg == "biuld"

    def test_config_error_not_reported(self) -> None:
        assert ConfigError("bad").reported is False
