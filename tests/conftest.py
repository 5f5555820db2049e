"""Shared test fixtures for profviz.

Provides reusable command trees, isolated config environments, and output
state management. These fixtures are automatically discovered by pytest and
available to all test modules without explicit imports.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from profviz.commands import build_root_command
from profviz.models import CommandNode, FlagDeclaration
from profviz.output import reset_output


# ---------------------------------------------------------------------------
# Auto-reset global output state between tests
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _reset_output_between_tests() -> None:
    """Reset the global OutputManager after every test.

    The OutputManager's Rich console caches sys.stderr at creation time.
    When capsys or CliRunner redirect the stream and the test finishes, the
    cached reference becomes stale. Resetting forces a fresh manager to be
    created on next use.
    """
    reset_output()
    yield
    reset_output()


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep profviz and colour environment variables from leaking into tests."""
    for var in ["NO_COLOR", "PROFVIZ_VERBOSE", "PROFVIZ_CONFIG"]:
        monkeypatch.delenv(var, raising=False)


# ---------------------------------------------------------------------------
# Command tree fixtures
# ---------------------------------------------------------------------------


class RunRecorder:
    """A ``run`` callable that remembers every call."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, list[str]]] = []

    def __call__(self, node: CommandNode, args: list[str]) -> None:
        self.calls.append((node.command_path(), args))


@pytest.fixture
def recorder() -> RunRecorder:
    return RunRecorder()


@pytest.fixture
def tool_tree(recorder: RunRecorder) -> CommandNode:
    """A small tree: ``tool`` with ``build`` (alias ``b``) and ``run``.

    ``tool`` declares a persistent ``--debug`` flag and a local ``--dry-run``
    flag; ``build`` declares a local ``--target`` flag.
    """
    root = CommandNode(
        use="tool <command> [flags]",
        short="a tool for tests",
        persistent_flags=[
            FlagDeclaration(name="debug", usage="print debug information", default=False),
        ],
        flags=[
            FlagDeclaration(name="dry-run", usage="do nothing", default=False),
        ],
    )
    root.add_command(
        CommandNode(
            use="build",
            aliases=["b"],
            short="compile the project",
            flags=[FlagDeclaration(name="target", usage="build target", default="all")],
            run=recorder,
        ),
        CommandNode(use="run", short="run the project", run=recorder),
    )
    return root


@pytest.fixture
def root() -> CommandNode:
    """The real profviz command tree."""
    return build_root_command()


# ---------------------------------------------------------------------------
# Config isolation fixture
# ---------------------------------------------------------------------------


@pytest.fixture
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Isolate configuration to a temporary directory.

    Points XDG_CONFIG_HOME at a subdirectory of tmp_path so tests never read
    real user config, and forces the XDG code path.

    Returns:
        The profviz config directory (not created).
    """
    config_home = tmp_path / "config"
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    monkeypatch.setattr("profviz.config._is_xdg_platform", lambda: True)
    return config_home / "profviz"
