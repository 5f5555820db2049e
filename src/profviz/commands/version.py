"""Hidden ``version`` command."""

from __future__ import annotations

import typer

from profviz import __version__
from profviz.models import CommandNode

VERSION_OUTPUT = f"profviz version @ v{__version__}\n"


def _run_version(node: CommandNode, args: list[str]) -> None:
    typer.echo(VERSION_OUTPUT, nl=False)


def new_version_command() -> CommandNode:
    return CommandNode(use="version", hidden=True, run=_run_version)
