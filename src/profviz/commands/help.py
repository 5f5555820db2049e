"""``help [command]`` -- show the help of any command in the tree."""

from __future__ import annotations

import typer

from profviz.help import print_help, print_usage
from profviz.help.text import quote
from profviz.models import CommandNode


def _topic_word(arg: str) -> str:
    """Backquote *arg*, falling back to double quotes when it holds a backquote or control character."""
    if "`" in arg or any((ord(c) < 0x20 and c != "\t") or ord(c) == 0x7F for c in arg):
        return quote(arg)
    return f"`{arg}`"


def format_topic(args: list[str]) -> str:
    """Render an unknown topic as a bracketed list, e.g. ``[`a` `b`]``."""
    return "[" + " ".join(_topic_word(a) for a in args) + "]"


def _run_help(node: CommandNode, args: list[str]) -> None:
    """Render help for the command named by *args*, starting at the root.

    Unknown topics print a notice followed by the root's usage block.
    """
    root = node.root()
    target, remaining = root.find(args)
    if remaining:
        typer.echo(f"Unknown help topic {format_topic(args)}")
        print_usage(root)
        return
    print_help(target)


def new_help_command(root_name: str) -> CommandNode:
    return CommandNode(
        use="help [command]",
        short="Help about any command",
        long=(
            "Help provides help for any command in the application.\n"
            f"Simply type {root_name} help [path to command] for full details."
        ),
        run=_run_help,
    )
