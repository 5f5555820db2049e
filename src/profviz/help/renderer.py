"""Help and usage rendering for command nodes.

The full help of a command is a list of :class:`HelpEntry` blocks::

    <description>

    USAGE
      profviz <command> <subcommand> [flags]

    FLAGS
      --help     Help for profviz
      --no-color Disable color output

    LEARN MORE
      Use 'profviz <command> <subcommand> --help' for more information about a command.

Titles are bold (click styling, stripped when the stream is not a terminal
or colour is disabled) and bodies are indented by two spaces. Command and
flag lines of one rendering share a single description column.

The shorter usage block printed after an unknown-command message is built by
:func:`render_usage`.
"""

from __future__ import annotations

import textwrap
from dataclasses import dataclass
from typing import Optional, Sequence, TextIO

import click

from profviz.help.text import DisplayLine, adjust_padding, capitalize, indent, join_lines
from profviz.models import CommandNode, FlagDeclaration
from profviz.output import get_output

FEEDBACK_ANNOTATION = "help:feedback"

HELP_FLAGS = ("--help", "-h")

LEARN_MORE = textwrap.dedent(
    """\
    Use 'profviz <command> <subcommand> --help' for more information about a command."""
)


@dataclass
class HelpEntry:
    """One block of help output; entries without a title print their body as is."""

    title: str
    body: str


def _flag_line(flag: FlagDeclaration) -> DisplayLine:
    return DisplayLine(name=f"--{flag.name}", desc=capitalize(flag.usage))


def help_entries(node: CommandNode) -> list[HelpEntry]:
    """Collect the help blocks for *node*, in display order."""
    commands: list[DisplayLine] = []
    for child in node.commands():
        if child.hidden or not child.short or child.name == "help":
            continue
        commands.append(DisplayLine(name=f"{child.name}:", desc=capitalize(child.short)))
    local_flags = [_flag_line(f) for f in node.local_flags()]
    inherited_flags = [_flag_line(f) for f in node.inherited_flags()]
    adjust_padding(*commands, *local_flags, *inherited_flags)

    entries: list[HelpEntry] = []
    description = node.long or node.short
    if description:
        entries.append(HelpEntry("", description))
    entries.append(HelpEntry("USAGE", node.use_line()))
    if commands:
        entries.append(HelpEntry("COMMANDS", join_lines(commands)))
    if local_flags:
        entries.append(HelpEntry("FLAGS", join_lines(local_flags)))
    if inherited_flags:
        entries.append(HelpEntry("INHERITED FLAGS", join_lines(inherited_flags)))
    if node.example:
        entries.append(HelpEntry("EXAMPLES", node.example))
    entries.append(HelpEntry("LEARN MORE", LEARN_MORE))
    feedback = node.annotations.get(FEEDBACK_ANNOTATION)
    if feedback is not None:
        entries.append(HelpEntry("FEEDBACK", feedback))
    return entries


def render_help(node: CommandNode) -> str:
    """The full help text of *node*, without the final newline."""
    parts = []
    for entry in help_entries(node):
        if entry.title:
            parts.append(click.style(entry.title, bold=True) + "\n")
            parts.append(indent(entry.body, 2) + "\n")
        else:
            parts.append(entry.body + "\n")
        parts.append("\n")
    return "".join(parts)[:-1]


def render_help_for_args(node: CommandNode, args: Sequence[str]) -> str:
    """Help for *node* as requested by the command line *args*.

    *args* are the arguments after the program name. When *node* is a
    top-level subcommand and the second argument is not a help flag, the
    user mistyped a nested subcommand (``profviz version bogus --help``);
    the unknown-command message for that argument is returned instead.
    """
    parent = node.parent
    if parent is not None and parent.parent is None and len(args) >= 2:
        if args[1] not in HELP_FLAGS:
            from profviz.help.suggestions import render_subcommand_suggestions

            return render_subcommand_suggestions(node, args[1])
    return render_help(node)


def print_help(
    node: CommandNode, args: Sequence[str] = (), out: Optional[TextIO] = None
) -> None:
    """Print help for *node* to *out* (stdout by default)."""
    click.echo(render_help_for_args(node, args), file=out, color=get_output().echo_color)


def render_usage(node: CommandNode) -> str:
    """The short usage block: use line, available commands, and local flags.

    Returned without a trailing newline.
    """
    parts = [f"Usage: {node.use_line()}"]
    visible = [c for c in node.commands() if not c.hidden]
    if visible:
        parts.append("\n\nAvailable commands:\n")
        parts.extend(f"  {c.name}\n" for c in visible)
    local_flags = [_flag_line(f) for f in node.local_flags()]
    adjust_padding(*local_flags)
    if local_flags:
        parts.append("\n\nFlags:\n")
        parts.extend(f"  {line}\n" for line in local_flags)
    return "".join(parts).rstrip("\n")


def print_usage(node: CommandNode, out: Optional[TextIO] = None) -> None:
    """Print the usage block of *node* to *out* (stdout by default)."""
    click.echo(render_usage(node), file=out, color=get_output().echo_color)
