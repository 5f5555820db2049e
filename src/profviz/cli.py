"""Materialise a :class:`~profviz.models.CommandNode` tree into click commands.

Every node becomes a click command class that keeps a reference to its node:

* nodes with children become a :class:`NodeGroup`, which resolves
  subcommands by name or alias and reports unknown names through the
  suggestion matcher;
* leaf nodes become a :class:`NodeCommand` that accepts arbitrary
  positional arguments and hands them to the node's ``run`` callable.

Both render ``-h/--help`` through :mod:`profviz.help` instead of click's
own formatter. Each command gets options for its local and inherited flags,
so persistent flags can be given before or after a subcommand name. Parsed
flag values are recorded on the :class:`Invocation` carried in ``ctx.obj``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

import click
from click.core import ParameterSource

from profviz.exceptions import UnknownCommandError
from profviz.help.renderer import HELP_FLAGS, print_help, render_help_for_args, render_usage
from profviz.help.suggestions import print_subcommand_suggestions
from profviz.models import CommandNode, FlagDeclaration, GlobalConfig
from profviz.output import OutputManager, debug, get_output, set_output

CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


@dataclass
class Invocation:
    """Per-run state shared by every context through ``ctx.obj``.

    Attributes:
        args: The command-line arguments after the program name.
        config: Resolved configuration (lowest precedence for flags).
        flags: Parsed flag values keyed by flag name.
    """

    args: list[str]
    config: GlobalConfig = field(default_factory=GlobalConfig)
    flags: dict[str, Any] = field(default_factory=dict)


def configure_output(invocation: Invocation) -> None:
    """Install an :class:`OutputManager` reflecting the parsed flags and config."""
    flags = invocation.flags
    config = invocation.config
    set_output(
        OutputManager(
            no_color=bool(flags.get("no-color")) or config.no_color,
            verbose=bool(flags.get("verbose")) or config.verbose,
        )
    )


class _NodeHelpMixin:
    """Help and usage for a click command backed by a :class:`CommandNode`."""

    node: CommandNode

    def get_help(self, ctx: click.Context) -> str:
        invocation = ctx.find_object(Invocation)
        args = invocation.args if invocation is not None else []
        text = render_help_for_args(self.node, args)
        if get_output().no_color:
            text = click.unstyle(text)
        return text

    def get_usage(self, ctx: click.Context) -> str:
        return render_usage(self.node)


class NodeCommand(_NodeHelpMixin, click.Command):
    """A leaf command."""

    def __init__(self, node: CommandNode, **attrs: Any) -> None:
        self.node = node
        super().__init__(**attrs)


class NodeGroup(_NodeHelpMixin, click.Group):
    """A command with subcommands."""

    def __init__(self, node: CommandNode, **attrs: Any) -> None:
        self.node = node
        super().__init__(**attrs)

    def get_command(self, ctx: click.Context, cmd_name: str) -> Optional[click.Command]:
        cmd = self.commands.get(cmd_name)
        if cmd is None:
            child = self.node.find_child(cmd_name)
            if child is not None:
                cmd = self.commands.get(child.name)
        return cmd

    def resolve_command(
        self, ctx: click.Context, args: list[str]
    ) -> tuple[Optional[str], Optional[click.Command], list[str]]:
        cmd_name = args[0]
        cmd = self.get_command(ctx, cmd_name)
        if cmd is None and not ctx.resilient_parsing and not cmd_name.startswith("-"):
            if self.node.parent is not None and any(a in HELP_FLAGS for a in args[1:]):
                # `tool group bogus --help` renders through the help path and succeeds.
                invocation = ctx.find_object(Invocation)
                print_help(self.node, invocation.args if invocation is not None else ())
                ctx.exit()
            debug(f"No subcommand {cmd_name!r} under {self.node.command_path()!r}")
            print_subcommand_suggestions(self.node, cmd_name)
            raise UnknownCommandError(cmd_name, self.node.command_path())
        # Option-like tokens fall through to click's "no such option" error.
        return click.Group.resolve_command(self, ctx, args)


# ---------------------------------------------------------------------------
# Parameters
# ---------------------------------------------------------------------------


def _flag_recorder(flag_name: str):
    """Build a click callback storing *flag_name*'s value on the :class:`Invocation`.

    Values given on the command line override earlier ones; defaults only
    fill in names not seen yet. Output is reconfigured after every change.
    """

    def record(ctx: click.Context, param: click.Parameter, value: Any) -> Any:
        invocation = ctx.find_object(Invocation)
        if invocation is None or ctx.resilient_parsing:
            return value
        source = ctx.get_parameter_source(param.name)
        if source is not ParameterSource.DEFAULT or flag_name not in invocation.flags:
            invocation.flags[flag_name] = value
            configure_output(invocation)
        return value

    return record


def _print_version(ctx: click.Context, param: click.Parameter, value: bool) -> None:
    if not value or ctx.resilient_parsing:
        return
    node = ctx.command.node  # type: ignore[attr-defined]
    click.echo(f"{node.name} version {node.version}")
    ctx.exit()


def _flag_option(flag: FlagDeclaration) -> click.Option:
    decls = [f"--{flag.name}"]
    if flag.shorthand:
        decls.append(f"-{flag.shorthand}")
    if flag.name == "version":
        return click.Option(
            decls,
            is_flag=True,
            expose_value=False,
            is_eager=True,
            callback=_print_version,
            help=flag.usage,
        )
    return click.Option(
        decls,
        is_flag=flag.is_bool,
        default=flag.default,
        expose_value=False,
        is_eager=True,
        callback=_flag_recorder(flag.name),
        help=flag.usage,
    )


def _build_params(node: CommandNode) -> list[click.Parameter]:
    params: list[click.Parameter] = []
    for flag in node.local_flags() + node.inherited_flags():
        # click adds -h/--help itself from CONTEXT_SETTINGS.
        if flag.name == "help":
            continue
        params.append(_flag_option(flag))
    return params


# ---------------------------------------------------------------------------
# Tree construction
# ---------------------------------------------------------------------------


def _make_callback(node: CommandNode):
    def callback(args: tuple[str, ...] = ()) -> None:
        ctx = click.get_current_context()
        if ctx.invoked_subcommand is not None:
            return
        if node.runnable:
            debug(f"Running {node.command_path()!r} with {list(args)!r}")
            node.run(node, list(args))
        else:
            print_help(node)

    return callback


def build_click_command(node: CommandNode) -> click.Command:
    """Build the click command (and, recursively, subcommands) for *node*.

    Args:
        node: Root of the (sub)tree to materialise.

    Returns:
        A :class:`NodeGroup` when *node* has children, else a
        :class:`NodeCommand`. Invoke it with
        ``main(args, standalone_mode=False, obj=Invocation(...))``.
    """
    params = _build_params(node)
    attrs: dict[str, Any] = {
        "name": node.name,
        "callback": _make_callback(node),
        "help": node.short,
        "hidden": node.hidden,
        "context_settings": dict(CONTEXT_SETTINGS),
    }
    if node.children:
        group = NodeGroup(
            node,
            params=params,
            invoke_without_command=True,
            no_args_is_help=False,
            **attrs,
        )
        for child in node.commands():
            group.add_command(build_click_command(child))
        return group

    params.append(click.Argument(["args"], nargs=-1))
    return NodeCommand(node, params=params, **attrs)
