"""The ``profviz`` root command.

:func:`build_root_command` constructs a fresh command tree on every call;
nothing here is module-level state. The tree is executed with
:func:`profviz.app.execute`.
"""

from __future__ import annotations

import textwrap
from typing import Optional

from profviz import __version__
from profviz.commands.help import new_help_command
from profviz.commands.version import new_version_command
from profviz.help.renderer import FEEDBACK_ANNOTATION
from profviz.models import CommandNode, FlagDeclaration, GlobalConfig

ISSUES_URL = "https://github.com/WaltCuller/profviz/issues/new/choose"


def build_root_command(config: Optional[GlobalConfig] = None) -> CommandNode:
    """Build the full command tree.

    Args:
        config: Resolved configuration. Its ``suggestions_minimum_distance``
            is applied to every node of the tree.

    Returns:
        The root :class:`~profviz.models.CommandNode` with the ``help`` and
        hidden ``version`` subcommands attached.
    """
    config = config or GlobalConfig()
    root = CommandNode(
        use="profviz <command> <subcommand> [flags]",
        aliases=["pvz"],
        example=textwrap.dedent(
            """\
            $ profviz --version
            $ profviz help version"""
        ),
        annotations={FEEDBACK_ANNOTATION: f"Open an issue at {ISSUES_URL}"},
        version=__version__,
        persistent_flags=[
            FlagDeclaration(name="no-color", usage="disable color output", default=False),
            FlagDeclaration(name="verbose", usage="enable debug output", default=False),
        ],
    )
    root.add_command(new_version_command(), new_help_command(root.name))
    _set_suggestions_distance(root, config.suggestions_minimum_distance)
    return root


def _set_suggestions_distance(node: CommandNode, distance: int) -> None:
    node.suggestions_minimum_distance = distance
    for child in node.children:
        _set_suggestions_distance(child, distance)
