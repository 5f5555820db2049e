"""Help rendering and subcommand suggestions.

Sub-modules:

* :mod:`~profviz.help.text` -- Code-point-aware padding, capitalization,
  and indentation helpers.
* :mod:`~profviz.help.renderer` -- Titled help blocks and the short usage
  block.
* :mod:`~profviz.help.suggestions` -- Edit-distance suggestions for
  mistyped subcommands.
"""

from profviz.help.renderer import print_help, print_usage, render_help, render_usage
from profviz.help.suggestions import (
    print_subcommand_suggestions,
    render_subcommand_suggestions,
    suggestions_for,
)

__all__ = [
    "print_help",
    "print_usage",
    "render_help",
    "render_usage",
    "print_subcommand_suggestions",
    "render_subcommand_suggestions",
    "suggestions_for",
]
