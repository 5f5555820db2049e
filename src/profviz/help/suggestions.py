"""Subcommand suggestions for mistyped command names.

When an argument does not name a subcommand, :func:`suggestions_for` looks
for children that are close to it and :func:`render_subcommand_suggestions`
turns them into a "Did you mean this?" listing followed by the command's
usage block.

Matching rules, applied to every available child in name order:

* the case-insensitive Levenshtein distance between the typed token and
  the child's name or one of its aliases is within the threshold;
* the child's name starts with the typed token (case-insensitively);
* the typed token equals one of the child's ``suggest_for`` entries.

Each child is suggested at most once, by its name. Equally distant
candidates keep alphabetical order.
"""

from __future__ import annotations

from typing import Optional, TextIO

import click

from profviz.help.renderer import render_usage
from profviz.help.text import quote
from profviz.models import CommandNode
from profviz.output import get_output

DEFAULT_SUGGESTIONS_MINIMUM_DISTANCE = 2


def suggestion_threshold(node: CommandNode) -> int:
    """The maximum edit distance for *node*'s suggestions (2 when unset or <= 0)."""
    if node.suggestions_minimum_distance <= 0:
        return DEFAULT_SUGGESTIONS_MINIMUM_DISTANCE
    return node.suggestions_minimum_distance


def levenshtein(s: str, t: str, ignore_case: bool = False) -> int:
    """Edit distance between *s* and *t* (insertions, deletions, substitutions)."""
    if ignore_case:
        s = s.lower()
        t = t.lower()
    if len(s) < len(t):
        s, t = t, s
    previous = list(range(len(t) + 1))
    for i, sc in enumerate(s, start=1):
        current = [i]
        for j, tc in enumerate(t, start=1):
            cost = 0 if sc == tc else 1
            current.append(
                min(
                    previous[j] + 1,  # deletion
                    current[j - 1] + 1,  # insertion
                    previous[j - 1] + cost,  # substitution
                )
            )
        previous = current
    return previous[-1]


def suggestions_for(node: CommandNode, typed: str) -> list[str]:
    """Names of *node*'s children that *typed* was probably meant to be."""
    threshold = suggestion_threshold(node)
    typed_lower = typed.lower()
    suggestions: list[str] = []
    for child in node.commands():
        if not child.is_available():
            continue
        names = [child.name, *child.aliases]
        by_distance = any(
            levenshtein(typed, name, ignore_case=True) <= threshold for name in names
        )
        by_prefix = child.name.lower().startswith(typed_lower)
        explicit = any(typed_lower == s.lower() for s in child.suggest_for)
        if by_distance or by_prefix or explicit:
            suggestions.append(child.name)
    return suggestions


def render_subcommand_suggestions(node: CommandNode, arg: str) -> str:
    """The full unknown-command message for *arg* under *node*.

    Returned without a trailing newline.
    """
    parts = [f"unknown command {quote(arg)} for {quote(node.command_path())}\n"]
    candidates = suggestions_for(node, arg)
    if candidates:
        parts.append("\nDid you mean this?\n")
        parts.extend(f"\t{c}\n" for c in candidates)
    parts.append("\n")
    parts.append(render_usage(node))
    return "".join(parts)


def print_subcommand_suggestions(
    node: CommandNode, arg: str, out: Optional[TextIO] = None
) -> None:
    """Print the unknown-command message for *arg* to *out* (stdout by default)."""
    click.echo(
        render_subcommand_suggestions(node, arg),
        file=out,
        color=get_output().echo_color,
    )
