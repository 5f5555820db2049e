"""Diagnostics on stderr, and colour control for everything profviz prints.

Everything a user asks for (help, usage, suggestions, version strings,
command errors) is written to stdout with :func:`click.echo` by the help
renderer and the entry point. This module covers the rest:

* :class:`OutputManager` owns a Rich console bound to stderr and decides
  whether colour is allowed. ``NO_COLOR`` (any value), ``TERM=dumb``, the
  ``--no-color`` flag and the ``no_color`` config key all turn it off.
* A process-wide manager is installed by :mod:`profviz.cli` once flags are
  parsed and read back with :func:`get_output`. :func:`warning` and
  :func:`debug` forward to it.
"""

from __future__ import annotations

import os
import sys
from typing import Optional

from rich.console import Console
from rich.text import Text


def _color_disabled_by_env() -> bool:
    """True when ``NO_COLOR`` is set, whatever its value, or ``TERM`` is ``dumb``."""
    return "NO_COLOR" in os.environ or os.environ.get("TERM") == "dumb"


class OutputManager:
    """Holds the stderr console and the colour and verbosity switches.

    Args:
        no_color: Disable colour in diagnostics and in rendered help titles.
            Forced on by the environment, see :func:`_color_disabled_by_env`.
        verbose: Show ``[debug]`` traces.
    """

    def __init__(self, no_color: bool = False, verbose: bool = False) -> None:
        self._no_color = no_color or _color_disabled_by_env()
        self._verbose = verbose
        self._console = Console(file=sys.stderr, no_color=self._no_color, highlight=False)

    @property
    def no_color(self) -> bool:
        return self._no_color

    @property
    def is_verbose(self) -> bool:
        return self._verbose

    @property
    def echo_color(self) -> Optional[bool]:
        """The ``color`` argument to pass to :func:`click.echo`.

        ``False`` strips styling unconditionally; ``None`` lets click strip
        it only when the target stream is not a terminal.
        """
        return False if self._no_color else None

    def _emit(self, prefix: str, style: str, message: str) -> None:
        if self._no_color:
            sys.stderr.write(f"{prefix}{message}\n")
            sys.stderr.flush()
            return
        line = Text(prefix, style=style)
        line.append(message)
        self._console.print(line, soft_wrap=True)

    def warning(self, message: str) -> None:
        """Print ``Warning: <message>`` to stderr."""
        self._emit("Warning: ", "yellow", message)

    def debug(self, message: str) -> None:
        """Print ``[debug] <message>`` to stderr in verbose mode."""
        if self._verbose:
            self._emit("[debug] ", "dim", message)


_output: Optional[OutputManager] = None


def get_output() -> OutputManager:
    """Return the installed :class:`OutputManager`, creating a default one lazily."""
    global _output
    if _output is None:
        _output = OutputManager()
    return _output


def set_output(output: OutputManager) -> None:
    global _output
    _output = output


def reset_output() -> None:
    """Drop the installed manager; the next :func:`get_output` builds a fresh one."""
    global _output
    _output = None


def warning(message: str) -> None:
    get_output().warning(message)


def debug(message: str) -> None:
    get_output().debug(message)
