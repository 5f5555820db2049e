"""Console-script entry point and command execution for profviz.

:func:`execute` runs a constructed command tree against an argument list
and returns a process exit code. :func:`main` is the ``profviz`` / ``pvz``
console script declared in ``pyproject.toml``: it installs signal handlers,
resolves configuration, builds the tree, and exits with the status
:func:`execute` returns.

See Also:
    :mod:`profviz.commands`: The tree built by :func:`main`.
    :mod:`profviz.cli`: How the tree is turned into click commands.
"""

from __future__ import annotations

import signal
import sys
import traceback
from typing import Any, Optional

import click
import typer

from profviz.exit_codes import EXIT_GENERIC_FAILURE, EXIT_INTERRUPTED, EXIT_SUCCESS
from profviz.models import CommandNode, GlobalConfig


def execute(
    root: CommandNode,
    argv: Optional[list[str]] = None,
    config: Optional[GlobalConfig] = None,
) -> int:
    """Run *root* against *argv* and return the exit code.

    Args:
        root: The command tree to execute.
        argv: Arguments after the program name; ``sys.argv[1:]`` by default.
        config: Resolved configuration; defaults when omitted.

    Returns:
        ``0`` on success. ``1`` when resolution or execution fails; the
        error message is printed to stdout unless the unknown-command
        listing already reported it.
    """
    from profviz.cli import Invocation, build_click_command, configure_output
    from profviz.exceptions import ProfvizError
    from profviz.output import debug

    args = list(sys.argv[1:] if argv is None else argv)
    invocation = Invocation(args=args, config=config or GlobalConfig())
    configure_output(invocation)
    command = build_click_command(root)
    debug(f"Executing {root.name} with {args!r}")

    try:
        rv = command.main(
            args=args,
            prog_name=root.name,
            standalone_mode=False,
            obj=invocation,
        )
    except ProfvizError as exc:
        if not exc.reported:
            typer.echo(str(exc))
        return exc.exit_code
    except click.exceptions.Abort:
        return EXIT_INTERRUPTED
    except click.ClickException as exc:
        typer.echo(exc.format_message())
        return EXIT_GENERIC_FAILURE

    # click returns the exit code of ctx.exit() (help, --version).
    if isinstance(rv, int):
        return rv
    return EXIT_SUCCESS


def _setup_signal_handlers() -> None:
    """Install a SIGINT handler so Ctrl-C exits cleanly."""

    def _handler(signum: int, frame: Any) -> None:  # noqa: ANN401
        sys.stderr.write("\nCancelled.\n")
        sys.exit(EXIT_INTERRUPTED)

    signal.signal(signal.SIGINT, _handler)


def main() -> None:
    """CLI entry point invoked by the ``profviz`` and ``pvz`` console scripts.

    Any error escaping :func:`execute` (a broken config file, a failing
    command) has its message printed to stdout and exits with status 1.

    Raises:
        SystemExit: Always raised.
    """
    _setup_signal_handlers()
    try:
        from profviz.commands import build_root_command
        from profviz.config import resolve_config

        config = resolve_config()
        root = build_root_command(config)
        code = execute(root, config=config)
    except SystemExit:
        raise
    except KeyboardInterrupt:
        sys.stderr.write("\nCancelled.\n")
        sys.exit(EXIT_INTERRUPTED)
    except Exception as exc:
        from profviz.exceptions import ProfvizError
        from profviz.output import debug

        debug(traceback.format_exc())
        typer.echo(str(exc))
        if isinstance(exc, ProfvizError):
            sys.exit(exc.exit_code)
        sys.exit(EXIT_GENERIC_FAILURE)
    sys.exit(code)
