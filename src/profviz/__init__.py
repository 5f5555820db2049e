"""profviz -- command-line shell for the profviz toolkit.

The package currently provides the outer command tree only: a root
``profviz`` command (alias ``pvz``), custom help and usage rendering,
"did you mean" suggestions for mistyped subcommands, a ``help`` command,
and a hidden ``version`` command.

Typical usage::

    profviz --help
    profviz help version

Modules:
    app: Console-script entry point and :func:`~profviz.app.execute`.
    cli: Materialise a command tree into click commands.
    models: Pydantic models for command nodes, flags, and configuration.
    config: XDG-aware configuration loading.
    exceptions: Exception hierarchy with exit-code mapping.
    exit_codes: Numeric process exit codes.
    output: stderr diagnostics with Rich support.
    help: Help rendering and subcommand suggestions.
    commands: The built-in command nodes.
"""

__version__ = "0.0.0"
