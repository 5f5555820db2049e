"""Numeric process exit codes.

Each constant maps to an error category and is referenced by the
corresponding :class:`~profviz.exceptions.ProfvizError` subclass.
"""

EXIT_SUCCESS = 0
"""The command completed successfully."""

EXIT_GENERIC_FAILURE = 1
"""The command failed (unknown subcommand, bad usage, or any other error)."""

EXIT_INTERRUPTED = 130
"""The process was interrupted with Ctrl-C."""
