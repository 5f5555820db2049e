"""Exception hierarchy for profviz.

All exceptions inherit from :class:`ProfvizError`, which carries an
``exit_code`` attribute mapped to a constant from :mod:`profviz.exit_codes`.
:func:`profviz.app.execute` catches ``ProfvizError``, prints its message
to stdout and returns the exit code.

Subclass hierarchy::

    ProfvizError (exit 1)
    +-- UnknownCommandError (exit 1)
    +-- ConfigError         (exit 1)
"""

from profviz.exit_codes import EXIT_GENERIC_FAILURE
from profviz.help.text import quote


class ProfvizError(Exception):
    """Base exception for all profviz errors.

    Args:
        message: Human-readable error description.
        exit_code: Optional override for the class-level exit code.
    """

    exit_code: int = EXIT_GENERIC_FAILURE

    #: Set when the error's output has already been written, so the entry
    #: point must not print the message a second time.
    reported: bool = False

    def __init__(self, message: str, exit_code: int | None = None):
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code


class UnknownCommandError(ProfvizError):
    """Raised when an argument does not name a subcommand of the resolved node.

    The suggestion listing and usage block are printed before this is
    raised, so ``reported`` is ``True``.
    """

    reported = True

    def __init__(self, arg: str, command_path: str):
        super().__init__(f"unknown command {quote(arg)} for {quote(command_path)}")
        self.arg = arg
        self.command_path = command_path


class ConfigError(ProfvizError):
    """Raised for configuration problems (invalid JSON, bad field values)."""
