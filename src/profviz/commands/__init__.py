"""Built-in command nodes.

* :mod:`~profviz.commands.root` -- The ``profviz`` root command and the
  tree factory :func:`build_root_command`.
* :mod:`~profviz.commands.version` -- Hidden ``version`` command.
* :mod:`~profviz.commands.help` -- ``help [command]``.
"""

from profviz.commands.root import build_root_command

__all__ = ["build_root_command"]
