"""Canonical Pydantic models shared across profviz modules.

**Command tree models** -- built in code by :mod:`profviz.commands` and
consumed by the help renderer, the suggestion matcher, and the click
materialiser in :mod:`profviz.cli`:
    :class:`FlagDeclaration` and :class:`CommandNode`.

**Configuration models** -- serialised as JSON in the user's config
directory:
    :class:`GlobalConfig`.

The command tree is an ordinary object graph. Nothing in the package keeps a
module-level root; callers construct a tree and pass it to
:func:`profviz.app.execute`.
"""

from __future__ import annotations

from typing import Any, Callable, Iterator, Optional

from pydantic import BaseModel, Field, PrivateAttr


# --- Flags ---


class FlagDeclaration(BaseModel):
    """A ``--name`` flag attached to exactly one :class:`CommandNode`.

    Flags listed in :attr:`CommandNode.flags` are local to their node. Flags
    listed in :attr:`CommandNode.persistent_flags` are local to their node
    and inherited by every descendant. Parsed values are collected per
    invocation by :mod:`profviz.cli`; the declaration itself only carries
    the default.

    Example::

        FlagDeclaration(name="verbose", usage="enable debug output", default=False)
    """

    name: str = Field(description="Long flag name without the leading dashes")
    shorthand: str = Field(default="", description="Single-letter alias, e.g. 'h'")
    usage: str = Field(default="", description="One-line description shown in help")
    default: Any = None

    @property
    def is_bool(self) -> bool:
        """Whether the flag is a boolean switch taking no value."""
        return isinstance(self.default, bool)


# --- Command tree ---


class CommandNode(BaseModel):
    """A node in the command tree: one CLI command or subcommand.

    ``use`` is the one-line usage template; its first word is the command
    name (``"profviz <command> <subcommand> [flags]"`` names ``profviz``).
    Children are attached with :meth:`add_command` (or the ``children``
    constructor argument), which also sets their parent. A node has exactly
    one parent; the root has none.

    ``run`` is called as ``run(node, args)`` with the positional arguments
    left after flag parsing. Nodes without ``run`` print their help when
    invoked without a subcommand.
    """

    use: str
    aliases: list[str] = Field(default_factory=list)
    short: str = ""
    long: str = ""
    example: str = ""
    annotations: dict[str, str] = Field(default_factory=dict)
    flags: list[FlagDeclaration] = Field(default_factory=list)
    persistent_flags: list[FlagDeclaration] = Field(default_factory=list)
    children: list[CommandNode] = Field(default_factory=list)
    hidden: bool = False
    suggest_for: list[str] = Field(
        default_factory=list,
        description="Names that should suggest this command even when far away",
    )
    suggestions_minimum_distance: int = Field(
        default=0,
        description="Edit-distance threshold for suggestions; <= 0 means the default",
    )
    version: str = ""
    run: Optional[Callable[..., Any]] = None

    _parent: Optional[CommandNode] = PrivateAttr(default=None)

    def model_post_init(self, __context: Any) -> None:
        for child in self.children:
            child._parent = self

    # -- Tree navigation --

    @property
    def name(self) -> str:
        """The command name: the first word of :attr:`use`."""
        return self.use.split(" ", 1)[0]

    @property
    def parent(self) -> Optional[CommandNode]:
        return self._parent

    @property
    def runnable(self) -> bool:
        return self.run is not None

    def add_command(self, *nodes: CommandNode) -> None:
        """Attach *nodes* as children of this node.

        Raises:
            ValueError: If a node is added to itself.
        """
        for node in nodes:
            if node is self:
                raise ValueError("command can't be a child of itself")
            node._parent = self
            self.children.append(node)

    def root(self) -> CommandNode:
        node = self
        while node._parent is not None:
            node = node._parent
        return node

    def ancestors(self) -> Iterator[CommandNode]:
        """Yield the parent, grandparent, ... up to and including the root."""
        node = self._parent
        while node is not None:
            yield node
            node = node._parent

    def commands(self) -> list[CommandNode]:
        """Child commands sorted by name."""
        return sorted(self.children, key=lambda c: c.name)

    def has_alias(self, name: str) -> bool:
        return name in self.aliases

    def find_child(self, name: str) -> Optional[CommandNode]:
        """Return the child called *name* (or aliased as *name*), if any."""
        for child in self.children:
            if child.name == name:
                return child
        for child in self.children:
            if child.has_alias(name):
                return child
        return None

    def find(self, args: list[str]) -> tuple[CommandNode, list[str]]:
        """Walk down the tree following *args*.

        Returns:
            The deepest node reached and the arguments that were not
            consumed as command names.
        """
        node = self
        remaining = list(args)
        while remaining:
            child = node.find_child(remaining[0])
            if child is None:
                break
            node = child
            remaining.pop(0)
        return node, remaining

    def is_available(self) -> bool:
        """Whether the command is offered to users (help listings, suggestions).

        Hidden commands and the ``help`` command are not; otherwise a
        command is available when it runs something or has available
        children of its own.
        """
        if self.hidden:
            return False
        if self._parent is not None and self.name == "help":
            return False
        return self.runnable or any(c.is_available() for c in self.children)

    # -- Paths and usage --

    def command_path(self) -> str:
        """Full path from the root, e.g. ``"profviz version"``."""
        if self._parent is not None:
            return f"{self._parent.command_path()} {self.name}"
        return self.name

    def use_line(self) -> str:
        """The usage line: the parent's command path plus :attr:`use`.

        ``" [flags]"`` is appended when the command takes flags and the
        template does not already mention them.
        """
        if self._parent is not None:
            line = f"{self._parent.command_path()} {self.use}"
        else:
            line = self.use
        if (self.local_flags() or self.inherited_flags()) and "[flags]" not in line:
            line += " [flags]"
        return line

    # -- Flags --

    def help_flag(self) -> FlagDeclaration:
        """The implicit ``-h/--help`` flag every command carries."""
        return FlagDeclaration(
            name="help", shorthand="h", usage=f"help for {self.name}", default=False
        )

    def version_flag(self) -> Optional[FlagDeclaration]:
        """The implicit ``--version`` flag of a root that declares a version.

        The ``-v`` shorthand is used only when no other flag claims it.
        """
        if self._parent is not None or not self.version:
            return None
        taken = {f.shorthand for f in self.flags + self.persistent_flags}
        return FlagDeclaration(
            name="version",
            shorthand="" if "v" in taken else "v",
            usage=f"version for {self.name}",
            default=False,
        )

    def local_flags(self) -> list[FlagDeclaration]:
        """Flags declared on this node (local and persistent), sorted by name.

        Includes the implicit help flag and, on a versioned root, the
        implicit version flag.
        """
        declared = {f.name: f for f in self.flags + self.persistent_flags}
        declared.setdefault("help", self.help_flag())
        version = self.version_flag()
        if version is not None:
            declared.setdefault("version", version)
        return sorted(declared.values(), key=lambda f: f.name)

    def inherited_flags(self) -> list[FlagDeclaration]:
        """Persistent flags of all ancestors, sorted by name.

        The nearest declaration of a name wins, and names declared locally
        on this node shadow inherited ones.
        """
        seen = {f.name for f in self.local_flags()}
        inherited: list[FlagDeclaration] = []
        for ancestor in self.ancestors():
            for flag in ancestor.persistent_flags:
                if flag.name not in seen:
                    seen.add(flag.name)
                    inherited.append(flag)
        return sorted(inherited, key=lambda f: f.name)


CommandNode.model_rebuild()


# --- Configuration ---


class GlobalConfig(BaseModel):
    """User-wide configuration persisted at ``~/.config/profviz/config.json``.

    Loaded by :func:`~profviz.config.load_global_config`. Fields here have
    the lowest precedence and can be overridden by environment variables or
    CLI flags. See :func:`~profviz.config.resolve_config`.
    """

    no_color: bool = False
    verbose: bool = False
    suggestions_minimum_distance: int = Field(
        default=0,
        description="Edit-distance threshold for subcommand suggestions (0 = default of 2)",
    )
