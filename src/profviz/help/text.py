"""Column alignment and text helpers used by the help renderer.

All widths are counted in code points, so names containing non-ASCII
characters still line up in a single description column.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class DisplayLine:
    """A ``<name> <desc>`` line where ``pad`` is the width the name is padded to."""

    name: str
    desc: str
    pad: int = 0

    def __str__(self) -> str:
        return rpad(self.name, self.pad) + self.desc


def join_lines(lines: list[DisplayLine]) -> str:
    """Render *lines* one per row, without a trailing newline."""
    return "\n".join(str(line) for line in lines)


def adjust_padding(*lines: DisplayLine) -> None:
    """Set every line's ``pad`` to the widest name in the group."""
    width = max((len(line.name) for line in lines), default=0)
    for line in lines:
        line.pad = width


def rpad(s: str, padding: int) -> str:
    """Left-justify *s* to *padding* code points and add one separating space."""
    return f"{s:<{padding}} "


def capitalize(s: str) -> str:
    """Uppercase the first code point of *s*, leaving the rest untouched.

    A first character whose uppercase form is not a single code point
    (``"ß"`` -> ``"SS"``) is kept as is.
    """
    if not s:
        return ""
    first = s[0].upper()
    if len(first) != 1:
        first = s[0]
    return first + s[1:]


def indent(text: str, spaces: int) -> str:
    """Indent *text* by *spaces* at the start and after every newline.

    No indentation is added after a trailing newline.
    """
    if not text:
        return ""
    indentation = " " * spaces
    parts = []
    last = "\n"
    for ch in text:
        if last == "\n":
            parts.append(indentation)
        parts.append(ch)
        last = ch
    return "".join(parts)


def quote(value: str) -> str:
    """Double-quote *value*, escaping backslashes and embedded quotes."""
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'
