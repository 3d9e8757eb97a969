"""Text positions, XML versions and character class predicates."""

from __future__ import annotations

import enum
from dataclasses import dataclass

__all__ = [
    "TextPosition",
    "XmlVersion",
    "is_whitespace_char",
    "is_whitespace_str",
    "is_name_start_char",
    "is_name_char",
]


@dataclass
class TextPosition:
    """A zero-based position inside a textual document."""

    row: int = 0
    column: int = 0

    def advance(self, count: int) -> None:
        """Move forward within the current line."""
        self.column += count

    def advance_to_tab(self, width: int) -> None:
        """Move forward to the next tab stop of the given width."""
        self.column += width - self.column % width

    def new_line(self) -> None:
        """Move to the beginning of the next line."""
        self.column = 0
        self.row += 1

    def __str__(self) -> str:
        return f"{self.row + 1}:{self.column + 1}"


class XmlVersion(enum.Enum):
    """XML language version."""

    VERSION_10 = "1.0"
    VERSION_11 = "1.1"

    def __str__(self) -> str:
        return self.value


_WHITESPACE = frozenset("\x20\x09\x0d\x0a")

_NAME_START_RANGES = (
    (ord(":"), ord(":")),
    (ord("A"), ord("Z")),
    (ord("_"), ord("_")),
    (ord("a"), ord("z")),
    (0xC0, 0xD6),
    (0xD8, 0xF6),
    (0xF8, 0x2FF),
    (0x370, 0x37D),
    (0x37F, 0x1FFF),
    (0x200C, 0x200D),
    (0x2070, 0x218F),
    (0x2C00, 0x2FEF),
    (0x3001, 0xD7FF),
    (0xF900, 0xFDCF),
    (0xFDF0, 0xFFFD),
    (0x10000, 0xEFFFF),
)

_NAME_EXTRA_RANGES = (
    (ord("-"), ord("-")),
    (ord("."), ord(".")),
    (ord("0"), ord("9")),
    (0xB7, 0xB7),
    (0x300, 0x36F),
    (0x203F, 0x2040),
)


def _in_ranges(c: str, ranges: tuple[tuple[int, int], ...]) -> bool:
    code = ord(c)
    return any(lo <= code <= hi for lo, hi in ranges)


def is_whitespace_char(c: str) -> bool:
    """Return True if ``c`` is an XML white space character (``S``)."""
    return c in _WHITESPACE


def is_whitespace_str(s: str) -> bool:
    """Return True if every character of ``s`` is XML white space."""
    return all(is_whitespace_char(c) for c in s)


def is_name_start_char(c: str) -> bool:
    """Return True if ``c`` may start an XML name (``NameStartChar``)."""
    return _in_ranges(c, _NAME_START_RANGES)


def is_name_char(c: str) -> bool:
    """Return True if ``c`` may appear in an XML name (``NameChar``)."""
    return is_name_start_char(c) or _in_ranges(c, _NAME_EXTRA_RANGES)