"""Errors raised while reading XML."""

from __future__ import annotations

import enum

from xmlevents.common import TextPosition

__all__ = ["ErrorKind", "XmlError"]


class ErrorKind(enum.Enum):
    """The category of a reading error."""

    SYNTAX = "syntax"
    IO = "io"
    UTF8 = "utf8"
    UNEXPECTED_EOF = "unexpected_eof"


class XmlError(Exception):
    """An XML reading error with a document position and a message."""

    def __init__(
        self,
        position: TextPosition,
        kind: ErrorKind,
        message: str,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.position = TextPosition(position.row, position.column)
        self.kind = kind
        self.message = message
        self.cause = cause

    @classmethod
    def syntax(cls, position: object, message: str) -> XmlError:
        """Create a syntax error at ``position`` (a TextPosition or an object with one)."""
        pos = position if isinstance(position, TextPosition) else getattr(position, "position")
        return cls(pos, ErrorKind.SYNTAX, message)

    @classmethod
    def unexpected_eof(cls) -> XmlError:
        """Create an error for a premature end of input."""
        return cls(TextPosition(), ErrorKind.UNEXPECTED_EOF, "Unexpected EOF")

    @classmethod
    def from_os_error(cls, error: OSError) -> XmlError:
        """Wrap an I/O error."""
        message = error.strerror or str(error)
        return cls(TextPosition(), ErrorKind.IO, message, error)

    @classmethod
    def from_unicode_error(cls, error: UnicodeError) -> XmlError:
        """Wrap a decoding error."""
        return cls(TextPosition(), ErrorKind.UTF8, str(error), error)

    def _key(self) -> tuple[int, int, ErrorKind, str]:
        return (self.position.row, self.position.column, self.kind, self.message)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, XmlError):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __str__(self) -> str:
        return f"{self.position} {self.message}"