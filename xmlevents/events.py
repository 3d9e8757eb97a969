"""Events emitted while reading an XML document."""

from __future__ import annotations

from dataclasses import dataclass, field

from xmlevents.attribute import Attribute
from xmlevents.common import XmlVersion
from xmlevents.name import Name
from xmlevents.namespace import Namespace

__all__ = [
    "XmlEvent",
    "StartDocument",
    "EndDocument",
    "ProcessingInstruction",
    "StartElement",
    "EndElement",
    "CData",
    "Comment",
    "Characters",
    "Whitespace",
]


class XmlEvent:
    """Base class of all reader events."""

    def _details(self) -> str | None:
        return None

    def __str__(self) -> str:
        details = self._details()
        name = type(self).__name__
        return name if details is None else f"{name}({details})"


@dataclass(frozen=True)
class StartDocument(XmlEvent):
    """The document declaration; emitted first even when the declaration is absent."""

    version: XmlVersion = XmlVersion.VERSION_10
    encoding: str = "UTF-8"
    standalone: bool | None = None

    def _details(self) -> str:
        return f"{self.version}, {self.encoding}, {self.standalone}"

    def __str__(self) -> str:
        return XmlEvent.__str__(self)


@dataclass(frozen=True)
class EndDocument(XmlEvent):
    """The end of the document stream."""

    def __str__(self) -> str:
        return XmlEvent.__str__(self)


@dataclass(frozen=True)
class ProcessingInstruction(XmlEvent):
    """A processing instruction with its target and optional data."""

    name: str
    data: str | None = None

    def _details(self) -> str:
        return self.name if self.data is None else f"{self.name}, {self.data}"

    def __str__(self) -> str:
        return XmlEvent.__str__(self)


@dataclass(frozen=True)
class StartElement(XmlEvent):
    """An opening or empty-element tag."""

    name: Name
    attributes: list[Attribute] = field(default_factory=list)
    namespace: Namespace = field(default_factory=Namespace)

    def _details(self) -> str:
        mapping = dict(self.namespace)
        details = f"{self.name}, {mapping!r}"
        if self.attributes:
            rendered = ", ".join(f"{a.name} -> {a.value}" for a in self.attributes)
            details += f", [{rendered}]"
        return details

    def __str__(self) -> str:
        return XmlEvent.__str__(self)


@dataclass(frozen=True)
class EndElement(XmlEvent):
    """A closing tag, or the end of an empty-element tag."""

    name: Name

    def _details(self) -> str:
        return str(self.name)

    def __str__(self) -> str:
        return XmlEvent.__str__(self)


@dataclass(frozen=True)
class _TextEvent(XmlEvent):
    data: str

    def _details(self) -> str:
        return self.data

    def __str__(self) -> str:
        return XmlEvent.__str__(self)


@dataclass(frozen=True)
class CData(_TextEvent):
    """Unparsed CDATA content."""


@dataclass(frozen=True)
class Comment(_TextEvent):
    """A comment."""


@dataclass(frozen=True)
class Characters(_TextEvent):
    """Unescaped character data."""


@dataclass(frozen=True)
class Whitespace(_TextEvent):
    """A run of whitespace outside of tags."""