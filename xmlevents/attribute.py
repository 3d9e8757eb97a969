"""XML attributes."""

from __future__ import annotations

from dataclasses import dataclass

from xmlevents.escape import escape_str_attribute
from xmlevents.name import Name

__all__ = ["Attribute"]


@dataclass(frozen=True)
class Attribute:
    """An XML attribute: a qualified name and a string value."""

    name: Name
    value: str

    def __str__(self) -> str:
        return f'{self.name}="{escape_str_attribute(self.value)}"'