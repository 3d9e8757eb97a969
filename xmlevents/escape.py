"""Escaping of XML special characters."""

from __future__ import annotations

__all__ = ["escape_str_attribute", "escape_str_pcdata"]

_ATTRIBUTE_TABLE = str.maketrans(
    {
        "<": "&lt;",
        ">": "&gt;",
        '"': "&quot;",
        "'": "&apos;",
        "&": "&amp;",
        "\n": "&#xA;",
        "\r": "&#xD;",
    }
)

_PCDATA_TABLE = str.maketrans({"<": "&lt;", "&": "&amp;"})


def escape_str_attribute(s: str) -> str:
    """Escape markup characters for use inside an attribute value."""
    return s.translate(_ATTRIBUTE_TABLE)


def escape_str_pcdata(s: str) -> str:
    """Escape markup characters for use inside character data."""
    return s.translate(_PCDATA_TABLE)