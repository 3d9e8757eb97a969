"""Qualified XML names."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["Name"]

_NO_PREFIX = ""


@dataclass(frozen=True)
class Name:
    """A qualified XML name: a local name with an optional namespace URI and prefix."""

    local_name: str
    namespace: str | None = None
    prefix: str | None = None

    @classmethod
    def local(cls, local_name: str) -> Name:
        """Create a plain local name."""
        return cls(local_name)

    @classmethod
    def prefixed(cls, local_name: str, prefix: str) -> Name:
        """Create a name with a prefix but no namespace URI."""
        return cls(local_name, prefix=prefix)

    @classmethod
    def qualified(cls, local_name: str, namespace: str, prefix: str | None) -> Name:
        """Create a name with a namespace URI and an optional prefix."""
        return cls(local_name, namespace=namespace, prefix=prefix)

    @classmethod
    def from_str(cls, s: str) -> Name:
        """Split ``s`` at the first colon into prefix and local name, without validation."""
        prefix, sep, rest = s.partition(":")
        if not sep:
            return cls.local(s)
        return cls.prefixed(rest, prefix)

    @classmethod
    def from_pair(cls, pair: tuple[str, str]) -> Name:
        """Create a name from a ``(prefix, local_name)`` pair."""
        prefix, local_name = pair
        return cls.prefixed(local_name, prefix)

    @classmethod
    def parse(cls, s: str) -> Name:
        """Parse ``name`` or ``prefix:name``; raise ValueError on empty parts or extra colons."""
        parts = s.split(":")
        if len(parts) == 1 and parts[0]:
            return cls.local(parts[0])
        if len(parts) == 2 and all(parts):
            return cls.prefixed(parts[1], parts[0])
        raise ValueError(f"invalid qualified name: {s!r}")

    def to_repr(self) -> str:
        """Return the name as written in a document, without the namespace URI."""
        if self.prefix is None:
            return self.local_name
        return f"{self.prefix}:{self.local_name}"

    def prefix_repr(self) -> str:
        """Return the prefix, or the empty string if there is none."""
        return _NO_PREFIX if self.prefix is None else self.prefix

    def __str__(self) -> str:
        namespace = "" if self.namespace is None else f"{{{self.namespace}}}"
        return namespace + self.to_repr()