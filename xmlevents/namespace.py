"""Namespace mappings and stacks of them."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

__all__ = [
    "NS_XMLNS_PREFIX",
    "NS_XMLNS_URI",
    "NS_XML_PREFIX",
    "NS_XML_URI",
    "NS_NO_PREFIX",
    "NS_EMPTY_URI",
    "Namespace",
    "NamespaceStack",
]

NS_XMLNS_PREFIX = "xmlns"
NS_XMLNS_URI = "http://www.w3.org/2000/xmlns/"
NS_XML_PREFIX = "xml"
NS_XML_URI = "http://www.w3.org/XML/1998/namespace"
NS_NO_PREFIX = ""
NS_EMPTY_URI = ""

_DEFAULT_MAPPINGS = frozenset(
    {
        (NS_NO_PREFIX, NS_EMPTY_URI),
        (NS_XMLNS_PREFIX, NS_XMLNS_URI),
        (NS_XML_PREFIX, NS_XML_URI),
    }
)


class Namespace:
    """A mapping from prefixes to namespace URIs, iterated in prefix order."""

    def __init__(self, mappings: Iterable[tuple[str, str]] | None = None) -> None:
        self._map: dict[str, str] = {}
        if mappings is not None:
            self.extend(mappings)

    def is_empty(self) -> bool:
        """Return True if there are no mappings at all."""
        return not self._map

    def is_essentially_empty(self) -> bool:
        """Return True if only the built-in default mappings are present."""
        if len(self._map) > 3:
            return False
        return all(item in _DEFAULT_MAPPINGS for item in self._map.items())

    def contains(self, prefix: str) -> bool:
        """Return True if ``prefix`` is mapped."""
        return prefix in self._map

    def put(self, prefix: str, uri: str) -> bool:
        """Map ``prefix`` to ``uri`` unless already mapped; return whether it was inserted."""
        if prefix in self._map:
            return False
        self._map[prefix] = uri
        return True

    def force_put(self, prefix: str, uri: str) -> str | None:
        """Map ``prefix`` to ``uri`` unconditionally; return the previous URI, if any."""
        previous = self._map.get(prefix)
        self._map[prefix] = uri
        return previous

    def get(self, prefix: str) -> str | None:
        """Return the URI for ``prefix``, or None."""
        return self._map.get(prefix)

    def extend(self, mappings: Iterable[tuple[str, str]]) -> None:
        """Put every ``(prefix, uri)`` pair, keeping existing mappings."""
        for prefix, uri in mappings:
            self.put(prefix, uri)

    def __contains__(self, prefix: object) -> bool:
        return prefix in self._map

    def __iter__(self) -> Iterator[tuple[str, str]]:
        return iter(sorted(self._map.items()))

    def __len__(self) -> int:
        return len(self._map)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Namespace):
            return NotImplemented
        return self._map == other._map

    def __repr__(self) -> str:
        return f"Namespace({dict(sorted(self._map.items()))!r})"


class NamespaceStack:
    """A stack of namespaces representing the scopes of nested elements."""

    def __init__(self, namespaces: Iterable[Namespace] | None = None) -> None:
        self.namespaces: list[Namespace] = list(namespaces or ())

    @classmethod
    def empty(cls) -> NamespaceStack:
        """Return a stack with no namespaces."""
        return cls()

    @classmethod
    def default(cls) -> NamespaceStack:
        """Return a stack holding one namespace with the built-in mappings."""
        stack = cls()
        stack.push_empty()
        stack.put(NS_XML_PREFIX, NS_XML_URI)
        stack.put(NS_XMLNS_PREFIX, NS_XMLNS_URI)
        stack.put(NS_NO_PREFIX, NS_EMPTY_URI)
        return stack

    def push_empty(self) -> NamespaceStack:
        """Push an empty namespace on top and return the stack."""
        self.namespaces.append(Namespace())
        return self

    def pop(self) -> Namespace:
        """Remove and return the topmost namespace; raise IndexError if empty."""
        if not self.namespaces:
            raise IndexError("pop from an empty namespace stack")
        return self.namespaces.pop()

    def try_pop(self) -> Namespace | None:
        """Remove and return the topmost namespace, or None if empty."""
        return self.namespaces.pop() if self.namespaces else None

    def peek(self) -> Namespace:
        """Return the topmost namespace; raise IndexError if empty."""
        if not self.namespaces:
            raise IndexError("peek into an empty namespace stack")
        return self.namespaces[-1]

    def put_checked(self, prefix: str, uri: str) -> bool:
        """Put the mapping unless some namespace already maps ``prefix`` to ``uri``."""
        if any(ns.get(prefix) == uri for ns in self.namespaces):
            return False
        self.put(prefix, uri)
        return True

    def put(self, prefix: str, uri: str) -> bool:
        """Put the mapping into the topmost namespace without overriding it there."""
        return self.peek().put(prefix, uri)

    def get(self, prefix: str) -> str | None:
        """Look ``prefix`` up from the top of the stack down."""
        for ns in reversed(self.namespaces):
            uri = ns.get(prefix)
            if uri is not None:
                return uri
        return None

    def squash(self) -> Namespace:
        """Combine the stack into one namespace; upper mappings take priority."""
        result = Namespace()
        for ns in self.namespaces:
            for prefix, uri in ns:
                result.force_put(prefix, uri)
        return result

    def extend(self, mappings: Iterable[tuple[str, str]]) -> None:
        """Put every pair into the topmost namespace."""
        for prefix, uri in mappings:
            self.put(prefix, uri)

    def extend_checked(self, mappings: Iterable[tuple[str, str]]) -> None:
        """Put every pair using :meth:`put_checked`."""
        for prefix, uri in mappings:
            self.put_checked(prefix, uri)

    def __iter__(self) -> Iterator[tuple[str, str]]:
        """Yield visible mappings, topmost namespace first, each prefix once."""
        seen: set[str] = set()
        for ns in reversed(self.namespaces):
            for prefix, uri in ns:
                if prefix not in seen:
                    seen.add(prefix)
                    yield prefix, uri

    def __len__(self) -> int:
        return len(self.namespaces)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NamespaceStack):
            return NotImplemented
        return self.namespaces == other.namespaces

    def __repr__(self) -> str:
        return f"NamespaceStack({self.namespaces!r})"