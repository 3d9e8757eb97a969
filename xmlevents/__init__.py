"""Names, namespaces, escaping, event types, errors and options for event-based XML processing."""

__version__ = "0.1.0"

__all__ = [
    "attribute",
    "common",
    "config",
    "errors",
    "escape",
    "events",
    "name",
    "namespace",
]