"""Parser configuration."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field

__all__ = ["ParserConfig"]

_BOOLEAN_OPTIONS = frozenset(
    {
        "trim_whitespace",
        "whitespace_to_characters",
        "cdata_to_characters",
        "ignore_comments",
        "coalesce_characters",
        "ignore_end_of_stream",
        "replace_unknown_entity_references",
        "ignore_root_level_whitespace",
    }
)


@dataclass
class ParserConfig:
    """Options that affect how the parser reports events.

    ``trim_whitespace`` removes standalone whitespace and trims character data.
    ``whitespace_to_characters`` reports whitespace as character data.
    ``cdata_to_characters`` reports CDATA sections as character data.
    ``ignore_comments`` drops comment events.
    ``coalesce_characters`` merges consecutive character data events.
    ``extra_entities`` maps additional entity names to their replacement text.
    ``ignore_end_of_stream`` allows pulling events after a supposed end of input.
    ``replace_unknown_entity_references`` turns invalid character references into U+FFFD.
    ``ignore_root_level_whitespace`` drops whitespace outside the root element.
    """

    trim_whitespace: bool = False
    whitespace_to_characters: bool = False
    cdata_to_characters: bool = False
    ignore_comments: bool = True
    coalesce_characters: bool = True
    extra_entities: dict[str, str] = field(default_factory=dict)
    ignore_end_of_stream: bool = False
    replace_unknown_entity_references: bool = False
    ignore_root_level_whitespace: bool = True

    def add_entity(self, entity: str, value: str) -> ParserConfig:
        """Return a copy of this config that also recognises ``&entity;`` as ``value``."""
        entities = dict(self.extra_entities)
        entities[entity] = value
        return dataclasses.replace(self, extra_entities=entities)

    def with_options(self, **kwargs: bool) -> ParserConfig:
        """Return a copy of this config with the given boolean options changed."""
        unknown = sorted(set(kwargs) - _BOOLEAN_OPTIONS)
        if unknown:
            raise TypeError(f"unknown parser option(s): {', '.join(unknown)}")
        return dataclasses.replace(
            self, extra_entities=dict(self.extra_entities), **kwargs
        )