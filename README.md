# xmlevents

Data types for working with XML as a stream of events: qualified names,
attributes, namespace scopes, escaping, character classes, event types,
errors and parser options.

## What is in the package

- `xmlevents.common`
  - `TextPosition(row=0, column=0)`: a zero-based position with `advance(count)`,
    `advance_to_tab(width)` and `new_line()`. `str()` gives the one-based
    `"row:column"` form, e.g. `"1:1"` for the start of a document.
  - `XmlVersion`: `VERSION_10` and `VERSION_11`, printing as `1.0` and `1.1`.
  - `is_whitespace_char`, `is_whitespace_str`, `is_name_start_char`,
    `is_name_char`: character classes from the XML 1.1 grammar.
- `xmlevents.escape`
  - `escape_str_attribute(s)`: escapes `<`, `>`, `"`, `'`, `&`, newline
    (`&#xA;`) and carriage return (`&#xD;`).
  - `escape_str_pcdata(s)`: escapes `<` and `&` only.
- `xmlevents.name`
  - `Name(local_name, namespace=None, prefix=None)`, a frozen dataclass, with
    the constructors `local`, `prefixed`, `qualified`, `from_str` (splits at the
    first colon, no checks), `from_pair` (a `(prefix, local_name)` pair) and
    `parse` (strict: raises `ValueError` for empty parts or more than one colon).
    `to_repr()` gives `prefix:local`; `str()` also puts `{namespace}` in front.
- `xmlevents.attribute`
  - `Attribute(name, value)`: `str()` gives `name="escaped value"`.
- `xmlevents.namespace`
  - Constants `NS_XML_PREFIX`, `NS_XML_URI`, `NS_XMLNS_PREFIX`, `NS_XMLNS_URI`,
    `NS_NO_PREFIX`, `NS_EMPTY_URI`.
  - `Namespace`: a prefix-to-URI mapping iterated in prefix order, with `put`
    (never overrides), `force_put` (returns the previous URI), `get`,
    `contains`, `extend`, `is_empty` and `is_essentially_empty`.
  - `NamespaceStack`: nested scopes, with `empty()`, `default()`,
    `push_empty`, `pop`, `try_pop`, `peek`, `put`, `put_checked`, `get`,
    `squash`, `extend` and `extend_checked`. Iterating yields each visible
    prefix once, from the topmost scope down.
- `xmlevents.errors`
  - `XmlError`, an exception holding a `position`, a `kind` (`ErrorKind.SYNTAX`,
    `IO`, `UTF8` or `UNEXPECTED_EOF`) and a `message`, built with `syntax`,
    `unexpected_eof`, `from_os_error` or `from_unicode_error`. `str()` gives
    `"row:column message"`.
- `xmlevents.config`
  - `ParserConfig`, a dataclass of options: `trim_whitespace`,
    `whitespace_to_characters`, `cdata_to_characters`, `ignore_comments`
    (default on), `coalesce_characters` (default on), `extra_entities`,
    `ignore_end_of_stream`, `replace_unknown_entity_references` and
    `ignore_root_level_whitespace` (default on). `add_entity` and
    `with_options` return changed copies; `with_options` raises `TypeError`
    for an unknown option.
- `xmlevents.events`
  - `XmlEvent` and its subclasses `StartDocument`, `EndDocument`,
    `ProcessingInstruction`, `StartElement`, `EndElement`, `CData`, `Comment`,
    `Characters` and `Whitespace`, each with a readable `str()` such as
    `Characters(hello)` or `EndElement(p:item)`.

## Installation

```
pip install xmlevents
```

## Examples

Escaping:

```python
from xmlevents.escape import escape_str_attribute, escape_str_pcdata

escape_str_attribute('a "quoted" <value>')  # 'a &quot;quoted&quot; &lt;value&gt;'
escape_str_pcdata("1 < 2 & 3")              # '1 &lt; 2 &amp; 3'
```

Names:

```python
from xmlevents.name import Name

name = Name.from_str("p:item")
name.prefix, name.local_name               # ('p', 'item')
name.to_repr()                             # 'p:item'
str(Name.qualified("item", "urn:x", "p"))  # '{urn:x}p:item'

Name.parse("a:b:c")                        # raises ValueError
```

Namespaces:

```python
from xmlevents.namespace import NamespaceStack

stack = NamespaceStack.empty()
stack.push_empty()
stack.put("a", "urn:A")
stack.put("b", "urn:B")
stack.push_empty()
stack.put("c", "urn:C")

list(stack)       # [('c', 'urn:C'), ('a', 'urn:A'), ('b', 'urn:B')]
stack.get("a")    # 'urn:A'
```

Parser options:

```python
from xmlevents.config import ParserConfig

config = ParserConfig().with_options(trim_whitespace=True, ignore_comments=False)
config = config.add_entity("nbsp", "\u00a0")
```

## What the package does not do

There is no parser here: nothing reads a document and produces events, and
nothing writes events back out as XML. `ParserConfig` only records options,
and `XmlError` is only created by the code that uses this package. There is no
command-line tool.

## Running the tests

```
pip install -e ".[test]"
pytest
```