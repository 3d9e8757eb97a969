import dataclasses

import pytest

from xmlevents.attribute import Attribute
from xmlevents.common import XmlVersion
from xmlevents.events import (
    CData,
    Characters,
    Comment,
    EndDocument,
    EndElement,
    ProcessingInstruction,
    StartDocument,
    StartElement,
    Whitespace,
    XmlEvent,
)
from xmlevents.name import Name
from xmlevents.namespace import Namespace


def test_start_document_defaults():
    event = StartDocument()
    assert event.version is XmlVersion.VERSION_10
    assert event.encoding == "UTF-8"
    assert event.standalone is None


def test_start_document_str():
    assert str(StartDocument()) == "StartDocument(1.0, UTF-8, None)"


def test_end_document_str():
    assert str(EndDocument()) == "EndDocument"


def test_processing_instruction_str():
    assert str(ProcessingInstruction("target", "data")) == "ProcessingInstruction(target, data)"
    assert str(ProcessingInstruction("target")).endswith("(target)")


def test_start_element_str_with_attributes():
    event = StartElement(
        Name.local("root"),
        [Attribute(Name.local("a"), "1")],
        Namespace([("", "")]),
    )
    assert str(event) == "StartElement(root, {'': ''}, [a -> 1])"


def test_start_element_str_without_attributes_has_no_list():
    event = StartElement(Name.local("root"))
    assert "[" not in str(event)
    assert str(event).startswith("StartElement(root, ")


@pytest.mark.parametrize(
    "cls, name", [(CData, "CData"), (Comment, "Comment"), (Characters, "Characters"), (Whitespace, "Whitespace")]
)
def test_text_event_str(cls, name):
    assert str(cls("hello")) == f"{name}(hello)"


def test_end_element_str_includes_namespace():
    event = EndElement(Name.qualified("item", "urn:x", "p"))
    assert str(event) == f"EndElement({Name.qualified('item', 'urn:x', 'p')})"


def test_text_events_of_different_kinds_differ():
    assert Characters("x") != CData("x")
    assert Characters("x") == Characters("x")
    assert Whitespace(" ") != Characters(" ")


def test_all_events_are_xml_events():
    expected = [
        (StartDocument(), "StartDocument(1.0, UTF-8, None)"),
        (EndDocument(), "EndDocument"),
        (ProcessingInstruction("p"), "ProcessingInstruction(p)"),
        (EndElement(Name.local("a")), "EndElement(a)"),
        (CData("c"), "CData(c)"),
        (Comment("c"), "Comment(c)"),
        (Characters("c"), "Characters(c)"),
        (Whitespace(" "), "Whitespace( )"),
    ]
    assert [str(event) for event, _ in expected] == [text for _, text in expected]
    start = StartElement(Name.local("a"))
    assert str(start).startswith("StartElement(a, ")
    assert all(isinstance(event, XmlEvent) for event, _ in expected)
    assert isinstance(start, XmlEvent)


def test_events_are_immutable():
    event = Characters("x")
    with pytest.raises(dataclasses.FrozenInstanceError):
        event.data = "y"
    assert event.data == "x"
    assert str(event) == "Characters(x)"


def test_start_element_equality():
    a = StartElement(Name.local("e"), [Attribute(Name.local("k"), "v")], Namespace([("p", "urn:p")]))
    b = StartElement(Name.local("e"), [Attribute(Name.local("k"), "v")], Namespace([("p", "urn:p")]))
    c = StartElement(Name.local("e"), [], Namespace([("p", "urn:p")]))
    assert a == b
    assert a != c