from hypothesis import given
from hypothesis import strategies as st

from xmlevents.common import (
    TextPosition,
    XmlVersion,
    is_name_char,
    is_name_start_char,
    is_whitespace_char,
    is_whitespace_str,
)


def test_new_position_displays_one_based():
    assert str(TextPosition()) == "1:1"


def test_advance_moves_column():
    pos = TextPosition()
    pos.advance(3)
    assert pos.column == 3
    assert pos.row == 0


def test_new_line_resets_column():
    pos = TextPosition()
    pos.advance(5)
    pos.new_line()
    assert (pos.row, pos.column) == (1, 0)
    assert str(pos) == "2:1"


@given(st.integers(min_value=0, max_value=200), st.integers(min_value=1, max_value=16))
def test_advance_to_tab_lands_on_tab_stop(start, width):
    pos = TextPosition(column=start)
    pos.advance_to_tab(width)
    assert pos.column % width == 0
    assert start < pos.column <= start + width


def test_xml_version_display():
    version_10 = XmlVersion.__str__(XmlVersion.VERSION_10)
    version_11 = XmlVersion.__str__(XmlVersion.VERSION_11)
    assert version_10 == "1.0"
    assert version_11 == "1.1"


@given(st.text(alphabet=" \t\r\n"))
def test_whitespace_only_strings(s):
    assert is_whitespace_str(s)


@given(st.text(alphabet=" \t\r\n"), st.text(alphabet=" \t\r\n"))
def test_non_whitespace_detected(a, b):
    assert not is_whitespace_str(a + "x" + b)


def test_whitespace_chars():
    assert all(is_whitespace_char(c) for c in " \t\r\n")
    assert not is_whitespace_char("\x0b")
    assert not is_whitespace_char("a")


def test_name_start_chars():
    assert all(is_name_start_char(c) for c in ":_aZ\u00c0\U00010000")
    assert not any(is_name_start_char(c) for c in "-.9\u00b7 ")


def test_name_chars_include_start_chars_and_extras():
    assert all(is_name_char(c) for c in "-.09\u00b7\u0300\u203f")
    assert not any(is_name_char(c) for c in " <>&\u00d7")


@given(st.characters())
def test_name_start_implies_name_char(c):
    if is_name_start_char(c):
        assert is_name_char(c)
    else:
        assert is_name_char(c) == (c in "-.0123456789\u00b7" or "\u0300" <= c <= "\u036f" or c in "\u203f\u2040")