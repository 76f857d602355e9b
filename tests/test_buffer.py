import pytest

from marklight_editor.buffer import TextBuffer
from marklight_editor.exceptions import RangeOutOfBoundsError
from marklight_editor.models import TextRange


def test_replace_shifts_following_text():
    buffer = TextBuffer("hello world")

    buffer.replace(TextRange(0, 5), "goodbye")

    assert buffer.text == "goodbye world"
    assert buffer.length == 13


def test_insert_and_delete():
    buffer = TextBuffer("abc")

    buffer.insert(1, "XY")
    assert buffer.text == "aXYbc"

    buffer.delete(TextRange(1, 2))
    assert buffer.text == "abc"


def test_line_start():
    buffer = TextBuffer("ab\ncd\n\nef")

    assert buffer.line_start(0) == 0
    assert buffer.line_start(2) == 0
    assert buffer.line_start(3) == 3
    assert buffer.line_start(5) == 3
    assert buffer.line_start(6) == 6
    assert buffer.line_start(7) == 7
    assert buffer.line_start(9) == 7


def test_line_range_includes_terminator():
    buffer = TextBuffer("ab\ncd\nef")

    assert buffer.line_range(TextRange(1)) == TextRange(0, 3)
    assert buffer.line_range(TextRange(4, 3)) == TextRange(3, 5)
    assert buffer.line_range(TextRange(7)) == TextRange(6, 2)


def test_out_of_bounds_ranges_raise():
    buffer = TextBuffer("abc")

    with pytest.raises(RangeOutOfBoundsError):
        buffer.delete(TextRange(2, 5))
    with pytest.raises(RangeOutOfBoundsError):
        buffer.line_start(4)
    assert buffer.text == "abc"


def test_is_valid_range():
    buffer = TextBuffer("abc")

    assert buffer.is_valid_range(TextRange(3))
    assert buffer.is_valid_range(TextRange(0, 3))
    assert not buffer.is_valid_range(TextRange(1, 3))
    assert not buffer.is_valid_range(TextRange(4))
