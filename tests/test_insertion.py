import pytest

from marklight_editor.buffer import TextBuffer
from marklight_editor.config import EditorConfig
from marklight_editor.insertion import (
    insert_element,
    insert_prefix_syntax,
    insert_wrap_syntax,
    syntax_for_element,
)
from marklight_editor.models import (
    BOLD,
    BULLET_LIST,
    CODE,
    H1,
    H2,
    H3,
    ITALIC,
    NUMBER_LIST,
    QUOTE,
    ListContinuationState,
    TextRange,
)


def _insert(text, element_type, selection, state=None, config=None):
    buffer = TextBuffer(text)
    result = insert_element(
        buffer,
        element_type,
        selection,
        state or ListContinuationState(),
        config or EditorConfig(),
    )
    return buffer.text, result


@pytest.mark.parametrize(
    ("element_type", "expected"),
    [
        (H1, "# "),
        (H2, "## "),
        (H3, "### "),
        (BOLD, "**"),
        (ITALIC, "_"),
        (CODE, "`"),
        (QUOTE, None),
    ],
)
def test_syntax_for_element(element_type, expected):
    assert syntax_for_element(element_type, ListContinuationState(), EditorConfig()) == expected


def test_list_syntax_follows_session_state():
    state = ListContinuationState(next_list_number=3, next_list_bullet="+")

    assert syntax_for_element(NUMBER_LIST, state, EditorConfig()) == "3. "
    assert syntax_for_element(BULLET_LIST, state, EditorConfig()) == "+ "


def test_prefix_goes_to_line_start_and_caret_keeps_its_place():
    text, selection = _insert("first\nsecond", H2, TextRange(9))

    assert text == "first\n## second"
    assert selection == TextRange(12)


def test_prefix_at_document_start():
    text, selection = _insert("abc", H1, TextRange(2))

    assert text == "# abc"
    assert selection == TextRange(4)


def test_prefix_with_caret_right_after_newline():
    buffer = TextBuffer("ab\ncd")

    assert insert_prefix_syntax(buffer, "- ", TextRange(3)) == TextRange(5)
    assert buffer.text == "ab\n- cd"


def test_prefix_collapses_a_selection_to_a_caret():
    text, selection = _insert("item", NUMBER_LIST, TextRange(1, 2))

    assert text == "1. item"
    assert selection == TextRange(4)


def test_list_markers_from_state():
    state = ListContinuationState(next_list_number=3, next_list_bullet="*")

    assert _insert("item", NUMBER_LIST, TextRange(0), state)[0] == "3. item"
    assert _insert("item", BULLET_LIST, TextRange(0), state)[0] == "* item"


def test_wrap_at_caret_places_caret_between_delimiters():
    text, selection = _insert("ab", BOLD, TextRange(1))

    assert text == "a****b"
    assert selection == TextRange(3)


def test_wrap_around_selection_keeps_it_selected():
    text, selection = _insert("Hello world", BOLD, TextRange(6, 5))

    assert text == "Hello **world**"
    assert selection == TextRange(8, 5)


def test_wrap_uses_configured_syntax():
    config = EditorConfig(italic_syntax="*", bold_syntax="__", code_syntax="``")

    assert _insert("ab", ITALIC, TextRange(1), config=config) == ("a**b", TextRange(2))
    assert _insert("x", BOLD, TextRange(0, 1), config=config)[0] == "__x__"
    assert _insert("x", CODE, TextRange(0, 1), config=config)[0] == "``x``"


def test_wrap_syntax_directly():
    buffer = TextBuffer("a b")

    assert insert_wrap_syntax(buffer, "`", TextRange(2, 1)) == TextRange(3, 1)
    assert buffer.text == "a `b`"


def test_no_selection_is_noop():
    assert _insert("abc", BOLD, None) == ("abc", None)
    assert _insert("abc", H1, None) == ("abc", None)


def test_unsupported_type_is_noop():
    assert _insert("abc", QUOTE, TextRange(1)) == ("abc", None)


@pytest.mark.parametrize(
    ("element_type", "selection"),
    [
        (H1, TextRange(10)),
        (BOLD, TextRange(10)),
        (BOLD, TextRange(1, 10)),
        (NUMBER_LIST, TextRange(2, 2)),
    ],
)
def test_selection_outside_buffer_is_noop(element_type, selection):
    assert _insert("abc", element_type, selection) == ("abc", None)
