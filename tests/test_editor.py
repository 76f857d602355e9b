import pytest

from marklight_editor.config import ConfigError, EditorConfig
from marklight_editor.editor import MarkdownEditor
from marklight_editor.models import (
    BOLD,
    BULLET_LIST,
    CODE,
    H1,
    H2,
    ITALIC,
    NUMBER_LIST,
    QUOTE,
    TextRange,
)


def test_active_element_types_in_toolbar_order():
    editor = MarkdownEditor("# **Title** _x_", TextRange(5))

    assert editor.active_element_types() == [H1, BOLD]
    assert editor.active_element_types(TextRange(13)) == [H1, ITALIC]


def test_active_element_types_for_quote_and_code():
    editor = MarkdownEditor("> run `ls`", TextRange(8))

    assert editor.active_element_types() == [CODE, QUOTE]


def test_active_element_types_without_selection():
    assert MarkdownEditor("# Title").active_element_types() == []


def test_insert_element_updates_selection_and_resets_list_state():
    editor = MarkdownEditor("hello", TextRange(5))
    editor.list_state.next_list_number = 4

    assert editor.insert_element(BOLD) == TextRange(7)
    assert editor.text == "hello****"
    assert editor.selection == TextRange(7)
    assert editor.list_state.next_list_number == 1


def test_insert_and_delete_with_explicit_selection():
    editor = MarkdownEditor("one two", TextRange(0))

    editor.insert_element(ITALIC, TextRange(4, 3))
    assert editor.text == "one _two_"

    editor.delete_element(ITALIC, TextRange(6))
    assert editor.text == "one two"
    assert editor.selection == TextRange(5)


def test_noop_operations_leave_selection_alone():
    editor = MarkdownEditor("plain", TextRange(2))

    assert editor.delete_element(BOLD) is None
    assert editor.insert_element(QUOTE) is None
    assert editor.selection == TextRange(2)
    assert editor.text == "plain"


def test_operations_without_selection_are_noops():
    editor = MarkdownEditor("**b**")

    assert editor.insert_element(H1) is None
    assert editor.delete_element(BOLD) is None
    assert editor.handle_new_line() is None
    editor.type_text("x")
    assert editor.text == "**b**"


def test_select_element_replaces_existing_header():
    editor = MarkdownEditor("# Title", TextRange(4))

    editor.select_element(H2)

    assert editor.text == "## Title"
    assert editor.selection == TextRange(5)


def test_select_element_swaps_list_kind():
    editor = MarkdownEditor("1. item", TextRange(5))

    editor.select_element(BULLET_LIST)

    assert editor.text == "- item"
    assert editor.selection == TextRange(4)


def test_select_element_numbered_list_on_header():
    editor = MarkdownEditor("## Title", TextRange(8))

    editor.select_element(NUMBER_LIST)

    assert editor.text == "1. Title"


def test_select_and_deselect_wrap_element():
    editor = MarkdownEditor("word", TextRange(0, 4))

    editor.select_element(BOLD)
    assert editor.text == "**word**"
    assert editor.selection == TextRange(2, 4)

    editor.select(TextRange(3))
    editor.deselect_element(BOLD)
    assert editor.text == "word"
    assert editor.selection == TextRange(1)


def test_configured_default_bullet():
    editor = MarkdownEditor("x", TextRange(0), EditorConfig(default_bullet="*"))

    editor.insert_element(BULLET_LIST)

    assert editor.text == "* x"
    assert editor.list_state.next_list_bullet == "*"


def test_invalid_config_is_rejected():
    with pytest.raises(ConfigError):
        MarkdownEditor("x", config=EditorConfig(default_bullet="#"))


def test_custom_provider_factory_is_called_per_operation():
    texts = []

    class RecordingProvider:
        def __init__(self, text):
            texts.append(text)

        def ranges_for_element_type(self, element_type):
            return []

    editor = MarkdownEditor("**a**", TextRange(2), provider_factory=RecordingProvider)

    assert editor.delete_element(BOLD) is None
    editor.insert_element(CODE)
    editor.active_element_types()

    assert texts == ["**a**", "**``a**"]


def test_toolbar_round_trip(make_editor):
    editor = make_editor("see |this")

    editor.select_element(H1)
    assert editor.text == "# see this"
    assert editor.active_element_types() == [H1]

    editor.deselect_element(H1)
    assert editor.text == "see this"
    assert editor.selection == TextRange(4)


def test_code_toggle_at_caret(make_editor):
    editor = make_editor("run |now")

    editor.insert_element(CODE)
    editor.type_text("ls")

    assert editor.text == "run `ls`now"
    assert editor.active_element_types() == [CODE]

    editor.deselect_element(CODE)
    assert editor.text == "run lsnow"
    assert editor.selection == TextRange(6)


@pytest.mark.parametrize(
    ("element_type", "selection"),
    [(H1, TextRange(10)), (BOLD, TextRange(1, 10))],
)
def test_insert_with_selection_outside_buffer_leaves_text_alone(element_type, selection):
    editor = MarkdownEditor("abc", selection)

    assert editor.insert_element(element_type) is None
    assert editor.text == "abc"
    assert editor.selection == selection
