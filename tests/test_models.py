import pytest

from marklight_editor.exceptions import InvalidRangeError
from marklight_editor.models import (
    BOLD,
    BULLET_LIST,
    CODE,
    H1,
    H2,
    ITALIC,
    NUMBER_LIST,
    QUOTE,
    ElementKind,
    HeaderSize,
    ListContinuationState,
    MarkdownElementType,
    TextRange,
    TokenShape,
)


def test_element_type_equality_is_by_tag_and_size():
    assert MarkdownElementType(ElementKind.HEADER, HeaderSize.H1) == H1
    assert H1 != H2
    assert MarkdownElementType(ElementKind.BOLD) == BOLD
    assert len({H1, H2, BOLD, MarkdownElementType(ElementKind.BOLD)}) == 3


def test_element_type_requires_size_only_for_headers():
    with pytest.raises(ValueError):
        MarkdownElementType(ElementKind.HEADER)
    with pytest.raises(ValueError):
        MarkdownElementType(ElementKind.BOLD, HeaderSize.H2)


def test_token_shapes():
    assert H1.shape is TokenShape.PREFIX
    assert NUMBER_LIST.shape is TokenShape.PREFIX
    assert BULLET_LIST.shape is TokenShape.PREFIX
    assert BOLD.shape is TokenShape.WRAP
    assert ITALIC.shape is TokenShape.WRAP
    assert CODE.shape is TokenShape.WRAP
    assert QUOTE.shape is TokenShape.NONE


def test_element_type_str():
    assert str(H2) == "header(h2)"
    assert str(NUMBER_LIST) == "number_list"


def test_text_range_rejects_negative_fields():
    with pytest.raises(InvalidRangeError):
        TextRange(-1, 2)
    with pytest.raises(InvalidRangeError):
        TextRange(1, -2)


def test_text_range_union_and_intersection():
    first = TextRange(2, 3)
    second = TextRange(4, 6)

    assert first.end == 5
    assert first.union(second) == TextRange(2, 8)
    assert first.intersection(second) == TextRange(4, 1)
    assert TextRange(0, 2).intersection(TextRange(5, 2)).length == 0


def test_text_range_contains_includes_boundary_carets():
    token = TextRange(3, 2)

    assert token.contains(TextRange(3))
    assert token.contains(TextRange(5))
    assert token.contains(TextRange(3, 2))
    assert not token.contains(TextRange(6))
    assert not token.contains(TextRange(2, 2))


def test_list_state_defaults_and_reset():
    state = ListContinuationState(default_bullet="*")

    assert state.next_list_number == 1
    assert state.next_list_bullet == "*"

    state.next_list_number = 4
    state.next_list_bullet = "+"
    state.needs_new_number_list_item = True
    state.needs_new_bullet_list_item = True
    state.reset()

    assert state.next_list_number == 1
    assert state.next_list_bullet == "*"
    assert state.needs_new_number_list_item is False
    assert state.needs_new_bullet_list_item is False


def test_list_state_keeps_explicit_bullet():
    assert ListContinuationState(next_list_bullet="+").next_list_bullet == "+"
