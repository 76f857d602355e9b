"""Insertion of markdown syntax around a selection."""

from __future__ import annotations

import logging

from .buffer import TextBuffer
from .config import EditorConfig
from .models import (
    ElementKind,
    ListContinuationState,
    MarkdownElementType,
    TextRange,
    TokenShape,
)

logger = logging.getLogger(__name__)


def syntax_for_element(
    element_type: MarkdownElementType, state: ListContinuationState, config: EditorConfig
) -> str | None:
    """Return the syntax string inserted for `element_type`.

    List markers come from the session state so that continued lists pick up
    the next number or the bullet in use. Returns None for types the editor
    does not insert.

    Examples:
        syntax_for_element(H2, ListContinuationState(), EditorConfig())  # "## "
    """
    kind = element_type.kind
    if kind is ElementKind.HEADER:
        return "#" * element_type.size.value + " "
    if kind is ElementKind.NUMBER_LIST:
        return f"{state.next_list_number}. "
    if kind is ElementKind.BULLET_LIST:
        return f"{state.next_list_bullet} "
    if kind is ElementKind.BOLD:
        return config.bold_syntax
    if kind is ElementKind.ITALIC:
        return config.italic_syntax
    if kind is ElementKind.CODE:
        return config.code_syntax
    return None


def insert_prefix_syntax(buffer: TextBuffer, syntax: str, selection: TextRange) -> TextRange:
    """Insert `syntax` at the start of the selection's line.

    Returns a caret at the original selection start, shifted past the
    insertion so it keeps its place within the line content.
    """
    line_start = buffer.line_start(selection.location)
    buffer.insert(line_start, syntax)
    return TextRange(selection.location + len(syntax))


def insert_wrap_syntax(buffer: TextBuffer, syntax: str, selection: TextRange) -> TextRange:
    """Wrap the selection in `syntax`, or open an empty pair at a caret.

    A non-empty selection stays selected, now between the delimiters. A caret
    lands between the two inserted copies.
    """
    if selection.is_empty:
        buffer.insert(selection.location, syntax + syntax)
        return TextRange(selection.location + len(syntax))

    buffer.insert(selection.location, syntax)
    # the first insertion shifted the end
    buffer.insert(selection.end + len(syntax), syntax)
    return selection.shifted(len(syntax))


def insert_element(
    buffer: TextBuffer,
    element_type: MarkdownElementType,
    selection: TextRange | None,
    state: ListContinuationState,
    config: EditorConfig,
) -> TextRange | None:
    """Insert the syntax of `element_type` for `selection`.

    Args:
        buffer: Text to edit in place.
        element_type: Element whose syntax to insert.
        selection: Current selection; None means there is no active selection.
        state: List session state supplying the next list marker.
        config: Delimiters for wrap elements.

    Returns:
        TextRange | None: The new selection, or None when nothing was inserted.
    """
    if selection is None:
        logger.debug("No selection; skipping insertion of %s", element_type)
        return None
    if not buffer.is_valid_range(selection):
        logger.debug("Selection %s is outside the buffer; skipping insertion", selection)
        return None

    syntax = syntax_for_element(element_type, state, config)
    shape = element_type.shape
    if syntax is None or shape is TokenShape.NONE:
        logger.debug("Insertion of %s is not supported", element_type)
        return None

    if shape is TokenShape.PREFIX:
        return insert_prefix_syntax(buffer, syntax, selection)
    return insert_wrap_syntax(buffer, syntax, selection)
