"""Removal of the markdown syntax enclosing a selection."""

from __future__ import annotations

import logging

from .buffer import TextBuffer
from .models import MarkdownElementType, MarkdownRange, RangeProvider, TextRange, TokenShape
from .ranges import find_enclosing_range

logger = logging.getLogger(__name__)


def remove_prefix_syntax(
    buffer: TextBuffer, markdown_range: MarkdownRange, selection: TextRange
) -> TextRange | None:
    """Delete a line marker and keep the selection on the same content.

    The selection moves left by the marker length but never before the line
    start, and loses whatever part of it covered the marker.
    """
    pre_range = markdown_range.pre_range
    if pre_range is None:
        return None

    line_start = buffer.line_start(selection.location)
    buffer.delete(pre_range)

    location = max(line_start, selection.location - pre_range.length)
    overlap = pre_range.intersection(selection).length
    return TextRange(location, selection.length - overlap)


def remove_wrap_syntax(
    buffer: TextBuffer, markdown_range: MarkdownRange, selection: TextRange
) -> TextRange | None:
    """Delete both delimiters of a wrap element and place a caret.

    The caret goes to the end of the unwrapped content when the selection was
    non-empty or touched the closing delimiter, to the start when it touched
    the opening delimiter, and otherwise stays on the same content character.
    """
    pre_range = markdown_range.pre_range
    post_range = markdown_range.post_range
    if pre_range is None or post_range is None:
        return None

    # post first so pre_range stays valid
    buffer.delete(post_range)
    buffer.delete(pre_range)

    if not selection.is_empty or post_range.contains(selection):
        return TextRange(post_range.location - pre_range.length)
    if pre_range.contains(selection):
        return TextRange(pre_range.location)
    return TextRange(selection.location - pre_range.length)


def remove_element(
    buffer: TextBuffer,
    provider: RangeProvider,
    element_type: MarkdownElementType,
    selection: TextRange | None,
) -> TextRange | None:
    """Remove the syntax of the `element_type` element enclosing `selection`.

    Args:
        buffer: Text to edit in place.
        provider: Ranges for the current contents of `buffer`.
        element_type: Element whose syntax to remove.
        selection: Current selection; None means there is no active selection.

    Returns:
        TextRange | None: The new selection, or None when nothing was removed.
    """
    if selection is None:
        logger.debug("No selection; skipping removal of %s", element_type)
        return None
    if not buffer.is_valid_range(selection):
        logger.debug("Selection %s is outside the buffer; skipping removal", selection)
        return None

    shape = element_type.shape
    if shape is TokenShape.NONE:
        logger.debug("Removal of %s is not supported", element_type)
        return None

    markdown_range = find_enclosing_range(provider, element_type, selection)
    if markdown_range is None:
        logger.debug("No %s encloses %s", element_type, selection)
        return None

    if shape is TokenShape.PREFIX:
        return remove_prefix_syntax(buffer, markdown_range, selection)
    return remove_wrap_syntax(buffer, markdown_range, selection)
