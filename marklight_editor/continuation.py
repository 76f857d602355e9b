"""Automatic list continuation on return."""

from __future__ import annotations

import logging

from .buffer import TextBuffer
from .config import EditorConfig
from .constants import BULLET_LIST_ITEM_PATTERN, NUMBER_LIST_ITEM_PATTERN
from .insertion import insert_element
from .models import (
    BULLET_LIST,
    NUMBER_LIST,
    ListContinuationState,
    RangeProvider,
    TextRange,
)
from .ranges import find_enclosing_range

logger = logging.getLogger(__name__)


class ListContinuationController:
    """Carries list context from a return keypress to the following text change.

    Pressing return inside a list item that has content remembers the next
    marker; the marker is inserted once the host reports the newline as
    typed. Pressing return on an item holding only its marker removes the
    marker instead, ending the list.

    Args:
        state: Session state to read and update; a fresh one is created when omitted.
    """

    def __init__(self, state: ListContinuationState | None = None):
        self.state = state or ListContinuationState()

    def handle_new_line(
        self, buffer: TextBuffer, provider: RangeProvider, caret: TextRange | None
    ) -> TextRange | None:
        """Inspect the caret's line before the newline is inserted.

        Args:
            buffer: Current text.
            provider: Ranges for the current contents of `buffer`.
            caret: Current selection; only its start is used.

        Returns:
            TextRange | None: A new caret when an empty list item was removed,
            otherwise None.
        """
        if caret is None:
            return None
        if not buffer.is_valid_range(caret):
            logger.debug("Caret %s is outside the buffer; ignoring return", caret)
            return None

        line_start = buffer.line_start(caret.location)
        line_range = TextRange.from_bounds(line_start, caret.location)
        line = buffer.substring(line_range)

        if find_enclosing_range(provider, NUMBER_LIST, line_range) is not None:
            match = NUMBER_LIST_ITEM_PATTERN.match(line)
            if match:
                self.state.next_list_number = int(match.group(1)) + 1
                self.state.needs_new_number_list_item = True
                logger.debug("Continuing numbered list at %d", self.state.next_list_number)
                return None
            self.state.next_list_number = 1
            return self._remove_empty_item(buffer, line_range)

        if find_enclosing_range(provider, BULLET_LIST, line_range) is not None:
            match = BULLET_LIST_ITEM_PATTERN.match(line)
            if match:
                self.state.next_list_bullet = match.group(1)
                self.state.needs_new_bullet_list_item = True
                logger.debug("Continuing bulleted list with %r", self.state.next_list_bullet)
                return None
            self.state.next_list_bullet = self.state.default_bullet
            return self._remove_empty_item(buffer, line_range)

        return None

    def _remove_empty_item(self, buffer: TextBuffer, line_range: TextRange) -> TextRange:
        logger.debug("Ending list at empty item %s", line_range)
        buffer.delete(line_range)
        return TextRange(line_range.location)

    def on_text_changed(
        self, buffer: TextBuffer, selection: TextRange | None, config: EditorConfig
    ) -> TextRange | None:
        """Insert a pending list marker at the current selection's line.

        Returns:
            TextRange | None: The new caret, or None when nothing was pending.
        """
        if self.state.needs_new_number_list_item:
            self.state.needs_new_number_list_item = False
            return insert_element(buffer, NUMBER_LIST, selection, self.state, config)
        if self.state.needs_new_bullet_list_item:
            self.state.needs_new_bullet_list_item = False
            return insert_element(buffer, BULLET_LIST, selection, self.state, config)
        return None

    def on_selection_changed(self) -> None:
        self.state.reset()
