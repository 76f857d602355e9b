"""Editing session tying the buffer, selection and markdown engines together."""

from __future__ import annotations

from .buffer import TextBuffer
from .cleanup import prepare_text
from .config import EditorConfig, validate_config
from .constants import ACTIVE_ELEMENT_ORDER, HEADER_TYPES
from .continuation import ListContinuationController
from .insertion import insert_element
from .models import (
    BULLET_LIST,
    NUMBER_LIST,
    ListContinuationState,
    MarkdownElementType,
    ProviderFactory,
    RangeProvider,
    TextRange,
    TokenShape,
)
from .ranges import find_enclosing_range
from .removal import remove_element
from .scanner import MarkdownScanner


class MarkdownEditor:
    """One markdown editing session.

    Holds the buffer, the selection and the list continuation state, and
    exposes the events a host editing surface forwards: style toggles, return
    presses, text and selection changes, and export. Ranges are re-read from
    a fresh provider for every operation.

    Args:
        text: Initial buffer contents.
        selection: Initial selection; None when the host has no active selection.
        config: Syntax and limit settings; defaults to `EditorConfig()`.
        provider_factory: Builds a range provider from the current text.

    Raises:
        ConfigError: If `config` fails validation.

    Examples:
        editor = MarkdownEditor("hello", TextRange(5))
        editor.insert_element(BOLD)
        editor.text  # "hello****"
        editor.selection  # TextRange(location=7, length=0)
    """

    def __init__(
        self,
        text: str = "",
        selection: TextRange | None = None,
        config: EditorConfig | None = None,
        provider_factory: ProviderFactory = MarkdownScanner,
    ):
        self.config = config or EditorConfig()
        validate_config(self.config)
        self.buffer = TextBuffer(text)
        self.provider_factory = provider_factory
        self.lists = ListContinuationController(
            ListContinuationState(default_bullet=self.config.default_bullet)
        )
        self._selection = selection

    @property
    def text(self) -> str:
        return self.buffer.text

    @property
    def selection(self) -> TextRange | None:
        return self._selection

    @property
    def list_state(self) -> ListContinuationState:
        return self.lists.state

    def _resolve(self, selection: TextRange | None) -> TextRange | None:
        return self._selection if selection is None else selection

    def _provider(self) -> RangeProvider:
        return self.provider_factory(self.buffer.text)

    def _update_selection(self, selection: TextRange | None) -> TextRange | None:
        if selection is not None:
            self._selection = selection
            self.on_selection_changed()
        return selection

    # Host events

    def select(self, selection: TextRange | None) -> None:
        """Move the caret or selection, as the user does by tapping or dragging."""
        self._selection = selection
        self.on_selection_changed()

    def type_text(self, text: str) -> None:
        """Replace the selection with typed `text` and report the text change.

        Typing moves the caret without counting as a selection change.
        """
        if self._selection is None:
            return
        self.buffer.replace(self._selection, text)
        self._selection = TextRange(self._selection.location + len(text))
        self.on_text_changed()

    def press_return(self) -> None:
        """Type a newline the way a host does: notify, insert, report the change."""
        self.handle_new_line()
        self.type_text("\n")

    def on_selection_changed(self) -> None:
        self.lists.on_selection_changed()

    def on_text_changed(self) -> TextRange | None:
        return self._update_selection(
            self.lists.on_text_changed(self.buffer, self._selection, self.config)
        )

    def handle_new_line(self) -> TextRange | None:
        return self._update_selection(
            self.lists.handle_new_line(self.buffer, self._provider(), self._selection)
        )

    # Markdown operations

    def insert_element(
        self, element_type: MarkdownElementType, selection: TextRange | None = None
    ) -> TextRange | None:
        """Insert the syntax of `element_type` at `selection` (default: the current one)."""
        selection = self._resolve(selection)
        return self._update_selection(
            insert_element(self.buffer, element_type, selection, self.lists.state, self.config)
        )

    def delete_element(
        self, element_type: MarkdownElementType, selection: TextRange | None = None
    ) -> TextRange | None:
        """Remove the syntax of the `element_type` element enclosing the selection."""
        selection = self._resolve(selection)
        return self._update_selection(
            remove_element(self.buffer, self._provider(), element_type, selection)
        )

    def is_element_active(
        self, element_type: MarkdownElementType, selection: TextRange | None = None
    ) -> bool:
        selection = self._resolve(selection)
        if selection is None:
            return False
        return find_enclosing_range(self._provider(), element_type, selection) is not None

    def active_element_types(
        self, selection: TextRange | None = None
    ) -> list[MarkdownElementType]:
        """Return the element types enclosing the selection, in toolbar order."""
        selection = self._resolve(selection)
        if selection is None:
            return []
        provider = self._provider()
        return [
            element_type
            for element_type in ACTIVE_ELEMENT_ORDER
            if find_enclosing_range(provider, element_type, selection) is not None
        ]

    def prepare(self) -> str:
        """Return the export text; the buffer is left untouched."""
        return prepare_text(self.buffer.text, self.provider_factory)

    # Toolbar

    def select_element(self, element_type: MarkdownElementType) -> TextRange | None:
        """Apply `element_type` from a toolbar.

        A line holds a single prefix element, so an existing header or list
        marker is removed before a new one is inserted.
        """
        if element_type.shape is TokenShape.PREFIX:
            self._remove_existing_header()
            self._remove_existing_list_item()
        return self.insert_element(element_type)

    def deselect_element(self, element_type: MarkdownElementType) -> TextRange | None:
        return self.delete_element(element_type)

    def _remove_existing_header(self) -> None:
        current = None
        for header in HEADER_TYPES:
            if self.is_element_active(header):
                current = header
        if current is not None:
            self.delete_element(current)

    def _remove_existing_list_item(self) -> None:
        if self.is_element_active(NUMBER_LIST):
            self.delete_element(NUMBER_LIST)
        elif self.is_element_active(BULLET_LIST):
            self.delete_element(BULLET_LIST)
