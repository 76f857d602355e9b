"""In-memory host text buffer."""

from __future__ import annotations

from .exceptions import RangeOutOfBoundsError
from .models import TextRange


class TextBuffer:
    """Mutable text with range-based editing primitives.

    Edits replace a closed range with a string and shift every later offset by
    the length delta. Offsets are `str` indices.

    Args:
        text: Initial contents.

    Examples:
        buffer = TextBuffer("hello world")
        buffer.replace(TextRange(0, 5), "goodbye")
        buffer.text  # "goodbye world"
    """

    def __init__(self, text: str = ""):
        self._text = text

    @property
    def text(self) -> str:
        return self._text

    @property
    def length(self) -> int:
        return len(self._text)

    def __len__(self) -> int:
        return len(self._text)

    def is_valid_range(self, text_range: TextRange) -> bool:
        """Whether `text_range` lies within the current text."""
        return text_range.end <= len(self._text)

    def _check(self, text_range: TextRange) -> None:
        if not self.is_valid_range(text_range):
            raise RangeOutOfBoundsError(text_range.location, text_range.length, len(self._text))

    def substring(self, text_range: TextRange) -> str:
        self._check(text_range)
        return self._text[text_range.location : text_range.end]

    def line_start(self, offset: int) -> int:
        """Return the offset of the first character of the line containing `offset`.

        An offset right after a newline is itself a line start; the document
        start is returned when no newline precedes `offset`.

        Examples:
            TextBuffer("ab\\ncd").line_start(4)  # 3
        """
        self._check(TextRange(offset))
        return self._text.rfind("\n", 0, offset) + 1

    def line_range(self, text_range: TextRange) -> TextRange:
        """Return the full lines touched by `text_range`, line terminators included."""
        self._check(text_range)
        start = self.line_start(text_range.location)
        search_from = text_range.end - 1 if text_range.length else text_range.end
        newline = self._text.find("\n", max(search_from, start))
        end = len(self._text) if newline == -1 else newline + 1
        return TextRange.from_bounds(start, end)

    def replace(self, text_range: TextRange, text: str) -> None:
        self._check(text_range)
        self._text = self._text[: text_range.location] + text + self._text[text_range.end :]

    def insert(self, offset: int, text: str) -> None:
        self.replace(TextRange(offset), text)

    def delete(self, text_range: TextRange) -> None:
        self.replace(text_range, "")

    def __repr__(self) -> str:
        return f"TextBuffer({self._text!r})"
