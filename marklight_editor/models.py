"""Data models for marklight-editor."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from collections.abc import Callable
from typing import Protocol

from .exceptions import InvalidRangeError


class HeaderSize(Enum):
    """Header sizes supported by the editor.

    The value is the number of ``#`` characters in the header prefix.
    """

    H1 = 1
    H2 = 2
    H3 = 3


class TokenShape(Enum):
    """Layout of the syntax characters around an element's content.

    Attributes:
        NONE: No syntax the editor inserts or removes (block quotes).
        PREFIX: A line-leading marker only (headers, list items).
        WRAP: Matching markers on both sides of the content (bold, italic, code).
    """

    NONE = auto()
    PREFIX = auto()
    WRAP = auto()


class ElementKind(Enum):
    """Markdown element categories the editor recognizes."""

    HEADER = auto()
    BOLD = auto()
    ITALIC = auto()
    CODE = auto()
    QUOTE = auto()
    NUMBER_LIST = auto()
    BULLET_LIST = auto()


_SHAPES = {
    ElementKind.HEADER: TokenShape.PREFIX,
    ElementKind.NUMBER_LIST: TokenShape.PREFIX,
    ElementKind.BULLET_LIST: TokenShape.PREFIX,
    ElementKind.BOLD: TokenShape.WRAP,
    ElementKind.ITALIC: TokenShape.WRAP,
    ElementKind.CODE: TokenShape.WRAP,
    ElementKind.QUOTE: TokenShape.NONE,
}


@dataclass(frozen=True)
class MarkdownElementType:
    """A markdown element category, tagged by kind and, for headers, size.

    Use the module-level instances (`H1`, `BOLD`, `NUMBER_LIST`, ...) rather
    than constructing new ones; equal tags compare equal either way.

    Attributes:
        kind: Element category.
        size: Header size, required for headers and None otherwise.
    """

    kind: ElementKind
    size: HeaderSize | None = None

    def __post_init__(self):
        if (self.kind is ElementKind.HEADER) != (self.size is not None):
            raise ValueError("`size` must be given for headers and only for headers")

    @property
    def shape(self) -> TokenShape:
        return _SHAPES[self.kind]

    def __str__(self) -> str:
        if self.size is not None:
            return f"header({self.size.name.lower()})"
        return self.kind.name.lower()


H1 = MarkdownElementType(ElementKind.HEADER, HeaderSize.H1)
H2 = MarkdownElementType(ElementKind.HEADER, HeaderSize.H2)
H3 = MarkdownElementType(ElementKind.HEADER, HeaderSize.H3)
BOLD = MarkdownElementType(ElementKind.BOLD)
ITALIC = MarkdownElementType(ElementKind.ITALIC)
CODE = MarkdownElementType(ElementKind.CODE)
QUOTE = MarkdownElementType(ElementKind.QUOTE)
NUMBER_LIST = MarkdownElementType(ElementKind.NUMBER_LIST)
BULLET_LIST = MarkdownElementType(ElementKind.BULLET_LIST)


@dataclass(frozen=True, order=True)
class TextRange:
    """A half-open span ``[location, location + length)`` of buffer offsets.

    A zero-length range is a caret. Ranges compare by location, then length.

    Attributes:
        location: Offset of the first character.
        length: Number of characters covered.

    Raises:
        InvalidRangeError: If either field is negative.

    Examples:
        TextRange(2, 3).union(TextRange(7, 0))  # TextRange(location=2, length=5)
    """

    location: int
    length: int = 0

    def __post_init__(self):
        if self.location < 0 or self.length < 0:
            raise InvalidRangeError(self.location, self.length)

    @classmethod
    def from_bounds(cls, start: int, end: int) -> TextRange:
        return cls(start, end - start)

    @property
    def end(self) -> int:
        return self.location + self.length

    @property
    def is_empty(self) -> bool:
        return self.length == 0

    def union(self, other: TextRange) -> TextRange:
        """Return the smallest range covering both ranges."""
        return TextRange.from_bounds(min(self.location, other.location), max(self.end, other.end))

    def intersection(self, other: TextRange) -> TextRange:
        """Return the overlap of both ranges, or an empty range at 0 when disjoint."""
        start = max(self.location, other.location)
        end = min(self.end, other.end)
        if end < start:
            return TextRange(0, 0)
        return TextRange.from_bounds(start, end)

    def contains(self, other: TextRange) -> bool:
        """Whether `other` is nested in this range, i.e. ``union == self``.

        A caret at either boundary counts as contained.
        """
        return self.union(other) == self

    def shifted(self, delta: int) -> TextRange:
        return TextRange(self.location + delta, self.length)


@dataclass(frozen=True)
class MarkdownRange:
    """Sub-ranges of one markdown element occurrence.

    Attributes:
        whole_range: The full token, syntax characters included.
        content_range: The payload between the syntax characters.
        pre_range: Leading syntax (``**``, ``# ``, ``1. ``), if any.
        post_range: Trailing syntax (closing ``**``), absent for prefix-only elements.
    """

    whole_range: TextRange
    content_range: TextRange
    pre_range: TextRange | None = None
    post_range: TextRange | None = None

    def syntax_ranges(self) -> list[TextRange]:
        return [r for r in (self.pre_range, self.post_range) if r is not None]


class RangeProvider(Protocol):
    """Source of markdown element ranges for the current buffer contents."""

    def ranges_for_element_type(self, element_type: MarkdownElementType) -> list[MarkdownRange]:
        ...


ProviderFactory = Callable[[str], RangeProvider]


@dataclass
class ListContinuationState:
    """List continuation context of one editing session.

    Attributes:
        default_bullet: Bullet restored on reset.
        next_list_number: Number used by the next numbered list insertion.
        next_list_bullet: Bullet used by the next bulleted list insertion.
        needs_new_number_list_item: A numbered marker is pending for the next text change.
        needs_new_bullet_list_item: A bullet marker is pending for the next text change.
    """

    default_bullet: str = "-"
    next_list_number: int = 1
    next_list_bullet: str | None = None
    needs_new_number_list_item: bool = False
    needs_new_bullet_list_item: bool = False

    def __post_init__(self):
        if self.next_list_bullet is None:
            self.next_list_bullet = self.default_bullet

    def reset(self) -> None:
        self.next_list_number = 1
        self.next_list_bullet = self.default_bullet
        self.needs_new_number_list_item = False
        self.needs_new_bullet_list_item = False
