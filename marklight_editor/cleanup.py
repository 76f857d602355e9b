"""Export cleanup: strips empty and decorative markdown from a text snapshot."""

from __future__ import annotations

import logging
import unicodedata

from .constants import (
    ALL_ELEMENT_TYPES,
    EMOJI_JOINERS,
    ORPHAN_LIST_MARKER_PATTERN,
    WHITESPACE_CHARS,
)
from .models import MarkdownRange, ProviderFactory, TextRange, TokenShape
from .ranges import flatten_ranges
from .scanner import MarkdownScanner

logger = logging.getLogger(__name__)


def collect_markdown_ranges(
    text: str, provider_factory: ProviderFactory = MarkdownScanner
) -> list[tuple[TokenShape, MarkdownRange]]:
    """Return every element range in `text`, tagged with its token shape."""
    provider = provider_factory(text)
    return [
        (element_type.shape, markdown_range)
        for element_type in ALL_ELEMENT_TYPES
        for markdown_range in provider.ranges_for_element_type(element_type)
    ]


def syntax_offsets(ranges: list[MarkdownRange]) -> set[int]:
    """Offsets covered by the leading or trailing syntax of any element."""
    offsets: set[int] = set()
    for markdown_range in ranges:
        for syntax_range in markdown_range.syntax_ranges():
            offsets.update(range(syntax_range.location, syntax_range.end))
    return offsets


def is_empty_element(text: str, markdown_range: MarkdownRange, syntax: set[int]) -> bool:
    """Whether an element has no content besides whitespace and other syntax."""
    content = markdown_range.content_range
    return all(
        text[index] in WHITESPACE_CHARS or index in syntax
        for index in range(content.location, content.end)
    )


def ranges_of_empty_elements(text: str, ranges: list[MarkdownRange]) -> list[TextRange]:
    syntax = syntax_offsets(ranges)
    return [r.whole_range for r in ranges if is_empty_element(text, r, syntax)]


def ranges_of_markdown_whitespace(text: str, ranges: list[MarkdownRange]) -> list[TextRange]:
    """Leading and trailing whitespace runs inside non-blank element content.

    Interior whitespace is never reported.
    """
    result = []
    for markdown_range in ranges:
        content = markdown_range.content_range
        content_text = text[content.location : content.end]
        stripped = content_text.lstrip(WHITESPACE_CHARS)
        if not stripped:
            continue

        leading = len(content_text) - len(stripped)
        if leading:
            result.append(TextRange(content.location, leading))

        trailing = len(stripped) - len(stripped.rstrip(WHITESPACE_CHARS))
        if trailing:
            result.append(TextRange(content.end - trailing, trailing))
    return result


def is_symbol(character: str) -> bool:
    return unicodedata.category(character).startswith("S")


def is_emoji_only(content: str) -> bool:
    """Whether `content` holds at least one symbol and nothing but symbols and whitespace.

    Emoji joiners and variation selectors ride along with their symbols.

    Examples:
        is_emoji_only(" 😀 ")  # True
        is_emoji_only("😀 ok")  # False
        is_emoji_only("   ")  # False
    """
    has_symbol = False
    for character in content:
        if is_symbol(character):
            has_symbol = True
        elif character not in WHITESPACE_CHARS and character not in EMOJI_JOINERS:
            return False
    return has_symbol


def ranges_of_emoji_syntax(
    text: str, shaped_ranges: list[tuple[TokenShape, MarkdownRange]]
) -> list[TextRange]:
    """Syntax ranges of wrap elements whose content is only emoji."""
    result = []
    for shape, markdown_range in shaped_ranges:
        if shape is not TokenShape.WRAP:
            continue
        content = markdown_range.content_range
        if is_emoji_only(text[content.location : content.end]):
            result.extend(markdown_range.syntax_ranges())
    return result


def strip_orphan_list_markers(text: str) -> str:
    """Remove list markers standing alone on their line, leaving the line break."""
    return ORPHAN_LIST_MARKER_PATTERN.sub("", text)


def _strip_markdown_ranges(text: str, provider_factory: ProviderFactory) -> str:
    """Run one cleanup pass over `text`.

    All deletions are computed against the snapshot and applied from the end
    backwards so earlier offsets stay valid.
    """
    shaped_ranges = collect_markdown_ranges(text, provider_factory)
    ranges = [markdown_range for _, markdown_range in shaped_ranges]

    ranges_to_delete = ranges_of_empty_elements(text, ranges)
    ranges_to_delete += ranges_of_markdown_whitespace(text, ranges)
    ranges_to_delete += ranges_of_emoji_syntax(text, shaped_ranges)

    ranges_to_delete = sorted(
        flatten_ranges(ranges_to_delete), key=lambda r: r.location, reverse=True
    )
    logger.debug("Stripping %d markdown ranges from export", len(ranges_to_delete))

    # Overlapping (not nested) ranges are clipped to what is still in place.
    limit = len(text)
    for text_range in ranges_to_delete:
        end = min(text_range.end, limit)
        text = text[: text_range.location] + text[end:]
        limit = min(limit, text_range.location)

    return strip_orphan_list_markers(text)


def prepare_text(text: str, provider_factory: ProviderFactory = MarkdownScanner) -> str:
    """Return `text` without empty markdown elements and decorative syntax.

    Removes empty elements whole, trims whitespace padding inside element
    content, drops the syntax around emoji-only wrap elements, then clears list
    markers left without content. A pass can expose new padding or empty
    elements, so passes repeat until the text stops changing.

    Args:
        text: Snapshot of the buffer.
        provider_factory: Builds a range provider for `text`.

    Returns:
        str: The prepared text; `text` itself is not modified.

    Examples:
        prepare_text("Hello **** world")  # "Hello  world"
        prepare_text("Say `😀` loudly")  # "Say 😀 loudly"
    """
    while True:
        prepared = _strip_markdown_ranges(text, provider_factory)
        if prepared == text:
            return prepared
        text = prepared
