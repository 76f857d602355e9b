"""Markdown element scanning.

`MarkdownScanner` is the range provider used by the editor: it classifies a
snapshot of the buffer text into markdown element ranges. A scanner is bound to
the text it was built from; build a new one after every edit.
"""

from __future__ import annotations

import re

from .constants import (
    BOLD_PATTERN,
    BULLET_LIST_PATTERN,
    CODE_FENCE_PATTERN,
    HEADER_PATTERNS,
    ITALIC_STAR_PATTERN,
    ITALIC_UNDERSCORE_PATTERN,
    NUMBER_LIST_PATTERN,
    QUOTE_PATTERN,
)
from .models import ElementKind, MarkdownElementType, MarkdownRange, TextRange


def is_escaped(text: str, pos: int) -> bool:
    """Determine whether a character is escaped by preceding backslashes.

    Counts consecutive backslashes immediately before `pos`; an odd count marks
    the character as escaped.

    Examples:
        is_escaped("\\\\`", 2)  # False, two backslashes
        is_escaped("\\`", 1)  # True, one backslash
    """
    backslash_count = 0
    i = pos - 1
    while i >= 0 and text[i] == "\\":
        backslash_count += 1
        i -= 1

    return backslash_count % 2 == 1


def find_inline_code_spans(text: str) -> list[tuple[int, int, int]]:
    """Locate inline code spans using CommonMark-style backticks.

    Spans start and end with unescaped backtick runs of equal length.

    Args:
        text: The text to scan.

    Returns:
        list[tuple[int, int, int]]: Start (inclusive), end (exclusive) and
            delimiter length of each span.

    Examples:
        find_inline_code_spans("`code`")  # [(0, 6, 1)]
        find_inline_code_spans("``more`` text")  # [(0, 8, 2)]
    """
    spans = []
    i = 0

    while i < len(text):
        if text[i] != "`" or is_escaped(text, i):
            i += 1
            continue

        start = i
        backtick_count = 0
        while i < len(text) and text[i] == "`":
            backtick_count += 1
            i += 1

        # Look for a closing run of the same length
        j = i
        while j < len(text):
            if text[j] == "`" and not is_escaped(text, j):
                close_start = j
                while j < len(text) and text[j] == "`":
                    j += 1
                if j - close_start == backtick_count:
                    spans.append((start, j, backtick_count))
                    i = j
                    break
            else:
                j += 1

    return spans


def find_fenced_regions(text: str) -> list[tuple[int, int]]:
    """Return `(start, end)` offsets of fenced code blocks, fences included.

    An unterminated fence runs to the end of the text.
    """
    regions = []
    fence_char = None
    fence_length = 0
    block_start = 0
    offset = 0

    for line in text.splitlines(keepends=True):
        stripped = line.rstrip("\r\n")
        if fence_char is None:
            fence_match = CODE_FENCE_PATTERN.match(stripped)
            if fence_match:
                fence = fence_match.group("fence")
                fence_char = fence[0]
                fence_length = len(fence)
                block_start = offset
        else:
            candidate = stripped.lstrip(" ")
            run_length = len(candidate) - len(candidate.lstrip(fence_char))
            if (
                len(stripped) - len(candidate) <= 3
                and run_length >= fence_length
                and not candidate[run_length:].strip()
            ):
                regions.append((block_start, offset + len(stripped)))
                fence_char = None
        offset += len(line)

    if fence_char is not None:
        regions.append((block_start, len(text)))
    return regions


class MarkdownScanner:
    """Range provider over a fixed text snapshot.

    Args:
        text: Buffer contents to classify.

    Examples:
        scanner = MarkdownScanner("Some **bold** text")
        [r.content_range for r in scanner.ranges_for_element_type(BOLD)]
        # [TextRange(location=7, length=4)]
    """

    def __init__(self, text: str):
        self.text = text
        self._fenced = find_fenced_regions(text)

    def _in_fence(self, offset: int) -> bool:
        return any(start <= offset < end for start, end in self._fenced)

    def ranges_for_element_type(self, element_type: MarkdownElementType) -> list[MarkdownRange]:
        kind = element_type.kind
        if kind is ElementKind.HEADER:
            ranges = self._prefix_ranges(HEADER_PATTERNS[element_type.size.value])
        elif kind is ElementKind.NUMBER_LIST:
            ranges = self._prefix_ranges(NUMBER_LIST_PATTERN)
        elif kind is ElementKind.BULLET_LIST:
            ranges = self._prefix_ranges(BULLET_LIST_PATTERN)
        elif kind is ElementKind.QUOTE:
            ranges = self._prefix_ranges(QUOTE_PATTERN)
        elif kind is ElementKind.BOLD:
            ranges = self._wrap_ranges([BOLD_PATTERN], delimiter_group=1)
        elif kind is ElementKind.ITALIC:
            ranges = self._wrap_ranges([ITALIC_STAR_PATTERN, ITALIC_UNDERSCORE_PATTERN])
        else:
            ranges = [
                _wrap_range(start, end, delimiter)
                for start, end, delimiter in find_inline_code_spans(self.text)
            ]
        return [r for r in ranges if not self._in_fence(r.whole_range.location)]

    def _prefix_ranges(self, pattern: re.Pattern[str]) -> list[MarkdownRange]:
        ranges = []
        for match in pattern.finditer(self.text):
            ranges.append(
                MarkdownRange(
                    whole_range=TextRange.from_bounds(match.start(), match.end()),
                    content_range=TextRange.from_bounds(match.start(2), match.end(2)),
                    pre_range=TextRange.from_bounds(match.start(1), match.end(1)),
                )
            )
        return ranges

    def _wrap_ranges(
        self, patterns: list[re.Pattern[str]], delimiter_group: int | None = None
    ) -> list[MarkdownRange]:
        ranges = []
        for pattern in patterns:
            for match in pattern.finditer(self.text):
                if is_escaped(self.text, match.start()):
                    continue
                if delimiter_group is None:
                    delimiter = 1
                else:
                    delimiter = len(match.group(delimiter_group))
                ranges.append(_wrap_range(match.start(), match.end(), delimiter))
        return sorted(ranges, key=lambda r: r.whole_range)


def _wrap_range(start: int, end: int, delimiter: int) -> MarkdownRange:
    return MarkdownRange(
        whole_range=TextRange.from_bounds(start, end),
        content_range=TextRange.from_bounds(start + delimiter, end - delimiter),
        pre_range=TextRange(start, delimiter),
        post_range=TextRange(end - delimiter, delimiter),
    )
