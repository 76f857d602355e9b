"""Interval helpers shared by the editing engines."""

from __future__ import annotations

from collections.abc import Iterable

from .models import MarkdownElementType, MarkdownRange, RangeProvider, TextRange


def flatten_ranges(ranges: Iterable[TextRange]) -> list[TextRange]:
    """Discard every range nested within another range.

    Larger ranges win: candidates are visited from longest to shortest and a
    candidate is kept only when no kept range contains it. Duplicates collapse
    to a single range.

    Args:
        ranges: Candidate ranges in any order.

    Returns:
        list[TextRange]: The maximal non-nested subset, longest first.

    Examples:
        flatten_ranges([TextRange(0, 10), TextRange(2, 3), TextRange(8, 5)])
        # [TextRange(location=0, length=10), TextRange(location=8, length=5)]
    """
    remaining = sorted(ranges, key=lambda text_range: text_range.length)
    result: list[TextRange] = []

    while remaining:
        candidate = remaining.pop()
        if any(kept.contains(candidate) for kept in result):
            continue
        result.append(candidate)

    return result


def find_enclosing_range(
    provider: RangeProvider, element_type: MarkdownElementType, selection: TextRange
) -> MarkdownRange | None:
    """Return the first range of `element_type` whose whole range contains `selection`."""
    for markdown_range in provider.ranges_for_element_type(element_type):
        if markdown_range.whole_range.contains(selection):
            return markdown_range
    return None
