"""Constants used across the marklight-editor package."""

from __future__ import annotations

import re

from .models import BOLD, BULLET_LIST, CODE, H1, H2, H3, ITALIC, NUMBER_LIST, QUOTE

# Element tables
# Every type whose ranges feed the cleanup pass.
ALL_ELEMENT_TYPES = (H1, H2, H3, BOLD, ITALIC, NUMBER_LIST, BULLET_LIST, CODE, QUOTE)
# Order reported by the active element query (drives toolbar state).
ACTIVE_ELEMENT_ORDER = (H1, H2, H3, ITALIC, BOLD, NUMBER_LIST, BULLET_LIST, CODE, QUOTE)
HEADER_TYPES = (H1, H2, H3)

LIST_BULLETS = ("-", "*", "+")
WHITESPACE_CHARS = " \t\n\r"

# Markdown patterns
HEADER_PATTERNS = {
    size: re.compile(rf"^(#{{{size}}}[ \t])(.*)$", re.MULTILINE) for size in (1, 2, 3)
}
NUMBER_LIST_PATTERN = re.compile(r"^(\d+\.[ \t])(.*)$", re.MULTILINE)
BULLET_LIST_PATTERN = re.compile(r"^([*+-][ \t])(.*)$", re.MULTILINE)
QUOTE_PATTERN = re.compile(r"^(>[ \t]?)(.*)$", re.MULTILINE)
BOLD_PATTERN = re.compile(r"(\*\*|__)([^\n]*?)\1")
ITALIC_STAR_PATTERN = re.compile(r"(?<![^\W_]|\*)\*([^*\s](?:[^\n]*?[^*\s])??)\*(?![^\W_]|\*)")
ITALIC_UNDERSCORE_PATTERN = re.compile(r"(?<!\w)_(?:([^_\s](?:[^\n]*?[^_\s])??)|)_(?!\w)")
CODE_FENCE_PATTERN = re.compile(r"^(?P<indent> {0,3})(?P<fence>`{3,}|~{3,})(?P<info>.*)$")

# List continuation: a marker, its separator and at least one more character
NUMBER_LIST_ITEM_PATTERN = re.compile(r"^(\d+)\.[\t ]+(?:.|[\t ])+")
BULLET_LIST_ITEM_PATTERN = re.compile(r"^([*+-])[\t ]+(?:.|[\t ])+")

# Cleanup: list markers left alone on their line
ORPHAN_LIST_MARKER_PATTERN = re.compile(r"^(?:\d+\.|[*+-])[\t ]*$", re.MULTILINE)

# Emoji sequences carry these alongside their symbol characters
EMOJI_JOINERS = frozenset("\u200d\ufe0e\ufe0f\u20e3")

MARKDOWN_EXTENSIONS = (".md", ".markdown")
DEFAULT_MAX_FILE_SIZE = 10 * 1024 * 1024
