"""
marklight-editor: markdown-aware editing logic for plain text buffers.

This package can be used both as a library behind an editing surface and as a
CLI tool exporting cleaned markdown.

CLI Usage:
    marklight-editor notes.md

Library Usage:
    from marklight_editor import BOLD, MarkdownEditor, TextRange

    editor = MarkdownEditor("Hello world", TextRange(6, 5))
    editor.insert_element(BOLD)
    editor.text  # "Hello **world**"
    editor.prepare()
"""

from .buffer import TextBuffer
from .cleanup import prepare_text
from .config import ConfigError, EditorConfig
from .editor import MarkdownEditor
from .exceptions import EditorError, InvalidRangeError, RangeOutOfBoundsError
from .models import (
    BOLD,
    BULLET_LIST,
    CODE,
    H1,
    H2,
    H3,
    ITALIC,
    NUMBER_LIST,
    QUOTE,
    HeaderSize,
    ListContinuationState,
    MarkdownElementType,
    MarkdownRange,
    RangeProvider,
    TextRange,
    TokenShape,
)
from .ranges import flatten_ranges
from .scanner import MarkdownScanner

__version__ = "0.1.0"

__all__ = [
    # Core functionality
    "MarkdownEditor",
    "prepare_text",
    "flatten_ranges",
    "MarkdownScanner",
    "TextBuffer",
    # Data models
    "HeaderSize",
    "TokenShape",
    "MarkdownElementType",
    "MarkdownRange",
    "TextRange",
    "ListContinuationState",
    "RangeProvider",
    "H1",
    "H2",
    "H3",
    "BOLD",
    "ITALIC",
    "CODE",
    "QUOTE",
    "NUMBER_LIST",
    "BULLET_LIST",
    # Configuration
    "EditorConfig",
    # Exceptions
    "ConfigError",
    "EditorError",
    "InvalidRangeError",
    "RangeOutOfBoundsError",
    # Version
    "__version__",
]
