import pytest
from click.testing import CliRunner

from marklight_editor.editor import MarkdownEditor
from marklight_editor.models import TextRange


@pytest.fixture()
def cli_runner() -> CliRunner:
    """Provides a reusable Click CLI runner."""
    return CliRunner()


@pytest.fixture()
def make_editor():
    """Builds an editor from text with the caret marked by ``|``."""

    def _make(marked: str, **kwargs) -> MarkdownEditor:
        location = marked.index("|")
        return MarkdownEditor(marked.replace("|", "", 1), TextRange(location), **kwargs)

    return _make
