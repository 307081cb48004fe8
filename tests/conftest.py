"""Shared test fixtures for the CodeTint test suite.

Provides small hand-written themes and a scripted language whose event
stream is fixed, so formatter output can be asserted exactly.
"""

import pytest

from CodeTint.core import themes
from CodeTint.core.events import HighlightEnd, HighlightStart, Source


SAMPLE_THEME_JSON = """
{
  "name": "sample",
  "appearance": "dark",
  "revision": "abc123",
  "highlights": {
    "normal": { "fg": "#f8f8f2", "bg": "#282a36" },
    "highlighted": { "bg": "#44475a" },
    "keyword": { "fg": "#ff79c6", "bold": true },
    "comment": { "fg": "#6272a4", "italic": true },
    "comment.lua": { "fg": "#00ff00" },
    "string": { "fg": "#f1fa8c" },
    "markup.heading": { "fg": "#bd93f9", "bold": true },
    "error": { "fg": "#ff5555", "undercurl": true, "strikethrough": true }
  }
}
"""


class ScriptedLanguage:
    """Language stand-in replaying a fixed event list."""

    def __init__(self, events, id_name="test"):
        self.events = events
        self.id_name = id_name

    def highlight_events(self, source):
        return iter(self.events)


@pytest.fixture
def sample_theme():
    return themes.from_json(SAMPLE_THEME_JSON)


@pytest.fixture
def theme_factory():
    """Factory fixture - build a theme from a highlights dict."""
    def _make(highlights, name="custom", appearance="light", revision="1"):
        return themes.from_dict({
            "name": name,
            "appearance": appearance,
            "revision": revision,
            "highlights": highlights,
        })
    return _make


@pytest.fixture
def scripted_language():
    """Factory fixture - a language emitting the given events."""
    def _make(events, id_name="test"):
        return ScriptedLanguage(events, id_name)
    return _make


@pytest.fixture
def keyword_language(scripted_language):
    """Events for "fn x" with "fn" as a keyword region."""
    return scripted_language([
        HighlightStart("keyword", "test"),
        Source(0, 2),
        HighlightEnd(),
        Source(2, 4),
    ])
