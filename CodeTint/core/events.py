# Highlight event types produced by language configurations

from typing import NamedTuple, Union


class HighlightStart(NamedTuple):
    """Opens a region styled by `scope`; `language` is the innermost parse context."""

    scope: str
    language: str


class Source(NamedTuple):
    """A run of source text, `source[start:end]`, styled by the innermost open region."""

    start: int
    end: int


class HighlightEnd(NamedTuple):
    """Closes the most recently opened region."""


HighlightEvent = Union[HighlightStart, Source, HighlightEnd]
