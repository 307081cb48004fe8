# Style resolution module

"""
Turns a language's nested highlight events into flat styled segments.

Three entry points share one state machine:

- highlight_segments() returns every segment as a list.
- iter_segments() yields segments lazily.
- highlight_iter() pushes each segment to a callback as soon as it is known.

Example:
    from CodeTint.core import highlight_segments, Language, themes

    theme = themes.get("dracula")
    for segment in highlight_segments("let x = 1;", Language.guess("rust"), theme):
        print(segment.scope, repr(segment.text), segment.style.fg)
"""

from typing import Callable, Iterator, List, NamedTuple, Optional

from .events import HighlightEnd, HighlightStart, Source
from .exceptions import EventProcessingError, HighlightError, HighlighterInitError
from .themes import Style, Theme

# Scope reported for text outside every region
NO_SCOPE = ""

DEFAULT_STYLE = Style()


class StyledSegment(NamedTuple):
    text: str
    start: int
    end: int
    scope: str
    style: Style
    # Innermost language id, None outside every region
    language: Optional[str] = None


SegmentCallback = Callable[[str, int, int, str, Style], None]


def resolve_style(theme: Optional[Theme], scope: str, language: Optional[str]) -> Style:
    """
    Style for a region, trying the language-specialized scope first.

    Args:
        theme: Theme to resolve against, None for no styling
        scope: Region scope (e.g. "comment")
        language: Innermost language id (e.g. "lua"), or None

    Returns:
        Resolved Style, the default style when nothing matches
    """
    if theme is None:
        return DEFAULT_STYLE
    specialized = f"{scope}.{language}" if language else scope
    style = theme.get_style(specialized)
    return style if style is not None else DEFAULT_STYLE


def _open_events(source: str, language):
    try:
        return iter(language.highlight_events(source))
    except HighlightError:
        raise
    except Exception as exc:
        raise HighlighterInitError(getattr(language, "id_name", repr(language)), str(exc)) from exc


def iter_segments(source: str, language, theme: Optional[Theme] = None) -> Iterator[StyledSegment]:
    """
    Lazily yield styled segments as the event stream is consumed.

    Errors surface from the iteration that hits them, so a caller may have
    consumed earlier segments already.
    """
    events = _open_events(source, language)
    styles = [DEFAULT_STYLE]
    scopes = [NO_SCOPE]
    languages = [None]

    while True:
        try:
            event = next(events)
        except StopIteration:
            return
        except HighlightError:
            raise
        except Exception as exc:
            raise EventProcessingError(f"failed to get highlight event: {exc}") from exc

        if isinstance(event, HighlightStart):
            styles.append(resolve_style(theme, event.scope, event.language))
            scopes.append(event.scope)
            languages.append(event.language)
        elif isinstance(event, Source):
            if event.end > event.start:
                yield StyledSegment(
                    source[event.start:event.end], event.start, event.end, scopes[-1], styles[-1], languages[-1]
                )
        elif isinstance(event, HighlightEnd):
            # Unbalanced streams never pop the base frame
            if len(styles) > 1:
                styles.pop()
                scopes.pop()
                languages.pop()
        else:
            raise EventProcessingError(f"unknown highlight event: {event!r}")


def highlight_segments(source: str, language, theme: Optional[Theme] = None) -> List[StyledSegment]:
    """
    Highlight a source text into an ordered list of styled segments.

    Concatenating the segment texts reproduces the source exactly.

    Args:
        source: Source text
        language: Language configuration (see languages.Language)
        theme: Optional theme; without one every segment gets the default style

    Returns:
        List of StyledSegment

    Raises:
        HighlighterInitError: the language could not be initialized
        EventProcessingError: the event stream failed
    """
    return list(iter_segments(source, language, theme))


def highlight_iter(source: str, language, theme: Optional[Theme], callback: SegmentCallback) -> None:
    """
    Stream styled segments to a callback without materializing them.

    The callback receives (text, start, end, scope, style). An exception
    raised by the callback aborts the run and is re-raised as
    EventProcessingError.
    """
    for segment in iter_segments(source, language, theme):
        try:
            callback(segment.text, segment.start, segment.end, segment.scope, segment.style)
        except Exception as exc:
            raise EventProcessingError(f"segment callback failed: {exc}") from exc


class Highlighter:
    """Highlights sources for a fixed language and theme."""

    def __init__(self, language, theme: Optional[Theme] = None):
        self.language = language
        self.theme = theme

    def highlight(self, source: str) -> List[StyledSegment]:
        return highlight_segments(source, self.language, self.theme)

    def segments(self, source: str) -> Iterator[StyledSegment]:
        return iter_segments(source, self.language, self.theme)

    def stream(self, source: str, callback: SegmentCallback) -> None:
        highlight_iter(source, self.language, self.theme, callback)
