# CodeTint Core Module
# Theme store, language configuration and style resolution

from . import themes
from .constants import (
    ANSI_RESET,
    CLASSES,
    DEFAULT_CSS_VARIABLE_PREFIX,
    HIGHLIGHT_NAMES,
)
from .events import HighlightEnd, HighlightEvent, HighlightStart, Source
from .exceptions import (
    BuildError,
    CodeTintError,
    EventProcessingError,
    HighlightError,
    HighlighterInitError,
    InvalidThemeJsonError,
    ThemeError,
    ThemeFileNotFoundError,
    ThemeFileReadError,
    ThemeNotFoundError,
)
from .highlight import (
    Highlighter,
    StyledSegment,
    highlight_iter,
    highlight_segments,
    iter_segments,
    resolve_style,
)
from .languages import PLAINTEXT, Language
from .rendering import segments_to_images
from .themes import Appearance, Style, TextDecoration, Theme, ThemeRegistry, UnderlineStyle

__all__ = [
    # Constants
    "ANSI_RESET",
    "CLASSES",
    "DEFAULT_CSS_VARIABLE_PREFIX",
    "HIGHLIGHT_NAMES",
    # Themes
    "themes",
    "Appearance",
    "Style",
    "TextDecoration",
    "Theme",
    "ThemeRegistry",
    "UnderlineStyle",
    # Languages and events
    "Language",
    "PLAINTEXT",
    "HighlightEnd",
    "HighlightEvent",
    "HighlightStart",
    "Source",
    # Highlighting
    "Highlighter",
    "StyledSegment",
    "highlight_iter",
    "highlight_segments",
    "iter_segments",
    "resolve_style",
    # Rendering
    "segments_to_images",
    # Errors
    "BuildError",
    "CodeTintError",
    "EventProcessingError",
    "HighlightError",
    "HighlighterInitError",
    "InvalidThemeJsonError",
    "ThemeError",
    "ThemeFileNotFoundError",
    "ThemeFileReadError",
    "ThemeNotFoundError",
]
