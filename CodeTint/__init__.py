# CodeTint - Syntax highlighting to HTML, terminal text and images
#
# Simple usage:
#   from CodeTint import highlight, Options, HtmlInlineOption
#   html = highlight("fn main() {}", Options("rust", HtmlInlineOption(theme="dracula")))

from .api import Options, highlight, write_highlight, render_code_to_images
from .core import (
    themes,
    Appearance,
    Highlighter,
    Language,
    Style,
    StyledSegment,
    TextDecoration,
    Theme,
    ThemeRegistry,
    UnderlineStyle,
    highlight_iter,
    highlight_segments,
    iter_segments,
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
from .formatter import (
    HighlightLines,
    HighlightLinesStyle,
    HtmlElement,
    HtmlInlineOption,
    HtmlLinkedOption,
    HtmlMultiThemesOption,
    TerminalOption,
    build_formatter,
)

__version__ = "1.0.0"

__all__ = [
    # High-level API
    "Options",
    "highlight",
    "write_highlight",
    "render_code_to_images",
    # Formatter options
    "HtmlInlineOption",
    "HtmlLinkedOption",
    "HtmlMultiThemesOption",
    "TerminalOption",
    "HighlightLines",
    "HighlightLinesStyle",
    "HtmlElement",
    "build_formatter",
    # Themes
    "themes",
    "Appearance",
    "Style",
    "TextDecoration",
    "Theme",
    "ThemeRegistry",
    "UnderlineStyle",
    # Highlighting
    "Highlighter",
    "Language",
    "StyledSegment",
    "highlight_iter",
    "highlight_segments",
    "iter_segments",
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
