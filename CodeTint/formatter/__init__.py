# CodeTint Formatters
#
# Four output formats share one highlight pipeline:
#   HtmlInline       - <span style="..."> per token
#   HtmlLinked       - <span class="..."> per token, styled by Theme.css()
#   HtmlMultiThemes  - one theme inline, the others as CSS variables
#   Terminal         - ANSI escape codes

import logging
from dataclasses import dataclass, field
from typing import Dict, Optional, Union

from ..core import config
from ..core import themes as theme_store
from ..core.exceptions import BuildError, ThemeNotFoundError
from ..core.themes import Theme
from .ansi import highlight_iter_with_ansi, hex_to_rgb, rgb_to_ansi, style_to_ansi, wrap_with_ansi
from .base import Formatter, HtmlFormatter
from .html import HighlightLines, HighlightLinesStyle, HtmlElement
from .html_inline import HtmlInline
from .html_linked import HtmlLinked
from .html_multi_themes import DefaultTheme, HtmlMultiThemes
from .terminal import Terminal

logger = logging.getLogger(__name__)

ThemeRef = Union[Theme, str, None]


@dataclass
class HtmlInlineOption:
    theme: ThemeRef = None
    pre_class: Optional[str] = None
    italic: bool = config.ITALIC
    include_highlights: bool = False
    highlight_lines: object = None
    header: Optional[HtmlElement] = None


@dataclass
class HtmlLinkedOption:
    pre_class: Optional[str] = None
    highlight_lines: object = None
    header: Optional[HtmlElement] = None


@dataclass
class HtmlMultiThemesOption:
    themes: Dict[str, ThemeRef] = field(default_factory=dict)
    # Theme name, "light-dark()", "false"/"none"/False, or None for the first theme
    default_theme: Union[str, bool, None] = None
    css_variable_prefix: str = config.CSS_VARIABLE_PREFIX
    pre_class: Optional[str] = None
    italic: bool = config.ITALIC
    include_highlights: bool = False
    highlight_lines: object = None
    header: Optional[HtmlElement] = None


@dataclass
class TerminalOption:
    theme: ThemeRef = None


FormatterOption = Union[HtmlInlineOption, HtmlLinkedOption, HtmlMultiThemesOption, TerminalOption]


def resolve_theme(theme: ThemeRef) -> Optional[Theme]:
    """Look up a theme given by name; unknown names degrade to no theme."""
    if theme is None or isinstance(theme, Theme):
        return theme
    try:
        return theme_store.get(theme)
    except ThemeNotFoundError:
        logger.warning("Theme %r not found, rendering without styles", theme)
        return None


def _resolve_theme_map(themes: Dict[str, ThemeRef]) -> Dict[str, Theme]:
    resolved = {}
    for name, theme in (themes or {}).items():
        if isinstance(theme, Theme):
            resolved[name] = theme
            continue
        try:
            resolved[name] = theme_store.get(theme if theme is not None else name)
        except ThemeNotFoundError as exc:
            raise BuildError(f"theme {name!r}: {exc}") from exc
    return resolved


def build_formatter(option: Optional[FormatterOption], language) -> Formatter:
    """
    Create the formatter for an option variant.

    Args:
        option: One of the *Option classes, None for HtmlInlineOption()
        language: Language configuration

    Returns:
        Formatter instance

    Raises:
        BuildError: invalid configuration
    """
    if option is None:
        option = HtmlInlineOption()

    if isinstance(option, HtmlInlineOption):
        return HtmlInline(
            language,
            theme=resolve_theme(option.theme),
            pre_class=option.pre_class,
            italic=option.italic,
            include_highlights=option.include_highlights,
            highlight_lines=option.highlight_lines,
            header=option.header,
        )
    if isinstance(option, HtmlLinkedOption):
        return HtmlLinked(
            language,
            pre_class=option.pre_class,
            highlight_lines=option.highlight_lines,
            header=option.header,
        )
    if isinstance(option, HtmlMultiThemesOption):
        return HtmlMultiThemes(
            language,
            themes=_resolve_theme_map(option.themes),
            default_theme=option.default_theme,
            css_variable_prefix=option.css_variable_prefix,
            pre_class=option.pre_class,
            italic=option.italic,
            include_highlights=option.include_highlights,
            highlight_lines=option.highlight_lines,
            header=option.header,
        )
    if isinstance(option, TerminalOption):
        return Terminal(language, theme=resolve_theme(option.theme))

    raise BuildError(f"unsupported formatter option: {type(option).__name__}")


__all__ = [
    # Options
    "FormatterOption",
    "HtmlInlineOption",
    "HtmlLinkedOption",
    "HtmlMultiThemesOption",
    "TerminalOption",
    "build_formatter",
    "resolve_theme",
    # Formatters
    "Formatter",
    "HtmlFormatter",
    "HtmlInline",
    "HtmlLinked",
    "HtmlMultiThemes",
    "Terminal",
    # HTML helpers
    "DefaultTheme",
    "HighlightLines",
    "HighlightLinesStyle",
    "HtmlElement",
    # ANSI helpers
    "hex_to_rgb",
    "rgb_to_ansi",
    "style_to_ansi",
    "wrap_with_ansi",
    "highlight_iter_with_ansi",
]
