# HTML formatter with inline styles

from typing import Optional

from ..core.constants import HIGHLIGHTED_SCOPE, VISUAL_SCOPE
from ..core.themes import Theme
from .html import HighlightLines, HighlightLinesStyle, LineHtmlFormatter, escape, pre_class


def theme_line_style(theme: Optional[Theme], italic: bool) -> Optional[str]:
    """Inline style for highlighted lines taken from the theme."""
    if theme is None:
        return None
    style = theme.get_style(HIGHLIGHTED_SCOPE) or theme.get_style(VISUAL_SCOPE)
    if style is None:
        return None
    return style.css(italic, " ") or None


class HtmlInline(LineHtmlFormatter):
    """
    HTML with a `style` attribute on every token.

    Args:
        language: Language configuration
        theme: Theme providing the colors, None for unstyled markup
        pre_class: Extra class for the `pre` element
        italic: Emit `font-style: italic`
        include_highlights: Add a `data-highlight` attribute with the scope name
        highlight_lines: Lines to emphasize
        header: Optional wrapper element
    """

    def __init__(
        self,
        language,
        theme: Optional[Theme] = None,
        pre_class=None,
        italic: bool = False,
        include_highlights: bool = False,
        highlight_lines=None,
        header=None,
    ):
        super().__init__(language, pre_class, highlight_lines, header)
        self.theme = theme
        self.italic = italic
        self.include_highlights = include_highlights

    @property
    def segment_theme(self):
        return self.theme

    def open_pre_tag(self, output) -> None:
        pre_style = self.theme.pre_style(" ") if self.theme else None
        style_attr = f' style="{escape(pre_style)}"' if pre_style else ""
        output.write(f'<pre class="{pre_class(self.pre_class)}"{style_attr}>')

    def span_attrs(self, segment) -> str:
        attrs = []
        if self.include_highlights and segment.scope:
            attrs.append(f'data-highlight="{escape(segment.scope)}"')
        css = segment.style.css(self.italic, " ")
        if css:
            attrs.append(f'style="{escape(css)}"')
        return " ".join(attrs)

    def line_attrs(self, spec: HighlightLines):
        if spec.style is HighlightLinesStyle.THEME:
            style = theme_line_style(self.theme, self.italic)
        else:
            style = spec.style
        return spec.class_, style
