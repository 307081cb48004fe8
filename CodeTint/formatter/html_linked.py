# HTML formatter with CSS classes

from ..core.constants import DEFAULT_HIGHLIGHT_LINES_CLASS
from .html import HighlightLines, LineHtmlFormatter, pre_class, scope_to_class


class HtmlLinked(LineHtmlFormatter):
    """
    HTML with a CSS class per token.

    Pair the output with a stylesheet generated once by `Theme.css()`.
    Highlighted lines get `HighlightLines.class_`, or "highlighted" when unset.
    Theme-driven line styles do not apply here; a literal style string does.
    """

    def open_pre_tag(self, output) -> None:
        output.write(f'<pre class="{pre_class(self.pre_class)}">')

    def span_attrs(self, segment) -> str:
        if not segment.scope:
            return ""
        return f'class="{scope_to_class(segment.scope)}"'

    def line_attrs(self, spec: HighlightLines):
        style = spec.style if isinstance(spec.style, str) else None
        return spec.class_ or DEFAULT_HIGHLIGHT_LINES_CLASS, style
