# Shared HTML formatting helpers

"""
Building blocks shared by the HTML formatters.

Every HTML formatter renders the same shape:

    [header open]<pre class="athl ..."><code class="language-x" ...>
    <div class="line" data-line="1">...\\n</div>
    ...
    </code></pre>[header close]

Subclasses of LineHtmlFormatter only decide the attributes of the `pre`
element, of each token span and of each line.
"""

from enum import Enum
from io import StringIO
from typing import Iterable, List, NamedTuple, Optional, Sequence, Tuple, Union

from ..core.constants import CLASSES, HIGHLIGHT_NAMES, LINE_CLASS, PRE_CLASS
from ..core.highlight import StyledSegment, highlight_segments
from ..core.themes import TextDecoration
from .base import HtmlFormatter

_CLASS_BY_SCOPE = dict(zip(HIGHLIGHT_NAMES, CLASSES))

_HTML_ESCAPES = {
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "'": "&#39;",
}


class HtmlElement(NamedTuple):
    """Header wrapper placed around the whole `pre` block."""

    open_tag: str
    close_tag: str


class HighlightLinesStyle(Enum):
    # Resolve the style from the theme's "highlighted" (or "visual") scope
    THEME = "theme"


LineRange = Union[int, Tuple[int, int], range]


class HighlightLines:
    """
    Lines to emphasize.

    Args:
        lines: 1-based line numbers or inclusive (start, end) ranges
        style: HighlightLinesStyle.THEME, a literal CSS declaration string, or None
        class_: Extra class added to highlighted lines
    """

    def __init__(
        self,
        lines: Iterable[LineRange],
        style: Union[HighlightLinesStyle, str, None] = HighlightLinesStyle.THEME,
        class_: Optional[str] = None,
    ):
        self.ranges = [_normalize_range(line) for line in lines]
        self.style = style
        self.class_ = class_

    def __repr__(self):
        return f"HighlightLines({self.ranges!r}, style={self.style!r}, class_={self.class_!r})"

    def contains(self, line_number: int) -> bool:
        return any(start <= line_number <= end for start, end in self.ranges)


def _normalize_range(line: LineRange) -> Tuple[int, int]:
    if isinstance(line, int):
        return (line, line)
    if isinstance(line, range):
        return (line.start, line.stop - 1)
    start, end = line
    return (int(start), int(end))


def find_highlight_lines(
    highlight_lines: Union[HighlightLines, Sequence[HighlightLines], None], line_number: int
) -> Optional[HighlightLines]:
    """First highlight spec containing the line; overlapping specs never merge."""
    if highlight_lines is None:
        return None
    if isinstance(highlight_lines, HighlightLines):
        highlight_lines = [highlight_lines]
    for spec in highlight_lines:
        if spec.contains(line_number):
            return spec
    return None


def escape(text: str) -> str:
    """Escape HTML special characters."""
    return "".join(_HTML_ESCAPES.get(c, c) for c in text)


def escape_braces(text: str) -> str:
    """Escape curly braces so the output survives template engines."""
    return text.replace("{", "&lbrace;").replace("}", "&rbrace;")


def scope_to_class(scope: str) -> str:
    return _CLASS_BY_SCOPE.get(scope, "text")


def sanitize_theme_name(name: str) -> str:
    """Make a theme name safe for a CSS custom property name."""
    return "".join(c if (c.isascii() and c.isalnum()) or c in "-_" else "-" for c in name)


def text_decoration(decoration: TextDecoration) -> str:
    """CSS text-decoration value, "none" when undecorated."""
    return decoration.css_value() or "none"


def span(text: str, attrs: str) -> str:
    escaped = escape(text)
    if not attrs:
        return escaped
    return f"<span {attrs}>{escaped}</span>"


def split_lines(segments: Iterable[StyledSegment], span_attrs) -> List[str]:
    """
    Render segments into per-line markup.

    A segment spanning a line break is split, so spans never cross lines.
    Every returned line ends with a newline; an empty source yields one
    empty line.

    Args:
        segments: Styled segments in source order
        span_attrs: Callable returning the attribute string for a segment

    Returns:
        List of line contents
    """
    lines = []
    current = []

    for segment in segments:
        attrs = span_attrs(segment)
        parts = segment.text.split("\n")
        for i, part in enumerate(parts):
            if i > 0:
                current.append("\n")
                lines.append("".join(current))
                current = []
            if part:
                current.append(span(part, attrs))

    if current or not lines:
        current.append("\n")
        lines.append("".join(current))

    return lines


def wrap_line(line_number: int, content: str, extra_class: Optional[str] = None, style: Optional[str] = None) -> str:
    class_attr = f"{LINE_CLASS} {escape(extra_class)}" if extra_class else LINE_CLASS
    style_attr = f' style="{escape(style)}"' if style else ""
    return f'<div class="{class_attr}"{style_attr} data-line="{line_number}">{content}</div>'


def pre_class(extra: Optional[str] = None) -> str:
    return f"{PRE_CLASS} {escape(extra)}" if extra else PRE_CLASS


class LineHtmlFormatter(HtmlFormatter):
    """
    Base class for line-oriented HTML formatters.

    Args:
        language: Language configuration
        pre_class: Extra class for the `pre` element
        highlight_lines: HighlightLines or a list of them
        header: Optional HtmlElement wrapped around the output
    """

    # Theme the segments are resolved against (None means unstyled segments)
    segment_theme = None

    def __init__(self, language, pre_class=None, highlight_lines=None, header: Optional[HtmlElement] = None):
        self.language = language
        self.pre_class = pre_class
        self.highlight_lines = highlight_lines
        self.header = header

    def span_attrs(self, segment: StyledSegment) -> str:
        raise NotImplementedError

    def line_attrs(self, spec: HighlightLines) -> Tuple[Optional[str], Optional[str]]:
        """(extra class, style) for a highlighted line."""
        raise NotImplementedError

    def segments(self, source: str) -> List[StyledSegment]:
        return highlight_segments(source, self.language, self.segment_theme)

    def open_code_tag(self, output) -> None:
        output.write(f'<code class="language-{escape(self.language.id_name)}" translate="no" tabindex="0">')

    def closing_tags(self, output) -> None:
        output.write("</code></pre>")

    def highlights(self, source: str, output) -> None:
        lines = split_lines(self.segments(source), self.span_attrs)
        buffer = StringIO()
        for i, line in enumerate(lines):
            line_number = i + 1
            spec = find_highlight_lines(self.highlight_lines, line_number)
            extra_class, style = self.line_attrs(spec) if spec is not None else (None, None)
            buffer.write(wrap_line(line_number, escape_braces(line), extra_class, style))
        output.write(buffer.getvalue())

    def format(self, source: str, output) -> None:
        buffer = StringIO()
        if self.header is not None:
            buffer.write(self.header.open_tag)
        self.open_pre_tag(buffer)
        self.open_code_tag(buffer)
        self.highlights(source, buffer)
        self.closing_tags(buffer)
        if self.header is not None:
            buffer.write(self.header.close_tag)
        output.write(buffer.getvalue())
