# Terminal formatter

from io import StringIO
from typing import Optional

from ..core.highlight import highlight_iter
from ..core.themes import Theme
from .ansi import wrap_with_ansi
from .base import Formatter


class Terminal(Formatter):
    """
    ANSI-colored text for terminals. Text the theme does not style is
    written unchanged.
    """

    def __init__(self, language, theme: Optional[Theme] = None):
        self.language = language
        self.theme = theme

    def highlights(self, source: str, output) -> None:
        buffer = StringIO()

        def write_segment(text, start, end, scope, style):
            buffer.write(wrap_with_ansi(text, style))

        highlight_iter(source, self.language, self.theme, write_segment)
        output.write(buffer.getvalue())

    def format(self, source: str, output) -> None:
        self.highlights(source, output)
