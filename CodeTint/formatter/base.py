# Formatter interfaces

from io import StringIO


class Formatter:
    """
    Renders a source text into some highlighted output.

    `output` is any text stream with a `write(str)` method. Formatters render
    into a buffer first, so a failed run writes nothing.
    """

    def format(self, source: str, output) -> None:
        """Write the complete highlighted document."""
        raise NotImplementedError

    def highlights(self, source: str, output) -> None:
        """Write only the highlighted code, without any surrounding container."""
        raise NotImplementedError

    def render(self, source: str) -> str:
        buffer = StringIO()
        self.format(source, buffer)
        return buffer.getvalue()


class HtmlFormatter(Formatter):
    def open_pre_tag(self, output) -> None:
        raise NotImplementedError

    def open_code_tag(self, output) -> None:
        raise NotImplementedError

    def closing_tags(self, output) -> None:
        raise NotImplementedError
