# CodeTint Simplified API

from dataclasses import dataclass, field
from io import StringIO
from typing import List, Optional, Union
from PIL import Image as PIL_Image

from .core import Language, Theme, highlight_segments, segments_to_images
from .core.constants import (
    DEFAULT_FONT_SIZE,
    DEFAULT_IMAGE_HEIGHT,
    DEFAULT_IMAGE_WIDTH,
    DEFAULT_MARGIN_PX,
)
from .formatter import FormatterOption, HtmlInlineOption, build_formatter, resolve_theme


@dataclass
class Options:
    """
    Highlight options.

    Args:
        lang_or_file: Language name ("rust") or file name ("main.rs"); None guesses from the source
        formatter: One of the formatter option variants
    """

    lang_or_file: Optional[str] = None
    formatter: FormatterOption = field(default_factory=HtmlInlineOption)


def highlight(source: str, options: Optional[Options] = None) -> str:
    """
    Highlight source code.

    Unknown languages render as plain text and unknown theme names render
    without styles.

    Args:
        source: Source code text
        options: Language and formatter options

    Returns:
        Highlighted output (HTML or ANSI text)
    """
    buffer = StringIO()
    write_highlight(buffer, source, options)
    return buffer.getvalue()


def write_highlight(output, source: str, options: Optional[Options] = None) -> None:
    """Highlight source code into a text stream."""
    options = options or Options()
    language = Language.guess(options.lang_or_file, source)
    formatter = build_formatter(options.formatter, language)
    formatter.format(source, output)


def render_code_to_images(
    code: str,
    language: Optional[str] = None,
    theme: Union[Theme, str, None] = None,
    width: int = DEFAULT_IMAGE_WIDTH,
    height: int = DEFAULT_IMAGE_HEIGHT,
    font_size: int = DEFAULT_FONT_SIZE,
    margin_px: int = DEFAULT_MARGIN_PX,
    should_crop_whitespace: bool = False,
) -> List[PIL_Image.Image]:
    """
    Render highlighted code to images.

    Args:
        code: Source code text
        language: Language name or file name, None to guess
        theme: Theme or theme name
        width: Image width
        height: Image height
        font_size: Font size
        margin_px: Margin in pixels
        should_crop_whitespace: Whether to crop unused page area

    Returns:
        List of PIL images
    """
    resolved = resolve_theme(theme)
    segments = highlight_segments(code, Language.guess(language, code), resolved)
    return segments_to_images(
        segments,
        theme=resolved,
        width=width,
        height=height,
        font_size=font_size,
        margin_px=margin_px,
        should_crop_whitespace=should_crop_whitespace,
    )
