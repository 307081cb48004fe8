# ANSI escape code helpers

from typing import List, Optional, Tuple

from ..core.constants import ANSI_RESET
from ..core.highlight import highlight_iter
from ..core.themes import Style, Theme, UnderlineStyle

UNDERLINE_CODES = {
    UnderlineStyle.NONE: "",
    UnderlineStyle.SOLID: "\x1b[4m",
    UnderlineStyle.WAVY: "\x1b[4:3m",
    UnderlineStyle.DOUBLE: "\x1b[4:2m",
    UnderlineStyle.DOTTED: "\x1b[4:4m",
    UnderlineStyle.DASHED: "\x1b[4:5m",
}

_HEX_DIGITS = set("0123456789abcdefABCDEF")


def hex_to_rgb(hex_color: str) -> Optional[Tuple[int, int, int]]:
    """
    Parse "#rrggbb" (the "#" is optional).

    Returns:
        (r, g, b), or None for anything that is not exactly six hex digits
    """
    value = hex_color[1:] if hex_color.startswith("#") else hex_color
    if len(value) != 6 or not set(value) <= _HEX_DIGITS:
        return None
    return int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16)


def rgb_to_ansi(r: int, g: int, b: int, is_background: bool) -> str:
    """24-bit color escape code."""
    if is_background:
        return f"\x1b[48;2;{r};{g};{b}m"
    return f"\x1b[38;2;{r};{g};{b}m"


def style_to_ansi(style: Style) -> str:
    """
    Escape codes for a style, in order: foreground, background, bold,
    italic, underline, strikethrough. Unparseable colors are skipped.
    """
    codes = []

    if style.fg:
        rgb = hex_to_rgb(style.fg)
        if rgb:
            codes.append(rgb_to_ansi(*rgb, is_background=False))
    if style.bg:
        rgb = hex_to_rgb(style.bg)
        if rgb:
            codes.append(rgb_to_ansi(*rgb, is_background=True))
    if style.bold:
        codes.append("\x1b[1m")
    if style.italic:
        codes.append("\x1b[3m")
    codes.append(UNDERLINE_CODES[style.text_decoration.underline])
    if style.text_decoration.strikethrough:
        codes.append("\x1b[9m")

    return "".join(codes)


def wrap_with_ansi(text: str, style: Style) -> str:
    """
    Wrap text in the escape codes of a style.

    With a background color, the style is reset before every newline and
    re-applied after it (only when more text follows), so the background
    does not fill the rest of the terminal row.
    """
    codes = style_to_ansi(style)
    if not codes:
        return text

    if not style.bg:
        return f"{ANSI_RESET}{codes}{text}{ANSI_RESET}"

    parts = [ANSI_RESET, codes]
    last = len(text) - 1
    for i, ch in enumerate(text):
        if ch == "\n":
            parts.append(ANSI_RESET)
            parts.append("\n")
            if i < last:
                parts.append(codes)
        else:
            parts.append(ch)
    if not text.endswith("\n"):
        parts.append(ANSI_RESET)

    return "".join(parts)


def highlight_iter_with_ansi(source: str, language, theme: Optional[Theme]) -> List[Tuple[str, Tuple[int, int]]]:
    """
    Highlight a source into (ansi_text, (start, end)) pairs, one per segment.
    """
    segments = []

    def collect(text, start, end, scope, style):
        segments.append((wrap_with_ansi(text, style), (start, end)))

    highlight_iter(source, language, theme, collect)
    return segments
