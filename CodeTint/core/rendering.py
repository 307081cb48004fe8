# Image rendering module

from typing import Iterable, List, Optional, Tuple
from PIL import Image as PIL_Image, ImageChops, ImageDraw

from .constants import (
    DEFAULT_FONT_SIZE,
    DEFAULT_IMAGE_HEIGHT,
    DEFAULT_IMAGE_WIDTH,
    DEFAULT_LINE_HEIGHT,
    DEFAULT_MARGIN_PX,
    TAB_SPACES,
)
from .fonts import get_bold_font, get_font
from .highlight import StyledSegment
from .themes import Theme, UnderlineStyle

DEFAULT_BG = (255, 255, 255)
DEFAULT_FG = (0, 0, 0)


def _rgb(color: Optional[str], default: Optional[Tuple[int, int, int]]):
    # Same rules as the terminal formatter: only "#rrggbb" counts as a color
    if not color:
        return default
    value = color[1:] if color.startswith("#") else color
    if len(value) != 6:
        return default
    try:
        return int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16)
    except ValueError:
        return default


def crop_whitespace(img: PIL_Image.Image, bg_color: Tuple[int, int, int], keep_margin: int) -> PIL_Image.Image:
    """
    Crop background-colored area from the right and bottom of a page.

    Args:
        img: Rendered page
        bg_color: Page background color
        keep_margin: Pixels of background to keep around the text

    Returns:
        Cropped image
    """
    background = PIL_Image.new("RGB", img.size, bg_color)
    bbox = ImageChops.difference(img.convert("RGB"), background).getbbox()
    if bbox is None:
        return img
    _, _, right, bottom = bbox
    return img.crop((0, 0, min(img.width, right + keep_margin), min(img.height, bottom + keep_margin)))


def segments_to_images(
    segments: Iterable[StyledSegment],
    theme: Optional[Theme] = None,
    width: int = DEFAULT_IMAGE_WIDTH,
    height: int = DEFAULT_IMAGE_HEIGHT,
    font_size: int = DEFAULT_FONT_SIZE,
    line_height: float = DEFAULT_LINE_HEIGHT,
    margin_px: int = DEFAULT_MARGIN_PX,
    font_path: str = None,
    should_crop_whitespace: bool = False,
) -> List[PIL_Image.Image]:
    """
    Draw styled segments onto images (may produce multiple pages).

    Long lines wrap at the right margin. Page and default text colors come
    from the theme's "normal" scope.

    Args:
        segments: Styled segments in source order
        theme: Theme for the page colors, None for black on white
        width: Image width in pixels
        height: Image height in pixels
        font_size: Font size
        line_height: Line height multiplier
        margin_px: Margin in pixels
        font_path: Font file path
        should_crop_whitespace: Whether to crop unused area of each page

    Returns:
        List of PIL Images
    """
    bg_color = _rgb(theme.bg() if theme else None, DEFAULT_BG)
    text_color = _rgb(theme.fg() if theme else None, DEFAULT_FG)

    font = get_font(font_size, font_path)
    bold_font = get_bold_font(font_size, font_path)
    line_height_px = max(1, int(font_size * line_height))
    max_lines_per_page = max(1, int((height - 2 * margin_px) / line_height_px))
    right_edge = width - margin_px

    pages = []
    img = PIL_Image.new("RGB", (width, height), color=bg_color)
    draw = ImageDraw.Draw(img)
    current_x = margin_px
    current_y = margin_px
    current_page_lines = 0

    def _finish_page():
        nonlocal img, draw, current_y, current_page_lines
        pages.append(crop_whitespace(img, bg_color, margin_px) if should_crop_whitespace else img)
        img = PIL_Image.new("RGB", (width, height), color=bg_color)
        draw = ImageDraw.Draw(img)
        current_y = margin_px
        current_page_lines = 0

    def _next_line():
        nonlocal current_x, current_y, current_page_lines
        current_x = margin_px
        current_y += line_height_px
        current_page_lines += 1
        if current_page_lines >= max_lines_per_page:
            _finish_page()

    for segment in segments:
        style = segment.style
        fg = _rgb(style.fg, text_color)
        bg = _rgb(style.bg, None)
        decoration = style.text_decoration

        for char in segment.text.replace("\t", TAB_SPACES):
            if char == "\n":
                _next_line()
                continue

            char_w = draw.textlength(char, font=font)
            if current_x + char_w > right_edge and current_x > margin_px:
                _next_line()

            if bg:
                draw.rectangle(
                    [current_x, current_y, current_x + char_w, current_y + line_height_px - 1], fill=bg
                )
            if style.bold and bold_font is not None:
                draw.text((current_x, current_y), char, font=bold_font, fill=fg)
            else:
                # Fake bold by drawing twice, one pixel apart
                for dx in ([0, 1] if style.bold else [0]):
                    draw.text((current_x + dx, current_y), char, font=font, fill=fg)
            if decoration.underline is not UnderlineStyle.NONE:
                underline_y = current_y + font_size
                draw.line([(current_x, underline_y), (current_x + char_w, underline_y)], fill=fg)
            if decoration.strikethrough:
                strike_y = current_y + font_size // 2
                draw.line([(current_x, strike_y), (current_x + char_w, strike_y)], fill=fg)
            current_x += char_w

    # Save last page
    if current_page_lines > 0 or current_x > margin_px or not pages:
        pages.append(crop_whitespace(img, bg_color, margin_px) if should_crop_whitespace else img)

    return pages
