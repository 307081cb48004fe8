# Font handling module

import os
from functools import lru_cache
from typing import Optional
from PIL import ImageFont

# System monospace fonts by priority, as (regular, bold) pairs
MONOSPACE_FONTS = [
    # Linux
    ("/usr/share/fonts/truetype/dejavu/DejaVuSansMono.ttf",
     "/usr/share/fonts/truetype/dejavu/DejaVuSansMono-Bold.ttf"),
    ("/usr/share/fonts/truetype/liberation/LiberationMono-Regular.ttf",
     "/usr/share/fonts/truetype/liberation/LiberationMono-Bold.ttf"),
    ("/usr/share/fonts/truetype/ubuntu/UbuntuMono-R.ttf",
     "/usr/share/fonts/truetype/ubuntu/UbuntuMono-B.ttf"),
    # macOS
    ("/System/Library/Fonts/Menlo.ttc", None),
    ("/Library/Fonts/Courier New.ttf", "/Library/Fonts/Courier New Bold.ttf"),
    # Windows
    ("C:/Windows/Fonts/consola.ttf", "C:/Windows/Fonts/consolab.ttf"),
    ("C:/Windows/Fonts/cour.ttf", "C:/Windows/Fonts/courbd.ttf"),
]


def _system_fonts():
    for regular, bold in MONOSPACE_FONTS:
        if os.path.exists(regular):
            return regular, bold if bold and os.path.exists(bold) else None
    return None, None


@lru_cache(maxsize=32)
def get_font(font_size: int, font_path: str = None):
    """
    Get monospace font object.

    Args:
        font_size: Font size in pixels
        font_path: Optional font path, if None will search system fonts

    Returns:
        ImageFont object
    """
    if font_path and os.path.exists(font_path):
        return ImageFont.truetype(font_path, font_size)

    regular, _ = _system_fonts()
    if regular:
        return ImageFont.truetype(regular, font_size)

    return ImageFont.load_default(size=font_size)


@lru_cache(maxsize=32)
def get_bold_font(font_size: int, font_path: str = None) -> Optional[ImageFont.FreeTypeFont]:
    """Bold face matching get_font(), or None when only the regular face exists."""
    if font_path:
        return None
    _, bold = _system_fonts()
    return ImageFont.truetype(bold, font_size) if bold else None
