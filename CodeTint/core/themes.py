# Theme store module

import json
import logging
import os
import threading
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional

from .config import theme_dirs
from .constants import NORMAL_SCOPE
from .exceptions import (
    InvalidThemeJsonError,
    ThemeFileNotFoundError,
    ThemeFileReadError,
    ThemeNotFoundError,
)

logger = logging.getLogger(__name__)


class UnderlineStyle(Enum):
    """Underline variants, named after Neovim's underline attributes."""

    NONE = "none"
    SOLID = "solid"
    WAVY = "wavy"
    DOUBLE = "double"
    DOTTED = "dotted"
    DASHED = "dashed"


class Appearance(Enum):
    LIGHT = "light"
    DARK = "dark"

    def __str__(self) -> str:
        return self.value


# JSON flag for each underline style, in precedence order (most specific first)
UNDERLINE_FLAGS = [
    ("undercurl", UnderlineStyle.WAVY),
    ("underdouble", UnderlineStyle.DOUBLE),
    ("underdotted", UnderlineStyle.DOTTED),
    ("underdashed", UnderlineStyle.DASHED),
    ("underline", UnderlineStyle.SOLID),
]

UNDERLINE_CSS = {
    UnderlineStyle.NONE: None,
    UnderlineStyle.SOLID: "underline",
    UnderlineStyle.WAVY: "underline wavy",
    UnderlineStyle.DOUBLE: "underline double",
    UnderlineStyle.DOTTED: "underline dotted",
    UnderlineStyle.DASHED: "underline dashed",
}


@dataclass(frozen=True)
class TextDecoration:
    underline: UnderlineStyle = UnderlineStyle.NONE
    strikethrough: bool = False

    def css_value(self) -> Optional[str]:
        """Value for a `text-decoration` declaration, or None when undecorated."""
        underline = UNDERLINE_CSS[self.underline]
        if underline and self.strikethrough:
            return f"{underline} line-through"
        if underline:
            return underline
        if self.strikethrough:
            return "line-through"
        return None


@dataclass(frozen=True)
class Style:
    """
    Visual style of a highlight scope.

    Colors are hex strings such as "#ff79c6". The default instance means
    "no styling".
    """

    fg: Optional[str] = None
    bg: Optional[str] = None
    bold: bool = False
    italic: bool = False
    text_decoration: TextDecoration = field(default_factory=TextDecoration)

    @classmethod
    def from_dict(cls, data: dict, scope: str = "") -> "Style":
        """
        Build a style from its JSON object.

        Args:
            data: Parsed JSON object with optional fg/bg/bold/italic/underline* fields
            scope: Scope name, used in error messages

        Returns:
            Style instance
        """
        if not isinstance(data, dict):
            raise InvalidThemeJsonError(f"highlights.{scope}: expected an object")

        for key in ("fg", "bg"):
            value = data.get(key)
            if value is not None and not isinstance(value, str):
                raise InvalidThemeJsonError(f"highlights.{scope}.{key}: expected a string")

        flags = {}
        for key in ("bold", "italic", "strikethrough") + tuple(flag for flag, _ in UNDERLINE_FLAGS):
            value = data.get(key, False)
            if value is None:
                value = False
            if not isinstance(value, bool):
                raise InvalidThemeJsonError(f"highlights.{scope}.{key}: expected a boolean")
            flags[key] = value

        underline = UnderlineStyle.NONE
        for flag, style in UNDERLINE_FLAGS:
            if flags[flag]:
                underline = style
                break

        return cls(
            fg=data.get("fg"),
            bg=data.get("bg"),
            bold=flags["bold"],
            italic=flags["italic"],
            text_decoration=TextDecoration(underline, flags["strikethrough"]),
        )

    def to_dict(self) -> dict:
        data = {}
        if self.fg is not None:
            data["fg"] = self.fg
        if self.bg is not None:
            data["bg"] = self.bg
        if self.bold:
            data["bold"] = True
        if self.italic:
            data["italic"] = True
        for flag, style in UNDERLINE_FLAGS:
            if self.text_decoration.underline is style:
                data[flag] = True
        if self.text_decoration.strikethrough:
            data["strikethrough"] = True
        return data

    def css(self, enable_italic: bool, separator: str) -> str:
        """
        Render CSS declarations for this style.

        Declarations come in a fixed order: color, background-color,
        font-weight, font-style, text-decoration.

        Args:
            enable_italic: Whether italic text may be emitted
            separator: String placed between declarations

        Returns:
            CSS declarations, empty when nothing applies
        """
        rules = []

        if self.fg is not None:
            rules.append(f"color: {self.fg};")
        if self.bg is not None:
            rules.append(f"background-color: {self.bg};")
        if self.bold:
            rules.append("font-weight: bold;")
        if enable_italic and self.italic:
            rules.append("font-style: italic;")

        decoration = self.text_decoration.css_value()
        if decoration:
            rules.append(f"text-decoration: {decoration};")

        return separator.join(rules)


@dataclass(frozen=True, eq=True)
class Theme:
    """
    A named, versioned mapping from highlight scopes to styles.

    Themes are immutable once built and can be shared freely across threads.
    """

    name: str
    appearance: Appearance
    revision: str
    highlights: Mapping[str, Style] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "highlights", MappingProxyType(dict(self.highlights)))

    __hash__ = None

    def get_style(self, scope: str) -> Optional[Style]:
        """
        Get the style for a scope, falling back to parent scopes.

        "markup.heading.2.markdown" is looked up as itself, then
        "markup.heading.2", "markup.heading" and finally "markup". Callers
        wanting language-specific styles append the language themselves
        (e.g. "comment.lua").

        Args:
            scope: Dot-separated scope name

        Returns:
            The first matching Style, or None when no ancestor is defined
        """
        while True:
            style = self.highlights.get(scope)
            if style is not None:
                return style
            if "." not in scope:
                return None
            scope = scope.rsplit(".", 1)[0]

    def fg(self) -> Optional[str]:
        style = self.get_style(NORMAL_SCOPE)
        return style.fg if style else None

    def bg(self) -> Optional[str]:
        style = self.get_style(NORMAL_SCOPE)
        return style.bg if style else None

    def pre_style(self, separator: str) -> Optional[str]:
        """Container declarations built from the "normal" scope colors."""
        rules = []
        fg = self.fg()
        bg = self.bg()
        if fg is not None:
            rules.append(f"color: {fg};")
        if bg is not None:
            rules.append(f"background-color: {bg};")
        return separator.join(rules) if rules else None

    def css(self, enable_italic: bool) -> str:
        """
        Generate a stylesheet for the linked HTML formatter.

        Scopes are emitted in ascending order, so output is stable across runs.
        """
        rules = [f"/* {self.name}\n * revision: {self.revision}\n */\n\npre.athl"]

        pre_style = self.pre_style("\n  ")
        if pre_style:
            rules.append(f" {{\n  {pre_style}\n}}\n")
        else:
            rules.append(" {}\n")

        for scope in sorted(self.highlights):
            style_css = self.highlights[scope].css(enable_italic, "\n  ")
            if style_css:
                rules.append(f".{scope.replace('.', '-')} {{\n  {style_css}\n}}\n")

        return "".join(rules)

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "appearance": self.appearance.value,
            "revision": self.revision,
            "highlights": {scope: self.highlights[scope].to_dict() for scope in sorted(self.highlights)},
        }

    def to_json(self, indent: Optional[int] = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent)


def from_dict(data: dict) -> Theme:
    """Build and validate a theme from parsed JSON data."""
    if not isinstance(data, dict):
        raise InvalidThemeJsonError("expected a JSON object at top level")

    for key in ("name", "appearance", "revision", "highlights"):
        if key not in data:
            raise InvalidThemeJsonError(f"missing field `{key}`")

    name = data["name"]
    revision = data["revision"]
    if not isinstance(name, str) or not name:
        raise InvalidThemeJsonError("theme name cannot be empty")
    if not isinstance(revision, str) or not revision:
        raise InvalidThemeJsonError("theme revision cannot be empty")

    try:
        appearance = Appearance(data["appearance"])
    except ValueError:
        raise InvalidThemeJsonError(
            f"unknown appearance {data['appearance']!r}, expected 'light' or 'dark'"
        ) from None

    highlights = data["highlights"]
    if not isinstance(highlights, dict):
        raise InvalidThemeJsonError("highlights: expected an object")

    return Theme(
        name=name,
        appearance=appearance,
        revision=revision,
        highlights={scope: Style.from_dict(style, scope) for scope, style in highlights.items()},
    )


def from_json(text: str) -> Theme:
    """
    Create a Theme from a JSON string.

    Args:
        text: Theme definition, see the bundled themes for the format

    Returns:
        Theme instance

    Raises:
        InvalidThemeJsonError: malformed JSON, or empty name/revision
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise InvalidThemeJsonError(str(exc)) from exc
    return from_dict(data)


def from_file(path: str) -> Theme:
    """Load a Theme from a JSON file."""
    path = os.fspath(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            text = f.read()
    except FileNotFoundError:
        raise ThemeFileNotFoundError(path) from None
    except (OSError, UnicodeDecodeError) as exc:
        raise ThemeFileReadError(f"{path}: {exc}") from exc
    return from_json(text)


class ThemeRegistry:
    """
    Read-only set of named themes, loaded on first access.

    Args:
        paths: Theme JSON files or directories of them, loaded in order
        themes: Already-built themes added after the paths
    """

    def __init__(self, paths: Optional[Iterable[str]] = None, themes: Optional[Iterable[Theme]] = None):
        # Configured theme directories may be missing; explicit paths must exist
        self._optional_dirs = paths is None
        self._paths = list(paths) if paths is not None else theme_dirs()
        self._extra = list(themes or [])
        self._themes: Optional[Mapping[str, Theme]] = None
        self._lock = threading.Lock()

    def _load(self) -> Mapping[str, Theme]:
        themes: Dict[str, Theme] = {}
        for path in self._paths:
            if self._optional_dirs and not os.path.isdir(path):
                logger.warning("Theme directory %r does not exist, skipping", path)
                continue
            if os.path.isdir(path):
                files = sorted(
                    os.path.join(path, entry) for entry in os.listdir(path) if entry.endswith(".json")
                )
            else:
                files = [path]
            for filename in files:
                theme = from_file(filename)
                themes[theme.name] = theme
        for theme in self._extra:
            themes[theme.name] = theme
        logger.debug("Loaded %d themes from %s", len(themes), self._paths)
        return MappingProxyType(themes)

    @property
    def themes(self) -> Mapping[str, Theme]:
        if self._themes is None:
            with self._lock:
                if self._themes is None:
                    self._themes = self._load()
        return self._themes

    def get(self, name: str) -> Theme:
        try:
            return self.themes[name]
        except KeyError:
            raise ThemeNotFoundError(name) from None

    def available_themes(self) -> List[Theme]:
        """All themes, sorted by name."""
        return [self.themes[name] for name in sorted(self.themes)]

    def __contains__(self, name: str) -> bool:
        return name in self.themes

    def __len__(self) -> int:
        return len(self.themes)


_default_registry: Optional[ThemeRegistry] = None
_default_registry_lock = threading.Lock()


def default_registry() -> ThemeRegistry:
    global _default_registry
    if _default_registry is None:
        with _default_registry_lock:
            if _default_registry is None:
                _default_registry = ThemeRegistry()
    return _default_registry


def get(name: str) -> Theme:
    """Get a bundled theme by name."""
    return default_registry().get(name)


def available_themes() -> List[Theme]:
    return default_registry().available_themes()
