# HTML formatter styled by several themes at once

"""
One element tree, many themes.

The default theme is written as plain inline declarations. Every other theme
is written as CSS custom properties named `{prefix}-{theme}`,
`{prefix}-{theme}-bg`, `{prefix}-{theme}-font-style`,
`{prefix}-{theme}-font-weight` and `{prefix}-{theme}-text-decoration`, so a
stylesheet can switch themes, e.g.:

    @media (prefers-color-scheme: dark) {
      .athl-themes, .athl-themes span {
        color: var(--athl-dark) !important;
        background-color: var(--athl-dark-bg) !important;
      }
    }

With `default_theme="light-dark()"` the themes named "light" and "dark" are
combined into CSS `light-dark()` values and the browser picks one.
"""

from typing import Dict, List, Mapping, Optional, Union

from ..core.constants import (
    DEFAULT_CSS_VARIABLE_PREFIX,
    HIGHLIGHTED_SCOPE,
    LIGHT_DARK,
    MULTI_THEMES_CLASS,
    PRE_CLASS,
    VISUAL_SCOPE,
)
from ..core.exceptions import BuildError
from ..core.highlight import StyledSegment
from ..core.themes import Style, Theme
from .html import (
    HighlightLines,
    HighlightLinesStyle,
    LineHtmlFormatter,
    escape,
    sanitize_theme_name,
    text_decoration,
)

# Fallback container colors for light-dark() mode
LIGHT_FG, LIGHT_BG = "#000000", "#ffffff"
DARK_FG, DARK_BG = "#ffffff", "#000000"


class DefaultTheme:
    """
    Which theme is rendered as plain inline styles.

    Built with DefaultTheme.parse(); `mode` is one of THEME, NONE, LIGHT_DARK.
    """

    THEME = "theme"
    NONE = "none"
    LIGHT_DARK = "light-dark"

    def __init__(self, mode: str, name: Optional[str] = None):
        self.mode = mode
        self.name = name

    def __repr__(self):
        return f"DefaultTheme({self.mode!r}, {self.name!r})"

    def __eq__(self, other):
        if not isinstance(other, DefaultTheme):
            return NotImplemented
        return (self.mode, self.name) == (other.mode, other.name)

    @classmethod
    def parse(cls, value: Union["DefaultTheme", str, bool]) -> "DefaultTheme":
        """
        Parse a default theme selector.

        "light-dark()" selects LIGHT_DARK; "false", "none" and False select
        NONE; True selects the theme named "light"; any other string names a
        theme.
        """
        if isinstance(value, DefaultTheme):
            return value
        if value is False:
            return cls(cls.NONE)
        if value is True:
            return cls(cls.THEME, "light")
        if not isinstance(value, str):
            raise BuildError(f"invalid default theme selector: {value!r}")
        if value == LIGHT_DARK:
            return cls(cls.LIGHT_DARK)
        if value.strip().lower() in ("false", "none", ""):
            return cls(cls.NONE)
        return cls(cls.THEME, value)


def _font_style(style: Style) -> str:
    return "italic" if style.italic else "normal"


def _font_weight(style: Style) -> str:
    return "bold" if style.bold else "normal"


class HtmlMultiThemes(LineHtmlFormatter):
    """
    HTML styled by several themes through CSS custom properties.

    Args:
        language: Language configuration
        themes: Mapping of theme name to Theme, at least one entry
        default_theme: Theme name, "light-dark()", "false"/"none"/False, or
            None to use the first theme in the mapping
        css_variable_prefix: Prefix of the generated custom properties
        pre_class: Extra class for the `pre` element
        italic: Emit italic font styles
        include_highlights: Add a `data-highlight` attribute with the scope name
        highlight_lines: Lines to emphasize
        header: Optional wrapper element

    Raises:
        BuildError: no themes, unknown default theme, or light-dark() without
            themes named "light" and "dark"
    """

    def __init__(
        self,
        language,
        themes: Mapping[str, Theme],
        default_theme=None,
        css_variable_prefix: str = DEFAULT_CSS_VARIABLE_PREFIX,
        pre_class=None,
        italic: bool = False,
        include_highlights: bool = False,
        highlight_lines=None,
        header=None,
    ):
        super().__init__(language, pre_class, highlight_lines, header)
        self.themes: Dict[str, Theme] = dict(themes or {})
        self.css_variable_prefix = css_variable_prefix
        self.italic = italic
        self.include_highlights = include_highlights

        if not self.themes:
            raise BuildError("at least one theme is required")

        first_theme = next(iter(self.themes))
        self.default_theme = DefaultTheme.parse(default_theme) if default_theme is not None else (
            DefaultTheme(DefaultTheme.THEME, first_theme)
        )

        if self.default_theme.mode == DefaultTheme.THEME:
            if self.default_theme.name not in self.themes:
                raise BuildError(f"default theme {self.default_theme.name!r} not found in themes map")
        elif self.default_theme.mode == DefaultTheme.LIGHT_DARK:
            if "light" not in self.themes or "dark" not in self.themes:
                raise BuildError("light-dark() mode requires themes named 'light' and 'dark'")

        # Theme used where one theme must answer (highlighted lines), even without a default
        if self.default_theme.mode == DefaultTheme.THEME:
            self.primary_theme = self.themes[self.default_theme.name]
        elif self.default_theme.mode == DefaultTheme.LIGHT_DARK:
            self.primary_theme = self.themes["light"]
        else:
            self.primary_theme = self.themes[first_theme]

    def _var(self, theme_name: str, suffix: str = "") -> str:
        return f"{self.css_variable_prefix}-{sanitize_theme_name(theme_name)}{suffix}"

    def _other_themes(self):
        for name, theme in self.themes.items():
            if self.default_theme.mode == DefaultTheme.THEME and name == self.default_theme.name:
                continue
            yield name, theme

    def pre_classes(self) -> str:
        classes = [PRE_CLASS, MULTI_THEMES_CLASS]
        if self.pre_class:
            classes.append(self.pre_class)
        classes.extend(self.themes)
        return " ".join(classes)

    def pre_style(self) -> str:
        styles = []

        if self.default_theme.mode == DefaultTheme.LIGHT_DARK:
            light, dark = self.themes["light"], self.themes["dark"]
            styles.append(f"color: light-dark({light.fg() or LIGHT_FG}, {dark.fg() or DARK_FG});")
            styles.append(f"background-color: light-dark({light.bg() or LIGHT_BG}, {dark.bg() or DARK_BG});")
            return " ".join(styles)

        if self.default_theme.mode == DefaultTheme.THEME:
            default_style = self.themes[self.default_theme.name].pre_style(" ")
            if default_style:
                styles.append(default_style)

        for name, theme in self._other_themes():
            if theme.fg():
                styles.append(f"{self._var(name)}: {theme.fg()};")
            if theme.bg():
                styles.append(f"{self._var(name, '-bg')}: {theme.bg()};")

        return " ".join(styles)

    def open_pre_tag(self, output) -> None:
        style = self.pre_style()
        style_attr = f' style="{escape(style)}"' if style else ""
        output.write(f'<pre class="{escape(self.pre_classes())}"{style_attr}>')

    def theme_variables(self, theme_name: str, style: Style) -> List[str]:
        declarations = []
        if style.fg:
            declarations.append(f"{self._var(theme_name)}: {style.fg};")
        if style.bg:
            declarations.append(f"{self._var(theme_name, '-bg')}: {style.bg};")
        declarations.append(f"{self._var(theme_name, '-font-style')}: {_font_style(style)};")
        declarations.append(f"{self._var(theme_name, '-font-weight')}: {_font_weight(style)};")
        declarations.append(f"{self._var(theme_name, '-text-decoration')}: {text_decoration(style.text_decoration)};")
        return declarations

    def light_dark_declarations(self, light: Style, dark: Style) -> List[str]:
        declarations = []
        if light.fg and dark.fg:
            declarations.append(f"color: light-dark({light.fg}, {dark.fg});")
        if light.bg and dark.bg:
            declarations.append(f"background-color: light-dark({light.bg}, {dark.bg});")
        if light.bold or dark.bold:
            declarations.append(f"font-weight: light-dark({_font_weight(light)}, {_font_weight(dark)});")
        if self.italic and (light.italic or dark.italic):
            declarations.append(f"font-style: light-dark({_font_style(light)}, {_font_style(dark)});")
        light_decoration = text_decoration(light.text_decoration)
        dark_decoration = text_decoration(dark.text_decoration)
        if light_decoration != "none" or dark_decoration != "none":
            declarations.append(f"text-decoration: light-dark({light_decoration}, {dark_decoration});")
        return declarations

    def segment_declarations(self, segment: StyledSegment) -> List[str]:
        if not segment.scope:
            return []
        scope = f"{segment.scope}.{segment.language}" if segment.language else segment.scope

        if self.default_theme.mode == DefaultTheme.LIGHT_DARK:
            light = self.themes["light"].get_style(scope)
            dark = self.themes["dark"].get_style(scope)
            if light is None and dark is None:
                return []
            return self.light_dark_declarations(light or Style(), dark or Style())

        declarations = []
        if self.default_theme.mode == DefaultTheme.THEME:
            style = self.themes[self.default_theme.name].get_style(scope)
            if style is not None:
                css = style.css(self.italic, " ")
                if css:
                    declarations.append(css)

        for name, theme in self._other_themes():
            style = theme.get_style(scope)
            if style is not None:
                declarations.extend(self.theme_variables(name, style))

        return declarations

    def span_attrs(self, segment: StyledSegment) -> str:
        declarations = self.segment_declarations(segment)
        if not declarations:
            return ""
        attrs = []
        if self.include_highlights:
            attrs.append(f'data-highlight="{escape(segment.scope)}"')
        attrs.append(f'style="{escape(" ".join(declarations))}"')
        return " ".join(attrs)

    def line_attrs(self, spec: HighlightLines):
        if spec.style is HighlightLinesStyle.THEME:
            style = self.primary_theme.get_style(HIGHLIGHTED_SCOPE) or self.primary_theme.get_style(VISUAL_SCOPE)
            css = style.css(self.italic, " ") if style else None
            return spec.class_, css or None
        return spec.class_, spec.style
