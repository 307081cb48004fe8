"""Unit tests for the theme store."""

import json

import pytest

from CodeTint.core import config, themes
from CodeTint.core.exceptions import (
    InvalidThemeJsonError,
    ThemeFileNotFoundError,
    ThemeNotFoundError,
)
from CodeTint.core.themes import Appearance, Style, TextDecoration, ThemeRegistry, UnderlineStyle
from CodeTint.formatter import resolve_theme


class TestFromJson:
    def test_basic_fields(self, sample_theme):
        assert sample_theme.name == "sample"
        assert sample_theme.appearance is Appearance.DARK
        assert sample_theme.revision == "abc123"

    def test_style_fields(self, sample_theme):
        style = sample_theme.highlights["keyword"]
        assert style.fg == "#ff79c6"
        assert style.bold
        assert not style.italic

    def test_malformed_json(self):
        with pytest.raises(InvalidThemeJsonError):
            themes.from_json("{not json")

    def test_empty_name(self):
        text = json.dumps({"name": "", "appearance": "dark", "revision": "1", "highlights": {}})
        with pytest.raises(InvalidThemeJsonError):
            themes.from_json(text)

    def test_empty_revision(self):
        text = json.dumps({"name": "x", "appearance": "dark", "revision": "", "highlights": {}})
        with pytest.raises(InvalidThemeJsonError):
            themes.from_json(text)

    def test_unknown_appearance(self):
        text = json.dumps({"name": "x", "appearance": "dim", "revision": "1", "highlights": {}})
        with pytest.raises(InvalidThemeJsonError):
            themes.from_json(text)

    def test_wrong_flag_type(self, theme_factory):
        with pytest.raises(InvalidThemeJsonError):
            theme_factory({"keyword": {"bold": "yes"}})


class TestUnderlineFlags:
    @pytest.mark.parametrize("flags, expected", [
        ({"underline": True}, UnderlineStyle.SOLID),
        ({"undercurl": True}, UnderlineStyle.WAVY),
        ({"underdouble": True}, UnderlineStyle.DOUBLE),
        ({"underdotted": True}, UnderlineStyle.DOTTED),
        ({"underdashed": True}, UnderlineStyle.DASHED),
        ({}, UnderlineStyle.NONE),
    ])
    def test_single_flag(self, flags, expected):
        assert Style.from_dict(flags).text_decoration.underline is expected

    def test_undercurl_wins_over_underline(self):
        style = Style.from_dict({"underline": True, "undercurl": True})
        assert style.text_decoration.underline is UnderlineStyle.WAVY

    def test_double_wins_over_dotted(self):
        style = Style.from_dict({"underdotted": True, "underdouble": True})
        assert style.text_decoration.underline is UnderlineStyle.DOUBLE

    def test_decoration_css(self):
        assert TextDecoration(UnderlineStyle.WAVY, True).css_value() == "underline wavy line-through"
        assert TextDecoration(strikethrough=True).css_value() == "line-through"
        assert TextDecoration().css_value() is None


class TestGetStyle:
    def test_exact_match(self, sample_theme):
        assert sample_theme.get_style("keyword").fg == "#ff79c6"

    def test_parent_fallback(self, sample_theme):
        assert sample_theme.get_style("keyword.control.repeat").fg == "#ff79c6"

    def test_deep_fallback(self, sample_theme):
        assert sample_theme.get_style("markup.heading.2.markdown").fg == "#bd93f9"

    def test_specialized_scope(self, sample_theme):
        assert sample_theme.get_style("comment.lua").fg == "#00ff00"
        assert sample_theme.get_style("comment.rust").fg == "#6272a4"

    def test_no_match(self, sample_theme):
        assert sample_theme.get_style("variable") is None
        assert sample_theme.get_style("") is None

    def test_normal_colors(self, sample_theme):
        assert sample_theme.fg() == "#f8f8f2"
        assert sample_theme.bg() == "#282a36"

    def test_highlights_are_read_only(self, sample_theme):
        with pytest.raises(TypeError):
            sample_theme.highlights["keyword"] = Style()


class TestStyleCss:
    def test_declaration_order(self):
        style = Style(
            fg="#111111",
            bg="#222222",
            bold=True,
            italic=True,
            text_decoration=TextDecoration(UnderlineStyle.SOLID),
        )
        assert style.css(True, " ") == (
            "color: #111111; background-color: #222222; font-weight: bold; "
            "font-style: italic; text-decoration: underline;"
        )

    def test_italic_disabled(self):
        assert Style(italic=True).css(False, " ") == ""

    def test_default_style_is_empty(self):
        assert Style().css(True, " ") == ""


class TestThemeCss:
    def test_single_rule(self, theme_factory):
        theme = theme_factory({"keyword": {"fg": "blue"}}, name="mini", revision="r1")
        assert theme.css(False) == (
            "/* mini\n * revision: r1\n */\n\npre.athl {}\n"
            ".keyword {\n  color: blue;\n}\n"
        )

    def test_pre_block_uses_normal_colors(self, sample_theme):
        css = sample_theme.css(False)
        assert "pre.athl {\n  color: #f8f8f2;\n  background-color: #282a36;\n}\n" in css

    def test_dotted_scope_becomes_dashed_class(self, sample_theme):
        assert ".markup-heading {\n  color: #bd93f9;\n  font-weight: bold;\n}\n" in sample_theme.css(False)

    def test_rules_are_sorted(self, sample_theme):
        css = sample_theme.css(True)
        assert css.index(".comment {") < css.index(".error {") < css.index(".keyword {")

    def test_deterministic(self, sample_theme):
        assert sample_theme.css(True) == sample_theme.css(True)


class TestToJson:
    def test_round_trip_preserves_styles(self, sample_theme):
        again = themes.from_json(sample_theme.to_json())
        assert again.to_dict() == sample_theme.to_dict()
        assert again.get_style("error") == sample_theme.get_style("error")

    def test_underline_written_as_flag(self, sample_theme):
        data = json.loads(sample_theme.to_json())
        assert data["highlights"]["error"] == {
            "fg": "#ff5555",
            "undercurl": True,
            "strikethrough": True,
        }


class TestFromFile:
    def test_missing_file(self, tmp_path):
        with pytest.raises(ThemeFileNotFoundError):
            themes.from_file(str(tmp_path / "missing.json"))

    def test_invalid_file(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("[]", encoding="utf-8")
        with pytest.raises(InvalidThemeJsonError):
            themes.from_file(str(path))

    def test_valid_file(self, tmp_path, sample_theme):
        path = tmp_path / "sample.json"
        path.write_text(sample_theme.to_json(), encoding="utf-8")
        assert themes.from_file(str(path)).name == "sample"


class TestThemeRegistry:
    def test_loads_directory(self, tmp_path, sample_theme, theme_factory):
        (tmp_path / "a.json").write_text(sample_theme.to_json(), encoding="utf-8")
        (tmp_path / "b.json").write_text(theme_factory({}, name="another").to_json(), encoding="utf-8")
        registry = ThemeRegistry([str(tmp_path)])
        assert [t.name for t in registry.available_themes()] == ["another", "sample"]
        assert "sample" in registry
        assert len(registry) == 2

    def test_unknown_name(self, sample_theme):
        registry = ThemeRegistry([], themes=[sample_theme])
        with pytest.raises(ThemeNotFoundError):
            registry.get("nope")

    def test_lookup_is_case_sensitive(self, sample_theme):
        registry = ThemeRegistry([], themes=[sample_theme])
        assert registry.get("sample") is sample_theme
        with pytest.raises(ThemeNotFoundError):
            registry.get("Sample")

    def test_shared_reference(self, sample_theme):
        registry = ThemeRegistry([], themes=[sample_theme])
        assert registry.get("sample") is registry.get("sample")

    def test_missing_configured_directory_is_skipped(self, monkeypatch, tmp_path):
        monkeypatch.setattr(config, "THEMES_DIR", str(tmp_path / "missing"))
        registry = ThemeRegistry()
        assert registry.get("dracula").name == "dracula"

    def test_missing_explicit_path_raises(self, tmp_path):
        registry = ThemeRegistry([str(tmp_path / "missing.json")])
        with pytest.raises(ThemeFileNotFoundError):
            registry.get("dracula")

    def test_default_registry_survives_missing_directory(self, monkeypatch, tmp_path):
        monkeypatch.setattr(config, "THEMES_DIR", str(tmp_path / "missing"))
        monkeypatch.setattr(themes, "_default_registry", None)
        assert resolve_theme("dracula").name == "dracula"


class TestBundledThemes:
    def test_bundled_themes_load(self):
        names = [theme.name for theme in themes.available_themes()]
        assert "dracula" in names
        assert names == sorted(names)

    def test_get_bundled(self):
        dracula = themes.get("dracula")
        assert dracula.appearance is Appearance.DARK
        assert dracula.bg() == "#282a36"

    def test_every_bundled_theme_has_normal_colors(self):
        for theme in themes.available_themes():
            assert theme.fg() and theme.bg(), theme.name
