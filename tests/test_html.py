"""Tests for the inline and linked HTML formatters."""

import pytest

from CodeTint import HighlightLines, HtmlElement, HtmlInlineOption, HtmlLinkedOption, Options, highlight
from CodeTint.core.events import HighlightEnd, HighlightStart, Source
from CodeTint.core.highlight import StyledSegment
from CodeTint.core.languages import PLAINTEXT
from CodeTint.core.themes import Style
from CodeTint.formatter import build_formatter
from CodeTint.formatter.html import escape, sanitize_theme_name, scope_to_class, split_lines
from CodeTint.formatter.html_inline import HtmlInline
from CodeTint.formatter.html_linked import HtmlLinked

CODE_OPEN = '<code class="language-test" translate="no" tabindex="0">'
KEYWORD_SPAN = '<span style="color: #ff79c6; font-weight: bold;">fn</span>'


@pytest.fixture
def two_line_language(scripted_language):
    """Events for "fn x\\ny" with "fn" as a keyword."""
    return scripted_language([
        HighlightStart("keyword", "test"),
        Source(0, 2),
        HighlightEnd(),
        Source(2, 6),
    ])


class TestHelpers:
    def test_escape(self):
        assert escape("<a href=\"x\">&'") == "&lt;a href=&quot;x&quot;&gt;&amp;&#39;"

    def test_scope_to_class(self):
        assert scope_to_class("keyword") == "keyword"
        assert scope_to_class("markup.heading.1") == "markup-heading-1"
        assert scope_to_class("not.a.scope") == "text"

    def test_sanitize_theme_name(self):
        assert sanitize_theme_name("github light") == "github-light"
        assert sanitize_theme_name("tokyo_night-2") == "tokyo_night-2"

    def test_split_lines_never_crosses_lines(self):
        segment = StyledSegment("a\nb", 0, 3, "string", Style(fg="#000000"))
        lines = split_lines([segment], lambda s: 'class="string"')
        assert lines == ['<span class="string">a</span>\n', '<span class="string">b</span>\n']

    def test_split_lines_empty(self):
        assert split_lines([], lambda s: "") == ["\n"]


class TestHtmlInline:
    def test_full_document(self, keyword_language, sample_theme):
        html = HtmlInline(keyword_language, sample_theme).render("fn x")
        assert html == (
            '<pre class="athl" style="color: #f8f8f2; background-color: #282a36;">'
            + CODE_OPEN
            + '<div class="line" data-line="1">' + KEYWORD_SPAN + " x\n</div>"
            + "</code></pre>"
        )

    def test_lines_are_numbered(self, two_line_language, sample_theme):
        html = HtmlInline(two_line_language, sample_theme).render("fn x\ny")
        assert '<div class="line" data-line="1">' + KEYWORD_SPAN + " x\n</div>" in html
        assert '<div class="line" data-line="2">y\n</div>' in html

    def test_without_theme(self, keyword_language):
        html = HtmlInline(keyword_language).render("fn x")
        assert html.startswith('<pre class="athl">')
        assert "<span" not in html

    def test_include_highlights(self, keyword_language, sample_theme):
        html = HtmlInline(keyword_language, sample_theme, include_highlights=True).render("fn x")
        assert '<span data-highlight="keyword" style="color: #ff79c6; font-weight: bold;">fn</span>' in html

    def test_italic_toggle(self, scripted_language, sample_theme):
        language = scripted_language([HighlightStart("comment", "test"), Source(0, 4), HighlightEnd()])
        assert "font-style: italic" not in HtmlInline(language, sample_theme).render("// x")
        assert "font-style: italic" in HtmlInline(language, sample_theme, italic=True).render("// x")

    def test_pre_class(self, keyword_language, sample_theme):
        html = HtmlInline(keyword_language, sample_theme, pre_class="code-block").render("fn x")
        assert html.startswith('<pre class="athl code-block"')

    def test_header(self, keyword_language):
        header = HtmlElement('<div class="wrap">', "</div>")
        html = HtmlInline(keyword_language, header=header).render("fn x")
        assert html.startswith('<div class="wrap"><pre')
        assert html.endswith("</code></pre></div>")

    def test_braces_escaped(self, scripted_language):
        html = HtmlInline(scripted_language([Source(0, 2)])).render("{}")
        assert "&lbrace;&rbrace;\n</div>" in html
        assert "{" not in html

    def test_html_escaped(self):
        html = HtmlInline(PLAINTEXT).render("a < b && c")
        assert "a &lt; b &amp;&amp; c\n" in html

    def test_empty_source(self):
        html = HtmlInline(PLAINTEXT).render("")
        assert '<div class="line" data-line="1">\n</div>' in html

    def test_trailing_newline_ends_last_line(self):
        html = HtmlInline(PLAINTEXT).render("a\n")
        assert '<div class="line" data-line="1">a\n</div>' in html
        assert 'data-line="2"' not in html


class TestHighlightLinesInline:
    def test_theme_style(self, two_line_language, sample_theme):
        html = HtmlInline(two_line_language, sample_theme, highlight_lines=HighlightLines([2])).render("fn x\ny")
        assert '<div class="line" style="background-color: #44475a;" data-line="2">y\n</div>' in html
        assert '<div class="line" data-line="1">' in html

    def test_visual_fallback(self, two_line_language, theme_factory):
        theme = theme_factory({"visual": {"bg": "#333333"}})
        html = HtmlInline(two_line_language, theme, highlight_lines=HighlightLines([1])).render("fn x\ny")
        assert 'style="background-color: #333333;" data-line="1"' in html

    def test_literal_style_and_class(self, two_line_language, sample_theme):
        spec = HighlightLines([(1, 2)], style="background: red;", class_="hl")
        html = HtmlInline(two_line_language, sample_theme, highlight_lines=spec).render("fn x\ny")
        assert '<div class="line hl" style="background: red;" data-line="1">' in html
        assert '<div class="line hl" style="background: red;" data-line="2">' in html

    def test_no_style(self, two_line_language, sample_theme):
        spec = HighlightLines([1], style=None, class_="hl")
        html = HtmlInline(two_line_language, sample_theme, highlight_lines=spec).render("fn x\ny")
        assert '<div class="line hl" data-line="1">' in html

    def test_first_matching_spec_wins(self, two_line_language, sample_theme):
        specs = [
            HighlightLines([1], style="color: red;"),
            HighlightLines(range(1, 3), style="color: blue;"),
        ]
        html = HtmlInline(two_line_language, sample_theme, highlight_lines=specs).render("fn x\ny")
        assert 'style="color: red;" data-line="1"' in html
        assert 'style="color: blue;" data-line="2"' in html

    def test_range_normalization(self):
        assert HighlightLines([3, (5, 7), range(9, 11)]).ranges == [(3, 3), (5, 7), (9, 10)]


class TestHtmlLinked:
    def test_full_document(self, keyword_language):
        html = HtmlLinked(keyword_language).render("fn x")
        assert html == (
            '<pre class="athl">' + CODE_OPEN
            + '<div class="line" data-line="1"><span class="keyword">fn</span> x\n</div>'
            + "</code></pre>"
        )

    def test_dotted_scope_class(self, scripted_language):
        language = scripted_language([HighlightStart("markup.heading.1", "test"), Source(0, 3), HighlightEnd()])
        assert '<span class="markup-heading-1"># a</span>' in HtmlLinked(language).render("# a")

    def test_highlight_lines_default_class(self, keyword_language):
        html = HtmlLinked(keyword_language, highlight_lines=HighlightLines([1])).render("fn x")
        assert '<div class="line highlighted" data-line="1">' in html

    def test_highlight_lines_custom_class(self, keyword_language):
        html = HtmlLinked(keyword_language, highlight_lines=HighlightLines([1], class_="focus")).render("fn x")
        assert '<div class="line focus" data-line="1">' in html


class TestBuildFormatter:
    def test_default_option(self, keyword_language):
        assert isinstance(build_formatter(None, keyword_language), HtmlInline)

    def test_linked_option(self, keyword_language):
        assert isinstance(build_formatter(HtmlLinkedOption(), keyword_language), HtmlLinked)

    def test_unknown_theme_renders_unstyled(self, keyword_language):
        formatter = build_formatter(HtmlInlineOption(theme="no-such-theme"), keyword_language)
        assert formatter.render("fn x").startswith('<pre class="athl">')


class TestHighlightApi:
    def test_highlight_rust_with_bundled_theme(self):
        html = highlight("fn main() {}", Options("rust", HtmlInlineOption(theme="dracula")))
        assert html.startswith('<pre class="athl" style="color: #f8f8f2; background-color: #282a36;">')
        assert '<code class="language-rust"' in html
        assert '<span style="color: #ff79c6;">fn</span>' in html

    def test_unknown_language_is_plaintext(self):
        html = highlight("x = 1", Options("no-such-language", HtmlLinkedOption()))
        assert '<code class="language-plaintext"' in html
        assert "<span" not in html

    def test_default_options(self):
        assert highlight("").startswith('<pre class="athl">')


class TestAttributeEscaping:
    def test_inline_color_with_quote(self, keyword_language, theme_factory):
        theme = theme_factory({"normal": {"fg": '#000"'}, "keyword": {"fg": 'red" onclick="x'}})
        html = HtmlInline(keyword_language, theme).render("fn x")
        assert '<pre class="athl" style="color: #000&quot;;">' in html
        assert '<span style="color: red&quot; onclick=&quot;x;">fn</span>' in html

    def test_line_class_and_style(self, keyword_language):
        spec = HighlightLines([1], style='color: "red";', class_='a"b')
        html = HtmlInline(keyword_language, highlight_lines=spec).render("fn x")
        assert '<div class="line a&quot;b" style="color: &quot;red&quot;;" data-line="1">' in html

    def test_pre_class(self, keyword_language):
        html = HtmlLinked(keyword_language, pre_class='x"y').render("fn x")
        assert html.startswith('<pre class="athl x&quot;y">')
