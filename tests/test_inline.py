"""Tests for InlineFormatter and inline runs."""

from xpost2md.conversion import InlineFormatter
from xpost2md.conversion.inline import is_inline_link_wrapper
from xpost2md.conversion.rules import resolve_href
from xpost2md.models import Bold, Italic, Link, RenderConfig, Text, render_runs


class TestInlineRuns:
    """Tests for rendering inline run trees."""

    def test_nested_emphasis(self):
        """Italic inside bold keeps its own markers."""
        runs = [Bold((Text("outer "), Italic((Text("inner"),)), Text(" text")))]

        assert render_runs(runs) == "**outer *inner* text**"

    def test_link(self):
        assert render_runs([Text("see "), Link("docs", "https://example.com")]) == "see [docs](https://example.com)"


class TestResolveHref:
    """Tests for link resolution."""

    def test_protocol_relative(self):
        assert resolve_href("//example.com/x", "https://x.com") == "https://example.com/x"

    def test_root_relative(self):
        assert resolve_href("/jack/status/1", "https://x.com") == "https://x.com/jack/status/1"

    def test_absolute(self):
        assert resolve_href("https://example.com", "https://x.com") == "https://example.com"


class TestInlineFormatter:
    """Tests for inline Markdown of Draft blocks."""

    def test_styled_spans(self, element):
        """Bold and italic come from inline styles and nest."""
        node = element(
            "<div>"
            '<span style="font-weight: bold;">outer <span style="font-style: italic;">inner</span> text</span>'
            "</div>"
        )

        assert InlineFormatter().render(node) == "**outer *inner* text**"

    def test_semantic_tags(self, element):
        """strong/b and em/i are recognized too."""
        node = element("<p><b>B</b> <strong>S</strong> <i>I</i> <em>E</em></p>")

        assert InlineFormatter().render(node) == "**B** **S** *I* *E*"

    def test_parse_builds_run_tree(self, element):
        """parse() mirrors the source nesting."""
        node = element('<div><strong>a<em>b</em></strong><a href="/x">x</a></div>')

        runs = InlineFormatter().parse(node)

        assert runs == [Bold((Text("a"), Italic((Text("b"),)))), Link("x", "https://x.com/x")]

    def test_link_wrapper_unwraps(self, element):
        """A div holding only a link renders as that link."""
        node = element(
            '<div class="longform-unstyled"><div data-offset-key="k">'
            "<span>See </span>"
            '<div class="css-175oi2r r-1loqt21"><a href="/jack/status/1">this post</a></div>'
            "<span> now</span>"
            "</div></div>"
        )

        assert InlineFormatter().render(node) == "See [this post](https://x.com/jack/status/1) now"

    def test_protocol_relative_link(self, element):
        node = element('<div><a href="//example.com/page">page</a></div>')

        assert InlineFormatter().render(node) == "[page](https://example.com/page)"

    def test_text_passes_verbatim(self, element):
        """Text nodes keep their characters, including markdown-like ones."""
        node = element("<div><span>a_b *c* 1. d</span></div>")

        assert InlineFormatter().render(node) == "a_b *c* 1. d"

    def test_depth_ceiling(self, element):
        """Content past the recursion ceiling is flattened to text."""
        node = element("<div><span><span><span><b>deep</b></span></span></span></div>")

        assert InlineFormatter(RenderConfig(max_inline_depth=2)).render(node) == "deep"

    def test_site_url_from_config(self, element):
        node = element('<div><a href="/a">a</a></div>')

        assert InlineFormatter(RenderConfig(site_url="https://twitter.com")).render(node) == "[a](https://twitter.com/a)"


class TestInlineLinkWrapper:
    """Tests for link wrapper detection."""

    def test_single_anchor(self, element):
        assert is_inline_link_wrapper(element('<div><a href="/a">a</a></div>'))

    def test_draft_block_is_not_a_wrapper(self, element):
        assert not is_inline_link_wrapper(element('<div data-offset-key="k"><a href="/a">a</a></div>'))
        assert not is_inline_link_wrapper(element('<div class="public-DraftStyleDefault-block"><a href="/a">a</a></div>'))
        assert not is_inline_link_wrapper(element('<div class="longform-unstyled"><a href="/a">a</a></div>'))

    def test_text_beside_link(self, element):
        """Direct text next to the link makes it content, not a wrapper."""
        assert not is_inline_link_wrapper(element('<div>Read <span><a href="/a">a</a></span></div>'))

    def test_nested_anchor_without_text(self, element):
        assert is_inline_link_wrapper(element('<div><span><a href="/a">a</a></span><span></span></div>'))
