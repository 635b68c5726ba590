"""Rule-based markup to Markdown conversion."""

from __future__ import annotations

import logging
import re
import uuid
from typing import Iterable, Optional

import html2text
from bs4 import NavigableString, Tag

from .. import dom
from ..models.config import RenderConfig
from .rules import DEFAULT_RULES, Rule, match_rule, resolve_href

logger = logging.getLogger(__name__)

_HR_RE = re.compile(r"^\s*\* \* \*\s*$", re.MULTILINE)


def normalize_markdown(markdown: str) -> str:
    """Strip trailing whitespace, collapse blank-line runs and trim."""
    markdown = markdown.replace("\r\n", "\n").replace("\r", "\n")
    markdown = "\n".join(line.rstrip() for line in markdown.split("\n"))
    markdown = re.sub(r"\n{3,}", "\n\n", markdown)
    return markdown.strip()


class MarkdownRenderer:
    """
    Converts a markup subtree to Markdown.

    Nodes are checked against an ordered rule table depth-first; the first
    matching rule renders the node and its whole subtree. Everything no rule
    claims goes through html2text.

    Example:
        renderer = MarkdownRenderer()
        markdown = renderer.render(sanitized_tweet_text)
    """

    def __init__(
        self,
        config: Optional[RenderConfig] = None,
        rules: Optional[Iterable[Rule]] = None,
    ):
        """
        Initialize the renderer.

        Args:
            config: Render settings (hosts, site URL, image size)
            rules: Ordered rule table (defaults to DEFAULT_RULES)
        """
        self._config = config or RenderConfig()
        self._rules: tuple[Rule, ...] = tuple(rules) if rules is not None else DEFAULT_RULES

    @property
    def rules(self) -> tuple[Rule, ...]:
        return self._rules

    def _make_converter(self) -> html2text.HTML2Text:
        converter = html2text.HTML2Text(bodywidth=0)

        # Link handling (hrefs are made absolute before conversion)
        converter.inline_links = True
        converter.wrap_links = False
        converter.protect_links = False

        # Emphasis and lists
        converter.emphasis_mark = "*"
        converter.strong_mark = "**"
        converter.ul_item_mark = "-"

        # Content handling
        converter.unicode_snob = True
        converter.escape_snob = False
        converter.single_line_break = False
        return converter

    def _substitute_rules(self, root: Tag, outputs: dict[str, str], token: str) -> None:
        """Replace every rule-claimed descendant with a placeholder string."""
        for child in list(root.children):
            if not isinstance(child, Tag):
                continue
            rule = match_rule(child, self._rules, self._config)
            if rule is None:
                self._substitute_rules(child, outputs, token)
                continue
            placeholder = f"{token}{len(outputs):04d}end"
            outputs[placeholder] = rule.replacement(child, self._config)
            child.replace_with(NavigableString(placeholder))

    def _resolve_links(self, root: Tag) -> None:
        for anchor in root.find_all("a", href=True):
            anchor["href"] = resolve_href(dom.attr(anchor, "href"), self._config.site_url)

    def render(self, node: Tag) -> str:
        """
        Render ``node`` to Markdown.

        Args:
            node: Element to render (not modified)

        Returns:
            Normalized Markdown; empty string for nodes without content
        """
        rule = match_rule(node, self._rules, self._config)
        if rule is not None:
            return rule.replacement(node, self._config)

        root = dom.clone(node)
        outputs: dict[str, str] = {}
        # Alphanumeric so html2text neither escapes nor splits it
        token = f"xpmd{uuid.uuid4().hex}"
        self._substitute_rules(root, outputs, token)
        self._resolve_links(root)

        try:
            markdown = self._make_converter().handle(str(root))
        except Exception as e:
            logger.error(f"Failed to convert markup to Markdown: {e}")
            markdown = root.get_text(separator="\n")

        markdown = _HR_RE.sub("---", markdown)
        for placeholder, replacement in outputs.items():
            markdown = markdown.replace(placeholder, replacement)

        return normalize_markdown(markdown)
