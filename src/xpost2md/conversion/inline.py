"""Inline formatting (bold, italic, links) for article rich text."""

from __future__ import annotations

import logging
import re
from typing import Optional

from bs4 import Tag

from .. import dom
from ..models.config import RenderConfig
from ..models.document import Bold, InlineRun, Italic, Link, Text, render_runs
from .rules import resolve_href

logger = logging.getLogger(__name__)

BOLD_TAGS = {"strong", "b"}
ITALIC_TAGS = {"em", "i"}

# Markers of a Draft.js content block (never a link wrapper)
BLOCK_CLASS_MARKERS = ("DraftStyleDefault", "longform-")

_FONT_WEIGHT_RE = re.compile(r"font-weight\s*:\s*(bold|bolder|[6-9]00)\b", re.IGNORECASE)
_FONT_STYLE_RE = re.compile(r"font-style\s*:\s*italic\b", re.IGNORECASE)


def is_bold(el: Tag) -> bool:
    return dom.tag_name(el) in BOLD_TAGS or bool(_FONT_WEIGHT_RE.search(dom.attr(el, "style")))


def is_italic(el: Tag) -> bool:
    return dom.tag_name(el) in ITALIC_TAGS or bool(_FONT_STYLE_RE.search(dom.attr(el, "style")))


def is_inline_link_wrapper(el: Tag) -> bool:
    """
    Check if an element only exists to hold a link.

    X wraps every inline link in its own small div; a Draft content block
    can also contain links, but alongside text and with block markers.
    """
    if dom.has_attr(el, "data-offset-key"):
        return False
    if any(dom.class_contains(el, marker) for marker in BLOCK_CLASS_MARKERS):
        return False

    children = dom.element_children(el)
    if len(children) == 1 and dom.tag_name(children[0]) == "a":
        return True

    has_link = any(dom.tag_name(c) == "a" or c.find("a") is not None for c in children)
    text_len = sum(len(str(c).strip()) for c in el.children if dom.is_text(c))
    return has_link and text_len == 0 and len(children) <= 2


class InlineFormatter:
    """
    Renders inline runs of an article block to Markdown.

    Example:
        formatter = InlineFormatter()
        text = formatter.render(paragraph_element)
        # "Read **the *whole* thing** at [docs](https://example.com)"
    """

    def __init__(self, config: Optional[RenderConfig] = None):
        self._config = config or RenderConfig()

    def _link(self, anchor: Tag) -> Link:
        href = resolve_href(dom.attr(anchor, "href"), self._config.site_url)
        return Link(text=dom.text_of(anchor), href=href)

    def parse(self, node: Tag, depth: int = 0) -> list[InlineRun]:
        """Build the inline run tree for the children of ``node``."""
        if depth >= self._config.max_inline_depth:
            logger.warning(f"Inline nesting deeper than {depth} levels, flattening to text")
            return [Text(dom.text_of(node, strip=False))]

        runs: list[InlineRun] = []
        for child in node.children:
            if dom.is_text(child):
                runs.append(Text(str(child)))
                continue
            if not isinstance(child, Tag):
                continue

            if dom.tag_name(child) == "a":
                runs.append(self._link(child))
                continue

            anchor = child.find("a")
            if isinstance(anchor, Tag) and is_inline_link_wrapper(child):
                runs.append(self._link(anchor))
                continue

            if is_bold(child):
                runs.append(Bold(tuple(self.parse(child, depth + 1))))
                continue

            if is_italic(child):
                runs.append(Italic(tuple(self.parse(child, depth + 1))))
                continue

            runs.extend(self.parse(child, depth + 1))
        return runs

    def render(self, node: Tag) -> str:
        """Inline Markdown for the children of ``node``."""
        return render_runs(self.parse(node))
