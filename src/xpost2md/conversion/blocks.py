"""Block structure of X Articles (Draft.js rich text)."""

from __future__ import annotations

import logging
import re
from typing import Optional

from bs4 import Tag

from .. import dom
from ..models.config import RenderConfig, SelectorConfig
from ..models.document import (
    BlankLine,
    Block,
    CodeBlock,
    Heading,
    ListItem,
    Paragraph,
    Separator,
)
from .cleanup import cleanup
from .inline import InlineFormatter
from .rules import is_emoji_image, upscale_image_url

logger = logging.getLogger(__name__)

_LANGUAGE_CLASS_RE = re.compile(r"language-(\w+)")


def assemble(blocks: list[Block]) -> str:
    """
    Join blocks into a Markdown body.

    Headings, code blocks and separators get a blank line on each side;
    list items stay on consecutive lines.
    """
    parts: list[str] = []
    for block in blocks:
        if isinstance(block, (Heading, CodeBlock, Separator)):
            parts.extend(["", block.to_markdown(), ""])
        else:
            parts.append(block.to_markdown())

    body = "\n".join(parts)
    return re.sub(r"\n{3,}", "\n\n", body).strip()


class BlockClassifier:
    """
    Turns the children of an article's content root into typed blocks.

    Checks run in a fixed order per child because container shapes overlap:
    code blocks and separators share the same ``<section>`` wrapper, and
    list items can appear with or without their list element.

    Example:
        classifier = BlockClassifier()
        blocks = classifier.classify(rich_text_view)
        body = assemble(blocks)
    """

    def __init__(
        self,
        selectors: Optional[SelectorConfig] = None,
        config: Optional[RenderConfig] = None,
    ):
        self._selectors = selectors or SelectorConfig()
        self._config = config or RenderConfig()
        self._inline = InlineFormatter(self._config)

    def content_node(self, root: Tag) -> Tag:
        """The element whose direct children are the Draft blocks."""
        draft = dom.select_one(root, self._selectors.article_draft_content) or root
        return dom.self_or_descendant(draft, self._selectors.draft_contents) or draft

    def _inline_text(self, el: Tag) -> str:
        return cleanup(self._inline.render(el)).strip()

    def _code_block(self, block: Tag) -> Optional[CodeBlock]:
        cb = dom.self_or_descendant(block, self._selectors.code_block)
        if cb is None:
            return None

        code_el = dom.select_one(cb, "code")
        match = _LANGUAGE_CLASS_RE.search(dom.attr(code_el, "class"))
        language = match.group(1) if match else ""
        if not language:
            language = dom.text_of(dom.select_one(cb, self._selectors.code_language_label))

        pre = dom.select_one(cb, "pre")
        source = dom.select_one(pre, "code") or pre or code_el
        code = dom.text_of(source, strip=False).rstrip()
        return CodeBlock(language=language, code=code)

    def _heading(self, block: Tag) -> Optional[Heading]:
        for level, class_name in ((1, self._selectors.header_one_class), (2, self._selectors.header_two_class)):
            if dom.self_or_descendant(block, f".{class_name}") is not None:
                return Heading(level=level, text=dom.text_of(block))
        return None

    def _list_items(self, items: list[Tag], ordered: bool) -> list[Block]:
        blocks: list[Block] = []
        for idx, item in enumerate(items, start=1):
            text = self._inline_text(item)
            if text:
                blocks.append(ListItem(ordered=ordered, text=text, index=idx if ordered else None))
        return blocks

    def _media(self, block: Tag) -> list[Block]:
        blocks: list[Block] = []
        for img in dom.select_all(block, "img"):
            src = dom.attr(img, "src")
            if not src or is_emoji_image(src, self._config):
                continue
            alt = dom.attr(img, "alt") or "Image"
            blocks.append(Paragraph(f"![{alt}]({upscale_image_url(src, self._config)})"))
        return blocks

    def classify(self, content_root: Tag) -> list[Block]:
        """
        Classify every block of an article body in document order.

        Args:
            content_root: Rich-text view, Draft component, or data-contents node

        Returns:
            Blocks in source order
        """
        blocks: list[Block] = []
        ordered_run = 0

        for block in dom.element_children(self.content_node(content_root)):
            tag = dom.tag_name(block)
            bare_ordered_item = dom.has_class(block, self._selectors.ordered_item_class) and tag != "ol"
            if not bare_ordered_item:
                ordered_run = 0

            # Code block must be checked before separator
            code = self._code_block(block)
            if code is not None:
                blocks.append(code)
                continue

            if dom.select_one(block, self._selectors.separator) is not None:
                blocks.append(Separator())
                continue

            heading = self._heading(block)
            if heading is not None:
                if heading.text:
                    blocks.append(heading)
                continue

            if tag == "ul":
                items = dom.select_all(block, f".{self._selectors.unordered_item_class}")
                blocks.extend(self._list_items(items or dom.select_all(block, "li"), ordered=False))
                continue

            if dom.has_class(block, self._selectors.unordered_item_class):
                blocks.extend(self._list_items([block], ordered=False))
                continue

            if tag == "ol":
                blocks.extend(self._list_items(dom.select_all(block, "li"), ordered=True))
                continue

            if bare_ordered_item:
                ordered_run += 1
                text = self._inline_text(block)
                if text:
                    blocks.append(ListItem(ordered=True, text=text, index=ordered_run))
                continue

            text = self._inline_text(block)
            if text:
                blocks.append(Paragraph(text))
            elif not dom.text_of(block):
                media = self._media(block)
                blocks.extend(media or [BlankLine()])
            else:
                blocks.extend(self._media(block))

        logger.debug(f"Classified {len(blocks)} article block(s)")
        return blocks
