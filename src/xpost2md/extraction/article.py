"""Long-form article ("Notes") extraction."""

from __future__ import annotations

import logging
from typing import Optional

from bs4 import Tag

from .. import dom
from ..conversion.blocks import BlockClassifier, assemble
from ..conversion.cleanup import cleanup
from ..conversion.markdown import MarkdownRenderer
from ..conversion.protocols import MarkupRenderer, MarkupSanitizer
from ..conversion.sanitizer import TreeSanitizer
from ..errors import ArticleBodyMissing
from ..models.config import RenderConfig, SelectorConfig
from ..models.document import DocumentKind, ExtractedDocument
from .compose import article_header, compose_body, source_footer
from .metadata import extract_author, extract_date, extract_post_id

logger = logging.getLogger(__name__)

DRAFT_MARKER_SELECTOR = '[data-block], [class*="longform-"], [class*="DraftStyleDefault"]'


class ArticleExtractor:
    """
    Extracts an X Article as Markdown.

    Page structure:
        [data-testid="twitter-article-title"] → title
        [data-testid="twitterArticleRichTextView"] → body container
          └─ [data-testid="longformRichTextComponent"] → Draft.js content
              ├─ .longform-unstyled → paragraphs
              ├─ .longform-header-one / .longform-header-two → headings
              ├─ .longform-unordered-list-item → bullet lists
              ├─ section[role="separator"] → horizontal rules
              └─ [data-testid="markdown-code-block"] → code blocks

    Bodies without any Draft structure are rendered with the generic
    Markdown renderer instead, taking the title from their first ``h1``.

    Example:
        extractor = ArticleExtractor()
        doc = extractor.extract(soup, "https://x.com/jack/status/20")
    """

    def __init__(
        self,
        selectors: Optional[SelectorConfig] = None,
        config: Optional[RenderConfig] = None,
        sanitizer: Optional[MarkupSanitizer] = None,
        renderer: Optional[MarkupRenderer] = None,
    ):
        self._selectors = selectors or SelectorConfig()
        self._config = config or RenderConfig()
        self._classifier = BlockClassifier(self._selectors, self._config)
        self._sanitizer = sanitizer or TreeSanitizer(self._config.remove_selectors)
        self._renderer = renderer or MarkdownRenderer(self._config)

    def _find_body(self, root: Tag) -> Tag:
        body = dom.select_one(root, self._selectors.article_rich_text) or dom.select_one(
            root, self._selectors.article_draft_content
        )
        if body is None:
            raise ArticleBodyMissing()
        return body

    def _has_draft_structure(self, body: Tag) -> bool:
        return (
            dom.self_or_descendant(body, self._selectors.article_draft_content) is not None
            or dom.select_one(body, self._selectors.draft_contents) is not None
            or dom.select_one(body, DRAFT_MARKER_SELECTOR) is not None
        )

    def _render_fallback(self, body: Tag, title: Optional[str]) -> tuple[str, Optional[str]]:
        """Generic rendering for bodies without Draft blocks."""
        cleaned = self._sanitizer.sanitize(body)
        if title is None:
            h1 = cleaned.find("h1")
            if isinstance(h1, Tag):
                title = dom.text_of(h1) or None
                h1.decompose()
        return cleanup(self._renderer.render(cleaned)), title

    def extract(self, root: Tag, url: str) -> ExtractedDocument:
        """
        Build an article document from the page.

        Args:
            root: Page tree
            url: Current page URL

        Returns:
            ARTICLE document

        Raises:
            ArticleBodyMissing: If the rich-text body cannot be found
        """
        author = extract_author(root, self._selectors)
        published_at = extract_date(root, self._selectors)
        post_id = extract_post_id(url)

        title: Optional[str] = None
        title_el = dom.select_one(root, self._selectors.article_title)
        if title_el is not None:
            title = dom.collapse_whitespace(dom.text_of(title_el)) or None

        body_el = self._find_body(root)
        if self._has_draft_structure(body_el):
            body = assemble(self._classifier.classify(body_el))
        else:
            logger.warning(f"No Draft blocks in article body on {url}, using generic rendering")
            body, title = self._render_fallback(body_el, title)

        parts = article_header(author, title)
        parts.append(body)
        parts.extend(source_footer(url, published_at))

        logger.info(f"Extracted article {title or post_id!r} by {author.handle} from {url}")
        return ExtractedDocument(
            kind=DocumentKind.ARTICLE,
            author=author,
            title=title,
            body=compose_body(parts),
            source_url=url,
            published_at=published_at,
            post_id=post_id,
        )
