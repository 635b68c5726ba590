"""Extraction entry point: page kind dispatch and failure reporting."""

from __future__ import annotations

import logging
from typing import Optional, Union

from bs4 import Tag

from .. import dom
from ..errors import ExtractionError, ExtractResult, NotAPostPage
from ..extraction.article import ArticleExtractor
from ..extraction.detector import classify
from ..extraction.metadata import is_post_url
from ..extraction.tweet import TweetExtractor
from ..models.config import Xpost2mdConfig
from ..models.document import ExtractedDocument, PageKind

logger = logging.getLogger(__name__)

Page = Union[str, bytes, Tag]


class Extractor:
    """
    Turns a rendered X.com status page into an ExtractedDocument.

    Fatal failures (not a status page, article body missing) come back as
    an unsuccessful ExtractResult carrying a message; everything else
    degrades to a best-effort document.

    Example:
        extractor = Extractor()
        result = extractor.extract(html, "https://x.com/jack/status/20")
        if result.success:
            print(result.document.body)
        else:
            print(result.error)
    """

    def __init__(self, config: Optional[Xpost2mdConfig] = None):
        self._config = config or Xpost2mdConfig()
        self._tweets = TweetExtractor(self._config.selectors, self._config.render)
        self._articles = ArticleExtractor(self._config.selectors, self._config.render)

    @property
    def config(self) -> Xpost2mdConfig:
        return self._config

    def extract_document(self, page: Page, url: str) -> ExtractedDocument:
        """
        Extract a document, raising on fatal failures.

        Args:
            page: Page tree, or raw HTML to parse
            url: Current page URL

        Returns:
            The extracted document

        Raises:
            NotAPostPage: If ``url`` is not a status page
            ArticleBodyMissing: If an article's body cannot be found
        """
        if not is_post_url(url):
            raise NotAPostPage()

        root = page if isinstance(page, Tag) else dom.parse_html(page)
        kind = classify(root, self._config.selectors)
        logger.debug(f"Page kind for {url}: {kind.value}")

        if kind == PageKind.ARTICLE:
            return self._articles.extract(root, url)
        return self._tweets.extract(root, url)

    def extract(self, page: Page, url: str) -> ExtractResult:
        """
        Extract a document, reporting fatal failures in the result.

        Args:
            page: Page tree, or raw HTML to parse
            url: Current page URL

        Returns:
            ExtractResult with either ``document`` or ``error`` set
        """
        try:
            return ExtractResult.ok(self.extract_document(page, url))
        except ExtractionError as e:
            logger.error(f"Extraction failed for {url}: {e.message}")
            return ExtractResult.failed(e)


def extract(page: Page, url: str, config: Optional[Xpost2mdConfig] = None) -> ExtractResult:
    """Extract a document from a page with a one-off Extractor."""
    return Extractor(config).extract(page, url)
