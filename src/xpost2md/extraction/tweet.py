"""Tweet and thread extraction."""

from __future__ import annotations

import logging
from typing import Optional

from bs4 import Tag

from .. import dom
from ..conversion.cleanup import cleanup
from ..conversion.markdown import MarkdownRenderer
from ..conversion.protocols import MarkupRenderer, MarkupSanitizer
from ..conversion.rules import VIDEO_LABEL, upscale_image_url, video_url
from ..conversion.sanitizer import TreeSanitizer
from ..models.config import RenderConfig, SelectorConfig
from ..models.document import ExtractedDocument, PostUnit
from .metadata import extract_author, extract_date, extract_post_id
from .thread import aggregate

logger = logging.getLogger(__name__)

# Image sources that are never post media
SKIPPED_MEDIA_FRAGMENTS = ("emoji", "profile_images")


class TweetExtractor:
    """
    Extracts a single tweet or a same-author thread from a status page.

    Every post element on the page is read; only posts by the author of the
    first post are kept.

    Example:
        extractor = TweetExtractor()
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
        self._sanitizer = sanitizer or TreeSanitizer(self._config.remove_selectors)
        self._renderer = renderer or MarkdownRenderer(self._config)

    def _media(self, post: Tag) -> list[str]:
        media: list[str] = []

        for img in dom.select_all(post, f"{self._selectors.photo} img"):
            src = dom.attr(img, "src")
            if src and not any(fragment in src for fragment in SKIPPED_MEDIA_FRAGMENTS):
                media.append(f"![Image]({upscale_image_url(src, self._config)})")

        for video in dom.select_all(post, "video"):
            url = video_url(video)
            if url:
                media.append(f"{VIDEO_LABEL}({url})")

        return media

    def extract_post(self, post: Tag) -> PostUnit:
        """Author, Markdown text and media of one post element."""
        text = ""
        text_el = dom.select_one(post, self._selectors.post_text)
        if text_el is not None:
            cleaned = self._sanitizer.sanitize(text_el)
            text = cleanup(self._renderer.render(cleaned)).strip()

        return PostUnit(
            author=extract_author(post, self._selectors),
            text=text,
            media=self._media(post),
        )

    def extract(self, root: Tag, url: str) -> ExtractedDocument:
        """
        Build a tweet or thread document from the page.

        Args:
            root: Page tree
            url: Current page URL

        Returns:
            TWEET or THREAD document; a placeholder document if the page
            holds no post element
        """
        published_at = extract_date(root, self._selectors)
        post_id = extract_post_id(url)

        post_elements = dom.select_all(root, self._selectors.post)
        if not post_elements:
            logger.warning(f"No post element found on {url}")
            author = extract_author(root, self._selectors)
            return aggregate(
                [],
                author.handle,
                source_url=url,
                published_at=published_at,
                post_id=post_id,
                fallback_author=author,
            )

        posts = [self.extract_post(post) for post in post_elements]
        thread_author = posts[0].author

        doc = aggregate(
            posts,
            thread_author.handle,
            source_url=url,
            published_at=published_at,
            post_id=post_id,
        )
        logger.info(f"Extracted {doc.kind.value} by {thread_author.handle} from {url}")
        return doc
