"""Page kind detection."""

import logging
from typing import Optional

from bs4 import Tag

from .. import dom
from ..models.config import SelectorConfig
from ..models.document import PageKind

logger = logging.getLogger(__name__)


def classify(root: Tag, selectors: Optional[SelectorConfig] = None) -> PageKind:
    """
    Decide which pipeline a page needs.

    Any article container (title, rich-text view or Draft content) makes it
    an article. Everything else, including pages with no post at all, takes
    the tweet path. The URL is not consulted.
    """
    selectors = selectors or SelectorConfig()
    for selector in (selectors.article_title, selectors.article_rich_text, selectors.article_draft_content):
        if dom.select_one(root, selector) is not None:
            logger.debug(f"Article container found ({selector})")
            return PageKind.ARTICLE
    return PageKind.TWEET_OR_THREAD
