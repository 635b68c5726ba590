"""Removal of UI chrome from post and article subtrees."""

import logging
from typing import Optional

from bs4 import Tag

from .. import dom

logger = logging.getLogger(__name__)

# Elements to remove (engagement bars, menus, buttons, etc.)
REMOVE_SELECTORS = [
    '[role="group"]',
    '[data-testid$="-follow"]',
    '[data-testid="caret"]',
    '[data-testid="tweet-text-show-more-link"]',
    '[aria-label="Share post"]',
    '[aria-label="Bookmark"]',
    '[data-testid="bookmark"]',
]

# Links whose whole card is a call to action
SUBSCRIBE_LINK_SELECTOR = 'a[href*="/subscribe"]'
CTA_CARD_SELECTOR = 'div[role="link"]'

CONTROL_SELECTORS = 'button, nav, [role="navigation"]'

HIDDEN_SELECTOR = '[aria-hidden="true"]'


class TreeSanitizer:
    """
    Strips non-content nodes from a copy of a markup subtree.

    The node passed in is never modified, and the returned copy's root is
    never removed, only its descendants.

    Example:
        sanitizer = TreeSanitizer()
        clean = sanitizer.sanitize(tweet_text_element)
    """

    def __init__(self, remove_selectors: Optional[list[str]] = None):
        """
        Initialize the sanitizer.

        Args:
            remove_selectors: CSS selectors for extra elements to remove (extends defaults)
        """
        self._remove_selectors = list(REMOVE_SELECTORS)
        if remove_selectors:
            self._remove_selectors.extend(remove_selectors)

    def _remove_all(self, root: Tag, selector: str) -> int:
        removed = 0
        for el in root.select(selector):
            if el is root or el.decomposed:
                continue
            el.decompose()
            removed += 1
        return removed

    def _remove_subscribe_cards(self, root: Tag) -> int:
        """Remove subscribe CTAs together with the card that holds them."""
        removed = 0
        for link in root.select(SUBSCRIBE_LINK_SELECTOR):
            if link.decomposed:
                continue
            card = dom.closest(link, CTA_CARD_SELECTOR, stop=root)
            if card is None or card is root:
                parent = link.parent
                card = parent if isinstance(parent, Tag) and parent is not root else link
            card.decompose()
            removed += 1
        return removed

    def _remove_hidden(self, root: Tag) -> int:
        """Remove aria-hidden nodes unless they are or hold an image."""
        removed = 0
        for el in root.select(HIDDEN_SELECTOR):
            if el is root or el.decomposed:
                continue
            if dom.tag_name(el) == "img" or el.find("img") is not None:
                continue
            el.decompose()
            removed += 1
        return removed

    def sanitize(self, node: Tag) -> Tag:
        """
        Return a cleaned deep copy of ``node``.

        Args:
            node: Element to sanitize (left untouched)

        Returns:
            Detached copy without engagement groups, buttons, menus,
            subscribe cards and decorative hidden nodes
        """
        root = dom.clone(node)

        removed = 0
        for selector in self._remove_selectors:
            removed += self._remove_all(root, selector)
        removed += self._remove_subscribe_cards(root)
        removed += self._remove_all(root, CONTROL_SELECTORS)
        removed += self._remove_hidden(root)

        if removed:
            logger.debug(f"Sanitizer removed {removed} node(s) from <{dom.tag_name(node)}>")
        return root
