"""Author, timestamp and post id extraction."""

from __future__ import annotations

import logging
import re
from datetime import datetime, timezone
from typing import Optional
from urllib.parse import urlparse

from bs4 import Tag

from .. import dom
from ..models.config import SelectorConfig
from ..models.document import UNKNOWN_HANDLE, UNKNOWN_NAME, AuthorInfo

logger = logging.getLogger(__name__)

PROFILE_HREF_RE = re.compile(r"^/([A-Za-z0-9_]+)$")
STATUS_ID_RE = re.compile(r"/status/(\d+)")


def extract_author(scope: Optional[Tag], selectors: Optional[SelectorConfig] = None) -> AuthorInfo:
    """
    Read the author from the first User-Name block inside ``scope``.

    The block holds two links: the display name and the ``@handle``. When
    no link text starts with ``@``, the handle comes from a ``/handle`` href.
    """
    selectors = selectors or SelectorConfig()
    block = dom.select_one(scope, selectors.user_name)
    if block is None:
        return AuthorInfo()

    links = dom.select_all(block, "a")
    name = UNKNOWN_NAME
    handle = UNKNOWN_HANDLE

    for link in links:
        text = dom.text_of(link)
        if text.startswith("@"):
            handle = text
        elif text and name == UNKNOWN_NAME:
            name = text

    if handle == UNKNOWN_HANDLE:
        for link in links:
            match = PROFILE_HREF_RE.match(dom.attr(link, "href"))
            if match:
                handle = f"@{match.group(1)}"
                break

    return AuthorInfo(name=name, handle=handle)


def now_iso() -> str:
    """Current UTC time as ISO-8601 with millisecond precision."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def extract_date(root: Optional[Tag], selectors: Optional[SelectorConfig] = None) -> str:
    """Timestamp of the first post on the page, or the current time."""
    selectors = selectors or SelectorConfig()
    time_el = dom.select_one(root, f"{selectors.post} {selectors.time}")
    if time_el is None:
        logger.debug("No post timestamp found, using current time")
        return now_iso()
    return dom.attr(time_el, "datetime") or dom.text_of(time_el)


def extract_post_id(url: str) -> str:
    match = STATUS_ID_RE.search(urlparse(url).path)
    return match.group(1) if match else "unknown"


def is_post_url(url: str) -> bool:
    """True for single-post views (``/<handle>/status/<id>``)."""
    return "/status/" in urlparse(url).path
