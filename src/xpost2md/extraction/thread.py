"""Aggregation of same-author posts into one tweet or thread document."""

import logging
from typing import Optional

from ..models.document import AuthorInfo, DocumentKind, ExtractedDocument, PostUnit
from .compose import compose_body, source_footer

logger = logging.getLogger(__name__)

PLACEHOLDER_BODY = "*Could not extract tweet content.*"


def aggregate(
    posts: list[PostUnit],
    thread_handle: str,
    *,
    source_url: str,
    published_at: str,
    post_id: str,
    fallback_author: Optional[AuthorInfo] = None,
) -> ExtractedDocument:
    """
    Build one document from the posts written by the thread author.

    Args:
        posts: Posts in page order
        thread_handle: Handle of the thread author (compared case-insensitively)
        source_url: Page URL for the footer
        published_at: Timestamp for the footer
        post_id: Status id of the page
        fallback_author: Author shown when no post is kept

    Returns:
        A TWEET document for one retained post, THREAD for two or more
    """
    key = thread_handle.lower()
    kept = [post for post in posts if post.author.key == key]
    logger.debug(f"Kept {len(kept)} of {len(posts)} post(s) by {thread_handle}")

    author = kept[0].author if kept else (fallback_author or AuthorInfo(handle=thread_handle))
    parts = [f"# {author.label}", ""]

    if not kept:
        parts.append(PLACEHOLDER_BODY)

    for idx, post in enumerate(kept):
        if idx > 0:
            parts.extend(["", "---", ""])
        if post.text:
            parts.append(post.text)
        if post.media:
            parts.extend(["", *post.media])

    parts.extend(source_footer(source_url, published_at))

    return ExtractedDocument(
        kind=DocumentKind.THREAD if len(kept) > 1 else DocumentKind.TWEET,
        author=author,
        body=compose_body(parts),
        source_url=source_url,
        published_at=published_at,
        post_id=post_id,
    )
