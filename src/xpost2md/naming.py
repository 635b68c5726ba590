"""Suggested filenames for extracted documents."""

import re

from .models.document import DocumentKind, ExtractedDocument

MAX_SLUG_LENGTH = 60
MAX_FILENAME_LENGTH = 200


def slugify(text: str, max_length: int = MAX_SLUG_LENGTH) -> str:
    """Lowercase, hyphen-separated alphanumeric slug."""
    slug = re.sub(r"[^a-z0-9]+", "-", text.lower()).strip("-")
    return slug[:max_length]


def sanitize_filename(name: str) -> str:
    """Sanitize a name for use as a filename.

    Args:
        name: Name to sanitize

    Returns:
        Sanitized name
    """
    name = re.sub(r'[<>:"/\\|?*\x00-\x1f]', "_", name)
    name = re.sub(r"\s+", "-", name)
    name = re.sub(r"-{2,}", "-", name)
    name = name.strip("-")
    return name[:MAX_FILENAME_LENGTH]


def suggest_filename(doc: ExtractedDocument) -> str:
    """
    ``<handle>-<slug>.md`` for titled articles, ``<handle>-<post id>.md`` otherwise.

    Example:
        >>> suggest_filename(article)  # title "Shipping Faster: Notes"
        'jack-shipping-faster-notes.md'
    """
    handle = doc.author.handle.replace("@", "")
    if doc.kind == DocumentKind.ARTICLE and doc.title:
        slug = slugify(doc.title)
        if slug:
            return f"{handle}-{slug}.md"
    return f"{handle}-{doc.post_id}.md"
