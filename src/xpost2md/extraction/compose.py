"""Final Markdown document assembly."""

import re
from typing import Optional

from ..models.document import AuthorInfo


def source_footer(source_url: str, published_at: str) -> list[str]:
    """Lines closing every document."""
    return ["", "---", "", f"> Source: {source_url}", f"> Date: {published_at}"]


def article_header(author: AuthorInfo, title: Optional[str]) -> list[str]:
    if title:
        return [f"# {title}", "", f"*By {author.label}*", ""]
    return [f"# Article by {author.label}", ""]


def compose_body(parts: list[str]) -> str:
    """Join lines, keeping at most one blank line between paragraphs."""
    return re.sub(r"\n{3,}", "\n\n", "\n".join(parts))
