"""Data model for extracted posts, threads and articles."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional, Union

UNKNOWN_NAME = "Unknown"
UNKNOWN_HANDLE = "unknown"


class PageKind(str, Enum):
    """Which extraction pipeline a page needs."""

    ARTICLE = "article"
    TWEET_OR_THREAD = "tweet_or_thread"


class DocumentKind(str, Enum):
    """Kind of document produced by an extraction."""

    TWEET = "tweet"
    THREAD = "thread"
    ARTICLE = "article"


@dataclass(frozen=True)
class AuthorInfo:
    """Display name and ``@handle`` of a post author."""

    name: str = UNKNOWN_NAME
    handle: str = UNKNOWN_HANDLE

    @property
    def key(self) -> str:
        """Lowercased handle for case-insensitive comparison."""
        return self.handle.lower()

    @property
    def is_resolved(self) -> bool:
        return self.handle != UNKNOWN_HANDLE

    @property
    def label(self) -> str:
        """``Name (@handle)`` as used in headings and bylines."""
        return f"{self.name} ({self.handle})"


@dataclass(frozen=True)
class ExtractedDocument:
    """
    Result of one extraction.

    Attributes:
        kind: Tweet, thread or article
        author: Author of the post (or of the thread's first post)
        title: Article title, None for tweets and threads
        body: Complete Markdown document including the source footer
        source_url: Page URL the document was extracted from
        published_at: ISO-8601 timestamp (falls back to extraction time)
        post_id: Numeric status id from the URL, or ``unknown``
    """

    kind: DocumentKind
    author: AuthorInfo
    body: str
    source_url: str
    published_at: str
    post_id: str
    title: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        """Structured record of the document."""
        return {
            "type": self.kind.value,
            "author": {"name": self.author.name, "handle": self.author.handle},
            "title": self.title,
            "markdown": self.body,
            "sourceUrl": self.source_url,
            "date": self.published_at,
            "tweetId": self.post_id,
        }


@dataclass
class PostUnit:
    """One post element found on a tweet or thread page."""

    author: AuthorInfo
    text: str = ""
    media: list[str] = field(default_factory=list)


# Inline runs


@dataclass(frozen=True)
class Text:
    text: str

    def render(self) -> str:
        return self.text


@dataclass(frozen=True)
class Bold:
    children: tuple["InlineRun", ...] = ()

    def render(self) -> str:
        return f"**{render_runs(self.children)}**"


@dataclass(frozen=True)
class Italic:
    children: tuple["InlineRun", ...] = ()

    def render(self) -> str:
        return f"*{render_runs(self.children)}*"


@dataclass(frozen=True)
class Link:
    text: str
    href: str

    def render(self) -> str:
        return f"[{self.text}]({self.href})"


InlineRun = Union[Text, Bold, Italic, Link]


def render_runs(runs: Any) -> str:
    """Render inline runs depth-first into Markdown."""
    return "".join(run.render() for run in runs)


# Article blocks


@dataclass(frozen=True)
class Heading:
    level: int
    text: str

    def to_markdown(self) -> str:
        return f"{'#' * self.level} {self.text}"


@dataclass(frozen=True)
class Paragraph:
    text: str

    def to_markdown(self) -> str:
        return self.text


@dataclass(frozen=True)
class ListItem:
    ordered: bool
    text: str
    index: Optional[int] = None

    def to_markdown(self) -> str:
        if self.ordered:
            return f"{self.index or 1}. {self.text}"
        return f"- {self.text}"


@dataclass(frozen=True)
class CodeBlock:
    language: str
    code: str

    def to_markdown(self) -> str:
        return f"```{self.language}\n{self.code}\n```"


@dataclass(frozen=True)
class Separator:
    def to_markdown(self) -> str:
        return "---"


@dataclass(frozen=True)
class BlankLine:
    """An empty source paragraph, kept to preserve spacing."""

    def to_markdown(self) -> str:
        return ""


Block = Union[Heading, Paragraph, ListItem, CodeBlock, Separator, BlankLine]
