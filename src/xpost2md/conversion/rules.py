"""Ordered tag rules applied before generic HTML to Markdown conversion."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Iterable, Optional
from urllib.parse import urljoin

from bs4 import Tag

from .. import dom
from ..models.config import RenderConfig

MENTION_HREF_RE = re.compile(r"^/[A-Za-z0-9_]+$")

VIDEO_LABEL = "[🎥 Video]"

RuleFilter = Callable[[Tag, RenderConfig], bool]
RuleReplacement = Callable[[Tag, RenderConfig], str]


@dataclass(frozen=True)
class Rule:
    """
    A tag rule: the first rule whose filter accepts a node renders it.

    Attributes:
        name: Identifier used in logs and tests
        filter: Predicate over (node, config)
        replacement: Markdown for the node and its whole subtree
    """

    name: str
    filter: RuleFilter
    replacement: RuleReplacement


def looks_like_url(value: str) -> bool:
    return value.startswith("http")


def resolve_href(href: str, site_url: str) -> str:
    """Make protocol-relative and root-relative links absolute."""
    if href.startswith("//"):
        return f"https:{href}"
    if href.startswith("/"):
        return f"{site_url.rstrip('/')}{href}"
    return href


def upscale_image_url(src: str, config: RenderConfig) -> str:
    """Ask the image CDN for the configured size variant."""
    if config.media_host not in src:
        return src
    return re.sub(r"([?&]name=)\w+", rf"\g<1>{config.image_size}", src)


def is_emoji_image(src: str, config: RenderConfig) -> bool:
    return any(host in src for host in config.emoji_hosts)


# Short links


def _is_short_link(node: Tag, config: RenderConfig) -> bool:
    return dom.tag_name(node) == "a" and config.short_link_host in dom.attr(node, "href")


def _render_short_link(node: Tag, config: RenderConfig) -> str:
    title = dom.attr(node, "title").strip()
    visible_text = dom.text_of(node)

    # The title attribute carries the expanded URL when X provides it
    display = title if looks_like_url(title) else visible_text
    target = title if looks_like_url(title) else urljoin(config.site_url, dom.attr(node, "href"))

    if looks_like_url(display) or "." in display:
        return f"[{display}]({target})"
    return f"[{visible_text}]({target})"


# Mentions


def _is_mention(node: Tag, config: RenderConfig) -> bool:
    return dom.tag_name(node) == "a" and bool(MENTION_HREF_RE.match(dom.attr(node, "href")))


def _render_mention(node: Tag, config: RenderConfig) -> str:
    text = dom.text_of(node)
    if not text:
        text = dom.attr(node, "href").lstrip("/")
    return text if text.startswith("@") else f"@{text}"


# Images


def _is_image(node: Tag, config: RenderConfig) -> bool:
    return dom.tag_name(node) == "img"


def _render_image(node: Tag, config: RenderConfig) -> str:
    alt = dom.attr(node, "alt") or "Image"
    src = dom.attr(node, "src")

    if is_emoji_image(src, config):
        return alt

    src = upscale_image_url(src, config)
    return f"![{alt}]({src})" if src else ""


# Videos


def video_url(node: Tag) -> str:
    """Poster, own src, or first nested source of a video element."""
    source = dom.select_one(node, "source[src]")
    for candidate in (dom.attr(node, "poster"), dom.attr(node, "src"), dom.attr(source, "src")):
        if candidate:
            return candidate
    return ""


def _is_video(node: Tag, config: RenderConfig) -> bool:
    return dom.tag_name(node) == "video"


def _render_video(node: Tag, config: RenderConfig) -> str:
    url = video_url(node)
    return f"{VIDEO_LABEL}({url})" if url else VIDEO_LABEL


# Order matters: a short link can also look like a profile path
DEFAULT_RULES: tuple[Rule, ...] = (
    Rule("short_links", _is_short_link, _render_short_link),
    Rule("mentions", _is_mention, _render_mention),
    Rule("images", _is_image, _render_image),
    Rule("videos", _is_video, _render_video),
)


def match_rule(node: Tag, rules: Iterable[Rule], config: RenderConfig) -> Optional[Rule]:
    """First rule accepting ``node``, or None to fall back to generic conversion."""
    for rule in rules:
        if rule.filter(node, config):
            return rule
    return None
