"""Read-only helpers for walking BeautifulSoup markup trees."""

from __future__ import annotations

import copy
import re
from typing import Optional, Union

from bs4 import BeautifulSoup, NavigableString, Tag
from bs4.element import Comment, Declaration, Doctype, ProcessingInstruction

MarkupNode = Union[Tag, NavigableString]

# NavigableString subclasses that never carry visible text
_NON_TEXT_STRINGS = (Comment, Declaration, Doctype, ProcessingInstruction)

_WHITESPACE_RE = re.compile(r"\s+")


def parse_html(html: Union[str, bytes]) -> BeautifulSoup:
    """Parse raw HTML into a tree the engine can walk."""
    if isinstance(html, bytes):
        html = html.decode("utf-8", errors="replace")
    return BeautifulSoup(html, "html.parser")


def attr(node: Optional[MarkupNode], name: str, default: str = "") -> str:
    """
    Look up an attribute as a string.

    Multi-valued attributes (``class``, ``rel``) are joined with a space.
    Missing nodes, text nodes and absent attributes all give ``default``.
    """
    if not isinstance(node, Tag):
        return default
    value = node.get(name)
    if value is None:
        return default
    if isinstance(value, (list, tuple)):
        return " ".join(value)
    return str(value)


def has_attr(node: Optional[MarkupNode], name: str) -> bool:
    return isinstance(node, Tag) and node.has_attr(name)


def classes(node: Optional[MarkupNode]) -> list[str]:
    """Class tokens of an element (empty for text nodes)."""
    if not isinstance(node, Tag):
        return []
    value = node.get("class") or []
    if isinstance(value, str):
        return value.split()
    return list(value)


def has_class(node: Optional[MarkupNode], name: str) -> bool:
    return name in classes(node)


def class_contains(node: Optional[MarkupNode], fragment: str) -> bool:
    """True if the raw class string contains ``fragment`` anywhere."""
    return fragment in attr(node, "class")


def tag_name(node: Optional[MarkupNode]) -> str:
    if not isinstance(node, Tag):
        return ""
    return (node.name or "").lower()


def is_text(node: object) -> bool:
    return isinstance(node, NavigableString) and not isinstance(node, _NON_TEXT_STRINGS)


def text_of(node: Optional[MarkupNode], strip: bool = True) -> str:
    """Concatenated descendant text (``textContent``)."""
    if node is None:
        return ""
    if isinstance(node, Tag):
        text = node.get_text()
    elif is_text(node):
        text = str(node)
    else:
        return ""
    return text.strip() if strip else text


def collapse_whitespace(text: str) -> str:
    return _WHITESPACE_RE.sub(" ", text).strip()


def element_children(node: Optional[MarkupNode]) -> list[Tag]:
    if not isinstance(node, Tag):
        return []
    return [child for child in node.children if isinstance(child, Tag)]


def select_one(node: Optional[MarkupNode], selector: str) -> Optional[Tag]:
    """CSS ``select_one`` that tolerates missing nodes."""
    if not isinstance(node, Tag):
        return None
    result = node.select_one(selector)
    return result if isinstance(result, Tag) else None


def select_all(node: Optional[MarkupNode], selector: str) -> list[Tag]:
    if not isinstance(node, Tag):
        return []
    return [el for el in node.select(selector) if isinstance(el, Tag)]


def matches(node: Optional[MarkupNode], selector: str) -> bool:
    """True if the element itself matches a CSS selector."""
    if not isinstance(node, Tag):
        return False
    return bool(node.css.match(selector))


def self_or_descendant(node: Optional[MarkupNode], selector: str) -> Optional[Tag]:
    """The element itself if it matches ``selector``, else its first match inside."""
    if matches(node, selector):
        return node  # type: ignore[return-value]
    return select_one(node, selector)


def closest(node: Optional[MarkupNode], selector: str, stop: Optional[Tag] = None) -> Optional[Tag]:
    """
    Nearest ancestor-or-self matching ``selector``.

    The search does not climb above ``stop`` when one is given.
    """
    current = node if isinstance(node, Tag) else None
    while current is not None:
        if matches(current, selector):
            return current
        if current is stop:
            return None
        parent = current.parent
        current = parent if isinstance(parent, Tag) and not isinstance(parent, BeautifulSoup) else None
    return None


def clone(node: Tag) -> Tag:
    """Detached deep copy of an element; the original tree is left untouched."""
    return copy.copy(node)
