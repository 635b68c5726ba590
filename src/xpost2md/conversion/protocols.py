"""Protocol definitions for markup conversion."""

from typing import Protocol

from bs4 import Tag


class MarkupRenderer(Protocol):
    """
    Protocol for turning a markup subtree into Markdown.

    Implementations must not modify the subtree they are given.
    """

    def render(self, node: Tag) -> str:
        """
        Render a subtree to Markdown.

        Args:
            node: Element to render

        Returns:
            Markdown string
        """
        ...


class MarkupSanitizer(Protocol):
    """Protocol for removing non-content nodes from a copy of a subtree."""

    def sanitize(self, node: Tag) -> Tag:
        """
        Return a cleaned copy of ``node``.

        Args:
            node: Element to clean (left untouched)

        Returns:
            Detached deep copy without UI chrome
        """
        ...
