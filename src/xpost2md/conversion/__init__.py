"""Markup conversion for xpost2md (sanitizing, rules, inline and block rendering)."""

from .blocks import BlockClassifier, assemble
from .cleanup import cleanup
from .frontmatter import FrontmatterBuilder
from .inline import InlineFormatter
from .markdown import MarkdownRenderer
from .protocols import MarkupRenderer, MarkupSanitizer
from .rules import DEFAULT_RULES, Rule
from .sanitizer import TreeSanitizer

__all__ = [
    # Protocols
    "MarkupRenderer",
    "MarkupSanitizer",
    # Implementations
    "BlockClassifier",
    "FrontmatterBuilder",
    "InlineFormatter",
    "MarkdownRenderer",
    "TreeSanitizer",
    # Rules
    "DEFAULT_RULES",
    "Rule",
    # Functions
    "assemble",
    "cleanup",
]
