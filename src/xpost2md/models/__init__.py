"""Xpost2md configuration and document models."""

from .config import OutputConfig, RenderConfig, SelectorConfig, Xpost2mdConfig
from .document import (
    UNKNOWN_HANDLE,
    UNKNOWN_NAME,
    AuthorInfo,
    BlankLine,
    Block,
    Bold,
    CodeBlock,
    DocumentKind,
    ExtractedDocument,
    Heading,
    InlineRun,
    Italic,
    Link,
    ListItem,
    PageKind,
    Paragraph,
    PostUnit,
    Separator,
    Text,
    render_runs,
)

__all__ = [
    # Config
    "OutputConfig",
    "RenderConfig",
    "SelectorConfig",
    "Xpost2mdConfig",
    # Documents
    "UNKNOWN_HANDLE",
    "UNKNOWN_NAME",
    "AuthorInfo",
    "DocumentKind",
    "ExtractedDocument",
    "PageKind",
    "PostUnit",
    # Inline runs
    "InlineRun",
    "Text",
    "Bold",
    "Italic",
    "Link",
    "render_runs",
    # Blocks
    "Block",
    "BlankLine",
    "CodeBlock",
    "Heading",
    "ListItem",
    "Paragraph",
    "Separator",
]
