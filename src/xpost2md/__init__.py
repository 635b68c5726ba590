"""
xpost2md - Convert rendered X.com tweets, threads and articles to Markdown.

Usage:
    from xpost2md import Extractor

    result = Extractor().extract(html, "https://x.com/jack/status/20")
    if result.success:
        print(result.document.body)
"""

__version__ = "1.0.0"

from .core.extractor import Extractor, extract
from .errors import ArticleBodyMissing, ExtractionError, ExtractResult, NotAPostPage
from .models.config import OutputConfig, RenderConfig, SelectorConfig, Xpost2mdConfig
from .models.document import AuthorInfo, DocumentKind, ExtractedDocument, PageKind, PostUnit
from .naming import suggest_filename
from .save import DocumentSaver

__all__ = [
    "__version__",
    # Core
    "Extractor",
    "extract",
    # Errors
    "ArticleBodyMissing",
    "ExtractionError",
    "ExtractResult",
    "NotAPostPage",
    # Config
    "OutputConfig",
    "RenderConfig",
    "SelectorConfig",
    "Xpost2mdConfig",
    # Documents
    "AuthorInfo",
    "DocumentKind",
    "ExtractedDocument",
    "PageKind",
    "PostUnit",
    # Output
    "DocumentSaver",
    "suggest_filename",
]
