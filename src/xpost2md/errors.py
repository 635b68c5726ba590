"""Extraction failures and the result type returned at the engine boundary."""

from dataclasses import dataclass
from typing import Optional

from .models.document import ExtractedDocument


class ExtractionError(Exception):
    """Base class for fatal extraction failures."""

    default_message = "Extraction failed."

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class NotAPostPage(ExtractionError):
    """The current location is not a single-post (``/status/``) view."""

    default_message = "Not on an X.com status page. Navigate to a tweet or article first."


class ArticleBodyMissing(ExtractionError):
    """An article was detected but its rich-text body could not be located."""

    default_message = "Could not find the article body. The page may not have fully loaded."


@dataclass(frozen=True)
class ExtractResult:
    """
    Outcome of one extraction call.

    Exactly one of ``document`` and ``error`` is set.
    """

    success: bool
    document: Optional[ExtractedDocument] = None
    error: Optional[str] = None

    @classmethod
    def ok(cls, document: ExtractedDocument) -> "ExtractResult":
        return cls(success=True, document=document)

    @classmethod
    def failed(cls, error: ExtractionError) -> "ExtractResult":
        return cls(success=False, error=error.message)
