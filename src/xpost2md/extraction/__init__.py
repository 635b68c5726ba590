"""Page classification and tweet, thread and article extraction."""

from .article import ArticleExtractor
from .detector import classify
from .metadata import extract_author, extract_date, extract_post_id, is_post_url
from .thread import aggregate
from .tweet import TweetExtractor

__all__ = [
    "ArticleExtractor",
    "TweetExtractor",
    "aggregate",
    "classify",
    "extract_author",
    "extract_date",
    "extract_post_id",
    "is_post_url",
]
