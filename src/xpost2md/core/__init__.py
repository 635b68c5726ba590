"""Core extraction entry point."""

from .extractor import Extractor, extract

__all__ = ["Extractor", "extract"]
