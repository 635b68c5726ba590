"""Writing extracted documents to disk."""

import logging
from pathlib import Path
from typing import Optional

from .conversion.frontmatter import FrontmatterBuilder
from .models.config import OutputConfig
from .models.document import ExtractedDocument
from .naming import sanitize_filename, suggest_filename

logger = logging.getLogger(__name__)


class DocumentSaver:
    """
    Saves an ExtractedDocument as a Markdown file.

    The file lands in the configured output directory under the document's
    suggested filename. Creates parent directories as needed.

    Example:
        saver = DocumentSaver(OutputConfig(directory=Path("./notes")))
        path = saver.save(doc)
    """

    def __init__(self, config: Optional[OutputConfig] = None) -> None:
        self._config = config or OutputConfig()
        self._frontmatter = FrontmatterBuilder() if self._config.frontmatter else None

    def _validate_output_path(self, output_path: Path) -> Path:
        """
        Validate that output path is safe.

        Raises:
            ValueError: If path is outside the output directory
        """
        resolved = output_path.resolve()
        base_resolved = self._config.directory.resolve()
        try:
            resolved.relative_to(base_resolved)
        except ValueError as err:
            raise ValueError(f"Output path {resolved} is outside base directory {base_resolved}") from err
        return resolved

    def output_path(self, doc: ExtractedDocument, filename: Optional[str] = None) -> Path:
        name = sanitize_filename(filename or suggest_filename(doc))
        return self._validate_output_path(self._config.directory / name)

    def render(self, doc: ExtractedDocument) -> str:
        """File content for a document (frontmatter, then the body)."""
        content = doc.body
        if self._frontmatter is not None:
            content = self._frontmatter.for_document(doc) + content
        return content if content.endswith("\n") else content + "\n"

    def save(self, doc: ExtractedDocument, filename: Optional[str] = None) -> Path:
        """
        Write the document and return the path written.

        Raises:
            FileExistsError: If the file exists and overwriting is disabled
            ValueError: If the filename escapes the output directory
            OSError: On file system errors
        """
        path = self.output_path(doc, filename)
        if path.exists() and not self._config.overwrite:
            raise FileExistsError(f"{path} already exists")

        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(self.render(doc), encoding="utf-8")
        except OSError as e:
            logger.error(f"Failed to save {doc.source_url} to {path}: {e}")
            raise

        logger.info(f"Saved: {path}")
        return path
