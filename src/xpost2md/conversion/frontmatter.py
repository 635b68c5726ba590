"""YAML frontmatter for saved documents."""

from typing import Any, Optional

import yaml

from ..models.document import ExtractedDocument


class FrontmatterBuilder:
    """
    Builds YAML frontmatter for Markdown files.

    Fields set to None are left out; everything else is emitted in the
    order given.

    Example:
        builder = FrontmatterBuilder()
        frontmatter = builder.build(
            title="Shipping faster",
            url="https://x.com/jack/status/20",
            author="jack",
        )
    """

    def build(
        self,
        title: Optional[str] = None,
        url: Optional[str] = None,
        **extra_fields: Any,
    ) -> str:
        """
        Build YAML frontmatter string.

        Args:
            title: Document title
            url: Source URL
            **extra_fields: Additional frontmatter fields

        Returns:
            YAML frontmatter string (with --- delimiters)
        """
        fields = {"title": title, "source": url, **extra_fields}
        data = {key: value for key, value in fields.items() if value is not None}

        dumped = yaml.safe_dump(data, sort_keys=False, allow_unicode=True) if data else ""
        return f"---\n{dumped}---\n\n"

    def for_document(self, doc: ExtractedDocument) -> str:
        """Frontmatter carrying a document's structured record."""
        return self.build(
            title=doc.title,
            url=doc.source_url,
            author=doc.author.name,
            handle=doc.author.handle,
            type=doc.kind.value,
            date=doc.published_at,
            post_id=doc.post_id,
        )
