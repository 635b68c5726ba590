"""Tests for filenames, frontmatter and saving."""

import pytest
import yaml

from xpost2md import AuthorInfo, DocumentKind, DocumentSaver, ExtractedDocument, OutputConfig, suggest_filename
from xpost2md.conversion import FrontmatterBuilder
from xpost2md.naming import sanitize_filename, slugify


def make_doc(kind=DocumentKind.TWEET, title=None, handle="@alice"):
    return ExtractedDocument(
        kind=kind,
        author=AuthorInfo("Alice", handle),
        title=title,
        body="# Alice (@alice)\n\nHi\n\n---\n\n> Source: https://x.com/alice/status/42\n> Date: 2026-01-02",
        source_url="https://x.com/alice/status/42",
        published_at="2026-01-02",
        post_id="42",
    )


class TestNaming:
    """Tests for suggested filenames."""

    def test_tweet_uses_post_id(self):
        assert suggest_filename(make_doc()) == "alice-42.md"

    def test_article_uses_title_slug(self):
        doc = make_doc(DocumentKind.ARTICLE, title="Shipping Faster: Notes & Lessons!")

        assert suggest_filename(doc) == "alice-shipping-faster-notes-lessons.md"

    def test_slug_truncated(self):
        assert len(slugify("word " * 40)) == 60

    def test_untitled_article_uses_post_id(self):
        assert suggest_filename(make_doc(DocumentKind.ARTICLE, title="!!!")) == "alice-42.md"

    def test_sanitize_filename(self):
        assert sanitize_filename('a<b>:"c"/d  e--f-') == "a_b___c__d-e-f"
        assert len(sanitize_filename("x" * 300)) == 200


def parse_frontmatter(text):
    assert text.startswith("---\n")
    assert text.endswith("---\n\n")
    return yaml.safe_load(text[len("---\n") : -len("---\n\n")])


class TestFrontmatterBuilder:
    """Tests for FrontmatterBuilder."""

    def test_builds_basic_frontmatter(self):
        result = FrontmatterBuilder().build(title='Say "hi"', url="https://x.com/a/status/1")

        assert parse_frontmatter(result) == {"title": 'Say "hi"', "source": "https://x.com/a/status/1"}

    def test_backslashes_survive(self):
        """Titles and names with backslashes stay valid YAML and round-trip unchanged."""
        title = r"Paths like C:\temp\new and \q"
        result = FrontmatterBuilder().build(title=title, author="back\\slash")

        assert parse_frontmatter(result) == {"title": title, "author": "back\\slash"}

    def test_document_record(self):
        result = FrontmatterBuilder().for_document(make_doc())

        assert parse_frontmatter(result) == {
            "source": "https://x.com/alice/status/42",
            "author": "Alice",
            "handle": "@alice",
            "type": "tweet",
            "date": "2026-01-02",
            "post_id": "42",
        }

    def test_field_order(self):
        result = FrontmatterBuilder().for_document(make_doc(DocumentKind.ARTICLE, title="Notes: part 1"))

        assert list(parse_frontmatter(result)) == ["title", "source", "author", "handle", "type", "date", "post_id"]

    def test_empty(self):
        assert FrontmatterBuilder().build() == "---\n---\n\n"


class TestDocumentSaver:
    """Tests for DocumentSaver."""

    def test_saves_under_suggested_name(self, tmp_path):
        path = DocumentSaver(OutputConfig(directory=tmp_path / "notes")).save(make_doc())

        assert path == (tmp_path / "notes" / "alice-42.md").resolve()
        content = path.read_text(encoding="utf-8")
        assert content.startswith("# Alice (@alice)")
        assert content.endswith("> Date: 2026-01-02\n")

    def test_frontmatter(self, tmp_path):
        path = DocumentSaver(OutputConfig(directory=tmp_path, frontmatter=True)).save(make_doc())

        assert path.read_text(encoding="utf-8").startswith("---\nsource: https://x.com/alice/status/42\n")

    def test_no_overwrite(self, tmp_path):
        saver = DocumentSaver(OutputConfig(directory=tmp_path, overwrite=False))
        saver.save(make_doc())

        with pytest.raises(FileExistsError):
            saver.save(make_doc())

    def test_explicit_filename_is_sanitized(self, tmp_path):
        path = DocumentSaver(OutputConfig(directory=tmp_path)).save(make_doc(), filename="../escape.md")

        assert path.parent == tmp_path.resolve()
        assert path.name == ".._escape.md"

    def test_document_is_immutable(self):
        doc = make_doc()

        with pytest.raises(AttributeError):
            doc.body = "changed"

    def test_to_dict(self):
        record = make_doc().to_dict()

        assert record["type"] == "tweet"
        assert record["author"] == {"name": "Alice", "handle": "@alice"}
        assert record["tweetId"] == "42"
        assert record["sourceUrl"] == "https://x.com/alice/status/42"
