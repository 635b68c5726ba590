"""Tests for the cleanup pipeline."""

import pytest

from xpost2md.conversion import cleanup

SAMPLES = [
    "text\n\n@bob\n\n, more text",
    "Thanks\n\n@alice\n\n@bob\n\n!",
    "Hello @bob",
    "First paragraph.\n\nSecond paragraph.",
    "Orphan\n\n.\n\nNext",
    "End with mention\n\n@carol\n\n.",
    "a\n\n\n\n\nb",
    "@a.\n\n\n\n@b",
    "x\n\n,\n\n@b",
    "list\n\n- one\n- two\n\n@dave\n\n?\n\n\nDone",
    "",
]


class TestCleanup:
    """Tests for mention and punctuation joining."""

    def test_joins_mention_into_sentence(self):
        """Blank lines around a mention and its punctuation collapse."""
        assert cleanup("text\n\n@bob\n\n, more text") == "text @bob, more text"

    def test_consecutive_mentions(self):
        """Mentions separated by blank lines end up space-separated."""
        assert cleanup("Thanks\n\n@alice\n\n@bob") == "Thanks @alice @bob"

    def test_orphaned_punctuation(self):
        """Lone punctuation rejoins the preceding line."""
        assert cleanup("Great work\n\n!\nNext") == "Great work!\nNext"

    def test_trailing_punctuation_after_mention(self):
        """Punctuation after a final mention is pulled up."""
        assert cleanup("Ask\n\n@carol\n\n.") == "Ask @carol."

    def test_leaves_paragraphs_alone(self):
        """Ordinary paragraphs keep their blank line."""
        text = "First paragraph.\n\nSecond paragraph."
        assert cleanup(text) == text

    def test_collapses_blank_line_runs(self):
        """Never more than one blank line."""
        assert cleanup("a\n\n\n\n\nb") == "a\n\nb"

    @pytest.mark.parametrize("sample", SAMPLES)
    def test_idempotent(self, sample):
        """A second pass changes nothing."""
        once = cleanup(sample)
        assert cleanup(once) == once
