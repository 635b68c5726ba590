"""Whitespace cleanup around mentions and punctuation in rendered Markdown."""

import re

_HANDLE = r"@[A-Za-z0-9_]+"
_PUNCT = r"[.,;:!?]"

# Applied in order; block rendering puts short inline tokens on their own
# paragraph, these rewrites join them back into the sentence.
CLEANUP_STEPS: tuple[tuple[re.Pattern[str], str], ...] = (
    # "text\n\n@handle" -> "text @handle"
    (re.compile(rf"\n{{2,}}({_HANDLE})"), r" \1"),
    # "@handle\n\n," -> "@handle,"
    (re.compile(rf"({_HANDLE})\n{{2,}}({_PUNCT})"), r"\1\2"),
    # "@a\n\n@b" -> "@a @b"
    (re.compile(rf"({_HANDLE}{_PUNCT}?)\n{{2,}}({_HANDLE})"), r"\1 \2"),
    # "text\n\n.\n" -> "text.\n"
    (re.compile(rf"\n{{2,}}({_PUNCT})\s*\n"), r"\1\n"),
    # "@handle\n\n." at the end of a line
    (re.compile(rf"({_HANDLE})\n{{2,}}({_PUNCT})\s*$", re.MULTILINE), r"\1\2"),
    (re.compile(r"\n{3,}"), "\n\n"),
)


def cleanup(markdown: str) -> str:
    """
    Join mentions and stray punctuation back into their sentences.

    Running it again on its own output changes nothing.
    """
    for pattern, replacement in CLEANUP_STEPS:
        markdown = pattern.sub(replacement, markdown)
    return markdown
