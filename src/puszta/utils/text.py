"""Text helpers shared by the lexer and the layout engine.

Example:
    >>> from puszta.utils.text import split_words
    >>> split_words("  hello \\n world ")
    ['hello', 'world']
"""

from __future__ import annotations


def is_blank(text: str) -> bool:
    """Return True for empty or whitespace-only text."""
    return not text or text.isspace()


def split_words(text: str) -> list[str]:
    """Split a text run into words on any run of whitespace.

    Leading and trailing whitespace never produce empty words.

    Args:
        text: Character data from a Text token

    Returns:
        List of non-empty words in document order
    """
    return text.split()
