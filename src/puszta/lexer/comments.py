"""Comment stripping pass.

Runs once over the whole source before the main scan, so the scanner
never sees ``<!-- ... -->`` sections.
"""

from __future__ import annotations

from puszta.lexer.modes import COMMENT_CLOSE, COMMENT_OPEN


def strip_comments(source: str) -> str:
    """Remove every ``<!-- ... -->`` section from source.

    An opening marker without a closing marker swallows the rest of the
    input.

    Args:
        source: Raw markup

    Returns:
        Markup with all comments removed

    Example:
        >>> strip_comments("a<!-- x -->b")
        'ab'
        >>> strip_comments("a<!-- never closed")
        'a'
    """
    start = source.find(COMMENT_OPEN)
    if start == -1:
        return source

    parts: list[str] = []
    pos = 0
    while start != -1:
        parts.append(source[pos:start])
        end = source.find(COMMENT_CLOSE, start + len(COMMENT_OPEN))
        if end == -1:
            return "".join(parts)
        pos = end + len(COMMENT_CLOSE)
        start = source.find(COMMENT_OPEN, pos)

    parts.append(source[pos:])
    return "".join(parts)
