"""Streaming markup lexer for Puszta.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer, LexerMode, parse_tag, strip_comments
├── core.py              # Lexer class (two-mode boundary scan)
├── modes.py             # LexerMode enum, skip-list and marker constants
├── comments.py          # Comment stripping pass
└── tags.py              # Tag text -> (name, attributes, is_closing)

Usage:
    >>> from puszta.lexer import Lexer
    >>> lexer = Lexer("<p>Hello</p>")
    >>> list(lexer.tokenize())
    [Element(p), Text('Hello'), Element(/p)]

"""

from puszta.lexer.comments import strip_comments
from puszta.lexer.core import Lexer
from puszta.lexer.modes import SKIP_TAGS, LexerMode
from puszta.lexer.tags import parse_tag

__all__ = ["SKIP_TAGS", "Lexer", "LexerMode", "parse_tag", "strip_comments"]
