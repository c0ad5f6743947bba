"""Lexer operating modes and constants.

This module defines the two scanning modes of the lexer and the tag
name sets that change how the scan treats a subtree.
"""

from __future__ import annotations

from enum import Enum, auto


class LexerMode(Enum):
    """Lexer operating modes.

    - DATA: Between tags, accumulating character data
    - TAG: After ``<``, accumulating tag text until ``>``

    """

    DATA = auto()
    TAG = auto()


# Elements whose whole subtree is dropped from the token stream
SKIP_TAGS = frozenset({"head", "script", "style"})

# Element whose text content becomes the document title
TITLE_TAG = "title"

COMMENT_OPEN = "<!--"
COMMENT_CLOSE = "-->"

# Tag text containing one of these is a declaration or comment remnant
DOCTYPE_MARKER = "!doctype"
COMMENT_REMNANT = "!--"

# Tag name left behind by a split comment marker
COMMENT_ARTIFACT_NAME = "--"
