"""Two-mode streaming lexer for simplified markup.

Scans the comment-free source left to right, jumping between ``<`` and
``>`` boundaries with str.find instead of stepping one character at a time.
Every iteration advances past at least one boundary character, so the scan
is O(n) and always terminates.

No regex in the hot path. Malformed input never raises: truncated tags,
unterminated comments and dangling quotes degrade to partial output.

Thread Safety:
A Lexer is consumed by one tokenize() call; create one per document.
The title is final once the generator is exhausted.

"""

from __future__ import annotations

from collections.abc import Iterator

from puszta.lexer.comments import strip_comments
from puszta.lexer.modes import (
    COMMENT_ARTIFACT_NAME,
    COMMENT_REMNANT,
    DOCTYPE_MARKER,
    SKIP_TAGS,
    TITLE_TAG,
    LexerMode,
)
from puszta.lexer.tags import parse_tag
from puszta.tokens import Element, Text, Token
from puszta.utils.logger import get_logger
from puszta.utils.text import is_blank

logger = get_logger(__name__)


class Lexer:
    """Streaming lexer producing Text and Element tokens.

    Usage:
        >>> lexer = Lexer("<title>Home</title><b>hi</b> there")
        >>> for token in lexer.tokenize():
        ...     print(token)
        Element(title)
        Element(/title)
        Element(b)
        Text('hi')
        Element(/b)
        Text('there')
        >>> lexer.title
        'Home'

    Skip-listed elements (head, script, style) and everything nested in
    them are left out of the stream. The title text is captured, not
    emitted, and is available through ``title`` once the stream is
    exhausted.

    """

    __slots__ = (
        "_source",
        "_source_len",
        "_pos",
        "_mode",
        "_skip_depth",
        "_in_title",
        "_title",
    )

    def __init__(self, source: str) -> None:
        """Prepare a scan over one document.

        Args:
            source: Raw markup; comments are stripped immediately
        """
        self._source = strip_comments(source)
        self._source_len = len(self._source)
        self._pos = 0
        self._mode = LexerMode.DATA
        self._skip_depth = 0
        self._in_title = False
        self._title = ""

    @property
    def title(self) -> str:
        """Raw text of the last title element seen so far."""
        return self._title

    @property
    def skip_depth(self) -> int:
        """Current nesting depth inside skip-listed elements."""
        return self._skip_depth

    def tokenize(self) -> Iterator[Token]:
        """Scan the source and yield tokens in document order.

        Yields:
            Text and Element tokens

        Complexity: O(n) where n = len(source)
        """
        source = self._source
        source_len = self._source_len

        while self._pos < source_len:
            if self._mode is LexerMode.DATA:
                boundary = source.find("<", self._pos)
                if boundary == -1:
                    break
                yield from self._emit_text(source[self._pos : boundary])
                self._pos = boundary + 1
                self._mode = LexerMode.TAG
            else:
                close = source.find(">", self._pos)
                reopen = source.find("<", self._pos)
                if reopen != -1 and (close == -1 or reopen < close):
                    # "<" inside a tag: the partial tag is dropped
                    logger.debug("Discarding truncated tag %r", source[self._pos : reopen])
                    self._pos = reopen + 1
                    continue
                if close == -1:
                    break
                raw = source[self._pos : close]
                self._pos = close + 1
                self._mode = LexerMode.DATA
                yield from self._emit_tag(raw)

        if self._mode is LexerMode.DATA:
            yield from self._emit_text(source[self._pos :], at_eof=True)
        elif self._pos < source_len:
            logger.debug("Discarding unterminated tag at end of input")
        self._pos = source_len

    def _emit_text(self, text: str, *, at_eof: bool = False) -> Iterator[Token]:
        """Emit a Text token for character data between tags.

        Title text is captured raw instead of emitted. Trailing text after an
        unclosed title is emitted as Text so a truncated document keeps it.
        """
        if is_blank(text):
            return
        if self._in_title and not at_eof:
            self._title = text
            return
        if self._skip_depth == 0:
            yield Text(text.strip())

    def _emit_tag(self, raw: str) -> Iterator[Token]:
        """Classify tag text and emit an Element token when visible."""
        if not raw:
            return
        if DOCTYPE_MARKER in raw.lower() or COMMENT_REMNANT in raw:
            return

        name, attributes, is_closing = parse_tag(raw)
        name = name.strip()

        if name == TITLE_TAG:
            self._in_title = not is_closing

        if name in SKIP_TAGS:
            if is_closing:
                self._skip_depth = max(0, self._skip_depth - 1)
            else:
                self._skip_depth += 1
            return

        if not name or name == COMMENT_ARTIFACT_NAME:
            return
        if self._skip_depth == 0:
            yield Element(name, attributes, is_closing)
