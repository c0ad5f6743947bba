"""
Puszta: markup tokenizer and inline text layout engine.

Turns a simplified markup document into word-wrapped, baseline-aligned text
runs on a fixed-size canvas. Measurement and drawing are delegated to a
TextRenderer collaborator, so the engine runs the same against a GPU glyph
cache or the in-memory DisplayList.

Quick Start:
    >>> from puszta import Canvas, DisplayList, FontMetrics, Page
    >>> renderer = DisplayList({"rubik": FontMetrics(), "rubik_italic": FontMetrics()})
    >>> page = Page(renderer, {"regular": "rubik", "italic": "rubik_italic"})
    >>> page.load("<title>Home</title><p>Hello <b>World</b></p>")
    >>> page.title
    'Home'
    >>> result = page.render(800, 600)
    >>> [segment.text for segment in result.segments]
    ['Hello', 'World']

    >>> # Or the two stages separately
    >>> from puszta import tokenize, layout_tokens
    >>> stream = tokenize("<i>slanted</i> text")
    >>> result = layout_tokens(stream.tokens, renderer, {"regular": "rubik"}, Canvas(800, 600))

"""

from collections.abc import Iterable, Mapping

from puszta.config import (
    LayoutConfig,
    get_layout_config,
    layout_config_context,
    reset_layout_config,
    set_layout_config,
)
from puszta.errors import (
    ConfigError,
    FontLookupError,
    PusztaError,
    ReentrantRenderError,
)
from puszta.layout import (
    Canvas,
    FontRole,
    LayoutEngine,
    LayoutResult,
    LineBox,
    RenderSegment,
    Weight,
)
from puszta.lexer import Lexer, parse_tag, strip_comments
from puszta.profiling import LayoutAccumulator, get_layout_accumulator, profiled_layout
from puszta.renderers import DisplayList, DrawCommand, FontMetrics, TextRenderer
from puszta.tokens import Element, Text, Token, TokenStream
from puszta.utils.logger import get_logger

__version__ = "0.5.0"

DEFAULT_TITLE = "New Page"

logger = get_logger(__name__)


def tokenize(markup: str) -> TokenStream:
    """Tokenize markup into a token stream and title.

    Never raises: malformed markup yields best-effort output.

    Args:
        markup: Complete document body

    Returns:
        TokenStream with the ordered tokens and the captured title

    Example:
        >>> tokenize("<b>hi</b> there").tokens
        (Element(b), Text('hi'), Element(/b), Text('there'))
    """
    lexer = Lexer(markup)
    tokens = tuple(lexer.tokenize())
    stream = TokenStream(tokens=tokens, title=lexer.title)

    logger.debug("Tokenized %d chars into %d tokens", len(markup), len(tokens))
    acc = get_layout_accumulator()
    if acc is not None:
        acc.record_tokenize(source_length=len(markup), token_count=len(tokens))
    return stream


def layout_tokens(
    tokens: Iterable[Token],
    renderer: TextRenderer,
    fonts: Mapping[str, str],
    canvas: Canvas,
    *,
    start_x: float = 50.0,
    start_y: float = 0.0,
    config: LayoutConfig | None = None,
) -> LayoutResult:
    """Lay out a token sequence in a single pass.

    Convenience wrapper that builds a LayoutEngine for one pass. Use
    LayoutEngine or Page directly to render the same document repeatedly.

    Raises:
        FontLookupError: If the regular font role cannot be bound
    """
    engine = LayoutEngine(renderer, fonts, start_x=start_x, start_y=start_y, config=config)
    return engine.render(tokens, canvas)


class Page:
    """One loaded document plus the engine that draws it.

    Usage:
        >>> page = Page(renderer, {"regular": "rubik_regular", "italic": "rubik_italic"})
        >>> page.load(body)
        >>> page.set_cursor(y=scroll_offset)
        >>> result = page.render(1280, 720, dpi_scale=1.5)

    Loading a document discards the previous document's tokens and title.
    Each render() lays the whole document out again from scratch.

    """

    __slots__ = ("_engine", "_stream")

    def __init__(
        self,
        renderer: TextRenderer,
        fonts: Mapping[str, str],
        *,
        start_x: float = 50.0,
        start_y: float = 0.0,
        config: LayoutConfig | None = None,
    ) -> None:
        """Initialize the page and bind its fonts.

        Raises:
            FontLookupError: If the regular font role cannot be bound
        """
        self._engine = LayoutEngine(
            renderer, fonts, start_x=start_x, start_y=start_y, config=config
        )
        self._stream = TokenStream()

    @property
    def engine(self) -> LayoutEngine:
        return self._engine

    @property
    def tokens(self) -> tuple[Token, ...]:
        return self._stream.tokens

    @property
    def has_tokens(self) -> bool:
        return bool(self._stream.tokens)

    @property
    def title(self) -> str:
        """Document title, or "New Page" when none was captured."""
        return self._stream.title or DEFAULT_TITLE

    def load(self, markup: str) -> None:
        """Tokenize a new document, replacing the current one."""
        self._stream = tokenize(markup)

    def set_cursor(self, x: float | None = None, y: float | None = None) -> None:
        """Move the start cursor for later renders (scrolling)."""
        self._engine.set_cursor(x=x, y=y)

    def render(self, width: float, height: float, dpi_scale: float = 1.0) -> LayoutResult:
        """Lay out and draw the loaded document on a canvas of the given size."""
        return self._engine.render(self._stream.tokens, Canvas(width, height, dpi_scale))


__all__ = [
    "DEFAULT_TITLE",
    "Canvas",
    "ConfigError",
    "DisplayList",
    "DrawCommand",
    "Element",
    "FontLookupError",
    "FontMetrics",
    "FontRole",
    "LayoutAccumulator",
    "LayoutConfig",
    "LayoutEngine",
    "LayoutResult",
    "Lexer",
    "LineBox",
    "Page",
    "PusztaError",
    "ReentrantRenderError",
    "RenderSegment",
    "Text",
    "TextRenderer",
    "Token",
    "TokenStream",
    "Weight",
    "__version__",
    "get_layout_accumulator",
    "get_layout_config",
    "layout_tokens",
    "layout_config_context",
    "parse_tag",
    "profiled_layout",
    "reset_layout_config",
    "set_layout_config",
    "strip_comments",
    "tokenize",
]
