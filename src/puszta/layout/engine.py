"""Inline layout engine.

Walks a token stream once, tracking font, weight and size, breaking words
into lines against the renderer's measurements, and flushing each line
onto a shared baseline.

Every render() call builds a fresh LayoutPass; typographic state and the
pending line box live on that pass object and are discarded with it.

Failure model:
    Only engine construction can fail (FontLookupError when the regular
    font cannot be bound). Inside a pass, collaborator failures are logged
    and recovered: an unavailable font keeps the previous font, a failed
    measurement counts as zero width, a failed draw is skipped.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from puszta.config import LayoutConfig, get_layout_config
from puszta.errors import FontLookupError, ReentrantRenderError
from puszta.layout.line import LineBox, RenderSegment
from puszta.layout.state import Canvas, FontRole, LayoutState, Weight
from puszta.layout.transitions import transition_for
from puszta.lexer.modes import SKIP_TAGS
from puszta.profiling import get_layout_accumulator
from puszta.renderers.protocol import TextRenderer
from puszta.tokens import Element, Text, Token
from puszta.utils.logger import get_logger
from puszta.utils.text import split_words

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class LayoutResult:
    """Output of one layout pass.

    Attributes:
        segments: Every emitted segment, in document order, with final y
        lines: Number of non-empty lines flushed
        content_height: Distance from the start y to the bottom of the
            last line
    """

    segments: tuple[RenderSegment, ...] = ()
    lines: int = 0
    content_height: float = 0.0


class LayoutPass:
    """State and logic for a single layout pass.

    Not reusable: create one per render call.
    """

    __slots__ = (
        "_renderer",
        "_fonts",
        "_config",
        "_canvas",
        "_state",
        "_line",
        "_segments",
        "_lines",
        "_left",
        "_start_y",
        "_applied_weights",
    )

    def __init__(
        self,
        renderer: TextRenderer,
        fonts: Mapping[FontRole, str],
        config: LayoutConfig,
        canvas: Canvas,
        start_x: float,
        start_y: float,
    ) -> None:
        self._renderer = renderer
        self._fonts = fonts
        self._config = config
        self._canvas = canvas
        self._left = start_x
        self._start_y = start_y
        self._line = LineBox()
        self._segments: list[RenderSegment] = []
        self._lines = 0
        self._applied_weights: dict[str, float] = {}

        self._state = LayoutState(
            font_role=FontRole.REGULAR,
            font_id=fonts[FontRole.REGULAR],
            weight=Weight.NORMAL,
            size=config.base_font_size,
            cursor_x=start_x,
            cursor_y=start_y,
        )
        if not canvas.dpi_scale > 0:
            logger.warning(
                "Non-positive dpi_scale %r; scale clamps to %s", canvas.dpi_scale, config.min_scale
            )
        self._state.resize(config.base_font_size, canvas.dpi_scale, config)
        self._apply_weight(self._state.font_id, self._weight_value())

    @property
    def state(self) -> LayoutState:
        return self._state

    def run(self, tokens: Iterable[Token]) -> LayoutResult:
        """Lay out every token, then flush the last partial line."""
        for token in tokens:
            if isinstance(token, Text):
                self._flow_text(token.content)
            elif isinstance(token, Element):
                self._apply_element(token)
        self._flush()

        state = self._state
        height = state.cursor_y - self._start_y
        if self._lines:
            height += state.line_height
        return LayoutResult(
            segments=tuple(self._segments),
            lines=self._lines,
            content_height=max(height, 0.0),
        )

    # =========================================================================
    # Tag transitions
    # =========================================================================

    def _apply_element(self, element: Element) -> None:
        if element.name in SKIP_TAGS:
            return

        transition = transition_for(element.name, element.is_closing)
        state = self._state
        config = self._config
        restyle = False

        if transition.weight is not None and transition.weight is not state.weight:
            state.weight = transition.weight
            restyle = True

        if transition.font_role is not None:
            restyle = self._switch_font(transition.font_role, transition.reanchor) or restyle

        if transition.size_delta is not None:
            size = config.base_font_size + transition.size_delta
            if size != state.size:
                state.resize(size, self._canvas.dpi_scale, config)

        if restyle:
            self._apply_weight(state.font_id, self._weight_value())

        if transition.block_lines:
            self._flush()
            state.cursor_y += transition.block_lines * state.line_height
            state.cursor_x = self._left

    def _switch_font(self, role: FontRole, reanchor: bool) -> bool:
        """Make the font for role active. Returns True if the font changed."""
        state = self._state
        font_id = self._fonts[role]
        if font_id == state.font_id:
            state.font_role = role
            return False
        if not self._has_font(font_id):
            logger.warning(
                "Font '%s' for role '%s' unavailable; keeping '%s'",
                font_id,
                role.value,
                state.font_id,
            )
            return False

        if reanchor:
            old_ascent = self._ascent(state.font_id)
            new_ascent = self._ascent(font_id)
            state.cursor_y += (old_ascent - new_ascent) * state.scale

        state.font_role = role
        state.font_id = font_id
        return True

    # =========================================================================
    # Word flow
    # =========================================================================

    def _flow_text(self, content: str) -> None:
        words = split_words(content)
        if not words:
            return

        state = self._state
        config = self._config
        right_edge = self._canvas.width - config.horizontal_inset
        space_width = self._measure(" ")
        weight = self._weight_value()

        for word in words:
            word = word.strip()
            if not word:
                continue

            if not self._line and state.cursor_x > self._left + config.cursor_epsilon:
                state.cursor_x = self._left

            width = self._measure(word)

            # A lone over-wide word still goes on its own line
            if state.cursor_x + width > right_edge and self._line:
                self._flush()
                state.cursor_y += state.line_height
                state.cursor_x = self._left

            self._line.append(
                RenderSegment(
                    text=word,
                    x=state.cursor_x,
                    y=state.cursor_y,
                    scale=state.scale,
                    color=config.text_color,
                    font_id=state.font_id,
                    weight=weight,
                )
            )
            state.cursor_x += width + space_width

    # =========================================================================
    # Flush
    # =========================================================================

    def _flush(self) -> None:
        if not self._line:
            return

        state = self._state
        ascents: dict[str, float] = {}

        def ascent(font_id: str) -> float:
            if font_id not in ascents:
                ascents[font_id] = self._ascent(font_id)
            return ascents[font_id]

        _, aligned = self._line.align(state.cursor_y, ascent, self._config.baseline_factor)
        for segment in aligned:
            self._apply_weight(segment.font_id, segment.weight)
            self._draw(segment)
            self._segments.append(segment)

        self._lines += 1
        state.cursor_x = self._left
        self._line.clear()
        # Segments may have left another weight on the active font
        self._apply_weight(state.font_id, self._weight_value())

    # =========================================================================
    # Collaborator calls
    # =========================================================================

    def _weight_value(self) -> float:
        return self._state.weight.value_for(self._config)

    def _has_font(self, font_id: str) -> bool:
        try:
            return bool(self._renderer.has_font(font_id))
        except Exception:
            logger.warning("has_font('%s') failed", font_id, exc_info=True)
            return False

    def _measure(self, text: str) -> float:
        state = self._state
        try:
            width = float(self._renderer.measure(state.font_id, text, state.scale))
        except Exception:
            logger.warning("measure() failed for %r in '%s'", text, state.font_id, exc_info=True)
            return 0.0
        if not math.isfinite(width) or width < 0:
            logger.debug("Unusable width %r for %r; treating as 0", width, text)
            return 0.0
        return width

    def _ascent(self, font_id: str) -> float:
        try:
            value = float(self._renderer.ascent(font_id))
        except Exception:
            logger.warning("ascent() failed for '%s'", font_id, exc_info=True)
            return 0.0
        return value if math.isfinite(value) else 0.0

    def _apply_weight(self, font_id: str, weight: float) -> None:
        if self._applied_weights.get(font_id) == weight:
            return
        self._applied_weights[font_id] = weight
        try:
            if not self._renderer.is_variable(font_id):
                return
            if not self._renderer.set_weight(font_id, weight):
                logger.warning("Setting weight %s on '%s' failed", weight, font_id)
        except Exception:
            logger.warning("Setting weight %s on '%s' failed", weight, font_id, exc_info=True)

    def _draw(self, segment: RenderSegment) -> None:
        try:
            self._renderer.render(
                segment.font_id,
                segment.text,
                segment.x,
                segment.y,
                segment.scale,
                segment.color,
            )
        except Exception:
            logger.warning("render() failed for %r", segment.text, exc_info=True)


class LayoutEngine:
    """Lays out token streams onto a canvas through a TextRenderer.

    Usage:
        >>> renderer = DisplayList({"rubik": FontMetrics(), "rubik_i": FontMetrics()})
        >>> engine = LayoutEngine(renderer, {"regular": "rubik", "italic": "rubik_i"})
        >>> stream = tokenize("<p>Hello <i>World</i></p>")
        >>> result = engine.render(stream.tokens, Canvas(800, 600))
        >>> [segment.text for segment in result.segments]
        ['Hello', 'World']

    Passes are not re-entrant: calling render() from inside a renderer
    callback raises ReentrantRenderError.
    """

    __slots__ = ("_renderer", "_fonts", "_config", "_start_x", "_start_y", "_running")

    def __init__(
        self,
        renderer: TextRenderer,
        fonts: Mapping[str, str],
        *,
        start_x: float = 50.0,
        start_y: float = 0.0,
        config: LayoutConfig | None = None,
    ) -> None:
        """Bind font roles and select the initial font.

        Args:
            renderer: Measurement/rendering collaborator
            fonts: Role name ("regular", "italic") -> concrete font id
            start_x: Left margin and starting cursor x
            start_y: Starting cursor y
            config: Explicit config; the ContextVar config is used when None

        Raises:
            FontLookupError: If the regular role is unmapped or its font is
                not available from the renderer
        """
        regular = fonts.get(FontRole.REGULAR.value)
        if not regular:
            raise FontLookupError(FontRole.REGULAR.value)
        if not renderer.has_font(regular):
            raise FontLookupError(FontRole.REGULAR.value, regular)

        italic = fonts.get(FontRole.ITALIC.value)
        if not italic:
            logger.warning("No italic font mapped; italic text uses '%s'", regular)
            italic = regular

        self._renderer = renderer
        self._fonts: Mapping[FontRole, str] = MappingProxyType(
            {FontRole.REGULAR: regular, FontRole.ITALIC: italic}
        )
        self._config = config
        self._start_x = start_x
        self._start_y = start_y
        self._running = False

        active = config or get_layout_config()
        if renderer.is_variable(regular) and not renderer.set_weight(regular, active.normal_weight):
            logger.warning("Setting weight %s on '%s' failed", active.normal_weight, regular)

    @property
    def fonts(self) -> Mapping[FontRole, str]:
        return self._fonts

    @property
    def start_x(self) -> float:
        return self._start_x

    @property
    def start_y(self) -> float:
        return self._start_y

    def set_cursor(self, x: float | None = None, y: float | None = None) -> None:
        """Move the starting cursor used by subsequent passes (e.g., scrolling)."""
        if x is not None:
            self._start_x = x
        if y is not None:
            self._start_y = y

    def render(self, tokens: Iterable[Token], canvas: Canvas) -> LayoutResult:
        """Lay out tokens from scratch and hand every segment to the renderer.

        Args:
            tokens: Token sequence for one document
            canvas: Target geometry for this pass

        Returns:
            LayoutResult with every emitted segment

        Raises:
            ReentrantRenderError: If a pass on this engine is still running
        """
        if self._running:
            raise ReentrantRenderError("render() called while a layout pass is running")

        token_list = tokens if isinstance(tokens, (list, tuple)) else list(tokens)
        config = self._config or get_layout_config()

        self._running = True
        try:
            layout_pass = LayoutPass(
                self._renderer,
                self._fonts,
                config,
                canvas,
                self._start_x,
                self._start_y,
            )
            result = layout_pass.run(token_list)
        finally:
            self._running = False

        logger.debug(
            "Laid out %d tokens into %d segments on %d lines",
            len(token_list),
            len(result.segments),
            result.lines,
        )
        acc = get_layout_accumulator()
        if acc is not None:
            acc.record_layout(
                token_count=len(token_list),
                segment_count=len(result.segments),
                line_count=result.lines,
            )
        return result
