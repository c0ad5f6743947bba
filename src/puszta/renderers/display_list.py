"""In-memory display list renderer.

Measures text from per-font metric tables and records every draw call as
a DrawCommand instead of rasterizing. Hosts replay the commands onto a real
surface; tests inspect them directly.

Measurement follows the usual glyph-advance rules: advances are summed per
character at the reference glyph size and multiplied by the scale, a tab
counts as eight spaces, and other control characters have no width.

Thread Safety:
A DisplayList accumulates commands and is owned by one layout pass at a
time. Do not share an instance between concurrent passes.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

from puszta.utils.logger import get_logger

logger = get_logger(__name__)

TAB_WIDTH = 8


@dataclass(slots=True)
class FontMetrics:
    """Metric table for one loaded font.

    All distances are pixels at the reference glyph size.

    Attributes:
        advance: Default horizontal advance per character
        ascent: Baseline to top of tallest glyph
        descent: Baseline to bottom of lowest glyph (negative)
        variable: True if the font has a weight axis
        widths: Per-character advance overrides
        weight: Current weight axis value
    """

    advance: float = 24.0
    ascent: float = 38.0
    descent: float = -10.0
    variable: bool = False
    widths: dict[str, float] = field(default_factory=dict)
    weight: float = 400.0

    def advance_of(self, char: str) -> float:
        return self.widths.get(char, self.advance)


@dataclass(frozen=True, slots=True)
class DrawCommand:
    """One recorded draw call."""

    font_id: str
    text: str
    x: float
    y: float
    scale: float
    color: tuple[float, float, float]
    weight: float


class DisplayList:
    """TextRenderer that records draw calls.

    Usage:
        >>> renderer = DisplayList({"regular": FontMetrics(advance=10.0)})
        >>> renderer.measure("regular", "abc", 0.5)
        15.0
        >>> renderer.render("regular", "abc", 50.0, 20.0, 0.5, (0.0, 0.0, 0.0))
        >>> renderer.texts()
        ['abc']

    When ``viewport_height`` is set, draw calls whose y lies outside
    ``[-cull_margin, viewport_height + cull_margin]`` are counted in
    ``culled`` and not recorded.
    """

    __slots__ = ("_fonts", "commands", "culled", "cull_margin", "viewport_height")

    def __init__(
        self,
        fonts: Mapping[str, FontMetrics],
        *,
        viewport_height: float | None = None,
        cull_margin: float = 0.0,
    ) -> None:
        self._fonts: dict[str, FontMetrics] = dict(fonts)
        self.commands: list[DrawCommand] = []
        self.culled = 0
        self.viewport_height = viewport_height
        self.cull_margin = cull_margin

    def clear(self) -> None:
        """Drop recorded commands before the next pass."""
        self.commands.clear()
        self.culled = 0

    def texts(self) -> list[str]:
        """Text of every recorded command, in draw order."""
        return [cmd.text for cmd in self.commands]

    def font(self, font_id: str) -> FontMetrics | None:
        return self._fonts.get(font_id)

    # =========================================================================
    # TextRenderer protocol
    # =========================================================================

    def has_font(self, font_id: str) -> bool:
        return font_id in self._fonts

    def measure(self, font_id: str, text: str, scale: float) -> float:
        metrics = self._fonts.get(font_id)
        if metrics is None:
            logger.warning("measure(): font '%s' not loaded", font_id)
            return 0.0

        total = 0.0
        for char in text:
            if char == "\t":
                total += TAB_WIDTH * metrics.advance_of(" ")
            elif char < " ":
                continue
            else:
                total += metrics.advance_of(char)
        return total * scale

    def ascent(self, font_id: str) -> float:
        metrics = self._fonts.get(font_id)
        if metrics is None:
            logger.warning("ascent(): font '%s' not loaded", font_id)
            return 0.0
        return metrics.ascent

    def render(
        self,
        font_id: str,
        text: str,
        x: float,
        y: float,
        scale: float,
        color: tuple[float, float, float],
    ) -> None:
        metrics = self._fonts.get(font_id)
        if metrics is None:
            logger.warning("render(): font '%s' not loaded", font_id)
            return
        if self.viewport_height is not None and (
            y < -self.cull_margin or y > self.viewport_height + self.cull_margin
        ):
            self.culled += 1
            return
        self.commands.append(DrawCommand(font_id, text, x, y, scale, color, metrics.weight))

    def is_variable(self, font_id: str) -> bool:
        metrics = self._fonts.get(font_id)
        return metrics is not None and metrics.variable

    def set_weight(self, font_id: str, weight: float) -> bool:
        metrics = self._fonts.get(font_id)
        if metrics is None or not metrics.variable:
            return False
        metrics.weight = weight
        return True
