"""TextRenderer protocol: the measurement/rendering collaborator boundary.

The layout engine never touches glyphs or fonts directly. Everything it
needs from a text subsystem goes through these six calls, keyed by
concrete font identifiers.

Failure is signalled through return values (False, 0.0), never required
to raise. The built-in ``DisplayList`` is the reference implementation.

Example:
    from puszta.renderers.protocol import TextRenderer

    def word_width(renderer: TextRenderer, word: str) -> float:
        return renderer.measure("rubik_regular", word, 0.25)

"""

from typing import Protocol


class TextRenderer(Protocol):
    """Protocol for text measurement and drawing services."""

    def has_font(self, font_id: str) -> bool:
        """Return True if font_id is loaded and usable."""
        ...

    def measure(self, font_id: str, text: str, scale: float) -> float:
        """Width of text in pixels at the given glyph scale."""
        ...

    def ascent(self, font_id: str) -> float:
        """Distance from baseline to the top of the tallest glyph, in pixels."""
        ...

    def render(
        self,
        font_id: str,
        text: str,
        x: float,
        y: float,
        scale: float,
        color: tuple[float, float, float],
    ) -> None:
        """Draw text with its top-left anchored at (x, y)."""
        ...

    def is_variable(self, font_id: str) -> bool:
        """Return True if the font exposes a continuous weight axis."""
        ...

    def set_weight(self, font_id: str, weight: float) -> bool:
        """Set the weight axis of a variable font. Returns False on failure."""
        ...
