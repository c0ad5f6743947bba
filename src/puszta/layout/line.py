"""Line boxes and render segments.

A LineBox collects the words placed on the current visual line. Their y
coordinates are placeholders until the line is flushed, when every segment
is aligned to one shared baseline.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass, replace


@dataclass(frozen=True, slots=True)
class RenderSegment:
    """A positioned word ready for the renderer.

    Attributes:
        text: The word
        x: Left edge in pixels
        y: Top in pixels (placeholder cursor_y until flushed)
        scale: Glyph scale
        color: RGB color
        font_id: Concrete font identifier
        weight: Weight axis value
    """

    text: str
    x: float
    y: float
    scale: float
    color: tuple[float, float, float]
    font_id: str
    weight: float


class LineBox:
    """Pending segments for the current line."""

    __slots__ = ("_segments",)

    def __init__(self) -> None:
        self._segments: list[RenderSegment] = []

    def __len__(self) -> int:
        return len(self._segments)

    def __bool__(self) -> bool:
        return bool(self._segments)

    def __iter__(self) -> Iterator[RenderSegment]:
        return iter(self._segments)

    def append(self, segment: RenderSegment) -> None:
        self._segments.append(segment)

    def clear(self) -> None:
        self._segments.clear()

    def align(
        self,
        cursor_y: float,
        ascent: Callable[[str], float],
        baseline_factor: float,
    ) -> tuple[float, list[RenderSegment]]:
        """Place every segment on a shared baseline.

        The baseline is anchored to the ascent of the first segment's font,
        not the tallest font on the line. Each segment's top is then the
        baseline minus its own font's ascent.

        Args:
            cursor_y: Top of the line
            ascent: Font id -> ascent in pixels
            baseline_factor: Multiple of the first font's ascent below cursor_y

        Returns:
            (baseline, segments with final y), empty list for an empty line
        """
        if not self._segments:
            return cursor_y, []
        baseline = cursor_y + baseline_factor * ascent(self._segments[0].font_id)
        return baseline, [
            replace(segment, y=baseline - ascent(segment.font_id)) for segment in self._segments
        ]
