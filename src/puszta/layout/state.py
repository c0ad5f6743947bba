"""Typographic state for one layout pass.

LayoutState is created fresh at the start of every render pass and owned
by that pass alone; nothing here survives into the next document.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from puszta.config import LayoutConfig

# Smallest point size a transition can produce
MIN_FONT_SIZE = 1.0


class Weight(Enum):
    """Two-valued weight axis."""

    NORMAL = auto()
    BOLD = auto()

    def value_for(self, config: LayoutConfig) -> float:
        """Numeric weight axis value under config."""
        return config.bold_weight if self is Weight.BOLD else config.normal_weight


class FontRole(Enum):
    """Abstract font roles mapped to concrete font identifiers."""

    REGULAR = "regular"
    ITALIC = "italic"


@dataclass(frozen=True, slots=True)
class Canvas:
    """Geometry of the surface a pass lays out onto.

    Attributes:
        width: Canvas width in pixels (wrap width)
        height: Canvas height in pixels
        dpi_scale: Pixels per point; non-positive values clamp to min_scale
    """

    width: float
    height: float
    dpi_scale: float = 1.0


@dataclass(slots=True)
class LayoutState:
    """Mutable typographic state threaded through one pass.

    Attributes:
        font_role: Active abstract font role
        font_id: Concrete identifier of the active font
        weight: Active weight
        size: Active size in points
        cursor_x: Pen x position
        cursor_y: Pen y position (grows downward)
        scale: Glyph scale derived from size and dpi
        line_height: Vertical step for a line break
    """

    font_role: FontRole
    font_id: str
    weight: Weight
    size: float
    cursor_x: float
    cursor_y: float
    scale: float = 1.0
    line_height: float = 0.0

    def resize(self, size: float, dpi_scale: float, config: LayoutConfig) -> None:
        """Set the active size and recompute scale and line height."""
        self.size = max(size, MIN_FONT_SIZE)
        desired_px = self.size * dpi_scale if dpi_scale > 0 else 0.0
        self.scale = max(desired_px / config.reference_glyph_px, config.min_scale)
        self.line_height = desired_px * config.line_height_factor
