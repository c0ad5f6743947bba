"""Inline layout engine for Puszta.

Architecture:
layout/
├── __init__.py          # Re-exports
├── state.py             # LayoutState, Weight, FontRole, Canvas
├── transitions.py       # Tag -> TagTransition lookup table
├── line.py              # RenderSegment, LineBox (baseline alignment)
└── engine.py            # LayoutEngine, LayoutPass, LayoutResult

"""

from puszta.layout.engine import LayoutEngine, LayoutPass, LayoutResult
from puszta.layout.line import LineBox, RenderSegment
from puszta.layout.state import Canvas, FontRole, LayoutState, Weight
from puszta.layout.transitions import RESET, TAG_TRANSITIONS, TagTransition, transition_for

__all__ = [
    "RESET",
    "TAG_TRANSITIONS",
    "Canvas",
    "FontRole",
    "LayoutEngine",
    "LayoutPass",
    "LayoutResult",
    "LayoutState",
    "LineBox",
    "RenderSegment",
    "TagTransition",
    "Weight",
    "transition_for",
]
