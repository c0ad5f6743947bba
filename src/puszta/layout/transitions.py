"""Tag transition table.

Each known tag maps to a pair of transitions, one for the opening tag and
one for the closing tag. Any tag not in the table performs a full reset to
regular font, normal weight and base size.

Only one font slot is tracked: ``<b><i>`` selects the italic font with the
bold weight value, never a separate bold-italic face. Weight is a
single-level toggle, not a nesting counter.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from puszta.layout.state import FontRole, Weight


@dataclass(frozen=True, slots=True)
class TagTransition:
    """State change applied when a tag is seen.

    Attributes:
        weight: New weight, or None to keep the current one
        font_role: New font role, or None to keep the current one
        size_delta: New size as an offset from the base size, or None to keep it
        reanchor: Shift cursor_y so the baseline stays put across a font change
        block_lines: When non-zero, flush the line, advance this many line
            steps and return to the left margin
    """

    weight: Weight | None = None
    font_role: FontRole | None = None
    size_delta: float | None = None
    reanchor: bool = False
    block_lines: int = 0


RESET = TagTransition(weight=Weight.NORMAL, font_role=FontRole.REGULAR, size_delta=0.0)

_BOLD = (TagTransition(weight=Weight.BOLD), TagTransition(weight=Weight.NORMAL))
_ITALIC = (
    TagTransition(font_role=FontRole.ITALIC, reanchor=True),
    TagTransition(font_role=FontRole.REGULAR, reanchor=True),
)
_PARAGRAPH = TagTransition(size_delta=0.0, block_lines=1)

TAG_TRANSITIONS: Mapping[str, tuple[TagTransition, TagTransition]] = MappingProxyType(
    {
        "b": _BOLD,
        "strong": _BOLD,
        "i": _ITALIC,
        "em": _ITALIC,
        "h1": (
            TagTransition(size_delta=8.0, block_lines=2),
            TagTransition(size_delta=0.0, block_lines=1),
        ),
        "big": (TagTransition(size_delta=4.0), TagTransition(size_delta=0.0)),
        "small": (TagTransition(size_delta=-2.0), TagTransition(size_delta=0.0)),
        "p": (_PARAGRAPH, _PARAGRAPH),
    }
)


def transition_for(name: str, is_closing: bool) -> TagTransition:
    """Look up the transition for a tag.

    Args:
        name: Lowercased tag name
        is_closing: True for a closing tag

    Returns:
        The matching TagTransition, or RESET for unknown tags

    Example:
        >>> transition_for("b", False).weight is Weight.BOLD
        True
        >>> transition_for("div", True) is RESET
        True
    """
    pair = TAG_TRANSITIONS.get(name)
    if pair is None:
        return RESET
    return pair[1] if is_closing else pair[0]
