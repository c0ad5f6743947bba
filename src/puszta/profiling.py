"""Puszta LayoutAccumulator: opt-in profiling for tokenizing and layout.

This module provides accumulated metrics across calls:
- Total duration
- Source length and token count from tokenize()
- Segment and line counts from layout passes

Zero overhead when disabled (get_layout_accumulator() returns None).

Example:
    from puszta import tokenize
    from puszta.profiling import profiled_layout

    with profiled_layout() as metrics:
        stream = tokenize("<p>Hello <b>World</b></p>")
        engine.render(stream.tokens, canvas)

    print(metrics.summary())
    # {"total_ms": 0.4, "source_length": 25, "token_count": 6, ...}

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, field
from time import perf_counter
from typing import Any


@dataclass
class LayoutAccumulator:
    """Accumulated metrics during tokenizing and layout.

    Attributes:
        start_time: Profiling start timestamp.
        source_length: Total length of sources tokenized.
        token_count: Total tokens produced by tokenize().
        tokenize_calls: Number of tokenize() calls recorded.
        layout_calls: Number of layout passes recorded.
        laid_out_tokens: Total tokens consumed by layout passes.
        segment_count: Total segments emitted by layout passes.
        line_count: Total non-empty lines flushed by layout passes.

    """

    start_time: float = field(default_factory=perf_counter)
    source_length: int = 0
    token_count: int = 0
    tokenize_calls: int = 0
    layout_calls: int = 0
    laid_out_tokens: int = 0
    segment_count: int = 0
    line_count: int = 0

    def record_tokenize(self, source_length: int, token_count: int) -> None:
        """Record a tokenize call.

        Args:
            source_length: Length of the markup tokenized.
            token_count: Number of tokens produced.

        """
        self.tokenize_calls += 1
        self.source_length += source_length
        self.token_count += token_count

    def record_layout(self, token_count: int, segment_count: int, line_count: int) -> None:
        """Record a layout pass.

        Args:
            token_count: Number of tokens the pass consumed.
            segment_count: Number of segments the pass emitted.
            line_count: Number of non-empty lines flushed.

        """
        self.layout_calls += 1
        self.laid_out_tokens += token_count
        self.segment_count += segment_count
        self.line_count += line_count

    @property
    def total_duration_ms(self) -> float:
        """Total profiling duration in milliseconds."""
        return (perf_counter() - self.start_time) * 1000

    def summary(self) -> dict[str, Any]:
        """Get summary of recorded metrics."""
        return {
            "total_ms": round(self.total_duration_ms, 2),
            "source_length": self.source_length,
            "token_count": self.token_count,
            "tokenize_calls": self.tokenize_calls,
            "layout_calls": self.layout_calls,
            "laid_out_tokens": self.laid_out_tokens,
            "segment_count": self.segment_count,
            "line_count": self.line_count,
        }


# Module-level ContextVar
_accumulator: ContextVar[LayoutAccumulator | None] = ContextVar(
    "layout_accumulator",
    default=None,
)


def get_layout_accumulator() -> LayoutAccumulator | None:
    """Get current accumulator (None if profiling disabled)."""
    return _accumulator.get()


@contextmanager
def profiled_layout() -> Iterator[LayoutAccumulator]:
    """Context manager for profiled tokenizing and layout.

    Creates a LayoutAccumulator and makes it available via
    get_layout_accumulator() for the duration of the with block.

    Yields:
        LayoutAccumulator that will be populated during calls.

    """
    acc = LayoutAccumulator()
    token: Token[LayoutAccumulator | None] = _accumulator.set(acc)
    try:
        yield acc
    finally:
        _accumulator.reset(token)
