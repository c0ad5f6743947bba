"""ContextVar-based layout configuration for Puszta.

Each thread and asyncio task sees its own LayoutConfig through a ContextVar.
A LayoutEngine reads the active config once at the start of every render
pass, unless it was constructed with an explicit config.

Usage:
    # Engine-level config (wins over the ContextVar)
    engine = LayoutEngine(renderer, fonts, config=LayoutConfig(base_font_size=14))

    # Context-scoped config
    from puszta.config import layout_config_context, LayoutConfig

    with layout_config_context(LayoutConfig(horizontal_inset=20.0)):
        result = engine.render(tokens, canvas)

"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass

from puszta.errors import ConfigError


@dataclass(frozen=True, slots=True)
class LayoutConfig:
    """Immutable layout configuration.

    Instances are immutable, so one config can be shared by concurrent passes.

    Attributes:
        base_font_size: Base text size in points
        reference_glyph_px: Pixel size the collaborator's glyphs are loaded at
        min_scale: Lower bound for the computed glyph scale
        line_height_factor: Line height as a multiple of the desired pixel size
        baseline_factor: Multiple of the first segment's ascent used for a
            line's baseline
        horizontal_inset: Distance kept clear of the right canvas edge
        cursor_epsilon: Tolerance for the stale-cursor guard on empty lines
        normal_weight: Weight axis value for normal text
        bold_weight: Weight axis value for bold text
        text_color: RGB color attached to every segment

    """

    base_font_size: float = 12.0
    reference_glyph_px: float = 48.0
    min_scale: float = 0.2
    line_height_factor: float = 1.2
    baseline_factor: float = 1.25
    horizontal_inset: float = 13.0
    cursor_epsilon: float = 0.5
    normal_weight: float = 400.0
    bold_weight: float = 700.0
    text_color: tuple[float, float, float] = (0.0, 0.0, 0.0)

    def __post_init__(self) -> None:
        for name in ("base_font_size", "reference_glyph_px", "min_scale", "line_height_factor"):
            if getattr(self, name) <= 0:
                raise ConfigError(name, f"must be positive, got {getattr(self, name)!r}")
        if self.cursor_epsilon < 0:
            raise ConfigError("cursor_epsilon", "must not be negative")

    @classmethod
    def from_dict(cls, config_dict: dict) -> LayoutConfig:
        """Create LayoutConfig from dictionary.

        Only includes keys that are valid LayoutConfig fields; unknown keys
        are silently ignored. A list value for ``text_color`` is converted
        to a tuple.

        Args:
            config_dict: Field name -> value, e.g. loaded from a host settings file

        Returns:
            New LayoutConfig instance with values from dict.

        Example:
            >>> config = LayoutConfig.from_dict({
            ...     "base_font_size": 14,
            ...     "unknown_key": "ignored",
            ... })
            >>> config.base_font_size
            14

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        if "text_color" in filtered:
            filtered["text_color"] = tuple(filtered["text_color"])
        return cls(**filtered)


# Shared default; reset_layout_config() reinstalls this instance
_DEFAULT_CONFIG: LayoutConfig = LayoutConfig()

_layout_config: ContextVar[LayoutConfig] = ContextVar(
    "layout_config",
    default=_DEFAULT_CONFIG,
)


def get_layout_config() -> LayoutConfig:
    """Get current layout configuration (thread-local)."""
    return _layout_config.get()


def set_layout_config(config: LayoutConfig) -> None:
    """Set layout configuration for current context.

    Args:
        config: LayoutConfig instance to use for this context.

    """
    _layout_config.set(config)


def reset_layout_config() -> None:
    """Restore the default LayoutConfig for the current context."""
    _layout_config.set(_DEFAULT_CONFIG)


@contextmanager
def layout_config_context(config: LayoutConfig) -> Iterator[None]:
    """Use config for layout passes inside a with block.

    Args:
        config: LayoutConfig to use within the context.

    Yields:
        None

    Example:
        >>> with layout_config_context(LayoutConfig(base_font_size=16)):
        ...     result = engine.render(tokens, canvas)
        >>> # The previous config is active again here

    """
    previous = _layout_config.get()
    _layout_config.set(config)
    try:
        yield
    finally:
        _layout_config.set(previous)


__all__ = [
    "LayoutConfig",
    "get_layout_config",
    "layout_config_context",
    "reset_layout_config",
    "set_layout_config",
]
