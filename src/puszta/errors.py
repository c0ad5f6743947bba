"""Exception classes for Puszta.

Provides standardized exceptions for error handling throughout Puszta.

The tokenizer never raises: malformed markup is recovered locally. The
layout engine raises only at construction (FontLookupError) or when a
caller re-enters a running pass (ReentrantRenderError).
"""

from __future__ import annotations


class PusztaError(Exception):
    """Base exception for all Puszta errors.

    Subclass this for specific error categories.
    """

    pass


class ConfigError(PusztaError):
    """Invalid layout configuration value."""

    def __init__(self, field_name: str, message: str) -> None:
        """Initialize config error.

        Args:
            field_name: Name of the offending LayoutConfig field
            message: Description of the problem
        """
        self.field_name = field_name
        super().__init__(f"LayoutConfig.{field_name}: {message}")


class FontLookupError(PusztaError):
    """A font role could not be bound to a usable font.

    Raised only while binding the initial active font at engine
    construction. Font changes during a render pass are logged instead.
    """

    def __init__(self, role: str, font_id: str | None = None) -> None:
        """Initialize font lookup error.

        Args:
            role: Abstract font role (e.g., "regular")
            font_id: Concrete font identifier the role mapped to, if any
        """
        self.role = role
        self.font_id = font_id
        if font_id is None:
            message = f"No font mapped for role '{role}'"
        else:
            message = f"Font '{font_id}' for role '{role}' is not available"
        super().__init__(message)


class ReentrantRenderError(PusztaError):
    """render() was called while a pass on the same engine was running.

    Layout passes are not re-entrant; the caller must serialize them.
    """

    pass
