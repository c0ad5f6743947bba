"""Token definitions for the Puszta lexer.

The lexer produces a flat, ordered sequence of tokens that the layout
engine consumes. A token is either a Text run or an Element tag; there is
no tree, since inline layout never queries by tree position.

Thread Safety:
Tokens are frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType


@dataclass(frozen=True, slots=True)
class Text:
    """A run of character data between tags.

    Content is already comment-stripped and whitespace-trimmed.

    Attributes:
        content: The trimmed character data
    """

    content: str

    def __repr__(self) -> str:
        val = self.content
        if len(val) > 20:
            val = val[:17] + "..."
        return f"Text({val!r})"


@dataclass(frozen=True, slots=True)
class Element:
    """An opening or closing tag with its attributes.

    Attributes:
        name: Lowercased, trimmed tag name (never contains ``/``)
        attributes: Attribute name -> value (names lowercased, values as written)
        is_closing: True iff the tag text began with ``/``
    """

    name: str
    attributes: Mapping[str, str] = field(default_factory=dict)
    is_closing: bool = False

    def __post_init__(self) -> None:
        # Read-only view so a shared token cannot be mutated by a consumer
        object.__setattr__(self, "attributes", MappingProxyType(dict(self.attributes)))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Element):
            return NotImplemented
        return (
            self.name == other.name
            and self.is_closing == other.is_closing
            and dict(self.attributes) == dict(other.attributes)
        )

    def __hash__(self) -> int:
        return hash((self.name, self.is_closing, frozenset(self.attributes.items())))

    def __repr__(self) -> str:
        slash = "/" if self.is_closing else ""
        if self.attributes:
            return f"Element({slash}{self.name}, {dict(self.attributes)!r})"
        return f"Element({slash}{self.name})"

    def get(self, name: str, default: str | None = None) -> str | None:
        """Look up an attribute value by (case-insensitive) name."""
        return self.attributes.get(name.lower(), default)

    def to_markup(self) -> str:
        """Reconstruct tag text that parses back to this element.

        Values are double-quoted unless they contain a double quote, in
        which case single quotes are used. A value holding both quote
        characters is written unquoted.

        Returns:
            Tag text including the angle brackets, e.g. ``<a href="x">``
        """
        parts = ["<"]
        if self.is_closing:
            parts.append("/")
        parts.append(self.name)
        for attr_name, value in self.attributes.items():
            if '"' not in value:
                parts.append(f' {attr_name}="{value}"')
            elif "'" not in value:
                parts.append(f" {attr_name}='{value}'")
            else:
                parts.append(f" {attr_name}={value}")
        parts.append(">")
        return "".join(parts)


Token = Text | Element


@dataclass(frozen=True, slots=True)
class TokenStream:
    """Result of tokenizing one document.

    Attributes:
        tokens: Ordered, immutable token sequence
        title: Raw text captured from the last ``<title>`` element ("" if none)
    """

    tokens: tuple[Token, ...] = ()
    title: str = ""

    def __iter__(self) -> Iterator[Token]:
        return iter(self.tokens)

    def __len__(self) -> int:
        return len(self.tokens)

    def __bool__(self) -> bool:
        return bool(self.tokens)

    def texts(self) -> list[str]:
        """Content of every Text token, in order."""
        return [tok.content for tok in self.tokens if isinstance(tok, Text)]

    def elements(self) -> list[Element]:
        """Every Element token, in order."""
        return [tok for tok in self.tokens if isinstance(tok, Element)]
