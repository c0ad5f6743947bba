"""Serialization: JSON-compatible dicts for tokens and render segments.

Useful for:
- Caching a tokenized document between renders
- Dumping a pass's display list for debugging or golden tests

All output is deterministic (sorted keys) for cache-key stability.

Example:
    from puszta import tokenize
    from puszta.serialization import to_json, stream_from_json

    stream = tokenize("<p>Hello</p>")
    restored = stream_from_json(to_json(stream))
    assert restored == stream

Thread Safety:
    All functions are pure and safe to call from any thread.

"""

import json
from typing import Any

from puszta.layout.line import RenderSegment
from puszta.tokens import Element, Text, Token, TokenStream


def token_to_dict(token: Token) -> dict[str, Any]:
    """Convert a token to a JSON-compatible dict with a ``_type`` field."""
    if isinstance(token, Text):
        return {"_type": "Text", "content": token.content}
    return {
        "_type": "Element",
        "name": token.name,
        "attributes": dict(token.attributes),
        "is_closing": token.is_closing,
    }


def token_from_dict(data: dict[str, Any]) -> Token:
    """Reconstruct a token from a dict produced by token_to_dict.

    Raises:
        ValueError: If ``_type`` is missing or unknown.

    """
    type_name = data.get("_type")
    if type_name == "Text":
        return Text(data["content"])
    if type_name == "Element":
        return Element(
            name=data["name"],
            attributes=data.get("attributes", {}),
            is_closing=data.get("is_closing", False),
        )
    if type_name is None:
        msg = "Missing '_type' field in serialized token"
        raise ValueError(msg)
    msg = f"Unknown token type: {type_name!r}"
    raise ValueError(msg)


def segment_to_dict(segment: RenderSegment) -> dict[str, Any]:
    """Convert a render segment to a JSON-compatible dict."""
    return {
        "_type": "RenderSegment",
        "text": segment.text,
        "x": segment.x,
        "y": segment.y,
        "scale": segment.scale,
        "color": list(segment.color),
        "font_id": segment.font_id,
        "weight": segment.weight,
    }


def stream_to_dict(stream: TokenStream) -> dict[str, Any]:
    """Convert a whole token stream, including its title."""
    return {
        "_type": "TokenStream",
        "title": stream.title,
        "tokens": [token_to_dict(token) for token in stream.tokens],
    }


def to_json(
    value: TokenStream | Token | RenderSegment | list[Token] | list[RenderSegment],
    *,
    indent: int | None = None,
) -> str:
    """Serialize a stream, token, segment or list of those to JSON.

    Args:
        value: Object(s) to serialize.
        indent: JSON indentation level (None for compact).

    Returns:
        JSON string.

    """
    return json.dumps(_to_data(value), sort_keys=True, indent=indent)


def _to_data(value: Any) -> Any:
    if isinstance(value, TokenStream):
        return stream_to_dict(value)
    if isinstance(value, RenderSegment):
        return segment_to_dict(value)
    if isinstance(value, (Text, Element)):
        return token_to_dict(value)
    if isinstance(value, (list, tuple)):
        return [_to_data(item) for item in value]
    msg = f"Cannot serialize {type(value).__name__}"
    raise TypeError(msg)


def stream_from_json(data: str) -> TokenStream:
    """Deserialize a TokenStream from a JSON string produced by to_json.

    Raises:
        ValueError: If the JSON doesn't represent a TokenStream.

    """
    raw = json.loads(data)
    if not isinstance(raw, dict) or raw.get("_type") != "TokenStream":
        msg = "Expected a serialized TokenStream"
        raise ValueError(msg)
    return TokenStream(
        tokens=tuple(token_from_dict(item) for item in raw.get("tokens", [])),
        title=raw.get("title", ""),
    )
