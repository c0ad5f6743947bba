"""Tag text parsing.

Turns the text between ``<`` and ``>`` into a tag name, an attribute
mapping and a closing flag. Pure function of its input; never raises.
"""

from __future__ import annotations

_QUOTES = "\"'"


def _skip_whitespace(raw: str, pos: int) -> int:
    n = len(raw)
    while pos < n and raw[pos].isspace():
        pos += 1
    return pos


def _read_value(raw: str, pos: int) -> tuple[str, int]:
    """Read a quoted or unquoted attribute value starting at pos.

    Returns:
        (value, position after the value)
    """
    n = len(raw)
    if pos >= n:
        return "", pos

    quote = raw[pos]
    if quote in _QUOTES:
        end = raw.find(quote, pos + 1)
        if end == -1:
            # Dangling quote: take everything that is left
            return raw[pos + 1 :], n
        return raw[pos + 1 : end], end + 1

    start = pos
    while pos < n and not raw[pos].isspace():
        pos += 1
    return raw[start:pos], pos


def parse_tag(raw: str) -> tuple[str, dict[str, str], bool]:
    """Parse tag text into (name, attributes, is_closing).

    The name stops at whitespace or ``/`` and is lowercased. Attribute names
    stop at ``=`` or whitespace and are lowercased; values keep their
    case. Quoted values drop the quote characters, unquoted values run to the
    next whitespace. The last occurrence of a duplicated attribute wins.
    Missing ``=`` gives an empty value; an unterminated quote takes the rest
    of the tag.

    Args:
        raw: Text between the angle brackets (without ``<`` and ``>``)

    Returns:
        Tuple of (name, attributes, is_closing)

    Example:
        >>> parse_tag('A HREF="/Home" hidden')
        ('a', {'href': '/Home', 'hidden': ''}, False)
        >>> parse_tag("/p")
        ('p', {}, True)
    """
    if not raw:
        return "", {}, False

    n = len(raw)
    pos = 0
    is_closing = False
    if raw[0] == "/":
        is_closing = True
        pos = 1

    pos = _skip_whitespace(raw, pos)
    start = pos
    while pos < n and not raw[pos].isspace() and raw[pos] != "/":
        pos += 1
    name = raw[start:pos].lower()

    attributes: dict[str, str] = {}
    while True:
        pos = _skip_whitespace(raw, pos)
        if pos >= n:
            break
        if raw[pos] == "/":
            # Self-closing marker or stray slash
            pos += 1
            continue

        start = pos
        while pos < n and raw[pos] != "=" and not raw[pos].isspace():
            pos += 1
        attr_name = raw[start:pos].lower()

        pos = _skip_whitespace(raw, pos)
        value = ""
        if pos < n and raw[pos] == "=":
            pos = _skip_whitespace(raw, pos + 1)
            value, pos = _read_value(raw, pos)

        if attr_name:
            attributes[attr_name] = value

    return name, attributes, is_closing
