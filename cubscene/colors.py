"""Parsing of floor and ceiling colour values."""

from __future__ import annotations

from .errors import ElementType, ErrorKind, SceneError, element_key

_DIGITS = frozenset("0123456789")
_LEADING_SPACE = " \t\n\v\f\r"
_MAX_FIELD_LENGTH = 10
_ELEMENT_BY_KEY = {element_key(e): e for e in ElementType if element_key(e)}


def split_fields(text: str, sep: str) -> list[str]:
    """Split ``text`` on ``sep``, dropping empty pieces."""
    return [piece for piece in text.split(sep) if piece]


def parse_int(text: str) -> int:
    """Read a leading decimal integer, skipping whitespace; 0 if there is none."""
    rest = text.lstrip(_LEADING_SPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = []
    for char in rest:
        if char not in _DIGITS:
            break
        digits.append(char)
    return sign * int("".join(digits)) if digits else 0


def parse_color(text: str) -> int:
    """Parse ``R,G,B`` into a packed 0xRRGGBB integer.

    Raises SceneError (with no element) when the text is malformed.
    """
    if text.startswith(",") or text.endswith(","):
        raise SceneError(ErrorKind.EDGE_COMMA, None, text)
    if ",," in text:
        raise SceneError(ErrorKind.DOUBLE_COMMA, None, text)
    fields = split_fields(text, ",")
    if len(fields) != 3:
        kind = ErrorKind.TOO_MANY_VALUES if len(fields) > 3 else ErrorKind.TOO_FEW_VALUES
        raise SceneError(kind, None, text)
    if not all(set(field) <= _DIGITS for field in fields):
        raise SceneError(ErrorKind.INVALID_COLOR_ARGUMENTS, None, text)
    if any(len(field) > _MAX_FIELD_LENGTH for field in fields):
        raise SceneError(ErrorKind.INVALID_RANGE, None, text)
    red, green, blue = (parse_int(field) for field in fields)
    if not all(0 <= value <= 255 for value in (red, green, blue)):
        raise SceneError(ErrorKind.INVALID_RANGE, None, text)
    return (red << 16) | (green << 8) | blue


def parse_keyed_color(line: str, key: str) -> int:
    """Parse a ``KEY R,G,B`` line, checking that it starts with ``key``."""
    element = _ELEMENT_BY_KEY.get(key)
    fields = split_fields(line, " ")
    if len(fields) != 2:
        kind = ErrorKind.TOO_MANY_VALUES if len(fields) > 2 else ErrorKind.TOO_FEW_VALUES
        raise SceneError(kind, element, line)
    if fields[0] != key:
        raise SceneError(ErrorKind.INVALID_KEY, element, line)
    try:
        return parse_color(fields[1])
    except SceneError as exc:
        raise SceneError(exc.kind, element, line) from None