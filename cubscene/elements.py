"""Recognition and storage of the texture and colour lines of a scene header."""

from __future__ import annotations

from dataclasses import dataclass, field

from .colors import parse_keyed_color, split_fields
from .errors import ElementType, ErrorKind, SceneError, element_key

# Checked in this order; the first identifier found anywhere in the line wins.
_SEARCH_ORDER = (
    ElementType.NORTH,
    ElementType.SOUTH,
    ElementType.WEST,
    ElementType.EAST,
    ElementType.FLOOR,
    ElementType.CEILING,
)

_TEXTURE_FIELDS = {
    ElementType.NORTH: "north",
    ElementType.SOUTH: "south",
    ElementType.WEST: "west",
    ElementType.EAST: "east",
}

_COLOR_FIELDS = {
    ElementType.FLOOR: "floor_color",
    ElementType.CEILING: "ceiling_color",
}

_ELEMENT_BY_KEY = {element_key(e): e for e in _SEARCH_ORDER}


def is_blank(line: str, charset: str) -> bool:
    """Return True if every character of ``line`` belongs to ``charset``."""
    if not charset:
        return not line
    return all(char in charset for char in line)


def classify_line(line: str) -> ElementType:
    """Decide which scene element ``line`` describes.

    Leading spaces are skipped; a line with nothing after them is EMPTY.
    Otherwise the first identifier (NO, SO, WE, EA, F, C) that occurs
    anywhere in the rest of the line decides the type.
    """
    rest = line.lstrip(" ")
    if not rest:
        return ElementType.EMPTY
    for element in _SEARCH_ORDER:
        if element_key(element) in rest:
            return element
    return ElementType.NOT_VALID


def parse_keyed_path(line: str, key: str) -> str:
    """Parse a ``KEY path`` line and return the path.

    Raises SceneError when the line does not hold exactly two
    space-separated words or the first word is not ``key``.
    """
    element = _ELEMENT_BY_KEY.get(key)
    fields = split_fields(line, " ")
    if len(fields) != 2:
        kind = ErrorKind.TOO_MANY_VALUES if len(fields) > 2 else ErrorKind.TOO_FEW_VALUES
        raise SceneError(kind, element, line)
    if fields[0] != key:
        raise SceneError(ErrorKind.INVALID_KEY, element, line)
    return fields[1]


def _without_newline(line: str) -> str:
    return line.rstrip("\n")


@dataclass
class SceneConfig:
    """Textures, colours and map rows read from a scene file."""

    north: str | None = None
    south: str | None = None
    west: str | None = None
    east: str | None = None
    floor_color: int | None = None
    ceiling_color: int | None = None
    map: list[str] = field(default_factory=list)

    def apply(self, line: str, element: ElementType) -> None:
        """Store the value that ``line`` gives for ``element``.

        Lines classified as EMPTY or NOT_VALID are ignored.
        """
        if element in _TEXTURE_FIELDS:
            self.set_texture(element, line)
        elif element in _COLOR_FIELDS:
            self.set_color(element, line)

    def set_texture(self, element: ElementType, line: str) -> None:
        """Store the texture path given by ``line`` for a wall direction."""
        try:
            attribute = _TEXTURE_FIELDS[element]
        except KeyError:
            raise ValueError(f"{element} is not a texture element") from None
        if getattr(self, attribute) is not None:
            raise SceneError(ErrorKind.DUPLICATE, element, line)
        path = parse_keyed_path(_without_newline(line), element_key(element))
        setattr(self, attribute, path)

    def set_color(self, element: ElementType, line: str) -> None:
        """Store the floor or ceiling colour given by ``line``."""
        try:
            attribute = _COLOR_FIELDS[element]
        except KeyError:
            raise ValueError(f"{element} is not a colour element") from None
        if getattr(self, attribute) is not None:
            raise SceneError(ErrorKind.DUPLICATE, element, line)
        color = parse_keyed_color(_without_newline(line), element_key(element))
        setattr(self, attribute, color)