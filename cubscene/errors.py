"""Error kinds, scene element types and the error raised for bad scene lines."""

from __future__ import annotations

import enum

ERROR_HEADER = "\033[1;31mError\033[0m\n"
ARG_ERR = "\033[1;31mInvalid number of arguments\033[0m\n"
FILE_NAME_ERR = "\033[1;31mInvalid file name\033[0m\n"
FILE_OPEN_ERR = "\033[1;31mCan't open file\033[0m\n"


class ErrorKind(enum.Enum):
    """Why a scene element line was rejected."""

    MALLOC = -1
    DUPLICATE = -2
    INVALID_KEY = -3
    TOO_MANY_VALUES = -4
    TOO_FEW_VALUES = -5
    DOUBLE_COMMA = -6
    EDGE_COMMA = -7
    INVALID_RANGE = -8
    INVALID_COLOR_ARGUMENTS = -9


class ElementType(enum.Enum):
    """What a line of the scene header describes."""

    NOT_VALID = enum.auto()
    EMPTY = enum.auto()
    NORTH = enum.auto()
    SOUTH = enum.auto()
    WEST = enum.auto()
    EAST = enum.auto()
    FLOOR = enum.auto()
    CEILING = enum.auto()


_KEYS = {
    ElementType.NORTH: "NO",
    ElementType.WEST: "WE",
    ElementType.SOUTH: "SO",
    ElementType.EAST: "EA",
    ElementType.FLOOR: "F",
    ElementType.CEILING: "C",
}

_COLOR_MESSAGES = {
    ErrorKind.DOUBLE_COMMA: "Invalid color separator: ',,'\n",
    ErrorKind.EDGE_COMMA: "Color values cannot start or end with ','\n",
    ErrorKind.INVALID_RANGE: "Color values should be in a range of 0-255\n",
    ErrorKind.INVALID_COLOR_ARGUMENTS: "Color values can only be numbers\n",
}

_BLANKS = " \t\n"


def element_key(element: ElementType | None) -> str:
    """Return the identifier used in scene files for ``element``, or ''."""
    if element is None:
        return ""
    return _KEYS.get(element, "")


def first_word(line: str | None) -> str:
    """Return the first word of ``line``, skipping spaces, tabs and newlines."""
    if not line:
        return ""
    rest = line.lstrip(_BLANKS)
    for position, char in enumerate(rest):
        if char in _BLANKS:
            return rest[:position]
    return rest


class SceneError(Exception):
    """A scene element line that could not be accepted."""

    def __init__(self, kind: ErrorKind, element: ElementType | None, line: str | None) -> None:
        self.kind = kind
        self.element = element
        self.line = line
        super().__init__(self._detail().rstrip("\n"))

    def _detail(self) -> str:
        key = element_key(self.element)
        if self.kind is ErrorKind.MALLOC:
            return "Malloc error\n"
        if self.kind is ErrorKind.DUPLICATE:
            return f"{key} is set more than once\n"
        if self.kind is ErrorKind.INVALID_KEY:
            if self.line is None:
                return "Invalid key: "
            return f"Invalid key: {first_word(self.line)}\n"
        if self.kind is ErrorKind.TOO_FEW_VALUES:
            return f"too few arguments for: {key}\n"
        if self.kind is ErrorKind.TOO_MANY_VALUES:
            return f"too many arguments for: {key}\n"
        return _COLOR_MESSAGES.get(self.kind, "")

    def describe(self) -> str:
        """Return the full report written to standard error for this error."""
        return ERROR_HEADER + self._detail()