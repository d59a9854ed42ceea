"""Command-line entry point: argument checks and reading of a scene file."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator, Sequence
from pathlib import Path

from .elements import SceneConfig, classify_line, is_blank
from .errors import (
    ARG_ERR,
    FILE_NAME_ERR,
    FILE_OPEN_ERR,
    ElementType,
    SceneError,
)

SCENE_SUFFIX = ".cub"
HEADER_ELEMENTS = 6
_BLANK_CHARS = " \n\t\v"


class UsageError(Exception):
    """Bad command-line arguments or an unreadable scene file."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


def check_arguments(argv: Sequence[str]) -> str:
    """Check that ``argv`` holds exactly one ``*.cub`` file name and return it."""
    if len(argv) != 1:
        raise UsageError(ARG_ERR)
    name = argv[0]
    if len(name) <= len(SCENE_SUFFIX) or not name.endswith(SCENE_SUFFIX):
        raise UsageError(FILE_NAME_ERR)
    return name


def iter_lines(stream: Iterable[str]) -> Iterator[str]:
    """Yield the lines of ``stream`` with their newlines; the last may lack one."""
    for line in stream:
        if line:
            yield line


def read_scene(path: str | Path) -> SceneConfig:
    """Read the six texture and colour lines at the head of a scene file.

    Blank lines are skipped. Reading stops after six element lines, at the
    first line that names no element, or at the end of the file.
    Raises UsageError if the file cannot be opened and SceneError for a
    bad element line.
    """
    config = SceneConfig()
    try:
        handle = open(path, encoding="utf-8", errors="replace", newline="")
    except OSError:
        raise UsageError(FILE_OPEN_ERR) from None
    with handle:
        seen = 0
        for line in iter_lines(handle):
            if seen >= HEADER_ELEMENTS:
                break
            if is_blank(line, _BLANK_CHARS):
                continue
            element = classify_line(line)
            if element is ElementType.NOT_VALID:
                break
            config.apply(line, element)
            seen += 1
    return config


def parse(argv: Sequence[str]) -> SceneConfig:
    """Check the arguments and read the scene file they name."""
    return read_scene(check_arguments(argv))


def main(argv: Sequence[str] | None = None) -> int:
    """Run the scene parser; return the process exit status."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        parse(argv)
    except UsageError as exc:
        sys.stderr.write(exc.message)
        return 1
    except SceneError as exc:
        sys.stderr.write(exc.describe())
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())