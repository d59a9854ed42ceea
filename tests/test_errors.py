import pytest

from cubscene.errors import (
    ERROR_HEADER,
    ElementType,
    ErrorKind,
    SceneError,
    element_key,
    first_word,
)


@pytest.mark.parametrize(
    "element, key",
    [
        (ElementType.NORTH, "NO"),
        (ElementType.SOUTH, "SO"),
        (ElementType.WEST, "WE"),
        (ElementType.EAST, "EA"),
        (ElementType.FLOOR, "F"),
        (ElementType.CEILING, "C"),
        (ElementType.EMPTY, ""),
        (ElementType.NOT_VALID, ""),
        (None, ""),
    ],
)
def test_element_key(element, key):
    assert element_key(element) == key


def test_first_word_skips_leading_blanks():
    assert first_word("  \t\nNO ./path.xpm\n") == "NO"


def test_first_word_stops_at_tab():
    assert first_word("XX\tvalue") == "XX"


def test_first_word_empty_inputs():
    assert first_word(None) == ""
    assert first_word(" \t\n") == ""


def test_first_word_whole_line():
    assert first_word("abc") == "abc"


def test_describe_starts_with_header():
    err = SceneError(ErrorKind.MALLOC, ElementType.NORTH, "NO x")
    assert err.describe().startswith(ERROR_HEADER)
    assert err.describe() == ERROR_HEADER + "Malloc error\n"


def test_duplicate_message():
    err = SceneError(ErrorKind.DUPLICATE, ElementType.NORTH, "NO a")
    assert err.describe() == ERROR_HEADER + "NO" + " is set more than once\n"


def test_invalid_key_message_uses_first_word():
    err = SceneError(ErrorKind.INVALID_KEY, ElementType.FLOOR, "  FX 1,2,3\n")
    assert err.describe() == ERROR_HEADER + "Invalid key: " + "FX" + "\n"


def test_invalid_key_without_line():
    err = SceneError(ErrorKind.INVALID_KEY, ElementType.FLOOR, None)
    assert err.describe() == ERROR_HEADER + "Invalid key: "


@pytest.mark.parametrize(
    "kind, prefix",
    [
        (ErrorKind.TOO_FEW_VALUES, "too few arguments for: "),
        (ErrorKind.TOO_MANY_VALUES, "too many arguments for: "),
    ],
)
def test_argument_count_messages(kind, prefix):
    err = SceneError(kind, ElementType.CEILING, "C")
    assert err.describe() == ERROR_HEADER + prefix + "C" + "\n"


@pytest.mark.parametrize(
    "kind, text",
    [
        (ErrorKind.DOUBLE_COMMA, "Invalid color separator: ',,'\n"),
        (ErrorKind.EDGE_COMMA, "Color values cannot start or end with ','\n"),
        (ErrorKind.INVALID_RANGE, "Color values should be in a range of 0-255\n"),
        (ErrorKind.INVALID_COLOR_ARGUMENTS, "Color values can only be numbers\n"),
    ],
)
def test_color_messages(kind, text):
    err = SceneError(kind, ElementType.FLOOR, "F 1,2,3")
    assert err.describe() == ERROR_HEADER + text
    assert str(err) == text.rstrip("\n")


def test_attributes_kept():
    err = SceneError(ErrorKind.EDGE_COMMA, ElementType.FLOOR, "F ,1,2")
    assert err.kind is ErrorKind.EDGE_COMMA
    assert err.element is ElementType.FLOOR
    assert err.line == "F ,1,2"


@pytest.mark.parametrize(
    "kind, code",
    [
        (ErrorKind.MALLOC, -1),
        (ErrorKind.INVALID_COLOR_ARGUMENTS, -9),
    ],
)
def test_error_kind_codes(kind, code):
    err = SceneError(kind, ElementType.FLOOR, "F 1,2,3")
    assert err.kind.value == code