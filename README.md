# cubscene

Reads the header of a `.cub` scene file, the format used by small
raycasting games, and checks it.

A scene header holds six elements, each on its own line, in any order:

```
NO ./textures/north.xpm
SO ./textures/south.xpm
WE ./textures/west.xpm
EA ./textures/east.xpm

F 220,100,0
C 225,30,0
```

- `NO`, `SO`, `WE`, `EA` give the texture path for each wall direction.
- `F` and `C` give the floor and ceiling colours as `R,G,B`, each
  component a run of digits from 0 to 255.

Each element line must hold exactly two words separated by spaces: the
identifier and its value. Blank lines (spaces, tabs, newlines, vertical
tabs only) are skipped. Reading stops after six elements, at the end of
the file, or earlier at the first line in which none of the identifiers
occurs; such a line ends reading without an error.

A line's element is decided by the first identifier, in the order
`NO`, `SO`, `WE`, `EA`, `F`, `C`, that occurs anywhere in it. The first
word must then be exactly that identifier, or the line is rejected with
`Invalid key`.

## Checking a file

```
cubscene path/to/level.cub
```

The command takes exactly one argument, and the file name must end in
`.cub` with at least one character before the suffix. When the header is
valid it exits with status 0 and prints nothing. Otherwise it writes a
message to standard error and exits with status 1.

Argument and file problems print one of:

- `Invalid number of arguments`
- `Invalid file name`
- `Can't open file`

A bad element line prints `Error` followed by one of:

- `NO is set more than once`
- `Invalid key: NOX`
- `too few arguments for: SO`
- `too many arguments for: F`
- `Invalid color separator: ',,'`
- `Color values cannot start or end with ','`
- `Color values should be in a range of 0-255`
- `Color values can only be numbers`

## From Python

```python
from cubscene.errors import SceneError
from cubscene.parser import UsageError, read_scene

try:
    scene = read_scene("level.cub")
except UsageError as exc:
    print(exc.message, end="")
except SceneError as exc:
    print(exc.describe(), end="")
else:
    print(scene.north, scene.floor_color)
```

- `cubscene.parser.read_scene(path)` returns a `SceneConfig` with the
  attributes `north`, `south`, `west`, `east` (texture paths),
  `floor_color` and `ceiling_color`. Elements missing from the file stay
  `None`. Colours are packed into one integer as `R * 65536 + G * 256 + B`.
- `cubscene.parser.parse(argv)` checks an argument list with
  `check_arguments` and reads the file it names; `main(argv=None)` is the
  command above and returns the exit status.
- `cubscene.colors.parse_color("220,100,0")` checks a single colour
  string and returns the packed value; `parse_keyed_color(line, key)` does
  the same for a whole `F ...` or `C ...` line.
- `cubscene.elements.classify_line(line)` returns the `ElementType` of a
  line, and `SceneConfig.apply(line, element)` stores its value.
- `SceneError` carries `kind` (an `ErrorKind`), `element` and `line`;
  `describe()` returns the full report shown by the command.

## What it does not do

Only the six header elements are read. The map that follows them in a
scene file is not read or checked, and `SceneConfig.map` stays empty.
Texture paths are stored as written; the files are not opened or checked.
Nothing is rendered.

## Running the tests

```
pip install -e ".[test]"
pytest
```