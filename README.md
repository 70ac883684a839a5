# cubmap

`cubmap` handles the start-up of a raycasting game that reads its level from a
`.cub` map file. It checks the command line and sets up an empty game state. It
can also read a file line by line. It comes with a small set of text,
character and number helpers in the style of the C library.

## Installation

```
pip install .
```

To run the tests, install the test extra and run pytest:

```
pip install .[test]
pytest
```

## Command line

```
cubmap level.cub
```

The command takes exactly one argument: the path of a map file whose name ends
in `.cub` and has at least one character before the extension. The command
fails with exit status 1 in two cases, and writes a message to standard error:

- If the number of arguments is wrong, it writes `Usage: cub3d <map_file.cub>`.
- If the name lacks the `.cub` extension, or is only `.cub`, it writes
  `The map file name must have the .cub extension.`

If the argument is valid, the command builds a fresh game state and exits
with status 0.

## What it does not do

The command does not open the map file or read what is in it. It does not
parse textures, colours or the map grid, and it does not open a window or
render anything. `read_lines` and `LineReader` can read a file's lines, but
nothing in the package turns those lines into a `MapData`.

## Library

```python
from cubmap.cli import validate_arguments, ArgumentError
from cubmap.game import new_game
from cubmap.linereader import LineReader, read_lines

path = validate_arguments(["level.cub"])  # returns the path, or raises ArgumentError

game = new_game()
game.map.floor_color    # -1 (unset)
game.map.ceiling_color  # -1 (unset)

for line in read_lines(path):
    print(line, end="")
```

`validate_arguments` takes the arguments without the program name.

### Modules

- `cubmap.cli`
  - `ArgumentError` is the exception raised for a bad command line.
  - `validate_arguments(argv)` returns the single `.cub` path.
  - `main(argv=None)` returns the exit status. It reads `sys.argv[1:]` when
    `argv` is `None`.
- `cubmap.game`
  - The dataclasses `Vec2`, `Player`, `MapData` and `Game` make up the game
    state.
  - `new_game()` returns a state with every field at zero or empty, the
    texture paths at `None`, and both colours at `-1` (`UNSET_COLOR`).
- `cubmap.linereader`
  - `LineReader(stream, buffer_size=42)` reads a text stream in chunks of
    `buffer_size` characters. It returns one line at a time and keeps the
    trailing newline.
  - `read_line()` returns `None` at end of input. A reader can also be
    iterated.
  - `read_lines(path)` returns a list of all lines in a UTF-8 file, with line
    endings kept.
- `cubmap.strings` has C-style string and byte helpers:
  - Searches return an index, or `None` when nothing is found. These are
    `strchr`, `strrchr`, `strnstr` and `memchr`.
  - Comparisons return the difference of the first differing pair. These are
    `strcmp`, `strncmp` and `memcmp`.
  - `split(s, sep)` drops empty pieces.
  - `strtrim(s, charset)`, `substr(s, start, length)` and `strmapi(s, func)`
    return new strings.
  - `strlcpy(src, size)` and `strlcat(dst, src, size)` return a tuple
    `(text, length)`.
- `cubmap.convert`
  - `atoi` and `atol` parse a leading decimal integer. The result wraps to a
    signed 32-bit or 64-bit value.
  - `itoa(n)` formats an integer.
- `cubmap.chars`
  - `is_alpha`, `is_digit`, `is_alnum`, `is_ascii` and `is_print` test ASCII
    characters.
  - `to_upper` and `to_lower` map the case of ASCII letters.
  - Each function accepts either a single-character string or an integer code
    point.
- `cubmap.output`
  - `put_char`, `put_str`, `put_endl` and `put_nbr` write to a text stream.
    The stream defaults to standard output.
  - `put_str(None)` writes `(NULL)`.