# solong

Small, dependency-free helpers for a tile-based 2D game.

- `solong.colors`: the `Color` enum of ANSI escape sequences, the functions `black`, `blue`, `cyan`, `green`, `purple`, `red`, `white`, `yellow` and `reset` that write them to a stream (stdout by default), and `demo`, which prints each colour's name in that colour.
- `solong.chars`: ASCII classification and case conversion (`isalpha`, `isdigit`, `isalnum`, `isascii`, `isprint`, `tolower`, `toupper`), taking either a one-character string or an integer code.
- `solong.strutil`: `atoi` (wraps like a 32-bit signed integer), `itoa`, `split` (drops empty words), `strchr`, `strrchr`, `strjoin`, `strmapi`, `strncmp`, `strnstr`, `strtrim` and `substr`. Searches return an index or `None`.
- `solong.memory`: helpers over `bytearray`: `memset`, `bzero`, `calloc`, `memchr`, `memcmp`, `memcpy`, `memccpy`, `memmove` (within one buffer, overlap-safe), `strlcpy` and `strlcat`. Sizes beyond a buffer raise `ValueError`.
- `solong.put`: `putchar`, `putstr`, `putendl` and `putnbr`, writing to a stream (stdout by default).
- `solong.errors`: the `SoLongError` base exception and `MapError`; `report_error`, `file_error` and `usage_error`, which write coloured error messages (stderr by default); and `check_map_counts`, which raises `MapError` when a map has no collectible, no exit, no player, or more than one player.
- `solong.llist`: `LinkedList` of `Node`s with `push_front`, `push_back`, `last`, `len()`, iteration, `clear`, `iterate` and `map`.
- `solong.linereader`: `LineReader`, which reads a text or binary stream a fixed number of characters or bytes at a time and yields lines without their newline, and `read_lines`, which returns them all as a list.
- `solong.rgbnames`: `lookup_color`, a case-insensitive lookup of X11 colour names; `"none"` gives -1 and unknown names give `None`.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Example

```python
import io

from solong.errors import MapError, check_map_counts
from solong.linereader import read_lines
from solong.rgbnames import lookup_color
from solong.strutil import split

rows = read_lines(io.StringIO("111\n1PC\n1E1\n"), buffer_size=4)
print(rows)                          # ['111', '1PC', '1E1']

print(split("a,,b,c", ","))          # ['a', 'b', 'c']
print(hex(lookup_color("Dark Red"))) # 0x8b0000

text = "".join(rows)
check_map_counts(
    players=text.count("P"), exits=text.count("E"), collectibles=text.count("C")
)

try:
    check_map_counts(players=2, exits=1, collectibles=1)
except MapError as exc:
    print(exc)                       # Too much player position in map
```

## What the package does not do

It is a library of helpers, not a game. It opens no window, draws no tiles,
loads no image files, handles no keyboard input, and has no command to run.
Map checking is limited to counting players, exits and collectibles with
`check_map_counts`; wall and shape checks are left to the caller.