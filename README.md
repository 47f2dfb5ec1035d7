# cube5

A piece-level model of a 5x5x5 puzzle cube. It tracks corners, midges,
wings, x-centres and +-centres. It reads standard move notation, applies
moves to a cube state, and draws the cube as an unfolded net in an image.

## Install

```
pip install .
```

## Command line

```
cube5
cube5 --output cube.png
```

The command reads move sequences from standard input, one per line, for
example:

```
Fw' R' B Dw Uw Rw Lw' R D2 B2
```

For each line it starts from a solved cube and applies the moves. It then
writes the resulting net to the output file, replacing the image from the
previous line. The output file is `out.png` unless `-o`/`--output` names
another. An empty line draws the solved cube.

A token that does not start with a face letter stops the command. It prints
`error: ...` to standard error and exits with status 1.

### Notation

- Faces: `U L F R B D`
- A `w` as the second character turns two layers, for example `Rw`.
- A trailing `'` turns the face counter-clockwise. A trailing `2` turns it
  twice. With neither suffix the turn is clockwise.
- Moves are separated by spaces. Repeated spaces are ignored.

## Library use

```python
from cube5.moves import Move, parse_moves, format_moves
from cube5.state import State
from cube5.render import export_state_to_image, render_state

state = State()
state.apply(parse_moves("R U R' U'"))
print(state.is_valid())            # True
print(state.corner_orientations())
print(state.midge_orientations())

state.make_move("Fw2")             # notation, a Move, or a packed byte
state.make_move(Move.parse("D'"))

image = render_state(state)        # a Pillow image
export_state_to_image(state, "cube.png")
```

### `cube5.moves`

- `Face` (`U L F R B D`), `MoveType` (`OUTER`, `WIDE`) and `MoveDir`
  (`CW`, `CCW`, `DUB`) are integer enums.
- `Move` is a frozen dataclass with `face`, `kind` and `direction`.
  `Move.parse(text)` reads one move and raises `ValueError` on an empty
  string or an unknown face letter. `str(move)` writes it back in notation.
  `move.pack()` encodes it as one byte (face in bits 0-2, type in bit 3,
  direction in bits 4-5). `Move.from_packed(value)` decodes that byte; field
  values out of range decode to the first member of their enum.
- `parse_moves(text)` and `format_moves(moves)` convert between a
  space-separated string and a list of moves.

### `cube5.state`

`State` holds the cube as separate lists per piece type. Wings and centres
are indexed by the Speffz lettering scheme. Centre lists hold colours
(0 white, 1 orange, 2 green, 3 red, 4 blue, 5 yellow). A new `State()` is
solved, with white on top and green in front.

- `make_move(move)` and `apply(moves)` turn the cube in place.
- `corner_orientations()` and `midge_orientations()` unpack the packed
  orientation fields.
- `is_valid()` checks the permutations, the orientation sums and the centre
  colour counts. `validate()` raises `ValueError` if the state is not valid.

### `cube5.utils`

Helpers used by the model: `is_permutation`, `apply_orbit`,
`apply_orbit_packed`, `apply_orbit_double_packed` and `letters`, which maps
uppercase letters to indices with `A` as 0.

### `cube5.render`

`render_state(state)` returns the net as an RGB Pillow image of 408 by 306
pixels. `export_state_to_image(state, path)` saves it, with the file format
taken from the file name.

## What it does not do

The package models and draws the cube; it does not solve it, scramble it or
search for move sequences.

## Tests

```
pip install ".[test]"
pytest
```