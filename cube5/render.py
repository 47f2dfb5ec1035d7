"""Draw a cube state as an unfolded net on a raster image."""

from __future__ import annotations

import os
from typing import Union

from PIL import Image

from .state import State

LINE_WIDTH = 2
CELL_SIZE = 20
CUBE_SIZE = 5
FACE_SIZE = CUBE_SIZE * CELL_SIZE + LINE_WIDTH

# Top-left pixel of each face in the net, indexed by face number (U L F R B D).
FACE_ORIGINS = (
    (FACE_SIZE, 0),
    (0, FACE_SIZE),
    (FACE_SIZE, FACE_SIZE),
    (2 * FACE_SIZE, FACE_SIZE),
    (3 * FACE_SIZE, FACE_SIZE),
    (FACE_SIZE, 2 * FACE_SIZE),
)

BACKGROUND = (125, 125, 125)
BLACK = (0, 0, 0)
COLORS = (
    (255, 255, 255),  # white
    (255, 89, 0),  # orange
    (0, 155, 72),  # green
    (185, 0, 0),  # red
    (0, 69, 173),  # blue
    (255, 213, 0),  # yellow
)

_X_CENTER_OFFSETS = ((1, 1), (3, 1), (3, 3), (1, 3))
_PLUS_CENTER_OFFSETS = ((2, 1), (3, 2), (2, 3), (1, 2))

_CORNER_COLORS = (
    (0, 1, 4),
    (0, 4, 3),
    (0, 3, 2),
    (0, 2, 1),
    (5, 1, 2),
    (5, 2, 3),
    (5, 3, 4),
    (5, 4, 1),
)
_CORNER_TILES = (
    ((0, 0, 0), (1, 0, 0), (4, 4, 0)),
    ((0, 4, 0), (4, 0, 0), (3, 4, 0)),
    ((0, 4, 4), (3, 0, 0), (2, 4, 0)),
    ((0, 0, 4), (2, 0, 0), (1, 4, 0)),
    ((5, 0, 0), (1, 4, 4), (2, 0, 4)),
    ((5, 4, 0), (2, 4, 4), (3, 0, 4)),
    ((5, 4, 4), (3, 4, 4), (4, 0, 4)),
    ((5, 0, 4), (4, 4, 4), (1, 0, 4)),
)

_MIDGE_COLORS = (
    (0, 4), (0, 3), (0, 2), (0, 1),
    (2, 3), (2, 1),
    (4, 1), (4, 3),
    (5, 2), (5, 3), (5, 4), (5, 1),
)
_MIDGE_TILES = (
    ((0, 2, 0), (4, 2, 0)),
    ((0, 4, 2), (3, 2, 0)),
    ((0, 2, 4), (2, 2, 0)),
    ((0, 0, 2), (1, 2, 0)),
    ((2, 4, 2), (3, 0, 2)),
    ((2, 0, 2), (1, 4, 2)),
    ((4, 4, 2), (1, 0, 2)),
    ((4, 0, 2), (3, 4, 2)),
    ((5, 2, 0), (2, 2, 4)),
    ((5, 4, 2), (3, 2, 4)),
    ((5, 2, 4), (4, 2, 4)),
    ((5, 0, 2), (1, 2, 4)),
)

_WING_COLORS = (
    (0, 4), (0, 3), (0, 2), (0, 1),
    (1, 0), (1, 2), (1, 5), (1, 4),
    (2, 0), (2, 3), (2, 5), (2, 1),
    (3, 0), (3, 4), (3, 5), (3, 2),
    (4, 0), (4, 1), (4, 5), (4, 3),
    (5, 2), (5, 3), (5, 4), (5, 1),
)
_WING_TILES = (
    ((0, 3, 0), (4, 1, 0)), ((0, 4, 3), (3, 1, 0)), ((0, 1, 4), (2, 1, 0)), ((0, 0, 1), (1, 1, 0)),
    ((1, 3, 0), (0, 0, 3)), ((1, 4, 3), (2, 0, 3)), ((1, 1, 4), (5, 0, 3)), ((1, 0, 1), (4, 4, 1)),
    ((2, 3, 0), (0, 3, 4)), ((2, 4, 3), (3, 0, 3)), ((2, 1, 4), (5, 1, 0)), ((2, 0, 1), (1, 4, 1)),
    ((3, 3, 0), (0, 4, 1)), ((3, 4, 3), (4, 0, 3)), ((3, 1, 4), (5, 4, 1)), ((3, 0, 1), (2, 4, 1)),
    ((4, 3, 0), (0, 1, 0)), ((4, 4, 3), (1, 0, 3)), ((4, 1, 4), (5, 3, 4)), ((4, 0, 1), (3, 4, 1)),
    ((5, 3, 0), (2, 3, 4)), ((5, 4, 3), (3, 3, 4)), ((5, 1, 4), (4, 3, 4)), ((5, 0, 1), (1, 3, 4)),
)


def _fill(img: Image.Image, x: int, y: int, width: int, height: int, color) -> None:
    """Fill a rectangle, clipped to the image bounds."""
    right = min(x + width, img.width)
    bottom = min(y + height, img.height)
    if x < right and y < bottom:
        img.paste(color, (x, y, right, bottom))


def _draw_face_frame(img: Image.Image, start_x: int, start_y: int) -> None:
    face = CUBE_SIZE * CELL_SIZE
    outer = face + LINE_WIDTH
    _fill(img, start_x, start_y, outer, LINE_WIDTH, BLACK)
    _fill(img, start_x, start_y + face, outer, LINE_WIDTH, BLACK)
    _fill(img, start_x, start_y, LINE_WIDTH, outer, BLACK)
    _fill(img, start_x + face, start_y, LINE_WIDTH, outer, BLACK)
    inner = face - LINE_WIDTH
    for i in range(1, CUBE_SIZE):
        _fill(img, start_x + LINE_WIDTH, start_y + i * CELL_SIZE, inner, LINE_WIDTH, BLACK)
        _fill(img, start_x + i * CELL_SIZE, start_y + LINE_WIDTH, LINE_WIDTH, inner, BLACK)


def _draw_frame() -> Image.Image:
    img = Image.new("RGB", (4 * FACE_SIZE, 3 * FACE_SIZE), BACKGROUND)
    for x, y in FACE_ORIGINS:
        _draw_face_frame(img, x, y)
    return img


def _color(num: int):
    if not 0 <= num < len(COLORS):
        raise ValueError(f"invalid colour number: {num}")
    return COLORS[num]


def _draw_tile(img: Image.Image, tile: tuple[int, int, int], color: int) -> None:
    face, x_tiles, y_tiles = tile
    origin_x, origin_y = FACE_ORIGINS[face]
    x = origin_x + CELL_SIZE * x_tiles + LINE_WIDTH
    y = origin_y + CELL_SIZE * y_tiles + LINE_WIDTH
    size = CELL_SIZE - LINE_WIDTH
    _fill(img, x, y, size, size, _color(color))


def _center_tile(index: int, offsets) -> tuple[int, int, int]:
    if not 0 <= index < 24:
        raise ValueError(f"invalid centre index: {index}")
    x, y = offsets[index % 4]
    return index // 4, x, y


def _draw_centers(state: State, img: Image.Image) -> None:
    for index, color in enumerate(state.centers_x):
        _draw_tile(img, _center_tile(index, _X_CENTER_OFFSETS), color)
    for index, color in enumerate(state.centers_plus):
        _draw_tile(img, _center_tile(index, _PLUS_CENTER_OFFSETS), color)
    for face in range(6):
        _draw_tile(img, (face, 2, 2), face)


def _draw_corners(state: State, img: Image.Image) -> None:
    for piece, twist, tiles in zip(
        state.corners_perm, state.corner_orientations(), _CORNER_TILES
    ):
        c0, c1, c2 = _CORNER_COLORS[piece]
        if twist == 1:
            colors = (c1, c2, c0)
        elif twist == 2:
            colors = (c2, c0, c1)
        else:
            colors = (c0, c1, c2)
        for tile, color in zip(tiles, colors):
            _draw_tile(img, tile, color)


def _draw_midges(state: State, img: Image.Image) -> None:
    for piece, flip, tiles in zip(
        state.midges_perm, state.midge_orientations(), _MIDGE_TILES
    ):
        colors = _MIDGE_COLORS[piece]
        if flip == 1:
            colors = colors[::-1]
        for tile, color in zip(tiles, colors):
            _draw_tile(img, tile, color)


def _draw_wings(state: State, img: Image.Image) -> None:
    for piece, tiles in zip(state.wings, _WING_TILES):
        for tile, color in zip(tiles, _WING_COLORS[piece]):
            _draw_tile(img, tile, color)


def render_state(state: State) -> Image.Image:
    """Draw the state as an unfolded net and return the image."""
    img = _draw_frame()
    _draw_centers(state, img)
    _draw_corners(state, img)
    _draw_midges(state, img)
    _draw_wings(state, img)
    return img


def export_state_to_image(state: State, path: Union[str, os.PathLike]) -> None:
    """Draw the state and save it to ``path``."""
    render_state(state).save(path)