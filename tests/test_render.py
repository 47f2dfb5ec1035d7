from collections import Counter

import pytest
from PIL import Image

from cube5.render import (
    BACKGROUND,
    BLACK,
    CELL_SIZE,
    COLORS,
    FACE_ORIGINS,
    FACE_SIZE,
    LINE_WIDTH,
    export_state_to_image,
    render_state,
)
from cube5.state import State

WHITE, ORANGE, GREEN, RED, BLUE, YELLOW = COLORS


def tile_color(img, face, x, y):
    ox, oy = FACE_ORIGINS[face]
    px = ox + CELL_SIZE * x + LINE_WIDTH + CELL_SIZE // 2 - 1
    py = oy + CELL_SIZE * y + LINE_WIDTH + CELL_SIZE // 2 - 1
    return img.getpixel((px, py))


def all_tiles(img):
    return [
        tile_color(img, face, x, y)
        for face in range(6)
        for y in range(5)
        for x in range(5)
    ]


def state_after(moves):
    state = State()
    state.apply(moves.split())
    return state


def test_image_size():
    img = render_state(State())
    assert img.size == (4 * FACE_SIZE, 3 * FACE_SIZE)


def test_background_and_frame():
    img = render_state(State())
    assert img.getpixel((0, 0)) == BACKGROUND
    assert img.getpixel(FACE_ORIGINS[0]) == BLACK
    assert img.getpixel(FACE_ORIGINS[2]) == BLACK


def test_solved_faces_are_uniform():
    img = render_state(State())
    for face in range(6):
        colors = {tile_color(img, face, x, y) for x in range(5) for y in range(5)}
        assert colors == {COLORS[face]}


def test_u_move_shifts_top_rows():
    img = render_state(state_after("U"))
    assert [tile_color(img, 2, x, 0) for x in range(5)] == [RED] * 5
    assert [tile_color(img, 1, x, 0) for x in range(5)] == [GREEN] * 5
    assert {tile_color(img, 2, x, y) for x in range(5) for y in range(1, 5)} == {GREEN}
    assert {tile_color(img, 0, x, y) for x in range(5) for y in range(5)} == {WHITE}


@pytest.mark.parametrize(
    "moves",
    ["R", "Fw'", "Uw2 L B' Dw", "Fw' R' B Dw Uw Rw Lw' R D2 B2 R' D2 R' Fw2 R' Fw Bw2"],
)
def test_each_color_appears_25_times(moves):
    counts = Counter(all_tiles(render_state(state_after(moves))))
    assert counts == {color: 25 for color in COLORS}


@pytest.mark.parametrize("moves", ["R R'", "Fw Fw'", "Uw2 Uw2", "B B B B"])
def test_inverse_sequences_render_solved(moves):
    solved = render_state(State()).tobytes()
    assert render_state(state_after(moves)).tobytes() == solved


def test_scrambled_differs_from_solved():
    solved = render_state(State()).tobytes()
    assert render_state(state_after("Rw U")).tobytes() != solved
    assert tile_color(render_state(state_after("Rw U")), 2, 2, 2) == GREEN


def test_invalid_color_raises():
    state = State()
    state.centers_x[0] = 6
    with pytest.raises(ValueError):
        render_state(state)


def test_export_round_trip(tmp_path):
    state = state_after("Lw' D2 Bw")
    path = tmp_path / "cube.png"
    export_state_to_image(state, path)
    with Image.open(path) as loaded:
        assert loaded.convert("RGB").tobytes() == render_state(state).tobytes()