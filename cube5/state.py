"""Piece-level model of a 5x5x5 cube and the effect of moves on it."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Iterable, Union

from .moves import Face, Move, MoveDir, MoveType
from .utils import (
    apply_orbit,
    apply_orbit_double_packed,
    apply_orbit_packed,
    is_permutation,
    letters,
)

MoveLike = Union[Move, int, str]

# Corner positions: U layer 0 1 / 3 2 seen from above, D layer 4 5 / 7 6.
CORNER_ORBITS = (
    (0, 1, 2, 3),  # U
    (0, 3, 4, 7),  # L
    (3, 2, 5, 4),  # F
    (2, 1, 6, 5),  # R
    (1, 0, 7, 6),  # B
    (4, 5, 6, 7),  # D
)
CORNER_ORIENTATION_CHANGES = (
    (0, 0, 0, 0),  # U
    (1, 2, 1, 2),  # L
    (1, 2, 1, 2),  # F
    (1, 2, 1, 2),  # R
    (1, 2, 1, 2),  # B
    (0, 0, 0, 0),  # D
)

MIDGE_ORBITS = (
    (0, 1, 2, 3),  # U
    (3, 5, 11, 6),  # L
    (2, 4, 8, 5),  # F
    (1, 7, 9, 4),  # R
    (0, 6, 10, 7),  # B
    (8, 9, 10, 11),  # D
)

WING_ORBITS_OUTER = (
    (letters("ABCD"), letters("EQMI")),  # U
    (letters("EFGH"), letters("DLXR")),  # L
    (letters("IJKL"), letters("CPUF")),  # F
    (letters("MNOP"), letters("BTVJ")),  # R
    (letters("QRST"), letters("AHWN")),  # B
    (letters("UVWX"), letters("KOSG")),  # D
)
WING_ORBITS_WIDE = (
    letters("LHTP"),  # U
    letters("QCKW"),  # L
    letters("BOXE"),  # F
    letters("ASUI"),  # R
    letters("MDGV"),  # B
    letters("JNRF"),  # D
)

CENTER_ORBITS_WIDE_X = (
    (letters("FRNJ"), letters("EQMI")),  # U
    (letters("AIUS"), letters("DLXR")),  # L
    (letters("DMVG"), letters("CPUF")),  # F
    (letters("CQWK"), letters("BTVJ")),  # R
    (letters("BEXO"), letters("AHWN")),  # B
    (letters("LPTH"), letters("KOSG")),  # D
)


def _solved_centers() -> list[int]:
    return [color for color in range(6) for _ in range(4)]


def _to_move(move: MoveLike) -> Move:
    if isinstance(move, Move):
        return move
    if isinstance(move, str):
        return Move.parse(move)
    if isinstance(move, int):
        return Move.from_packed(move)
    raise TypeError(f"cannot interpret {move!r} as a move")


def _centers_valid(centers: list[int]) -> bool:
    if any(not 0 <= color < 6 for color in centers):
        return False
    counts = Counter(centers)
    return all(counts[color] == 4 for color in range(6))


@dataclass
class State:
    """The state of a 5x5x5 cube, stored per piece type.

    Wings and centres are indexed by the Speffz lettering scheme. Centre
    lists hold colours (0 white, 1 orange, 2 green, 3 red, 4 blue,
    5 yellow); piece lists hold the piece at each position. Corner
    orientations are packed two bits per corner, midge orientations one
    bit per midge. The reference orientation is white top, green front.
    """

    corners_perm: list[int] = field(default_factory=lambda: list(range(8)))
    corners_ori: int = 0
    midges_perm: list[int] = field(default_factory=lambda: list(range(12)))
    midges_ori: int = 0
    wings: list[int] = field(default_factory=lambda: list(range(24)))
    centers_x: list[int] = field(default_factory=_solved_centers)
    centers_plus: list[int] = field(default_factory=_solved_centers)

    def corner_orientations(self) -> list[int]:
        """Unpack the twist of each of the eight corners."""
        return [(self.corners_ori >> (2 * i)) & 3 for i in range(8)]

    def midge_orientations(self) -> list[int]:
        """Unpack the flip of each of the twelve midges."""
        return [(self.midges_ori >> i) & 1 for i in range(12)]

    def is_valid(self) -> bool:
        """Check that every piece type holds a consistent arrangement."""
        if not is_permutation(self.corners_perm):
            return False
        corner_ori = self.corner_orientations()
        if any(twist >= 3 for twist in corner_ori) or sum(corner_ori) % 3:
            return False
        if not is_permutation(self.midges_perm):
            return False
        if sum(self.midge_orientations()) % 2:
            return False
        if not is_permutation(self.wings):
            return False
        return _centers_valid(self.centers_plus) and _centers_valid(self.centers_x)

    def validate(self) -> None:
        """Raise ValueError if the state is not valid."""
        if not self.is_valid():
            raise ValueError("cube state is not valid")

    def make_move(self, move: MoveLike) -> None:
        """Apply one move, given as a Move, its notation or its packed byte."""
        move = _to_move(move)
        face = int(move.face)
        direction = move.direction

        # Corners
        c_orbit = CORNER_ORBITS[face]
        apply_orbit(self.corners_perm, c_orbit, direction)
        ori = apply_orbit_double_packed(self.corners_ori, c_orbit, direction)
        if direction != MoveDir.DUB:
            for pos, change in zip(c_orbit, CORNER_ORIENTATION_CHANGES[face]):
                twist = (((ori >> (2 * pos)) & 3) + change) % 3
                ori = (ori & ~(3 << (2 * pos))) | (twist << (2 * pos))
        self.corners_ori = ori

        # Midges
        m_orbit = MIDGE_ORBITS[face]
        apply_orbit(self.midges_perm, m_orbit, direction)
        flips = apply_orbit_packed(self.midges_ori, m_orbit, direction)
        if direction != MoveDir.DUB and move.face in (Face.F, Face.B):
            for pos in m_orbit:
                flips ^= 1 << pos
        self.midges_ori = flips

        wide = move.kind == MoveType.WIDE

        # Wings
        outer_1, outer_2 = WING_ORBITS_OUTER[face]
        apply_orbit(self.wings, outer_1, direction)
        apply_orbit(self.wings, outer_2, direction)
        if wide:
            apply_orbit(self.wings, WING_ORBITS_WIDE[face], direction)

        # + centres share their orbits with the wings in Speffz lettering.
        apply_orbit(self.centers_plus, outer_1, direction)
        if wide:
            apply_orbit(self.centers_plus, outer_2, direction)

        # x centres
        apply_orbit(self.centers_x, outer_1, direction)
        if wide:
            wide_1, wide_2 = CENTER_ORBITS_WIDE_X[face]
            apply_orbit(self.centers_x, wide_1, direction)
            apply_orbit(self.centers_x, wide_2, direction)

    def apply(self, moves: Iterable[MoveLike]) -> None:
        """Apply a sequence of moves in order."""
        for move in moves:
            self.make_move(move)