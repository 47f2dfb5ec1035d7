"""Cube move notation: faces, move kinds, directions and their encodings."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable


class Face(IntEnum):
    """A face of the cube; the value is its index in every per-face table."""

    U = 0
    L = 1
    F = 2
    R = 3
    B = 4
    D = 5


class MoveType(IntEnum):
    """Whether a move turns only the outer layer or the outer two layers."""

    OUTER = 0
    WIDE = 1


class MoveDir(IntEnum):
    """The amount a move turns its layers."""

    CW = 0
    CCW = 1
    DUB = 2


def _enum_or_default(enum_cls, value):
    """Look up an enum member, falling back to the member with value 0."""
    try:
        return enum_cls(value)
    except ValueError:
        return enum_cls(0)


_FACE_BY_LETTER = {face.name: face for face in Face}
_DIR_SUFFIX = {MoveDir.CW: "", MoveDir.CCW: "'", MoveDir.DUB: "2"}


@dataclass(frozen=True)
class Move:
    """A single move such as ``R``, ``Uw'`` or ``F2``."""

    face: Face
    kind: MoveType = MoveType.OUTER
    direction: MoveDir = MoveDir.CW

    @classmethod
    def from_packed(cls, value: int) -> "Move":
        """Decode a move from its one-byte form.

        Bits 0-2 hold the face, bit 3 the move type and bits 4-5 the
        direction. Field values out of range decode to the first member.
        """
        face = value & 0b0000_0111
        kind = (value & 0b0000_1000) >> 3
        direction = (value & 0b0011_0000) >> 4
        return cls(
            _enum_or_default(Face, face),
            _enum_or_default(MoveType, kind),
            _enum_or_default(MoveDir, direction),
        )

    @classmethod
    def parse(cls, text: str) -> "Move":
        """Parse a move written in standard notation."""
        if not text:
            raise ValueError("empty string is not a move")
        try:
            face = _FACE_BY_LETTER[text[0]]
        except KeyError:
            raise ValueError(f"invalid move: {text!r}") from None
        kind = MoveType.WIDE if len(text) >= 2 and text[1] == "w" else MoveType.OUTER
        last = text[-1]
        if last == "'":
            direction = MoveDir.CCW
        elif last == "2":
            direction = MoveDir.DUB
        else:
            direction = MoveDir.CW
        return cls(face, kind, direction)

    def pack(self) -> int:
        """Encode the move as a single byte."""
        return int(self.face) | (int(self.kind) << 3) | (int(self.direction) << 4)

    def __str__(self) -> str:
        wide = "w" if self.kind is MoveType.WIDE else ""
        return f"{self.face.name}{wide}{_DIR_SUFFIX[self.direction]}"


def parse_moves(text: str) -> list[Move]:
    """Parse a space-separated sequence of moves."""
    return [Move.parse(token) for token in text.split(" ") if token]


def format_moves(moves: Iterable[Move]) -> str:
    """Write a sequence of moves as space-separated notation."""
    return " ".join(str(move) for move in moves)