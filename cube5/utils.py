"""Helpers for permuting pieces along four-cycle orbits."""

from __future__ import annotations

from typing import MutableSequence, Sequence

from .moves import MoveDir

_SHIFT = {MoveDir.CW: 1, MoveDir.CCW: 3, MoveDir.DUB: 2}


def is_permutation(values: Sequence[int]) -> bool:
    """Return True if ``values`` holds each of 0..len-1 exactly once."""
    size = len(values)
    seen: set[int] = set()
    for value in values:
        if not 0 <= value < size or value in seen:
            return False
        seen.add(value)
    return True


def _cycle(items: Sequence, direction: MoveDir) -> list:
    """Cycle four items: a clockwise turn moves each item one step forward."""
    shift = _SHIFT[MoveDir(direction)]
    return [items[(i - shift) % 4] for i in range(4)]


def apply_orbit(values: MutableSequence, orbit: Sequence[int], direction: MoveDir) -> None:
    """Cycle the entries of ``values`` at the four ``orbit`` positions in place."""
    moved = _cycle([values[pos] for pos in orbit], direction)
    for pos, value in zip(orbit, moved):
        values[pos] = value


def _apply_orbit_fields(packed: int, orbit: Sequence[int], direction: MoveDir, width: int) -> int:
    mask = (1 << width) - 1
    fields = [(packed >> (width * pos)) & mask for pos in orbit]
    for pos in orbit:
        packed &= ~(mask << (width * pos))
    for pos, field in zip(orbit, _cycle(fields, direction)):
        packed |= field << (width * pos)
    return packed


def apply_orbit_packed(packed: int, orbit: Sequence[int], direction: MoveDir) -> int:
    """Cycle the single bits at the ``orbit`` positions and return the result."""
    return _apply_orbit_fields(packed, orbit, direction, 1)


def apply_orbit_double_packed(packed: int, orbit: Sequence[int], direction: MoveDir) -> int:
    """Cycle the two-bit fields at the ``orbit`` positions and return the result."""
    return _apply_orbit_fields(packed, orbit, direction, 2)


def letters(text: str) -> tuple[int, ...]:
    """Convert uppercase letters to their indices, with A as 0."""
    result = []
    for char in text:
        if not ("A" <= char <= "Z"):
            raise ValueError(f"character is not an uppercase ASCII letter: {char!r}")
        result.append(ord(char) - ord("A"))
    return tuple(result)