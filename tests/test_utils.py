import pytest

from cube5.moves import MoveDir
from cube5.utils import (
    apply_orbit,
    apply_orbit_double_packed,
    apply_orbit_packed,
    is_permutation,
    letters,
)

ORBIT = (2, 5, 7, 0)


def test_letters_examples():
    assert letters("ABCD") == (0, 1, 2, 3)
    assert letters("IJEG") == (8, 9, 4, 6)


@pytest.mark.parametrize("bad", ["abcd", "A1", "Ä"])
def test_letters_rejects_non_uppercase(bad):
    with pytest.raises(ValueError):
        letters(bad)


def test_is_permutation():
    assert is_permutation([3, 0, 2, 1])
    assert is_permutation([])
    assert not is_permutation([0, 0, 1])
    assert not is_permutation([0, 1, 3])
    assert not is_permutation([-1, 0])


def test_apply_orbit_cw_moves_forward():
    values = [0, 1, 2, 3]
    apply_orbit(values, (0, 1, 2, 3), MoveDir.CW)
    assert values == [3, 0, 1, 2]


def test_apply_orbit_leaves_other_positions():
    values = list(range(8))
    apply_orbit(values, ORBIT, MoveDir.CW)
    for pos in (1, 3, 4, 6):
        assert values[pos] == pos
    assert sorted(values) == list(range(8))


@pytest.mark.parametrize("direction", list(MoveDir))
def test_apply_orbit_inverse(direction):
    inverse = {MoveDir.CW: MoveDir.CCW, MoveDir.CCW: MoveDir.CW, MoveDir.DUB: MoveDir.DUB}
    values = list(range(8))
    apply_orbit(values, ORBIT, direction)
    apply_orbit(values, ORBIT, inverse[direction])
    assert values == list(range(8))


def test_apply_orbit_double_is_two_quarters():
    a = list(range(8))
    b = list(range(8))
    apply_orbit(a, ORBIT, MoveDir.DUB)
    apply_orbit(b, ORBIT, MoveDir.CW)
    apply_orbit(b, ORBIT, MoveDir.CW)
    assert a == b


def test_apply_orbit_four_quarters_identity():
    values = list(range(8))
    for _ in range(4):
        apply_orbit(values, ORBIT, MoveDir.CCW)
    assert values == list(range(8))


def _bits(packed, width, count):
    return [(packed >> (width * i)) & ((1 << width) - 1) for i in range(count)]


@pytest.mark.parametrize("direction", list(MoveDir))
@pytest.mark.parametrize("packed", [0b1, 0b10100101, 0b11111111, 0b100100])
def test_packed_matches_list(direction, packed):
    expected = _bits(packed, 1, 8)
    apply_orbit(expected, ORBIT, direction)
    result = apply_orbit_packed(packed, ORBIT, direction)
    assert _bits(result, 1, 8) == expected
    assert result >> 8 == packed >> 8


@pytest.mark.parametrize("direction", list(MoveDir))
@pytest.mark.parametrize("packed", [0b01, 0b1001001000100001, 0b10_00_01_00_10_00_01_10])
def test_double_packed_matches_list(direction, packed):
    expected = _bits(packed, 2, 8)
    apply_orbit(expected, ORBIT, direction)
    result = apply_orbit_double_packed(packed, ORBIT, direction)
    assert _bits(result, 2, 8) == expected


def test_packed_single_bit_moves_along_orbit():
    assert apply_orbit_packed(1, (0, 1, 2, 3), MoveDir.CW) == 2


def test_double_packed_preserves_sum():
    packed = 0b10_01_00_10_01_00_10_01
    result = apply_orbit_double_packed(packed, ORBIT, MoveDir.CW)
    assert sum(_bits(result, 2, 8)) == sum(_bits(packed, 2, 8))