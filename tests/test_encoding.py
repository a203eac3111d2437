import pytest

from paintreplay.encoding import (
    OFFSET,
    SquareCode,
    UnitCode,
    decode_square,
    square_code,
    unit_code,
)


def _square(char):
    return SquareCode.from_char(char)


def _unit(char):
    return UnitCode.from_char(char)


def test_offset_is_colon():
    assert chr(OFFSET) == ":"
    assert unit_code(True, 0, False) == chr(OFFSET + UnitCode.OWN0)
    assert square_code(-1, 0, False) == chr(OFFSET + SquareCode.PAINT0)


def test_empty_square_is_colon():
    assert square_code(-1, -1, False) == ":"


def test_square_codes_are_contiguous():
    assert [c.value for c in SquareCode] == list(range(len(SquareCode)))
    assert SquareCode.ERRSQUARE == len(SquareCode) - 1
    for code in SquareCode:
        assert SquareCode.from_char(chr(OFFSET + code.value)) is code


@pytest.mark.parametrize("painter", [-1, 0, 1, 2, 3])
@pytest.mark.parametrize("drawer", [-1, 0, 1, 2, 3])
def test_square_round_trip(painter, drawer):
    char = square_code(drawer, painter, False)
    if painter == drawer and painter != -1:
        assert _square(char) is SquareCode.ERRSQUARE
    else:
        assert decode_square(ord(char) - OFFSET) == (painter, drawer, False)


@pytest.mark.parametrize("painter", [0, 1, 2, 3])
def test_ability_round_trip(painter):
    char = square_code(-1, painter, True)
    assert decode_square(_square(char)) == (painter, -1, True)


def test_ability_ignores_drawer():
    assert square_code(2, 1, True) == square_code(-1, 1, True)


def test_named_combination():
    assert _square(square_code(3, 1, False)) is SquareCode.P1D3


@pytest.mark.parametrize("drawer,painter", [(-1, 4), (5, -1), (7, 2), (-2, -2)])
def test_out_of_range_players_give_error_square(drawer, painter):
    assert _square(square_code(drawer, painter, False)) is SquareCode.ERRSQUARE


def test_decode_error_square_raises():
    with pytest.raises(ValueError):
        decode_square(SquareCode.ERRSQUARE)


def test_decode_unknown_code_raises():
    with pytest.raises(ValueError):
        decode_square(len(SquareCode))


@pytest.mark.parametrize("player", [0, 1, 2, 3])
def test_unit_codes_per_player(player):
    assert _unit(unit_code(True, player, False)) == UnitCode.OWN0 + player
    assert _unit(unit_code(True, player, True)) == UnitCode.OWN0UP + player
    assert _unit(unit_code(False, player, True)) == UnitCode.BUBBLE0 + player


def test_unit_without_player():
    assert _unit(unit_code(True)) is UnitCode.BONUS
    assert _unit(unit_code(False)) is UnitCode.NOTHING
    assert _unit(unit_code(True, 9, True)) is UnitCode.BONUS


def test_from_char_rejects_unknown():
    with pytest.raises(ValueError):
        UnitCode.from_char("~")
    with pytest.raises(ValueError):
        SquareCode.from_char("::")