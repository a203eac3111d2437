"""Character codes used by replay files for board squares and units."""

from __future__ import annotations

from enum import IntEnum

OFFSET = ord(":")
"""Every code is written as the character ``chr(OFFSET + code)``."""


class _CharCode(IntEnum):
    @property
    def char(self) -> str:
        """The character that stands for this code in a replay file."""
        return chr(OFFSET + self.value)

    @classmethod
    def from_char(cls, char: str):
        """Return the code written as ``char``; raise ValueError if unknown."""
        if len(char) != 1:
            raise ValueError(f"expected a single character, got {char!r}")
        try:
            return cls(ord(char) - OFFSET)
        except ValueError:
            raise ValueError(f"unknown {cls.__name__} character {char!r}") from None


class SquareCode(_CharCode):
    """State of a board square: who painted it, who is drawing over it."""

    EMPTY = 0
    PAINT0 = 1
    PAINT1 = 2
    PAINT2 = 3
    PAINT3 = 4
    ABILITY0 = 5
    ABILITY1 = 6
    ABILITY2 = 7
    ABILITY3 = 8
    DRAW0 = 9
    DRAW1 = 10
    DRAW2 = 11
    DRAW3 = 12
    P0D1 = 13
    P0D2 = 14
    P0D3 = 15
    P1D0 = 16
    P1D2 = 17
    P1D3 = 18
    P2D0 = 19
    P2D1 = 20
    P2D3 = 21
    P3D0 = 22
    P3D1 = 23
    P3D2 = 24
    ERRSQUARE = 25


class UnitCode(_CharCode):
    """What stands on a square: a player's unit, a bubble, a bonus or nothing."""

    OWN0 = 0
    OWN1 = 1
    OWN2 = 2
    OWN3 = 3
    OWN0UP = 4
    OWN1UP = 5
    OWN2UP = 6
    OWN3UP = 7
    BUBBLE0 = 8
    BUBBLE1 = 9
    BUBBLE2 = 10
    BUBBLE3 = 11
    BONUS = 12
    NOTHING = 13
    ERRUNIT = 14


_PLAYERS = range(4)


def _square_lookup(drawer: int, painter: int, ability: bool) -> SquareCode:
    if painter == -1:
        if drawer == -1:
            return SquareCode.EMPTY
        if drawer in _PLAYERS:
            return SquareCode(SquareCode.DRAW0 + drawer)
        return SquareCode.ERRSQUARE
    if painter not in _PLAYERS:
        return SquareCode.ERRSQUARE
    if ability:
        return SquareCode(SquareCode.ABILITY0 + painter)
    if drawer == -1:
        return SquareCode(SquareCode.PAINT0 + painter)
    if drawer in _PLAYERS and drawer != painter:
        return SquareCode[f"P{painter}D{drawer}"]
    return SquareCode.ERRSQUARE


def square_code(drawer: int, painter: int, ability: bool = False) -> str:
    """Return the character for a square drawn by ``drawer`` and painted by ``painter``.

    ``-1`` means nobody.  Impossible combinations give ``SquareCode.ERRSQUARE``.
    """
    return _square_lookup(drawer, painter, ability).char


def unit_code(is_unit: bool, player: int = -1, upgraded: bool = False) -> str:
    """Return the character for a unit.

    With a player from 0 to 3, a unit is that player's (possibly upgraded)
    unit and a non-unit is that player's bubble.  Without a player, a unit
    is a bonus and a non-unit is nothing.
    """
    if player in _PLAYERS:
        if not is_unit:
            code = UnitCode(UnitCode.BUBBLE0 + player)
        elif upgraded:
            code = UnitCode(UnitCode.OWN0UP + player)
        else:
            code = UnitCode(UnitCode.OWN0 + player)
    elif is_unit:
        code = UnitCode.BONUS
    else:
        code = UnitCode.NOTHING
    return code.char


def decode_square(code: int) -> tuple[int, int, bool]:
    """Split a square code into ``(painter, drawer, ability)``.

    Raises ValueError for codes that describe no valid square.
    """
    try:
        square = SquareCode(code)
    except ValueError:
        raise ValueError(f"unknown square code {code!r}") from None

    if square is SquareCode.EMPTY:
        return -1, -1, False
    if SquareCode.PAINT0 <= square <= SquareCode.PAINT3:
        return square - SquareCode.PAINT0, -1, False
    if SquareCode.DRAW0 <= square <= SquareCode.DRAW3:
        return -1, square - SquareCode.DRAW0, False
    if SquareCode.ABILITY0 <= square <= SquareCode.ABILITY3:
        return square - SquareCode.ABILITY0, -1, True
    if square is SquareCode.ERRSQUARE:
        raise ValueError("square code marks an invalid square")
    name = square.name
    return int(name[1]), int(name[3]), False