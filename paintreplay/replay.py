"""Reading recorded games: board states and scores for every round."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TextIO

from paintreplay.encoding import OFFSET, UnitCode, decode_square

MAX_PLAYERS = 4

_WORD_PATTERN = re.compile(r"\s*(\S+)")
_CHAR_PATTERN = re.compile(r"\s*(\S)")


class ReplayFormatError(ValueError):
    """Raised when replay text does not follow the expected layout."""


@dataclass(frozen=True)
class Square:
    """One board cell: its painter, the player drawing over it, and its unit.

    ``-1`` for ``painter`` or ``drawer`` means nobody.
    """

    painter: int = -1
    drawer: int = -1
    unit: UnitCode = UnitCode.NOTHING
    ability: bool = False


Board = tuple[tuple[Square, ...], ...]


@dataclass(frozen=True)
class Replay:
    """A whole recorded game: player names, one board and one score row per round."""

    names: tuple[str, ...]
    rows: int
    cols: int
    boards: tuple[Board, ...]
    points: tuple[tuple[int, ...], ...]

    @property
    def rounds(self) -> int:
        """Number of boards that can be shown."""
        return len(self.boards)

    @property
    def players(self) -> int:
        return len(self.names)

    def _check_round(self, round_index: int) -> None:
        if not 0 <= round_index < self.rounds:
            raise IndexError(
                f"round {round_index} out of range 0..{self.rounds - 1}"
            )

    def board(self, round_index: int) -> Board:
        """The board shown at ``round_index``."""
        self._check_round(round_index)
        return self.boards[round_index]

    def scores(self, round_index: int) -> tuple[int, ...]:
        """Each player's score shown at ``round_index``."""
        self._check_round(round_index)
        return self.points[round_index]


class _Scanner:
    """Pulls whitespace-separated words and single characters from text."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    def _take(self, pattern: re.Pattern[str], what: str) -> str:
        match = pattern.match(self._text, self._pos)
        if match is None:
            raise ReplayFormatError(f"unexpected end of input while reading {what}")
        self._pos = match.end()
        return match.group(1)

    def word(self, what: str) -> str:
        return self._take(_WORD_PATTERN, what)

    def char(self, what: str) -> str:
        return self._take(_CHAR_PATTERN, what)

    def integer(self, what: str) -> int:
        text = self.word(what)
        try:
            return int(text)
        except ValueError:
            raise ReplayFormatError(f"expected {what}, got {text!r}") from None


def _read_square(scanner: _Scanner) -> Square:
    square_char = scanner.char("square code")
    unit_char = scanner.char("unit code")
    try:
        painter, drawer, ability = decode_square(ord(square_char) - OFFSET)
    except ValueError as exc:
        raise ReplayFormatError(f"bad square {square_char!r}: {exc}") from None
    try:
        unit = UnitCode.from_char(unit_char)
    except ValueError as exc:
        raise ReplayFormatError(f"bad unit {unit_char!r}: {exc}") from None
    return Square(painter=painter, drawer=drawer, unit=unit, ability=ability)


def parse_replay(text: str) -> Replay:
    """Parse replay text.

    The header holds the round count, rows, columns, the number of players
    and their names.  One more board than the round count follows, each
    preceded by its round number and the players' scores.  Scores given
    with round ``r`` are shown alongside board ``r + 1``; board 0 shows zeros.
    """
    scanner = _Scanner(text)
    declared = scanner.integer("round count")
    rows = scanner.integer("row count")
    cols = scanner.integer("column count")
    players = scanner.integer("player count")

    if declared < 0:
        raise ReplayFormatError(f"round count must not be negative, got {declared}")
    if rows < 0 or cols < 0:
        raise ReplayFormatError(f"board size must not be negative, got {rows}x{cols}")
    if not 1 <= players <= MAX_PLAYERS:
        raise ReplayFormatError(
            f"player count must be between 1 and {MAX_PLAYERS}, got {players}"
        )

    names = tuple(scanner.word("player name") for _ in range(players))
    rounds = declared + 1
    points: list[tuple[int, ...]] = [(0,) * players for _ in range(rounds)]
    boards: list[Board] = []

    for _ in range(rounds):
        label = scanner.integer("round number")
        scores = tuple(scanner.integer("score") for _ in range(players))
        target = label + 1
        if 0 <= target < rounds:
            points[target] = scores
        elif target != rounds:
            raise ReplayFormatError(f"round number {label} out of range")
        boards.append(
            tuple(
                tuple(_read_square(scanner) for _ in range(cols))
                for _ in range(rows)
            )
        )

    return Replay(
        names=names,
        rows=rows,
        cols=cols,
        boards=tuple(boards),
        points=tuple(points),
    )


def read_replay(stream: TextIO) -> Replay:
    """Parse a replay from an open text stream."""
    return parse_replay(stream.read())