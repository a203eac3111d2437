import io

import pytest

from paintreplay.encoding import OFFSET, SquareCode, UnitCode, square_code, unit_code
from paintreplay.replay import ReplayFormatError, Square, parse_replay, read_replay

EMPTY = square_code(-1, -1) + unit_code(False)


def _cell(drawer, painter, ability=False, is_unit=False, player=-1, upgraded=False):
    return square_code(drawer, painter, ability) + unit_code(is_unit, player, upgraded)


def _sample():
    board0 = [
        [_cell(-1, 0), _cell(-1, -1, is_unit=True, player=1)],
        [EMPTY, _cell(1, 0)],
    ]
    board1 = [
        [_cell(-1, 0, ability=True), EMPTY],
        [_cell(0, -1, is_unit=True, player=0, upgraded=True), _cell(-1, -1, is_unit=True)],
    ]

    def lines(board):
        return "\n".join(" ".join(row) for row in board)

    return (
        "1 2 2\n2 alice bob\n"
        f"0 7 3\n{lines(board0)}\n"
        f"1 9 4\n{lines(board1)}\n"
    )


def test_header_is_read():
    replay = parse_replay(_sample())
    assert replay.names == ("alice", "bob")
    assert (replay.rows, replay.cols) == (2, 2)
    assert replay.rounds == 2
    assert replay.players == 2


def test_squares_are_decoded():
    board = parse_replay(_sample()).board(0)
    assert board[0][0] == Square(painter=0, drawer=-1, unit=UnitCode.NOTHING)
    assert board[0][1] == Square(unit=UnitCode.OWN1)
    assert board[1][0] == Square()
    assert board[1][1] == Square(painter=0, drawer=1)


def test_ability_upgrade_and_bonus():
    board = parse_replay(_sample()).board(1)
    assert board[0][0] == Square(painter=0, ability=True)
    assert board[1][0] == Square(drawer=0, unit=UnitCode.OWN0UP)
    assert board[1][1].unit is UnitCode.BONUS


def test_scores_are_shown_one_round_later():
    replay = parse_replay(_sample())
    assert replay.scores(0) == (0, 0)
    assert replay.scores(1) == (7, 3)


def test_whitespace_inside_cells_is_ignored():
    compact = _sample()
    spaced = compact.replace(EMPTY, " ".join(EMPTY))
    assert parse_replay(spaced) == parse_replay(compact)


def test_read_replay_matches_parse():
    text = _sample()
    assert read_replay(io.StringIO(text)) == parse_replay(text)


def test_board_out_of_range():
    replay = parse_replay(_sample())
    with pytest.raises(IndexError):
        replay.board(replay.rounds)
    with pytest.raises(IndexError):
        replay.scores(-1)


def test_truncated_input():
    text = _sample()
    with pytest.raises(ReplayFormatError):
        parse_replay(text[: len(text) // 2])


def test_non_numeric_header():
    with pytest.raises(ReplayFormatError):
        parse_replay("x 2 2 1 alice")


@pytest.mark.parametrize("players", [0, 5])
def test_player_count_limits(players):
    with pytest.raises(ReplayFormatError):
        parse_replay(f"0 1 1 {players} a b c d e 0 0 {EMPTY}")


def test_unknown_unit_character():
    bad = square_code(-1, -1) + chr(OFFSET + len(UnitCode))
    with pytest.raises(ReplayFormatError):
        parse_replay(f"0 1 1 1 alice 0 0 {bad}")


def test_error_square_is_rejected():
    bad = SquareCode.ERRSQUARE.char + unit_code(False)
    with pytest.raises(ReplayFormatError):
        parse_replay(f"0 1 1 1 alice 0 0 {bad}")


def test_round_number_out_of_range():
    with pytest.raises(ReplayFormatError):
        parse_replay(f"0 1 1 1 alice 5 0 {EMPTY}")


def test_error_is_value_error():
    with pytest.raises(ValueError):
        parse_replay("")