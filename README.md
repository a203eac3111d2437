# paintreplay

A viewer for match replays of a game for up to four players played on a
grid, where units paint, draw on and claim squares round after round. It
reads a replay from a file or from standard input and shows the board of
every round in a window, together with the round number and each
player's name and score.

## Installation

```
pip install .
```

The viewer window uses `pygame`. To run the tests:

```
pip install .[test]
pytest
```

## Viewing a replay

```
paintreplay match.txt
paintreplay < match.txt
```

Controls:

- **Left arrow**: go back one round.
- **Right arrow**: go forward one round.
- **Space**: start or stop automatic playback.

Playback starts as soon as the window opens, advances one round every
100 milliseconds and stops at the last round. The window can be resized;
the board stays centred and keeps its proportions.

Each square is drawn in the colour of the player who painted it (pink,
purple, yellow and cyan for players 0 to 3); ability squares use a
stronger shade of that colour. A square that a player is drawing over is
shown white with a tint of that player's colour. Units, upgraded or not,
are shown as small dark squares in their owner's colour, bubbles as
discs, and bonuses as red crosses.

If the replay cannot be read, the command stops with an error message
that says what was wrong.

## Replay format

The input is whitespace separated:

1. the number of rounds `N`, the number of rows and the number of
   columns;
2. the number of players (1 to 4) followed by their names, one word
   each;
3. `N + 1` boards. Each board starts with a round number and one score
   per player, followed, row by row, by two characters for every cell:
   the square code and the unit code.

Scores given with round number `r` are shown with board `r + 1`; board 0
always shows zero for everybody.

Codes are single characters counted from `:`; see
`paintreplay.encoding.SquareCode` and `paintreplay.encoding.UnitCode`.
`paintreplay.encoding.square_code` and `paintreplay.encoding.unit_code`
produce these characters, and `paintreplay.encoding.decode_square`
turns a square code back into its painter, drawer and ability flag.

## Using the library

```python
from paintreplay.replay import read_replay

with open("match.txt") as handle:
    replay = read_replay(handle)

print(replay.names, replay.rounds)
board = replay.board(0)          # rows of Square(painter, drawer, unit, ability)
print(replay.scores(1))
```

`parse_replay` does the same from a string. Malformed input raises
`paintreplay.replay.ReplayFormatError`, and asking for a round outside
the replay raises `IndexError`.

`paintreplay.player.ReplayPlayer` keeps the shown round and the playback
state apart from any window: `step_back`, `step_forward`, `set_round`,
`toggle_animation` and `tick`.

`paintreplay.render.cell_layers` lists the coloured shapes that make up
one cell, bottom first, and `paintreplay.render.Viewer` draws a replay
onto any `pygame` surface with `draw` or opens its own window with
`run`.

## Generating circle geometry

The bubble shape is a fan of triangles around the centre of a cell. To
print its vertex list:

```
paintreplay-circle
paintreplay-circle --segments 12 --radius 0.4 --origin-x 0.5 --origin-y 0.5 --start 0
```