"""Drawing replay boards with pygame, and the interactive viewer window."""

from __future__ import annotations

import argparse
import math
import sys
from dataclasses import dataclass
from typing import Iterable, Sequence

import pygame

from paintreplay.encoding import UnitCode
from paintreplay.geometry import (
    BONUS_VERTICES,
    BUBBLE_VERTICES,
    PLAYER_VERTICES,
    SQUARE_VERTICES,
    Vertex,
    cell_origin,
    ortho_bounds,
)
from paintreplay.player import ReplayPlayer
from paintreplay.replay import Replay, ReplayFormatError, Square, read_replay

Color = tuple[float, float, float, float]
RGB = tuple[float, float, float]


def _rgb(red: int, green: int, blue: int) -> RGB:
    return (red / 255.0, green / 255.0, blue / 255.0)


PAINT_COLORS: tuple[RGB, ...] = (
    _rgb(255, 105, 180),  # pink
    _rgb(203, 114, 244),  # purple
    _rgb(255, 215, 0),  # yellow
    _rgb(44, 237, 236),  # cyan
)
ABILITY_COLORS: tuple[RGB, ...] = (
    _rgb(255, 43, 127),
    _rgb(161, 50, 233),
    _rgb(255, 180, 0),
    _rgb(0, 180, 180),
)
UNIT_COLORS: tuple[RGB, ...] = (
    _rgb(151, 0, 58),
    _rgb(97, 0, 148),
    _rgb(188, 86, 0),
    _rgb(0, 122, 123),
)
EMPTY_COLOR: Color = (*_rgb(30, 30, 30), 1.0)
WHITE: Color = (1.0, 1.0, 1.0, 1.0)
BONUS_COLOR: Color = (1.0, 0.0, 0.0, 1.0)
BACKGROUND = (80, 80, 80)

DRAW_ALPHA = 0.5
CYAN_DRAW_ALPHA = 0.2
"""Cyan is bright enough that its drawing overlay is kept fainter."""

WINDOW_SIZE = (800, 800)
FRAME_RATE = 60


@dataclass(frozen=True)
class Layer:
    """One filled shape of a cell: triangle vertices in cell units and an RGBA colour."""

    vertices: tuple[Vertex, ...]
    color: Color

    @property
    def rgba(self) -> tuple[int, int, int, int]:
        """The colour as 8-bit channels, clamped to the displayable range."""
        return tuple(  # type: ignore[return-value]
            round(min(max(channel, 0.0), 1.0) * 255) for channel in self.color
        )


def square_layers(square: Square) -> list[Layer]:
    """Layers for a square's paint and, if someone is drawing over it, the drawing."""
    if square.painter == -1:
        base = EMPTY_COLOR
    else:
        palette = ABILITY_COLORS if square.ability else PAINT_COLORS
        base = (*palette[square.painter], 1.0)
    layers = [Layer(SQUARE_VERTICES, base)]
    if square.drawer != -1:
        alpha = CYAN_DRAW_ALPHA if square.drawer == 3 else DRAW_ALPHA
        layers.append(Layer(SQUARE_VERTICES, WHITE))
        layers.append(Layer(SQUARE_VERTICES, (*PAINT_COLORS[square.drawer], alpha)))
    return layers


def unit_layer(unit: int) -> Layer | None:
    """The layer for whatever stands on a square, or None when nothing is shown."""
    code = UnitCode(unit)
    if UnitCode.OWN0 <= code <= UnitCode.OWN3:
        return Layer(PLAYER_VERTICES, (*UNIT_COLORS[code - UnitCode.OWN0], 1.0))
    if UnitCode.OWN0UP <= code <= UnitCode.OWN3UP:
        return Layer(PLAYER_VERTICES, (*UNIT_COLORS[code - UnitCode.OWN0UP], 1.0))
    if UnitCode.BUBBLE0 <= code <= UnitCode.BUBBLE3:
        return Layer(BUBBLE_VERTICES, (*UNIT_COLORS[code - UnitCode.BUBBLE0], 1.0))
    if code is UnitCode.BONUS:
        return Layer(BONUS_VERTICES, BONUS_COLOR)
    return None


def cell_layers(square: Square) -> list[Layer]:
    """Every layer of a cell, bottom first."""
    layers = square_layers(square)
    unit = unit_layer(square.unit)
    if unit is not None:
        layers.append(unit)
    return layers


def _triangles(points: Sequence[tuple[float, float]]) -> list[tuple]:
    corners = iter(points)
    return list(zip(corners, corners, corners))


def _fill(surface: pygame.Surface, points: Sequence[tuple[float, float]],
          rgba: tuple[int, int, int, int]) -> None:
    triangles = _triangles(points)
    if rgba[3] == 255:
        for triangle in triangles:
            pygame.draw.polygon(surface, rgba[:3], triangle)
        return
    xs = [x for x, _ in points]
    ys = [y for _, y in points]
    left, top = math.floor(min(xs)), math.floor(min(ys))
    width = math.ceil(max(xs)) - left + 1
    height = math.ceil(max(ys)) - top + 1
    overlay = pygame.Surface((width, height), pygame.SRCALPHA)
    for triangle in triangles:
        shifted = [(x - left, y - top) for x, y in triangle]
        pygame.draw.polygon(overlay, rgba, shifted)
    surface.blit(overlay, (left, top))


class Viewer:
    """Shows a replay one round at a time, with keyboard navigation and playback."""

    def __init__(self, replay: Replay) -> None:
        self.replay = replay
        self.player = ReplayPlayer(replay.rounds)
        self._font: pygame.font.Font | None = None

    @property
    def current_round(self) -> int:
        return self.player.current_round

    def handle_key(self, key: int) -> bool:
        """React to a key press; return whether the key was used."""
        if key == pygame.K_LEFT:
            self.player.step_back()
        elif key == pygame.K_RIGHT:
            self.player.step_forward()
        elif key == pygame.K_SPACE:
            self.player.toggle_animation()
        else:
            return False
        return True

    def draw(self, surface: pygame.Surface) -> None:
        """Render the current round's board and scores onto ``surface``."""
        surface.fill(BACKGROUND)
        width, height = surface.get_size()
        if width <= 0 or height <= 0:
            return
        bounds = ortho_bounds(width / height)
        span_x = bounds.right - bounds.left
        span_y = bounds.bottom - bounds.top

        # Board rows run down the screen and columns run across it.
        def to_screen(row: float, col: float) -> tuple[float, float]:
            return (
                (col - bounds.left) / span_x * width,
                (row - bounds.top) / span_y * height,
            )

        board = self.replay.board(self.current_round)
        for row_index, row in enumerate(board):
            for col_index, square in enumerate(row):
                origin_row, origin_col = cell_origin(
                    row_index, col_index, self.replay.rows, self.replay.cols
                )
                for layer in cell_layers(square):
                    points = [
                        to_screen(origin_row + vx, origin_col + vy)
                        for vx, vy, _ in layer.vertices
                    ]
                    _fill(surface, points, layer.rgba)
        self._draw_scores(surface)

    def _lines(self) -> Iterable[tuple[str, tuple[int, int, int]]]:
        yield f"Round {self.current_round}/{self.replay.rounds - 1}", (255, 255, 255)
        scores = self.replay.scores(self.current_round)
        for name, score, color in zip(self.replay.names, scores, PAINT_COLORS):
            yield f"{name}: {score}", tuple(round(c * 255) for c in color)

    def _draw_scores(self, surface: pygame.Surface) -> None:
        if not pygame.font.get_init():
            pygame.font.init()
        if self._font is None:
            self._font = pygame.font.Font(None, 20)
        y = 4
        for text, color in self._lines():
            image = self._font.render(text, True, color)
            surface.blit(image, (4, y))
            y += image.get_height() + 2

    def run(self) -> None:
        """Open a window and show the replay until it is closed."""
        pygame.init()
        try:
            pygame.display.set_mode(WINDOW_SIZE, pygame.RESIZABLE)
            pygame.display.set_caption("Replay viewer")
            clock = pygame.time.Clock()
            elapsed = 0
            running = True
            while running:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        running = False
                    elif event.type == pygame.KEYDOWN:
                        if event.key == pygame.K_SPACE:
                            elapsed = 0
                        self.handle_key(event.key)
                delta = clock.tick(FRAME_RATE)
                if self.player.playing:
                    elapsed += delta
                    while self.player.playing and elapsed >= self.player.interval:
                        elapsed -= self.player.interval
                        self.player.tick()
                else:
                    elapsed = 0
                self.draw(pygame.display.get_surface())
                pygame.display.flip()
        finally:
            pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Read a replay from a file or standard input and show it."""
    parser = argparse.ArgumentParser(description="Watch a recorded game.")
    parser.add_argument(
        "replay",
        nargs="?",
        type=argparse.FileType("r"),
        default=sys.stdin,
        help="replay file (standard input if omitted)",
    )
    args = parser.parse_args(argv)
    try:
        replay = read_replay(args.replay)
    except ReplayFormatError as exc:
        parser.error(f"invalid replay: {exc}")
    finally:
        if args.replay is not sys.stdin:
            args.replay.close()
    Viewer(replay).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())