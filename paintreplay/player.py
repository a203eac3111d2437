"""Round navigation and automatic playback for a replay."""

from __future__ import annotations

DEFAULT_INTERVAL = 100
"""Milliseconds between automatic steps."""


class ReplayPlayer:
    """Tracks the shown round and whether playback advances on its own.

    Playback is running when the player is created.
    """

    def __init__(self, rounds: int, interval: int = DEFAULT_INTERVAL) -> None:
        if rounds < 1:
            raise ValueError("a replay needs at least one round")
        if interval <= 0:
            raise ValueError("interval must be positive")
        self.rounds = rounds
        self.interval = interval
        self.current_round = 0
        self.playing = True

    @property
    def at_end(self) -> bool:
        return self.current_round >= self.rounds - 1

    def step_back(self) -> bool:
        """Show the previous round; return whether the round changed."""
        if self.current_round > 0:
            self.current_round -= 1
            return True
        return False

    def step_forward(self) -> bool:
        """Show the next round; return whether the round changed."""
        if not self.at_end:
            self.current_round += 1
            return True
        return False

    def set_round(self, round_index: int) -> None:
        """Jump to ``round_index``."""
        if not 0 <= round_index < self.rounds:
            raise IndexError(f"round {round_index} out of range 0..{self.rounds - 1}")
        self.current_round = round_index

    def toggle_animation(self) -> bool:
        """Start or stop playback; return whether it is now running."""
        self.playing = not self.playing
        return self.playing

    def tick(self) -> bool:
        """Advance one step of playback; stop it at the last round.

        Returns whether the round changed.
        """
        if self.step_forward():
            return True
        self.toggle_animation()
        return False