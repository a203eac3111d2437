"""Replay viewer for board painting game matches: codes, parsing, playback and drawing."""

__version__ = "0.1.0"
__all__ = ["encoding", "geometry", "replay", "player", "render"]