"""Start-up side of a raycasting game: argument checks, game state, line reading and text helpers."""

__version__ = "0.1.0"

__all__ = ["chars", "convert", "strings", "output", "linereader", "game", "cli"]