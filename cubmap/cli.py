"""Command-line entry point: argument checking and game start-up."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from cubmap.game import new_game
from cubmap.output import put_endl

MAP_EXTENSION = ".cub"
USAGE = "Usage: cub3d <map_file.cub>"
EXTENSION_ERROR = "The map file name must have the .cub extension."


class ArgumentError(Exception):
    """The command line does not name a valid map file."""


def validate_arguments(argv: Sequence[str]) -> str:
    """Check that exactly one ``.cub`` map path is given and return it."""
    if len(argv) != 1:
        raise ArgumentError(USAGE)
    path = argv[0]
    if len(path) <= len(MAP_EXTENSION) or not path.endswith(MAP_EXTENSION):
        raise ArgumentError(EXTENSION_ERROR)
    return path


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the program; returns the process exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        validate_arguments(args)
    except ArgumentError as exc:
        put_endl(str(exc), sys.stderr)
        return 1
    new_game()
    return 0