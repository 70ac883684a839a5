"""Game state: player, map description and their defaults."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

UNSET_COLOR = -1


@dataclass
class Vec2:
    """A two-dimensional vector."""

    x: float = 0.0
    y: float = 0.0


@dataclass
class Player:
    """Player position, facing direction and camera plane."""

    pos: Vec2 = field(default_factory=Vec2)
    dir: Vec2 = field(default_factory=Vec2)
    plane: Vec2 = field(default_factory=Vec2)


@dataclass
class MapData:
    """A parsed map: the grid, its size, wall textures and colours."""

    grid: list[str] = field(default_factory=list)
    width: int = 0
    height: int = 0
    north_texture_path: Optional[str] = None
    south_texture_path: Optional[str] = None
    west_texture_path: Optional[str] = None
    east_texture_path: Optional[str] = None
    floor_color: int = UNSET_COLOR
    ceiling_color: int = UNSET_COLOR


@dataclass
class Game:
    """The whole game state."""

    player: Player = field(default_factory=Player)
    map: MapData = field(default_factory=MapData)


def new_game() -> Game:
    """Return a game with everything zeroed and both colours unset."""
    return Game()