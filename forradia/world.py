"""Tiles, world areas and the world that holds them."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from .hashing import name_hash

AREA_SIZE = 100


@dataclass
class Tile:
    """One grid cell: a ground type and an object, both as name hashes."""

    ground: int = 0
    obj: int = 0

    def set_ground(self, name: str) -> None:
        self.ground = name_hash(name)

    def set_object(self, name: str) -> None:
        self.obj = name_hash(name)


class WorldArea:
    """A rectangular grid of tiles indexed by (x, y)."""

    def __init__(self, width: int = AREA_SIZE, height: int = AREA_SIZE) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("world area dimensions must be positive")
        self.width = width
        self.height = height
        self._tiles = [[Tile() for _ in range(height)] for _ in range(width)]

    def contains(self, x: int, y: int) -> bool:
        """Return whether (x, y) lies inside the area."""
        return 0 <= x < self.width and 0 <= y < self.height

    def tile(self, x: int, y: int) -> Tile:
        """Return the tile at (x, y); raise IndexError outside the area."""
        if not self.contains(x, y):
            raise IndexError(f"tile ({x}, {y}) is outside the world area")
        return self._tiles[x][y]

    def tiles(self) -> Iterator[tuple[int, int, Tile]]:
        """Yield (x, y, tile) for every tile in the area."""
        for x, column in enumerate(self._tiles):
            for y, tile in enumerate(column):
                yield x, y, tile


@dataclass
class World:
    """The game world and the area currently in play."""

    current_area: WorldArea = field(default_factory=WorldArea)