"""Random generation of a new world area."""

from __future__ import annotations

import random

from .world import WorldArea

GRASS = "GroundGrass"
WATER = "GroundWater_0"
TREE = "ObjectTree1"


def _rng_or_default(rng: random.Random | None) -> random.Random:
    return rng if rng is not None else random.Random()


def clear_with_grass(area: WorldArea) -> None:
    """Cover every tile with grass."""
    for _, _, tile in area.tiles():
        tile.set_ground(GRASS)


def generate_water(area: WorldArea, rng: random.Random | None = None) -> None:
    """Scatter round lakes over the area."""
    rng = _rng_or_default(rng)
    lake_count = 30 + rng.randrange(10)
    for _ in range(lake_count):
        x_center = rng.randrange(100)
        y_center = rng.randrange(100)
        radius = 3 + rng.randrange(8)
        for y in range(y_center - radius, y_center + radius + 1):
            for x in range(x_center - radius, x_center + radius + 1):
                if not area.contains(x, y):
                    continue
                dx = x - x_center
                dy = y - y_center
                if dx * dx + dy * dy <= radius * radius:
                    area.tile(x, y).set_ground(WATER)


def generate_objects(area: WorldArea, rng: random.Random | None = None) -> None:
    """Place trees on random tiles."""
    rng = _rng_or_default(rng)
    tree_count = 100 + rng.randrange(20)
    for _ in range(tree_count):
        x = rng.randrange(100)
        y = rng.randrange(100)
        area.tile(x, y).set_object(TREE)


def generate_new_world(area: WorldArea, rng: random.Random | None = None) -> None:
    """Fill the area with grass, then add lakes and trees."""
    rng = _rng_or_default(rng)
    clear_with_grass(area)
    generate_water(area, rng)
    generate_objects(area, rng)