"""Rendering of the tiles around the player."""

from __future__ import annotations

from .canvas import Canvas
from .geometry import RectF
from .player import Player
from .renderer import ImageRenderer
from .world import World

TILE_WIDTH = 0.05
VIEW_SIZE = 11
_OVERLAP = 0.001
PLAYER_IMAGE = "Player"


class WorldView:
    """Draws the grid of tiles centred on the player."""

    def __init__(self, world: World, player: Player, canvas: Canvas, renderer: ImageRenderer) -> None:
        self.world = world
        self.player = player
        self.canvas = canvas
        self.renderer = renderer

    def render(self) -> None:
        area = self.world.current_area
        position = self.player.position
        tile_height = self.canvas.width_to_height(TILE_WIDTH)
        half = VIEW_SIZE // 2
        for y in range(VIEW_SIZE):
            for x in range(VIEW_SIZE):
                coord_x = position.x - half + x
                coord_y = position.y - half + y
                if not area.contains(coord_x, coord_y):
                    continue
                tile = area.tile(coord_x, coord_y)
                destination = RectF(
                    x * TILE_WIDTH,
                    y * tile_height,
                    TILE_WIDTH + _OVERLAP,
                    tile_height + _OVERLAP,
                )
                self.renderer.draw_image(tile.ground, destination)
                if x == half and y == half:
                    self.renderer.draw_image(PLAYER_IMAGE, destination)