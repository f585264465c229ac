import pygame
import pytest

from forradia.canvas import CLEAR_COLOR, Canvas
from forradia.geometry import Point
from forradia.images import ImageLoader
from forradia.player import Player
from forradia.renderer import ImageRenderer
from forradia.world import World
from forradia.worldgen import clear_with_grass
from forradia.worldview import WorldView

GREEN = (0, 200, 0)
RED = (255, 0, 0)


def _save(path, color):
    surface = pygame.Surface((4, 4))
    surface.fill(color)
    pygame.image.save(surface, str(path))


@pytest.fixture
def setup(tmp_path):
    _save(tmp_path / "GroundGrass.png", GREEN)
    _save(tmp_path / "Player.png", RED)
    canvas = Canvas(pygame.Surface((200, 200)))
    canvas.clear()
    world = World()
    clear_with_grass(world.current_area)
    player = Player()
    view = WorldView(world, player, canvas, ImageRenderer(canvas, ImageLoader(tmp_path)))
    return view, canvas, player


def _rgb(canvas, pos):
    return tuple(canvas.surface.get_at(pos))[:3]


def test_player_drawn_in_centre_tile(setup):
    view, canvas, _ = setup
    view.render()
    assert _rgb(canvas, (55, 55)) == RED
    assert _rgb(canvas, (5, 5)) == GREEN


def test_nothing_drawn_outside_view(setup):
    view, canvas, _ = setup
    view.render()
    assert canvas.surface.get_at((150, 150)) == CLEAR_COLOR


def test_tiles_outside_world_are_skipped(setup):
    view, canvas, player = setup
    player.position = Point(0, 0)
    view.render()
    assert canvas.surface.get_at((5, 5)) == CLEAR_COLOR
    assert _rgb(canvas, (55, 55)) == RED
    assert _rgb(canvas, (75, 75)) == GREEN