import pygame
import pytest

from forradia.canvas import Canvas
from forradia.geometry import RectF
from forradia.hashing import name_hash
from forradia.images import ImageLoader
from forradia.renderer import ImageRenderer

RED = (255, 0, 0)
BLACK = (0, 0, 0)


@pytest.fixture
def renderer(tmp_path):
    surface = pygame.Surface((2, 2))
    surface.fill(RED)
    pygame.image.save(surface, str(tmp_path / "Red.png"))
    canvas = Canvas(pygame.Surface((100, 100)))
    canvas.surface.fill(BLACK)
    return ImageRenderer(canvas, ImageLoader(tmp_path))


def test_draw_by_name_fills_destination(renderer):
    rect = renderer.draw_image("Red", RectF(0.5, 0.5, 0.25, 0.25))
    assert rect == pygame.Rect(50, 50, 25, 25)
    assert tuple(renderer.canvas.surface.get_at((60, 60)))[:3] == RED
    assert tuple(renderer.canvas.surface.get_at((10, 10)))[:3] == BLACK


def test_draw_by_hash_matches_draw_by_name(renderer):
    destination = RectF(0.1, 0.2, 0.3, 0.4)
    assert renderer.draw_image(name_hash("Red"), destination) == renderer.draw_image(
        "Red", destination
    )


def test_pixel_rect_matches_drawn_rect(renderer):
    destination = RectF(0.0, 0.0, 1.0, 1.0)
    rect = renderer.draw_image("Red", destination)
    assert rect == renderer.pixel_rect(destination)
    assert rect.size == renderer.canvas.surface.get_size()


def test_missing_image_draws_nothing(renderer):
    assert renderer.draw_image("Nothing", RectF(0.0, 0.0, 1.0, 1.0)) is None
    assert tuple(renderer.canvas.surface.get_at((50, 50)))[:3] == BLACK


def test_empty_destination_draws_nothing(renderer):
    assert renderer.draw_image("Red", RectF(0.5, 0.5, 0.0, 0.0)) is None
    assert tuple(renderer.canvas.surface.get_at((50, 50)))[:3] == BLACK