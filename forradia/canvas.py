"""The drawing surface the game renders onto."""

from __future__ import annotations

import pygame

from .geometry import Size

WINDOW_TITLE = "Forradia World"
CLEAR_COLOR = (0, 150, 255, 255)


class Canvas:
    """A pygame surface with helpers for canvas-relative sizes."""

    def __init__(self, surface: pygame.Surface) -> None:
        self.surface = surface

    def clear(self) -> None:
        """Fill the whole canvas with the background colour."""
        self.surface.fill(CLEAR_COLOR)

    def present(self) -> bool:
        """Show what was drawn; return whether the surface is the open window."""
        if pygame.display.get_init() and pygame.display.get_surface() is self.surface:
            pygame.display.flip()
            return True
        return False

    def size(self) -> Size:
        width, height = self.surface.get_size()
        return Size(width, height)

    def aspect_ratio(self) -> float:
        """Return width divided by height."""
        size = self.size()
        if size.h == 0:
            raise ZeroDivisionError("canvas has zero height")
        return size.w / size.h

    def width_to_height(self, width: float) -> float:
        """Convert a width fraction into the height fraction of equal pixels."""
        return width * self.aspect_ratio()

    def height_to_width(self, height: float) -> float:
        """Convert a height fraction into the width fraction of equal pixels."""
        return height / self.aspect_ratio()


def open_window(title: str = WINDOW_TITLE) -> Canvas:
    """Initialise pygame and open a full-screen window as a canvas."""
    pygame.init()
    pygame.display.set_caption(title)
    surface = pygame.display.set_mode((0, 0), pygame.FULLSCREEN)
    return Canvas(surface)