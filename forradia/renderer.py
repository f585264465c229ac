"""Drawing images into canvas-relative rectangles."""

from __future__ import annotations

import pygame

from .canvas import Canvas
from .geometry import RectF
from .hashing import name_hash
from .images import ImageLoader


class ImageRenderer:
    """Draws loaded images onto a canvas."""

    def __init__(self, canvas: Canvas, images: ImageLoader) -> None:
        self.canvas = canvas
        self.images = images

    def pixel_rect(self, destination: RectF) -> pygame.Rect:
        """Convert a canvas-relative rectangle into pixels."""
        size = self.canvas.size()
        return pygame.Rect(
            int(destination.x * size.w),
            int(destination.y * size.h),
            int(destination.w * size.w),
            int(destination.h * size.h),
        )

    def draw_image(self, image: int | str, destination: RectF) -> pygame.Rect | None:
        """Draw an image, given by name or name hash, stretched over ``destination``.

        Returns the pixel rectangle drawn, or None if nothing was drawn.
        """
        key = name_hash(image) if isinstance(image, str) else image
        surface = self.images.image(key)
        if surface is None:
            return None
        rect = self.pixel_rect(destination)
        if rect.w <= 0 or rect.h <= 0:
            return None
        scaled = pygame.transform.scale(surface, rect.size)
        self.canvas.surface.blit(scaled, rect.topleft)
        return rect