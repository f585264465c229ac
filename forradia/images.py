"""Loading of PNG images keyed by the hash of their file names."""

from __future__ import annotations

from pathlib import Path

import pygame

from .geometry import Size
from .hashing import name_hash
from .paths import file_extension, file_stem, replace_char

RELATIVE_IMAGES_PATH = "../resources/Images/"


def default_images_path() -> Path:
    """Return the images directory relative to the package location."""
    return Path(__file__).resolve().parent / RELATIVE_IMAGES_PATH


class ImageLoader:
    """Images found under a directory, looked up by name hash."""

    def __init__(self, path: str | Path | None = None) -> None:
        self._images: dict[int, pygame.Surface] = {}
        if path is not None:
            self.load_directory(path)

    def load_directory(self, path: str | Path) -> int:
        """Load every PNG below ``path``; return how many were added.

        A missing directory loads nothing. An image whose name is already
        known keeps the first one loaded.
        """
        root = Path(path)
        if not root.exists():
            return 0
        added = 0
        for file in sorted(root.rglob("*")):
            if not file.is_file():
                continue
            normalized = replace_char(str(file), "\\", "/")
            if file_extension(normalized) != "png":
                continue
            image = self._load_single(normalized)
            if image is None:
                continue
            key = name_hash(file_stem(normalized))
            if key not in self._images:
                self._images[key] = image
                added += 1
        return added

    @staticmethod
    def _load_single(path: str) -> pygame.Surface | None:
        try:
            image = pygame.image.load(path)
        except (pygame.error, OSError):
            return None
        if pygame.display.get_init() and pygame.display.get_surface() is not None:
            image = image.convert_alpha()
        return image

    def image(self, name_hash: int) -> pygame.Surface | None:
        """Return the image with this name hash, or None."""
        return self._images.get(name_hash)

    def image_size(self, name_hash: int) -> Size:
        """Return the image's size, or a zero size if it is unknown."""
        image = self._images.get(name_hash)
        if image is None:
            return Size()
        width, height = image.get_size()
        return Size(width, height)