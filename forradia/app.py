"""Starting the game."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

import pygame

from .canvas import open_window
from .engine import Engine, EventSource
from .images import ImageLoader, default_images_path
from .theme import GameContext, build_scene_manager


class Game:
    """A game of the first theme, run until the window is closed."""

    def __init__(self, context: GameContext | None = None, event_source: EventSource | None = None) -> None:
        self.context = context
        self.event_source = event_source

    def run(self) -> None:
        owns_window = self.context is None
        if owns_window:
            canvas = open_window()
            self.context = GameContext(canvas, ImageLoader(default_images_path()))
        context = self.context
        try:
            build_scene_manager(context)
            Engine(context.scenes, context.canvas, context.keyboard, self.event_source).run()
        finally:
            if owns_window:
                pygame.quit()


def run_new_theme0() -> None:
    """Open a window and play the first theme."""
    Game().run()


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="forradia", description="Play Forradia World.")
    parser.parse_args(argv)
    run_new_theme0()
    return 0