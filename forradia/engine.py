"""The main loop: events, scene update and rendering."""

from __future__ import annotations

from collections.abc import Callable, Iterable

import pygame

from .canvas import Canvas
from .keyboard import KeyboardInput
from .scenes import SceneManager

EventSource = Callable[[], Iterable[pygame.event.Event]]


class Engine:
    """Runs frames until a quit event arrives or it is stopped."""

    def __init__(
        self,
        scenes: SceneManager,
        canvas: Canvas,
        keyboard: KeyboardInput,
        event_source: EventSource | None = None,
    ) -> None:
        self.scenes = scenes
        self.canvas = canvas
        self.keyboard = keyboard
        self._events = event_source if event_source is not None else pygame.event.get
        self.running = True

    def poll_events(self) -> None:
        """Handle every pending event."""
        for event in self._events():
            if event.type == pygame.QUIT:
                self.stop()
            elif event.type == pygame.KEYDOWN:
                self.keyboard.register_press(event.key)
            elif event.type == pygame.KEYUP:
                self.keyboard.register_release(event.key)

    def step(self) -> None:
        """Run one frame."""
        self.poll_events()
        self.scenes.update_current()
        self.canvas.clear()
        self.scenes.render_current()
        self.canvas.present()

    def run(self) -> None:
        """Run frames while the engine is running."""
        while self.running:
            self.step()

    def stop(self) -> None:
        self.running = False