"""Scenes and the manager that switches between them."""

from __future__ import annotations

from enum import Enum


class SceneName(Enum):
    """Names of the scenes a game can hold."""

    INTRO = 0
    MAIN_MENU = 1
    WORLD_GENERATION = 2
    MAIN = 3


class Scene:
    """A game scene; subclasses override update and render."""

    def update(self) -> None:
        """Advance the scene by one frame."""

    def render(self) -> None:
        """Draw the scene."""


class SceneManager:
    """Holds named scenes and drives the current one."""

    def __init__(self) -> None:
        self._scenes: dict[SceneName, Scene] = {}
        self.current = SceneName.INTRO

    def add_scene(self, name: SceneName, scene: Scene) -> None:
        """Register a scene; a name already registered keeps its scene."""
        self._scenes.setdefault(name, scene)

    def go_to(self, name: SceneName) -> None:
        self.current = name

    def update_current(self) -> bool:
        """Update the current scene; return whether one was registered."""
        scene = self._scenes.get(self.current)
        if scene is None:
            return False
        scene.update()
        return True

    def render_current(self) -> bool:
        """Render the current scene; return whether one was registered."""
        scene = self._scenes.get(self.current)
        if scene is None:
            return False
        scene.render()
        return True