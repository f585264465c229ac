"""The scenes of the first game theme and the state they share."""

from __future__ import annotations

import random
import time
from collections.abc import Callable
from dataclasses import dataclass, field

from .canvas import Canvas
from .geometry import RectF
from .images import ImageLoader
from .keyboard import KeyboardInput
from .movement import update_player_movement
from .player import Player
from .renderer import ImageRenderer
from .scenes import Scene, SceneManager, SceneName
from .world import World
from .worldgen import generate_new_world
from .worldview import WorldView

BACKGROUND_IMAGE = "DefaultSceneBackground"
LOGO_IMAGE = "ForradiaWorldLogo"


def _start_clock() -> Callable[[], int]:
    start = time.monotonic()
    return lambda: int((time.monotonic() - start) * 1000)


@dataclass
class GameContext:
    """Everything the scenes of a running game share."""

    canvas: Canvas
    images: ImageLoader
    player: Player = field(default_factory=Player)
    world: World = field(default_factory=World)
    keyboard: KeyboardInput = field(default_factory=KeyboardInput)
    scenes: SceneManager = field(default_factory=SceneManager)
    rng: random.Random = field(default_factory=random.Random)
    clock: Callable[[], int] = field(default_factory=_start_clock)
    renderer: ImageRenderer = field(init=False)

    def __post_init__(self) -> None:
        self.renderer = ImageRenderer(self.canvas, self.images)


class IntroScene(Scene):
    """Shows the logo, then moves on to world generation."""

    def __init__(self, context: GameContext) -> None:
        self.context = context

    def update(self) -> None:
        self.context.scenes.go_to(SceneName.WORLD_GENERATION)

    def render(self) -> None:
        renderer = self.context.renderer
        renderer.draw_image(BACKGROUND_IMAGE, RectF(0.0, 0.0, 1.0, 1.0))
        renderer.draw_image(LOGO_IMAGE, RectF(0.3, 0.2, 0.4, 0.2))


class WorldGenerationScene(Scene):
    """Generates a new world, then moves on to the main scene."""

    def __init__(self, context: GameContext) -> None:
        self.context = context

    def update(self) -> None:
        generate_new_world(self.context.world.current_area, self.context.rng)
        self.context.scenes.go_to(SceneName.MAIN)

    def render(self) -> None:
        """Nothing is drawn while the world is generated."""


class MainScene(Scene):
    """Moves the player and shows the world around them."""

    def __init__(self, context: GameContext) -> None:
        self.context = context
        self.world_view = WorldView(context.world, context.player, context.canvas, context.renderer)

    def update(self) -> None:
        update_player_movement(self.context.player, self.context.keyboard, self.context.clock())

    def render(self) -> None:
        self.world_view.render()


def build_scene_manager(context: GameContext) -> SceneManager:
    """Register the theme's scenes in the context and start at the intro."""
    manager = context.scenes
    manager.add_scene(SceneName.INTRO, IntroScene(context))
    manager.add_scene(SceneName.WORLD_GENERATION, WorldGenerationScene(context))
    manager.add_scene(SceneName.MAIN, MainScene(context))
    manager.go_to(SceneName.INTRO)
    return manager