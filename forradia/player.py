"""The player character."""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from .geometry import Point


@dataclass
class Player:
    """Player position, timing of the last step and steps per second."""

    position: Point = field(default_factory=lambda: Point(50, 50))
    ticks_last_movement: int = 0
    movement_speed: float = 3.0

    def _shift(self, dx: int, dy: int) -> None:
        self.position = replace(self.position, x=self.position.x + dx, y=self.position.y + dy)

    def move_up(self) -> None:
        self._shift(0, -1)

    def move_right(self) -> None:
        self._shift(1, 0)

    def move_down(self) -> None:
        self._shift(0, 1)

    def move_left(self) -> None:
        self._shift(-1, 0)