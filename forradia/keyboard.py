"""Tracking of keys currently held down."""

from __future__ import annotations


class KeyboardInput:
    """The set of pressed key codes."""

    def __init__(self) -> None:
        self._pressed: set[int] = set()

    def register_press(self, key: int) -> None:
        self._pressed.add(key)

    def register_release(self, key: int) -> None:
        self._pressed.discard(key)

    def is_pressed(self, key: int) -> bool:
        return key in self._pressed