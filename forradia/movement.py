"""Stepping the player from held arrow keys."""

from __future__ import annotations

from .keyboard import KeyboardInput
from .player import Player

KEY_RIGHT = 0x4000004F
KEY_LEFT = 0x40000050
KEY_DOWN = 0x40000051
KEY_UP = 0x40000052


def update_player_movement(player: Player, keyboard: KeyboardInput, now: int) -> bool:
    """Move the player one step per held arrow key if enough time has passed.

    ``now`` is in milliseconds. Returns whether the player moved.
    """
    up = keyboard.is_pressed(KEY_UP)
    right = keyboard.is_pressed(KEY_RIGHT)
    down = keyboard.is_pressed(KEY_DOWN)
    left = keyboard.is_pressed(KEY_LEFT)

    ready = now > player.ticks_last_movement + 1000 / player.movement_speed
    if not (ready and (up or right or down or left)):
        return False

    if up:
        player.move_up()
    if right:
        player.move_right()
    if down:
        player.move_down()
    if left:
        player.move_left()
    player.ticks_last_movement = now
    return True