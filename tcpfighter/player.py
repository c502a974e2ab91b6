"""Player characters: health, direction, movement flags and stepping."""

from __future__ import annotations

import enum

from .defines import (
    MOVE_DELTAS,
    RANGE_MOVE_BOTTOM,
    RANGE_MOVE_LEFT,
    RANGE_MOVE_RIGHT,
    RANGE_MOVE_TOP,
    SPEED_PLAYER_X,
    SPEED_PLAYER_Y,
    Direction,
)
from .game_object import GameObject


class PlayerFlag(enum.IntFlag):
    MOVING = 0x01
    DEAD = 0x02


class Player(GameObject):
    """A fighter that moves in eight directions and takes damage."""

    def __init__(
        self,
        x: int = 0,
        y: int = 0,
        direction: Direction = Direction.LL,
        hp: int = 0,
    ) -> None:
        super().__init__(x, y)
        self.hp = hp
        self._direction = Direction(direction)
        self._facing = Direction.LL
        self.speed_x = SPEED_PLAYER_X
        self.speed_y = SPEED_PLAYER_Y
        self.flags = PlayerFlag(0)

    @property
    def direction(self) -> Direction:
        return self._direction

    @property
    def facing_direction(self) -> Direction:
        """Left or right, whichever the character last turned to."""
        return self._facing

    def set_direction(self, direction: int) -> None:
        """Set the movement direction, turning to face it when it is sideways."""
        self._direction = Direction(direction)
        facing = self._direction.facing()
        if facing is not None:
            self._facing = facing

    def damaged(self, amount: int) -> None:
        """Take ``amount`` damage; at zero health the player dies."""
        if self.hp - amount <= 0:
            self.hp = 0
            self._dead = True
        else:
            self.hp -= amount

    def set_speed(self, speed_x: int, speed_y: int) -> None:
        self.speed_x = speed_x
        self.speed_y = speed_y

    def set_flag(self, flag: PlayerFlag, on: bool) -> None:
        if on:
            self.flags |= flag
        else:
            self.flags &= ~flag

    def toggle_flag(self, flag: PlayerFlag) -> None:
        self.flags ^= flag

    def is_bit_set(self, flag: PlayerFlag) -> bool:
        return bool(self.flags & flag)

    def move(self) -> bool:
        """Step once in the current direction unless that leaves the world."""
        dx, dy = MOVE_DELTAS[self._direction]
        new_x = self._x + dx * self.speed_x
        new_y = self._y + dy * self.speed_y
        if not (RANGE_MOVE_LEFT <= new_x < RANGE_MOVE_RIGHT):
            return False
        if not (RANGE_MOVE_TOP <= new_y < RANGE_MOVE_BOTTOM):
            return False
        self._x = new_x
        self._y = new_y
        return True

    def update(self, now: int) -> None:
        """Check the timeout, then step if the player is moving."""
        super().update(now)
        if self.flags & PlayerFlag.MOVING:
            self.move()