"""
Wave Defender entities
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Protocol

import pygame

from wave_defender import constants
from wave_defender.utils import clamp


class Entity(Protocol):
    """
    Anything the engine moves, collides and draws.
    """

    x: float
    y: float
    width: int
    height: int
    alive: bool

    def update(self) -> None: ...

    @property
    def bounds(self) -> pygame.Rect: ...

    @property
    def center_x(self) -> float: ...


class Direction(IntEnum):
    """Vertical travel direction of a projectile (screen y grows down)."""

    UP = -1
    DOWN = 1


@dataclass
class Projectile:
    """
    Projectile entity

    Upward projectiles belong to the player, downward ones to the enemies.
    """

    x: float
    y: float
    direction: Direction
    field_height: float = float(constants.WINDOW_SIZE[1])
    speed: float = constants.PROJECTILE_SPEED
    width: int = constants.PROJECTILE_WIDTH
    height: int = constants.PROJECTILE_HEIGHT
    alive: bool = True

    @property
    def bounds(self) -> pygame.Rect:
        return pygame.Rect(int(self.x), int(self.y), self.width, self.height)

    @property
    def center_x(self) -> float:
        return self.x + self.width / 2

    @property
    def is_player_owned(self) -> bool:
        return self.direction is Direction.UP

    @property
    def is_enemy_owned(self) -> bool:
        return self.direction is Direction.DOWN

    @property
    def min_y(self) -> float:
        return -constants.PROJECTILE_TOP_MARGIN

    @property
    def max_y(self) -> float:
        return self.field_height + constants.PROJECTILE_BOTTOM_MARGIN

    def update(self) -> None:
        """Move one tick along the direction, dying once off-field."""
        self.y += self.speed * self.direction
        if self.y < self.min_y or self.y > self.max_y:
            self.alive = False


@dataclass
class Enemy:
    """
    Enemy entity

    ``kind`` 0 sits in the top row and is worth the most.
    """

    x: float
    y: float
    kind: int
    velocity: float = constants.INITIAL_ENEMY_SPEED
    width: int = constants.ENEMY_WIDTH
    height: int = constants.ENEMY_HEIGHT
    alive: bool = True
    points: int = field(init=False)

    def __post_init__(self):
        if self.kind not in constants.ENEMY_POINTS:
            raise ValueError(f"Unknown enemy kind: {self.kind}")
        self.points = constants.ENEMY_POINTS[self.kind]

    @property
    def bounds(self) -> pygame.Rect:
        return pygame.Rect(int(self.x), int(self.y), self.width, self.height)

    @property
    def center_x(self) -> float:
        return self.x + self.width / 2

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def update(self) -> None:
        """Drift horizontally; vertical moves come from the formation."""
        self.x += self.velocity

    def drop_and_reverse(self, drop_distance: float) -> None:
        """
        Step down and turn around.

        :param drop_distance: How far to move down.
        :type drop_distance: float
        """
        self.y += drop_distance
        self.velocity = -self.velocity

    def shoot(
        self, field_height: float = float(constants.WINDOW_SIZE[1])
    ) -> Projectile:
        """
        Fire a projectile downwards from the bottom-center.

        Whether the enemy may fire at all is decided by the engine.
        """
        return Projectile(
            x=self.center_x - constants.PROJECTILE_WIDTH / 2,
            y=self.y + self.height + 5,
            direction=Direction.DOWN,
            field_height=field_height,
        )


@dataclass
class Player:  # pylint: disable=too-many-instance-attributes
    """
    Player ship entity
    """

    field_width: float = float(constants.WINDOW_SIZE[0])
    field_height: float = float(constants.WINDOW_SIZE[1])
    speed: float = constants.PLAYER_SPEED
    cooldown_frames: int = constants.PLAYER_COOLDOWN_FRAMES
    width: int = constants.PLAYER_WIDTH
    height: int = constants.PLAYER_HEIGHT

    x: float = field(init=False)
    y: float = field(init=False)
    lives: int = field(init=False)
    cooldown: int = field(init=False)
    moving_left: bool = field(init=False)
    moving_right: bool = field(init=False)
    alive: bool = field(init=False)

    def __post_init__(self):
        self.reset()

    @property
    def bounds(self) -> pygame.Rect:
        return pygame.Rect(int(self.x), int(self.y), self.width, self.height)

    @property
    def center_x(self) -> float:
        return self.x + self.width / 2

    @property
    def can_shoot(self) -> bool:
        return self.cooldown <= 0

    def reset(self) -> None:
        """Back to the start position with full lives, for a new game."""
        self.x = self.field_width / 2 - self.width / 2
        self.y = self.field_height - constants.PLAYER_BOTTOM_OFFSET
        self.lives = constants.PLAYER_LIVES
        self.cooldown = 0
        self.moving_left = False
        self.moving_right = False
        self.alive = True

    def update(self) -> None:
        """
        Move by the current intents and tick the fire cooldown.
        """
        if self.moving_left and self.x > 0:
            self.x -= self.speed
        if self.moving_right and self.x + self.width < self.field_width:
            self.x += self.speed

        self.x = clamp(self.x, 0.0, self.field_width - self.width)

        if self.cooldown > 0:
            self.cooldown -= 1

    def shoot(self) -> Projectile | None:
        """
        Fire a projectile upwards if the cooldown allows it.

        :return: The new projectile, or None while cooling down.
        :rtype: Projectile | None
        """
        if not self.can_shoot:
            return None

        self.cooldown = self.cooldown_frames
        return Projectile(
            x=self.center_x - constants.PROJECTILE_WIDTH / 2,
            y=self.y - 15,
            direction=Direction.UP,
            field_height=self.field_height,
        )

    def lose_life(self) -> None:
        self.lives -= 1
        if self.lives <= 0:
            self.alive = False
