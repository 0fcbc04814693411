"""
Session state and wave spawning.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field

from wave_defender.config import GameConfig
from wave_defender.engine.input import Intent
from wave_defender.entities import Enemy, Player, Projectile
from wave_defender.utils import logger


@dataclass
class World:
    """
    Everything one play session owns.
    """

    player: Player | None = None
    enemies: list[Enemy] = field(default_factory=list)
    projectiles: list[Projectile] = field(default_factory=list)
    score: int = 0
    wave: int = 0
    base_speed: float = 1.0

    def alive_enemies(self) -> list[Enemy]:
        return [e for e in self.enemies if e.alive]


@dataclass
class TickContext:  # pylint: disable=too-many-instance-attributes
    """
    Per-tick data handed to every system.
    """

    world: World
    intent: Intent
    config: GameConfig
    rng: random.Random

    defeated: bool = False
    kills: int = 0
    hits_taken: int = 0
    shots_fired: int = 0

    @property
    def player(self) -> Player:
        player = self.world.player
        if player is None:
            raise RuntimeError("No player while a game is running")
        return player


def enemy_kind_for_row(row: int) -> int:
    """Row 0 is kind 0, rows 1-2 kind 1, everything below kind 2."""
    if row == 0:
        return 0
    if row <= 2:
        return 1
    return 2


def wave_columns(wave: int, config: GameConfig) -> int:
    """One extra column per wave, capped."""
    return min(config.base_columns + wave - 1, config.max_columns)


def spawn_wave(world: World, config: GameConfig) -> None:
    """
    Replace the formation with the next wave.

    Stray projectiles are cleared too, so a wave starts with nothing in
    flight.

    :param world: Session to spawn into.
    :type world: World

    :param config: Grid geometry and field size.
    :type config: GameConfig
    """
    world.wave += 1
    world.enemies.clear()
    world.projectiles.clear()

    cols = wave_columns(world.wave, config)
    total_width = cols * config.spacing_x
    # truncate toward zero when the grid is wider than the field
    start_x = int((config.width - total_width) / 2) + 10
    start_y = config.top_offset

    for row in range(config.rows):
        kind = enemy_kind_for_row(row)
        for col in range(cols):
            world.enemies.append(
                Enemy(
                    x=float(start_x + col * config.spacing_x),
                    y=float(start_y + row * config.spacing_y),
                    kind=kind,
                    velocity=world.base_speed,
                )
            )

    logger.debug(
        f"Wave {world.wave}: {cols}x{config.rows} enemies "
        f"at speed {world.base_speed:.2f}"
    )
