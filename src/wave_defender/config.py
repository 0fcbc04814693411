"""
Game configuration.
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass, fields
from typing import Any

from wave_defender import constants


@dataclass(frozen=True)
class GameConfig:  # pylint: disable=too-many-instance-attributes
    """
    Tunables for the simulation and the window around it.

    Defaults mirror :mod:`wave_defender.constants`. Use :meth:`from_dict`
    to build one from plain settings data.
    """

    width: int = constants.WINDOW_SIZE[0]
    height: int = constants.WINDOW_SIZE[1]
    fps: int = constants.FPS
    title: str = constants.WINDOW_TITLE

    initial_enemy_speed: float = constants.INITIAL_ENEMY_SPEED
    speed_increment: float = constants.ENEMY_SPEED_INCREMENT
    drop_distance: float = constants.ENEMY_DROP_DISTANCE
    enemy_fire_chance: float = constants.ENEMY_FIRE_CHANCE
    column_tolerance: float = constants.ENEMY_COLUMN_TOLERANCE

    base_columns: int = constants.WAVE_BASE_COLUMNS
    max_columns: int = constants.WAVE_MAX_COLUMNS
    rows: int = constants.WAVE_ROWS
    spacing_x: int = constants.WAVE_SPACING_X
    spacing_y: int = constants.WAVE_SPACING_Y
    top_offset: int = constants.WAVE_TOP_OFFSET
    invasion_margin: int = constants.INVASION_MARGIN

    log_level: str = "INFO"

    def __post_init__(self):
        for name in ("width", "height", "fps", "rows", "base_columns"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive")
        if self.max_columns < self.base_columns:
            raise ValueError("max_columns must be >= base_columns")
        if not 0.0 <= self.enemy_fire_chance <= 1.0:
            raise ValueError("enemy_fire_chance must be within [0, 1]")
        if not isinstance(
            logging.getLevelName(self.log_level.upper()), int
        ):
            raise ValueError(f"Unknown log level: {self.log_level!r}")

    @property
    def size(self) -> tuple[int, int]:
        """Field size as ``(width, height)``."""
        return self.width, self.height

    @property
    def invasion_line(self) -> float:
        """Y coordinate an enemy's bottom edge must not reach."""
        return self.height - self.invasion_margin

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> GameConfig:
        """
        Build a config from a settings dictionary.

        :param data: Settings; missing keys keep their defaults.
        :type data: dict[str, Any]

        :return: The config.
        :rtype: GameConfig

        :raises ValueError: On unknown keys or invalid values.
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"Unknown config keys: {', '.join(unknown)}")
        return cls(**data)

    def to_dict(self) -> dict[str, Any]:
        """Return the config as a plain dictionary."""
        return asdict(self)
