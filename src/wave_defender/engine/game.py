"""
Wave Defender engine: the game-state machine.
"""

from __future__ import annotations

import random
from typing import Protocol

from mini_arcade_core.scenes.systems.system_pipeline import SystemPipeline

from wave_defender.config import GameConfig
from wave_defender.engine.input import Intent
from wave_defender.engine.state import GameState
from wave_defender.engine.systems import build_pipeline
from wave_defender.engine.world import TickContext, World, spawn_wave
from wave_defender.entities import Enemy, Player, Projectile
from wave_defender.utils import logger


class IntentSource(Protocol):
    """Anything that hands out one stable :class:`Intent` per tick."""

    def snapshot(self) -> Intent: ...


class GameEngine:
    """
    Owns the session and advances it one tick per :meth:`update`.

    Rendering reads the public properties; nothing outside the engine
    mutates the entities.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        rng: random.Random | None = None,
        pipeline: SystemPipeline[TickContext] | None = None,
    ):
        """
        :param config: Tunables; defaults to :class:`GameConfig`.
        :type config: GameConfig | None

        :param rng: Random source for enemy fire.
        :type rng: random.Random | None

        :param pipeline: Systems for the PLAYING phase.
        :type pipeline: SystemPipeline[TickContext] | None
        """
        self.config = config or GameConfig()
        self.rng = rng or random.Random()
        self.pipeline = pipeline or build_pipeline()

        self._world = World(base_speed=self.config.initial_enemy_speed)
        self._state = GameState.MENU
        self._high_score = 0
        self._new_high_score = False

    # --- read-only views -------------------------------------------------

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def score(self) -> int:
        return self._world.score

    @property
    def high_score(self) -> int:
        return self._high_score

    @property
    def is_new_high_score(self) -> bool:
        """True on GAME_OVER when the last game raised the high score."""
        return self._new_high_score

    @property
    def wave(self) -> int:
        return self._world.wave

    @property
    def base_speed(self) -> float:
        return self._world.base_speed

    @property
    def player(self) -> Player | None:
        return self._world.player

    @property
    def enemies(self) -> tuple[Enemy, ...]:
        return tuple(self._world.enemies)

    @property
    def projectiles(self) -> tuple[Projectile, ...]:
        return tuple(self._world.projectiles)

    @property
    def world(self) -> World:
        """
        The live session state.

        Meant for tools and tests that set up scenarios; renderers use the
        read-only views above.
        """
        return self._world

    # --- state machine ---------------------------------------------------

    def update(self, source: IntentSource | Intent) -> None:
        """
        Advance exactly one tick.

        :param source: An intent source (read once, consuming the confirm
            edge) or a ready-made :class:`Intent`.
        :type source: IntentSource | Intent
        """
        intent = source if isinstance(source, Intent) else source.snapshot()

        if self._state is GameState.MENU:
            self._update_menu(intent)
        elif self._state is GameState.PLAYING:
            self._update_playing(intent)
        elif self._state is GameState.GAME_OVER:
            self._update_game_over(intent)

    def _update_menu(self, intent: Intent) -> None:
        if intent.confirm:
            self.start_new_game()

    def _update_game_over(self, intent: Intent) -> None:
        if intent.confirm:
            self.start_new_game()

    def _update_playing(self, intent: Intent) -> None:
        if intent.cancel:
            logger.info("Game abandoned, back to menu.")
            self._state = GameState.MENU
            return

        ctx = TickContext(
            world=self._world,
            intent=intent,
            config=self.config,
            rng=self.rng,
        )
        self.pipeline.step(ctx)

        if ctx.defeated:
            self.end_game()

    def start_new_game(self) -> None:
        """Fresh player, score 0 and the first wave."""
        self._world = World(
            player=Player(
                field_width=float(self.config.width),
                field_height=float(self.config.height),
            ),
            base_speed=self.config.initial_enemy_speed,
        )
        self._new_high_score = False
        self._state = GameState.PLAYING
        spawn_wave(self._world, self.config)
        logger.info("New game started.")

    def end_game(self) -> None:
        """Commit the score and switch to GAME_OVER."""
        score = self._world.score
        if score > self._high_score:
            self._high_score = score
            self._new_high_score = True
        self._state = GameState.GAME_OVER
        logger.info(
            f"Game over: score {score}, wave {self._world.wave}, "
            f"high score {self._high_score}."
        )
