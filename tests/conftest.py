"""
Shared fixtures for the Wave Defender tests.
"""

from __future__ import annotations

import os
import random

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest  # noqa: E402

from wave_defender.config import GameConfig  # noqa: E402
from wave_defender.engine import GameEngine, InputState, Intent  # noqa: E402
from wave_defender.engine.world import TickContext, World  # noqa: E402


class FixedRandom(random.Random):
    """Random source whose ``random()`` always returns the same value."""

    def __init__(self, value: float):
        super().__init__(0)
        self.value = value

    def random(self) -> float:
        return self.value


NEVER_FIRE = 1.0
ALWAYS_FIRE = 0.0


@pytest.fixture
def config():
    return GameConfig()


@pytest.fixture
def engine(config):
    """Engine whose enemies never fire."""
    return GameEngine(config, rng=FixedRandom(NEVER_FIRE))


@pytest.fixture
def playing_engine(engine):
    engine.update(Intent(confirm=True))
    return engine


@pytest.fixture
def input_state():
    return InputState()


@pytest.fixture
def run_ticks():
    def _run(engine: GameEngine, intent: Intent, n: int = 1):
        for _ in range(n):
            engine.update(intent)

    return _run


@pytest.fixture
def make_ctx(config):
    def _make(
        world: World,
        intent: Intent | None = None,
        rng_value: float = NEVER_FIRE,
    ) -> TickContext:
        return TickContext(
            world=world,
            intent=intent or Intent(),
            config=config,
            rng=FixedRandom(rng_value),
        )

    return _make
