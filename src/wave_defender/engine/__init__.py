"""
Simulation engine.
"""

from __future__ import annotations

from wave_defender.engine.collision import collides
from wave_defender.engine.game import GameEngine, IntentSource
from wave_defender.engine.input import Action, InputState, Intent
from wave_defender.engine.state import GameState
from wave_defender.engine.systems import build_pipeline, default_systems
from wave_defender.engine.world import TickContext, World, spawn_wave

__all__ = [
    "Action",
    "GameEngine",
    "GameState",
    "InputState",
    "Intent",
    "IntentSource",
    "TickContext",
    "World",
    "build_pipeline",
    "collides",
    "default_systems",
    "spawn_wave",
]
