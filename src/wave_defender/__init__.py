"""Wave Defender - a fixed-tick arcade shooter simulation."""

from wave_defender.config import GameConfig
from wave_defender.engine import GameEngine, GameState, InputState, Intent

__all__ = ["GameConfig", "GameEngine", "GameState", "InputState", "Intent"]

__version__ = "0.1.0"
