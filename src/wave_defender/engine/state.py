"""
Game phases.
"""

from __future__ import annotations

from enum import Enum


class GameState(str, Enum):
    """
    The phase the engine is in; exactly one is active at a time.
    """

    MENU = "menu"
    PLAYING = "playing"
    GAME_OVER = "game_over"
