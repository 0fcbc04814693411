"""
Drawing for the game's screens.
"""

from wave_defender.scenes.renderer import Renderer

__all__ = ["Renderer"]
