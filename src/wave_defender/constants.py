"""
Constants for the game.
"""

from __future__ import annotations

FPS = 60
WINDOW_SIZE = (700, 650)
WINDOW_TITLE = "Wave Defender"

# Player ship
PLAYER_WIDTH = 50
PLAYER_HEIGHT = 30
PLAYER_SPEED = 5.0
PLAYER_LIVES = 3
PLAYER_COOLDOWN_FRAMES = 15
PLAYER_BOTTOM_OFFSET = 60

# Enemies
ENEMY_WIDTH = 36
ENEMY_HEIGHT = 28
ENEMY_POINTS = {0: 30, 1: 20, 2: 10}

# Projectiles
PROJECTILE_WIDTH = 6
PROJECTILE_HEIGHT = 14
PROJECTILE_SPEED = 7.0
PROJECTILE_TOP_MARGIN = 20
PROJECTILE_BOTTOM_MARGIN = 150

# Formation / waves
INITIAL_ENEMY_SPEED = 1.0
ENEMY_SPEED_INCREMENT = 0.15
ENEMY_DROP_DISTANCE = 20.0
ENEMY_FIRE_CHANCE = 0.002
ENEMY_COLUMN_TOLERANCE = 10.0
WAVE_BASE_COLUMNS = 6
WAVE_MAX_COLUMNS = 10
WAVE_ROWS = 4
WAVE_SPACING_X = 50
WAVE_SPACING_Y = 42
WAVE_TOP_OFFSET = 60
INVASION_MARGIN = 80
