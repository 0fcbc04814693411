"""
Wave Defender renderer
"""

from __future__ import annotations

import pygame

from wave_defender.constants import ENEMY_POINTS
from wave_defender.engine import GameEngine, GameState

Color = tuple[int, int, int]

BACKGROUND: Color = (10, 10, 30)
PLAYER_COLOR: Color = (50, 255, 50)
PLAYER_HIGHLIGHT: Color = (150, 255, 150)
PLAYER_SHOT: Color = (50, 255, 50)
ENEMY_SHOT: Color = (255, 80, 80)
HUD_TEXT: Color = (220, 220, 220)
TITLE: Color = (50, 255, 50)
SUBTITLE: Color = (180, 180, 180)
DIVIDER: Color = (50, 50, 80)
LIVES_TEXT: Color = (255, 80, 80)
GAME_OVER_TEXT: Color = (255, 60, 60)

# by enemy kind
ENEMY_COLORS: tuple[Color, ...] = (
    (255, 50, 255),
    (50, 220, 255),
    (255, 255, 50),
)


def brighter(color: Color, factor: float = 1.4) -> Color:
    return tuple(min(255, int(c * factor) + 20) for c in color)


class Fonts:
    """
    Default-font instances shared by all drawables.
    """

    def __init__(self):
        if not pygame.font.get_init():
            pygame.font.init()
        self.title = pygame.font.Font(None, 64)
        self.game_over = pygame.font.Font(None, 56)
        self.score = pygame.font.Font(None, 34)
        self.subtitle = pygame.font.Font(None, 26)
        self.hud = pygame.font.Font(None, 24)
        self.small = pygame.font.Font(None, 20)


def draw_text(
    surface: pygame.Surface,
    font: pygame.font.Font,
    text: str,
    color: Color,
    pos: tuple[int, int],
) -> pygame.Rect:
    return surface.blit(font.render(text, True, color), pos)


def draw_centered(
    surface: pygame.Surface,
    font: pygame.font.Font,
    text: str,
    color: Color,
    y: int,
) -> pygame.Rect:
    """
    Draw text centered horizontally on the surface.

    :param y: Top edge of the text.
    :type y: int

    :return: The area that was drawn.
    :rtype: pygame.Rect
    """
    image = font.render(text, True, color)
    x = (surface.get_width() - image.get_width()) // 2
    return surface.blit(image, (x, y))


def draw_enemy_shape(surface: pygame.Surface, x: int, y: int, kind: int):
    """
    Draw one enemy out of rectangles.

    Kind 0 has a round head with tentacles, kind 1 wings, kind 2 is compact.
    """
    color = ENEMY_COLORS[kind]
    rect = pygame.draw.rect
    if kind == 0:
        rect(surface, color, (x + 4, y + 2, 28, 18), border_radius=4)
        rect(surface, color, (x + 2, y + 12, 6, 12))
        rect(surface, color, (x + 28, y + 12, 6, 12))
        rect(surface, color, (x + 10, y + 18, 4, 8))
        rect(surface, color, (x + 22, y + 18, 4, 8))
    elif kind == 1:
        rect(surface, color, (x + 8, y + 2, 20, 16))
        rect(surface, color, (x, y + 6, 36, 10))
        rect(surface, color, (x + 4, y + 18, 8, 6))
        rect(surface, color, (x + 24, y + 18, 8, 6))
    else:
        rect(surface, color, (x + 4, y + 4, 28, 18))
        rect(surface, color, (x, y + 8, 36, 10))
        rect(surface, color, (x + 8, y + 20, 6, 6))
        rect(surface, color, (x + 22, y + 20, 6, 6))

    # eyes
    rect(surface, BACKGROUND, (x + 11, y + 8, 4, 4))
    rect(surface, BACKGROUND, (x + 21, y + 8, 4, 4))


class Drawable:
    """
    Paints part of a frame from engine state.
    """

    def draw(
        self, surface: pygame.Surface, engine: GameEngine, fonts: Fonts
    ):
        raise NotImplementedError("Subclasses must implement this method")


class DrawPlayer(Drawable):
    """
    Drawable Player
    """

    def draw(self, surface, engine, fonts):
        player = engine.player
        if player is None or not player.alive:
            return

        px, py = int(player.x), int(player.y)
        pw, ph = player.width, player.height
        mid = px + pw // 2

        pygame.draw.rect(
            surface, PLAYER_COLOR, (px + 5, py + 8, pw - 10, ph - 8)
        )
        pygame.draw.polygon(
            surface,
            PLAYER_COLOR,
            [(mid - 6, py + 8), (mid, py), (mid + 6, py + 8)],
        )
        # wings
        pygame.draw.rect(surface, PLAYER_COLOR, (px, py + 15, 8, ph - 15))
        pygame.draw.rect(
            surface, PLAYER_COLOR, (px + pw - 8, py + 15, 8, ph - 15)
        )
        pygame.draw.rect(
            surface, PLAYER_HIGHLIGHT, (mid - 2, py + 10, 4, ph - 14)
        )


class DrawEnemies(Drawable):
    """
    Drawable Enemies
    """

    def draw(self, surface, engine, fonts):
        for enemy in engine.enemies:
            if not enemy.alive:
                continue
            draw_enemy_shape(
                surface, int(enemy.x), int(enemy.y), enemy.kind
            )


class DrawProjectiles(Drawable):
    """
    Drawable Projectiles
    """

    def draw(self, surface, engine, fonts):
        for projectile in engine.projectiles:
            if not projectile.alive:
                continue
            color = PLAYER_SHOT if projectile.is_player_owned else ENEMY_SHOT
            x, y = int(projectile.x), int(projectile.y)
            w, h = projectile.width, projectile.height
            pygame.draw.rect(surface, color, (x, y, w, h))
            pygame.draw.rect(
                surface, brighter(color), (x + 1, y + 2, w - 2, h - 4)
            )


class DrawHud(Drawable):
    """
    Score on the left, wave in the middle, lives on the right.
    """

    def draw(self, surface, engine, fonts):
        width, height = surface.get_size()

        draw_text(
            surface, fonts.hud, f"SCORE: {engine.score}", HUD_TEXT, (15, 10)
        )
        draw_centered(surface, fonts.hud, f"WAVE {engine.wave}", HUD_TEXT, 10)

        if engine.player is not None:
            lives = max(engine.player.lives, 0)
            image = fonts.hud.render(f"LIVES: {lives}", True, LIVES_TEXT)
            surface.blit(image, (width - image.get_width() - 15, 10))

        pygame.draw.line(surface, DIVIDER, (0, 35), (width, 35))
        pygame.draw.line(
            surface, DIVIDER, (0, height - 70), (width, height - 70)
        )


class DrawMenu(Drawable):
    """
    Title screen with controls, high score and the enemy point table.
    """

    legend = (
        "ARROWS / A,D  =  Move",
        "SPACE         =  Fire",
        "ESC           =  Quit",
    )

    def draw(self, surface, engine, fonts):
        width, height = surface.get_size()

        draw_centered(
            surface, fonts.title, "WAVE DEFENDER", TITLE, height // 3
        )
        draw_centered(
            surface,
            fonts.subtitle,
            "Press ENTER to start",
            SUBTITLE,
            height // 2,
        )

        y = height // 2 + 50
        for line in self.legend:
            draw_centered(surface, fonts.small, line, SUBTITLE, y)
            y += 25

        if engine.high_score > 0:
            draw_centered(
                surface,
                fonts.hud,
                f"High score: {engine.high_score}",
                TITLE,
                height - 60,
            )

        start_y = height // 2 + 140
        for kind, points in sorted(ENEMY_POINTS.items()):
            row_y = start_y + kind * 35
            draw_enemy_shape(surface, width // 2 - 60, row_y, kind)
            draw_text(
                surface,
                fonts.small,
                f"= {points} PTS",
                SUBTITLE,
                (width // 2 - 15, row_y + 8),
            )


class DrawGameOver(Drawable):
    """
    Overlay with the final result.
    """

    def draw(self, surface, engine, fonts):
        width, height = surface.get_size()

        overlay = pygame.Surface((width, height), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, 180))
        surface.blit(overlay, (0, 0))

        top = height // 3
        draw_centered(
            surface, fonts.game_over, "GAME OVER", GAME_OVER_TEXT, top
        )
        draw_centered(
            surface, fonts.score, f"Score: {engine.score}", HUD_TEXT, top + 55
        )
        draw_centered(
            surface,
            fonts.subtitle,
            f"Wave reached: {engine.wave}",
            HUD_TEXT,
            top + 90,
        )

        if engine.is_new_high_score:
            text, color = "*** NEW HIGH SCORE! ***", TITLE
        else:
            text, color = f"High score: {engine.high_score}", SUBTITLE
        draw_centered(surface, fonts.hud, text, color, height // 2 + 30)

        draw_centered(
            surface,
            fonts.subtitle,
            "Press ENTER to restart",
            SUBTITLE,
            height - 100,
        )


class Renderer:
    """
    Paints a whole frame for the engine's current phase.

    Only reads from the engine.
    """

    def __init__(self):
        self.fonts = Fonts()
        playfield: list[Drawable] = [
            DrawHud(),
            DrawPlayer(),
            DrawEnemies(),
            DrawProjectiles(),
        ]
        self.screens: dict[GameState, list[Drawable]] = {
            GameState.MENU: [DrawMenu()],
            GameState.PLAYING: playfield,
            GameState.GAME_OVER: playfield + [DrawGameOver()],
        }

    def render(self, surface: pygame.Surface, engine: GameEngine) -> None:
        surface.fill(BACKGROUND)
        for drawable in self.screens[engine.state]:
            drawable.draw(surface, engine, self.fonts)
