"""
Wave Defender application: pygame window, keyboard and frame loop.
"""

from __future__ import annotations

import pygame

from wave_defender.config import GameConfig
from wave_defender.engine import Action, GameEngine, GameState, InputState
from wave_defender.scenes.renderer import Renderer
from wave_defender.utils import configure_logging, logger

KEY_BINDINGS: dict[int, Action] = {
    pygame.K_LEFT: Action.MOVE_LEFT,
    pygame.K_a: Action.MOVE_LEFT,
    pygame.K_RIGHT: Action.MOVE_RIGHT,
    pygame.K_d: Action.MOVE_RIGHT,
    pygame.K_SPACE: Action.FIRE,
    pygame.K_RETURN: Action.CONFIRM,
    pygame.K_KP_ENTER: Action.CONFIRM,
    pygame.K_ESCAPE: Action.CANCEL,
}


def set_screen(caption: str, width: int, height: int) -> pygame.Surface:
    """
    Set the screen

    :param caption: Caption of the screen
    :type caption: str

    :param width: Width of the screen
    :type width: int

    :param height: Height of the screen
    :type height: int

    :return: pygame.Surface
    """
    screen = pygame.display.set_mode((width, height))
    pygame.display.set_caption(caption)
    return screen


class WaveDefenderApp:
    """
    Wires keyboard, engine and renderer together, one tick per frame.
    """

    def __init__(self, config: GameConfig | None = None):
        """
        :param config: Game configuration.
        :type config: GameConfig | None
        """
        self.config = config or GameConfig()
        self.engine = GameEngine(self.config)
        self.input = InputState()
        self.renderer: Renderer | None = None
        self._screen: pygame.Surface | None = None
        self._clock: pygame.time.Clock | None = None
        self._carry_on = True

    @property
    def running(self) -> bool:
        return self._carry_on

    def handle_event(self, event: pygame.event.Event) -> None:
        """
        Translate one pygame event into input state.

        :param event: The event to handle.
        :type event: pygame.event.Event
        """
        if event.type == pygame.QUIT:
            logger.debug("Quitting the game")
            self._carry_on = False
        elif event.type == pygame.KEYDOWN:
            action = KEY_BINDINGS.get(event.key)
            # ESC outside of a game closes the window
            if (
                action is Action.CANCEL
                and self.engine.state is not GameState.PLAYING
            ):
                logger.debug("Quitting the game")
                self._carry_on = False
                return
            if action is not None:
                self.input.press(action)
        elif event.type == pygame.KEYUP:
            action = KEY_BINDINGS.get(event.key)
            if action is not None:
                self.input.release(action)
        elif event.type == pygame.WINDOWFOCUSLOST:
            self.input.clear()

    def handle_events(self) -> None:
        for event in pygame.event.get():
            self.handle_event(event)

    def handle_game_logic(self) -> None:
        """Advance the engine by one tick."""
        self.engine.update(self.input)

    def draw_stuff(self) -> None:
        self.renderer.render(self._screen, self.engine)
        pygame.display.flip()

    def run(self) -> None:
        """
        Run the game until the window closes.
        """
        logger.info(f"Starting {self.config.title}...")
        logger.info(self.config.to_dict())

        pygame.init()
        try:
            self._screen = set_screen(
                self.config.title, self.config.width, self.config.height
            )
            self._clock = pygame.time.Clock()
            self.renderer = Renderer()

            while self._carry_on:
                self._clock.tick(self.config.fps)
                self.handle_events()
                self.handle_game_logic()
                if self._carry_on:
                    self.draw_stuff()
        finally:
            pygame.quit()

        logger.info(f"Bye. High score this session: {self.engine.high_score}")


def run(settings: dict | None = None):
    """
    Main entry point for Wave Defender.

    :param settings: Optional settings overriding the defaults.
    :type settings: dict | None
    """
    config = GameConfig.from_dict(settings or {})
    configure_logging(config.log_level)
    WaveDefenderApp(config).run()


if __name__ == "__main__":
    run()
