"""
Minimal main application for Power Pong.
"""

from __future__ import annotations

from dataclasses import dataclass

import pygame
from mini_arcade_core.utils import logger

from power_pong.constants import FPS, WINDOW_SIZE
from power_pong.render import Fonts, draw_state
from power_pong.scenes.pong.models import (
    MovePaddle,
    PointerClick,
    PongEvent,
    SetPowerUpIntent,
    Tick,
    TogglePause,
)
from power_pong.scenes.pong.scene import PongScene


@dataclass
class GameConfig:
    """
    Settings for the interactive shell.

    :ivar fps (int): Simulation ticks per second.
    :ivar window_size (tuple[int, int]): Window size in pixels.
    :ivar title (str): Window title.
    """

    fps: int = FPS
    window_size: tuple[int, int] = WINDOW_SIZE
    title: str = "Power Pong"


KEY_DOWN_EVENTS = {
    pygame.K_UP: lambda: MovePaddle(-1),
    pygame.K_DOWN: lambda: MovePaddle(1),
    pygame.K_SPACE: lambda: SetPowerUpIntent(True),
    pygame.K_ESCAPE: TogglePause,
}

KEY_UP_EVENTS = {
    pygame.K_UP: lambda: MovePaddle(0),
    pygame.K_DOWN: lambda: MovePaddle(0),
    pygame.K_SPACE: lambda: SetPowerUpIntent(False),
}


def translate_event(event: pygame.event.Event) -> PongEvent | None:
    """
    Map a pygame input event to a game event.

    :param event: Raw pygame event.
    :type event: pygame.event.Event

    :return: The game event, or None for input the game ignores.
    :rtype: PongEvent | None
    """
    if event.type == pygame.KEYDOWN and event.key in KEY_DOWN_EVENTS:
        return KEY_DOWN_EVENTS[event.key]()
    if event.type == pygame.KEYUP and event.key in KEY_UP_EVENTS:
        return KEY_UP_EVENTS[event.key]()
    if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
        x, y = event.pos
        return PointerClick(x, y)
    return None


def run(game_config: GameConfig | None = None):
    """
    Main entry point for Power Pong.

    - Opens the window and loads the default font.
    - Feeds keyboard and mouse input, then one tick, into the scene each frame.
    - Draws the resulting snapshot.
    """
    config = game_config or GameConfig()
    pygame.init()
    try:
        screen = pygame.display.set_mode(config.window_size)
        pygame.display.set_caption(config.title)
        clock = pygame.time.Clock()
        fonts = Fonts.load()
        scene = PongScene()

        logger.info("Starting Power Pong...")
        running = True
        while running:
            for raw in pygame.event.get():
                if raw.type == pygame.QUIT:
                    running = False
                    continue
                event = translate_event(raw)
                if event is not None:
                    scene.handle(event)

            scene.handle(Tick(scene.ticks))
            draw_state(screen, fonts, scene.state)
            pygame.display.flip()
            clock.tick(config.fps)
    finally:
        pygame.quit()
        logger.info("Power Pong closed")


if __name__ == "__main__":
    run()
