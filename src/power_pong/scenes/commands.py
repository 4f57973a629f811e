"""
Module defining menu commands for Power Pong.
"""

from __future__ import annotations

from dataclasses import dataclass

from mini_arcade_core.engine.commands import Command, CommandContext
from mini_arcade_core.utils import logger

from power_pong.difficulty import DIFFICULTY_LABELS
from power_pong.scenes.pong.models import INITIAL_STATE, GameState, PointerClick


@dataclass
class MenuContext(CommandContext):
    """
    Context for a command triggered from a menu button.

    The world is the current ``GameState``; commands return the next one
    instead of mutating it.

    :ivar click (PointerClick | None): The click that picked the button.
    """

    click: PointerClick | None = None

    @classmethod
    def for_click(cls, state: GameState, click: PointerClick) -> MenuContext:
        """
        Context for ``click`` on a menu shown over ``state``.

        :param state: Current game state.
        :type state: GameState

        :param click: The triggering click.
        :type click: PointerClick

        :return: Command context.
        :rtype: MenuContext
        """
        return cls(services=None, managers=None, world=state, click=click)


class StartGameCommand(Command):
    """Start a game at a chosen difficulty."""

    def __init__(self, difficulty: int):
        """
        :param difficulty: 1 (easy) to 3 (hard).
        :type difficulty: int
        """
        self.difficulty = difficulty

    def execute(self, context: MenuContext) -> GameState:
        click = context.click
        # the click position is the only entropy the game gets
        seed = int(click.x + click.y) if click is not None else 0
        label = DIFFICULTY_LABELS.get(self.difficulty, self.difficulty)
        logger.info(f"Starting game on {label} (seed {seed})")
        return context.world.with_meta(
            rand_seed=seed,
            difficulty=self.difficulty,
            has_started=True,
            is_paused=False,
        )


class ContinueCommand(Command):
    """
    Command to continue the game from pause.
    """

    def execute(self, context: MenuContext) -> GameState:
        logger.info("Resuming game from pause")
        return context.world.with_meta(is_paused=False)


class ResetGameCommand(Command):
    """
    Command to throw the current game away and return to the start menu.
    """

    def execute(self, context: MenuContext) -> GameState:
        logger.info("Resetting game")
        return INITIAL_STATE
