"""
Start menu for Power Pong.
"""

from __future__ import annotations

from mini_arcade_core.ui.menu import MenuItem

from power_pong.difficulty import DIFFICULTY_LABELS
from power_pong.scenes.commands import StartGameCommand
from power_pong.ui.menu import BaseMenu


class MenuScene(BaseMenu):
    """
    Start menu: each button starts a game at one difficulty.

    Options:
        [1] Easy
        [2] Normal
        [3] Hard
    """

    @property
    def menu_title(self) -> str | None:
        return "Power Pong"

    def menu_items(self):
        return [
            MenuItem(
                label,
                label.upper(),
                lambda level=level: StartGameCommand(level),
            )
            for level, label in sorted(DIFFICULTY_LABELS.items())
        ]
