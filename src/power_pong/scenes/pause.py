"""
Pause menu for Power Pong.
Provides buttons to continue or abandon the game.
"""

from __future__ import annotations

from mini_arcade_core.ui.menu import MenuItem

from power_pong.scenes.commands import ContinueCommand, ResetGameCommand
from power_pong.ui.menu import BaseMenu


class PauseScene(BaseMenu):
    """
    Pause menu with options to continue or return to the start menu.
    """

    @property
    def menu_title(self) -> str | None:
        return "PAUSED"

    def menu_items(self):
        return [
            MenuItem("continue", "Continue", ContinueCommand),
            MenuItem("main_menu", "Main Menu", ResetGameCommand),
        ]
