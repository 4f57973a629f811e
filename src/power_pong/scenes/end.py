"""
End-of-game menu for Power Pong.
"""

from __future__ import annotations

from mini_arcade_core.ui.menu import MenuItem

from power_pong.scenes.commands import ResetGameCommand
from power_pong.ui.menu import BaseMenu


class EndScene(BaseMenu):
    """End menu; the only way out of a finished game is a new one."""

    @property
    def menu_title(self) -> str | None:
        return "GAME OVER"

    def menu_items(self):
        return [MenuItem("play_again", "Play Again", ResetGameCommand)]
