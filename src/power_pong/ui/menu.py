"""
Click-driven menus.

All three menus share one column of buttons; a click is mapped to the
button under it (1-based), that button is selected on a
``mini_arcade_core`` menu and its command runs on the state.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pygame
from mini_arcade_core.ui.menu import Menu, MenuItem, MenuStyle

from power_pong.constants import (
    BUTTON_BORDER,
    BUTTON_FILL,
    BUTTON_X_RANGE,
    BUTTON_Y_RANGES,
    DIM,
    HIGHLIGHT,
    MAX_X,
    MAX_Y,
    WHITE,
)
from power_pong.scenes.commands import MenuContext

if TYPE_CHECKING:
    from power_pong.scenes.pong.models import GameState, PointerClick


def button_at(x: float, y: float) -> int:
    """
    Number of the button under a click.

    :param x: Click x.
    :type x: float

    :param y: Click y.
    :type y: float

    :return: 1, 2 or 3, or 0 when no button was hit.
    :rtype: int
    """
    left, right = BUTTON_X_RANGE
    if not left < x < right:
        return 0
    for number, (top, bottom) in enumerate(BUTTON_Y_RANGES, start=1):
        if top < y < bottom:
            return number
    return 0


def button_rect(number: int) -> pygame.Rect:
    """Screen rectangle of button ``number`` (1-based)."""
    left, right = BUTTON_X_RANGE
    top, bottom = BUTTON_Y_RANGES[number - 1]
    return pygame.Rect(left, top, right - left, bottom - top)


class BaseMenu:
    """Menu with up to three buttons."""

    @property
    def menu_title(self) -> str | None:
        """Title drawn above the buttons."""
        return None

    def menu_style(self) -> MenuStyle:
        """Colours for the buttons and their labels."""
        return MenuStyle(
            button_enabled=True,
            button_fill=BUTTON_FILL,
            button_border=BUTTON_BORDER,
            button_selected_border=HIGHLIGHT,
            normal=DIM,
            selected=WHITE,
            title_color=WHITE,
            overlay_color=(0, 0, 0, 180),
        )

    def menu_items(self) -> list[MenuItem]:
        """Buttons, top to bottom."""
        raise NotImplementedError

    def build_menu(self, on_select=None) -> Menu:
        """
        The ``mini_arcade_core`` menu for this screen.

        :param on_select: Called with the item picked by ``Menu.select``.
        :type on_select: Callable[[MenuItem], None] | None

        :return: The menu.
        :rtype: Menu
        """
        return Menu(
            self.menu_items(),
            viewport=(MAX_X, MAX_Y),
            title=self.menu_title,
            style=self.menu_style(),
            on_select=on_select,
        )

    def handle_click(self, state: GameState, click: PointerClick) -> GameState:
        """
        Run the command of the clicked button.

        A click that misses every button leaves the state as it is.
        """
        picked: list[MenuItem] = []
        menu = self.build_menu(on_select=picked.append)
        number = button_at(click.x, click.y)
        if not 1 <= number <= len(menu.items):
            return state
        menu.set_selected_index(number - 1)
        menu.select()
        command = picked[0].command_factory()
        return command.execute(MenuContext.for_click(state, click))
