"""
Menu building blocks shared by the Power Pong scenes.
"""

from __future__ import annotations

from .menu import BaseMenu, MenuItem, button_at, button_rect

__all__ = [
    "BaseMenu",
    "MenuItem",
    "button_at",
    "button_rect",
]
