"""
Paddle entity for Power Pong.
"""

from __future__ import annotations

from dataclasses import dataclass

from power_pong.constants import BASE_PADDLE_HEIGHT, MAX_Y


@dataclass(frozen=True)
class Paddle:
    """
    Paddle entity for the Pong scene.

    :ivar x (float): Fixed x position of the paddle's side.
    :ivar y (float): Top edge of the paddle.
    :ivar speed (float): Movement per tick.
    :ivar size (float): Height scale factor, at least 1.
    :ivar direction (int): Movement intent, -1 (up), 0 or +1 (down).
    """

    x: float
    y: float
    speed: float = 5.0
    size: float = 1.0
    direction: int = 0

    @property
    def height(self) -> float:
        """Paddle height in board units."""
        return self.size * BASE_PADDLE_HEIGHT

    @property
    def max_y(self) -> float:
        """Largest y that keeps the whole paddle on the board."""
        return MAX_Y - self.height

    @property
    def center(self) -> float:
        """Vertical centre of the paddle."""
        return self.y + self.height / 2
