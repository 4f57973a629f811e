"""
Ball entities for the Pong scene.
"""

from __future__ import annotations

from dataclasses import dataclass

from mini_arcade_core.spaces.d2.collision2d import RectCollider
from mini_arcade_core.spaces.geometry.bounds import Position2D, Size2D

from power_pong.constants import BASE_BALL_SIZE, BASE_PICKUP_SIZE
from power_pong.entities.velocity import Velocity


@dataclass(frozen=True)
class Ball:
    """
    The ball in play, also used for the AI's hidden prediction ball.

    :ivar x (float): Position of the ball.
    :ivar y (float): Position of the ball.
    :ivar size (float): Scale factor over the base ball size.
    :ivar velocity (Velocity): Velocity of the ball.
    """

    x: float
    y: float
    velocity: Velocity
    size: float = 1.0

    @property
    def radius(self) -> float:
        """Contact radius in board units."""
        return self.size * BASE_BALL_SIZE

    @property
    def collider(self) -> RectCollider:
        """Bounding box of the ball, centred on its position."""
        r = self.radius
        return RectCollider(Position2D(self.x - r, self.y - r), Size2D(2 * r, 2 * r))


@dataclass(frozen=True)
class PowerUpPickup:
    """
    The power-up box bouncing around the middle of the board.

    :ivar x (float): Position of the box.
    :ivar y (float): Position of the box.
    :ivar velocity (Velocity): Velocity of the box.
    :ivar size (float): Scale factor over the base box size.
    :ivar is_active (bool): Whether the box is visible and collectable.
    """

    x: float
    y: float
    velocity: Velocity
    size: float = 1.0
    is_active: bool = False

    @property
    def extent(self) -> float:
        """Side of the collection box."""
        return self.size * BASE_PICKUP_SIZE

    @property
    def collider(self) -> RectCollider:
        """Collection box, anchored at its top-left corner."""
        return RectCollider(
            Position2D(self.x, self.y), Size2D(self.extent, self.extent)
        )
