"""
Entities package for Power Pong.
This package contains all entity definitions used in the game.
"""

from __future__ import annotations

from .ball import Ball, PowerUpPickup
from .paddle import Paddle
from .power_up import ActivePowerUp, PowerUpKind
from .velocity import Velocity

__all__ = [
    "ActivePowerUp",
    "Ball",
    "Paddle",
    "PowerUpKind",
    "PowerUpPickup",
    "Velocity",
]
