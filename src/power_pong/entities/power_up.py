"""
Power-up kinds and running effects.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class PowerUpKind(Enum):
    """Power-ups a side can hold. ``NONE`` means empty-handed."""

    NONE = 0
    SPEED = 1
    FAST_BALL = 2
    RETURN = 3
    EXPAND = 4


@dataclass(frozen=True)
class ActivePowerUp:
    """
    A power-up whose effect is running.

    :ivar kind (PowerUpKind): Which effect.
    :ivar ticks_remaining (int): Ticks left before the effect ends.
    """

    kind: PowerUpKind
    ticks_remaining: int

    def tick(self) -> ActivePowerUp | None:
        """
        One tick later.

        :return: The effect with one tick less, or None once it runs out.
        :rtype: ActivePowerUp | None
        """
        remaining = self.ticks_remaining - 1
        if remaining <= 0:
            return None
        return ActivePowerUp(self.kind, remaining)
