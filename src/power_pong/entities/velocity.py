"""
Polar velocity for balls in Power Pong.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from power_pong.utils import clamp

# Paddle deflection scales speed by abs(strength) / 2 + this, i.e. [0.9, 1.4]
DEFLECTION_BASE = 0.9


@dataclass(frozen=True)
class Velocity:
    """
    Velocity stored as magnitude and angle.

    The sign of the magnitude carries the horizontal direction, the angle
    (radians) stays small so that ``dx`` keeps the sign of ``magnitude``.

    :ivar magnitude (float): Signed speed in units per tick.
    :ivar angle (float): Angle in radians.
    """

    magnitude: float = 0.0
    angle: float = 0.0

    @property
    def dx(self) -> float:
        """Horizontal delta per tick."""
        return self.magnitude * math.cos(self.angle)

    @property
    def dy(self) -> float:
        """Vertical delta per tick."""
        return self.magnitude * math.sin(self.angle)

    @property
    def speed(self) -> float:
        """Unsigned speed."""
        return abs(self.magnitude)

    def scale(self, factor: float) -> Velocity:
        """Same angle, magnitude multiplied by ``factor``."""
        return Velocity(self.magnitude * factor, self.angle)

    def reflect_x(self) -> Velocity:
        """Bounce off a vertical surface: ``dx`` flips, ``dy`` is kept."""
        return Velocity(-self.magnitude, -self.angle)

    def reflect_y(self) -> Velocity:
        """Bounce off a horizontal surface: ``dy`` flips, ``dx`` is kept."""
        return Velocity(self.magnitude, -self.angle)

    def reflect_off_paddle(self, strength: float) -> Velocity:
        """
        Bounce off a paddle, deflected by where the ball made contact.

        ``strength`` is the signed offset from the paddle centre in
        ``[-1, 1]`` (positive above the centre). The exit angle has the size
        of ``strength`` and sends the ball up for hits above the centre, on
        either side of the board. Speed is scaled by
        ``abs(strength) / 2 + 0.9``: a centre hit comes back slightly slower,
        an edge hit up to 1.4 times faster.

        :param strength: Contact offset from the paddle centre.
        :type strength: float

        :return: The deflected velocity.
        :rtype: Velocity
        """
        strength = clamp(strength, -1.0, 1.0)
        magnitude = -self.magnitude * (abs(strength) / 2 + DEFLECTION_BASE)
        angle = -strength if magnitude >= 0 else strength
        return Velocity(magnitude, angle)

    def advance(self, x: float, y: float, steps: float = 1.0) -> tuple[float, float]:
        """
        Position after ``steps`` ticks at this velocity.

        :param x: Current x.
        :type x: float

        :param y: Current y.
        :type y: float

        :param steps: Number of per-tick deltas to apply.
        :type steps: float

        :return: New (x, y).
        :rtype: tuple[float, float]
        """
        return x + self.dx * steps, y + self.dy * steps
