"""
Seeded pseudo random numbers for the simulation core.

There is no hidden generator state: every draw is a pure function of an
integer seed, and the game keeps its seed in ``MetaState.rand_seed``.
Distinct random sources inside one tick use fixed offsets from that seed.
"""

from __future__ import annotations

import math
import sys

from power_pong.constants import (
    RNG_INCREMENT,
    RNG_MODULUS,
    RNG_MULTIPLIER,
    SEED_STRIDE,
    SEED_WRAP,
)

# Per call site offsets from the tick seed
AI_WANDER_OFFSET = 3
RESPAWN_X_OFFSET = 10
RESPAWN_Y_OFFSET = 11
RESPAWN_ANGLE_OFFSET = 13
PICKUP_KIND_OFFSET = 40
PICKUP_SPAWN_OFFSET = 41
AI_ACTIVATION_OFFSET = 50


def next_uniform(seed: int) -> float:
    """
    One linear congruential step, normalized into ``[0, 1]``.

    :param seed: Integer seed.
    :type seed: int

    :return: Uniform deviate.
    :rtype: float
    """
    return ((RNG_MULTIPLIER * seed + RNG_INCREMENT) % RNG_MODULUS) / (
        RNG_MODULUS - 1
    )


def gaussian(seed: int, variance: float, mean: float) -> float:
    """
    Approximately normal deviate via the Box-Muller transform.

    Draws two uniforms at ``seed`` and ``seed + 1``. ``variance`` scales the
    standard normal deviate before ``mean`` is added.

    :param seed: Integer seed.
    :type seed: int

    :param variance: Spread applied to the standard deviate.
    :type variance: float

    :param mean: Centre of the distribution.
    :type mean: float

    :return: The deviate.
    :rtype: float
    """
    # log(0) is undefined, the LCG can land exactly on 0
    u = max(next_uniform(seed), sys.float_info.min)
    v = next_uniform(seed + 1)
    z = math.sqrt(-2.0 * math.log(u)) * math.cos(2.0 * math.pi * v)
    return variance * z + mean


def bernoulli(seed: int, chance: float) -> bool:
    """True with probability ``chance`` for the given seed."""
    return next_uniform(seed) < chance


def advance_seed(seed: int) -> int:
    """
    Per-tick seed update.

    Steps by a fixed stride no matter how many draws the tick consumed.
    """
    return (seed + SEED_STRIDE) % SEED_WRAP
