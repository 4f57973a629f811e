"""
Power-up lifecycle: the pickup box, collection, activation, effects and
countdown.

A side goes ``NONE -> held kind -> ActivePowerUp -> NONE``. Both sides run
their effects independently.
"""

from __future__ import annotations

from dataclasses import replace

from mini_arcade_core.utils import logger

from power_pong.constants import (
    BASE_PADDLE_HEIGHT,
    BOOSTED_PADDLE_SPEED,
    EXPANDED_PADDLE_SIZE,
    FAST_BALL_FACTOR,
    MAX_Y,
    PADDLE_SPEED,
    PICKUP_SPAWN_CHANCE,
    POWER_UP_DURATION,
)
from power_pong.entities import ActivePowerUp, PowerUpKind
from power_pong.physics import BallKind, advance_ball
from power_pong.rng import (
    PICKUP_KIND_OFFSET,
    PICKUP_SPAWN_OFFSET,
    bernoulli,
    next_uniform,
)
from power_pong.scenes.pong.models import GameState, Side
from power_pong.utils import clamp

# Pickup kinds by quartile of one uniform draw
_KIND_QUARTILES = (
    PowerUpKind.EXPAND,
    PowerUpKind.FAST_BALL,
    PowerUpKind.SPEED,
    PowerUpKind.RETURN,
)


def random_kind(seed: int) -> PowerUpKind:
    """Uniformly picked non-``NONE`` kind for ``seed``."""
    draw = next_uniform(seed + PICKUP_KIND_OFFSET)
    index = min(int(draw * len(_KIND_QUARTILES)), len(_KIND_QUARTILES) - 1)
    return _KIND_QUARTILES[index]


def move_pickup(state: GameState) -> GameState:
    """Pickup box moved one tick inside its bounce area."""
    return replace(state, pickup=advance_ball(BallKind.PICKUP, state))


def maybe_spawn_pickup(state: GameState) -> GameState:
    """Low-chance draw that makes the pickup visible; never hides it."""
    if state.pickup.is_active:
        return state
    if not bernoulli(
        state.meta.rand_seed + PICKUP_SPAWN_OFFSET, PICKUP_SPAWN_CHANCE
    ):
        return state
    return replace(state, pickup=replace(state.pickup, is_active=True))


def pickup_collected(state: GameState) -> bool:
    """The main ball overlaps the active pickup box."""
    return state.pickup.is_active and state.ball.collider.intersects(
        state.pickup.collider
    )


def resolve_pickup(state: GameState) -> GameState:
    """
    Hand the pickup to the side that last hit the ball.

    Only an empty-handed side can collect; otherwise the box stays where it
    is.
    """
    if not pickup_collected(state):
        return state
    side = state.meta.last_hit
    if state.side(side).held_power_up is not PowerUpKind.NONE:
        return state
    kind = random_kind(state.meta.rand_seed)
    logger.info(f"{side} collected power-up {kind.name}")
    state = state.with_side(side, held_power_up=kind)
    return replace(state, pickup=replace(state.pickup, is_active=False))


def activate_held(side: Side, state: GameState, wants: bool) -> GameState:
    """
    Turn a held power-up into a running one.

    Needs the intent, a held kind and no effect already running.
    """
    own = state.side(side)
    if not wants or own.held_power_up is PowerUpKind.NONE:
        return state
    if own.active_power_up is not None:
        return state
    logger.info(f"{side} activated power-up {own.held_power_up.name}")
    return state.with_side(
        side,
        held_power_up=PowerUpKind.NONE,
        active_power_up=ActivePowerUp(own.held_power_up, POWER_UP_DURATION),
    )


def countdown(side: Side, state: GameState) -> GameState:
    """One tick off a running effect; it ends when nothing is left."""
    active = state.side(side).active_power_up
    if active is None:
        return state
    return state.with_side(side, active_power_up=active.tick())


def apply_effect(side: Side, state: GameState) -> GameState:
    """
    Apply one tick of ``side``'s running effect.

    - SPEED: faster paddle while more than one tick is left, then baseline
    - EXPAND: taller paddle while more than one tick is left, then baseline
    - FAST_BALL: on the first tick only, the ball's speed is multiplied
    - RETURN: on the first tick only, the ball is sent back horizontally

    :param side: Owner of the effect.
    :type side: Side

    :param state: Current game state.
    :type state: GameState

    :return: State with the effect applied.
    :rtype: GameState
    """
    active = state.side(side).active_power_up
    if active is None:
        return state

    lasting = active.ticks_remaining > 1
    first_tick = active.ticks_remaining >= POWER_UP_DURATION
    kind = active.kind

    if kind is PowerUpKind.SPEED:
        speed = BOOSTED_PADDLE_SPEED if lasting else PADDLE_SPEED
        return state.with_paddle(side, speed=speed)
    if kind is PowerUpKind.EXPAND:
        size = EXPANDED_PADDLE_SIZE if lasting else 1
        # a taller paddle may no longer fit where it is
        y = clamp(state.side(side).paddle.y, 0.0, MAX_Y - size * BASE_PADDLE_HEIGHT)
        return state.with_paddle(side, size=size, y=y)
    if kind is PowerUpKind.FAST_BALL and first_tick:
        velocity = state.ball.velocity.scale(FAST_BALL_FACTOR)
        return replace(state, ball=replace(state.ball, velocity=velocity))
    if kind is PowerUpKind.RETURN and first_tick:
        velocity = state.ball.velocity.reflect_x()
        return replace(state, ball=replace(state.ball, velocity=velocity))
    return state
