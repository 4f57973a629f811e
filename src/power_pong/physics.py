"""
Collision checks and ball movement for the simulation core.

Everything here reads a ``GameState`` and returns new values, nothing is
mutated.
"""

from __future__ import annotations

from dataclasses import replace
from enum import Enum
from typing import Union

from power_pong.constants import (
    AI_GOAL_LINE,
    MAX_X,
    MAX_Y,
    PICKUP_BOUNDS,
    PLAYER_GOAL_LINE,
)
from power_pong.entities import Ball, PowerUpPickup, Velocity
from power_pong.scenes.pong.models import GameState, Side
from power_pong.utils import clamp

Movable = Union[Ball, PowerUpPickup]


class BallKind(Enum):
    """Ball-like entities the resolver knows how to move."""

    MAIN = "main"
    HEURISTIC = "heuristic"
    PICKUP = "pickup"


def ball_of(kind: BallKind, state: GameState) -> Movable | None:
    """The entity of ``kind`` in ``state``; the heuristic ball may be absent."""
    if kind is BallKind.MAIN:
        return state.ball
    if kind is BallKind.HEURISTIC:
        return state.ai.heuristic_ball
    return state.pickup


def paddle_contact_range(side: Side, state: GameState) -> tuple[float, float]:
    """
    Vertical extent of a side's paddle.

    :return: (y_min, y_max)
    :rtype: tuple[float, float]
    """
    paddle = state.side(side).paddle
    return paddle.y, paddle.y + paddle.height


def ball_touches_paddle(
    side: Side, state: GameState, ball: Ball | None = None
) -> bool:
    """
    Whether ``ball`` (the main ball by default) is at ``side``'s paddle.

    The ball must be past that side's goal line and within the paddle's
    vertical range widened by one ball radius on each end.
    """
    ball = state.ball if ball is None else ball
    y_min, y_max = paddle_contact_range(side, state)
    if side == "AI":
        past_line = ball.x <= AI_GOAL_LINE
    else:
        past_line = ball.x >= PLAYER_GOAL_LINE
    return past_line and y_min - ball.radius <= ball.y <= y_max + ball.radius


def touches_either_paddle(state: GameState) -> bool:
    """Main ball is at the AI's or the player's paddle."""
    return ball_touches_paddle("AI", state) or ball_touches_paddle(
        "PLAYER", state
    )


def contact_strength(
    side: Side, state: GameState, ball: Ball | None = None
) -> float:
    """
    Signed offset of the ball from the paddle centre, clamped to ``[-1, 1]``.

    Positive when the ball is above the centre.
    """
    ball = state.ball if ball is None else ball
    paddle = state.side(side).paddle
    half = paddle.height / 2
    return clamp((paddle.center - ball.y) / half, -1.0, 1.0)


def _approaching(side: Side, velocity: Velocity) -> bool:
    # The AI guards the left edge, the player the right one
    return velocity.dx < 0 if side == "AI" else velocity.dx > 0


def _paddle_hit(kind: BallKind, ball: Ball, state: GameState) -> Side | None:
    if kind is BallKind.PICKUP:
        return None
    # The prediction ball plays against the AI paddle, never off it
    sides: tuple[Side, ...] = (
        ("PLAYER",) if kind is BallKind.HEURISTIC else ("AI", "PLAYER")
    )
    for side in sides:
        if ball_touches_paddle(side, state, ball) and _approaching(
            side, ball.velocity
        ):
            return side
    return None


def _bounds(kind: BallKind, ball: Movable) -> tuple[float, float, float, float]:
    if kind is BallKind.PICKUP:
        low, high = PICKUP_BOUNDS
        return low, high, low, high
    r = ball.radius
    return r, MAX_X - r, r, MAX_Y - r


def next_ball_velocity(kind: BallKind, state: GameState) -> Velocity:
    """
    Velocity of a ball-like entity after this tick's collisions.

    Paddle contact (AI checked first) deflects the ball, a side wall
    reflects it horizontally, the top and bottom walls vertically. Each
    bounce only applies while the ball is still heading into the surface, so
    a ball that lingers in a contact zone is not bounced back and forth.

    :param kind: Which entity to resolve.
    :type kind: BallKind

    :param state: Current game state.
    :type state: GameState

    :return: The entity's next velocity.
    :rtype: Velocity
    """
    ball = ball_of(kind, state)
    if ball is None:
        raise ValueError(f"No {kind.value} ball in play")
    velocity = ball.velocity

    side = _paddle_hit(kind, ball, state)
    if side is not None:
        return velocity.reflect_off_paddle(
            contact_strength(side, state, ball)
        )

    x_low, x_high, y_low, y_high = _bounds(kind, ball)
    if (ball.x <= x_low and velocity.dx < 0) or (
        ball.x >= x_high and velocity.dx > 0
    ):
        return velocity.reflect_x()
    if (ball.y <= y_low and velocity.dy < 0) or (
        ball.y >= y_high and velocity.dy > 0
    ):
        return velocity.reflect_y()
    return velocity


def advance_ball(kind: BallKind, state: GameState, steps: float = 1.0) -> Movable:
    """
    The entity moved one tick: collisions resolved, then position advanced.

    :param steps: Per-tick deltas to apply (the prediction ball uses 2).
    :type steps: float
    """
    ball = ball_of(kind, state)
    velocity = next_ball_velocity(kind, state)
    x, y = velocity.advance(ball.x, ball.y, steps)
    return replace(ball, x=x, y=y, velocity=velocity)
