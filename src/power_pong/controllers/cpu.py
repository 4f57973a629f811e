"""
CPU paddle controller for Power Pong.

The CPU does not chase the ball. When the player returns the ball, a hidden
copy of it (the heuristic ball) is sent ahead at double speed; where that copy
crosses the CPU's goal line, plus some deliberate error, becomes the CPU's
target.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from power_pong.constants import MAX_Y
from power_pong.physics import BallKind, advance_ball, ball_touches_paddle
from power_pong.rng import (
    AI_ACTIVATION_OFFSET,
    AI_WANDER_OFFSET,
    bernoulli,
    gaussian,
)
from power_pong.scenes.pong.models import GameState
from power_pong.utils import clamp


@dataclass(frozen=True)
class CpuConfig:
    """
    CPU difficulty settings.

    - deviation_scale: spread of the aiming error, smaller = sharper CPU
    - goal_line: x where the prediction ball is read out (and dropped)
    - aim_offset: how far above the predicted y the paddle's top edge aims
    - wander_mean / wander_spread: idle target once the ball has gone past
    - power_up_chance: per-tick chance to trigger a held power-up
    """

    deviation_scale: float = 45.0
    goal_line: float = 40.0
    aim_offset: float = 40.0
    wander_mean: float = 300.0
    wander_spread: float = 250.0
    power_up_chance: float = 0.001
    lookahead: float = 2.0


def _sigmoid(x: float) -> float:
    return 1 / (1 + math.exp(-x))


def prediction_deviation(state: GameState, config: CpuConfig) -> float:
    """
    Aiming error for the next prediction.

    The spread grows with the CPU's score and shrinks with the player's, so
    the CPU gets sloppier when ahead and sharper when behind. The difficulty
    preset scales the whole thing.

    :param state: Current game state.
    :type state: GameState

    :param config: Difficulty preset.
    :type config: CpuConfig

    :return: Signed error to add to the predicted y.
    :rtype: float
    """
    player_help = 0.5 * _sigmoid(4 - state.score.player) + 0.05
    ai_help = 0.35 * _sigmoid(state.score.ai - 4)
    variance = (player_help + ai_help) * config.deviation_scale
    return gaussian(state.meta.rand_seed, variance, 0)


def compute_y_target(state: GameState, config: CpuConfig) -> float:
    """
    Where the CPU paddle's top edge should head, clamped to the board.

    :param state: Current game state.
    :type state: GameState

    :param config: Difficulty preset.
    :type config: CpuConfig

    :return: New target y.
    :rtype: float
    """
    ai = state.ai
    target = ai.y_target
    if ai.heuristic_ball is not None:
        if ai.heuristic_ball.x < config.goal_line:
            target = (
                ai.heuristic_ball.y
                - config.aim_offset
                + prediction_deviation(state, config)
            )
    elif state.ball.x < config.goal_line:
        target = gaussian(
            state.meta.rand_seed + AI_WANDER_OFFSET,
            config.wander_spread,
            config.wander_mean,
        )
    return clamp(target, 0.0, MAX_Y - ai.paddle.height)


def advance_heuristic_ball(state: GameState, config: CpuConfig) -> GameState:
    """
    Spawn, fast-forward or drop the prediction ball.

    - absent: spawned from the main ball when the player's paddle hits it
    - in flight: moved ``config.lookahead`` deltas per tick
    - past the CPU goal line: dropped (its y has been read already)
    """
    h_ball = state.ai.heuristic_ball
    if h_ball is None:
        if not ball_touches_paddle("PLAYER", state):
            return state
        return state.with_side("AI", heuristic_ball=advance_ball(BallKind.MAIN, state))

    if h_ball.x < config.goal_line:
        return state.with_side("AI", heuristic_ball=None)
    return state.with_side(
        "AI",
        heuristic_ball=advance_ball(
            BallKind.HEURISTIC, state, steps=config.lookahead
        ),
    )


def move_paddle_toward(current: float, target: float, speed: float) -> float:
    """
    One step of CPU paddle movement.

    Within one step of the target the paddle holds still, which keeps it
    from jittering around the target.
    """
    if abs(current - target) <= speed:
        return current
    return current + speed if current < target else current - speed


def move_cpu_paddle(state: GameState) -> GameState:
    """CPU paddle moved toward its target and clamped to the board."""
    paddle = state.ai.paddle
    y = move_paddle_toward(paddle.y, state.ai.y_target, paddle.speed)
    return state.with_paddle("AI", y=clamp(y, 0.0, paddle.max_y))


def wants_power_up(state: GameState, config: CpuConfig) -> bool:
    """Whether the CPU tries to trigger its held power-up this tick."""
    return bernoulli(
        state.meta.rand_seed + AI_ACTIVATION_OFFSET, config.power_up_chance
    )


def retarget(state: GameState, config: CpuConfig) -> GameState:
    """State with the CPU's target recomputed."""
    return state.with_side("AI", y_target=compute_y_target(state, config))
