from __future__ import annotations

from dataclasses import replace

import pytest

from power_pong.entities import Ball, Velocity
from power_pong.scenes.pong.models import INITIAL_STATE, GameState


def place_ball(
    state: GameState, x: float, y: float, magnitude: float = 3.5, angle: float = 0.0
) -> GameState:
    """State with the main ball moved and given a new velocity."""
    ball = replace(state.ball, x=x, y=y, velocity=Velocity(magnitude, angle))
    return replace(state, ball=ball)


def place_heuristic(
    state: GameState, x: float, y: float, magnitude: float = -3.5, angle: float = 0.0
) -> GameState:
    """State with a prediction ball in flight."""
    return state.with_side(
        "AI", heuristic_ball=Ball(x=x, y=y, velocity=Velocity(magnitude, angle))
    )


@pytest.fixture
def started_state() -> GameState:
    """A running game on easy, as if started from the menu."""
    return INITIAL_STATE.with_meta(
        has_started=True, is_paused=False, difficulty=1, rand_seed=670
    )
