"""
Tick systems for the Pong scene.

Each system is one pure ``GameState -> GameState`` step. ``order`` fixes the
position in the tick pipeline.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Protocol

from mini_arcade_core.utils import logger

from power_pong.constants import (
    AI_SCORE_LINE,
    BALL_SPEED,
    MAX_X,
    PLAYER_SCORE_LINE,
    RESPAWN_BAND,
    RESPAWN_MARGIN,
    RESPAWN_MEAN,
    RESPAWN_SPREAD,
    WIN_SCORE,
)
from power_pong.controllers.cpu import (
    CpuConfig,
    advance_heuristic_ball,
    move_cpu_paddle,
    retarget,
    wants_power_up,
)
from power_pong.difficulty import cpu_config_for
from power_pong.entities import Velocity
from power_pong.physics import (
    BallKind,
    advance_ball,
    ball_touches_paddle,
    touches_either_paddle,
)
from power_pong.power_ups import (
    activate_held,
    apply_effect,
    countdown,
    maybe_spawn_pickup,
    move_pickup,
    resolve_pickup,
)
from power_pong.rng import (
    RESPAWN_ANGLE_OFFSET,
    RESPAWN_X_OFFSET,
    RESPAWN_Y_OFFSET,
    advance_seed,
    gaussian,
    next_uniform,
)
from power_pong.scenes.pong.models import GameState
from power_pong.utils import clamp


class PongSystem(Protocol):
    """
    One step of the tick pipeline.

    :ivar name (str): Name used in logs.
    :ivar order (int): Position in the pipeline, lowest first.
    """

    name: str
    order: int

    def step(self, state: GameState) -> GameState:
        """Return the state after this step."""


@dataclass
class CpuSystemMixin:
    """Resolves the CPU preset from the state's difficulty unless pinned."""

    config: CpuConfig | None = None

    def cpu_config(self, state: GameState) -> CpuConfig:
        """Pinned preset, or the one for the current difficulty."""
        if self.config is not None:
            return self.config
        return cpu_config_for(state.meta.difficulty)


@dataclass
class PaddleSystem:
    """
    Move paddles: the player's by direction, the CPU's toward its target.
    """

    name: str = "pong_paddles"
    order: int = 10

    def step(self, state: GameState) -> GameState:
        """Move both paddles and clamp them to the board."""
        paddle = state.player.paddle
        y = paddle.y + paddle.direction * paddle.speed
        state = state.with_paddle("PLAYER", y=clamp(y, 0.0, paddle.max_y))
        return move_cpu_paddle(state)


@dataclass
class PowerUpEffectSystem:
    """Apply each side's running power-up."""

    name: str = "pong_power_up_effects"
    order: int = 20

    def step(self, state: GameState) -> GameState:
        """Player first, then CPU."""
        state = apply_effect("PLAYER", state)
        return apply_effect("AI", state)


@dataclass
class PowerUpCountdownSystem:
    """Count running power-ups down by one tick."""

    name: str = "pong_power_up_countdown"
    order: int = 25

    def step(self, state: GameState) -> GameState:
        """Count down both sides."""
        state = countdown("AI", state)
        return countdown("PLAYER", state)


@dataclass
class CpuTargetSystem(CpuSystemMixin):
    """Recompute where the CPU paddle heads."""

    name: str = "pong_cpu_target"
    order: int = 30

    def step(self, state: GameState) -> GameState:
        """Update the CPU's y target."""
        return retarget(state, self.cpu_config(state))


@dataclass
class HeuristicBallSystem(CpuSystemMixin):
    """Spawn, fast-forward or drop the CPU's prediction ball."""

    name: str = "pong_heuristic_ball"
    order: int = 35

    def step(self, state: GameState) -> GameState:
        """Advance the prediction ball."""
        return advance_heuristic_ball(state, self.cpu_config(state))


@dataclass
class BallMovementSystem:
    """
    Move the ball, or put a new one in play once it has left the board.
    """

    name: str = "pong_ball_move"
    order: int = 40

    @staticmethod
    def respawn(state: GameState) -> GameState:
        """New ball near the middle, random angle, starting speed."""
        seed = state.meta.rand_seed
        low, high = RESPAWN_BAND
        x = gaussian(seed + RESPAWN_X_OFFSET, RESPAWN_SPREAD, RESPAWN_MEAN)
        y = gaussian(seed + RESPAWN_Y_OFFSET, RESPAWN_SPREAD, RESPAWN_MEAN)
        ball = replace(
            state.ball,
            x=clamp(x, low, high),
            y=clamp(y, low, high),
            velocity=Velocity(
                BALL_SPEED, next_uniform(seed + RESPAWN_ANGLE_OFFSET)
            ),
        )
        return replace(state, ball=ball).with_meta(score_just_updated=False)

    def step(self, state: GameState) -> GameState:
        """Move the ball based on its velocity."""
        x = state.ball.x
        if x <= RESPAWN_MARGIN or x >= MAX_X - RESPAWN_MARGIN:
            return self.respawn(state)
        return replace(state, ball=advance_ball(BallKind.MAIN, state))


@dataclass
class PickupMovementSystem:
    """Bounce the power-up box around its area."""

    name: str = "pong_pickup_move"
    order: int = 45

    def step(self, state: GameState) -> GameState:
        """Move the pickup box."""
        return move_pickup(state)


@dataclass
class PongRulesSystem:
    """
    Count a point once per ball that gets past a paddle.
    """

    name: str = "pong_rules"
    order: int = 50

    def step(self, state: GameState) -> GameState:
        """Apply Pong scoring."""
        if state.meta.score_just_updated or touches_either_paddle(state):
            return state

        # leaving by the left end scores for the AI, by the right for the player
        x = state.ball.x
        if x < AI_SCORE_LINE:
            side = "AI"
        elif x > PLAYER_SCORE_LINE:
            side = "PLAYER"
        else:
            return state

        score = state.score.bump(side)
        logger.info(f"Point for {side}: player {score.player} - cpu {score.ai}")
        return replace(state, score=score).with_meta(score_just_updated=True)


@dataclass
class SeedSystem:
    """Step the random seed once per tick."""

    name: str = "pong_seed"
    order: int = 55

    def step(self, state: GameState) -> GameState:
        """Advance the seed by its fixed stride."""
        return state.with_meta(rand_seed=advance_seed(state.meta.rand_seed))


@dataclass
class EndGameSystem:
    """Stop the game once a side reaches the win score."""

    name: str = "pong_end_game"
    order: int = 60

    def step(self, state: GameState) -> GameState:
        """Latch the end-of-game flags."""
        ended = max(state.score.player, state.score.ai) >= WIN_SCORE
        if ended and not state.meta.has_ended:
            logger.info(f"Game over, {state.winner} wins")
        return state.with_meta(is_paused=ended, has_ended=ended)


@dataclass
class PowerUpActivationSystem(CpuSystemMixin):
    """Trigger held power-ups: the player's on intent, the CPU's by chance."""

    name: str = "pong_power_up_activation"
    order: int = 70

    def step(self, state: GameState) -> GameState:
        """Activate held power-ups."""
        state = activate_held("PLAYER", state, state.meta.power_up_intent)
        cpu_wants = wants_power_up(state, self.cpu_config(state))
        return activate_held("AI", state, cpu_wants)


@dataclass
class LastHitSystem:
    """Remember which paddle touched the ball last."""

    name: str = "pong_last_hit"
    order: int = 80

    def step(self, state: GameState) -> GameState:
        """Record the last hitter, CPU checked first."""
        if ball_touches_paddle("AI", state):
            return state.with_meta(last_hit="AI")
        if ball_touches_paddle("PLAYER", state):
            return state.with_meta(last_hit="PLAYER")
        return state


@dataclass
class PickupCollectionSystem:
    """Give the pickup to the last hitter when the ball runs into it."""

    name: str = "pong_pickup_collect"
    order: int = 85

    def step(self, state: GameState) -> GameState:
        """Resolve pickup collection."""
        return resolve_pickup(state)


@dataclass
class PickupSpawnSystem:
    """Occasionally show the pickup."""

    name: str = "pong_pickup_spawn"
    order: int = 90

    def step(self, state: GameState) -> GameState:
        """Maybe make the pickup visible."""
        return maybe_spawn_pickup(state)


def default_systems() -> list[PongSystem]:
    """The tick pipeline, sorted by ``order``."""
    systems = [
        PaddleSystem(),
        PowerUpEffectSystem(),
        PowerUpCountdownSystem(),
        CpuTargetSystem(),
        HeuristicBallSystem(),
        BallMovementSystem(),
        PickupMovementSystem(),
        PongRulesSystem(),
        SeedSystem(),
        EndGameSystem(),
        PowerUpActivationSystem(),
        LastHitSystem(),
        PickupCollectionSystem(),
        PickupSpawnSystem(),
    ]
    return sorted(systems, key=lambda system: system.order)
