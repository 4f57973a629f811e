"""
Pong scene Model
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Literal, Union

from power_pong.constants import (
    AI_PADDLE_X,
    BALL_SPEED,
    BALL_START,
    BALL_START_ANGLE,
    PADDLE_SPEED,
    PADDLE_START_Y,
    PICKUP_SPEED,
    PICKUP_START,
    PLAYER_PADDLE_X,
    WIN_SCORE,
)
from power_pong.entities import (
    ActivePowerUp,
    Ball,
    Paddle,
    PowerUpKind,
    PowerUpPickup,
    Velocity,
)

Side = Literal["PLAYER", "AI"]
SIDES: tuple[Side, Side] = ("PLAYER", "AI")


@dataclass(frozen=True)
class ScoreState:
    """
    Score state for the Pong scene.

    :ivar player (int): Score for the player.
    :ivar ai (int): Score for the CPU.
    """

    player: int = 0
    ai: int = 0

    def of(self, side: Side) -> int:
        """Score of one side."""
        return self.player if side == "PLAYER" else self.ai

    def bump(self, side: Side) -> ScoreState:
        """One more point for ``side``."""
        if side == "PLAYER":
            return replace(self, player=self.player + 1)
        return replace(self, ai=self.ai + 1)


@dataclass(frozen=True)
class PlayerSide:
    """
    Everything owned by the human side.

    :ivar paddle (Paddle): The player's paddle.
    :ivar held_power_up (PowerUpKind): Collected, not yet triggered.
    :ivar active_power_up (ActivePowerUp | None): Running effect, if any.
    """

    paddle: Paddle
    held_power_up: PowerUpKind = PowerUpKind.NONE
    active_power_up: ActivePowerUp | None = None


@dataclass(frozen=True)
class AiSide(PlayerSide):
    """
    Everything owned by the CPU side.

    :ivar y_target (float): Where the CPU wants its paddle's top edge.
    :ivar heuristic_ball (Ball | None): Hidden fast-forward copy of the ball.
    """

    y_target: float = 300.0
    heuristic_ball: Ball | None = None


# Justification: the meta flags are the game's lifecycle state
# pylint: disable=too-many-instance-attributes
@dataclass(frozen=True)
class MetaState:
    """
    Game phase flags and bookkeeping.

    :ivar difficulty (int): CPU difficulty, 1 (easy) to 3 (hard).
    :ivar has_started (bool): Start menu has been left.
    :ivar is_paused (bool): Ticks are ignored while set.
    :ivar has_ended (bool): A side reached the win score.
    :ivar rand_seed (int): Seed for this tick's random draws.
    :ivar last_hit (Side): Side whose paddle touched the ball last.
    :ivar power_up_intent (bool): Player is asking to trigger a power-up.
    :ivar score_just_updated (bool): A point was counted for the ball in play.
    """

    difficulty: int = 3
    has_started: bool = False
    is_paused: bool = True
    has_ended: bool = False
    rand_seed: int = 1
    last_hit: Side = "AI"
    power_up_intent: bool = False
    score_just_updated: bool = False


# pylint: enable=too-many-instance-attributes


@dataclass(frozen=True)
class GameState:
    """
    The whole game, threaded through the reducer.

    :ivar player (PlayerSide): Human side.
    :ivar ai (AiSide): CPU side.
    :ivar ball (Ball): Ball in play.
    :ivar pickup (PowerUpPickup): Power-up box.
    :ivar score (ScoreState): Points.
    :ivar meta (MetaState): Lifecycle flags and seed.
    """

    player: PlayerSide
    ai: AiSide
    ball: Ball
    pickup: PowerUpPickup
    score: ScoreState
    meta: MetaState

    def side(self, side: Side) -> PlayerSide:
        """State owned by ``side``."""
        return self.player if side == "PLAYER" else self.ai

    def with_side(self, side: Side, **changes) -> GameState:
        """Copy with fields of one side replaced."""
        if side == "PLAYER":
            return replace(self, player=replace(self.player, **changes))
        return replace(self, ai=replace(self.ai, **changes))

    def with_paddle(self, side: Side, **changes) -> GameState:
        """Copy with fields of one side's paddle replaced."""
        return self.with_side(
            side, paddle=replace(self.side(side).paddle, **changes)
        )

    def with_meta(self, **changes) -> GameState:
        """Copy with meta flags replaced."""
        return replace(self, meta=replace(self.meta, **changes))

    @property
    def show_start(self) -> bool:
        """Start menu is visible."""
        return self.meta.is_paused and not self.meta.has_started

    @property
    def show_pause(self) -> bool:
        """Pause menu is visible."""
        return (
            self.meta.is_paused
            and self.meta.has_started
            and not self.meta.has_ended
        )

    @property
    def show_end(self) -> bool:
        """End menu is visible."""
        return self.meta.is_paused and self.meta.has_ended

    @property
    def winner(self) -> Side | None:
        """Side that reached the win score, if any."""
        if self.score.player >= WIN_SCORE:
            return "PLAYER"
        if self.score.ai >= WIN_SCORE:
            return "AI"
        return None


@dataclass(frozen=True)
class Tick:
    """
    One simulation step from the fixed-rate ticker.

    :ivar elapsed (int): Ticks emitted so far by the ticker.
    """

    elapsed: int = 0


@dataclass(frozen=True)
class MovePaddle:
    """
    Player movement intent.

    :ivar direction (int): -1 (up), 0 (stop) or +1 (down).
    """

    direction: int

    def __post_init__(self):
        if self.direction not in (-1, 0, 1):
            raise ValueError(
                f"Paddle direction must be -1, 0 or 1, got {self.direction!r}"
            )


@dataclass(frozen=True)
class TogglePause:
    """Pause or resume a running game."""


@dataclass(frozen=True)
class SetPowerUpIntent:
    """
    Player asks (or stops asking) to trigger the held power-up.

    :ivar active (bool): Intent flag.
    """

    active: bool


@dataclass(frozen=True)
class PointerClick:
    """
    Mouse click in board coordinates.

    :ivar x (float): Click x.
    :ivar y (float): Click y.
    """

    x: float
    y: float


PongEvent = Union[Tick, MovePaddle, TogglePause, SetPowerUpIntent, PointerClick]


INITIAL_STATE = GameState(
    player=PlayerSide(
        paddle=Paddle(x=PLAYER_PADDLE_X, y=PADDLE_START_Y, speed=PADDLE_SPEED)
    ),
    ai=AiSide(paddle=Paddle(x=AI_PADDLE_X, y=PADDLE_START_Y, speed=PADDLE_SPEED)),
    ball=Ball(
        x=BALL_START[0],
        y=BALL_START[1],
        velocity=Velocity(BALL_SPEED, BALL_START_ANGLE),
    ),
    pickup=PowerUpPickup(
        x=PICKUP_START[0],
        y=PICKUP_START[1],
        velocity=Velocity(PICKUP_SPEED, BALL_START_ANGLE),
    ),
    score=ScoreState(),
    meta=MetaState(),
)
