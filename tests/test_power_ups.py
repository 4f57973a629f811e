from dataclasses import replace

import pytest

from conftest import place_ball
from power_pong import power_ups
from power_pong.entities import ActivePowerUp, PowerUpKind
from power_pong.power_ups import (
    activate_held,
    apply_effect,
    countdown,
    maybe_spawn_pickup,
    random_kind,
    resolve_pickup,
)
from power_pong.scenes.pong.models import INITIAL_STATE


def with_pickup(state, x=200, y=200, is_active=True):
    return replace(state, pickup=replace(state.pickup, x=x, y=y, is_active=is_active))


def with_active(state, side, kind, ticks):
    return state.with_side(side, active_power_up=ActivePowerUp(kind, ticks))


def test_random_kind_never_none():
    kinds = {random_kind(seed) for seed in range(500)}
    assert PowerUpKind.NONE not in kinds
    assert len(kinds) == 4


def test_last_hitter_collects_pickup():
    state = place_ball(with_pickup(INITIAL_STATE), 210, 210).with_meta(
        last_hit="PLAYER", rand_seed=77
    )
    collected = resolve_pickup(state)
    assert collected.player.held_power_up is random_kind(77)
    assert collected.ai.held_power_up is PowerUpKind.NONE
    assert not collected.pickup.is_active


def test_side_already_holding_cannot_collect():
    state = place_ball(with_pickup(INITIAL_STATE), 210, 210).with_meta(last_hit="AI")
    state = state.with_side("AI", held_power_up=PowerUpKind.SPEED)
    after = resolve_pickup(state)
    assert after.ai.held_power_up is PowerUpKind.SPEED
    assert after.pickup.is_active


def test_inactive_pickup_is_not_collected():
    state = place_ball(with_pickup(INITIAL_STATE, is_active=False), 210, 210)
    assert resolve_pickup(state) is state


def test_ball_away_from_pickup_collects_nothing():
    state = place_ball(with_pickup(INITIAL_STATE), 400, 500)
    assert resolve_pickup(state) is state


@pytest.mark.parametrize("x, y", [(475, 250), (430, 315)])
def test_ball_box_overlapping_pickup_edge_collects(x, y):
    state = place_ball(with_pickup(INITIAL_STATE, x=400, y=240), x, y).with_meta(
        last_hit="PLAYER"
    )
    assert resolve_pickup(state).player.held_power_up is not PowerUpKind.NONE


@pytest.mark.parametrize("x, y", [(480, 250), (430, 320)])
def test_ball_box_clear_of_pickup_edge_collects_nothing(x, y):
    state = place_ball(with_pickup(INITIAL_STATE, x=400, y=240), x, y).with_meta(
        last_hit="PLAYER"
    )
    assert resolve_pickup(state) is state


def test_ball_collider_is_centred():
    box = place_ball(INITIAL_STATE, 300, 200).ball.collider
    assert box.position.to_tuple() == (286, 186)
    assert box.size.to_tuple() == (28, 28)


def test_spawn_shows_pickup(monkeypatch):
    monkeypatch.setattr(power_ups, "bernoulli", lambda seed, chance: True)
    assert maybe_spawn_pickup(INITIAL_STATE).pickup.is_active


def test_spawn_never_hides_pickup(monkeypatch):
    monkeypatch.setattr(power_ups, "bernoulli", lambda seed, chance: False)
    state = with_pickup(INITIAL_STATE)
    assert maybe_spawn_pickup(state).pickup.is_active
    assert not maybe_spawn_pickup(INITIAL_STATE).pickup.is_active


def test_activate_held_power_up():
    state = INITIAL_STATE.with_side("PLAYER", held_power_up=PowerUpKind.FAST_BALL)
    active = activate_held("PLAYER", state, True).player
    assert active.held_power_up is PowerUpKind.NONE
    assert active.active_power_up == ActivePowerUp(PowerUpKind.FAST_BALL, 600)


def test_activation_needs_intent_and_a_held_kind():
    state = INITIAL_STATE.with_side("PLAYER", held_power_up=PowerUpKind.SPEED)
    assert activate_held("PLAYER", state, False) is state
    assert activate_held("AI", INITIAL_STATE, True) is INITIAL_STATE


def test_activation_waits_for_running_effect():
    state = with_active(INITIAL_STATE, "AI", PowerUpKind.SPEED, 10).with_side(
        "AI", held_power_up=PowerUpKind.RETURN
    )
    assert activate_held("AI", state, True) is state


def test_countdown_expires():
    state = with_active(INITIAL_STATE, "PLAYER", PowerUpKind.SPEED, 5)
    assert countdown("PLAYER", state).player.active_power_up.ticks_remaining == 4
    state = with_active(INITIAL_STATE, "PLAYER", PowerUpKind.SPEED, 1)
    assert countdown("PLAYER", state).player.active_power_up is None
    assert countdown("AI", INITIAL_STATE) is INITIAL_STATE


@pytest.mark.parametrize("ticks, speed", [(600, 10), (2, 10), (1, 5)])
def test_speed_effect(ticks, speed):
    state = with_active(INITIAL_STATE, "PLAYER", PowerUpKind.SPEED, ticks)
    assert apply_effect("PLAYER", state).player.paddle.speed == speed


def test_expand_effect_keeps_paddle_on_board():
    state = with_active(INITIAL_STATE, "AI", PowerUpKind.EXPAND, 300)
    state = state.with_paddle("AI", y=500)
    paddle = apply_effect("AI", state).ai.paddle
    assert paddle.size == 2
    assert paddle.y == 440
    assert paddle.height == 160


def test_expand_effect_reverts_on_last_tick():
    state = with_active(INITIAL_STATE, "AI", PowerUpKind.EXPAND, 1)
    state = state.with_paddle("AI", size=2)
    assert apply_effect("AI", state).ai.paddle.size == 1


def test_fast_ball_only_on_first_tick():
    state = place_ball(INITIAL_STATE, 300, 300, magnitude=3.5, angle=0.3)
    first = with_active(state, "PLAYER", PowerUpKind.FAST_BALL, 600)
    assert apply_effect("PLAYER", first).ball.velocity.magnitude == 14.0
    later = with_active(state, "PLAYER", PowerUpKind.FAST_BALL, 599)
    assert apply_effect("PLAYER", later) is later


def test_return_sends_ball_back():
    state = place_ball(INITIAL_STATE, 300, 300, magnitude=-3.5, angle=0.3)
    state = with_active(state, "AI", PowerUpKind.RETURN, 600)
    velocity = apply_effect("AI", state).ball.velocity
    assert velocity.dx > 0
    assert velocity.dy == pytest.approx(state.ball.velocity.dy)
