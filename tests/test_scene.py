import logging
from dataclasses import replace

import pytest

from conftest import place_ball
from power_pong import power_ups
from power_pong.constants import POWER_UP_DURATION, RESPAWN_BAND
from power_pong.entities import ActivePowerUp, PowerUpKind
from power_pong.scenes.pong import systems
from power_pong.scenes.pong.models import (
    INITIAL_STATE,
    MovePaddle,
    PointerClick,
    ScoreState,
    SetPowerUpIntent,
    Tick,
    TogglePause,
)
from power_pong.scenes.pong.scene import PongScene, reduce_state, replay, run_tick
from power_pong.scenes.pong.systems import default_systems


def tick_until(state, done, limit=100):
    for _ in range(limit):
        state = reduce_state(state, Tick())
        if done(state):
            return state
    raise AssertionError("condition not reached")


def test_click_on_easy_starts_game():
    state = reduce_state(INITIAL_STATE, PointerClick(300, 370))
    assert state.meta.has_started
    assert not state.meta.is_paused
    assert state.meta.difficulty == 1
    assert state.meta.rand_seed == 670


def test_initial_state_shows_start_menu():
    assert INITIAL_STATE.show_start
    assert not INITIAL_STATE.show_pause
    assert not INITIAL_STATE.show_end
    assert INITIAL_STATE.player.held_power_up is PowerUpKind.NONE


def test_paused_game_ignores_ticks():
    assert reduce_state(INITIAL_STATE, Tick()) is INITIAL_STATE


def test_pause_toggle(started_state):
    paused = reduce_state(started_state, TogglePause())
    assert paused.show_pause
    assert not reduce_state(paused, TogglePause()).meta.is_paused
    assert reduce_state(INITIAL_STATE, TogglePause()) is INITIAL_STATE


def test_pause_menu_routes_clicks(started_state):
    paused = reduce_state(started_state, TogglePause())
    assert not reduce_state(paused, PointerClick(300, 370)).meta.is_paused
    assert reduce_state(paused, PointerClick(300, 450)) is INITIAL_STATE


def test_clicks_during_play_are_ignored(started_state):
    assert reduce_state(started_state, PointerClick(300, 370)) is started_state


def test_move_paddle_sets_direction_only(started_state):
    state = reduce_state(started_state, MovePaddle(-1))
    assert state.player.paddle.direction == -1
    assert state.player.paddle.y == started_state.player.paddle.y


def test_power_up_intent(started_state):
    assert reduce_state(started_state, SetPowerUpIntent(True)).meta.power_up_intent


def test_bad_direction_rejected():
    with pytest.raises(ValueError):
        MovePaddle(2)


def test_unknown_event_rejected():
    with pytest.raises(TypeError):
        reduce_state(INITIAL_STATE, "tick")


def test_systems_run_in_order():
    orders = [system.order for system in default_systems()]
    assert orders == sorted(orders)
    assert len({system.name for system in default_systems()}) == len(orders)
    assert all(callable(system.step) for system in default_systems())


def scripted_events():
    events = [PointerClick(300, 450)]
    for i in range(1500):
        if i % 200 == 0:
            events.append(MovePaddle(-1 if (i // 200) % 2 else 1))
        if i % 350 == 0:
            events.append(SetPowerUpIntent(i % 700 == 0))
        events.append(Tick(i))
    return events


def test_replay_is_deterministic():
    first = list(replay(scripted_events()))
    second = list(replay(scripted_events()))
    assert first == second


def test_scene_matches_replay():
    scene = PongScene(record=True)
    for event in scripted_events():
        scene.handle(event)
    assert scene.history == list(replay(scripted_events()))
    assert scene.ticks == 1500
    assert scene.reset() is INITIAL_STATE
    assert scene.history == []


def test_paddles_stay_on_board():
    for state in replay(scripted_events()):
        for paddle in (state.player.paddle, state.ai.paddle):
            assert 0 <= paddle.y <= 600 - paddle.height


def test_power_ups_stay_exclusive_under_forced_pickups(monkeypatch):
    monkeypatch.setattr(power_ups, "bernoulli", lambda seed, chance: True)
    monkeypatch.setattr(power_ups, "pickup_collected", lambda s: s.pickup.is_active)
    monkeypatch.setattr(systems, "wants_power_up", lambda s, config: True)

    events = scripted_events()
    snapshots = [INITIAL_STATE, *replay(events)]
    activations = 0
    held_while_running = 0
    for event, prev, nxt in zip(events, snapshots, snapshots[1:]):
        if not isinstance(event, Tick) or prev.meta.is_paused:
            continue
        for side in ("PLAYER", "AI"):
            before, after = prev.side(side), nxt.side(side)
            running = before.active_power_up

            if running is not None and running.ticks_remaining > 1:
                # a running effect only counts down
                assert after.active_power_up == ActivePowerUp(
                    running.kind, running.ticks_remaining - 1
                )
                continue

            if after.active_power_up is not None:
                # a fresh effect is the kind held before this tick
                activations += 1
                assert before.held_power_up is not PowerUpKind.NONE
                assert after.active_power_up == ActivePowerUp(
                    before.held_power_up, POWER_UP_DURATION
                )
            elif before.held_power_up is not PowerUpKind.NONE:
                assert after.held_power_up is before.held_power_up

        for side in ("PLAYER", "AI"):
            own = nxt.side(side)
            running = own.active_power_up is not None
            if running and own.held_power_up is not PowerUpKind.NONE:
                held_while_running += 1

    assert activations > 0
    assert held_while_running > 0


def test_held_ball_scores_once(started_state):
    state = place_ball(started_state, 35, 550, magnitude=0.0)
    for _ in range(50):
        state = run_tick(state)
    assert state.score == ScoreState(player=0, ai=1)
    assert state.meta.score_just_updated


def test_ball_past_cpu_scores_for_ai_then_respawns(started_state, caplog):
    state = replace(started_state, score=ScoreState(player=6, ai=3))
    state = place_ball(state, 45, 550, magnitude=-3.5)

    with caplog.at_level(logging.INFO, logger="mini-arcade-core"):
        state = tick_until(state, lambda s: s.ball.x < 34)
    assert state.score == ScoreState(player=6, ai=4)
    assert state.meta.score_just_updated
    assert "Point for AI" in caplog.text

    state = tick_until(state, lambda s: s.ball.x > 60)
    low, high = RESPAWN_BAND
    assert low <= state.ball.x <= high
    assert low <= state.ball.y <= high
    assert state.ball.velocity.magnitude == 3.5
    assert not state.meta.score_just_updated
    assert state.score == ScoreState(player=6, ai=4)


def test_ball_past_player_scores_for_player(started_state):
    state = place_ball(started_state, 550, 550, magnitude=3.5)
    state = tick_until(state, lambda s: s.score.player == 1)
    assert state.score.ai == 0


def test_fast_ball_multiplies_speed_once(started_state):
    state = place_ball(started_state, 300, 300, magnitude=3.5, angle=0.3)
    state = state.with_side(
        "PLAYER", held_power_up=PowerUpKind.FAST_BALL, active_power_up=None
    ).with_meta(power_up_intent=True)

    state = reduce_state(state, Tick())
    assert state.player.active_power_up == ActivePowerUp(PowerUpKind.FAST_BALL, 600)
    assert state.ball.velocity.magnitude == 3.5

    state = reduce_state(state, Tick())
    assert state.ball.velocity.magnitude == 14.0
    assert state.player.active_power_up.ticks_remaining == 599

    state = reduce_state(state, Tick())
    assert state.ball.velocity.magnitude == 14.0


def test_game_ends_at_seven(started_state, caplog):
    state = replace(started_state, score=ScoreState(player=2, ai=6))
    state = place_ball(state, 45, 550, magnitude=-3.5)

    with caplog.at_level(logging.INFO, logger="mini-arcade-core"):
        state = tick_until(state, lambda s: s.meta.has_ended)
    assert state.score == ScoreState(player=2, ai=7)
    assert state.winner == "AI"
    assert state.show_end
    assert "Game over" in caplog.text

    assert reduce_state(state, Tick()) is state
    assert reduce_state(state, TogglePause()) is state
    assert reduce_state(state, PointerClick(300, 370)) is INITIAL_STATE
