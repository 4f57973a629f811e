"""
Pong scene: the event reducer and the tick pipeline.

``reduce_state`` is the only way the game changes. It takes one event at a
time; a tick threads the state through the systems in ``order``, every
other event touches a narrow slice of the state.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Iterable, Iterator

from mini_arcade_core.utils import logger

from power_pong.scenes.end import EndScene
from power_pong.scenes.menu import MenuScene
from power_pong.scenes.pause import PauseScene
from power_pong.scenes.pong.models import (
    INITIAL_STATE,
    GameState,
    MovePaddle,
    PointerClick,
    PongEvent,
    SetPowerUpIntent,
    Tick,
    TogglePause,
)
from power_pong.scenes.pong.systems import PongSystem, default_systems

TICK_SYSTEMS = default_systems()

START_MENU = MenuScene()
PAUSE_MENU = PauseScene()
END_MENU = EndScene()


def run_tick(
    state: GameState, systems: Iterable[PongSystem] = TICK_SYSTEMS
) -> GameState:
    """
    One simulation step. A paused game is returned untouched.

    :param state: Current game state.
    :type state: GameState

    :param systems: Systems to run, already sorted by order.
    :type systems: Iterable[PongSystem]

    :return: The next state.
    :rtype: GameState
    """
    if state.meta.is_paused:
        return state
    for system in systems:
        state = system.step(state)
    return state


def _on_tick(state: GameState, _event: Tick) -> GameState:
    return run_tick(state)


def _on_move(state: GameState, event: MovePaddle) -> GameState:
    return state.with_paddle("PLAYER", direction=event.direction)


def _on_pause(state: GameState, _event: TogglePause) -> GameState:
    meta = state.meta
    if not meta.has_started or meta.has_ended:
        return state
    logger.info("Resuming game" if meta.is_paused else "Pausing game")
    return state.with_meta(is_paused=not meta.is_paused)


def _on_power_up_intent(state: GameState, event: SetPowerUpIntent) -> GameState:
    return state.with_meta(power_up_intent=event.active)


def _on_click(state: GameState, event: PointerClick) -> GameState:
    meta = state.meta
    if not meta.has_started:
        return START_MENU.handle_click(state, event)
    if meta.has_ended:
        return END_MENU.handle_click(state, event)
    if meta.is_paused:
        return PAUSE_MENU.handle_click(state, event)
    return state


EVENT_HANDLERS: dict[type, Callable[[GameState, PongEvent], GameState]] = {
    Tick: _on_tick,
    MovePaddle: _on_move,
    TogglePause: _on_pause,
    SetPowerUpIntent: _on_power_up_intent,
    PointerClick: _on_click,
}


def reduce_state(state: GameState, event: PongEvent) -> GameState:
    """
    Apply one event to the game.

    :param state: Current game state.
    :type state: GameState

    :param event: Event to apply.
    :type event: PongEvent

    :return: The next state.
    :rtype: GameState

    :raises TypeError: If the event is not one of the game's event types.
    """
    handler = EVENT_HANDLERS.get(type(event))
    if handler is None:
        raise TypeError(f"Unhandled event type: {type(event).__name__}")
    return handler(state, event)


def replay(
    events: Iterable[PongEvent], state: GameState = INITIAL_STATE
) -> Iterator[GameState]:
    """
    Feed ``events`` through the reducer, yielding the state after each.

    :param events: Events in arrival order.
    :type events: Iterable[PongEvent]

    :param state: Starting state.
    :type state: GameState
    """
    for event in events:
        state = reduce_state(state, event)
        yield state


@dataclass
class PongScene:
    """
    Holds the current game state for an outer loop.

    Events must come in one at a time; ``state`` is a read-only snapshot.
    """

    state: GameState = INITIAL_STATE
    ticks: int = 0
    history: list[GameState] = field(default_factory=list, repr=False)
    record: bool = False

    def handle(self, event: PongEvent) -> GameState:
        """Apply ``event`` and return the new snapshot."""
        if isinstance(event, Tick):
            self.ticks += 1
        self.state = reduce_state(self.state, event)
        if self.record:
            self.history.append(self.state)
        return self.state

    def reset(self) -> GameState:
        """Back to the start menu."""
        self.state = INITIAL_STATE
        self.ticks = 0
        self.history.clear()
        return self.state
