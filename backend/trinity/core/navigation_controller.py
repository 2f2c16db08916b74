"""Navigation Controller — run-time state machine driving screen transitions in time.

States: Idle -> Navigating -> Idle, with a transient PathLit highlight that
overlaps Navigating and outlives it by clear_delay_ms.

Invariants:
    - Sole writer of NavigationState, PathEffect and the business-logic queue
    - Re-entrancy guard: target == current_screen without a "refresh" action is a no-op
    - Phase 1 (sync): is_navigating, previous_screen, NAVIGATION_START, path lit
    - Phase 1b (sync): business-logic steps scheduled at index * step_stagger_ms
    - Phase 2 (+commit_delay_ms): current_screen committed, history appended, NAVIGATION_COMPLETE
    - Phase 3 (+clear_delay_ms after phase 2): live highlight cleared, path_history kept
    - Last call wins: a navigation that passes the guard cancels every pending
      timer of the previous one (a superseded transition never commits)
    - Unknown targets are accepted; they are logged and emitted, never raised

Design Decisions:
    - Scheduler injected, not global timers: tests drive virtual time (ADR: deterministic phases)
    - Listener callbacks over ambient stores: several sessions coexist without cross-talk
    - Listener failures are logged and isolated — never crash the state machine
"""

import itertools
import logging
from collections.abc import Callable
from dataclasses import dataclass
from functools import partial
from typing import Any

from trinity.core.business_logic import StepTemplate, steps_for, transition_key
from trinity.core.domain_types import (
    BUSINESS_STEP_TYPE,
    DEFAULT_CLEAR_DELAY_MS,
    DEFAULT_COMMIT_DELAY_MS,
    DEFAULT_INITIAL_SCREEN,
    DEFAULT_STEP_STAGGER_MS,
    PATH_GLOW_EFFECT,
    PATH_HISTORY_EFFECT,
    REFRESH_KEYWORD,
    NavigationActionType,
    NavigationEventType,
    ScreenCategory,
)
from trinity.core.navigation_state import (
    ActiveEffect,
    BusinessLogicStep,
    HistoryEntry,
    NavigationAction,
    NavigationState,
    PathEffect,
    PathHistoryEntry,
)
from trinity.core.scheduler import Scheduler, TimerHandle
from trinity.core.screen_classification import classify_screen_type
from trinity.core.screen_network import ScreenNetwork, build_screen_network

logger = logging.getLogger(__name__)

Listener = Callable[[dict], None]


@dataclass(frozen=True)
class NavigationTimings:
    """Phase delays in milliseconds."""
    commit_delay_ms: float = DEFAULT_COMMIT_DELAY_MS
    clear_delay_ms: float = DEFAULT_CLEAR_DELAY_MS
    step_stagger_ms: float = DEFAULT_STEP_STAGGER_MS


def is_refresh(user_action: str | None) -> bool:
    return user_action is not None and REFRESH_KEYWORD in user_action


class NavigationController:
    """Owns one navigation session: state, path highlight, business-logic queue."""

    def __init__(
        self,
        scheduler: Scheduler,
        timings: NavigationTimings | None = None,
        initial_screen: str = DEFAULT_INITIAL_SCREEN,
        session_id: str | None = None,
    ):
        self._scheduler = scheduler
        self._timings = timings or NavigationTimings()
        self._session_id = session_id
        self._state = NavigationState(current_screen=initial_screen)
        self._effects = PathEffect()
        self._network = ScreenNetwork()
        self._listeners: list[Listener] = []
        self._pending: list[TimerHandle] = []
        self._transition_seq = itertools.count(1)

    # --- Read-only views --------------------------------------------------

    @property
    def current_screen(self) -> str:
        return self._state.current_screen

    @property
    def previous_screen(self) -> str | None:
        return self._state.previous_screen

    @property
    def is_navigating(self) -> bool:
        return self._state.is_navigating

    @property
    def business_logic_queue(self) -> tuple[BusinessLogicStep, ...]:
        return tuple(self._state.business_logic_queue)

    @property
    def screen_history(self) -> tuple[HistoryEntry, ...]:
        return tuple(self._state.screen_history)

    @property
    def last_action(self) -> NavigationAction | None:
        return self._state.last_action

    @property
    def network(self) -> ScreenNetwork:
        return self._network

    @property
    def timings(self) -> NavigationTimings:
        return self._timings

    # --- Observation ------------------------------------------------------

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener for navigation events; returns an unsubscribe callable."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _emit(self, event_type: NavigationEventType, data: dict) -> None:
        event = {"type": event_type.value, "data": data}
        for listener in list(self._listeners):
            try:
                listener(event)
            except Exception:
                logger.exception(
                    f"Navigation listener failed on {event_type.value}",
                    extra={"session_id": self._session_id, "event_type": event_type.value},
                )

    # --- Entry points -----------------------------------------------------

    def navigate_to_screen(
        self, target: str, source: str = "unknown", user_action: str | None = None,
    ) -> None:
        """Start a transition to target. Fire-and-forget; observe via snapshots/events."""
        previous = self._state.current_screen
        logger.info(
            f"Navigation: {previous} -> {target} (from {source})",
            extra={"session_id": self._session_id, "screen": target},
        )

        if previous == target and not is_refresh(user_action):
            logger.info(
                "Already on target screen, skipping navigation",
                extra={"session_id": self._session_id, "screen": target},
            )
            self._emit(NavigationEventType.NAVIGATION_SKIPPED, {
                "screen": target, "source": source, "user_action": user_action,
            })
            return

        if self._network.initialized and not self._network.knows(target):
            logger.warning(
                f"Navigating to unknown screen '{target}'",
                extra={"session_id": self._session_id, "screen": target},
            )
            self._emit(NavigationEventType.UNKNOWN_SCREEN, {
                "screen": target, "from": previous, "source": source,
            })

        self._cancel_pending()

        # Phase 1
        self._state.is_navigating = True
        self._state.previous_screen = previous
        self._state.last_action = NavigationAction(
            type=NavigationActionType.NAVIGATION_START,
            from_screen=previous, to_screen=target,
            source=source, user_action=user_action,
        )
        self._emit(NavigationEventType.NAVIGATION_START, self._state.last_action.to_dict())
        self._light_up_path(previous, target)

        # Phase 1b
        self._schedule_business_logic(previous, target, user_action)

        # Phase 2 (schedules phase 3 when it fires)
        self._schedule(
            self._timings.commit_delay_ms,
            partial(self._commit, previous, target, source, user_action),
        )

    def initialize_screen_network(self, specification: Any) -> ScreenNetwork:
        """(Re)build the reference network from a parsed specification."""
        self._network = build_screen_network(specification)
        logger.info(
            f"Screen network initialized: {len(self._network.screens)} screens, "
            f"{len(self._network.connections)} connections",
            extra={"session_id": self._session_id},
        )
        self._emit(NavigationEventType.NETWORK_INITIALIZED, {
            "screens": len(self._network.screens),
            "connections": len(self._network.connections),
        })
        return self._network

    def classify_screen(self, name: str) -> ScreenCategory:
        return classify_screen_type(name)

    def node_clicked(self, screen_name: str) -> None:
        """A node was clicked in the flow diagram."""
        self.navigate_to_screen(screen_name, "trinity_diagram", "node_click")

    def app_button_clicked(self, button_name: str, target_screen: str) -> None:
        """A button was clicked in the live app."""
        self.navigate_to_screen(target_screen, "live_app", f"button_{button_name}")

    def app_initialized(self, initial_screen: str) -> None:
        """Set the starting screen without a transition (no timers, no highlight)."""
        self._state.current_screen = initial_screen
        self._state.last_action = NavigationAction(
            type=NavigationActionType.APP_INITIALIZED, to_screen=initial_screen,
        )
        self._emit(NavigationEventType.APP_INITIALIZED, self._state.last_action.to_dict())

    def dispose(self) -> None:
        """Cancel all pending timers and drop listeners."""
        self._cancel_pending()
        self._listeners.clear()

    # --- Phases -----------------------------------------------------------

    def _light_up_path(self, from_screen: str, to_screen: str) -> None:
        key = transition_key(from_screen, to_screen)
        self._effects.active_nodes = {from_screen, to_screen}
        self._effects.glowing_connections = {key}
        self._effects.path_history.append(PathHistoryEntry(
            from_screen=from_screen, to_screen=to_screen, effect=PATH_HISTORY_EFFECT,
        ))
        self._effects.current_effect = ActiveEffect(
            type=PATH_GLOW_EFFECT, from_screen=from_screen, to_screen=to_screen,
        )
        self._emit(NavigationEventType.PATH_LIT, {"from": from_screen, "to": to_screen, "connection": key})

    def _schedule_business_logic(
        self, from_screen: str, to_screen: str, user_action: str | None,
    ) -> None:
        transition_id = next(self._transition_seq)
        for index, template in enumerate(steps_for(from_screen, to_screen, user_action)):
            self._schedule(
                index * self._timings.step_stagger_ms,
                partial(
                    self._enqueue_step, transition_id, index, template,
                    from_screen, to_screen, user_action,
                ),
            )

    def _enqueue_step(
        self,
        transition_id: int,
        index: int,
        template: StepTemplate,
        from_screen: str,
        to_screen: str,
        user_action: str | None,
    ) -> None:
        step = BusinessLogicStep(
            id=f"bl_{transition_id}_{index}",
            step=template.step,
            description=template.description,
            type=BUSINESS_STEP_TYPE,
            from_screen=from_screen,
            to_screen=to_screen,
            user_action=user_action,
        )
        self._state.business_logic_queue.append(step)
        self._emit(NavigationEventType.BUSINESS_LOGIC_STEP, step.to_dict())

    def _commit(
        self, previous: str, target: str, source: str, user_action: str | None,
    ) -> None:
        self._state.current_screen = target
        self._state.previous_screen = previous
        self._state.screen_history.append(HistoryEntry(screen=target, user_action=user_action))
        self._state.is_navigating = False
        self._state.last_action = NavigationAction(
            type=NavigationActionType.NAVIGATION_COMPLETE,
            from_screen=previous, to_screen=target,
            source=source, user_action=user_action,
        )
        logger.debug(
            f"Navigation committed: {previous} -> {target}",
            extra={"session_id": self._session_id, "screen": target},
        )
        self._emit(NavigationEventType.NAVIGATION_COMPLETE, self._state.last_action.to_dict())
        self._schedule(self._timings.clear_delay_ms, self._clear_path_effects)

    def _clear_path_effects(self) -> None:
        self._effects.clear_active()
        self._emit(NavigationEventType.PATH_CLEARED, {})

    # --- Timers -----------------------------------------------------------

    def _schedule(self, delay_ms: float, action: Callable[[], None]) -> None:
        self._pending.append(self._scheduler.call_later(delay_ms, action))

    def _cancel_pending(self) -> None:
        for handle in self._pending:
            handle.cancel()
        self._pending.clear()

    # --- Snapshots --------------------------------------------------------

    def navigation_snapshot(self) -> dict:
        return self._state.to_dict()

    def path_effect_snapshot(self) -> dict:
        return self._effects.to_dict()

    def business_logic_snapshot(self) -> list[dict]:
        return [s.to_dict() for s in self._state.business_logic_queue]

    def network_snapshot(self) -> dict:
        return self._network.to_dict()

    def snapshot(self) -> dict:
        return {
            "session_id": self._session_id,
            "navigation": self.navigation_snapshot(),
            "path_effect": self.path_effect_snapshot(),
            "business_logic_queue": self.business_logic_snapshot(),
            "network": self.network_snapshot(),
        }
