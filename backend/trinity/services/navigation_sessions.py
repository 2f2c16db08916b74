"""Navigation Sessions — registry of independent NavigationController instances.

Invariants:
    - Each session owns its controller; controllers never share state
    - Removing a session disposes it (pending timers cancelled, listeners dropped)
    - Registry size bounded by max_sessions; exceeding it raises SessionLimitError

Design Decisions:
    - Registry instance held on app.state, created in lifespan (ADR: no global singletons)
    - Scheduler factory injected: asyncio in the app, virtual in tests
"""

import logging
from collections.abc import Callable
from typing import Any
from uuid import UUID, uuid4

from trinity.core.domain_types import DEFAULT_INITIAL_SCREEN
from trinity.core.errors import ErrorContext, ResourceNotFoundError, SessionLimitError
from trinity.core.navigation_controller import NavigationController, NavigationTimings
from trinity.core.scheduler import Scheduler

logger = logging.getLogger(__name__)


class NavigationSessionRegistry:
    """Creates, looks up and disposes navigation sessions."""

    def __init__(
        self,
        scheduler_factory: Callable[[], Scheduler],
        timings: NavigationTimings | None = None,
        initial_screen: str = DEFAULT_INITIAL_SCREEN,
        max_sessions: int = 100,
    ):
        self._scheduler_factory = scheduler_factory
        self._timings = timings or NavigationTimings()
        self._initial_screen = initial_screen
        self._max_sessions = max_sessions
        self._sessions: dict[UUID, NavigationController] = {}

    def __len__(self) -> int:
        return len(self._sessions)

    def __contains__(self, session_id: object) -> bool:
        return session_id in self._sessions

    def create(
        self, specification: Any | None = None, initial_screen: str | None = None,
    ) -> tuple[UUID, NavigationController]:
        """Create a session, optionally initializing its screen network."""
        if len(self._sessions) >= self._max_sessions:
            raise SessionLimitError(self._max_sessions)
        session_id = uuid4()
        controller = NavigationController(
            self._scheduler_factory(),
            timings=self._timings,
            initial_screen=initial_screen or self._initial_screen,
            session_id=str(session_id),
        )
        if specification is not None:
            controller.initialize_screen_network(specification)
        self._sessions[session_id] = controller
        logger.info("Navigation session created", extra={"session_id": str(session_id)})
        return session_id, controller

    def get(self, session_id: UUID) -> NavigationController:
        controller = self._sessions.get(session_id)
        if controller is None:
            raise ResourceNotFoundError(
                "Navigation session", str(session_id),
                ErrorContext(session_id=str(session_id)),
            )
        return controller

    def remove(self, session_id: UUID) -> None:
        controller = self.get(session_id)
        controller.dispose()
        del self._sessions[session_id]
        logger.info("Navigation session removed", extra={"session_id": str(session_id)})

    def clear(self) -> None:
        """Dispose every session (shutdown)."""
        for controller in self._sessions.values():
            controller.dispose()
        self._sessions.clear()
