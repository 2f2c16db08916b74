"""Navigation State — run-time records owned by the NavigationController.

Invariants:
    - Bounded containers evict oldest first: screen_history (10),
      business_logic_queue (20), path_history (5)
    - Only NavigationController mutates these records
    - to_dict() returns copies: snapshots never alias live containers

Design Decisions:
    - deque(maxlen=...) for FIFO eviction: single writer, no conflict resolution needed
    - Separate PathEffect record: the highlight is transient and cleared on
      its own timer, independent of the committed navigation state
"""

from collections import deque
from dataclasses import dataclass, field
from datetime import datetime, timezone

from trinity.core.domain_types import (
    BUSINESS_LOGIC_QUEUE_CAPACITY,
    DEFAULT_INITIAL_SCREEN,
    PATH_HISTORY_CAPACITY,
    SCREEN_HISTORY_CAPACITY,
    NavigationActionType,
)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class NavigationAction:
    """Descriptor of the last dispatched action."""
    type: NavigationActionType
    to_screen: str
    from_screen: str | None = None
    source: str | None = None
    user_action: str | None = None
    timestamp: datetime = field(default_factory=utc_now)

    def to_dict(self) -> dict:
        return {
            "type": self.type.value,
            "from": self.from_screen,
            "to": self.to_screen,
            "source": self.source,
            "user_action": self.user_action,
            "timestamp": self.timestamp.isoformat(),
        }


@dataclass(frozen=True)
class HistoryEntry:
    screen: str
    user_action: str | None = None
    timestamp: datetime = field(default_factory=utc_now)

    def to_dict(self) -> dict:
        return {
            "screen": self.screen,
            "user_action": self.user_action,
            "timestamp": self.timestamp.isoformat(),
        }


@dataclass(frozen=True)
class BusinessLogicStep:
    """One synthetic processing entry in the business-logic queue."""
    id: str
    step: str
    description: str
    type: str
    from_screen: str | None
    to_screen: str
    user_action: str | None
    timestamp: datetime = field(default_factory=utc_now)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "step": self.step,
            "description": self.description,
            "type": self.type,
            "from": self.from_screen,
            "to": self.to_screen,
            "user_action": self.user_action,
            "timestamp": self.timestamp.isoformat(),
        }


@dataclass(frozen=True)
class PathHistoryEntry:
    from_screen: str | None
    to_screen: str
    effect: str
    timestamp: datetime = field(default_factory=utc_now)

    def to_dict(self) -> dict:
        return {
            "from": self.from_screen,
            "to": self.to_screen,
            "effect": self.effect,
            "timestamp": self.timestamp.isoformat(),
        }


@dataclass(frozen=True)
class ActiveEffect:
    type: str
    from_screen: str | None
    to_screen: str
    start_time: datetime = field(default_factory=utc_now)

    def to_dict(self) -> dict:
        return {
            "type": self.type,
            "from": self.from_screen,
            "to": self.to_screen,
            "start_time": self.start_time.isoformat(),
        }


@dataclass
class NavigationState:
    """Committed navigation state — single owner, mutable."""
    current_screen: str = DEFAULT_INITIAL_SCREEN
    previous_screen: str | None = None
    screen_history: deque[HistoryEntry] = field(
        default_factory=lambda: deque(maxlen=SCREEN_HISTORY_CAPACITY),
    )
    business_logic_queue: deque[BusinessLogicStep] = field(
        default_factory=lambda: deque(maxlen=BUSINESS_LOGIC_QUEUE_CAPACITY),
    )
    is_navigating: bool = False
    last_action: NavigationAction | None = None

    def to_dict(self) -> dict:
        return {
            "current_screen": self.current_screen,
            "previous_screen": self.previous_screen,
            "screen_history": [h.to_dict() for h in self.screen_history],
            "is_navigating": self.is_navigating,
            "last_action": self.last_action.to_dict() if self.last_action else None,
        }


@dataclass
class PathEffect:
    """Transient highlight of the in-flight transition."""
    active_nodes: set[str] = field(default_factory=set)
    glowing_connections: set[str] = field(default_factory=set)
    path_history: deque[PathHistoryEntry] = field(
        default_factory=lambda: deque(maxlen=PATH_HISTORY_CAPACITY),
    )
    current_effect: ActiveEffect | None = None

    @property
    def is_lit(self) -> bool:
        return bool(self.active_nodes or self.glowing_connections)

    def clear_active(self) -> None:
        """Drop the live highlight; path_history is kept."""
        self.active_nodes = set()
        self.glowing_connections = set()
        self.current_effect = None

    def to_dict(self) -> dict:
        return {
            "active_nodes": sorted(self.active_nodes),
            "glowing_connections": sorted(self.glowing_connections),
            "path_history": [p.to_dict() for p in self.path_history],
            "current_effect": self.current_effect.to_dict() if self.current_effect else None,
        }
