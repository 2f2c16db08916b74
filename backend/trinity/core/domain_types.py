"""Domain Types — enums and constants shared by the validator and the navigation engine.

Invariants:
    - Check types, result statuses and navigation action types are str Enums — no raw string matching
    - Keyword tables are ordered tuples; their order is the match priority
    - Capacities of bounded containers live here, nowhere else

Design Decisions:
    - str Enums: serialize to JSON without custom encoders (ADR: snapshots are plain dicts)
    - Keyword tables as tuples over sets: priority order matters for entry detection
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

InterfaceName = NewType("InterfaceName", str)
ConnectionId = NewType("ConnectionId", str)    # "<source>-><target>"


# ─── Enums ───────────────────────────────────────────────────────

class ValidationStatus(str, Enum):
    """Outcome of a single structural check."""
    PASS = "pass"
    FAIL = "fail"
    WARNING = "warning"


class CheckType(str, Enum):
    """The five structural checks, in the order they always run."""
    REACHABILITY = "reachability"
    DEAD_ENDS = "dead_ends"
    ORPHANED_INTERFACES = "orphaned_interfaces"
    TRINITY_COMPLETENESS = "trinity_completeness"
    ACTION_COVERAGE = "action_coverage"


class InterfaceKind(str, Enum):
    """Display weighting tag derived from an interface name."""
    MAIN = "main"
    NORMAL = "normal"


class ScreenCategory(str, Enum):
    """Coarse presentation grouping for screens."""
    AUTH = "auth"
    MAIN = "main"
    ADMIN = "admin"
    ONBOARDING = "onboarding"
    FEATURE = "feature"


class NavigationActionType(str, Enum):
    """Kinds of action descriptors recorded in NavigationState.last_action."""
    NAVIGATION_START = "NAVIGATION_START"
    NAVIGATION_COMPLETE = "NAVIGATION_COMPLETE"
    APP_INITIALIZED = "APP_INITIALIZED"


class NavigationEventType(str, Enum):
    """Events emitted to navigation listeners."""
    NAVIGATION_SKIPPED = "navigation_skipped"
    UNKNOWN_SCREEN = "unknown_screen"
    NAVIGATION_START = "navigation_start"
    PATH_LIT = "path_lit"
    BUSINESS_LOGIC_STEP = "business_logic_step"
    NAVIGATION_COMPLETE = "navigation_complete"
    PATH_CLEARED = "path_cleared"
    APP_INITIALIZED = "app_initialized"
    NETWORK_INITIALIZED = "network_initialized"


# ─── Keyword Tables (order = priority) ───────────────────────────

ENTRY_KEYWORDS: tuple[str, ...] = ("dashboard", "login", "home", "main")
DEAD_END_EXEMPT_KEYWORDS: tuple[str, ...] = (
    "confirmation", "success", "error", "logout",
)
REFRESH_KEYWORD = "refresh"
BUTTON_SUFFIX = "_button"

SCREEN_CATEGORY_KEYWORDS: tuple[tuple[ScreenCategory, tuple[str, ...]], ...] = (
    (ScreenCategory.AUTH, ("login", "auth", "signup")),
    (ScreenCategory.MAIN, ("dashboard", "home", "main")),
    (ScreenCategory.ADMIN, ("admin", "settings")),
    (ScreenCategory.ONBOARDING, ("onboard", "welcome", "tutorial")),
)


# ─── Capacities & Defaults ───────────────────────────────────────

SCREEN_HISTORY_CAPACITY = 10
BUSINESS_LOGIC_QUEUE_CAPACITY = 20
PATH_HISTORY_CAPACITY = 5

DEFAULT_INITIAL_SCREEN = "dashboard"
DEFAULT_COMMIT_DELAY_MS = 300
DEFAULT_CLEAR_DELAY_MS = 2000
DEFAULT_STEP_STAGGER_MS = 200

PATH_GLOW_EFFECT = "path_glow"
PATH_HISTORY_EFFECT = "billie_jean_glow"
BUSINESS_STEP_TYPE = "app_process"
