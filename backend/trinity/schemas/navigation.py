"""Navigation Schemas — commands and read-only snapshots of a navigation session.

Invariants:
    - Snapshot models mirror NavigationController snapshot dicts exactly
    - "from"/"to" keys kept on the wire via aliases (Python keyword clash)
    - NavigateRequest.target is non-empty; source/user_action optional

Design Decisions:
    - Snapshots are read-only projections for display binding; commands are the
      only way to change navigation state
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from trinity.core.domain_types import NavigationActionType, ScreenCategory
from trinity.schemas.specification import SpecificationIn


class _FromTo(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    from_screen: str | None = Field(None, alias="from")
    to_screen: str = Field(alias="to")


# --- Commands -----------------------------------------------------------------

class SessionCreate(BaseModel):
    """Create a navigation session, optionally with its screen network."""
    specification: SpecificationIn | None = None
    initial_screen: str | None = Field(None, min_length=1)


class NavigateRequest(BaseModel):
    """Trigger a transition (user interaction or diagram-node click)."""
    target: str = Field(min_length=1)
    source: str = "unknown"
    user_action: str | None = None


class AppInitializedRequest(BaseModel):
    screen: str = Field(min_length=1)


# --- Snapshots ----------------------------------------------------------------

class NavigationActionOut(_FromTo):
    type: NavigationActionType
    source: str | None = None
    user_action: str | None = None
    timestamp: datetime


class HistoryEntryOut(BaseModel):
    screen: str
    user_action: str | None = None
    timestamp: datetime


class NavigationStateOut(BaseModel):
    current_screen: str
    previous_screen: str | None = None
    screen_history: list[HistoryEntryOut] = []
    is_navigating: bool
    last_action: NavigationActionOut | None = None


class PathHistoryEntryOut(_FromTo):
    effect: str
    timestamp: datetime


class ActiveEffectOut(_FromTo):
    type: str
    start_time: datetime


class PathEffectOut(BaseModel):
    active_nodes: list[str] = []
    glowing_connections: list[str] = []
    path_history: list[PathHistoryEntryOut] = []
    current_effect: ActiveEffectOut | None = None


class BusinessLogicStepOut(_FromTo):
    id: str
    step: str
    description: str
    type: str
    user_action: str | None = None
    timestamp: datetime


class ScreenOut(BaseModel):
    id: str | None = None
    name: str
    type: ScreenCategory
    available_actions: list[str] = []


class ScreenConnectionOut(_FromTo):
    id: str
    trigger: str
    action: str | None = None


class ScreenNetworkOut(BaseModel):
    initialized: bool
    screens: list[ScreenOut] = []
    connections: list[ScreenConnectionOut] = []


class NavigationSnapshotOut(BaseModel):
    """Everything a display needs to bind to one navigation session."""
    session_id: UUID
    navigation: NavigationStateOut
    path_effect: PathEffectOut
    business_logic_queue: list[BusinessLogicStepOut] = []
    network: ScreenNetworkOut


class ScreenClassificationOut(BaseModel):
    name: str
    category: ScreenCategory
