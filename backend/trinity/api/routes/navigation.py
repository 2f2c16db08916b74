"""Navigation Routes — session lifecycle and commands for the navigation state machine.

Invariants:
    - Sessions come from the registry on app.state — never module-level state
    - navigate returns 202: phases 2-3 complete asynchronously on the event loop
    - Snapshots are read-only copies taken at response time
    - Unknown navigation targets are accepted (warning logged), never 4xx

Design Decisions:
    - Registry resolved through a dependency so tests can swap in a virtual-time registry
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Request, status

from trinity.core.navigation_controller import NavigationController
from trinity.core.screen_classification import classify_screen_type
from trinity.schemas.navigation import (
    AppInitializedRequest,
    NavigateRequest,
    NavigationSnapshotOut,
    ScreenClassificationOut,
    SessionCreate,
)
from trinity.schemas.specification import SpecificationIn
from trinity.services.navigation_sessions import NavigationSessionRegistry

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/navigation", tags=["navigation"])


def get_registry(request: Request) -> NavigationSessionRegistry:
    return request.app.state.navigation_sessions


def get_controller(
    session_id: UUID, registry: NavigationSessionRegistry = Depends(get_registry),
) -> NavigationController:
    return registry.get(session_id)


@router.post(
    "/sessions", response_model=NavigationSnapshotOut,
    status_code=status.HTTP_201_CREATED,
)
async def create_session(
    body: SessionCreate | None = None,
    registry: NavigationSessionRegistry = Depends(get_registry),
):
    """Create an independent navigation session."""
    body = body or SessionCreate()
    specification = body.specification.to_core() if body.specification else None
    _, controller = registry.create(specification, body.initial_screen)
    return controller.snapshot()


@router.get("/sessions/{session_id}", response_model=NavigationSnapshotOut)
async def get_session(controller: NavigationController = Depends(get_controller)):
    return controller.snapshot()


@router.delete("/sessions/{session_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_session(
    session_id: UUID, registry: NavigationSessionRegistry = Depends(get_registry),
):
    """Drop a session, cancelling its pending timers."""
    registry.remove(session_id)


@router.post(
    "/sessions/{session_id}/navigate", response_model=NavigationSnapshotOut,
    status_code=status.HTTP_202_ACCEPTED,
)
async def navigate(
    body: NavigateRequest, controller: NavigationController = Depends(get_controller),
):
    """Start a transition; the response reflects phase 1 only."""
    controller.navigate_to_screen(body.target, body.source, body.user_action)
    return controller.snapshot()


@router.post("/sessions/{session_id}/nodes/{screen_name}/click",
             response_model=NavigationSnapshotOut, status_code=status.HTTP_202_ACCEPTED)
async def click_node(
    screen_name: str, controller: NavigationController = Depends(get_controller),
):
    """Diagram-node click."""
    controller.node_clicked(screen_name)
    return controller.snapshot()


@router.post("/sessions/{session_id}/initialized", response_model=NavigationSnapshotOut)
async def app_initialized(
    body: AppInitializedRequest, controller: NavigationController = Depends(get_controller),
):
    """Live app reports its starting screen."""
    controller.app_initialized(body.screen)
    return controller.snapshot()


@router.put("/sessions/{session_id}/network", response_model=NavigationSnapshotOut)
async def initialize_network(
    body: SpecificationIn, controller: NavigationController = Depends(get_controller),
):
    """Replace the session's screen network."""
    controller.initialize_screen_network(body.to_core())
    return controller.snapshot()


@router.get("/classify/{screen_name}", response_model=ScreenClassificationOut)
async def classify_screen(screen_name: str):
    """Coarse presentation category for a screen name."""
    return {"name": screen_name, "category": classify_screen_type(screen_name)}
