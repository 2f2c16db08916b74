"""Service test fixtures — virtual-time session registry + FastAPI test client.

The ASGI transport does not run the app lifespan, so the registry the
lifespan would create is installed on app.state directly.
"""

import pytest
from httpx import ASGITransport, AsyncClient

from trinity.main import app
from trinity.services.navigation_sessions import NavigationSessionRegistry


@pytest.fixture
def registry(scheduler) -> NavigationSessionRegistry:
    """Registry whose sessions all share the test's VirtualScheduler."""
    return NavigationSessionRegistry(scheduler_factory=lambda: scheduler, max_sessions=3)


@pytest.fixture
async def client(registry):
    """Async HTTP client bound to the app with the virtual-time registry."""
    app.state.navigation_sessions = registry
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
    registry.clear()
    del app.state.navigation_sessions
