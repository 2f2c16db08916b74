"""Root conftest — shared fixtures for core and API tests."""

import os

import pytest

from trinity.core.navigation_controller import NavigationController, NavigationTimings
from trinity.core.scheduler import VirtualScheduler

# Plain-text logs keep pytest's captured output readable
os.environ.setdefault("LOG_FORMAT", "text")


@pytest.fixture
def scheduler() -> VirtualScheduler:
    return VirtualScheduler()


@pytest.fixture
def controller(scheduler) -> NavigationController:
    """Controller on virtual time with the default 300/2000/200 ms timings."""
    return NavigationController(scheduler, NavigationTimings(), session_id="test-session")


@pytest.fixture
def project_spec() -> dict:
    """Parser-shaped specification for a small project-management app."""
    return {
        "stateNodes": [
            {"interfaceName": "dashboard", "availableActions": ["open_project", "new_project_button"]},
            {"interfaceName": "project_detail", "availableActions": ["back"]},
            {"interfaceName": "create_project", "availableActions": ["save_button"]},
        ],
        "parsedFlows": [
            {"fromInterface": "dashboard", "redirectTo": "project_detail", "trigger": "open_project"},
            {"fromInterface": "dashboard", "redirectTo": "create_project", "trigger": "new_project"},
            {"fromInterface": "project_detail", "redirectTo": "dashboard", "trigger": "back"},
            {"fromInterface": "create_project", "redirectTo": "dashboard", "trigger": "save"},
        ],
    }
