"""Navigation Controller tests — phases on virtual time, guard, events, bounded state.

Tests cover:
    - Phase 1 synchronous effects, phase 2 commit at commit_delay_ms,
      phase 3 clear at clear_delay_ms after commit
    - Business-logic steps staggered by step_stagger_ms
    - Re-entrancy guard (no mutation, navigation_skipped event) and refresh override
    - Last call wins: superseded transitions never commit
    - Unknown screens: warned and emitted only once a network is loaded
    - Bounded containers: history 10, business-logic queue 20, path history 5
    - Listener isolation, unsubscribe, dispose
    - Entry-point wrappers: node_clicked, app_button_clicked, app_initialized
    - Snapshots
"""

from trinity.core.domain_types import NavigationActionType, ScreenCategory
from trinity.core.navigation_controller import NavigationController, NavigationTimings, is_refresh


def _collect(controller) -> list[dict]:
    events: list[dict] = []
    controller.subscribe(events.append)
    return events


def _types(events: list[dict]) -> list[str]:
    return [e["type"] for e in events]


# --- Phases -------------------------------------------------------------------

def test_phase_one_is_synchronous(controller, scheduler):
    controller.navigate_to_screen("project_detail", "test")

    assert controller.is_navigating is True
    assert controller.previous_screen == "dashboard"
    assert controller.current_screen == "dashboard"
    assert controller.last_action.type == NavigationActionType.NAVIGATION_START
    effect = controller.path_effect_snapshot()
    assert effect["active_nodes"] == ["dashboard", "project_detail"]
    assert effect["glowing_connections"] == ["dashboard->project_detail"]
    assert effect["current_effect"]["type"] == "path_glow"
    assert effect["path_history"][0]["effect"] == "billie_jean_glow"


def test_commit_happens_at_commit_delay(controller, scheduler):
    controller.navigate_to_screen("project_detail", "test")

    scheduler.advance(299)
    assert controller.current_screen == "dashboard"
    assert controller.is_navigating is True

    scheduler.advance(1)
    assert controller.current_screen == "project_detail"
    assert controller.previous_screen == "dashboard"
    assert controller.is_navigating is False
    assert [h.screen for h in controller.screen_history] == ["project_detail"]
    assert controller.last_action.type == NavigationActionType.NAVIGATION_COMPLETE


def test_highlight_clears_after_clear_delay_but_history_stays(controller, scheduler):
    controller.navigate_to_screen("project_detail", "test")

    scheduler.advance(300 + 1999)
    assert controller.path_effect_snapshot()["active_nodes"]

    scheduler.advance(1)
    effect = controller.path_effect_snapshot()
    assert effect["active_nodes"] == []
    assert effect["glowing_connections"] == []
    assert effect["current_effect"] is None
    assert len(effect["path_history"]) == 1


def test_business_logic_steps_are_staggered(controller, scheduler):
    controller.navigate_to_screen("project_detail", "test")
    assert controller.business_logic_queue == ()

    scheduler.advance(0)
    assert [s.step for s in controller.business_logic_queue] == ["validate_project_access"]

    scheduler.advance(200)
    assert len(controller.business_logic_queue) == 2

    scheduler.advance(200)
    steps = controller.business_logic_queue
    assert [s.step for s in steps] == [
        "validate_project_access", "load_project_data", "prepare_ui_state",
    ]
    assert [s.id for s in steps] == ["bl_1_0", "bl_1_1", "bl_1_2"]
    assert all(s.type == "app_process" for s in steps)
    assert steps[0].from_screen == "dashboard"
    assert steps[0].to_screen == "project_detail"


def test_event_sequence_for_one_transition(controller, scheduler):
    events = _collect(controller)
    controller.navigate_to_screen("project_detail", "test", "open_project")
    scheduler.run_all()

    assert _types(events) == [
        "navigation_start",
        "path_lit",
        "business_logic_step",
        "business_logic_step",
        "navigation_complete",
        "business_logic_step",
        "path_cleared",
    ]
    assert events[0]["data"]["from"] == "dashboard"
    assert events[0]["data"]["to"] == "project_detail"
    assert events[0]["data"]["user_action"] == "open_project"


def test_custom_timings_are_honored(scheduler):
    controller = NavigationController(scheduler, NavigationTimings(50, 100, 10))
    controller.navigate_to_screen("create_project", "test")

    scheduler.advance(50)
    assert controller.current_screen == "create_project"
    assert len(controller.business_logic_queue) == 2

    scheduler.advance(100)
    assert controller.path_effect_snapshot()["active_nodes"] == []


# --- Guard --------------------------------------------------------------------

def test_same_screen_is_a_noop(controller, scheduler):
    events = _collect(controller)
    before = controller.snapshot()

    controller.navigate_to_screen("dashboard", "test")

    assert controller.snapshot() == before
    assert scheduler.pending == 0
    assert _types(events) == ["navigation_skipped"]
    assert events[0]["data"]["screen"] == "dashboard"


def test_refresh_action_bypasses_guard(controller, scheduler):
    controller.navigate_to_screen("dashboard", "live_app", "refresh_data")
    assert controller.is_navigating is True

    scheduler.run_all()
    assert controller.current_screen == "dashboard"
    assert [s.step for s in controller.business_logic_queue] == ["process_navigation"]
    assert controller.screen_history[-1].user_action == "refresh_data"


def test_is_refresh():
    assert is_refresh("pull_to_refresh")
    assert not is_refresh("reload")
    assert not is_refresh(None)


# --- Overlapping navigations --------------------------------------------------

def test_second_navigation_supersedes_first(controller, scheduler):
    events = _collect(controller)
    controller.navigate_to_screen("project_detail", "test")
    scheduler.advance(100)
    controller.navigate_to_screen("create_project", "test")
    scheduler.run_all()

    assert controller.current_screen == "create_project"
    assert [h.screen for h in controller.screen_history] == ["create_project"]
    completes = [e for e in events if e["type"] == "navigation_complete"]
    assert len(completes) == 1
    assert completes[0]["data"]["to"] == "create_project"


def test_superseded_steps_already_emitted_stay_queued(controller, scheduler):
    controller.navigate_to_screen("project_detail", "test")
    scheduler.advance(0)
    controller.navigate_to_screen("create_project", "test")
    scheduler.run_all()

    assert [s.step for s in controller.business_logic_queue] == [
        "validate_project_access", "initialize_form", "load_user_defaults",
    ]
    assert controller.business_logic_queue[1].id == "bl_2_0"


def test_new_navigation_cancels_pending_clear(controller, scheduler):
    controller.navigate_to_screen("project_detail", "test")
    scheduler.advance(1000)
    controller.navigate_to_screen("dashboard", "test")

    scheduler.advance(1500)
    # The first clear would have fired at 2300; the second transition's highlight survives
    assert controller.path_effect_snapshot()["active_nodes"] == ["dashboard", "project_detail"]


# --- Unknown screens ----------------------------------------------------------

def test_unknown_screen_is_reported_and_still_navigated(controller, scheduler, project_spec):
    controller.initialize_screen_network(project_spec)
    events = _collect(controller)

    controller.navigate_to_screen("mystery", "test")
    scheduler.run_all()

    assert _types(events)[0] == "unknown_screen"
    assert events[0]["data"] == {"screen": "mystery", "from": "dashboard", "source": "test"}
    assert controller.current_screen == "mystery"


def test_no_unknown_screen_event_before_network_loaded(controller):
    events = _collect(controller)
    controller.navigate_to_screen("anything", "test")
    assert "unknown_screen" not in _types(events)


# --- Bounded containers -------------------------------------------------------

def test_screen_and_path_history_are_bounded(controller, scheduler):
    targets = ["project_detail", "dashboard"] * 6
    for target in targets:
        controller.navigate_to_screen(target, "test")
        scheduler.run_all()

    assert len(controller.screen_history) == 10
    assert controller.screen_history[-1].screen == "dashboard"
    assert len(controller.path_effect_snapshot()["path_history"]) == 5


def test_business_logic_queue_evicts_oldest(controller, scheduler):
    for _ in range(5):
        controller.navigate_to_screen("create_project", "test")
        scheduler.run_all()
        controller.navigate_to_screen("dashboard", "test")
        scheduler.run_all()

    queue = controller.business_logic_queue
    assert len(queue) == 20
    assert queue[-1].id == "bl_10_3"
    assert queue[-1].step == "send_notifications"


# --- Listeners ----------------------------------------------------------------

def test_failing_listener_does_not_break_navigation(controller, scheduler):
    def explode(event):
        raise RuntimeError("listener bug")

    controller.subscribe(explode)
    events = _collect(controller)
    controller.navigate_to_screen("project_detail", "test")
    scheduler.run_all()

    assert controller.current_screen == "project_detail"
    assert "navigation_complete" in _types(events)


def test_unsubscribe_stops_delivery(controller):
    events: list[dict] = []
    unsubscribe = controller.subscribe(events.append)
    unsubscribe()
    unsubscribe()
    controller.navigate_to_screen("project_detail", "test")
    assert events == []


def test_dispose_cancels_timers_and_listeners(controller, scheduler):
    events = _collect(controller)
    controller.navigate_to_screen("project_detail", "test")
    count = len(events)

    controller.dispose()
    assert scheduler.pending == 0
    scheduler.run_all()
    assert len(events) == count
    assert controller.current_screen == "dashboard"


# --- Entry-point wrappers -----------------------------------------------------

def test_node_clicked_tags_diagram_source(controller):
    controller.node_clicked("project_detail")
    assert controller.last_action.source == "trinity_diagram"
    assert controller.last_action.user_action == "node_click"


def test_app_button_clicked_tags_button_action(controller):
    controller.app_button_clicked("new_project", "create_project")
    assert controller.last_action.source == "live_app"
    assert controller.last_action.user_action == "button_new_project"
    assert controller.last_action.to_screen == "create_project"


def test_app_initialized_sets_screen_without_transition(controller, scheduler):
    events = _collect(controller)
    controller.app_initialized("login")

    assert controller.current_screen == "login"
    assert controller.is_navigating is False
    assert controller.last_action.type == NavigationActionType.APP_INITIALIZED
    assert scheduler.pending == 0
    assert controller.path_effect_snapshot()["active_nodes"] == []
    assert _types(events) == ["app_initialized"]


def test_classify_screen(controller):
    assert controller.classify_screen("admin_settings") == ScreenCategory.ADMIN
    assert controller.classify_screen("LoginPage") == ScreenCategory.AUTH


# --- Network and snapshots ----------------------------------------------------

def test_initialize_screen_network_replaces_previous(controller, project_spec):
    events = _collect(controller)
    network = controller.initialize_screen_network(project_spec)
    assert network.initialized
    assert set(network.screens) == {"dashboard", "project_detail", "create_project"}
    assert events[-1] == {
        "type": "network_initialized", "data": {"screens": 3, "connections": 4},
    }

    controller.initialize_screen_network({"stateNodes": [{"interfaceName": "solo"}]})
    assert list(controller.network.screens) == ["solo"]
    assert controller.network.connections == {}


def test_snapshot_shape_and_isolation(controller, scheduler):
    controller.navigate_to_screen("project_detail", "test")
    scheduler.run_all()

    snap = controller.snapshot()
    assert set(snap) == {
        "session_id", "navigation", "path_effect", "business_logic_queue", "network",
    }
    assert snap["session_id"] == "test-session"
    assert snap["navigation"]["current_screen"] == "project_detail"
    assert snap["navigation"]["last_action"]["type"] == "NAVIGATION_COMPLETE"

    snap["navigation"]["screen_history"].clear()
    snap["business_logic_queue"].clear()
    assert len(controller.screen_history) == 1
    assert len(controller.business_logic_queue) == 3
