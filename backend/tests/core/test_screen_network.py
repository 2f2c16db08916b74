"""Screen Network tests — the controller's reference graph."""

from trinity.core.domain_types import ScreenCategory
from trinity.core.screen_network import ScreenNetwork, build_screen_network


def test_empty_network_is_uninitialized():
    network = ScreenNetwork()
    assert not network.initialized
    assert not network.knows("dashboard")


def test_build_from_parser_spec(project_spec):
    network = build_screen_network(project_spec)
    assert network.initialized
    assert network.screens["dashboard"].type == ScreenCategory.MAIN
    assert network.screens["create_project"].available_actions == ("save_button",)
    assert set(network.connections) == {
        "dashboard->project_detail",
        "dashboard->create_project",
        "project_detail->dashboard",
        "create_project->dashboard",
    }
    assert [c.to_screen for c in network.connections_from("dashboard")] == [
        "project_detail", "create_project",
    ]


def test_unknown_endpoints_and_parallel_flows():
    network = build_screen_network({
        "stateNodes": [{"interfaceName": "a"}, {"interfaceName": "b"}],
        "parsedFlows": [
            {"fromInterface": "a", "redirectTo": "b", "trigger": "first"},
            {"fromInterface": "a", "redirectTo": "b", "trigger": "second", "name": "goB"},
            {"fromInterface": "a", "redirectTo": "ghost", "trigger": "x"},
        ],
    })
    assert list(network.connections) == ["a->b"]
    conn = network.connections["a->b"]
    assert conn.trigger == "second"
    assert conn.action_name == "goB"


def test_to_dict_uses_from_to_keys(project_spec):
    data = build_screen_network(project_spec).to_dict()
    assert data["initialized"] is True
    assert data["connections"][0] == {
        "id": "dashboard->project_detail",
        "from": "dashboard",
        "to": "project_detail",
        "trigger": "open_project",
        "action": None,
    }
    assert data["screens"][0]["type"] == "main"
