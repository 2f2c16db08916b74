"""Specification Records tests — tolerant coercion of parser output."""

from types import SimpleNamespace

from trinity.core.spec_records import (
    FlowRecord,
    InterfaceNode,
    coerce_flow,
    coerce_interface,
    split_specification,
)


def test_interface_from_camel_case():
    node = coerce_interface({"interfaceName": "home", "availableActions": ["a", "b"], "id": 7})
    assert node == InterfaceNode(name="home", available_actions=("a", "b"), id="7")


def test_interface_from_snake_case_and_missing_actions():
    assert coerce_interface({"name": "x"}) == InterfaceNode(name="x")


def test_records_pass_through_unchanged():
    node = InterfaceNode(name="home")
    flow = FlowRecord(from_interface="a", to_interface="b")
    assert coerce_interface(node) is node
    assert coerce_flow(flow) is flow


def test_flow_aliases_and_defaults():
    flow = coerce_flow({"fromInterface": "a", "redirectTo": "b", "trigger": "go", "name": "goNext"})
    assert flow == FlowRecord(from_interface="a", to_interface="b", trigger="go", name="goNext")

    partial = coerce_flow({"source": "a"})
    assert partial.to_interface == ""
    assert partial.trigger == ""


def test_first_present_alias_wins_and_none_is_skipped():
    flow = coerce_flow({"fromInterface": None, "from": "a", "to": "b", "action": "tap"})
    assert flow.from_interface == "a"
    assert flow.trigger == "tap"


def test_split_parser_mapping():
    interfaces, flows = split_specification({
        "stateNodes": [{"interfaceName": "a"}],
        "parsedFlows": [{"fromInterface": "a", "redirectTo": "a"}],
    })
    assert [i.name for i in interfaces] == ["a"]
    assert len(flows) == 1


def test_split_object_with_attributes_and_missing_parts():
    spec = SimpleNamespace(interfaces=[InterfaceNode(name="z")], flows=None)
    interfaces, flows = split_specification(spec)
    assert interfaces == [InterfaceNode(name="z")]
    assert flows == []
    assert split_specification({}) == ([], [])
