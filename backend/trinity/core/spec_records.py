"""Specification Records — InterfaceNode and FlowRecord value types plus coercion from raw dicts.

Invariants:
    - Records are frozen: created once per loaded specification, never mutated
    - Coercion never raises on missing keys — absent names become "" and are
      dropped later by the graph builder (flows) or kept as-is (interfaces)
    - Key aliases are tried in order; first present key wins

Design Decisions:
    - Accept both camelCase (parser output) and snake_case keys: the parsing
      collaborator is external and loosely structured (ADR: tolerant reader)
    - Dataclass over pydantic in core: no validation layer inside the functional core
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from trinity.core.screen_classification import classify_interface_kind
from trinity.core.domain_types import InterfaceKind

_INTERFACE_NAME_KEYS = ("interfaceName", "interface_name", "name")
_INTERFACE_ACTION_KEYS = ("availableActions", "available_actions", "actions")
_FLOW_FROM_KEYS = ("fromInterface", "from_interface", "from", "source")
_FLOW_TO_KEYS = ("redirectTo", "to_interface", "to", "target")
_FLOW_TRIGGER_KEYS = ("trigger", "action")
_FLOW_NAME_KEYS = ("name", "actionName")


@dataclass(frozen=True)
class InterfaceNode:
    """One screen/state of the specification."""
    name: str
    available_actions: tuple[str, ...] = ()
    id: str | None = None

    @property
    def kind(self) -> InterfaceKind:
        return classify_interface_kind(self.name)


@dataclass(frozen=True)
class FlowRecord:
    """One raw flow as supplied by the parser; endpoints may be unknown or empty."""
    from_interface: str
    to_interface: str
    trigger: str = ""
    label: str | None = None
    name: str | None = None


def _first(raw: Mapping[str, Any], keys: tuple[str, ...], default: Any = None) -> Any:
    for key in keys:
        if key in raw and raw[key] is not None:
            return raw[key]
    return default


def coerce_interface(raw: InterfaceNode | Mapping[str, Any]) -> InterfaceNode:
    """Normalize one interface record."""
    if isinstance(raw, InterfaceNode):
        return raw
    actions = _first(raw, _INTERFACE_ACTION_KEYS, ())
    node_id = raw.get("id")
    return InterfaceNode(
        name=str(_first(raw, _INTERFACE_NAME_KEYS, "")),
        available_actions=tuple(str(a) for a in actions),
        id=str(node_id) if node_id is not None else None,
    )


def coerce_flow(raw: FlowRecord | Mapping[str, Any]) -> FlowRecord:
    """Normalize one flow record."""
    if isinstance(raw, FlowRecord):
        return raw
    name = _first(raw, _FLOW_NAME_KEYS)
    label = raw.get("label")
    return FlowRecord(
        from_interface=str(_first(raw, _FLOW_FROM_KEYS, "")),
        to_interface=str(_first(raw, _FLOW_TO_KEYS, "")),
        trigger=str(_first(raw, _FLOW_TRIGGER_KEYS, "")),
        label=str(label) if label is not None else None,
        name=str(name) if name is not None else None,
    )


def coerce_interfaces(
    raw: Iterable[InterfaceNode | Mapping[str, Any]],
) -> list[InterfaceNode]:
    return [coerce_interface(r) for r in raw]


def coerce_flows(raw: Iterable[FlowRecord | Mapping[str, Any]]) -> list[FlowRecord]:
    return [coerce_flow(r) for r in raw]


def split_specification(specification: Any) -> tuple[list[InterfaceNode], list[FlowRecord]]:
    """Extract (interfaces, flows) from a parsed specification.

    Accepts a mapping with ``stateNodes``/``interfaces`` and
    ``parsedFlows``/``flows`` keys, or any object exposing ``interfaces``
    and ``flows`` attributes. Missing parts become empty lists.
    """
    if isinstance(specification, Mapping):
        interfaces = _first(specification, ("stateNodes", "interfaces"), [])
        flows = _first(specification, ("parsedFlows", "flows"), [])
    else:
        interfaces = getattr(specification, "interfaces", None) or []
        flows = getattr(specification, "flows", None) or []
    return coerce_interfaces(interfaces), coerce_flows(flows)
