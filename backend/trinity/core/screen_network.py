"""Screen Network — the navigation engine's own reference graph of screens and connections.

Invariants:
    - Built from the same InterfaceNode/FlowRecord shapes as the validator's graph
    - Connections keyed "<from>-><to>"; parallel flows collapse onto one key (last wins)
    - Flows with an unknown endpoint are not stored
    - Replaced wholesale on re-initialization, never patched

Design Decisions:
    - Reuses build_graph for endpoint resolution so both graphs agree on which
      connections exist, while staying a separate instance owned by the controller
"""

from dataclasses import dataclass, field
from typing import Any

from trinity.core.domain_types import ScreenCategory
from trinity.core.graph_builder import build_graph
from trinity.core.screen_classification import classify_screen_type
from trinity.core.spec_records import split_specification


@dataclass(frozen=True)
class Screen:
    name: str
    type: ScreenCategory
    available_actions: tuple[str, ...] = ()
    id: str | None = None

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "type": self.type.value,
            "available_actions": list(self.available_actions),
        }


@dataclass(frozen=True)
class ScreenConnection:
    id: str
    from_screen: str
    to_screen: str
    trigger: str
    action_name: str | None = None

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "from": self.from_screen,
            "to": self.to_screen,
            "trigger": self.trigger,
            "action": self.action_name,
        }


@dataclass
class ScreenNetwork:
    screens: dict[str, Screen] = field(default_factory=dict)
    connections: dict[str, ScreenConnection] = field(default_factory=dict)
    initialized: bool = False

    def knows(self, name: str) -> bool:
        return name in self.screens

    def connections_from(self, name: str) -> list[ScreenConnection]:
        return [c for c in self.connections.values() if c.from_screen == name]

    def to_dict(self) -> dict:
        return {
            "initialized": self.initialized,
            "screens": [s.to_dict() for s in self.screens.values()],
            "connections": [c.to_dict() for c in self.connections.values()],
        }


def build_screen_network(specification: Any) -> ScreenNetwork:
    """Build a ScreenNetwork from a parsed specification (stateNodes + parsedFlows)."""
    interfaces, flows = split_specification(specification)
    graph = build_graph(interfaces, flows)

    network = ScreenNetwork(initialized=True)
    for iface in interfaces:
        network.screens[iface.name] = Screen(
            name=iface.name,
            type=classify_screen_type(iface.name),
            available_actions=iface.available_actions,
            id=iface.id,
        )
    for conn in graph.connections:
        network.connections[conn.id] = ScreenConnection(
            id=conn.id,
            from_screen=conn.source,
            to_screen=conn.target,
            trigger=conn.action,
            action_name=conn.flow_name,
        )
    return network
