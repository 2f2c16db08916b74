"""Graph Builder — turns interface and flow records into a ReachabilityGraph.

Invariants:
    - One GraphEntry per interface, created before any flow is processed
    - A flow is registered only when BOTH endpoints name known interfaces;
      otherwise it is dropped silently (the validator surfaces the symptom)
    - Parallel flows between the same pair merge into one reachability fact,
      but each still yields a Connection record
    - Single linear pass; same inputs produce an equal graph

Design Decisions:
    - dict-as-ordered-set for can_reach/reachable_from: deterministic iteration
      order keeps diagnostics stable across runs
    - Pure function; the graph is rebuilt wholesale, never updated incrementally
"""

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from trinity.core.spec_records import (
    FlowRecord,
    InterfaceNode,
    coerce_flows,
    coerce_interfaces,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Connection:
    """Normalized directed edge between two known interfaces."""
    source: str
    target: str
    action: str
    label: str | None = None
    flow_name: str | None = None

    @property
    def id(self) -> str:
        return f"{self.source}->{self.target}"

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "source": self.source,
            "target": self.target,
            "action": self.action,
            "label": self.label,
            "flow_name": self.flow_name,
        }


@dataclass
class GraphEntry:
    """Adjacency facts for one interface."""
    interface: InterfaceNode
    can_reach: dict[str, None] = field(default_factory=dict)
    reachable_from: dict[str, None] = field(default_factory=dict)
    actions: dict[str, None] = field(default_factory=dict)

    @property
    def out_degree(self) -> int:
        return len(self.can_reach)

    @property
    def in_degree(self) -> int:
        return len(self.reachable_from)


@dataclass
class ReachabilityGraph:
    """Read-only view over interfaces and resolved connections."""
    interfaces: list[InterfaceNode] = field(default_factory=list)
    entries: dict[str, GraphEntry] = field(default_factory=dict)
    connections: list[Connection] = field(default_factory=list)

    def __contains__(self, name: object) -> bool:
        return name in self.entries

    def get(self, name: str) -> GraphEntry | None:
        return self.entries.get(name)

    def successors(self, name: str) -> list[str]:
        entry = self.entries.get(name)
        return list(entry.can_reach) if entry else []

    def predecessors(self, name: str) -> list[str]:
        entry = self.entries.get(name)
        return list(entry.reachable_from) if entry else []

    def reachable_from_root(self, root: str) -> set[str]:
        """Transitive closure of can_reach from root (root included).

        Iterative DFS with a visited set — safe on cyclic graphs and deep chains.
        """
        visited: set[str] = set()
        stack = [root]
        while stack:
            name = stack.pop()
            if name in visited:
                continue
            visited.add(name)
            stack.extend(n for n in self.successors(name) if n not in visited)
        return visited

    def to_dict(self) -> dict:
        """JSON-safe projection for diagram layout."""
        return {
            "nodes": [
                {
                    "name": name,
                    "id": entry.interface.id,
                    "kind": entry.interface.kind.value,
                    "available_actions": list(entry.interface.available_actions),
                    "can_reach": list(entry.can_reach),
                    "reachable_from": list(entry.reachable_from),
                    "actions": list(entry.actions),
                }
                for name, entry in self.entries.items()
            ],
            "connections": [c.to_dict() for c in self.connections],
        }


def build_graph(
    interfaces: Iterable[InterfaceNode | Mapping[str, Any]],
    flows: Iterable[FlowRecord | Mapping[str, Any]],
) -> ReachabilityGraph:
    """Build the ReachabilityGraph in a single pass over the flows."""
    nodes = coerce_interfaces(interfaces)
    graph = ReachabilityGraph(interfaces=nodes)
    for node in nodes:
        graph.entries[node.name] = GraphEntry(interface=node)

    dropped = 0
    for flow in coerce_flows(flows):
        from_entry = graph.entries.get(flow.from_interface)
        to_entry = graph.entries.get(flow.to_interface)
        if from_entry is None or to_entry is None:
            dropped += 1
            continue
        from_entry.can_reach[flow.to_interface] = None
        to_entry.reachable_from[flow.from_interface] = None
        from_entry.actions[flow.trigger] = None
        graph.connections.append(Connection(
            source=flow.from_interface,
            target=flow.to_interface,
            action=flow.trigger,
            label=flow.label,
            flow_name=flow.name,
        ))

    logger.debug(
        f"Graph built: {len(graph.entries)} interfaces, "
        f"{len(graph.connections)} connections, {dropped} flows dropped",
    )
    return graph
