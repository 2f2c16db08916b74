"""Completeness Validator — five structural checks over the interface/flow graph.

Invariants:
    - Builds the graph exactly once per run; checks never mutate it
    - Checks run in fixed order: reachability, dead_ends, orphaned_interfaces,
      trinity_completeness, action_coverage
    - Each check returns exactly ONE ValidationResult aggregating all findings
    - Checks are independent: none reads another's output
    - Structural defects are data, never exceptions; only absent inputs (None) raise
    - Zero interfaces: reachability fails, everything else passes with empty lists

Design Decisions:
    - Pure check functions over methods: testable without instantiation (ADR: ExMA Functional Core)
    - (b) DO uses the resolved graph, (c) PROCESS uses the raw flow list — a flow
      to a nonexistent destination satisfies (c) but not (b)
    - Orphan and unreachable may both fire for the same interface: complementary
      symptoms of one missing edge
"""

import logging
from collections.abc import Callable, Iterable, Mapping, Sequence
from typing import Any

from trinity.core.domain_types import BUTTON_SUFFIX, CheckType, ValidationStatus
from trinity.core.errors import SpecificationMissingError
from trinity.core.graph_builder import ReachabilityGraph, build_graph
from trinity.core.screen_classification import find_entry_interface, is_exempt_dead_end
from trinity.core.spec_records import (
    FlowRecord,
    InterfaceNode,
    coerce_flows,
    coerce_interfaces,
    split_specification,
)
from trinity.core.validation_report import ValidationReport, ValidationResult

logger = logging.getLogger(__name__)

MISSING_SHOW = "Missing SHOW elements (no interactive actions defined)"
MISSING_DO = "Missing DO actions (no user interactions defined)"
MISSING_PROCESS = "Missing PROCESS logic (no flows from this interface)"

CheckFn = Callable[[ReachabilityGraph, Sequence[FlowRecord]], ValidationResult]


def _result(
    check: CheckType,
    status: ValidationStatus,
    message: str,
    affected: Iterable[str] = (),
    fixes: Iterable[str] = (),
) -> ValidationResult:
    return ValidationResult(
        id=check.value,
        validation_type=check,
        status=status,
        message=message,
        affected_interfaces=tuple(affected),
        suggested_fixes=tuple(fixes),
    )


# --- Check 1: entry-point reachability ----------------------------------------

def check_reachability(
    graph: ReachabilityGraph, flows: Sequence[FlowRecord],
) -> ValidationResult:
    """Every interface must be reachable from the entry interface."""
    entry = find_entry_interface(graph.interfaces)
    if entry is None:
        return _result(
            CheckType.REACHABILITY, ValidationStatus.FAIL,
            "No entry interface found (dashboard, login, home, or main)",
        )

    reachable = graph.reachable_from_root(entry.name)
    unreachable = [
        iface.name for iface in graph.interfaces
        if iface.name not in reachable and iface.name != entry.name
    ]
    if unreachable:
        return _result(
            CheckType.REACHABILITY, ValidationStatus.FAIL,
            f"{len(unreachable)} interfaces are unreachable from entry point",
            unreachable,
            [f"Add navigation path from {entry.name} to {name}" for name in unreachable],
        )
    return _result(
        CheckType.REACHABILITY, ValidationStatus.PASS,
        "All interfaces are reachable from entry point",
    )


# --- Check 2: dead ends -------------------------------------------------------

def check_dead_ends(
    graph: ReachabilityGraph, flows: Sequence[FlowRecord],
) -> ValidationResult:
    """Interfaces with no exits, except intentional terminal screens. Warning only."""
    dead_ends = [
        name for name, entry in graph.entries.items()
        if entry.out_degree == 0 and not is_exempt_dead_end(name)
    ]
    if dead_ends:
        return _result(
            CheckType.DEAD_ENDS, ValidationStatus.WARNING,
            f"{len(dead_ends)} interfaces have no outgoing connections",
            dead_ends,
            [
                f"Add navigation options from {name} (back button, home button, etc.)"
                for name in dead_ends
            ],
        )
    return _result(
        CheckType.DEAD_ENDS, ValidationStatus.PASS,
        "No problematic dead-end interfaces found",
    )


# --- Check 3: orphans ---------------------------------------------------------

def check_orphans(
    graph: ReachabilityGraph, flows: Sequence[FlowRecord],
) -> ValidationResult:
    """Interfaces nobody links to (entry excluded). Hard failure."""
    entry = find_entry_interface(graph.interfaces)
    entry_name = entry.name if entry else None
    orphaned = [
        name for name, node in graph.entries.items()
        if node.in_degree == 0 and name != entry_name
    ]
    if orphaned:
        return _result(
            CheckType.ORPHANED_INTERFACES, ValidationStatus.FAIL,
            f"{len(orphaned)} interfaces have no incoming connections",
            orphaned,
            [f"Add navigation path to {name} from other interfaces" for name in orphaned],
        )
    return _result(
        CheckType.ORPHANED_INTERFACES, ValidationStatus.PASS,
        "No orphaned interfaces found",
    )


# --- Check 4: Trinity (SHOW -> DO -> PROCESS) completeness --------------------

def trinity_issues(
    iface: InterfaceNode, graph: ReachabilityGraph, flows: Sequence[FlowRecord],
) -> list[str]:
    """The SHOW/DO/PROCESS sub-conditions one interface fails, in that order."""
    issues = []
    if not iface.available_actions:
        issues.append(MISSING_SHOW)
    entry = graph.get(iface.name)
    if entry is None or not entry.actions:
        issues.append(MISSING_DO)
    if not any(flow.from_interface == iface.name for flow in flows):
        issues.append(MISSING_PROCESS)
    return issues


def check_trinity_completeness(
    graph: ReachabilityGraph, flows: Sequence[FlowRecord],
) -> ValidationResult:
    incomplete: list[tuple[str, list[str]]] = []
    for iface in graph.interfaces:
        issues = trinity_issues(iface, graph, flows)
        if issues:
            incomplete.append((iface.name, issues))

    if incomplete:
        return _result(
            CheckType.TRINITY_COMPLETENESS, ValidationStatus.FAIL,
            f"{len(incomplete)} interfaces have incomplete Trinity flows",
            [name for name, _ in incomplete],
            [f"{name}: {issue}" for name, issues in incomplete for issue in issues],
        )
    return _result(
        CheckType.TRINITY_COMPLETENESS, ValidationStatus.PASS,
        "All interfaces have complete Trinity flows",
    )


# --- Check 5: action coverage -------------------------------------------------

def action_is_covered(
    interface_name: str, action: str, flows: Sequence[FlowRecord],
) -> bool:
    """A flow from the interface triggers the action, exactly or without '_button'."""
    stripped = action.removesuffix(BUTTON_SUFFIX)
    return any(
        flow.from_interface == interface_name and flow.trigger in (action, stripped)
        for flow in flows
    )


def check_action_coverage(
    graph: ReachabilityGraph, flows: Sequence[FlowRecord],
) -> ValidationResult:
    """Declared actions without a flow. Warning only: in-place toggles are legitimate."""
    uncovered = [
        (iface.name, action)
        for iface in graph.interfaces
        for action in iface.available_actions
        if not action_is_covered(iface.name, action, flows)
    ]
    if uncovered:
        return _result(
            CheckType.ACTION_COVERAGE, ValidationStatus.WARNING,
            f"{len(uncovered)} user actions have no corresponding logic flows",
            [f"{name}.{action}" for name, action in uncovered],
            [f"Add logic flow for {action} in {name} interface" for name, action in uncovered],
        )
    return _result(
        CheckType.ACTION_COVERAGE, ValidationStatus.PASS,
        "All user actions have corresponding logic flows",
    )


# --- Improvement suggestions --------------------------------------------------

def improvement_suggestions(graph: ReachabilityGraph) -> list[dict]:
    """Informational hints for interfaces with fewer than two exits."""
    return [
        {
            "type": "add_connections",
            "interface": iface.name,
            "suggestion": f"Consider adding more navigation options from {iface.name}",
        }
        for iface in graph.interfaces
        if (entry := graph.get(iface.name)) is not None and entry.out_degree < 2
    ]


# --- Composite ----------------------------------------------------------------

CHECKS: tuple[CheckFn, ...] = (
    check_reachability,
    check_dead_ends,
    check_orphans,
    check_trinity_completeness,
    check_action_coverage,
)


def validate_completeness(
    interfaces: Iterable[InterfaceNode | Mapping[str, Any]] | None,
    flows: Iterable[FlowRecord | Mapping[str, Any]] | None,
) -> ValidationReport:
    """Run the full battery and return a fresh report."""
    if interfaces is None:
        raise SpecificationMissingError("interfaces")
    if flows is None:
        raise SpecificationMissingError("flows")

    nodes = coerce_interfaces(interfaces)
    raw_flows = coerce_flows(flows)
    graph = build_graph(nodes, raw_flows)

    report = ValidationReport(
        total_interfaces=len(nodes),
        total_connections=len(graph.connections),
        results=[check(graph, raw_flows) for check in CHECKS],
        improvement_suggestions=improvement_suggestions(graph),
    )
    for result in report.results:
        if result.status != ValidationStatus.PASS:
            logger.info(
                f"Check {result.validation_type.value}: {result.message}",
                extra={"check_type": result.validation_type.value},
            )
    logger.info(
        f"Completeness validation done: {report.pass_count} pass, "
        f"{report.fail_count} fail, {report.warning_count} warning "
        f"({report.completeness_percentage}%)",
    )
    return report


class CompletenessValidator:
    """Holds the report of the most recent run; a new run replaces it."""

    def __init__(self) -> None:
        self._last_report: ValidationReport | None = None

    @property
    def last_report(self) -> ValidationReport | None:
        return self._last_report

    def validate(
        self,
        interfaces: Iterable[InterfaceNode | Mapping[str, Any]] | None,
        flows: Iterable[FlowRecord | Mapping[str, Any]] | None,
    ) -> ValidationReport:
        self._last_report = validate_completeness(interfaces, flows)
        return self._last_report

    def validate_specification(self, specification: Any) -> ValidationReport:
        """Validate a parsed specification mapping (stateNodes/parsedFlows)."""
        interfaces, flows = split_specification(specification)
        return self.validate(interfaces, flows)
