"""Validation Schemas — response models for completeness reports and graph projections.

Invariants:
    - Shapes mirror ValidationReport.to_dict() / ReachabilityGraph.to_dict() exactly
    - status and validation_type constrained to core enums
"""

from datetime import datetime

from pydantic import BaseModel

from trinity.core.domain_types import CheckType, InterfaceKind, ValidationStatus


class ValidationResultOut(BaseModel):
    id: str
    validation_type: CheckType
    status: ValidationStatus
    message: str
    affected_interfaces: list[str] = []
    suggested_fixes: list[str] = []
    timestamp: datetime


class ValidationSummaryOut(BaseModel):
    total_interfaces: int
    total_connections: int
    pass_count: int
    fail_count: int
    warning_count: int
    completeness_percentage: int


class ImprovementSuggestionOut(BaseModel):
    type: str
    interface: str
    suggestion: str


class ValidationReportOut(BaseModel):
    """Complete report for pass/fail/warning panels."""
    is_complete: bool
    summary: ValidationSummaryOut
    results: list[ValidationResultOut] = []
    improvement_suggestions: list[ImprovementSuggestionOut] = []


class GraphNodeOut(BaseModel):
    name: str
    id: str | None = None
    kind: InterfaceKind
    available_actions: list[str] = []
    can_reach: list[str] = []
    reachable_from: list[str] = []
    actions: list[str] = []


class GraphConnectionOut(BaseModel):
    id: str
    source: str
    target: str
    action: str
    label: str | None = None
    flow_name: str | None = None


class ReachabilityGraphOut(BaseModel):
    """Graph projection for diagram layout."""
    nodes: list[GraphNodeOut] = []
    connections: list[GraphConnectionOut] = []
