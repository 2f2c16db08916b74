"""Validation Routes — synchronous completeness validation and graph projection.

Invariants:
    - Read-only: never touches navigation sessions
    - Structural defects come back as report data with HTTP 200, even when every check fails
    - Request body carries already-parsed records; no text parsing happens here
"""

import logging

from fastapi import APIRouter

from trinity.core.completeness_validator import validate_completeness
from trinity.core.graph_builder import build_graph
from trinity.schemas.specification import SpecificationIn
from trinity.schemas.validation import ReachabilityGraphOut, ValidationReportOut

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/validation", tags=["validation"])


@router.post("", response_model=ValidationReportOut)
async def validate_specification(body: SpecificationIn):
    """Run the five structural checks over the specification."""
    report = validate_completeness(body.interface_records(), body.flow_records())
    return report.to_dict()


@router.post("/graph", response_model=ReachabilityGraphOut)
async def reachability_graph(body: SpecificationIn):
    """Build the reachability graph for diagram layout."""
    graph = build_graph(body.interface_records(), body.flow_records())
    return graph.to_dict()
