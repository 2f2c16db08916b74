"""Screen Classification — ordered substring heuristics over interface names.

Invariants:
    - All matching is case-insensitive substring matching
    - Keyword tables are scanned in declared order; first match wins
    - Classification never affects validation correctness, except entry detection

Design Decisions:
    - Plain functions over a classifier class: stateless lookups (ADR: ExMA Functional Core)
    - Entry detection scans keywords in the OUTER loop and interfaces in the inner loop,
      so "dashboard" anywhere beats an earlier "login"
"""

from collections.abc import Sequence
from typing import TYPE_CHECKING

from trinity.core.domain_types import (
    DEAD_END_EXEMPT_KEYWORDS,
    ENTRY_KEYWORDS,
    SCREEN_CATEGORY_KEYWORDS,
    InterfaceKind,
    ScreenCategory,
)

if TYPE_CHECKING:
    from trinity.core.spec_records import InterfaceNode


def _contains_any(name: str, keywords: Sequence[str]) -> bool:
    lowered = name.lower()
    return any(keyword in lowered for keyword in keywords)


def find_entry_interface(
    interfaces: "Sequence[InterfaceNode]",
) -> "InterfaceNode | None":
    """Pick the root for reachability analysis.

    First interface containing "dashboard", else "login", else "home", else
    "main"; falls back to the first interface; None for an empty spec.
    """
    for keyword in ENTRY_KEYWORDS:
        for iface in interfaces:
            if keyword in iface.name.lower():
                return iface
    return interfaces[0] if interfaces else None


def is_exempt_dead_end(name: str) -> bool:
    """Terminal screens (confirmation, success, error, logout) may have no exits."""
    return _contains_any(name, DEAD_END_EXEMPT_KEYWORDS)


def classify_interface_kind(name: str) -> InterfaceKind:
    return InterfaceKind.MAIN if _contains_any(name, ENTRY_KEYWORDS) else InterfaceKind.NORMAL


def classify_screen_type(name: str) -> ScreenCategory:
    """Coarse grouping for presentation: auth, main, admin, onboarding, feature."""
    for category, keywords in SCREEN_CATEGORY_KEYWORDS:
        if _contains_any(name, keywords):
            return category
    return ScreenCategory.FEATURE
