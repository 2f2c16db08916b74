"""Validation Report — result records and summary arithmetic for one validation run.

Invariants:
    - One ValidationResult per check; findings aggregate into its lists
    - completeness_percentage = round(pass / total * 100); 0 when nothing ran
    - is_complete iff fail_count == 0 (warnings never block completeness)
    - to_dict() is JSON-safe and safe to render even when every check fails
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone

from trinity.core.domain_types import CheckType, ValidationStatus


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of one structural check."""
    id: str
    validation_type: CheckType
    status: ValidationStatus
    message: str
    affected_interfaces: tuple[str, ...] = ()
    suggested_fixes: tuple[str, ...] = ()
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "validation_type": self.validation_type.value,
            "status": self.status.value,
            "message": self.message,
            "affected_interfaces": list(self.affected_interfaces),
            "suggested_fixes": list(self.suggested_fixes),
            "timestamp": self.timestamp.isoformat(),
        }


@dataclass
class ValidationReport:
    """Aggregate of one validation run."""
    total_interfaces: int
    total_connections: int
    results: list[ValidationResult] = field(default_factory=list)
    improvement_suggestions: list[dict] = field(default_factory=list)

    def _count(self, status: ValidationStatus) -> int:
        return sum(1 for r in self.results if r.status == status)

    @property
    def pass_count(self) -> int:
        return self._count(ValidationStatus.PASS)

    @property
    def fail_count(self) -> int:
        return self._count(ValidationStatus.FAIL)

    @property
    def warning_count(self) -> int:
        return self._count(ValidationStatus.WARNING)

    @property
    def completeness_percentage(self) -> int:
        if not self.results:
            return 0
        return round(self.pass_count / len(self.results) * 100)

    @property
    def is_complete(self) -> bool:
        return self.fail_count == 0

    def result_for(self, check: CheckType) -> ValidationResult | None:
        return next((r for r in self.results if r.validation_type == check), None)

    def summary(self) -> dict:
        return {
            "total_interfaces": self.total_interfaces,
            "total_connections": self.total_connections,
            "pass_count": self.pass_count,
            "fail_count": self.fail_count,
            "warning_count": self.warning_count,
            "completeness_percentage": self.completeness_percentage,
        }

    def to_dict(self) -> dict:
        return {
            "is_complete": self.is_complete,
            "summary": self.summary(),
            "results": [r.to_dict() for r in self.results],
            "improvement_suggestions": [dict(s) for s in self.improvement_suggestions],
        }
