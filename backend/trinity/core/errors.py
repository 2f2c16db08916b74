"""Error Hierarchy — typed, categorized exceptions for Trinity failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Structural specification defects are NEVER raised — they are ValidationResult data
    - Only programming errors (absent inputs) and shell failures (missing session,
      no event loop) become exceptions
    - to_response() produces the REST envelope; no internal details leaked

Design Decisions:
    - Single hierarchy with TrinityError base: FastAPI global handler catches all (ADR: uniform error shape)
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    CAPACITY = "capacity"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    session_id: str | None = None
    screen: str | None = None
    user_message: str | None = None
    debug_info: dict[str, Any] | None = None


class TrinityError(Exception):
    """Base exception for all Trinity errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.context.user_message or self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "session_id": self.context.session_id,
                    "screen": self.context.screen,
                },
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class SpecificationMissingError(TrinityError):
    """validate called without interface or flow lists."""
    def __init__(self, missing: str, context: ErrorContext | None = None):
        super().__init__(
            f"Specification input '{missing}' is required (got None)",
            "SPECIFICATION_MISSING", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.missing = missing


class ResourceNotFoundError(TrinityError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context, 404,
        )


class SessionLimitError(TrinityError):
    """Registry already holds the configured maximum of navigation sessions."""
    def __init__(self, limit: int, context: ErrorContext | None = None):
        super().__init__(
            f"Navigation session limit reached ({limit})",
            "SESSION_LIMIT_REACHED", ErrorCategory.CAPACITY,
            ErrorSeverity.WARNING, context, 429,
        )
        self.limit = limit


# ─── Infrastructure Errors (500-level) ──────────────────────────

class SchedulerError(TrinityError):
    """Timer scheduling failed (e.g. no running event loop)."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            f"Scheduler failure: {message}",
            "SCHEDULER_ERROR", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, context, 500,
        )
