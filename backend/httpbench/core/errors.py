"""Error Hierarchy — typed, categorized exceptions for httpbench failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Request errors (400-level) are raised by pure parsing helpers and mapped
      to responses only by the global handlers in api/error_handlers.py
    - Aggregator errors never reach the HTTP layer
    - to_response() never includes tracebacks or file contents

Design Decisions:
    - Single hierarchy with HttpBenchError base: one FastAPI handler catches all
    - ErrorContext as dataclass: observability fields without coupling to logging
"""

from dataclasses import dataclass, field
from enum import Enum
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
    RESULTS = "results"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for logs."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


class HttpBenchError(Exception):
    """Base exception for all httpbench errors."""

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
        """Convert to the JSON error envelope."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
            }
        }


# ─── Request Errors (400-level) ─────────────────────────────────

class InvalidJSONError(HttpBenchError):
    """Request body is not a JSON object."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Invalid JSON", "INVALID_JSON", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )


# ─── Aggregator Errors ──────────────────────────────────────────

class ContractError(HttpBenchError):
    """Benchmark contract file missing or unreadable."""
    def __init__(self, message: str, path: str, context: ErrorContext | None = None):
        super().__init__(
            message, "CONTRACT_ERROR", ErrorCategory.RESULTS,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.path = path


class ResultFileError(HttpBenchError):
    """A per-framework result file could not be parsed."""
    def __init__(self, message: str, path: str, context: ErrorContext | None = None):
        super().__init__(
            message, "RESULT_FILE_ERROR", ErrorCategory.RESULTS,
            ErrorSeverity.ERROR, context, 500,
        )
        self.path = path
