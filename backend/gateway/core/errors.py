"""Error Hierarchy — typed, categorized exceptions for every gateway failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Field validation errors are 400; upstream errors carry the upstream status;
      transport errors are always 500
    - to_response() produces the REST body returned to the caller
    - Transport exception text is never part of a user-facing message

Design Decisions:
    - Single hierarchy with GatewayError base: one FastAPI handler catches all
    - ErrorContext as dataclass: trace id and route travel with the error into logs
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any

GENERIC_ERROR_MESSAGE = "An unexpected error occurred."


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    EXTERNAL_API = "external_api"
    TRANSPORT = "transport"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for logging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    route: str | None = None
    trace_id: str | None = None
    upstream_status: int | None = None
    debug_info: dict[str, Any] | None = None


class GatewayError(Exception):
    """Base exception for all gateway errors."""

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
        """Convert to the REST error body."""
        return {"message": self.message}

    def log_extra(self) -> dict:
        """Structured fields for the error log line."""
        return {
            "error_code": self.code,
            "route": self.context.route,
            "trace_id": self.context.trace_id,
            "upstream_status": self.context.upstream_status,
        }


# ─── Request Errors (400) ───────────────────────────────────────

@dataclass(frozen=True)
class FieldViolation:
    """One missing or empty required field."""
    location: str
    path: str
    msg: str
    value: Any = None

    def to_dict(self) -> dict:
        return {
            "type": "field",
            "location": self.location,
            "path": self.path,
            "value": self.value,
            "msg": self.msg,
        }


class RequestFieldsError(GatewayError):
    """One or more required request fields are missing or empty."""
    def __init__(
        self, violations: list[FieldViolation], context: ErrorContext | None = None,
    ):
        fields = ", ".join(f"{v.location}.{v.path}" for v in violations)
        super().__init__(
            f"Invalid request fields: {fields}",
            "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )
        self.violations = violations

    def to_response(self) -> dict:
        return {"errs": [v.to_dict() for v in self.violations]}


# ─── Upstream Errors ────────────────────────────────────────────

class UpstreamError(GatewayError):
    """Upstream answered with a non-2xx status; status and message are relayed."""
    def __init__(
        self, status_code: int, message: str, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.upstream_status = status_code
        super().__init__(
            message, "UPSTREAM_ERROR", ErrorCategory.EXTERNAL_API,
            ErrorSeverity.ERROR, ctx, status_code,
        )


class UpstreamTransportError(GatewayError):
    """Upstream call failed before a usable response was obtained."""
    def __init__(self, reason: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.debug_info = {"reason": reason}
        super().__init__(
            GENERIC_ERROR_MESSAGE, "UPSTREAM_UNREACHABLE", ErrorCategory.TRANSPORT,
            ErrorSeverity.CRITICAL, ctx, 500,
        )
        self.reason = reason
