"""Error Hierarchy — typed, categorized exceptions for every counterops failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Validation errors (400-level) are raised before any network activity
    - Remote errors carry the remote service's own status/message, never a fabricated one
    - No message or context ever includes an admin key

Design Decisions:
    - Single hierarchy with CounterOpsError base: API handler and action entry point catch all
      (ADR: uniform error shape)
    - TransportError and RemoteFailureError are siblings: callers can tell
      "service unreachable" apart from "service rejected the request"
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

from dataclasses import dataclass, field, replace
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
    EXTERNAL_API = "external_api"
    TIMEOUT = "timeout"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    operation: str | None = None
    namespace: str | None = None
    counter_key: str | None = None
    remote_status: int | None = None
    debug_info: dict[str, Any] | None = None


class CounterOpsError(Exception):
    """Base exception for all counterops errors."""

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
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "operation": self.context.operation,
                    "namespace": self.context.namespace,
                    "key": self.context.counter_key,
                    "remote_status": self.context.remote_status,
                },
            }
        }


# ─── Validation Errors (400-level, no remote call made) ─────────

class OperationValidationError(CounterOpsError):
    """Raw inputs rejected locally. Always raised before any network call."""
    def __init__(self, message: str, code: str, context: ErrorContext | None = None):
        super().__init__(
            message, code, ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )


class UnknownOperationError(OperationValidationError):
    """Operation name is not one of the recognized operations."""
    def __init__(self, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Unknown operation '{operation}'.", "UNKNOWN_OPERATION", context,
        )
        self.operation = operation


class MissingIdentityError(OperationValidationError):
    """namespace or key absent or empty."""
    def __init__(self, field: str, context: ErrorContext | None = None):
        super().__init__(
            f"Input '{field}' is required to identify the counter.",
            "MISSING_IDENTITY", context,
        )
        self.field = field


class MissingAdminKeyError(OperationValidationError):
    """Admin operation invoked without a credential."""
    def __init__(self, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Operation '{operation}' requires input 'admin_key'.",
            "MISSING_ADMIN_KEY", context,
        )
        self.operation = operation


class InvalidIntegerError(OperationValidationError):
    """A numeric input is missing or not a base-10 signed integer."""
    def __init__(
        self, field: str, raw: str | None = None, context: ErrorContext | None = None,
    ):
        if raw is None:
            message = f"Input '{field}' is required and must be an integer."
        else:
            message = f"Input '{field}' must be an integer, got '{raw}'."
        super().__init__(message, "INVALID_INTEGER", context)
        self.field = field
        self.raw = raw


# ─── Remote Errors (surfaced verbatim, never retried) ───────────

class RemoteServiceError(CounterOpsError):
    """Common parent of transport and remote-reported failures."""


class TransportError(RemoteServiceError):
    """Counter service unreachable, timed out, or returned a malformed body."""
    def __init__(
        self, message: str, reason: str, context: ErrorContext | None = None,
    ):
        category = (
            ErrorCategory.TIMEOUT if reason == "timeout"
            else ErrorCategory.EXTERNAL_API
        )
        super().__init__(
            f"Counter service transport error ({reason}): {message}",
            "TRANSPORT_ERROR", category,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.reason = reason


class RemoteFailureError(RemoteServiceError):
    """Counter service rejected the request (not found, wrong admin key, ...)."""
    def __init__(
        self, status: int, message: str, context: ErrorContext | None = None,
    ):
        ctx = replace(context or ErrorContext(), remote_status=status)
        # Client errors pass through so API callers see e.g. 404 for a missing counter
        http_status = status if 400 <= status < 500 else 502
        super().__init__(
            message, "REMOTE_FAILURE", ErrorCategory.EXTERNAL_API,
            ErrorSeverity.ERROR, ctx, http_status,
        )
        self.status = status
