"""Error Hierarchy — typed, categorized exceptions for all Bank Accounts API failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Request errors (400-level) are recoverable; persistence errors (500-level) are critical
    - to_response() produces the REST envelope; headers() the extra response headers
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with BankAccountsError base: FastAPI global handler catches all
    - ErrorContext as dataclass: rich observability without coupling to logging framework
    - BadRequestAlertError code IS the error key ("idexists", "idnull") so clients can
      switch on it without parsing the message
"""

from dataclasses import dataclass, field
from enum import Enum
from datetime import datetime, timezone

from bankapi.core.header_util import create_failure_alert


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
    UNSUPPORTED_MEDIA_TYPE = "unsupported_media_type"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    entity_name: str | None = None
    entity_id: str | None = None
    error_key: str | None = None


class BankAccountsError(Exception):
    """Base exception for all Bank Accounts API errors."""

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
                    "entity_name": self.context.entity_name,
                    "entity_id": self.context.entity_id,
                    "error_key": self.context.error_key,
                },
            }
        }

    def headers(
        self, application_name: str, translation_enabled: bool = True,
    ) -> dict[str, str]:
        """Extra response headers for this error (none by default)."""
        return {}


# ─── Request Errors (400-level) ─────────────────────────────────

class BadRequestAlertError(BankAccountsError):
    """Request rejected with a machine-readable error key and a failure alert."""
    def __init__(
        self,
        message: str,
        entity_name: str,
        error_key: str,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.entity_name = entity_name
        ctx.error_key = error_key
        super().__init__(
            message, error_key, ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, ctx, 400,
        )
        self.entity_name = entity_name
        self.error_key = error_key

    def headers(
        self, application_name: str, translation_enabled: bool = True,
    ) -> dict[str, str]:
        return create_failure_alert(
            application_name, translation_enabled, self.entity_name, self.error_key, self.message,
        )


class ResourceNotFoundError(BankAccountsError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.entity_id = resource_id
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ctx, 404,
        )


class UnsupportedMediaTypeError(BankAccountsError):
    """Request body sent with a content type the endpoint does not consume."""
    def __init__(
        self, content_type: str | None, expected: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"Content type '{content_type or ''}' not supported, expected '{expected}'",
            "UNSUPPORTED_MEDIA_TYPE", ErrorCategory.UNSUPPORTED_MEDIA_TYPE,
            ErrorSeverity.WARNING, context, 415,
        )
        self.content_type = content_type
        self.expected = expected


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(BankAccountsError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.operation = operation
