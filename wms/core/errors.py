"""Error Hierarchy — typed, categorized exceptions for all WMS failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are recoverable; infrastructure errors (500-level) are critical
    - to_response() produces the REST envelope consumed by api/error_handlers.py
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with WmsError base: one FastAPI handler catches all
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
    AUTHENTICATION = "authentication"
    AUTHORIZATION = "authorization"
    BUSINESS_RULE = "business_rule"
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFLICT = "conflict"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    user_id: int | None = None
    entity_type: str | None = None
    entity_id: str | None = None
    debug_info: dict[str, Any] | None = None


class WmsError(Exception):
    """Base exception for all WMS errors."""

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
                    "entity_type": self.context.entity_type,
                    "entity_id": self.context.entity_id,
                },
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class DuplicateResourceError(WmsError):
    """Uniqueness pre-check failed (username, SKU, order number)."""
    def __init__(
        self, resource_type: str, field_name: str, value: str,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} with {field_name} '{value}' already exists",
            "DUPLICATE_RESOURCE", ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING, context, 400,
        )
        self.field_name = field_name


class BusinessRuleError(WmsError):
    """Request is well-formed but violates a domain rule."""
    def __init__(self, message: str, code: str, context: ErrorContext | None = None):
        super().__init__(
            message, code, ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.WARNING, context, 400,
        )


class AuthenticationError(WmsError):
    """No valid session accompanies the request."""
    def __init__(
        self, message: str = "Not authenticated", context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "UNAUTHENTICATED", ErrorCategory.AUTHENTICATION,
            ErrorSeverity.WARNING, context, 401,
        )


class InvalidCredentialsError(WmsError):
    """Login failed. Same message for unknown user, wrong password, inactive user."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Invalid username or password",
            "INVALID_CREDENTIALS", ErrorCategory.AUTHENTICATION,
            ErrorSeverity.WARNING, context, 401,
        )


class PermissionDeniedError(WmsError):
    """Principal's role does not grant the required permission."""
    def __init__(self, permission: str | None, context: ErrorContext | None = None):
        super().__init__(
            "Forbidden: insufficient permissions",
            "PERMISSION_DENIED", ErrorCategory.AUTHORIZATION,
            ErrorSeverity.WARNING, context, 403,
        )
        self.permission = permission


class ResourceNotFoundError(WmsError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: int | str,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.entity_type = resource_type
        ctx.entity_id = str(resource_id)
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ctx, 404,
        )


class InvalidStatusTransitionError(WmsError):
    """Status change not allowed by the entity's transition table."""
    def __init__(
        self, entity_type: str, current: str, target: str,
        allowed: list[str] | None = None, context: ErrorContext | None = None,
    ):
        hint = f" (allowed: {', '.join(allowed)})" if allowed else ""
        super().__init__(
            f"Cannot move {entity_type} from '{current}' to '{target}'{hint}",
            "INVALID_STATUS_TRANSITION", ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.ERROR, context, 409,
        )
        self.current = current
        self.target = target
        self.allowed = allowed or []


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(WmsError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.operation = operation
