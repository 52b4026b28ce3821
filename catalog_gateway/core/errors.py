"""Error Hierarchy — typed, categorized exceptions for every gateway failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Client errors (400/404) carry a message safe to return verbatim
    - UpstreamError never exposes upstream detail to callers: public_message is generic,
      the full status/body lives in ErrorContext for the logs

Design Decisions:
    - Single hierarchy with GatewayError base: one global handler renders all of them
    - json_body flag instead of a second hierarchy: only /add-to-cart answers errors as JSON
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    EXTERNAL_API = "external_api"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Request/upstream context attached to an error for the logs."""
    path: str | None = None
    upstream_url: str | None = None
    upstream_method: str | None = None
    upstream_status: int | None = None
    upstream_body: Any = None


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
        json_body: bool = False,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status
        self.json_body = json_body

    @property
    def public_message(self) -> str:
        """Text returned to the caller."""
        return self.message


# ─── Client Errors (400-level) ──────────────────────────────────

class MissingParameterError(GatewayError):
    """A required path/query/body value is absent or blank."""
    def __init__(
        self, message: str, field: str,
        json_body: bool = False, context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "MISSING_PARAMETER", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400, json_body,
        )
        self.field = field


class ResourceNotFoundError(GatewayError):
    """A related resource the route depends on does not exist upstream."""
    def __init__(
        self, message: str, resource_type: str, resource_id: str,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, context, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


# ─── Upstream Errors (500-level) ────────────────────────────────

class UpstreamError(GatewayError):
    """VTEX call failed: non-2xx status, network failure or unreadable body."""

    DEFAULT_PUBLIC_MESSAGE = "Error fetching data from VTEX API"

    def __init__(
        self,
        message: str,
        url: str,
        method: str = "GET",
        status_code: int | None = None,
        body: Any = None,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.upstream_url = url
        ctx.upstream_method = method
        ctx.upstream_status = status_code
        ctx.upstream_body = body
        super().__init__(
            message, "UPSTREAM_ERROR", ErrorCategory.EXTERNAL_API,
            ErrorSeverity.CRITICAL, ctx, 500,
        )
        self.url = url
        self.method = method
        self.status_code = status_code
        self.body = body
        self._public_message = self.DEFAULT_PUBLIC_MESSAGE

    @property
    def public_message(self) -> str:
        return self._public_message

    def describe_as(self, public_message: str) -> "UpstreamError":
        """Set the generic text the caller sees for this failure."""
        self._public_message = public_message
        return self
