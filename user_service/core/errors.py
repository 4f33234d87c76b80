"""Error Hierarchy — typed, categorized exceptions for all user service failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - code is the wire identifier returned in the "error" field of the response body
    - Domain errors (400-level) leave store state unchanged
    - to_response() produces the flat REST envelope {"error": code, "message": message}

Design Decisions:
    - Single hierarchy with UserServiceError base: FastAPI global handler catches all (ADR: uniform error shape)
    - Duplicate email and duplicate username share a wire code but are distinct types,
      so callers of the store can tell them apart without string matching
"""

from enum import Enum


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
    CONFLICT = "conflict"
    INTERNAL = "internal"


class UserServiceError(Exception):
    """Base exception for all user service errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {"error": self.code, "message": self.message}


# ─── Domain Errors (400-level) ──────────────────────────────────

class InvalidUserIdError(UserServiceError):
    """Path identifier is not an integer."""
    def __init__(self, raw_id: str):
        super().__init__(
            "Invalid user ID", "invalid_id", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, 400,
        )
        self.raw_id = raw_id


class UserNotFoundError(UserServiceError):
    """No live record carries the requested identifier."""
    def __init__(self, user_id: int):
        super().__init__(
            "user not found", "user_not_found",
            ErrorCategory.RESOURCE_NOT_FOUND, ErrorSeverity.WARNING, 404,
        )
        self.user_id = user_id


class UserConflictError(UserServiceError):
    """Creation rejected because a live record already owns a unique field."""
    def __init__(self, message: str, field: str):
        super().__init__(
            message, "creation_error", ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING, 409,
        )
        self.field = field


class DuplicateEmailError(UserConflictError):
    """Email already belongs to a live record."""
    def __init__(self, email: str):
        super().__init__("email already exists", "email")
        self.email = email


class DuplicateUsernameError(UserConflictError):
    """Username already belongs to a live record."""
    def __init__(self, username: str):
        super().__init__("username already exists", "username")
        self.username = username
