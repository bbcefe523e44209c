"""Error Hierarchy — typed, categorized exceptions for every inventory failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - to_response() produces the public envelope {"error": message}
    - Public messages are fixed strings per endpoint; causes stay in the logs

Design Decisions:
    - Single hierarchy with JoyasError base: one FastAPI handler catches all
    - Spanish client-facing messages: existing consumers match on these strings
"""

from enum import Enum


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    DATABASE = "database"
    INTERNAL = "internal"


LIST_ITEMS_FAILED = "Error al obtener las joyas."
FILTER_ITEMS_FAILED = "Error al filtrar joyas."
UNHANDLED_FAILURE = "Algo salió mal."
INVALID_PARAMETERS = "Parámetros inválidos."


class JoyasError(Exception):
    """Base exception for all Joyas API errors."""

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
        """Convert to the public REST error body."""
        return {"error": self.message}


# ─── Client Errors (400-level) ──────────────────────────────────

class InvalidOrderingError(JoyasError):
    """order_by names a column or direction outside the allow-list."""
    def __init__(self, order_by: str):
        super().__init__(
            f"Parámetro order_by inválido: {order_by}",
            "INVALID_ORDERING", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, 400,
        )
        self.order_by = order_by


# ─── Endpoint Failures (500-level) ──────────────────────────────

class InventoryListError(JoyasError):
    """Listing the inventory failed."""
    def __init__(self):
        super().__init__(
            LIST_ITEMS_FAILED, "INVENTORY_LIST_FAILED",
            ErrorCategory.DATABASE, ErrorSeverity.CRITICAL, 500,
        )


class InventoryFilterError(JoyasError):
    """Filtering the inventory failed."""
    def __init__(self):
        super().__init__(
            FILTER_ITEMS_FAILED, "INVENTORY_FILTER_FAILED",
            ErrorCategory.DATABASE, ErrorSeverity.CRITICAL, 500,
        )


# ─── Infrastructure Errors ──────────────────────────────────────

class DatabaseError(JoyasError):
    """Database operation failed. Message carries internal detail."""
    def __init__(self, message: str, operation: str):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, 500,
        )
        self.operation = operation

    def to_response(self) -> dict:
        return {"error": UNHANDLED_FAILURE}
