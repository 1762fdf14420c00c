"""Application error classes raised by services and handled at the HTTP boundary."""

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import asdict, dataclass
from datetime import datetime
from enum import Enum
from typing import Any

from src.app.core.errors.codes import ERROR_MESSAGES, ErrorCode
from src.app.models.base import utc_now


class ErrorSeverity(str, Enum):
    """Severity drives log level, frontend notification and crash reporting."""

    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"
    CRITICAL = "CRITICAL"


class AppError(Exception):
    """Base error carrying a code from the error table.

    Operational errors are expected domain failures (not found, quota exceeded)
    and are surfaced to the caller. Non-operational errors are unexpected and
    get reported to Sentry when CRITICAL.
    """

    def __init__(
        self,
        code: ErrorCode,
        message: str | None = None,
        context: dict[str, Any] | None = None,
        severity: ErrorSeverity = ErrorSeverity.MEDIUM,
        is_operational: bool = True,
    ):
        self.code = code
        self.message = message if message is not None else ERROR_MESSAGES.get(code, "Unknown error")
        self.severity = severity
        self.context = context
        self.is_operational = is_operational
        self.timestamp: datetime = utc_now()
        super().__init__(self.message)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code.value!r}, message={self.message!r})"

    def to_dict(self) -> dict[str, Any]:
        return {
            "status": "error",
            "code": self.code.value,
            "message": self.message,
            "context": self.context,
            "timestamp": self.timestamp.isoformat(),
        }

    @classmethod
    def high(
        cls,
        code: ErrorCode,
        message: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> "AppError":
        return cls(code, message, context, ErrorSeverity.HIGH, True)

    @classmethod
    def critical(
        cls,
        code: ErrorCode,
        message: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> "AppError":
        return cls(code, message, context, ErrorSeverity.CRITICAL, False)


class BusinessError(AppError):
    """Business rule violation (422)."""

    def __init__(self, message: str, context: dict[str, Any] | None = None):
        super().__init__(
            ErrorCode.BUSINESS_RULE_VIOLATION,
            message,
            context,
            ErrorSeverity.MEDIUM,
            True,
        )

    @classmethod
    def invalid_state(cls, message: str, context: dict[str, Any] | None = None) -> "BusinessError":
        return cls(message, {**(context or {}), "reason": "invalid_state"})

    @classmethod
    def not_allowed(cls, operation: str, reason: str | None = None) -> "BusinessError":
        return cls(
            f"Operation '{operation}' is not allowed",
            {"operation": operation, "reason": reason},
        )


@dataclass(frozen=True)
class ValidationErrorDetail:
    """A single field failure."""

    field: str
    message: str
    value: Any = None
    constraint: str | None = None


class ValidationError(AppError):
    """Aggregate of per-field validation failures."""

    def __init__(self, errors: Sequence[ValidationErrorDetail], message: str | None = None):
        self.errors = list(errors)
        super().__init__(
            ErrorCode.VALIDATION_ERROR,
            message or "Validation failed",
            {"errors": [asdict(e) for e in self.errors]},
            ErrorSeverity.LOW,
            True,
        )

    @classmethod
    def from_validation_errors(cls, records: Iterable[Mapping[str, Any]]) -> "ValidationError":
        """Build from raw violation records.

        Each record has a ``property`` name, an optional ``value`` and a
        ``constraints`` mapping of constraint name -> message. All messages of
        a record are joined with ", "; the first constraint name is kept.
        """
        errors = []
        for record in records:
            constraints: Mapping[str, str] = record.get("constraints") or {}
            errors.append(
                ValidationErrorDetail(
                    field=record["property"],
                    message=", ".join(constraints.values()),
                    value=record.get("value"),
                    constraint=next(iter(constraints), None),
                )
            )
        return cls(errors)

    @classmethod
    def from_pydantic_errors(cls, errors: Iterable[Mapping[str, Any]]) -> "ValidationError":
        """Group pydantic error dicts (``exc.errors()``) by field."""
        grouped: dict[str, dict[str, Any]] = {}
        for err in errors:
            loc = [str(part) for part in err.get("loc", ()) if part not in ("body", "query", "path")]
            field = ".".join(loc) or "__root__"
            record = grouped.setdefault(
                field, {"property": field, "value": err.get("input"), "constraints": {}}
            )
            record["constraints"].setdefault(err.get("type", "invalid"), err.get("msg", "Invalid value"))
        return cls.from_validation_errors(grouped.values())
