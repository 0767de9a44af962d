"""Error types and reporting for the Penline command surface.

The rendering and conversion core never raises for string input; these types
describe failures around it (missing input files, unreadable payloads, records
that fail the form's validation rules).
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field, fields
from enum import Enum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .signature.validators import ValidationReport


class ErrorSeverity(Enum):
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(Enum):
    INPUT_NOT_FOUND = "input_not_found"
    INVALID_FORMAT = "invalid_format"
    VALIDATION_FAILURE = "validation_failure"
    CONFIGURATION_ERROR = "configuration_error"


@dataclass(slots=True)
class ErrorContext:
    """What went wrong, where, and how a user might fix it."""

    category: ErrorCategory
    severity: ErrorSeverity
    message: str
    details: dict[str, Any] = field(default_factory=dict)
    source_file: str | None = None
    source_row: int | None = None
    suggested_fix: str | None = None
    recoverable: bool = True

    def to_dict(self) -> dict[str, Any]:
        """Plain-data view for structured logs (enums become their values)."""

        payload: dict[str, Any] = {}
        for item in fields(self):
            value = getattr(self, item.name)
            payload[item.name] = value.value if isinstance(value, Enum) else value
        return payload


class PenlineError(Exception):
    """Base exception carrying an :class:`ErrorContext`."""

    def __init__(self, context: ErrorContext):
        self.context = context
        super().__init__(context.message)


def _unreadable_file(
    category: ErrorCategory, file_path: str, message: str, fix: str, **details: Any
) -> ErrorContext:
    return ErrorContext(
        category=category,
        severity=ErrorSeverity.ERROR,
        message=message,
        details={"file_path": file_path, **details},
        source_file=file_path,
        suggested_fix=fix,
        recoverable=False,
    )


class InputNotFoundError(PenlineError):
    @classmethod
    def create(cls, file_path: str) -> InputNotFoundError:
        return cls(
            _unreadable_file(
                ErrorCategory.INPUT_NOT_FOUND,
                file_path,
                f"Input file not found: {file_path}",
                "Check the path; relative paths resolve against the working directory",
            )
        )


class InputFormatError(PenlineError):
    """The file exists but does not hold a mapping of contact fields."""

    @classmethod
    def create(cls, file_path: str, reason: str) -> InputFormatError:
        return cls(
            _unreadable_file(
                ErrorCategory.INVALID_FORMAT,
                file_path,
                f"Unable to read {file_path}: {reason}",
                "Provide a JSON, TOML or YAML mapping of contact fields",
                reason=reason,
            )
        )


class ConfigurationError(PenlineError):
    """A profile could not be located or did not hold valid options."""

    @classmethod
    def from_profile_error(cls, identifier: str, exc: Exception) -> ConfigurationError:
        return cls(
            ErrorContext(
                category=ErrorCategory.CONFIGURATION_ERROR,
                severity=ErrorSeverity.ERROR,
                message=str(exc),
                details={"profile": identifier},
                suggested_fix="Check --profile and --profile-search-path",
                recoverable=False,
            )
        )


class ContactValidationError(PenlineError):
    """Raised when a contact record fails the signature form rules."""

    @classmethod
    def from_report(
        cls,
        report: ValidationReport,
        *,
        source_file: str | None = None,
        row: int | None = None,
    ) -> ContactValidationError:
        fields = sorted(report.errors)
        context = ErrorContext(
            category=ErrorCategory.VALIDATION_FAILURE,
            severity=ErrorSeverity.ERROR,
            message=f"Contact record failed validation: {', '.join(fields)}",
            details={"errors": dict(report.errors)},
            source_file=source_file,
            source_row=row,
            suggested_fix="Correct the listed fields before copying the signature",
            recoverable=True,
        )
        return cls(context)


_BLOCKING = frozenset({ErrorSeverity.ERROR, ErrorSeverity.CRITICAL})


@dataclass
class ErrorReport:
    """Errors and warnings collected while processing a batch of contacts."""

    errors: list[ErrorContext] = field(default_factory=list)
    warnings: list[ErrorContext] = field(default_factory=list)

    def add_error(self, context: ErrorContext) -> None:
        bucket = self.errors if context.severity in _BLOCKING else self.warnings
        bucket.append(context)

    def has_errors(self) -> bool:
        return bool(self.errors)

    def rows_with_errors(self) -> list[int]:
        return sorted({ctx.source_row for ctx in self.errors if ctx.source_row is not None})

    def get_summary(self) -> dict[str, Any]:
        by_category = Counter(ctx.category.value for ctx in [*self.errors, *self.warnings])
        return {
            "total_errors": len(self.errors),
            "total_warnings": len(self.warnings),
            "rows_with_errors": self.rows_with_errors(),
            "errors_by_category": dict(by_category),
        }


class ErrorHandler:
    """Collect error contexts; ``fail_fast`` turns the first blocking one into a raise."""

    def __init__(self, fail_fast: bool = False):
        self.fail_fast = fail_fast
        self.report = ErrorReport()

    def handle_error(self, context: ErrorContext) -> None:
        self.report.add_error(context)
        blocking = context.severity in _BLOCKING
        fatal = context.severity is ErrorSeverity.CRITICAL and not context.recoverable
        if (self.fail_fast and blocking) or fatal:
            raise PenlineError(context)

    def get_report(self) -> ErrorReport:
        return self.report


__all__ = [
    "ConfigurationError",
    "ContactValidationError",
    "ErrorCategory",
    "ErrorContext",
    "ErrorHandler",
    "ErrorReport",
    "ErrorSeverity",
    "InputFormatError",
    "InputNotFoundError",
    "PenlineError",
]
