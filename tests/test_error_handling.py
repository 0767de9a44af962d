"""Tests for error types and reporting."""

from __future__ import annotations

import pytest
from penline.config import ProfileNotFoundError
from penline.error_handling import (
    ConfigurationError,
    ContactValidationError,
    ErrorCategory,
    ErrorContext,
    ErrorHandler,
    ErrorReport,
    ErrorSeverity,
    InputFormatError,
    InputNotFoundError,
    PenlineError,
)
from penline.signature import ContactRecord, validate_contact_record

from tests.helpers.assertions import expect


def test_error_context_to_dict():
    """Test error context serialization."""
    context = ErrorContext(
        category=ErrorCategory.VALIDATION_FAILURE,
        severity=ErrorSeverity.WARNING,
        message="Test error",
        details={"field": "email_address"},
        suggested_fix="Check email format",
    )

    data = context.to_dict()

    expect(data["category"] == "validation_failure", "Category should be 'validation_failure'")
    expect(data["severity"] == "warning", "Severity should be 'warning'")
    expect(data["details"]["field"] == "email_address", "Field detail should round-trip")
    expect(data["recoverable"] is True, "Errors are recoverable by default")


def test_input_not_found_error_create():
    error = InputNotFoundError.create("contact.json")

    expect(error.context.category == ErrorCategory.INPUT_NOT_FOUND, "Category should match")
    expect(str(error) == "Input file not found: contact.json", "Message should name the file")
    expect(error.context.recoverable is False, "Missing input is not recoverable")


def test_input_format_error_create():
    error = InputFormatError.create("contact.ini", "unsupported extension '.ini'")

    expect(error.context.category == ErrorCategory.INVALID_FORMAT, "Category should match")
    expect("unsupported extension" in str(error), "Message should include the reason")


def test_contact_validation_error_from_report():
    report = validate_contact_record(ContactRecord(first_name="Alex", last_name="Johnson"))

    error = ContactValidationError.from_report(report, source_file="sheet.csv", row=4)

    expect(
        str(error)
        == "Contact record failed validation: company_name, email_address, job_title",
        f"Unexpected message: {error}",
    )
    expect(error.context.source_row == 4, "Source row should be recorded")
    expect(error.context.details["errors"]["job_title"] == "Job Title is required", "details")


def test_error_report_splits_errors_and_warnings():
    report = ErrorReport()
    report.add_error(
        ErrorContext(ErrorCategory.VALIDATION_FAILURE, ErrorSeverity.ERROR, "Error message")
    )
    report.add_error(
        ErrorContext(ErrorCategory.INVALID_FORMAT, ErrorSeverity.WARNING, "Warning message")
    )

    summary = report.get_summary()

    expect(report.has_errors(), "Report should have errors")
    expect(summary["total_errors"] == 1, "Should have 1 error")
    expect(summary["total_warnings"] == 1, "Should have 1 warning")
    expect(
        summary["errors_by_category"] == {"validation_failure": 1, "invalid_format": 1},
        "Categories should be counted across errors and warnings",
    )


def test_error_handler_collects_without_fail_fast():
    handler = ErrorHandler(fail_fast=False)

    handler.handle_error(
        ErrorContext(ErrorCategory.VALIDATION_FAILURE, ErrorSeverity.ERROR, "Row failed")
    )

    expect(len(handler.get_report().errors) == 1, "Error should be collected")


def test_error_handler_fail_fast_raises():
    handler = ErrorHandler(fail_fast=True)

    with pytest.raises(PenlineError):
        handler.handle_error(
            ErrorContext(ErrorCategory.VALIDATION_FAILURE, ErrorSeverity.ERROR, "Row failed")
        )


def test_error_handler_raises_for_unrecoverable_critical_errors():
    handler = ErrorHandler()
    context = ErrorContext(
        ErrorCategory.CONFIGURATION_ERROR,
        ErrorSeverity.CRITICAL,
        "Broken profile",
        recoverable=False,
    )

    with pytest.raises(PenlineError):
        handler.handle_error(context)


def test_error_report_lists_rows_with_errors():
    handler = ErrorHandler()
    for row in (7, 2, 7):
        handler.handle_error(
            ErrorContext(
                ErrorCategory.VALIDATION_FAILURE,
                ErrorSeverity.ERROR,
                "Row failed",
                source_row=row,
            )
        )

    expect(handler.get_report().rows_with_errors() == [2, 7], "Rows should be unique and sorted")


def test_configuration_error_wraps_profile_failures():
    error = ConfigurationError.from_profile_error(
        "loud", ProfileNotFoundError("Profile 'loud' could not be found")
    )

    data = error.context.to_dict()

    expect(str(error) == "Profile 'loud' could not be found", "message comes from the cause")
    expect(data["category"] == "configuration_error", "category is serialised by value")
    expect(data["details"] == {"profile": "loud"}, "profile identifier recorded")
    expect(data["recoverable"] is False, "profile failures are not recoverable")
