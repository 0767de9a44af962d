from __future__ import annotations

import json
from pathlib import Path

import pytest
from penline.cli import REDACTED_PLACEHOLDER, StructuredLogger

from tests.helpers.assertions import expect


def test_json_events_mask_sensitive_keys(capsys: pytest.CaptureFixture[str]) -> None:
    logger = StructuredLogger("json")

    logger.log_event(
        "contact.loaded",
        {
            "email_address": "alex@acme.com",
            "contact": {"mobilePhone": "+1 917 555 0421", "first_name": "Alex"},
            "source": Path("contacts") / "alex.json",
        },
    )
    payload = json.loads(capsys.readouterr().out)

    expect(payload["event"] == "contact.loaded", "event name should be preserved")
    expect(payload["data"]["email_address"] == REDACTED_PLACEHOLDER, "email is masked")
    expect(
        payload["data"]["contact"] == {"mobilePhone": REDACTED_PLACEHOLDER, "first_name": "Alex"},
        "nested sensitive keys are masked",
    )
    expect(payload["data"]["source"] == str(Path("contacts") / "alex.json"), "paths are strings")


def test_custom_sensitive_tokens_replace_defaults(capsys: pytest.CaptureFixture[str]) -> None:
    logger = StructuredLogger("json", sensitive_tokens=["Address"])

    logger.log_event("contact.loaded", {"address": "350 Fifth Avenue", "email": "a@b.com"})
    data = json.loads(capsys.readouterr().out)["data"]

    expect(data["address"] == REDACTED_PLACEHOLDER, "custom token should match case-insensitively")
    expect(data["email"] == "a@b.com", "defaults are not applied when tokens are given")


def test_rich_errors_go_to_stderr(capsys: pytest.CaptureFixture[str]) -> None:
    StructuredLogger("rich").log_error("Unable to read [contact]")
    captured = capsys.readouterr()

    expect(captured.out == "", "errors should not reach stdout")
    expect("Unable to read [contact]" in captured.err, "markup in messages is printed literally")


def test_rich_validation_failures_go_to_stderr(capsys: pytest.CaptureFixture[str]) -> None:
    StructuredLogger("rich").log_validation({"office_phone": "Enter a valid phone number"})
    captured = capsys.readouterr()

    expect(captured.out == "", "failure table should not reach stdout")
    expect("office_phone" in captured.err, "failing field listed on stderr")
