from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

CONTACT_PAYLOAD: dict[str, Any] = {
    "firstName": "Alex",
    "lastName": "Johnson",
    "jobTitle": "Senior Product Designer",
    "department": "Fintech & Payments",
    "companyName": "Acme Payments Inc.",
    "officePhone": "+1 212 555 0199",
    "mobilePhone": "",
    "websiteUrl": "acmepayments.com",
    "emailAddress": "alex.johnson@acmepayments.com",
    "address": "350 Fifth Avenue, New York",
    "linkedin": "linkedin.com/in/alexjohnson",
    "legal": "Confidential.\nDo not forward.",
}


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line("markers", "smoke: smoke-tier fast checks")


@pytest.fixture()
def contact_payload() -> dict[str, Any]:
    return dict(CONTACT_PAYLOAD)


@pytest.fixture()
def contact_file(tmp_path: Path, contact_payload: dict[str, Any]) -> Path:
    path = tmp_path / "contact.json"
    path.write_text(json.dumps(contact_payload), encoding="utf-8")
    return path
