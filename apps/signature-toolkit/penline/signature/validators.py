"""Field validation rules for contact records collected by the signature form.

The builder itself never validates: it renders whatever it is given. These
predicates let callers decide whether a rendered signature is fit to copy.
"""

from __future__ import annotations

import re
from collections.abc import Collection, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from urllib.parse import urlsplit

from .models import ContactRecord
from .urls import normalize_url

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]{2,}$", re.IGNORECASE)
PHONE_PATTERN = re.compile(r"^[+()\-\s\d]{6,}$")

REQUIRED_FIELDS: frozenset[str] = frozenset(
    {"first_name", "last_name", "job_title", "company_name", "email_address"}
)

FIELD_LABELS: Mapping[str, str] = MappingProxyType(
    {
        "first_name": "First Name",
        "last_name": "Last Name",
        "job_title": "Job Title",
        "department": "Department",
        "company_name": "Company Name",
        "office_phone": "Office Phone Number",
        "mobile_phone": "Mobile Phone Number",
        "website_url": "Website URL",
        "email_address": "Email Address",
        "address": "Address",
        "logo_url": "Logo URL",
        "linkedin": "LinkedIn",
        "facebook": "Facebook",
        "twitter": "X / Twitter",
        "instagram": "Instagram",
        "whatsapp": "WhatsApp",
        "legal": "Legal Content",
    }
)

_URL_FIELDS = ("website_url", "logo_url", "linkedin", "facebook", "twitter", "instagram", "whatsapp")
_PHONE_FIELDS = ("office_phone", "mobile_phone")

MSG_MIN_2 = "Enter at least 2 characters"
MSG_MIN_4 = "Enter at least 4 characters"
MSG_INVALID_EMAIL = "Enter a valid email"
MSG_INVALID_PHONE = "Enter a valid phone number"
MSG_INVALID_URL = "Enter a valid URL"


def is_email(value: object | None) -> bool:
    """Return ``True`` for a non-empty ``local@domain.tld`` shaped address."""

    text = str(value or "").strip()
    if not text:
        return False
    return EMAIL_PATTERN.match(text) is not None


def is_phone(value: object | None) -> bool:
    """Empty is valid; otherwise six or more digits, ``+``, ``()``, ``-`` or spaces."""

    text = str(value or "").strip()
    if not text:
        return True
    return PHONE_PATTERN.match(text) is not None


def is_url_or_domain(value: object | None) -> bool:
    """Empty is valid; otherwise the normalised value must parse as a URL."""

    text = str(value or "").strip()
    if not text:
        return True
    normalized = normalize_url(text)
    try:
        parts = urlsplit(normalized)
        parts.port  # noqa: B018 - raises ValueError for malformed ports
    except ValueError:
        return False
    scheme = parts.scheme.lower()
    if scheme in {"mailto", "tel"}:
        return bool(parts.path.strip())
    if not parts.hostname:
        return False
    return not any(character.isspace() for character in parts.netloc)


def _required(value: str, label: str) -> str:
    text = value.strip()
    if not text:
        return f"{label} is required"
    if len(text) < 2:
        return MSG_MIN_2
    return ""


def _optional_min_length(value: str, minimum: int, message: str) -> str:
    text = value.strip()
    if text and len(text) < minimum:
        return message
    return ""


@dataclass(frozen=True, slots=True)
class ValidationReport:
    """Field-level validation outcome for a single contact record."""

    record: ContactRecord
    errors: Mapping[str, str] = field(default_factory=dict)

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    def error_for(self, field_name: str) -> str:
        return self.errors.get(field_name, "")

    def visible_errors(
        self,
        touched: Collection[str] = (),
        *,
        show_all: bool = False,
    ) -> dict[str, str]:
        """Return the errors a form should display right now.

        Errors appear once a field was touched or after a copy attempt
        (``show_all``). Empty optional fields never display an error.
        """

        visible: dict[str, str] = {}
        for name, message in self.errors.items():
            if not (show_all or name in touched):
                continue
            value = str(getattr(self.record, name, "")).strip()
            if name not in REQUIRED_FIELDS and not value:
                continue
            visible[name] = message
        return visible

    def as_dict(self) -> dict[str, object]:
        return {"has_errors": self.has_errors, "errors": dict(self.errors)}


def validate_contact_record(record: ContactRecord) -> ValidationReport:
    """Apply the signature form's field rules to ``record``."""

    candidates: dict[str, str] = {}
    for name in ("first_name", "last_name", "job_title", "company_name"):
        candidates[name] = _required(getattr(record, name), FIELD_LABELS[name])

    email = record.email_address.strip()
    if not email:
        candidates["email_address"] = f"{FIELD_LABELS['email_address']} is required"
    elif not is_email(email):
        candidates["email_address"] = MSG_INVALID_EMAIL

    candidates["department"] = _optional_min_length(record.department, 2, MSG_MIN_2)
    candidates["address"] = _optional_min_length(record.address, 4, MSG_MIN_4)

    for name in _PHONE_FIELDS:
        if not is_phone(getattr(record, name)):
            candidates[name] = MSG_INVALID_PHONE
    for name in _URL_FIELDS:
        if not is_url_or_domain(getattr(record, name)):
            candidates[name] = MSG_INVALID_URL

    errors = {name: message for name, message in candidates.items() if message}
    return ValidationReport(record=record, errors=MappingProxyType(errors))


__all__ = [
    "EMAIL_PATTERN",
    "FIELD_LABELS",
    "PHONE_PATTERN",
    "REQUIRED_FIELDS",
    "ValidationReport",
    "is_email",
    "is_phone",
    "is_url_or_domain",
    "validate_contact_record",
]
