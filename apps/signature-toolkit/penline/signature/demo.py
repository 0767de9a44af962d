"""Sample contact used to showcase the signature layout."""

from __future__ import annotations

from .assets import DEMO_LOGO
from .models import ContactRecord

DEMO_LEGAL_NOTICE = (
    "This email and any attachments are confidential and intended solely for the addressee. "
    "If you have received this message in error, please notify the sender and delete it "
    "immediately."
)

DEMO_RECORD = ContactRecord(
    first_name="Alex",
    last_name="Johnson",
    job_title="Senior Product Designer",
    department="Fintech & Payments",
    company_name="Acme Payments Inc.",
    office_phone="+1 212 555 0199",
    mobile_phone="+1 917 555 0421",
    website_url="acmepayments.com",
    email_address="alex.johnson@acmepayments.com",
    address="350 Fifth Avenue, New York, NY, USA",
    logo_data_url=DEMO_LOGO,
    linkedin="https://linkedin.com/in/alexjohnson",
    facebook="https://facebook.com/alex.johnson",
    twitter="https://x.com/alexjohnson",
    instagram="https://instagram.com/alexjohnson",
    whatsapp="https://wa.me/19175550421",
    legal=DEMO_LEGAL_NOTICE,
)


__all__ = ["DEMO_LEGAL_NOTICE", "DEMO_RECORD"]
