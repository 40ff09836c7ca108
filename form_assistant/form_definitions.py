"""Form field definitions for the form assistant.

Provides the ordered question list for each supported government form,
grouped by the sections of the printed form, plus form metadata for the
form picker. The registry is read-only; unknown form types fall back to
the default form instead of failing.
"""

from __future__ import annotations

import logging
from dataclasses import replace

from form_assistant.schema import FieldDefinition, FieldKind
from shared.config_store import get_setting

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Supported forms with metadata
# ---------------------------------------------------------------------------

SUPPORTED_FORMS: dict[str, dict] = {
    "aadhaar": {
        "title": "Aadhaar Enrolment / Correction Form",
        "agency": "UIDAI",
        "sections": [
            "Pre-Enrolment",
            "Personal Details",
            "Relationship",
            "Address",
            "Contact",
            "Relative Details",
            "Consent",
            "Bank Linking",
            "Documents",
        ],
    },
}


# ---------------------------------------------------------------------------
# Aadhaar field definitions
# ---------------------------------------------------------------------------

_YES_NO = ("Yes", "No")

AADHAAR_FIELDS: dict[str, list[FieldDefinition]] = {
    "Pre-Enrolment": [
        FieldDefinition(
            id="pre_enrolment_id",
            label="Pre-Enrolment ID (if any)",
            placeholder="Leave blank if not applicable",
        ),
    ],
    "Personal Details": [
        FieldDefinition(
            id="full_name",
            label="Full Name (as per documents)",
            required=True,
            placeholder="e.g., RAJESH KUMAR SINGH",
        ),
        FieldDefinition(
            id="gender",
            label="Gender",
            kind=FieldKind.SELECT,
            required=True,
            options=("Male", "Female", "Transgender"),
        ),
        FieldDefinition(
            id="age",
            label="Age (in years)",
            kind=FieldKind.NUMBER,
            required=True,
            placeholder="e.g., 25",
        ),
        FieldDefinition(
            id="date_of_birth",
            label="Date of Birth (DD/MM/YYYY)",
            kind=FieldKind.DATE,
            required=True,
            placeholder="e.g., 15/08/1998",
        ),
        FieldDefinition(
            id="dob_type",
            label="Date of Birth is",
            kind=FieldKind.SELECT,
            required=True,
            options=("Declared", "Verified"),
        ),
    ],
    "Relationship": [
        FieldDefinition(
            id="care_of",
            label="Father/Mother/Spouse/Guardian Name",
            required=True,
            placeholder="e.g., S/O SURESH KUMAR SINGH",
        ),
    ],
    "Address": [
        FieldDefinition(
            id="house_no",
            label="House No / Building / Apartment",
            required=True,
            placeholder="e.g., 123, Flat A-101",
        ),
        FieldDefinition(
            id="street",
            label="Street / Road / Lane",
            required=True,
            placeholder="e.g., MG Road",
        ),
        FieldDefinition(id="landmark", label="Landmark", placeholder="e.g., Near City Mall"),
        FieldDefinition(
            id="area",
            label="Area / Locality / Sector",
            required=True,
            placeholder="e.g., Sector 15",
        ),
        FieldDefinition(
            id="village_city",
            label="Village / Town / City",
            required=True,
            placeholder="e.g., Mumbai",
        ),
        FieldDefinition(
            id="post_office",
            label="Post Office",
            required=True,
            placeholder="e.g., Andheri PO",
        ),
        FieldDefinition(
            id="district",
            label="District",
            required=True,
            placeholder="e.g., Mumbai Suburban",
        ),
        FieldDefinition(
            id="sub_district",
            label="Sub-District / Tehsil",
            placeholder="e.g., Andheri",
        ),
        FieldDefinition(
            id="state",
            label="State",
            required=True,
            placeholder="e.g., Maharashtra",
        ),
        FieldDefinition(
            id="pincode",
            label="PIN Code",
            kind=FieldKind.NUMBER,
            required=True,
            placeholder="e.g., 400053",
        ),
    ],
    "Contact": [
        FieldDefinition(
            id="mobile",
            label="Mobile Number",
            kind=FieldKind.NUMBER,
            required=True,
            placeholder="9876543210",
        ),
        FieldDefinition(
            id="email",
            label="Email ID (Optional)",
            placeholder="email@example.com",
        ),
    ],
    "Relative Details": [
        FieldDefinition(
            id="relative_name",
            label="Parent/Guardian/Spouse Full Name",
            placeholder="e.g., SURESH KUMAR SINGH",
        ),
        FieldDefinition(
            id="relative_aadhaar",
            label="Their Aadhaar Number (if known)",
            placeholder="e.g., 1234 5678 9012",
        ),
    ],
    "Consent": [
        FieldDefinition(
            id="uidai_consent",
            label="Allow UIDAI to share your info with agencies?",
            kind=FieldKind.SELECT,
            required=True,
            options=_YES_NO,
        ),
    ],
    "Bank Linking": [
        FieldDefinition(
            id="bank_linking",
            label="Link Aadhaar with your bank account?",
            kind=FieldKind.SELECT,
            required=True,
            options=_YES_NO,
        ),
        FieldDefinition(
            id="bank_name",
            label="Bank Name (if linking)",
            placeholder="e.g., State Bank of India",
        ),
    ],
    "Documents": [
        FieldDefinition(
            id="poi_document",
            label="Proof of Identity Document",
            required=True,
            placeholder="e.g., Passport, Voter ID Card",
        ),
        FieldDefinition(
            id="poa_document",
            label="Proof of Address Document",
            required=True,
            placeholder="e.g., Electricity Bill, Bank Statement",
        ),
        FieldDefinition(
            id="dob_document",
            label="Date of Birth Proof Document",
            placeholder="e.g., Birth Certificate, School Certificate",
        ),
        FieldDefinition(
            id="por_document",
            label="Proof of Relationship Document (if any)",
            placeholder="e.g., Marriage Certificate",
        ),
    ],
}


def _with_sections(fields_by_section: dict[str, list[FieldDefinition]]) -> dict[str, list[FieldDefinition]]:
    """Stamp each field with the name of the section it is listed under."""
    return {
        section: [replace(f, section=section) for f in fields]
        for section, fields in fields_by_section.items()
    }


FIELD_DEFINITIONS: dict[str, dict[str, list[FieldDefinition]]] = {
    "aadhaar": _with_sections(AADHAAR_FIELDS),
}

# Alias form types share another form's question list.
_FORM_ALIASES: dict[str, str] = {
    "generic": "aadhaar",
}

DEFAULT_FORM_TYPE = "aadhaar"


def resolve_form_type(form_type: str) -> str:
    """Map a requested form type to one the registry defines.

    Aliases resolve to their target; anything unknown falls back to the
    configured default form type.
    """
    form_type = _FORM_ALIASES.get(form_type, form_type)
    if form_type in FIELD_DEFINITIONS:
        return form_type

    default = get_setting("default_form_type")
    if default not in FIELD_DEFINITIONS:
        default = DEFAULT_FORM_TYPE
    logger.info("Unknown form type %r, falling back to %r", form_type, default)
    return default


def get_fields_by_section(form_type: str) -> dict[str, list[FieldDefinition]]:
    """Return the field definitions for a form, grouped by section."""
    return FIELD_DEFINITIONS[resolve_form_type(form_type)]


def get_field_definitions(form_type: str) -> list[FieldDefinition]:
    """Return the ordered question list for a form type.

    Args:
        form_type: The form identifier (e.g. "aadhaar").

    Returns:
        FieldDefinition objects in the order the wizard asks them.
        Unknown form types return the default form's list.
    """
    return [f for fields in get_fields_by_section(form_type).values() for f in fields]


def get_field(form_type: str, field_id: str) -> FieldDefinition | None:
    """Look up one field of a form by id."""
    for f in get_field_definitions(form_type):
        if f.id == field_id:
            return f
    return None


def get_form_meta(form_type: str) -> dict:
    """Return title/agency/sections metadata for a form type."""
    form_type = resolve_form_type(form_type)
    return {"form_type": form_type, **SUPPORTED_FORMS[form_type]}


def list_form_types() -> list[dict[str, str]]:
    """List the forms offered in the form picker."""
    return [
        {"id": form_type, "name": meta["title"]}
        for form_type, meta in SUPPORTED_FORMS.items()
    ]
