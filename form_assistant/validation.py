"""Real-time field formatting and validation for the form wizard.

Every field id maps to one FieldCategory. The category decides how raw
input is auto-formatted on each keystroke and which rule set validates
it. Formatting and validation never raise; failures come back as
ValidationOutcome values carrying a bilingual error.

Empty values are always valid here. Required-ness is enforced only when
the user tries to leave a step (see check_required / validate_step).
"""

from __future__ import annotations

import re
from datetime import date, timedelta
from typing import Callable

from form_assistant.schema import FieldCategory, FieldDefinition, FieldKind, ValidationOutcome

# Ids that are names even though they do not contain "name".
NAME_FIELD_IDS = frozenset({"care_of"})
MOBILE_FIELD_ID = "mobile"
PINCODE_FIELD_ID = "pincode"
AGE_FIELD_ID = "age"

MOBILE_LENGTH = 10
PINCODE_LENGTH = 6
DATE_DIGITS = 8
MAX_AGE = 150

_NON_DIGIT_RE = re.compile(r"[^0-9]")
_NAME_DIGIT_RE = re.compile(r"[0-9]")
_NAME_SPECIAL_RE = re.compile(r"[^A-Za-z\s.]")
_LOWERCASE_RE = re.compile(r"[a-z]")
# "R. KUMAR" / "R.KUMAR" (first token) and "R K. SHARMA" (second token)
_INITIALS_FIRST_RE = re.compile(r"^[A-Z]\.\s*[A-Z]")
_INITIALS_SECOND_RE = re.compile(r"^[A-Z]\s+[A-Z]\.")
_WHITESPACE_RE = re.compile(r"\s")
_DATE_RE = re.compile(r"([0-9]{2})/([0-9]{2})/([0-9]{4})")
_MOBILE_SEPARATORS_RE = re.compile(r"[\s-]")
_MOBILE_RE = re.compile(r"[6-9][0-9]{9}")
_PINCODE_RE = re.compile(r"[0-9]{6}")
_LEADING_INT_RE = re.compile(r"^\s*([+-]?[0-9]+)")


# ---------------------------------------------------------------------------
# Classification
# ---------------------------------------------------------------------------

def classify_field(field_id: str) -> FieldCategory:
    """Return the validation category for a field id. First match wins."""
    if "name" in field_id or field_id in NAME_FIELD_IDS:
        return FieldCategory.NAME
    if "date" in field_id:
        return FieldCategory.DATE
    if field_id == MOBILE_FIELD_ID:
        return FieldCategory.MOBILE
    if field_id == PINCODE_FIELD_ID:
        return FieldCategory.PINCODE
    if field_id == AGE_FIELD_ID:
        return FieldCategory.AGE
    return FieldCategory.NONE


# ---------------------------------------------------------------------------
# Auto-format
# ---------------------------------------------------------------------------

def format_name(value: str) -> str:
    return value.upper()


def format_date(value: str) -> str:
    """Insert slashes as digits accumulate: DD, DD/MM, DD/MM/YYYY."""
    digits = _NON_DIGIT_RE.sub("", value)[:DATE_DIGITS]
    if len(digits) <= 2:
        return digits
    if len(digits) <= 4:
        return f"{digits[:2]}/{digits[2:]}"
    return f"{digits[:2]}/{digits[2:4]}/{digits[4:]}"


def format_mobile(value: str) -> str:
    return _NON_DIGIT_RE.sub("", value)[:MOBILE_LENGTH]


def format_pincode(value: str) -> str:
    return _NON_DIGIT_RE.sub("", value)[:PINCODE_LENGTH]


_FORMATTERS: dict[FieldCategory, Callable[[str], str]] = {
    FieldCategory.NAME: format_name,
    FieldCategory.DATE: format_date,
    FieldCategory.MOBILE: format_mobile,
    FieldCategory.PINCODE: format_pincode,
}


def auto_format(value: str, category: FieldCategory) -> str:
    """Normalize raw input for a category. Age and uncategorized fields pass through."""
    if value is None:
        return ""
    formatter = _FORMATTERS.get(category)
    return formatter(value) if formatter else value


def format_for_field(field_id: str, value: str) -> str:
    return auto_format(value, classify_field(field_id))


# ---------------------------------------------------------------------------
# Validators
# ---------------------------------------------------------------------------

def _is_blank(value: str | None) -> bool:
    return not value or not value.strip()


def validate_name(value: str) -> ValidationOutcome:
    """Names must be full, capitalised, and free of digits or symbols.

    Rules are checked in order and the first failure is reported.
    """
    if _is_blank(value):
        return ValidationOutcome.valid()
    if _NAME_DIGIT_RE.search(value):
        return ValidationOutcome.invalid("noNumbers")
    if _NAME_SPECIAL_RE.search(value):
        return ValidationOutcome.invalid("noSpecialChars")
    if _LOWERCASE_RE.search(value):
        return ValidationOutcome.invalid("capitalLettersOnly")
    if _INITIALS_FIRST_RE.search(value) or _INITIALS_SECOND_RE.search(value):
        return ValidationOutcome.invalid("initialsNotAllowed")
    if len(_WHITESPACE_RE.sub("", value)) < 3:
        return ValidationOutcome.invalid("tooShort")
    return ValidationOutcome.valid()


def validate_date(value: str, today: date | None = None) -> ValidationOutcome:
    """Check DD/MM/YYYY shape, month/day ranges, and that the date is not in the future.

    The day is only checked against 1-31, not against the month, so
    31/02/1990 passes. Overflowing days roll into the following month
    before the future-date comparison.
    """
    if _is_blank(value):
        return ValidationOutcome.valid()

    match = _DATE_RE.fullmatch(value)
    if not match:
        return ValidationOutcome.invalid("invalidDate")

    day, month, year = (int(part) for part in match.groups())
    if not 1 <= month <= 12 or not 1 <= day <= 31:
        return ValidationOutcome.invalid("invalidDate")

    # Year 0000 is always in the past.
    if year < 1:
        return ValidationOutcome.valid()

    entered = date(year, month, 1) + timedelta(days=day - 1)
    if entered > (today or date.today()):
        return ValidationOutcome.invalid("futureDate")
    return ValidationOutcome.valid()


def validate_mobile(value: str) -> ValidationOutcome:
    """Indian mobile numbers: 10 digits starting with 6, 7, 8 or 9."""
    if _is_blank(value):
        return ValidationOutcome.valid()
    cleaned = _MOBILE_SEPARATORS_RE.sub("", value)
    if not _MOBILE_RE.fullmatch(cleaned):
        return ValidationOutcome.invalid("invalidMobile")
    return ValidationOutcome.valid()


def validate_pincode(value: str) -> ValidationOutcome:
    if _is_blank(value):
        return ValidationOutcome.valid()
    if not _PINCODE_RE.fullmatch(value):
        return ValidationOutcome.invalid("invalidPincode")
    return ValidationOutcome.valid()


def validate_age(value: str) -> ValidationOutcome:
    """Age must start with an integer between 0 and 150."""
    if _is_blank(value):
        return ValidationOutcome.valid()
    match = _LEADING_INT_RE.match(value)
    if not match or not 0 <= int(match.group(1)) <= MAX_AGE:
        return ValidationOutcome.invalid("invalidAge")
    return ValidationOutcome.valid()


def validate_value(
    value: str,
    category: FieldCategory,
    today: date | None = None,
) -> ValidationOutcome:
    """Validate an already-formatted value against its category's rules."""
    if category is FieldCategory.NAME:
        return validate_name(value)
    if category is FieldCategory.DATE:
        return validate_date(value, today)
    if category is FieldCategory.MOBILE:
        return validate_mobile(value)
    if category is FieldCategory.PINCODE:
        return validate_pincode(value)
    if category is FieldCategory.AGE:
        return validate_age(value)
    return ValidationOutcome.valid()


def validate_for_field(field_id: str, value: str, today: date | None = None) -> ValidationOutcome:
    return validate_value(value, classify_field(field_id), today)


# ---------------------------------------------------------------------------
# Step-advance checks
# ---------------------------------------------------------------------------

def check_required(field_def: FieldDefinition, value: str | None) -> ValidationOutcome:
    """Required fields must hold something other than whitespace."""
    if field_def.required and _is_blank(value):
        return ValidationOutcome.invalid("fieldRequired")
    return ValidationOutcome.valid()


def validate_step(
    field_def: FieldDefinition,
    value: str | None,
    today: date | None = None,
) -> ValidationOutcome:
    """Full check run when the user tries to move past a field.

    Required-ness first, then the category rules, then (for select
    fields) membership in the allowed options.
    """
    outcome = check_required(field_def, value)
    if not outcome.is_valid:
        return outcome

    value = value or ""
    outcome = validate_for_field(field_def.id, value, today)
    if not outcome.is_valid:
        return outcome

    if field_def.kind is FieldKind.SELECT and value.strip() and value not in field_def.options:
        return ValidationOutcome.invalid("invalidOption")
    return ValidationOutcome.valid()
