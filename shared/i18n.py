"""Hindi + English string table for user-facing labels and errors.

Every message the form assistant shows is a bilingual pair looked up by
key. Hindi is the primary line and English the secondary one. Individual
entries can be replaced through the ``string_overrides`` setting in the
form-assistant config without touching this file.
"""

from __future__ import annotations

from dataclasses import dataclass

from shared.config_store import get_setting


@dataclass(frozen=True)
class BilingualText:
    """A message in both supported languages."""

    hi: str
    en: str

    def to_dict(self) -> dict[str, str]:
        return {"hi": self.hi, "en": self.en}


_DEFAULT_STRINGS: dict[str, BilingualText] = {
    # Validation errors
    "capitalLettersOnly": BilingualText(
        "केवल बड़े अक्षर (CAPITAL LETTERS) लिखें", "Use CAPITAL LETTERS only"
    ),
    "noNumbers": BilingualText(
        "नाम में अंक नहीं होने चाहिए", "Name should not contain numbers"
    ),
    "noSpecialChars": BilingualText(
        "विशेष अक्षर की अनुमति नहीं है", "Special characters not allowed"
    ),
    "invalidDate": BilingualText(
        "सही तारीख लिखें (DD/MM/YYYY)", "Enter valid date (DD/MM/YYYY)"
    ),
    "futureDate": BilingualText(
        "भविष्य की तारीख नहीं हो सकती", "Date cannot be in future"
    ),
    "invalidMobile": BilingualText(
        "सही 10 अंकों का मोबाइल नंबर लिखें", "Enter valid 10-digit mobile number"
    ),
    "invalidPincode": BilingualText(
        "सही 6 अंकों का पिनकोड लिखें", "Enter valid 6-digit PIN code"
    ),
    "invalidAge": BilingualText("सही उम्र लिखें", "Enter valid age"),
    "tooShort": BilingualText(
        "नाम बहुत छोटा है, पूरा नाम लिखें", "Name too short, enter full name"
    ),
    "initialsNotAllowed": BilingualText(
        "संक्षिप्त नाम (initials) की अनुमति नहीं है",
        "Initials not allowed, use full name",
    ),
    "fieldRequired": BilingualText("यह फ़ील्ड आवश्यक है", "This field is required"),
    "invalidOption": BilingualText(
        "दिए गए विकल्पों में से चुनें", "Choose one of the given options"
    ),
    # Readiness bands
    "excellent": BilingualText(
        "उत्कृष्ट! फॉर्म सही भरा है", "Excellent! Form is properly filled"
    ),
    "good": BilingualText("अच्छा है, कुछ सुधार करें", "Good, minor improvements needed"),
    "needsWork": BilingualText("सुधार आवश्यक है", "Needs improvement"),
}


def _overrides() -> dict:
    overrides = get_setting("string_overrides")
    return overrides if isinstance(overrides, dict) else {}


def get_bilingual_text(key: str) -> BilingualText:
    """Return the bilingual pair for *key*.

    Config overrides win over the built-in table. Unknown keys produce an
    empty pair rather than an error.
    """
    override = _overrides().get(key)
    if isinstance(override, dict) and "hi" in override and "en" in override:
        return BilingualText(str(override["hi"]), str(override["en"]))
    return _DEFAULT_STRINGS.get(key, BilingualText("", ""))


def get_text(key: str, lang: str | None = None) -> str:
    """Return text for *key* in one language, or English over Hindi when *lang* is None."""
    item = get_bilingual_text(key)
    if lang == "hi":
        return item.hi
    if lang == "en":
        return item.en
    if not item.en and not item.hi:
        return ""
    return f"{item.en}\n{item.hi}"
