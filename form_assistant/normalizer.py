"""Submission-time clean-up of name and address answers.

Names and address lines can optionally be tidied by Claude before the
form is rendered. Whether that happens is decided once, when the
normalizer is built: without AI-assist or without an API key the local
rules are used throughout. A failed or unusable remote reply is never an
error for the caller; it simply resolves to the local rule.

Other answers are only uppercased.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Mapping, Protocol, Union

import anthropic

from form_assistant.schema import FieldCategory
from form_assistant.validation import classify_field
from shared import claude_client
from shared.config_store import get_setting

logger = logging.getLogger(__name__)

ADDRESS_FIELD_IDS = frozenset(
    {"house_no", "street", "landmark", "area", "village_city", "post_office"}
)

NAME = "name"
ADDRESS = "address"

NAME_INSTRUCTION = """Convert this Indian name to proper government form format (ALL CAPS, full name without initials).

Rules:
- Convert to UPPERCASE
- Keep as is if already proper (don't expand known initials unless obvious)
- Remove extra spaces
- Keep only alphabets and spaces

Output ONLY the corrected name, nothing else. No explanation."""

ADDRESS_INSTRUCTION = """Format this Indian address for a government form (ALL CAPS).

Rules:
- Convert to UPPERCASE
- Keep numbers and common abbreviations
- Clean up formatting

Output ONLY the formatted address, nothing else. No explanation."""

_INSTRUCTIONS = {NAME: NAME_INSTRUCTION, ADDRESS: ADDRESS_INSTRUCTION}
_MAX_TOKENS = {NAME: 50, ADDRESS: 100}
_LENGTH_SETTINGS = {NAME: "name_length_limit", ADDRESS: "address_length_limit"}

_NOT_NAME_CHARS_RE = re.compile(r"[^A-Z\s.]")
_NOT_LETTERS_RE = re.compile(r"[^A-Z\s]")
_DOT_RE = re.compile(r"\.\s*")
_SPACES_RE = re.compile(r"\s+")


# ---------------------------------------------------------------------------
# Local rules
# ---------------------------------------------------------------------------

def manual_normalize_name(name: str) -> str:
    """Uppercase, drop everything but letters, and turn "R. KUMAR" into "R KUMAR"."""
    if not name:
        return ""
    normalized = _NOT_NAME_CHARS_RE.sub("", name.upper())
    normalized = _DOT_RE.sub(" ", normalized)
    return _SPACES_RE.sub(" ", normalized).strip()


def manual_format_address(address: str) -> str:
    if not address:
        return ""
    return _SPACES_RE.sub(" ", address.upper()).strip()


_LOCAL_RULES = {NAME: manual_normalize_name, ADDRESS: manual_format_address}


# ---------------------------------------------------------------------------
# Suggestion results
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Suggested:
    """Claude returned usable text."""

    text: str


@dataclass(frozen=True)
class Fallback:
    """No usable suggestion; the local rule applies."""

    reason: str = ""


Suggestion = Union[Suggested, Fallback]


class Normalizer(Protocol):
    def suggest(self, kind: str, text: str) -> Suggestion: ...


class LocalNormalizer:
    """Never asks anyone; every suggestion falls back to the local rule."""

    def suggest(self, kind: str, text: str) -> Suggestion:
        return Fallback("ai-assist disabled")


class RemoteNormalizer:
    """Asks Claude for a cleaned-up name or address line."""

    def __init__(self, timeout: float | None = None):
        self.timeout = timeout

    def suggest(self, kind: str, text: str) -> Suggestion:
        try:
            reply = claude_client.normalize_text(
                _INSTRUCTIONS[kind],
                text,
                max_tokens=_MAX_TOKENS[kind],
                timeout=self.timeout,
            )
        except (anthropic.APIError, RuntimeError, ValueError) as exc:
            logger.warning("AI %s normalization failed, using fallback: %s", kind, exc)
            return Fallback(str(exc))
        return self._accept(kind, reply)

    @staticmethod
    def _accept(kind: str, reply: str | None) -> Suggestion:
        text = (reply or "").strip()
        limit = int(get_setting(_LENGTH_SETTINGS[kind]))
        if not text or len(text) >= limit:
            logger.warning("AI %s reply unusable (length %d), using fallback", kind, len(text))
            return Fallback("empty or oversize reply")

        text = text.upper()
        if kind == NAME:
            text = _SPACES_RE.sub(" ", _NOT_LETTERS_RE.sub("", text)).strip()
            if not text:
                return Fallback("no letters in reply")
        return Suggested(text)


def build_normalizer(ai_enabled: bool | None = None) -> Normalizer:
    """Pick the remote normalizer only when AI-assist is on and a key is configured."""
    if ai_enabled is None:
        ai_enabled = get_setting("ai_assist_enabled") is True
    if ai_enabled and claude_client.has_api_key():
        return RemoteNormalizer()
    if ai_enabled:
        logger.info("AI-assist requested but no API key configured; using local rules")
    return LocalNormalizer()


# ---------------------------------------------------------------------------
# Submission pass
# ---------------------------------------------------------------------------

def normalization_kind(field_id: str) -> str | None:
    """Return "name", "address" or None for fields that are only uppercased."""
    if classify_field(field_id) is FieldCategory.NAME:
        return NAME
    if field_id in ADDRESS_FIELD_IDS:
        return ADDRESS
    return None


def normalize_field(field_id: str, value: str, normalizer: Normalizer) -> str:
    if not value or not value.strip():
        return value

    kind = normalization_kind(field_id)
    if kind is None:
        return value.upper()

    suggestion = normalizer.suggest(kind, value)
    if isinstance(suggestion, Suggested):
        return suggestion.text
    return _LOCAL_RULES[kind](value)


def normalize_answers(answers: Mapping[str, str], normalizer: Normalizer) -> dict[str, str]:
    """Run every answer through normalize_field, one field at a time."""
    return {
        field_id: normalize_field(field_id, value, normalizer)
        for field_id, value in answers.items()
    }
