"""Data models for the form assistant.

Dataclasses for field definitions, per-field validation outcomes, the
answer set collected by the wizard, and the readiness result. Field
definitions and results support JSON serialization via to_dict.
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass, field
from enum import Enum

from shared.i18n import BilingualText, get_bilingual_text

logger = logging.getLogger(__name__)


class FieldKind(str, Enum):
    """How a field is answered in the wizard."""

    TEXT = "text"
    NUMBER = "number"
    DATE = "date"
    SELECT = "select"


class FieldCategory(str, Enum):
    """Validation and formatting behaviour derived from a field id."""

    NAME = "name"
    DATE = "date"
    MOBILE = "mobile"
    PINCODE = "pincode"
    AGE = "age"
    NONE = "none"


@dataclass(frozen=True)
class FieldDefinition:
    """A single question in a form."""

    id: str
    label: str
    kind: FieldKind = FieldKind.TEXT
    required: bool = False
    options: tuple[str, ...] = ()  # select fields only
    section: str = ""
    placeholder: str = ""

    def __post_init__(self) -> None:
        if (self.kind is FieldKind.SELECT) != bool(self.options):
            raise ValueError(
                f"Field {self.id!r}: options must be given for select fields only."
            )

    def to_dict(self) -> dict:
        d = asdict(self)
        d["kind"] = self.kind.value
        d["options"] = list(self.options)
        return d


@dataclass(frozen=True)
class ValidationOutcome:
    """Result of checking one value. Invalid outcomes carry a bilingual error."""

    is_valid: bool
    error_key: str | None = None
    error: BilingualText | None = None

    @classmethod
    def valid(cls) -> ValidationOutcome:
        return cls(True)

    @classmethod
    def invalid(cls, error_key: str) -> ValidationOutcome:
        return cls(False, error_key, get_bilingual_text(error_key))

    def to_dict(self) -> dict:
        return {
            "is_valid": self.is_valid,
            "error_key": self.error_key,
            "error": self.error.to_dict() if self.error else None,
        }


@dataclass
class ReadinessResult:
    """Weighted completeness score (0-100) and the de-duplicated issues behind it."""

    score: int
    issues: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return asdict(self)


class UnknownFieldError(KeyError):
    """Raised when writing an answer for an id the active form does not define."""


class AnswerSet:
    """Answers keyed by field id, restricted to the ids of one form.

    Writes for ids outside the form raise UnknownFieldError so stale or
    mistyped keys never reach the scorer.
    """

    def __init__(self, fields: list[FieldDefinition]):
        self._allowed = {f.id for f in fields}
        self._values: dict[str, str] = {}

    @classmethod
    def from_dict(cls, fields: list[FieldDefinition], data: dict[str, str]) -> AnswerSet:
        """Build an answer set from raw data, dropping ids the form does not know."""
        answers = cls(fields)
        for field_id, value in data.items():
            if field_id not in answers._allowed:
                logger.warning("Ignoring answer for unknown field %r", field_id)
                continue
            answers.set(field_id, value)
        return answers

    def set(self, field_id: str, value: str) -> None:
        if field_id not in self._allowed:
            raise UnknownFieldError(field_id)
        self._values[field_id] = "" if value is None else str(value)

    def get(self, field_id: str, default: str = "") -> str:
        return self._values.get(field_id, default)

    def __contains__(self, field_id: object) -> bool:
        return field_id in self._values

    def to_dict(self) -> dict[str, str]:
        return dict(self._values)
