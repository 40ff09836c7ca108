"""Step-by-step form session.

Holds the state behind the one-question-at-a-time wizard: which step the
user is on and what they have answered so far. Input is auto-formatted
as it arrives; the required check and the category rules are enforced
when the user tries to advance.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date

from form_assistant.form_definitions import get_field_definitions, resolve_form_type
from form_assistant.normalizer import Normalizer, build_normalizer, normalize_answers
from form_assistant.readiness import score_readiness
from form_assistant.schema import (
    AnswerSet,
    FieldDefinition,
    ReadinessResult,
    UnknownFieldError,
    ValidationOutcome,
)
from form_assistant.validation import format_for_field, validate_for_field, validate_step

logger = logging.getLogger(__name__)


@dataclass
class Submission:
    """Answers after the normalization pass, and their readiness score."""

    form_type: str
    answers: dict[str, str]
    readiness: ReadinessResult

    def to_dict(self) -> dict:
        return {
            "form_type": self.form_type,
            "answers": self.answers,
            "readiness": self.readiness.to_dict(),
        }


class FormSession:
    """One pass through a form, from the first question to submission."""

    def __init__(
        self,
        form_type: str,
        normalizer: Normalizer | None = None,
        today: date | None = None,
    ):
        self.form_type = resolve_form_type(form_type)
        self.fields: list[FieldDefinition] = get_field_definitions(self.form_type)
        self.answers = AnswerSet(self.fields)
        self.step = 0
        self.normalizer = normalizer
        self.today = today

    @property
    def total_steps(self) -> int:
        return len(self.fields)

    @property
    def current_field(self) -> FieldDefinition | None:
        if 0 <= self.step < self.total_steps:
            return self.fields[self.step]
        return None

    @property
    def is_last_step(self) -> bool:
        return self.step == self.total_steps - 1

    @property
    def progress(self) -> float:
        """Percent of the form reached, counting the current step."""
        if not self.total_steps:
            return 0.0
        return (self.step + 1) / self.total_steps * 100

    def set_answer(self, value: str, field_id: str | None = None) -> str:
        """Format and store input for a field (the current one by default).

        Returns the formatted value. Writes for ids the form does not
        define are ignored.
        """
        if field_id is None:
            if self.current_field is None:
                return value
            field_id = self.current_field.id
        formatted = format_for_field(field_id, value)
        try:
            self.answers.set(field_id, formatted)
        except UnknownFieldError:
            logger.warning("Ignoring answer for unknown field %r in %s", field_id, self.form_type)
        return formatted

    def current_error(self) -> ValidationOutcome:
        """Live validation of the current answer. Blank answers are not flagged."""
        field_def = self.current_field
        if field_def is None:
            return ValidationOutcome.valid()
        return validate_for_field(field_def.id, self.answers.get(field_def.id), self.today)

    def advance(self) -> ValidationOutcome:
        """Move to the next step if the current answer passes the step check.

        On the last step a passing answer leaves the step where it is; the
        caller submits instead.
        """
        field_def = self.current_field
        if field_def is None:
            return ValidationOutcome.valid()
        outcome = validate_step(field_def, self.answers.get(field_def.id), self.today)
        if outcome.is_valid and not self.is_last_step:
            self.step += 1
        return outcome

    def back(self) -> bool:
        """Step back one question. Returns False when already on the first."""
        if self.step == 0:
            return False
        self.step -= 1
        return True

    def submit(self, ai_enabled: bool | None = None) -> Submission:
        """Normalize every answer, then score the result."""
        normalizer = self.normalizer or build_normalizer(ai_enabled)
        normalized = normalize_answers(self.answers.to_dict(), normalizer)
        readiness = score_readiness(normalized, self.fields, self.today)
        return Submission(self.form_type, normalized, readiness)
