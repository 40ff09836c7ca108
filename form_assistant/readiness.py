"""Form readiness scoring.

Scores a (possibly partial) answer set against a form's field list:

- Required fields weigh 10 points, optional fields 5.
- A valid answer earns the full weight; an invalid but non-empty answer
  earns 30% of it as credit for the attempt.
- Name fields carry 2 extra points, earned only when the stored value is
  already in capital letters.

The score is round(100 * earned / total), clamped to 0-100.
"""

from __future__ import annotations

from datetime import date
from typing import Mapping

from form_assistant.schema import AnswerSet, FieldCategory, FieldDefinition, ReadinessResult
from form_assistant.validation import classify_field, validate_value
from shared.i18n import BilingualText, get_bilingual_text

REQUIRED_WEIGHT = 10
OPTIONAL_WEIGHT = 5
INVALID_CREDIT = 0.3
NAME_CAPITALS_BONUS = 2

EXCELLENT_THRESHOLD = 90
GOOD_THRESHOLD = 70

NAMES_CAPITALS_ISSUE = "Names should be in CAPITAL letters"


def _round_half_up(value: float) -> int:
    return int(value + 0.5)


def score_readiness(
    answers: AnswerSet | Mapping[str, str],
    fields: list[FieldDefinition],
    today: date | None = None,
) -> ReadinessResult:
    """Compute the readiness score and the issues that held it back."""
    if isinstance(answers, AnswerSet):
        answers = answers.to_dict()

    earned = 0.0
    total = 0
    issues: list[str] = []

    for field_def in fields:
        value = answers.get(field_def.id) or ""
        weight = REQUIRED_WEIGHT if field_def.required else OPTIONAL_WEIGHT
        total += weight

        if not value.strip():
            if field_def.required:
                issues.append(f"Missing: {field_def.id}")
            continue

        category = classify_field(field_def.id)
        if validate_value(value, category, today).is_valid:
            earned += weight
        else:
            issues.append(f"Invalid: {field_def.id}")
            earned += weight * INVALID_CREDIT

        if category is FieldCategory.NAME:
            total += NAME_CAPITALS_BONUS
            if value == value.upper():
                earned += NAME_CAPITALS_BONUS
            else:
                issues.append(NAMES_CAPITALS_ISSUE)

    score = _round_half_up(earned / total * 100) if total > 0 else 0
    return ReadinessResult(
        score=max(0, min(score, 100)),
        issues=list(dict.fromkeys(issues)),
    )


def score_band(score: int) -> str:
    """Bucket a score into excellent / good / needs_work."""
    if score >= EXCELLENT_THRESHOLD:
        return "excellent"
    if score >= GOOD_THRESHOLD:
        return "good"
    return "needs_work"


_BAND_MESSAGE_KEYS = {
    "excellent": "excellent",
    "good": "good",
    "needs_work": "needsWork",
}


def score_message(score: int) -> BilingualText:
    return get_bilingual_text(_BAND_MESSAGE_KEYS[score_band(score)])
