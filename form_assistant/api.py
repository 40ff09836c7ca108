"""FastAPI backend for the form assistant.

Provides endpoints for listing supported forms, retrieving their question
lists, checking a single answer as it is typed, scoring a set of answers,
and submitting a completed form (normalization followed by scoring).
"""

from __future__ import annotations

from typing import Any

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from form_assistant.form_definitions import (
    get_field,
    get_field_definitions,
    get_fields_by_section,
    get_form_meta,
    list_form_types,
)
from form_assistant.normalizer import build_normalizer, normalize_answers
from form_assistant.readiness import score_band, score_message, score_readiness
from form_assistant.schema import AnswerSet, ReadinessResult
from form_assistant.validation import (
    classify_field,
    format_for_field,
    validate_for_field,
    validate_step,
)

app = FastAPI(title="Form Assistant API")


# ---------------------------------------------------------------------------
# Request / response models
# ---------------------------------------------------------------------------

class CheckFieldRequest(BaseModel):
    """A single raw answer, as typed."""

    value: str = ""
    step_advance: bool = False  # also enforce required / options


class AnswersRequest(BaseModel):
    """Answers keyed by field id."""

    data: dict[str, str]


class SubmitRequest(BaseModel):
    """Completed answers plus the session's AI-assist choice."""

    data: dict[str, str]
    ai_assist: bool | None = None  # None: use the configured default


def _formatted_answers(form_type: str, data: dict[str, str]) -> AnswerSet:
    fields = get_field_definitions(form_type)
    formatted = {field_id: format_for_field(field_id, value) for field_id, value in data.items()}
    return AnswerSet.from_dict(fields, formatted)


def _readiness_payload(result: ReadinessResult) -> dict[str, Any]:
    return {
        **result.to_dict(),
        "band": score_band(result.score),
        "message": score_message(result.score).to_dict(),
    }


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------

@app.get("/api/forms")
def list_forms() -> list[dict[str, str]]:
    """List the forms offered in the form picker."""
    return list_form_types()


@app.get("/api/forms/{form_type}/fields")
def get_form_fields(form_type: str) -> dict[str, Any]:
    """Get the question list for a form, organized by section.

    Unknown form types return the default form.
    """
    meta = get_form_meta(form_type)
    sections = {
        section: [f.to_dict() for f in fields]
        for section, fields in get_fields_by_section(form_type).items()
    }
    return {
        "form_type": meta["form_type"],
        "title": meta["title"],
        "sections": sections,
    }


@app.post("/api/forms/{form_type}/fields/{field_id}/check")
def check_field(form_type: str, field_id: str, request: CheckFieldRequest) -> dict[str, Any]:
    """Auto-format one answer and validate it.

    With step_advance set, the required check and option membership are
    enforced as well, as when the user presses Next.
    """
    field_def = get_field(form_type, field_id)
    if field_def is None:
        raise HTTPException(status_code=404, detail=f"Unknown field: {field_id}")

    formatted = format_for_field(field_id, request.value)
    if request.step_advance:
        outcome = validate_step(field_def, formatted)
    else:
        outcome = validate_for_field(field_id, formatted)

    return {
        "field_id": field_id,
        "category": classify_field(field_id).value,
        "value": formatted,
        **outcome.to_dict(),
    }


@app.post("/api/forms/{form_type}/score")
def score_form(form_type: str, request: AnswersRequest) -> dict[str, Any]:
    """Score a set of answers without the normalization pass."""
    answers = _formatted_answers(form_type, request.data)
    result = score_readiness(answers, get_field_definitions(form_type))
    return {
        "form_type": get_form_meta(form_type)["form_type"],
        "answers": answers.to_dict(),
        "readiness": _readiness_payload(result),
    }


@app.post("/api/forms/{form_type}/submit")
def submit_form(form_type: str, request: SubmitRequest) -> dict[str, Any]:
    """Normalize name and address answers, then score the completed form."""
    answers = _formatted_answers(form_type, request.data)
    normalized = normalize_answers(answers.to_dict(), build_normalizer(request.ai_assist))
    result = score_readiness(normalized, get_field_definitions(form_type))
    return {
        "form_type": get_form_meta(form_type)["form_type"],
        "answers": normalized,
        "readiness": _readiness_payload(result),
    }
