"""Tests for form_assistant/schema.py — answer set and result models."""

from __future__ import annotations

import pytest

from form_assistant.schema import (
    AnswerSet,
    FieldDefinition,
    ReadinessResult,
    UnknownFieldError,
    ValidationOutcome,
)

FIELDS = [
    FieldDefinition(id="full_name", label="Full Name", required=True),
    FieldDefinition(id="mobile", label="Mobile", required=True),
]


class TestAnswerSet:
    def test_set_and_get(self):
        answers = AnswerSet(FIELDS)
        answers.set("full_name", "RAMESH KUMAR")
        answers.set("full_name", "RAMESH KUMAR SINGH")
        assert answers.get("full_name") == "RAMESH KUMAR SINGH"
        assert answers.get("mobile") == ""
        assert "mobile" not in answers

    def test_unknown_id_rejected(self):
        answers = AnswerSet(FIELDS)
        with pytest.raises(UnknownFieldError):
            answers.set("pincode", "400001")
        assert answers.to_dict() == {}

    def test_unknown_field_error_is_key_error(self):
        assert issubclass(UnknownFieldError, KeyError)

    def test_from_dict_drops_unknown_ids(self):
        answers = AnswerSet.from_dict(FIELDS, {"full_name": "RAMESH", "typo_field": "x"})
        assert answers.to_dict() == {"full_name": "RAMESH"}

    def test_none_stored_as_empty(self):
        answers = AnswerSet(FIELDS)
        answers.set("mobile", None)
        assert answers.get("mobile", "missing") == ""


class TestResults:
    def test_valid_outcome(self):
        assert ValidationOutcome.valid().to_dict() == {
            "is_valid": True,
            "error_key": None,
            "error": None,
        }

    def test_invalid_outcome_carries_both_languages(self):
        d = ValidationOutcome.invalid("invalidPincode").to_dict()
        assert d["is_valid"] is False
        assert d["error"]["en"] == "Enter valid 6-digit PIN code"
        assert d["error"]["hi"] == "सही 6 अंकों का पिनकोड लिखें"

    def test_readiness_to_dict(self):
        assert ReadinessResult(80, ["Missing: mobile"]).to_dict() == {
            "score": 80,
            "issues": ["Missing: mobile"],
        }
