"""Tests for form_assistant/wizard.py — the step-by-step form session."""

from __future__ import annotations

import pytest

from form_assistant.normalizer import Fallback, LocalNormalizer, Suggested
from form_assistant.wizard import FormSession


class StubNormalizer:
    def __init__(self, replies: dict[str, str]):
        self.replies = replies

    def suggest(self, kind, text):
        if text in self.replies:
            return Suggested(self.replies[text])
        return Fallback("no stub reply")


@pytest.fixture()
def session(today) -> FormSession:
    return FormSession("aadhaar", normalizer=LocalNormalizer(), today=today)


class TestNavigation:
    def test_starts_on_first_field(self, session):
        assert session.step == 0
        assert session.current_field.id == "pre_enrolment_id"
        assert session.total_steps == 28
        assert session.progress == pytest.approx(100 / 28)

    def test_unknown_form_type_uses_default(self, today):
        assert FormSession("ration-card", today=today).form_type == "aadhaar"

    def test_optional_blank_field_can_be_skipped(self, session):
        assert session.advance().is_valid
        assert session.current_field.id == "full_name"

    def test_required_blank_blocks(self, session):
        session.advance()
        outcome = session.advance()
        assert outcome.error_key == "fieldRequired"
        assert session.current_field.id == "full_name"

    def test_invalid_value_blocks(self, session):
        session.advance()
        session.set_answer("r. kumar")
        outcome = session.advance()
        assert outcome.error_key == "initialsNotAllowed"
        assert session.step == 1

    def test_back(self, session):
        assert session.back() is False
        session.advance()
        assert session.back() is True
        assert session.step == 0

    def test_last_step_does_not_move_past_end(self, session):
        session.step = session.total_steps - 1
        assert session.is_last_step
        assert session.advance().is_valid
        assert session.step == session.total_steps - 1
        assert session.progress == 100


class TestAnswers:
    def test_set_answer_formats_by_category(self, session):
        session.advance()
        assert session.set_answer("ramesh kumar") == "RAMESH KUMAR"
        assert session.answers.get("full_name") == "RAMESH KUMAR"
        assert session.set_answer("15081998", field_id="date_of_birth") == "15/08/1998"
        assert session.set_answer("98-765 43210x", field_id="mobile") == "9876543210"

    def test_unknown_field_write_ignored(self, session):
        session.set_answer("ABC", field_id="passport_number")
        assert "passport_number" not in session.answers
        assert session.answers.to_dict() == {}

    def test_current_error_is_live(self, session):
        session.advance()
        assert session.current_error().is_valid
        session.set_answer("RAMESH 2")
        assert session.current_error().error_key == "noNumbers"

    def test_select_option_enforced(self, session):
        session.step = 2
        assert session.current_field.id == "gender"
        session.set_answer("Other")
        assert session.advance().error_key == "invalidOption"
        session.set_answer("Female")
        assert session.advance().is_valid
        assert session.current_field.id == "age"


class TestSubmit:
    def test_submit_normalizes_then_scores(self, session, complete_aadhaar_answers):
        for field_id, value in complete_aadhaar_answers.items():
            session.set_answer(value.lower() if field_id == "street" else value, field_id=field_id)
        submission = session.submit()
        assert submission.answers["street"] == "MG ROAD"
        assert submission.answers["gender"] == "MALE"
        assert submission.readiness.issues == []
        assert submission.readiness.score == round(194 / 239 * 100)

    def test_submit_adopts_suggestions(self, today):
        session = FormSession(
            "aadhaar",
            normalizer=StubNormalizer({"R. KUMAR": "RAMESH KUMAR"}),
            today=today,
        )
        session.set_answer("r. kumar", field_id="full_name")
        session.set_answer("s/o suresh", field_id="care_of")
        submission = session.submit()
        assert submission.answers["full_name"] == "RAMESH KUMAR"
        assert submission.answers["care_of"] == "SO SURESH"
        assert "Invalid: full_name" not in submission.readiness.issues

    def test_submit_builds_normalizer_when_none_given(self, today):
        session = FormSession("aadhaar", today=today)
        session.set_answer("ramesh kumar", field_id="full_name")
        submission = session.submit(ai_enabled=True)
        assert submission.answers == {"full_name": "RAMESH KUMAR"}
        assert submission.to_dict()["form_type"] == "aadhaar"

    def test_scenario_three_fields(self, today):
        session = FormSession("aadhaar", normalizer=LocalNormalizer(), today=today)
        session.fields = [f for f in session.fields if f.id in {"full_name", "mobile", "pincode"}]
        session.set_answer("ramesh kumar", field_id="full_name")
        session.set_answer("9876543210", field_id="mobile")
        session.set_answer("400001", field_id="pincode")
        assert session.answers.get("full_name") == "RAMESH KUMAR"
        submission = session.submit()
        assert submission.readiness.score == 100
        assert submission.readiness.issues == []
