"""Tests for form_assistant/form_definitions.py — the field registry."""

from __future__ import annotations

import pytest

from form_assistant.form_definitions import (
    get_field,
    get_field_definitions,
    get_fields_by_section,
    get_form_meta,
    list_form_types,
    resolve_form_type,
)
from form_assistant.schema import FieldDefinition, FieldKind
from shared.config_store import set_setting


class TestGetFieldDefinitions:
    def test_aadhaar_order_and_size(self):
        fields = get_field_definitions("aadhaar")
        ids = [f.id for f in fields]
        assert len(fields) == 28
        assert ids[0] == "pre_enrolment_id"
        assert ids[1] == "full_name"
        assert ids[-1] == "por_document"

    def test_ids_are_unique(self):
        ids = [f.id for f in get_field_definitions("aadhaar")]
        assert len(ids) == len(set(ids))

    def test_options_only_on_select_fields(self):
        for f in get_field_definitions("aadhaar"):
            assert (f.kind is FieldKind.SELECT) == bool(f.options), f.id

    def test_unknown_form_type_falls_back(self):
        assert get_field_definitions("passport") == get_field_definitions("aadhaar")

    def test_generic_aliases_aadhaar(self):
        assert resolve_form_type("generic") == "aadhaar"
        assert get_field_definitions("generic") == get_field_definitions("aadhaar")

    def test_configured_default_ignored_when_unknown(self):
        set_setting("default_form_type", "does-not-exist")
        assert resolve_form_type("passport") == "aadhaar"

    def test_fields_carry_their_section(self):
        sections = get_fields_by_section("aadhaar")
        for section, fields in sections.items():
            assert all(f.section == section for f in fields)
        assert [f.id for f in sections["Contact"]] == ["mobile", "email"]


class TestLookups:
    def test_get_field(self):
        gender = get_field("aadhaar", "gender")
        assert gender is not None
        assert gender.required is True
        assert gender.options == ("Male", "Female", "Transgender")

    def test_get_field_unknown(self):
        assert get_field("aadhaar", "passport_number") is None

    def test_form_meta(self):
        meta = get_form_meta("unknown")
        assert meta["form_type"] == "aadhaar"
        assert meta["title"] == "Aadhaar Enrolment / Correction Form"
        assert list(get_fields_by_section("aadhaar")) == meta["sections"]

    def test_list_form_types(self):
        assert list_form_types() == [
            {"id": "aadhaar", "name": "Aadhaar Enrolment / Correction Form"}
        ]


class TestFieldDefinitionInvariants:
    def test_select_without_options_rejected(self):
        with pytest.raises(ValueError):
            FieldDefinition(id="gender", label="Gender", kind=FieldKind.SELECT)

    def test_options_on_text_field_rejected(self):
        with pytest.raises(ValueError):
            FieldDefinition(id="state", label="State", options=("A", "B"))

    def test_to_dict(self):
        d = get_field("aadhaar", "dob_type").to_dict()
        assert d["kind"] == "select"
        assert d["options"] == ["Declared", "Verified"]
        assert d["section"] == "Personal Details"
