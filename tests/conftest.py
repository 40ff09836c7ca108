"""Shared fixtures for all tests."""

from __future__ import annotations

from datetime import date
from pathlib import Path
from unittest.mock import patch

import pytest

import shared.claude_client as claude_mod
import shared.config_store as config_mod


@pytest.fixture(autouse=True)
def _isolate_config(tmp_path: Path, monkeypatch):
    """Point the config store and .env lookup at empty temp locations."""
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    monkeypatch.delenv("ANTHROPIC_API_KEY", raising=False)
    with patch.object(config_mod, "CONFIG_DIR", config_dir), patch.object(
        claude_mod, "_ENV_PATH", tmp_path / ".env"
    ):
        yield config_dir


@pytest.fixture()
def today() -> date:
    return date(2026, 10, 19)


@pytest.fixture()
def complete_aadhaar_answers() -> dict[str, str]:
    """Every required Aadhaar field filled with a valid, already-formatted value."""
    return {
        "full_name": "RAMESH KUMAR",
        "gender": "Male",
        "age": "28",
        "date_of_birth": "15/08/1998",
        "dob_type": "Declared",
        "care_of": "SURESH KUMAR",
        "house_no": "123, FLAT A-101",
        "street": "MG ROAD",
        "area": "SECTOR 15",
        "village_city": "MUMBAI",
        "post_office": "ANDHERI PO",
        "district": "MUMBAI SUBURBAN",
        "state": "MAHARASHTRA",
        "pincode": "400053",
        "mobile": "9876543210",
        "uidai_consent": "Yes",
        "bank_linking": "No",
        "poi_document": "PASSPORT",
        "poa_document": "ELECTRICITY BILL",
    }
