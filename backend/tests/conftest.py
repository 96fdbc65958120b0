"""Shared test fixtures for PCOS risk intake."""

from __future__ import annotations

from typing import Any

import pytest


@pytest.fixture
def valid_raw_record() -> dict[str, Any]:
    """Raw form input as a browser would send it (wire keys, strings)."""
    return {
        "Age": "27",
        "Weight": "60",
        "Height": "165",
        "BloodGroup": "15",
        "PeriodFrequency": "1",
        "GainedWeight": 1,
        "ExcessiveHair": 0,
        "DarkSkin": 0,
        "HairLoss": 1,
        "FaceAcne": 1,
        "FastFood": 1,
        "RegularExercise": 0,
        "MoodSwings": 0,
        "RegularPeriods": 1,
        "PeriodDuration": "5",
    }


@pytest.fixture
def expected_payload() -> dict[str, Any]:
    """Wire payload for valid_raw_record."""
    return {
        "Age": 27,
        "Weight": 60.0,
        "Height": 165.0,
        "BloodGroup": 15,
        "PeriodFrequency": 1,
        "GainedWeight": 1,
        "ExcessiveHair": 0,
        "DarkSkin": 0,
        "HairLoss": 1,
        "FaceAcne": 1,
        "FastFood": 1,
        "RegularExercise": 0,
        "MoodSwings": 0,
        "RegularPeriods": 1,
        "PeriodDuration": 5,
        "BMI": 22.0,
    }
