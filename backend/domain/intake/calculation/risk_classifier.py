"""Risk classification of a continuous PCOS score."""

import math
from typing import Any

from ..core.exceptions.domain_errors import MalformedResponseError
from ..core.value_objects.risk_assessment import RiskAssessment
from ..core.value_objects.risk_band import RISK_BANDS


def classify(score: float) -> RiskAssessment:
    """Map a score onto its risk band.

    Bands are half-open with inclusive lower bounds:
        score < 30        -> Low
        30 <= score < 60  -> Moderate
        score >= 60       -> High

    Out-of-range scores are not clamped: -5 is Low and 150 is High.

    Args:
        score: Risk score from the scoring service

    Returns:
        RiskAssessment carrying the band and its presentation hints

    Example:
        >>> classify(30).band
        <RiskBand.MODERATE: 'Moderate'>
    """
    for profile in RISK_BANDS:
        if profile.lower_bound is None or score >= profile.lower_bound:
            return RiskAssessment(raw_score=float(score), profile=profile)
    raise AssertionError("band table has no catch-all row")


def parse_score(value: Any) -> float:
    """Coerce a score value from a service reply into a float.

    Accepts numbers and numeric strings, with an optional trailing
    percent sign ("42.5%").

    Raises:
        MalformedResponseError: If the value is not a finite number
    """
    if isinstance(value, bool):
        raise MalformedResponseError(f"Score is not a number: {value!r}")

    if isinstance(value, (int, float)):
        score = float(value)
    elif isinstance(value, str):
        text = value.strip()
        if text.endswith("%"):
            text = text[:-1].strip()
        try:
            score = float(text)
        except ValueError:
            raise MalformedResponseError(f"Score is not a number: {value!r}")
    else:
        raise MalformedResponseError(f"Score is not a number: {value!r}")

    if math.isnan(score) or math.isinf(score):
        raise MalformedResponseError(f"Score is not finite: {value!r}")
    return score
