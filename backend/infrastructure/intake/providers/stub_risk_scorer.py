"""Stub risk scorer for development and testing.

Returns a deterministic score from the symptom flags without calling the
remote prediction service.
"""

from typing import Mapping, Union

Number = Union[int, float]

# Each reported symptom adds this many points
SYMPTOM_KEYS = (
    "GainedWeight",
    "ExcessiveHair",
    "DarkSkin",
    "HairLoss",
    "FaceAcne",
    "FastFood",
    "MoodSwings",
)
SYMPTOM_POINTS = 10.0
IRREGULAR_PERIODS_POINTS = 20.0
NO_EXERCISE_POINTS = 10.0


class StubRiskScorer:
    """
    Stub implementation of IRiskScorer for testing.

    Score (0-100):
        10 per symptom flag set
        + 20 if periods are irregular
        + 10 if no regular exercise
    """

    def __init__(self) -> None:
        self.calls = 0

    async def __aenter__(self) -> "StubRiskScorer":
        """Enter async context (no-op for stub)."""
        return self

    async def __aexit__(self, exc_type: object, exc_val: object, exc_tb: object) -> None:
        """Exit async context (no-op for stub)."""
        return None

    async def score(self, payload: Mapping[str, Number]) -> float:
        """
        Score one serialized record.

        Args:
            payload: Flat mapping of wire keys to values

        Returns:
            Deterministic score in [0, 100]
        """
        self.calls += 1
        total = sum(SYMPTOM_POINTS for key in SYMPTOM_KEYS if payload.get(key) == 1)
        if payload.get("RegularPeriods") == 0:
            total += IRREGULAR_PERIODS_POINTS
        if payload.get("RegularExercise") == 0:
            total += NO_EXERCISE_POINTS
        return float(total)
