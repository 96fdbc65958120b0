"""RiskAssessment value object - classified result of one submission."""

from dataclasses import dataclass
from typing import Any, Dict

from .risk_band import BandProfile, RiskBand

GAUGE_MIN = 0.0
GAUGE_MAX = 100.0


@dataclass(frozen=True)
class RiskAssessment:
    """Classified risk score, ready for rendering.

    Created once per successful submission and owned by the caller.
    The raw score is kept as returned by the scoring service; only
    `gauge_value` is clamped, for progress indicators.

    Attributes:
        raw_score: Score as returned by the service (expected 0-100)
        profile: Band table row the score falls into
    """

    raw_score: float
    profile: BandProfile

    @property
    def band(self) -> RiskBand:
        return self.profile.band

    @property
    def explanation(self) -> str:
        return self.profile.explanation

    @property
    def label(self) -> str:
        return self.profile.label

    @property
    def tone(self) -> str:
        return self.profile.tone

    @property
    def icon(self) -> str:
        return self.profile.icon

    @property
    def gauge_value(self) -> float:
        """Score clamped to the 0-100 progress scale."""
        return min(max(self.raw_score, GAUGE_MIN), GAUGE_MAX)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "raw_score": self.raw_score,
            "band": self.band.value,
            "label": self.label,
            "explanation": self.explanation,
            "tone": self.tone,
            "icon": self.icon,
            "gauge_value": self.gauge_value,
        }
