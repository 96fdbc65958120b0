"""RiskBand value object - ordinal classification of a risk score.

The band table is the single source for thresholds and presentation hints.
Both the classifier and any renderer read it; nothing else hardcodes 30/60.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class RiskBand(str, Enum):
    """Qualitative PCOS risk band."""

    LOW = "Low"
    MODERATE = "Moderate"
    HIGH = "High"


@dataclass(frozen=True)
class BandProfile:
    """One row of the band table.

    Attributes:
        band: Risk band
        lower_bound: Inclusive lower score bound (None = unbounded)
        explanation: What the band means for the user
        tone: Colour category for the presentation layer
        icon: Icon category for the presentation layer
    """

    band: RiskBand
    lower_bound: Optional[float]
    explanation: str
    tone: str
    icon: str

    @property
    def label(self) -> str:
        return f"{self.band.value} Risk"


# Ordered from highest lower bound to lowest; first match wins.
RISK_BANDS: Tuple[BandProfile, ...] = (
    BandProfile(
        band=RiskBand.HIGH,
        lower_bound=60.0,
        explanation=(
            "Your symptoms suggest a higher likelihood of PCOS. It's recommended "
            "to consult with a healthcare provider for proper evaluation."
        ),
        tone="red",
        icon="alert-circle",
    ),
    BandProfile(
        band=RiskBand.MODERATE,
        lower_bound=30.0,
        explanation=(
            "Your symptoms suggest a moderate likelihood of PCOS. Consider "
            "consulting with a healthcare provider."
        ),
        tone="amber",
        icon="alert-circle",
    ),
    BandProfile(
        band=RiskBand.LOW,
        lower_bound=None,
        explanation=(
            "Your symptoms suggest a lower likelihood of PCOS. However, this is "
            "not a medical diagnosis."
        ),
        tone="green",
        icon="check-circle",
    ),
)


def band_profile(band: RiskBand) -> BandProfile:
    """Get the table row for a band."""
    for profile in RISK_BANDS:
        if profile.band is band:
            return profile
    raise KeyError(band)
