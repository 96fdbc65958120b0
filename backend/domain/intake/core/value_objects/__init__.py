"""Value objects for PCOS risk intake domain."""

from .blood_group import BloodGroup
from .risk_assessment import RiskAssessment
from .risk_band import RISK_BANDS, BandProfile, RiskBand, band_profile

__all__ = [
    "BloodGroup",
    "RiskBand",
    "BandProfile",
    "RISK_BANDS",
    "band_profile",
    "RiskAssessment",
]
