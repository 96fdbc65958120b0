"""Risk scorer providers."""

from .factory import create_risk_scorer
from .stub_risk_scorer import StubRiskScorer

__all__ = ["create_risk_scorer", "StubRiskScorer"]
