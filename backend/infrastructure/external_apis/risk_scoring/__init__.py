"""Risk scoring API integration."""

from .client import RiskScoringClient

__all__ = ["RiskScoringClient"]
