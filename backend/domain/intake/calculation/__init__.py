"""Calculation services for PCOS risk intake."""

from .bmi_service import bmi_category, derive_bmi
from .risk_classifier import classify, parse_score

__all__ = [
    "derive_bmi",
    "bmi_category",
    "classify",
    "parse_score",
]
