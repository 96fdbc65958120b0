"""Ports for PCOS risk intake domain."""

from .risk_scorer import IRiskScorer

__all__ = ["IRiskScorer"]
