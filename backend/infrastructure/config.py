"""Configuration utilities for infrastructure layer."""

import os

DEFAULT_SCORING_URL = "https://pcos-backend-yvaw.onrender.com/predict"
DEFAULT_SCORE_FIELD = "pcos_risk_score"
DEFAULT_SCORING_TIMEOUT_S = 5.0


def get_scoring_url() -> str:
    """
    Get the risk scoring endpoint.

    Returns:
        URL from RISK_SCORING_URL env var, defaults to the hosted PCOS model
    """
    return os.getenv("RISK_SCORING_URL") or DEFAULT_SCORING_URL


def get_scoring_timeout() -> float:
    """
    Get the scoring request timeout in seconds.

    Returns:
        Value of RISK_SCORING_TIMEOUT_S, or 5.0 if unset or not a number
    """
    raw = os.getenv("RISK_SCORING_TIMEOUT_S")
    if not raw:
        return DEFAULT_SCORING_TIMEOUT_S
    try:
        return float(raw)
    except ValueError:
        return DEFAULT_SCORING_TIMEOUT_S


def get_score_field() -> str:
    """
    Get the reply key holding the risk score.

    Returns:
        Value of RISK_SCORE_FIELD, defaults to "pcos_risk_score"
    """
    return os.getenv("RISK_SCORE_FIELD") or DEFAULT_SCORE_FIELD


def get_scorer_provider() -> str:
    """
    Get the scorer provider mode.

    Returns:
        "http" (default) or "stub", from RISK_SCORER_PROVIDER
    """
    return os.getenv("RISK_SCORER_PROVIDER", "http").lower()
