"""Risk scorer factory.

Environment-based scorer selection:
- RISK_SCORER_PROVIDER=http (default): RiskScoringClient against RISK_SCORING_URL
- RISK_SCORER_PROVIDER=stub: StubRiskScorer, no network

Usage:
    from infrastructure.intake.providers.factory import create_risk_scorer

    scorer = create_risk_scorer()
"""

from domain.intake.core.ports.risk_scorer import IRiskScorer
from infrastructure.config import get_scorer_provider
from infrastructure.external_apis.risk_scoring.client import RiskScoringClient
from infrastructure.intake.providers.stub_risk_scorer import StubRiskScorer


def create_risk_scorer() -> IRiskScorer:
    """Create risk scorer based on RISK_SCORER_PROVIDER env var.

    Values:
        - "http": remote scoring service (default)
        - "stub": deterministic local stub

    Returns:
        IRiskScorer: Scorer instance. The HTTP client must be entered with
        `async with` before use.

    Raises:
        ValueError: If the provider name is not recognized
    """
    mode = get_scorer_provider()

    if mode == "stub":
        return StubRiskScorer()
    if mode == "http":
        return RiskScoringClient()

    raise ValueError(
        f"Unknown RISK_SCORER_PROVIDER={mode!r}. Use 'http' or 'stub'."
    )
