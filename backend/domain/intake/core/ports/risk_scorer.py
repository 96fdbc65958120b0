"""Risk scorer port (interface).

Defines the contract for services that turn a serialized intake record
into a PCOS risk score. The domain defines the port; infrastructure
provides the HTTP client and the stub.
"""

from typing import Mapping, Protocol, Union

Number = Union[int, float]


class IRiskScorer(Protocol):
    """
    Interface for risk scoring services.

    Example implementation (infrastructure layer):
        >>> class RiskScoringClient:
        ...     async def score(self, payload: Mapping[str, Number]) -> float:
        ...         response = await self._session.post(self._endpoint, json=payload)
        ...         return parse_score(response.json()["pcos_risk_score"])
    """

    async def score(self, payload: Mapping[str, Number]) -> float:
        """
        Score one serialized record.

        Args:
            payload: Flat mapping of the 16 wire keys to their values

        Returns:
            Risk score, nominally 0-100 (not clamped)

        Raises:
            SubmissionError: On transport failure or unusable reply
        """
        ...
