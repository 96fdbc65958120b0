"""Risk scoring API client - Implements IRiskScorer port.

Posts a serialized intake record to the PCOS prediction service and
extracts the numeric risk score from its JSON reply.

Key Features:
- Single POST per call, JSON body, no automatic retry
- Transport errors, timeouts and non-2xx replies -> ScoringServiceError
- Non-JSON body or missing/non-numeric score -> MalformedResponseError
"""

import logging
from typing import Any, Mapping, Optional, Union

import httpx

from domain.intake.calculation.risk_classifier import parse_score
from domain.intake.core.exceptions.domain_errors import (
    MalformedResponseError,
    ScoringServiceError,
)
from infrastructure.config import get_score_field, get_scoring_timeout, get_scoring_url

logger = logging.getLogger(__name__)

Number = Union[int, float]


class RiskScoringClient:
    """
    Risk scoring API client implementing IRiskScorer port.

    Example:
        >>> async with RiskScoringClient() as client:
        ...     score = await client.score(record.to_payload())
    """

    HEADERS = {"Content-Type": "application/json"}

    def __init__(
        self,
        endpoint: Optional[str] = None,
        timeout_s: Optional[float] = None,
        score_field: Optional[str] = None,
    ) -> None:
        """
        Initialize client.

        Args:
            endpoint: Scoring URL (default: RISK_SCORING_URL)
            timeout_s: Request timeout in seconds (default: RISK_SCORING_TIMEOUT_S)
            score_field: Reply key holding the score (default: RISK_SCORE_FIELD)
        """
        self.endpoint = endpoint or get_scoring_url()
        self.timeout_s = timeout_s if timeout_s is not None else get_scoring_timeout()
        self.score_field = score_field or get_score_field()
        self._session: Optional[httpx.AsyncClient] = None

    async def __aenter__(self) -> "RiskScoringClient":
        """Async context manager entry."""
        self._session = httpx.AsyncClient(timeout=httpx.Timeout(self.timeout_s))
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit."""
        if self._session:
            await self._session.aclose()
            self._session = None

    async def score(self, payload: Mapping[str, Number]) -> float:
        """
        Score one serialized record.

        Implements IRiskScorer.score() port.

        Args:
            payload: Flat mapping of wire keys to values

        Returns:
            Risk score as returned by the service

        Raises:
            RuntimeError: If used outside the async context manager
            ScoringServiceError: On transport failure or non-2xx status
            MalformedResponseError: If the reply carries no usable score
        """
        if not self._session:
            raise RuntimeError("Client not initialized. Use async context manager.")

        try:
            response = await self._session.post(
                self.endpoint, json=dict(payload), headers=self.HEADERS
            )
        except httpx.TimeoutException as e:
            logger.error(
                "Risk scoring API timeout",
                extra={"endpoint": self.endpoint, "timeout_s": self.timeout_s},
            )
            raise ScoringServiceError(f"Scoring service timed out: {e}") from e
        except httpx.HTTPError as e:
            logger.error(
                "Risk scoring API transport error",
                extra={"endpoint": self.endpoint, "error": str(e)},
            )
            raise ScoringServiceError(f"Scoring service unreachable: {e}") from e

        if not 200 <= response.status_code < 300:
            logger.warning(
                "Risk scoring API error status",
                extra={"endpoint": self.endpoint, "status": response.status_code},
            )
            raise ScoringServiceError(
                f"Scoring service returned {response.status_code}",
                status_code=response.status_code,
            )

        try:
            body = response.json()
        except ValueError as e:
            raise MalformedResponseError("Scoring reply is not JSON") from e

        score = self._extract_score(body)

        logger.debug(
            "Risk scoring successful",
            extra={"endpoint": self.endpoint, "score": score},
        )
        return score

    def _extract_score(self, body: Any) -> float:
        """
        Pull the score out of a decoded reply.

        Raises:
            MalformedResponseError: If body is not an object, lacks the score
                field, or the score is not numeric
        """
        if not isinstance(body, dict):
            raise MalformedResponseError("Scoring reply is not a JSON object")
        if self.score_field not in body:
            raise MalformedResponseError(
                f"Scoring reply has no '{self.score_field}' field"
            )
        return parse_score(body[self.score_field])
