"""Unit tests for RiskScoringClient.

Tests focus on:
- Client initialization and configuration
- Request shape (single POST, JSON body, content type)
- Score extraction
- Error mapping (transport, status, malformed reply)

These are UNIT tests with a mocked HTTP session.
"""

from typing import Any
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest

from domain.intake.core.exceptions.domain_errors import (
    MalformedResponseError,
    ScoringServiceError,
)
from infrastructure.config import DEFAULT_SCORE_FIELD, DEFAULT_SCORING_URL
from infrastructure.external_apis.risk_scoring.client import RiskScoringClient

ENDPOINT = "https://scoring.test/predict"


@pytest.fixture
def scoring_client() -> RiskScoringClient:
    """Fixture providing RiskScoringClient with mocked HTTP session."""
    client = RiskScoringClient(endpoint=ENDPOINT, timeout_s=3.0)
    # Mock the session directly (don't use async context manager in tests)
    client._session = AsyncMock()
    return client


def mock_response(status_code: int = 200, body: Any = None) -> MagicMock:
    response = MagicMock()
    response.status_code = status_code
    if isinstance(body, Exception):
        response.json = MagicMock(side_effect=body)
    else:
        response.json = MagicMock(return_value=body)
    return response


class TestRiskScoringClientInit:
    """Test client initialization."""

    def test_init_defaults(self, monkeypatch):
        """Test defaults when no env vars are set."""
        monkeypatch.delenv("RISK_SCORING_URL", raising=False)
        monkeypatch.delenv("RISK_SCORE_FIELD", raising=False)
        monkeypatch.delenv("RISK_SCORING_TIMEOUT_S", raising=False)

        client = RiskScoringClient()

        assert client.endpoint == DEFAULT_SCORING_URL
        assert client.score_field == DEFAULT_SCORE_FIELD
        assert client.timeout_s == 5.0
        assert client._session is None

    def test_init_from_env(self, monkeypatch):
        """Test env vars override defaults."""
        monkeypatch.setenv("RISK_SCORING_URL", ENDPOINT)
        monkeypatch.setenv("RISK_SCORE_FIELD", "score")
        monkeypatch.setenv("RISK_SCORING_TIMEOUT_S", "12.5")

        client = RiskScoringClient()

        assert client.endpoint == ENDPOINT
        assert client.score_field == "score"
        assert client.timeout_s == 12.5

    def test_invalid_timeout_env_falls_back(self, monkeypatch):
        """Test a non-numeric timeout falls back to the default."""
        monkeypatch.setenv("RISK_SCORING_TIMEOUT_S", "soon")

        assert RiskScoringClient().timeout_s == 5.0

    @pytest.mark.asyncio
    async def test_context_manager_opens_and_closes_session(self):
        """Test async with creates and closes the httpx session."""
        client = RiskScoringClient(endpoint=ENDPOINT)

        async with client as entered:
            assert entered is client
            assert isinstance(client._session, httpx.AsyncClient)

        assert client._session is None

    @pytest.mark.asyncio
    async def test_score_without_context_manager(self, expected_payload):
        """Test using the client outside async with fails loudly."""
        client = RiskScoringClient(endpoint=ENDPOINT)

        with pytest.raises(RuntimeError, match="not initialized"):
            await client.score(expected_payload)


class TestScore:
    """Test score method."""

    @pytest.mark.asyncio
    async def test_score_success(self, scoring_client, expected_payload):
        """Test one POST with JSON body and score extraction."""
        scoring_client._session.post = AsyncMock(
            return_value=mock_response(200, {"pcos_risk_score": 41.7})
        )

        score = await scoring_client.score(expected_payload)

        assert score == 41.7
        scoring_client._session.post.assert_awaited_once_with(
            ENDPOINT,
            json=expected_payload,
            headers={"Content-Type": "application/json"},
        )

    @pytest.mark.asyncio
    async def test_percent_string_score(self, scoring_client, expected_payload):
        """Test a '73%' string score is accepted."""
        scoring_client._session.post = AsyncMock(
            return_value=mock_response(200, {"pcos_risk_score": "73%"})
        )

        assert await scoring_client.score(expected_payload) == 73.0

    @pytest.mark.asyncio
    async def test_custom_score_field(self, expected_payload):
        """Test the score key is configurable."""
        client = RiskScoringClient(endpoint=ENDPOINT, score_field="risk")
        client._session = AsyncMock()
        client._session.post = AsyncMock(return_value=mock_response(200, {"risk": 12}))

        assert await client.score(expected_payload) == 12.0

    @pytest.mark.asyncio
    async def test_transport_error(self, scoring_client, expected_payload):
        """Test connection failures map to ScoringServiceError."""
        scoring_client._session.post = AsyncMock(
            side_effect=httpx.ConnectError("network unreachable")
        )

        with pytest.raises(ScoringServiceError) as exc:
            await scoring_client.score(expected_payload)

        assert exc.value.status_code is None
        assert scoring_client._session.post.await_count == 1

    @pytest.mark.asyncio
    async def test_timeout(self, scoring_client, expected_payload):
        """Test timeouts map to ScoringServiceError."""
        scoring_client._session.post = AsyncMock(
            side_effect=httpx.ReadTimeout("timed out")
        )

        with pytest.raises(ScoringServiceError, match="timed out"):
            await scoring_client.score(expected_payload)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status", [400, 404, 422, 500, 503])
    async def test_non_2xx_status(self, scoring_client, expected_payload, status):
        """Test any non-2xx reply is a ScoringServiceError with its status."""
        scoring_client._session.post = AsyncMock(
            return_value=mock_response(status, {"detail": "nope"})
        )

        with pytest.raises(ScoringServiceError) as exc:
            await scoring_client.score(expected_payload)

        assert exc.value.status_code == status

    @pytest.mark.asyncio
    async def test_201_accepted(self, scoring_client, expected_payload):
        """Test any 2xx status is a success."""
        scoring_client._session.post = AsyncMock(
            return_value=mock_response(201, {"pcos_risk_score": 5})
        )

        assert await scoring_client.score(expected_payload) == 5.0

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "body",
        [
            ValueError("Expecting value"),
            [42],
            {"score": 42},
            {"pcos_risk_score": None},
            {"pcos_risk_score": "high"},
            {"pcos_risk_score": True},
        ],
    )
    async def test_malformed_reply(self, scoring_client, expected_payload, body):
        """Test non-JSON, non-object or missing/non-numeric score."""
        scoring_client._session.post = AsyncMock(return_value=mock_response(200, body))

        with pytest.raises(MalformedResponseError):
            await scoring_client.score(expected_payload)
