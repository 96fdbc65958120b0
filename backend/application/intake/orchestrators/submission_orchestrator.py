"""Submission orchestrator.

Coordinates serialization, remote scoring and classification of one
intake record, with at most one submission in flight per session.
"""

import logging

from domain.intake.calculation.risk_classifier import classify
from domain.intake.core.entities.health_record import HealthRecord
from domain.intake.core.exceptions.domain_errors import (
    IncompleteRecordError,
    SubmissionError,
    SubmissionInProgressError,
)
from domain.intake.core.ports.risk_scorer import IRiskScorer
from domain.intake.core.value_objects.risk_assessment import RiskAssessment

logger = logging.getLogger(__name__)


class SubmissionOrchestrator:
    """
    Orchestrate record submission to the risk scoring service.

    Flow:
    1. Reject if a submission is already in flight
    2. Serialize the record (fails fast on unset fields)
    3. Score via the scorer port (single call, no retry)
    4. Classify the score into a RiskAssessment

    The in-flight flag is set before the first await and cleared on every
    exit path, so on a single event loop two rapid submits yield exactly
    one scorer call.

    Example:
        >>> orchestrator = SubmissionOrchestrator(scorer)
        >>> assessment = await orchestrator.submit(record)
        >>> assessment.band
        <RiskBand.LOW: 'Low'>
    """

    def __init__(self, scorer: IRiskScorer):
        """
        Initialize orchestrator.

        Args:
            scorer: Port used to obtain the risk score
        """
        self._scorer = scorer
        self._in_flight = False

    @property
    def in_flight(self) -> bool:
        return self._in_flight

    async def submit(self, record: HealthRecord) -> RiskAssessment:
        """
        Submit a record and classify the returned score.

        Args:
            record: Validated health record

        Returns:
            RiskAssessment for the returned score

        Raises:
            SubmissionInProgressError: If another submission is in flight
            IncompleteRecordError: If any field is unset (no network call)
            SubmissionError: If scoring fails for any reason
        """
        if self._in_flight:
            logger.warning("Submission rejected: already in flight")
            raise SubmissionInProgressError()

        try:
            payload = record.to_payload()
        except IncompleteRecordError as e:
            logger.warning(
                "Submission rejected: record incomplete",
                extra={"missing": e.missing},
            )
            raise

        self._in_flight = True
        try:
            logger.info(
                "Submitting intake record",
                extra={"fields": len(payload), "bmi": payload.get("BMI")},
            )

            try:
                score = await self._scorer.score(payload)
            except SubmissionError as e:
                logger.error(
                    "Risk scoring failed",
                    extra={"error": str(e), "error_type": type(e).__name__},
                )
                raise
            except Exception as e:
                logger.exception("Unexpected risk scoring failure")
                raise SubmissionError(f"Risk scoring failed: {e}") from e

            assessment = classify(score)

            logger.info(
                "Risk assessment complete",
                extra={"score": assessment.raw_score, "band": assessment.band.value},
            )
            return assessment
        finally:
            self._in_flight = False
