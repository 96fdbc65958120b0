"""Intake session - caller-side state of one risk intake form.

Applies raw field edits through the field schema, keeps per-field errors,
exposes the derived BMI and triggers submission.
"""

import logging
from typing import Any, Dict, List, Optional

from application.intake.orchestrators.submission_orchestrator import (
    SubmissionOrchestrator,
)
from domain.intake.core.entities.health_record import HealthRecord
from domain.intake.core.exceptions.domain_errors import (
    RecordValidationError,
    ValidationError,
)
from domain.intake.core.value_objects.risk_assessment import RiskAssessment
from domain.intake.schema.field_schema import get_field, validate_bmi, validate_field
from domain.intake.schema.fields import BMI_FIELD

logger = logging.getLogger(__name__)


class IntakeSession:
    """
    One user's intake session.

    Owns exactly one HealthRecord. Errors on one field never block edits
    on another. A failed submission leaves the session editable and
    resubmittable.

    Example:
        >>> session = IntakeSession(SubmissionOrchestrator(scorer))
        >>> session.edit("Weight", "60")
        >>> session.edit("Height", "165")
        >>> session.bmi
        22.0
    """

    def __init__(self, orchestrator: SubmissionOrchestrator):
        self._orchestrator = orchestrator
        self._record = HealthRecord()
        self._errors: Dict[str, ValidationError] = {}

    @property
    def record(self) -> HealthRecord:
        return self._record

    @property
    def bmi(self) -> Optional[float]:
        return self._record.bmi

    @property
    def submitting(self) -> bool:
        return self._orchestrator.in_flight

    def edit(self, name: str, raw: Any) -> Optional[ValidationError]:
        """
        Apply one raw field edit.

        On success the value is stored and the field's error cleared. On
        failure the error is kept and the stored value dropped, so the
        derived BMI never uses a stale weight or height.

        Args:
            name: Attribute name or wire key
            raw: Raw input value

        Returns:
            ValidationError for this field, or None if the edit was accepted
        """
        try:
            spec = get_field(name)
        except ValidationError as e:
            return e

        if spec.derived:
            return ValidationError(spec.name, "read-only")

        result = validate_field(spec.name, raw)
        if result.error is not None:
            self._errors[spec.name] = result.error
            self._record.unset(spec.name)
            logger.debug(
                "Field rejected",
                extra={"field": spec.name, "reason": result.error.reason},
            )
            return result.error

        self._errors.pop(spec.name, None)
        self._record.set(spec.name, result.value)  # type: ignore[arg-type]
        return None

    def errors(self) -> List[ValidationError]:
        """Current field errors, including an out-of-range derived BMI."""
        errors = list(self._errors.values())
        bmi_error = validate_bmi(self._record.bmi)
        if bmi_error is not None:
            errors.append(bmi_error)
        return errors

    def error_for(self, name: str) -> Optional[ValidationError]:
        spec = get_field(name)
        if spec.name == BMI_FIELD:
            return validate_bmi(self._record.bmi)
        return self._errors.get(spec.name)

    @property
    def is_submittable(self) -> bool:
        return (
            self._record.is_complete
            and not self.errors()
            and not self._orchestrator.in_flight
        )

    async def submit(self) -> RiskAssessment:
        """
        Submit the current record.

        Returns:
            RiskAssessment for the record

        Raises:
            RecordValidationError: If any field is invalid (no network call)
            SubmissionError: If submission fails or one is already in flight
        """
        errors = self.errors()
        if errors:
            raise RecordValidationError(errors)
        return await self._orchestrator.submit(self._record)
