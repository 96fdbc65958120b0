"""REST API endpoints for PCOS risk intake.

Thin presentation boundary over the intake core:
- GET  /intake/fields    field declarations for rendering the form
- POST /intake/bmi       derive BMI from weight and height
- POST /intake/validate  field-by-field validation of a raw record
- POST /intake/assess    validate, submit and classify a raw record
"""

import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends, HTTPException
from pydantic import BaseModel

from application.intake.intake_session import IntakeSession
from application.intake.orchestrators.submission_orchestrator import (
    SubmissionOrchestrator,
)
from domain.intake.calculation.bmi_service import bmi_category, derive_bmi
from domain.intake.core.exceptions.domain_errors import (
    RecordValidationError,
    SubmissionError,
    ValidationError,
)
from domain.intake.core.ports.risk_scorer import IRiskScorer
from domain.intake.core.value_objects.blood_group import BloodGroup
from domain.intake.schema.field_schema import validate_bmi, validate_field
from domain.intake.schema.fields import FIELDS, INPUT_FIELDS, FieldKind, lookup_field

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/intake", tags=["intake"])

# Set by the application lifespan once the scorer is entered
_risk_scorer: Optional[IRiskScorer] = None


class FieldErrorModel(BaseModel):
    """A single field validation error."""

    field: str
    reason: str
    min: Optional[float] = None
    max: Optional[float] = None


class ChoiceModel(BaseModel):
    value: int
    label: str


class FieldModel(BaseModel):
    """Declaration of one intake field."""

    name: str
    wire_key: str
    label: str
    kind: str
    min: Optional[float] = None
    max: Optional[float] = None
    choices: Optional[List[ChoiceModel]] = None
    read_only: bool = False


class BmiRequest(BaseModel):
    weight: Optional[float] = None
    height: Optional[float] = None


class BmiResponse(BaseModel):
    bmi: Optional[float] = None
    category: Optional[str] = None


class ValidationResponse(BaseModel):
    """Result of validating a raw record."""

    valid: bool
    bmi: Optional[float] = None
    errors: List[FieldErrorModel]


class AssessmentResponse(BaseModel):
    """Classified risk score."""

    raw_score: float
    band: str
    label: str
    explanation: str
    tone: str
    icon: str
    gauge_value: float


def set_risk_scorer(scorer: Optional[IRiskScorer]) -> None:
    global _risk_scorer
    _risk_scorer = scorer


def get_risk_scorer() -> IRiskScorer:
    """Get the scorer initialized by the application lifespan.

    Raises:
        HTTPException: 503 if the scorer is not initialized.
    """
    if _risk_scorer is None:
        raise HTTPException(status_code=503, detail="Risk scorer not initialized")
    return _risk_scorer


def _error_models(errors: List[ValidationError]) -> List[FieldErrorModel]:
    return [FieldErrorModel(**e.to_dict()) for e in errors]


def _session_from(raw: Dict[str, Any], scorer: IRiskScorer) -> IntakeSession:
    session = IntakeSession(SubmissionOrchestrator(scorer))
    for key, value in raw.items():
        spec = lookup_field(key)
        if spec is None or spec.derived:
            continue
        session.edit(spec.name, value)
    for spec in INPUT_FIELDS:
        if session.record.get(spec.name) is None and session.error_for(spec.name) is None:
            session.edit(spec.name, None)
    return session


@router.get("/fields", response_model=List[FieldModel])
async def list_fields() -> List[FieldModel]:
    """List the intake fields in payload order."""
    fields = []
    for spec in FIELDS:
        choices = None
        if spec.kind is FieldKind.ENUM:
            choices = [ChoiceModel(value=int(g), label=g.label) for g in BloodGroup]
        fields.append(
            FieldModel(
                name=spec.name,
                wire_key=spec.wire_key,
                label=spec.label,
                kind=spec.kind.value,
                min=spec.min,
                max=spec.max,
                choices=choices,
                read_only=spec.derived,
            )
        )
    return fields


@router.post("/bmi", response_model=BmiResponse)
async def compute_bmi(request: BmiRequest) -> BmiResponse:
    """Derive BMI from weight (kg) and height (cm)."""
    bmi = derive_bmi(request.weight, request.height)
    return BmiResponse(bmi=bmi, category=bmi_category(bmi) if bmi is not None else None)


@router.post("/validate", response_model=ValidationResponse)
async def validate_record(raw: Dict[str, Any] = Body(...)) -> ValidationResponse:
    """Validate every field of a raw record without submitting it."""
    errors: List[ValidationError] = []
    values: Dict[str, Any] = {}
    for spec in INPUT_FIELDS:
        value = raw.get(spec.wire_key, raw.get(spec.name))
        result = validate_field(spec.name, value)
        if result.error is not None:
            errors.append(result.error)
        else:
            values[spec.name] = result.value

    bmi = derive_bmi(values.get("weight_kg"), values.get("height_cm"))
    bmi_error = validate_bmi(bmi)
    if bmi_error is not None:
        errors.append(bmi_error)

    return ValidationResponse(valid=not errors, bmi=bmi, errors=_error_models(errors))


@router.post("/assess", response_model=AssessmentResponse)
async def assess_risk(
    raw: Dict[str, Any] = Body(...),
    scorer: IRiskScorer = Depends(get_risk_scorer),
) -> AssessmentResponse:
    """Validate a raw record, submit it for scoring and classify the result.

    Raises:
        HTTPException: 422 with field errors if validation fails,
            502 if the scoring service fails.
    """
    session = _session_from(raw, scorer)

    try:
        assessment = await session.submit()
    except RecordValidationError as e:
        raise HTTPException(
            status_code=422,
            detail={
                "message": "Invalid intake record",
                "errors": [err.to_dict() for err in e.errors],
            },
        )
    except SubmissionError as e:
        logger.error("Risk assessment failed", extra={"error": str(e)})
        raise HTTPException(
            status_code=502,
            detail="Risk assessment is unavailable right now. Please try again.",
        )

    return AssessmentResponse(**assessment.to_dict())
