"""Field coercion and validation for the PCOS intake record.

Every check is field-local. The only cross-field value, BMI, is derived by
the record itself and re-validated here against its declared range.
"""

import math
from dataclasses import dataclass
from typing import Any, List, Mapping, Optional, Union

from ..core.entities.health_record import HealthRecord
from ..core.exceptions.domain_errors import (
    RecordValidationError,
    UnknownFieldError,
    ValidationError,
)
from .fields import BMI_FIELD, INPUT_FIELDS, FieldKind, FieldSpec, lookup_field

Number = Union[int, float]

REQUIRED = "required"
NOT_A_NUMBER = "not a number"
NOT_AN_INTEGER = "not an integer"
OUT_OF_RANGE = "out of range"
NOT_RECOGNIZED = "not a recognized value"
NOT_A_FLAG = "not a binary flag"


@dataclass(frozen=True)
class FieldResult:
    """Outcome of validating one raw value: exactly one of value or error."""

    value: Optional[Number] = None
    error: Optional[ValidationError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def get_field(name: str) -> FieldSpec:
    """Get a field declaration by attribute name or wire key.

    Raises:
        UnknownFieldError: If name matches no field
    """
    spec = lookup_field(name)
    if spec is None:
        raise UnknownFieldError(name)
    return spec


def _domain_error(spec: FieldSpec) -> ValidationError:
    if spec.kind is FieldKind.FLAG:
        return ValidationError(spec.name, NOT_A_FLAG)
    if spec.kind is FieldKind.ENUM:
        return ValidationError(spec.name, NOT_RECOGNIZED)
    return ValidationError(spec.name, OUT_OF_RANGE, min=spec.min, max=spec.max)


def _to_number(spec: FieldSpec, raw: Any) -> float:
    if isinstance(raw, str):
        try:
            value = float(raw.strip())
        except ValueError:
            raise ValidationError(spec.name, NOT_A_NUMBER)
    elif isinstance(raw, (int, float)):
        try:
            value = float(raw)
        except OverflowError:
            # int beyond float range, e.g. a huge JSON integer literal
            raise _domain_error(spec)
    else:
        raise ValidationError(spec.name, NOT_A_NUMBER)

    if math.isnan(value) or math.isinf(value):
        raise ValidationError(spec.name, NOT_A_NUMBER)
    return value


def coerce_field(name: str, raw: Any) -> Number:
    """Coerce a raw input to the field's type and check its domain.

    Args:
        name: Attribute name or wire key
        raw: Raw input, typically a string from a form or a JSON number

    Returns:
        int for integer, enum and flag fields; float for number fields

    Raises:
        ValidationError: With reason "required", "not a number",
            "not an integer", "out of range", "not a recognized value"
            or "not a binary flag"

    Example:
        >>> coerce_field("Age", "27")
        27
        >>> coerce_field("weight_kg", "58.5")
        58.5
    """
    spec = get_field(name)

    if raw is None or (isinstance(raw, str) and not raw.strip()):
        raise ValidationError(spec.name, REQUIRED)

    if isinstance(raw, bool):
        if spec.kind is FieldKind.FLAG:
            return int(raw)
        raise ValidationError(spec.name, NOT_A_NUMBER)

    value = _to_number(spec, raw)

    if spec.kind is FieldKind.FLAG:
        if value not in (0.0, 1.0):
            raise ValidationError(spec.name, NOT_A_FLAG)
        return int(value)

    if spec.kind is FieldKind.ENUM:
        if not value.is_integer() or spec.choices is None or int(value) not in spec.choices:
            raise ValidationError(spec.name, NOT_RECOGNIZED)
        return int(value)

    if spec.is_integral and not value.is_integer():
        raise ValidationError(spec.name, NOT_AN_INTEGER)

    if spec.min is not None and spec.max is not None:
        if not (spec.min <= value <= spec.max):
            raise ValidationError(spec.name, OUT_OF_RANGE, min=spec.min, max=spec.max)

    return int(value) if spec.is_integral else value


def validate_field(name: str, raw: Any) -> FieldResult:
    """Non-raising variant of coerce_field."""
    try:
        return FieldResult(value=coerce_field(name, raw))
    except ValidationError as e:
        return FieldResult(error=e)


def validate_bmi(bmi: Optional[float]) -> Optional[ValidationError]:
    """Check a derived BMI against its declared range.

    Returns:
        ValidationError if the value is present and out of range, else None.
        An absent BMI is reported by completeness checks, not here.
    """
    if bmi is None:
        return None
    spec = get_field(BMI_FIELD)
    if not (spec.min <= bmi <= spec.max):  # type: ignore[operator]
        return ValidationError(spec.name, OUT_OF_RANGE, min=spec.min, max=spec.max)
    return None


def parse_record(raw: Mapping[str, Any]) -> HealthRecord:
    """Build a validated record from a raw mapping.

    Keys may be attribute names or wire keys. A supplied BMI is ignored
    since the record derives it.

    Args:
        raw: Raw field values

    Returns:
        Complete HealthRecord with every field in its domain

    Raises:
        RecordValidationError: Listing every invalid or missing field
    """
    by_name = {}
    for key, value in raw.items():
        spec = lookup_field(key)
        if spec is not None and not spec.derived:
            by_name[spec.name] = value

    record = HealthRecord()
    errors: List[ValidationError] = []

    for spec in INPUT_FIELDS:
        result = validate_field(spec.name, by_name.get(spec.name))
        if result.error is not None:
            errors.append(result.error)
        else:
            record.set(spec.name, result.value)  # type: ignore[arg-type]

    bmi_error = validate_bmi(record.bmi)
    if bmi_error is not None:
        errors.append(bmi_error)

    if errors:
        raise RecordValidationError(errors)
    return record
