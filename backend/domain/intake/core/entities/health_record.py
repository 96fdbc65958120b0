"""HealthRecord entity - one intake session's attribute set."""

from typing import Dict, List, Optional, Union

from ...calculation.bmi_service import derive_bmi
from ...schema.fields import BMI_FIELD, FIELDS, INPUT_FIELDS, lookup_field
from ..exceptions.domain_errors import (
    IncompleteRecordError,
    UnknownFieldError,
    ValidationError,
)

Number = Union[int, float]


class HealthRecord:
    """Health and lifestyle attributes collected for one risk assessment.

    Created empty, filled field by field with already-normalized values,
    read once for submission and then discarded.

    `bmi` is derived from weight and height on every read and has no
    setter, so it can never drift from its inputs.

    Example:
        >>> record = HealthRecord()
        >>> record.set("weight_kg", 60.0)
        >>> record.set("height_cm", 165.0)
        >>> record.bmi
        22.0
    """

    def __init__(self) -> None:
        self._values: Dict[str, Number] = {}

    def __repr__(self) -> str:
        return f"HealthRecord(values={self._values!r}, bmi={self.bmi!r})"

    @property
    def bmi(self) -> Optional[float]:
        return derive_bmi(
            self._values.get("weight_kg"), self._values.get("height_cm")
        )

    def _input_name(self, name: str) -> str:
        spec = lookup_field(name)
        if spec is None:
            raise UnknownFieldError(name)
        if spec.derived:
            raise ValidationError(spec.name, "read-only")
        return spec.name

    def set(self, name: str, value: Number) -> None:
        """Store a normalized value.

        Args:
            name: Attribute name or wire key
            value: Value already coerced by the field schema

        Raises:
            UnknownFieldError: If name matches no field
            ValidationError: If name is the derived BMI field
        """
        self._values[self._input_name(name)] = value

    def unset(self, name: str) -> None:
        self._values.pop(self._input_name(name), None)

    def get(self, name: str) -> Optional[Number]:
        spec = lookup_field(name)
        if spec is None:
            raise UnknownFieldError(name)
        if spec.name == BMI_FIELD:
            return self.bmi
        return self._values.get(spec.name)

    @property
    def age(self) -> Optional[int]:
        return self._values.get("age")  # type: ignore[return-value]

    @property
    def weight_kg(self) -> Optional[float]:
        return self._values.get("weight_kg")

    @property
    def height_cm(self) -> Optional[float]:
        return self._values.get("height_cm")

    @property
    def blood_group_code(self) -> Optional[int]:
        return self._values.get("blood_group_code")  # type: ignore[return-value]

    @property
    def cycle_frequency_months(self) -> Optional[int]:
        return self._values.get("cycle_frequency_months")  # type: ignore[return-value]

    @property
    def period_duration_days(self) -> Optional[int]:
        return self._values.get("period_duration_days")  # type: ignore[return-value]

    # Binary flags, 1 = yes / 0 = no

    @property
    def gained_weight(self) -> Optional[int]:
        return self._values.get("gained_weight")  # type: ignore[return-value]

    @property
    def excessive_hair(self) -> Optional[int]:
        return self._values.get("excessive_hair")  # type: ignore[return-value]

    @property
    def dark_skin(self) -> Optional[int]:
        return self._values.get("dark_skin")  # type: ignore[return-value]

    @property
    def hair_loss(self) -> Optional[int]:
        return self._values.get("hair_loss")  # type: ignore[return-value]

    @property
    def face_acne(self) -> Optional[int]:
        return self._values.get("face_acne")  # type: ignore[return-value]

    @property
    def fast_food(self) -> Optional[int]:
        return self._values.get("fast_food")  # type: ignore[return-value]

    @property
    def regular_exercise(self) -> Optional[int]:
        return self._values.get("regular_exercise")  # type: ignore[return-value]

    @property
    def mood_swings(self) -> Optional[int]:
        return self._values.get("mood_swings")  # type: ignore[return-value]

    @property
    def regular_periods(self) -> Optional[int]:
        return self._values.get("regular_periods")  # type: ignore[return-value]

    def missing_fields(self) -> List[str]:
        """List attribute names that are still unset, BMI included."""
        missing = [f.name for f in INPUT_FIELDS if f.name not in self._values]
        if self.bmi is None:
            missing.append(BMI_FIELD)
        return missing

    @property
    def is_complete(self) -> bool:
        return not self.missing_fields()

    def to_payload(self) -> Dict[str, Number]:
        """Serialize to the scoring service wire shape.

        Returns:
            Flat mapping of exactly the 16 wire keys to their values

        Raises:
            IncompleteRecordError: If any field is unset
        """
        missing = self.missing_fields()
        if missing:
            raise IncompleteRecordError(missing)
        return {f.wire_key: self.get(f.name) for f in FIELDS}  # type: ignore[misc]
