"""Field declarations for the PCOS intake record.

One FieldSpec per attribute, in the order the scoring service lists them.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, FrozenSet, Optional, Tuple, Union

from ..core.value_objects.blood_group import BloodGroup

Number = Union[int, float]


class FieldKind(str, Enum):
    """Semantic type of a field."""

    INTEGER = "integer"
    NUMBER = "number"
    ENUM = "enum"
    FLAG = "flag"


@dataclass(frozen=True)
class FieldSpec:
    """Declaration of a single intake field.

    Attributes:
        name: Python attribute name (e.g. "weight_kg")
        wire_key: Key in the scoring service payload (e.g. "Weight")
        label: Human label shown next to the input
        kind: Semantic type driving coercion
        min: Inclusive lower bound (numeric kinds)
        max: Inclusive upper bound (numeric kinds)
        choices: Allowed codes (enum kind)
        derived: True if computed from other fields, never user-set
    """

    name: str
    wire_key: str
    label: str
    kind: FieldKind
    min: Optional[Number] = None
    max: Optional[Number] = None
    choices: Optional[FrozenSet[int]] = None
    derived: bool = False

    @property
    def is_integral(self) -> bool:
        return self.kind is not FieldKind.NUMBER


def _flag(name: str, wire_key: str, label: str) -> FieldSpec:
    return FieldSpec(name, wire_key, label, FieldKind.FLAG, min=0, max=1)


FIELDS: Tuple[FieldSpec, ...] = (
    FieldSpec("age", "Age", "Age", FieldKind.INTEGER, min=12, max=100),
    FieldSpec("weight_kg", "Weight", "Weight (kg)", FieldKind.NUMBER, min=30, max=200),
    FieldSpec("height_cm", "Height", "Height (cm)", FieldKind.NUMBER, min=120, max=220),
    FieldSpec(
        "blood_group_code",
        "BloodGroup",
        "Blood Group",
        FieldKind.ENUM,
        choices=BloodGroup.codes(),
    ),
    FieldSpec(
        "cycle_frequency_months",
        "PeriodFrequency",
        "Period Cycle Frequency (months)",
        FieldKind.INTEGER,
        min=0,
        max=100,
    ),
    _flag("gained_weight", "GainedWeight", "Weight Gain"),
    _flag("excessive_hair", "ExcessiveHair", "Excessive Body/Facial Hair"),
    _flag("dark_skin", "DarkSkin", "Skin Darkening"),
    _flag("hair_loss", "HairLoss", "Hair Loss/Thinning"),
    _flag("face_acne", "FaceAcne", "Acne (Face/Jawline)"),
    _flag("fast_food", "FastFood", "Fast Food Consumption"),
    _flag("regular_exercise", "RegularExercise", "Daily Exercise"),
    _flag("mood_swings", "MoodSwings", "Mood Swings"),
    _flag("regular_periods", "RegularPeriods", "Regular Periods"),
    FieldSpec(
        "period_duration_days",
        "PeriodDuration",
        "Menstrual Period Length (days)",
        FieldKind.INTEGER,
        min=0,
        max=15,
    ),
    FieldSpec("bmi", "BMI", "BMI", FieldKind.NUMBER, min=10, max=50, derived=True),
)

BMI_FIELD = "bmi"

INPUT_FIELDS: Tuple[FieldSpec, ...] = tuple(f for f in FIELDS if not f.derived)

_BY_KEY: Dict[str, FieldSpec] = {
    **{f.name: f for f in FIELDS},
    **{f.wire_key: f for f in FIELDS},
}


def lookup_field(name: str) -> Optional[FieldSpec]:
    """Find a field by attribute name or wire key."""
    return _BY_KEY.get(name)
