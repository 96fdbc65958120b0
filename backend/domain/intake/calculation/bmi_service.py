"""BMI derivation from weight and height."""

import math
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional, Union

Number = Union[int, float]

_ONE_DECIMAL = Decimal("0.1")
_INTEGRAL_ABOVE = 2.0**52


def derive_bmi(
    weight_kg: Optional[Number], height_cm: Optional[Number]
) -> Optional[float]:
    """Derive Body Mass Index from weight and height.

    Formula:
        BMI = weight (kg) / (height (m))^2

    The result is rounded to one decimal place, half away from zero
    (24.25 -> 24.3). Rounding is done on the decimal representation of the
    raw quotient so the outcome matches what a user would compute by hand.

    Args:
        weight_kg: Body weight in kilograms
        height_cm: Height in centimeters

    Returns:
        BMI rounded to 1 decimal, or None if either input is absent,
        non-positive or too extreme to divide

    Example:
        >>> derive_bmi(60, 165)
        22.0
        >>> derive_bmi(60, None) is None
        True
    """
    if weight_kg is None or height_cm is None:
        return None
    if weight_kg <= 0 or height_cm <= 0:
        return None

    try:
        weight, height = float(weight_kg), float(height_cm)
        if not (math.isfinite(weight) and math.isfinite(height)):
            return None
        raw = weight / (height / 100.0) ** 2
    except (OverflowError, ZeroDivisionError):
        # Extreme inputs overflow the conversion or underflow the divisor
        return None
    if not math.isfinite(raw):
        return None
    if raw >= _INTEGRAL_ABOVE:
        # Floats this large carry no fractional digits to round
        return raw
    return float(Decimal(repr(raw)).quantize(_ONE_DECIMAL, rounding=ROUND_HALF_UP))


def bmi_category(bmi: float) -> str:
    """Get WHO BMI category.

    Returns:
        str: underweight, normal, overweight or obese
    """
    if bmi < 18.5:
        return "underweight"
    elif bmi < 25.0:
        return "normal"
    elif bmi < 30.0:
        return "overweight"
    else:
        return "obese"
