"""Domain exceptions for PCOS risk intake."""

from typing import Any, Dict, List, Optional, Sequence, Union

Number = Union[int, float]


class IntakeDomainError(Exception):
    """Base exception for intake domain errors."""

    pass


class ValidationError(IntakeDomainError):
    """Raised when a single field fails coercion or its domain check.

    Field-scoped and recoverable: the user corrects the input.

    Attributes:
        field: Attribute name of the offending field (e.g. "age")
        reason: Short machine-readable reason (e.g. "out of range")
        min: Lower bound, set for range failures
        max: Upper bound, set for range failures
    """

    def __init__(
        self,
        field: str,
        reason: str,
        min: Optional[Number] = None,
        max: Optional[Number] = None,
    ):
        message = f"{field}: {reason}"
        if min is not None and max is not None:
            message += f" (expected {min}-{max})"
        super().__init__(message)
        self.field = field
        self.reason = reason
        self.min = min
        self.max = max

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"field": self.field, "reason": self.reason}
        if self.min is not None:
            data["min"] = self.min
        if self.max is not None:
            data["max"] = self.max
        return data


class UnknownFieldError(ValidationError):
    """Raised when a field name matches no declared field."""

    def __init__(self, field: str):
        super().__init__(field, "unknown field")


class RecordValidationError(IntakeDomainError):
    """Raised when a raw record has one or more invalid fields."""

    def __init__(self, errors: Sequence[ValidationError]):
        fields = ", ".join(e.field for e in errors)
        super().__init__(f"Invalid fields: {fields}")
        self.errors: List[ValidationError] = list(errors)


class SubmissionError(IntakeDomainError):
    """Raised when a record cannot be scored.

    Recoverable: the form stays editable and the user may retry.
    """

    pass


class IncompleteRecordError(SubmissionError):
    """Raised when a record with unset fields reaches submission."""

    def __init__(self, missing: Sequence[str]):
        super().__init__(f"Record has unset fields: {', '.join(missing)}")
        self.missing = list(missing)


class SubmissionInProgressError(SubmissionError):
    """Raised when a second submit arrives while one is in flight."""

    def __init__(self) -> None:
        super().__init__("A submission is already in progress")


class ScoringServiceError(SubmissionError):
    """Raised on transport failure or non-2xx reply from the scoring service."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class MalformedResponseError(SubmissionError):
    """Raised when the scoring service reply carries no usable score."""

    pass
