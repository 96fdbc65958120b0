"""Domain exceptions for PCOS risk intake."""

from .domain_errors import (
    IncompleteRecordError,
    IntakeDomainError,
    MalformedResponseError,
    RecordValidationError,
    ScoringServiceError,
    SubmissionError,
    SubmissionInProgressError,
    UnknownFieldError,
    ValidationError,
)

__all__ = [
    "IntakeDomainError",
    "ValidationError",
    "UnknownFieldError",
    "RecordValidationError",
    "SubmissionError",
    "IncompleteRecordError",
    "SubmissionInProgressError",
    "ScoringServiceError",
    "MalformedResponseError",
]
