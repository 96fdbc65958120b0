"""Orchestrators for PCOS risk intake workflows."""

from .submission_orchestrator import SubmissionOrchestrator

__all__ = [
    "SubmissionOrchestrator",
]
