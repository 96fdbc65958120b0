"""Entities for PCOS risk intake domain."""

from .health_record import HealthRecord

__all__ = ["HealthRecord"]
