"""Shared domain models for NeuroScan."""
from .assessment import (
    RiskTier,
    Question,
    Classification,
    AssessmentResult,
    ReminderChoice,
    Reminder,
)

__all__ = [
    "RiskTier",
    "Question",
    "Classification",
    "AssessmentResult",
    "ReminderChoice",
    "Reminder",
]
