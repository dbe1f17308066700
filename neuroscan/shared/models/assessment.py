"""Assessment domain models: risk tiers, questions, results and reminders.

Every model here is immutable. An assessment result is created once per
completed run and is never modified afterwards; history lives only in the
results log.
"""
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from enum import Enum
from typing import Tuple


class RiskTier(Enum):
    """Risk classification tiers for a completed assessment.

    Derived solely from the total score (see ScoringThresholds).
    """
    LOW = "low"             # Score 0-8: General brain-health tips
    MODERATE = "moderate"   # Score 9-15: Screening suggested
    HIGH = "high"           # Score 16+: Consult a healthcare professional

    @property
    def label(self) -> str:
        return f"{self.value.capitalize()} Concern"

    @property
    def glyph(self) -> str:
        return _TIER_GLYPHS[self]

    @property
    def display(self) -> str:
        """Glyph and label as written to the results log."""
        return f"{self.glyph} {self.label}"


_TIER_GLYPHS = {
    RiskTier.LOW: "\U0001F7E2",
    RiskTier.MODERATE: "\U0001F7E0",
    RiskTier.HIGH: "\U0001F534",
}


@dataclass(frozen=True)
class Question:
    """A single scored prompt in the question set."""
    index: int              # 1-based position in the question set
    text: str
    scale: Tuple[int, ...] = (0, 1, 2)

    def __post_init__(self):
        if self.index < 1:
            raise ValueError(f"Question index must be >= 1, got {self.index}")

    def accepts(self, value: int) -> bool:
        return value in self.scale

    @property
    def max_points(self) -> int:
        return max(self.scale)


@dataclass(frozen=True)
class Classification:
    """Tier and tailored recommendation for a total score."""
    tier: RiskTier
    recommendation: str


@dataclass(frozen=True)
class AssessmentResult:
    """Outcome of one complete assessment run.

    Immutable by design - results are written to the log and discarded.
    """
    subject_name: str
    is_caregiver: bool
    total_score: int
    max_score: int
    tier: RiskTier
    recommendation: str
    frequent_memory_flag: bool
    timestamp: datetime = field(default_factory=datetime.now)

    def __post_init__(self):
        if not 0 <= self.total_score <= self.max_score:
            raise ValueError(
                f"Total score must be 0-{self.max_score}, got {self.total_score}"
            )

    @property
    def subject_label(self) -> str:
        """Subject name with the caregiver marker when applicable."""
        suffix = " (Caregiver)" if self.is_caregiver else ""
        return f"{self.subject_name}{suffix}"


class ReminderChoice(Enum):
    """Options offered for retaking the assessment."""
    NONE = 0
    ONE_WEEK = 1
    TWO_WEEKS = 2

    @property
    def days(self) -> int:
        return self.value * 7


@dataclass(frozen=True)
class Reminder:
    """A suggested future date to repeat the assessment.

    Linked to its assessment only by subject name and file ordering.
    """
    subject_name: str
    due_at: datetime

    @classmethod
    def schedule(
        cls,
        subject_name: str,
        assessed_at: datetime,
        choice: ReminderChoice,
    ) -> "Reminder":
        """Create a reminder `choice.days` calendar days after assessed_at.

        Raises:
            ValueError: If choice is ReminderChoice.NONE
        """
        if choice is ReminderChoice.NONE:
            raise ValueError("Cannot schedule a reminder for ReminderChoice.NONE")
        return cls(
            subject_name=subject_name,
            due_at=assessed_at + timedelta(days=choice.days),
        )
