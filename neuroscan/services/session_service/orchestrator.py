"""Session orchestrator - the scoring-to-log pipeline.

Turns a completed engine run into a timestamped result, appends it to the
results log, and optionally schedules a retake reminder.

Storage failures never end the session: they are logged and returned as
an unsaved outcome so the caller can tell the user the results were not
saved while still showing them.
"""
import logging
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional, Sequence

from neuroscan.shared.models import (
    AssessmentResult,
    Question,
    Reminder,
    ReminderChoice,
)
from neuroscan.shared.storage import AppendOnlyLog, PersistenceError
from neuroscan.shared.utils import SubjectHasher
from neuroscan.services.assessment_engine import (
    QUESTIONS,
    AssessmentEngine,
    ScoringThresholds,
)
from .config import SessionConfig
from .formatter import format_reminder, format_result_entry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WriteOutcome:
    """Result of one append to a log file."""
    path: Path
    saved: bool
    error: Optional[str] = None


@dataclass(frozen=True)
class ReminderOutcome:
    """Result of a reminder request. `reminder` is None for ReminderChoice.NONE."""
    choice: ReminderChoice
    reminder: Optional[Reminder] = None
    write: Optional[WriteOutcome] = None

    @property
    def saved(self) -> bool:
        return self.write is not None and self.write.saved


def parse_reminder_choice(raw: str) -> ReminderChoice:
    """Parse console text ('0', '1' or '2') into a ReminderChoice.

    Raises:
        ValueError: If raw is not one of the offered options
    """
    try:
        return ReminderChoice(int(raw.strip()))
    except (AttributeError, ValueError):
        raise ValueError(f"Invalid reminder choice {raw!r}: expected 0, 1, or 2")


class SessionOrchestrator:
    """Drives assessment runs and writes their records for one session.

    Single-threaded; the log files have no locking discipline.
    """

    def __init__(
        self,
        config: Optional[SessionConfig] = None,
        questions: Sequence[Question] = QUESTIONS,
        thresholds: Optional[ScoringThresholds] = None,
        clock: Callable[[], datetime] = datetime.now,
        hasher: Optional[SubjectHasher] = None,
    ):
        """Initialize orchestrator.

        Args:
            config: File locations for results and reminders
            questions: Question set handed to each new engine
            thresholds: Tier boundaries handed to each new engine
            clock: Wall-clock source for result timestamps
            hasher: Fingerprints subject names in log records
                (per-process key when omitted)
        """
        self.config = config or SessionConfig()
        self.questions = tuple(questions)
        self.thresholds = thresholds or ScoringThresholds()
        self.clock = clock
        self.hasher = hasher or SubjectHasher()

        self._results_log = AppendOnlyLog(self.config.results_path, self.config.encoding)
        self._reminders_log = AppendOnlyLog(self.config.reminders_path, self.config.encoding)

        logger.info(
            "SESSION_ORCHESTRATOR_INITIALIZED",
            extra={
                "results_path": str(self.config.results_path),
                "reminders_path": str(self.config.reminders_path),
                "question_count": len(self.questions),
            }
        )

    def start_assessment(self) -> AssessmentEngine:
        """Create a fresh engine for one assessment run."""
        return AssessmentEngine(questions=self.questions, thresholds=self.thresholds)

    def complete_assessment(
        self,
        engine: AssessmentEngine,
        subject_name: str,
        is_caregiver: bool = False,
    ) -> AssessmentResult:
        """Classify a fully answered run, stamped with the current time.

        Raises:
            IncompleteAssessmentError: If the run is missing responses
        """
        return engine.evaluate(
            subject_name=subject_name,
            is_caregiver=is_caregiver,
            timestamp=self.clock(),
        )

    def save_result(
        self,
        result: AssessmentResult,
        caregiver_note: Optional[str] = None,
    ) -> WriteOutcome:
        """Append one entry to the results log.

        The caregiver note is buffered into the same write as the entry,
        so a crash cannot leave an entry separated from its note.

        Args:
            result: Completed assessment result
            caregiver_note: Optional free-text note (caregiver mode only)

        Returns:
            WriteOutcome; saved is False if the file could not be written

        Raises:
            ValueError: If a note is given for a non-caregiver result
        """
        note = caregiver_note.strip() if caregiver_note else None
        if note and not result.is_caregiver:
            raise ValueError("Caregiver notes can only be attached in caregiver mode")

        entry = format_result_entry(result, caregiver_note=note)
        outcome = self._append(self._results_log, entry)

        if outcome.saved:
            logger.info(
                "RESULT_ENTRY_APPENDED",
                extra={
                    "subject_hash": self.hasher.fingerprint(result.subject_name),
                    "tier": result.tier.value,
                    "has_caregiver_note": bool(note),
                }
            )
        else:
            logger.error(
                "RESULT_PERSISTENCE_FAILED",
                extra={
                    "subject_hash": self.hasher.fingerprint(result.subject_name),
                    "path": str(outcome.path),
                    "error": outcome.error,
                }
            )
        return outcome

    def schedule_reminder(
        self,
        result: AssessmentResult,
        choice: ReminderChoice,
    ) -> ReminderOutcome:
        """Append a retake reminder 7 or 14 calendar days after the result.

        ReminderChoice.NONE performs no write.
        """
        if choice is ReminderChoice.NONE:
            return ReminderOutcome(choice=choice)

        reminder = Reminder.schedule(result.subject_name, result.timestamp, choice)
        outcome = self._append(self._reminders_log, format_reminder(reminder))

        logger.log(
            logging.INFO if outcome.saved else logging.ERROR,
            "REMINDER_SCHEDULED" if outcome.saved else "REMINDER_PERSISTENCE_FAILED",
            extra={
                "subject_hash": self.hasher.fingerprint(result.subject_name),
                "days": choice.days,
                "path": str(outcome.path),
                "error": outcome.error,
            }
        )
        return ReminderOutcome(choice=choice, reminder=reminder, write=outcome)

    def _append(self, log: AppendOnlyLog, text: str) -> WriteOutcome:
        try:
            log.append(text)
        except PersistenceError as e:
            return WriteOutcome(path=log.path, saved=False, error=str(e))
        return WriteOutcome(path=log.path, saved=True)
