"""Session Service: drives assessment runs and writes their records.

Components:
- config.py: SessionConfig with results/reminder file locations
- formatter.py: Results-log entry and reminder line formats
- orchestrator.py: SessionOrchestrator (score, save, remind)

Usage:
    from neuroscan.services.session_service import SessionOrchestrator
    orchestrator = SessionOrchestrator(SessionConfig.from_env())
    engine = orchestrator.start_assessment()
    ...
    result = orchestrator.complete_assessment(engine, "Alex")
    orchestrator.save_result(result)
    orchestrator.schedule_reminder(result, ReminderChoice.ONE_WEEK)
"""

from .config import SessionConfig, DEFAULT_RESULTS_FILE, DEFAULT_REMINDERS_FILE
from .formatter import ENTRY_DELIMITER, format_result_entry, format_reminder
from .orchestrator import (
    SessionOrchestrator,
    WriteOutcome,
    ReminderOutcome,
    parse_reminder_choice,
)

__all__ = [
    "SessionConfig",
    "DEFAULT_RESULTS_FILE",
    "DEFAULT_REMINDERS_FILE",
    "ENTRY_DELIMITER",
    "format_result_entry",
    "format_reminder",
    "SessionOrchestrator",
    "WriteOutcome",
    "ReminderOutcome",
    "parse_reminder_choice",
]
