"""Text formats for the results and reminder logs.

Entry layout:

    ------------------------------------------
    User: <name>[ (Caregiver)]
    Date: <ctime timestamp>
    Score: <total> / <max>
    Risk Level: <glyph> <tier> Concern
    Recommendation: <text, may span lines>
    [Caregiver Note: <note>]
"""
from datetime import datetime
from typing import Optional

from neuroscan.shared.models import AssessmentResult, Reminder

ENTRY_DELIMITER = "-" * 42


def format_timestamp(moment: datetime) -> str:
    """Render a datetime the way ctime() does, e.g. 'Mon Oct 19 14:25:00 2026'."""
    return moment.ctime()


def format_caregiver_note(note: str) -> str:
    # Notes are single-line records
    flattened = " ".join(note.splitlines()).strip()
    return f"Caregiver Note: {flattened}\n"


def format_result_entry(result: AssessmentResult, caregiver_note: Optional[str] = None) -> str:
    """Build the complete text of one results-log entry.

    The caregiver note, when given, is part of the same entry so the
    whole entry can be written in one append.
    """
    lines = [
        ENTRY_DELIMITER,
        f"User: {result.subject_label}",
        f"Date: {format_timestamp(result.timestamp)}",
        f"Score: {result.total_score} / {result.max_score}",
        f"Risk Level: {result.tier.display}",
        f"Recommendation: {result.recommendation}",
    ]
    entry = "\n".join(lines) + "\n"
    if caregiver_note:
        entry += format_caregiver_note(caregiver_note)
    return entry


def format_reminder(reminder: Reminder) -> str:
    return (
        f"{reminder.subject_name} should retake NeuroScan on: "
        f"{format_timestamp(reminder.due_at)}\n"
    )
