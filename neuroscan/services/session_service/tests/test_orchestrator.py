"""Tests for SessionOrchestrator - scoring-to-log pipeline."""
import logging
from datetime import datetime
from unittest.mock import patch

import pytest

from neuroscan.shared.models import ReminderChoice, RiskTier
from neuroscan.shared.utils import SubjectHasher
from neuroscan.services.assessment_engine import IncompleteAssessmentError
from neuroscan.services.results_service import ResultsViewer
from neuroscan.services.session_service import (
    ENTRY_DELIMITER,
    SessionConfig,
    SessionOrchestrator,
    parse_reminder_choice,
)

ASSESSED_AT = datetime(2026, 10, 19, 14, 25, 0)


@pytest.fixture
def config(tmp_path):
    return SessionConfig(
        results_path=tmp_path / "NeuroScan_Results.txt",
        reminders_path=tmp_path / "NeuroScan_Reminders.txt",
    )


@pytest.fixture
def orchestrator(config):
    return SessionOrchestrator(config, clock=lambda: ASSESSED_AT)


def run_assessment(orchestrator, responses, name="Alex", is_caregiver=False):
    engine = orchestrator.start_assessment()
    for question, value in zip(engine.questions, responses):
        engine.record_response(question.index, value)
    return orchestrator.complete_assessment(engine, name, is_caregiver)


class TestCompleteAssessment:
    def test_result_is_timestamped_by_clock(self, orchestrator):
        result = run_assessment(orchestrator, [1] * 10)
        assert result.timestamp == ASSESSED_AT

    def test_scenario_moderate(self, orchestrator):
        result = run_assessment(orchestrator, [2, 2, 2, 2, 2, 0, 0, 0, 0, 0])
        assert result.total_score == 10
        assert result.tier == RiskTier.MODERATE
        assert result.frequent_memory_flag is True

    def test_incomplete_run_raises(self, orchestrator):
        with pytest.raises(IncompleteAssessmentError):
            run_assessment(orchestrator, [1] * 5)

    def test_each_run_gets_fresh_engine(self, orchestrator):
        first = orchestrator.start_assessment()
        first.record_response(1, 2)
        assert orchestrator.start_assessment().responses == ()

    def test_nothing_written_before_save(self, orchestrator, config):
        run_assessment(orchestrator, [1] * 10)
        assert not config.results_path.exists()


class TestSaveResult:
    def test_appends_one_entry(self, orchestrator, config):
        result = run_assessment(orchestrator, [0] * 10)
        outcome = orchestrator.save_result(result)

        assert outcome.saved is True
        assert outcome.error is None
        assert outcome.path == config.results_path
        text = config.results_path.read_text(encoding="utf-8")
        assert text.count(ENTRY_DELIMITER) == 1
        assert "Score: 0 / 20\n" in text
        assert "Risk Level: \U0001F7E2 Low Concern\n" in text

    def test_entries_accumulate_in_order(self, orchestrator, config):
        orchestrator.save_result(run_assessment(orchestrator, [0] * 10, name="First"))
        orchestrator.save_result(run_assessment(orchestrator, [2] * 10, name="Second"))

        text = config.results_path.read_text(encoding="utf-8")
        assert text.count(ENTRY_DELIMITER) == 2
        assert text.index("User: First") < text.index("User: Second")

    def test_existing_content_never_rewritten(self, orchestrator, config):
        config.results_path.write_text("previous entry\n", encoding="utf-8")
        orchestrator.save_result(run_assessment(orchestrator, [1] * 10))

        assert config.results_path.read_text(encoding="utf-8").startswith("previous entry\n")

    def test_caregiver_note_in_same_entry(self, orchestrator, config):
        result = run_assessment(orchestrator, [1] * 10, is_caregiver=True)
        orchestrator.save_result(result, caregiver_note="  Forgot stove twice  ")

        text = config.results_path.read_text(encoding="utf-8")
        assert "User: Alex (Caregiver)\n" in text
        assert text.endswith("Caregiver Note: Forgot stove twice\n")

    def test_blank_caregiver_note_not_written(self, orchestrator, config):
        result = run_assessment(orchestrator, [1] * 10, is_caregiver=True)
        orchestrator.save_result(result, caregiver_note="   ")

        assert "Caregiver Note" not in config.results_path.read_text(encoding="utf-8")

    def test_note_requires_caregiver_mode(self, orchestrator):
        result = run_assessment(orchestrator, [1] * 10)
        with pytest.raises(ValueError):
            orchestrator.save_result(result, caregiver_note="note")

    def test_unwritable_file_reports_failure(self, tmp_path):
        # Results path is a directory, so the append cannot open it
        config = SessionConfig(results_path=tmp_path, reminders_path=tmp_path / "r.txt")
        orchestrator = SessionOrchestrator(config, clock=lambda: ASSESSED_AT)
        result = run_assessment(orchestrator, [2] * 10)

        outcome = orchestrator.save_result(result)

        assert outcome.saved is False
        assert outcome.error
        assert result.tier == RiskTier.HIGH

    def test_round_trip_through_viewer(self, orchestrator, config):
        first = run_assessment(orchestrator, [0] * 10, name="First")
        second = run_assessment(orchestrator, [2] * 10, name="Second", is_caregiver=True)
        orchestrator.save_result(first)
        orchestrator.save_result(second, caregiver_note="Walks slowly")

        viewer = ResultsViewer(config.results_path)
        written = config.results_path.read_text(encoding="utf-8")

        assert viewer.read_text() == written
        assert list(viewer.iter_lines()) == written.splitlines()


class TestScheduleReminder:
    def test_one_week_appends_single_line(self, orchestrator, config):
        result = run_assessment(orchestrator, [1] * 10)
        outcome = orchestrator.schedule_reminder(result, ReminderChoice.ONE_WEEK)

        assert outcome.saved is True
        assert outcome.reminder.due_at == datetime(2026, 10, 26, 14, 25, 0)
        lines = config.reminders_path.read_text(encoding="utf-8").splitlines()
        assert lines == ["Alex should retake NeuroScan on: Mon Oct 26 14:25:00 2026"]

    def test_two_weeks(self, orchestrator, config):
        result = run_assessment(orchestrator, [1] * 10)
        outcome = orchestrator.schedule_reminder(result, ReminderChoice.TWO_WEEKS)

        assert outcome.reminder.due_at == datetime(2026, 11, 2, 14, 25, 0)
        assert config.reminders_path.read_text(encoding="utf-8").endswith(
            "on: Mon Nov  2 14:25:00 2026\n"
        )

    def test_no_reminder_writes_nothing(self, orchestrator, config):
        result = run_assessment(orchestrator, [1] * 10)
        outcome = orchestrator.schedule_reminder(result, ReminderChoice.NONE)

        assert outcome.reminder is None
        assert outcome.write is None
        assert outcome.saved is False
        assert not config.reminders_path.exists()

    def test_reminders_do_not_touch_results_log(self, orchestrator, config):
        result = run_assessment(orchestrator, [1] * 10)
        orchestrator.schedule_reminder(result, ReminderChoice.ONE_WEEK)
        assert not config.results_path.exists()

    def test_unwritable_reminder_file_reports_failure(self, tmp_path):
        config = SessionConfig(results_path=tmp_path / "r.txt", reminders_path=tmp_path)
        orchestrator = SessionOrchestrator(config, clock=lambda: ASSESSED_AT)
        result = run_assessment(orchestrator, [1] * 10)

        outcome = orchestrator.schedule_reminder(result, ReminderChoice.ONE_WEEK)

        assert outcome.saved is False
        assert outcome.reminder is not None
        assert outcome.write.error


class TestParseReminderChoice:
    @pytest.mark.parametrize("raw,choice", [
        ("0", ReminderChoice.NONE),
        ("1", ReminderChoice.ONE_WEEK),
        (" 2 ", ReminderChoice.TWO_WEEKS),
    ])
    def test_valid_choices(self, raw, choice):
        assert parse_reminder_choice(raw) is choice

    @pytest.mark.parametrize("raw", ["3", "-1", "week", ""])
    def test_invalid_choices(self, raw):
        with pytest.raises(ValueError):
            parse_reminder_choice(raw)


class TestSubjectFingerprints:
    """Log records identify subjects by keyed fingerprint only."""

    def test_default_hasher_needs_no_setup(self, config):
        with patch.dict("os.environ", {}, clear=True):
            orchestrator = SessionOrchestrator(config, clock=lambda: ASSESSED_AT)
            result = run_assessment(orchestrator, [1] * 10)

            assert orchestrator.save_result(result).saved is True
            assert orchestrator.schedule_reminder(result, ReminderChoice.ONE_WEEK).saved is True
        assert orchestrator.hasher.ephemeral is True

    def test_injected_hasher_used_in_log_records(self, config, caplog):
        hasher = SubjectHasher("k" * SubjectHasher.MIN_SALT_LENGTH)
        orchestrator = SessionOrchestrator(config, clock=lambda: ASSESSED_AT, hasher=hasher)
        result = run_assessment(orchestrator, [2] * 10)

        with caplog.at_level(logging.INFO, logger="neuroscan.services.session_service"):
            orchestrator.save_result(result)
            orchestrator.schedule_reminder(result, ReminderChoice.TWO_WEEKS)

        records = [r for r in caplog.records
                   if r.getMessage() in ("RESULT_ENTRY_APPENDED", "REMINDER_SCHEDULED")]
        assert len(records) == 2
        for record in records:
            assert record.subject_hash == hasher.fingerprint("Alex")
            assert all("Alex" not in str(v) for v in vars(record).values())

    def test_failed_save_log_record_omits_name(self, tmp_path, caplog):
        config = SessionConfig(results_path=tmp_path, reminders_path=tmp_path / "r.txt")
        orchestrator = SessionOrchestrator(config, clock=lambda: ASSESSED_AT)
        result = run_assessment(orchestrator, [1] * 10)

        with caplog.at_level(logging.ERROR, logger="neuroscan.services.session_service"):
            orchestrator.save_result(result)

        failures = [r for r in caplog.records if r.getMessage() == "RESULT_PERSISTENCE_FAILED"]
        assert len(failures) == 1
        assert failures[0].subject_hash == orchestrator.hasher.fingerprint("Alex")
        assert all("Alex" not in str(v) for v in vars(failures[0]).values())
