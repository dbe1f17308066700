"""Tests for SessionConfig."""
from pathlib import Path
from unittest.mock import patch

from neuroscan.services.session_service import SessionConfig


class TestSessionConfig:
    def test_default_values(self):
        config = SessionConfig()

        assert config.results_path == Path("NeuroScan_Results.txt")
        assert config.reminders_path == Path("NeuroScan_Reminders.txt")
        assert config.encoding == "utf-8"

    def test_from_env(self):
        with patch.dict("os.environ", {
            "NEUROSCAN_RESULTS_FILE": "/data/results.txt",
            "NEUROSCAN_REMINDERS_FILE": "/data/reminders.txt",
        }):
            config = SessionConfig.from_env()

        assert config.results_path == Path("/data/results.txt")
        assert config.reminders_path == Path("/data/reminders.txt")

    def test_from_env_defaults(self):
        with patch.dict("os.environ", {}, clear=True):
            config = SessionConfig.from_env()

        assert config == SessionConfig()
