"""Session Service configuration.

File locations are passed explicitly to the orchestrator and viewer
rather than held in module-level state.
"""
import os
from dataclasses import dataclass
from pathlib import Path

DEFAULT_RESULTS_FILE = "NeuroScan_Results.txt"
DEFAULT_REMINDERS_FILE = "NeuroScan_Reminders.txt"


@dataclass(frozen=True)
class SessionConfig:
    """Storage configuration for one interactive session."""
    results_path: Path = Path(DEFAULT_RESULTS_FILE)
    reminders_path: Path = Path(DEFAULT_REMINDERS_FILE)
    encoding: str = "utf-8"

    @classmethod
    def from_env(cls) -> "SessionConfig":
        """Create config from environment variables.

        Environment variables:
            NEUROSCAN_RESULTS_FILE: Assessment log (default NeuroScan_Results.txt)
            NEUROSCAN_REMINDERS_FILE: Reminder log (default NeuroScan_Reminders.txt)
        """
        return cls(
            results_path=Path(os.getenv("NEUROSCAN_RESULTS_FILE", DEFAULT_RESULTS_FILE)),
            reminders_path=Path(os.getenv("NEUROSCAN_REMINDERS_FILE", DEFAULT_REMINDERS_FILE)),
        )
