#!/usr/bin/env python3
"""Interactive console for the NeuroScan screening questionnaire.

Usage:
    neuroscan
    python -m neuroscan --results-file ~/neuroscan/results.txt
    python -m neuroscan --log-level INFO
"""
import argparse
import logging
import sys
from pathlib import Path
from typing import Callable, Optional

from neuroscan.shared.models import Question, ReminderChoice
from neuroscan.shared.storage import PersistenceError
from neuroscan.shared.utils import SubjectHasher
from neuroscan.services.assessment_engine import (
    MEMORY_ADVISORY,
    SCALE_LABELS,
    WEEKLY_CHALLENGE,
    InvalidResponseError,
    parse_response,
)
from neuroscan.services.session_service import (
    SessionConfig,
    SessionOrchestrator,
    parse_reminder_choice,
)
from neuroscan.services.results_service import ResultsViewer

logger = logging.getLogger(__name__)

RULE = "-" * 54

MENU = (
    "1. Take the NeuroScan Assessment\n"
    "2. View Past Results\n"
    "3. Exit"
)


def setup_parser() -> argparse.ArgumentParser:
    """Set up argument parser."""
    parser = argparse.ArgumentParser(
        description="NeuroScan: Your Early Detection Assistant",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--results-file", type=str,
        help="Assessment log (default: $NEUROSCAN_RESULTS_FILE or NeuroScan_Results.txt)"
    )
    parser.add_argument(
        "--reminders-file", type=str,
        help="Reminder log (default: $NEUROSCAN_REMINDERS_FILE or NeuroScan_Reminders.txt)"
    )
    parser.add_argument(
        "--log-level", default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Diagnostic log level (written to stderr)"
    )
    return parser


def build_config(args: argparse.Namespace) -> SessionConfig:
    """Environment first, then command-line overrides."""
    config = SessionConfig.from_env()
    return SessionConfig(
        results_path=Path(args.results_file) if args.results_file else config.results_path,
        reminders_path=Path(args.reminders_file) if args.reminders_file else config.reminders_path,
        encoding=config.encoding,
    )


class ConsoleSession:
    """Menu loop and prompts around the orchestrator and viewer.

    Input and output are injectable so the session can be driven
    without a terminal.
    """

    def __init__(
        self,
        orchestrator: SessionOrchestrator,
        viewer: ResultsViewer,
        input_fn: Optional[Callable[[str], str]] = None,
        print_fn: Optional[Callable[..., None]] = None,
    ):
        self.orchestrator = orchestrator
        self.viewer = viewer
        self._input = input_fn or input
        self._print = print_fn or print

    def run(self) -> int:
        """Run the session until the user exits. Always returns 0."""
        name = ""
        try:
            self._print("Welcome to NeuroScan: Your Early Detection Assistant")
            self._print(RULE)
            name = self._input("Enter your name: ").strip()
            is_caregiver = self._ask_yes_no(
                "Are you filling this out as a caregiver for someone else? (y/n): "
            )

            while True:
                self._print(f"\n\U0001F44B Hello, {name}! What would you like to do?")
                self._print(MENU)
                choice = self._input("Enter your choice (1-3): ").strip()

                if choice == "1":
                    self.take_assessment(name, is_caregiver)
                elif choice == "2":
                    self.view_past_results()
                elif choice == "3":
                    break
                else:
                    self._print("Invalid choice. Please enter 1, 2, or 3.")
        except (KeyboardInterrupt, EOFError):
            self._print("\n\nSession interrupted.")

        self._print(f"\nThank you for using NeuroScan, {name}! Stay healthy \U0001F499")
        return 0

    def take_assessment(self, name: str, is_caregiver: bool) -> None:
        engine = self.orchestrator.start_assessment()
        total_questions = len(engine.questions)

        self._print(
            f"\nThis assistant will ask you {total_questions} questions "
            "to evaluate early neurodegenerative symptoms."
        )
        self._print("Please answer honestly using the scale:")
        self._print("\t".join(f"{v} = {label}" for v, label in SCALE_LABELS.items()) + "\n")

        for question in engine.questions:
            engine.record_response(question.index, self._ask_response(question))
            self._print(
                f"Progress: [{question.index:2d}/{total_questions}] completed\n"
            )

        result = self.orchestrator.complete_assessment(engine, name, is_caregiver)

        self._print(RULE)
        if result.frequent_memory_flag:
            self._print(f"\U0001F9E0 {MEMORY_ADVISORY}\n")
        self._print(
            f"{name}, your total risk score is: "
            f"{result.total_score} out of {result.max_score}."
        )
        self._print(f"\n{result.tier.display}\n{result.recommendation}")

        note = None
        if is_caregiver and self._ask_yes_no(
            "\nWould you like to leave a caregiver note? (y/n): "
        ):
            note = self._input("Enter your caregiver note: ")

        outcome = self.orchestrator.save_result(result, caregiver_note=note)
        if outcome.saved:
            self._print(f"\n\U0001F4C4 Your results have been saved to '{outcome.path}'.")
        else:
            self._print(f"\n⚠️ Your results could not be saved: {outcome.error}")
        self._print(RULE + "\n")

        reminder = self.orchestrator.schedule_reminder(result, self._ask_reminder_choice())
        if reminder.saved:
            self._print(
                f"\n\U0001F514 Reminder saved! You'll see this in '{reminder.write.path}'."
            )
        elif reminder.write is not None:
            self._print(f"\n⚠️ Reminder could not be saved: {reminder.write.error}")

        self._print("\n\U0001F4A1 Weekly Brain Health Challenge:")
        self._print(f"{WEEKLY_CHALLENGE} \U0001F9E0\U0001F4D6")

    def view_past_results(self) -> None:
        try:
            if not self.viewer.has_results():
                self._print("No previous results found.")
                return
            self._print("\n\U0001F4C1 Displaying past results:")
            self._print(RULE)
            for line in self.viewer.iter_lines():
                self._print(line)
        except PersistenceError as e:
            self._print(f"Could not read past results: {e}")

    def _ask_response(self, question: Question) -> int:
        self._print(f"{question.index}. {question.text}")
        raw = self._input("Your response (0 = Never, 1 = Sometimes, 2 = Often): ")
        while True:
            try:
                return parse_response(question.index, raw)
            except InvalidResponseError:
                raw = self._input("Invalid input. Please enter 0, 1, or 2: ")

    def _ask_reminder_choice(self) -> ReminderChoice:
        raw = self._input(
            "Would you like to set a reminder to retake this in:\n"
            "1 week (1), 2 weeks (2), or No reminder (0)? "
        )
        while True:
            try:
                return parse_reminder_choice(raw)
            except ValueError:
                raw = self._input("Invalid input. Please enter 0, 1, or 2: ")

    def _ask_yes_no(self, prompt: str) -> bool:
        return self._input(prompt).strip().lower().startswith("y")


def main(argv: Optional[list] = None) -> int:
    args = setup_parser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    config = build_config(args)
    try:
        hasher = SubjectHasher.from_env()
    except ValueError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2
    orchestrator = SessionOrchestrator(config, hasher=hasher)
    viewer = ResultsViewer(config.results_path, config.encoding)
    logger.info(
        "NEUROSCAN_SESSION_STARTED",
        extra={"results_path": str(config.results_path)}
    )
    return ConsoleSession(orchestrator, viewer).run()


if __name__ == "__main__":
    sys.exit(main())
