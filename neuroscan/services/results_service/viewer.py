"""Results viewer - verbatim read-back of the results log."""
import logging
from pathlib import Path
from typing import Iterator, Union

from neuroscan.shared.storage import AppendOnlyLog

logger = logging.getLogger(__name__)


class ResultsViewer:
    """Reads stored assessment entries for display.

    Every read re-scans the file, so entries appended by the same session
    show up on the next view.
    """

    def __init__(self, results_path: Union[str, Path], encoding: str = "utf-8"):
        self._log = AppendOnlyLog(results_path, encoding)

    @property
    def path(self) -> Path:
        return self._log.path

    def has_results(self) -> bool:
        """False if the log is absent or holds no non-blank lines.

        Raises:
            PersistenceError: If an existing file cannot be read
        """
        return any(line.strip() for line in self._log.iter_lines())

    def iter_lines(self) -> Iterator[str]:
        """Lazily yield stored lines, oldest first, without newlines.

        Yields nothing when there are no results.

        Raises:
            PersistenceError: If an existing file cannot be read
        """
        count = 0
        for line in self._log.iter_lines():
            count += 1
            yield line
        logger.info(
            "RESULTS_VIEWED",
            extra={"path": str(self.path), "line_count": count}
        )

    def read_text(self) -> str:
        """Entire log as text, each line newline-terminated."""
        return "".join(f"{line}\n" for line in self.iter_lines())
