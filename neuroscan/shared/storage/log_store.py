"""Append-only text log.

Each append opens the file, writes, and closes before returning, so no
handle outlives a single operation. Existing content is never rewritten.
"""
import logging
from pathlib import Path
from typing import Iterator, Union

logger = logging.getLogger(__name__)


class PersistenceError(Exception):
    """Base exception for storage errors."""

    def __init__(self, message: str, path: Path):
        super().__init__(message)
        self.path = path


class AppendOnlyLog:
    """A UTF-8 text file mutated only by adding content at the end."""

    def __init__(self, path: Union[str, Path], encoding: str = "utf-8"):
        """Initialize log.

        Args:
            path: Location of the log file (created on first append)
            encoding: Text encoding for reads and writes
        """
        self.path = Path(path)
        self.encoding = encoding

    def append(self, text: str) -> bool:
        """Append text to the end of the log in a single write.

        Args:
            text: Content to append, including trailing newline

        Returns:
            True if stored successfully

        Raises:
            PersistenceError: If the file cannot be opened or written
        """
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with self.path.open("a", encoding=self.encoding) as handle:
                handle.write(text)
        except OSError as e:
            logger.error(
                "LOG_APPEND_FAILED",
                extra={"path": str(self.path), "error": str(e)}
            )
            raise PersistenceError(f"Failed to append to {self.path}: {e}", self.path)

        logger.debug(
            "LOG_APPENDED",
            extra={"path": str(self.path), "chars": len(text)}
        )
        return True

    def iter_lines(self) -> Iterator[str]:
        """Yield lines in file order without trailing newlines.

        A missing file yields nothing. Each call re-scans the file.

        Raises:
            PersistenceError: If an existing file cannot be read
        """
        try:
            with self.path.open("r", encoding=self.encoding, newline="") as handle:
                for line in handle:
                    yield line.rstrip("\r\n")
        except FileNotFoundError:
            return
        except OSError as e:
            logger.error(
                "LOG_READ_FAILED",
                extra={"path": str(self.path), "error": str(e)}
            )
            raise PersistenceError(f"Failed to read {self.path}: {e}", self.path)
