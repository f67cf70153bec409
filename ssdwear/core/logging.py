"""JSONL logging of check runs."""

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any


class CheckLogger:
    """
    JSONL logger for check runs.

    Writes structured log entries to a JSONL file. A logger without a
    path discards everything, so callers never need to test for one.
    """

    def __init__(self, check_name: str, log_path: Path | None = None):
        """
        Initialize logger.

        Args:
            check_name: Name recorded in every entry
            log_path: Path to log file (None disables logging)
        """
        self.check_name = check_name
        self.log_path = log_path
        self._file = None

    def _ensure_file(self) -> None:
        """Ensure log file is open."""
        if self._file is None:
            self.log_path.parent.mkdir(parents=True, exist_ok=True)
            self._file = open(self.log_path, "a")

    def _log(self, level: str, message: str, **extra: Any) -> None:
        """Write a log entry."""
        if self.log_path is None:
            return
        self._ensure_file()
        entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": level,
            "check": self.check_name,
            "message": message,
            **extra,
        }
        self._file.write(json.dumps(entry) + "\n")
        self._file.flush()

    def info(self, message: str, **extra: Any) -> None:
        """Log info message."""
        self._log("info", message, **extra)

    def error(self, message: str, **extra: Any) -> None:
        """Log error message."""
        self._log("error", message, **extra)

    def close(self) -> None:
        """Close the log file."""
        if self._file is not None:
            self._file.close()
            self._file = None

    def __enter__(self) -> "CheckLogger":
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        self.close()
