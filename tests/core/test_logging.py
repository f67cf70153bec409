"""Tests for logging module."""

import json

from ssdwear.core.logging import CheckLogger


class TestCheckLogger:
    """Tests for CheckLogger class."""

    def test_logs_to_file(self, tmp_path):
        """Writes log entries to JSONL file."""
        log_path = tmp_path / "test.jsonl"
        logger = CheckLogger("ssd_wear", log_path=log_path)

        logger.info("SSD OK: (auto) c0 sda WLC/MWI 90", exit_code=0)
        logger.close()

        entry = json.loads(log_path.read_text().strip())
        assert entry["level"] == "info"
        assert entry["check"] == "ssd_wear"
        assert entry["exit_code"] == 0
        assert "timestamp" in entry

    def test_logs_multiple_levels(self, tmp_path):
        """Logs info and error levels in order."""
        log_path = tmp_path / "test.jsonl"
        with CheckLogger("ssd_wear", log_path=log_path) as logger:
            logger.info("Info msg")
            logger.error("Error msg")

        lines = log_path.read_text().strip().split("\n")
        assert [json.loads(line)["level"] for line in lines] == ["info", "error"]

    def test_creates_parent_directory(self, tmp_path):
        """Missing log directories are created."""
        log_path = tmp_path / "var" / "log" / "ssdwear" / "runs.jsonl"
        with CheckLogger("ssd_wear", log_path=log_path) as logger:
            logger.info("hello")
        assert log_path.exists()

    def test_appends(self, tmp_path):
        """Successive loggers append to the same file."""
        log_path = tmp_path / "test.jsonl"
        for _ in range(2):
            with CheckLogger("ssd_wear", log_path=log_path) as logger:
                logger.info("run")
        assert len(log_path.read_text().strip().split("\n")) == 2

    def test_without_path_writes_nothing(self, tmp_path):
        """A logger without a path is a no-op."""
        with CheckLogger("ssd_wear") as logger:
            logger.info("dropped")
        assert list(tmp_path.iterdir()) == []
