"""Shared test fixtures."""

import subprocess
from pathlib import Path

import pytest

from ssdwear.models import ToolPaths

FIXTURES_DIR = Path(__file__).parent / "fixtures"


class MockContext:
    """Mock Context for testing the check without real system access."""

    def __init__(
        self,
        tools_available: list[str] | None = None,
        command_outputs: dict[tuple, "str | Exception | subprocess.CompletedProcess"] | None = None,
    ):
        self.tools_available = set(tools_available or [])
        self.command_outputs = command_outputs or {}
        self.commands_run: list[list[str]] = []

    def check_tool(self, name: str) -> bool:
        """Check if tool is in mocked available list."""
        return name in self.tools_available

    def run(
        self,
        cmd: list[str],
        check: bool = False,
        **kwargs,
    ) -> subprocess.CompletedProcess:
        """Return mocked command output."""
        self.commands_run.append(cmd)
        key = tuple(cmd)
        if key not in self.command_outputs:
            raise KeyError(f"No mock output for command: {cmd}")

        output = self.command_outputs[key]
        if isinstance(output, Exception):
            raise output

        if isinstance(output, subprocess.CompletedProcess):
            result = output
        else:
            result = subprocess.CompletedProcess(cmd, returncode=0, stdout=output, stderr="")

        if check and result.returncode != 0:
            raise subprocess.CalledProcessError(result.returncode, cmd, result.stdout, result.stderr)
        return result

    def ran(self, program: str) -> bool:
        """True if any command starting with program was run."""
        return any(cmd[0] == program for cmd in self.commands_run)


@pytest.fixture
def mock_context():
    """Factory fixture for creating MockContext instances."""
    def _create(**kwargs) -> MockContext:
        return MockContext(**kwargs)
    return _create


@pytest.fixture
def tools() -> ToolPaths:
    """Default tool paths."""
    return ToolPaths()


@pytest.fixture
def fixtures_dir() -> Path:
    """Path to test fixtures directory."""
    return FIXTURES_DIR


@pytest.fixture(autouse=True)
def isolated_home(tmp_path, monkeypatch):
    """Keep system and user config files out of tests."""
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setattr("ssdwear.core.config.SYSTEM_CONFIG", tmp_path / "etc" / "config.yaml")


def load_fixture(category: str, name: str) -> str:
    """Load a fixture file by category and name."""
    fixture_path = FIXTURES_DIR / category / name
    if not fixture_path.exists():
        raise FileNotFoundError(f"Fixture not found: {fixture_path}")
    return fixture_path.read_text()


@pytest.fixture
def fixture_text():
    """Loader for captured tool output."""
    return load_fixture
