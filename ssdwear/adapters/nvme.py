"""NVMe health log reads via nvme-cli."""

import re
from typing import TYPE_CHECKING

from ssdwear.lib.process import run_command

if TYPE_CHECKING:
    from ssdwear.core.context import Context
    from ssdwear.models import ToolPaths

_WEAR_LEVELING_PATTERN = re.compile(r"^\s*wear_leveling(?:_count)?\s*:\s*(\d+)\s*%", re.MULTILINE)
_PERCENTAGE_USED_PATTERN = re.compile(r"^\s*percentage_used\s*:\s*(\d+)\s*%", re.MULTILINE | re.IGNORECASE)
# Matches "temperature : 35 C" and "temperature : 35 °C (308 Kelvin)", not the sensor lines
_TEMPERATURE_PATTERN = re.compile(r"^\s*temperature\s*:\s*(-?\d+)", re.MULTILINE | re.IGNORECASE)


def parse_wear_leveling(text: str) -> int | None:
    """Normalized wear_leveling percent from the vendor smart log."""
    match = _WEAR_LEVELING_PATTERN.search(text)
    return int(match.group(1)) if match else None


def parse_percentage_used(text: str) -> int | None:
    """percentage_used from the standard smart log."""
    match = _PERCENTAGE_USED_PATTERN.search(text)
    return int(match.group(1)) if match else None


def parse_temperature(text: str) -> int | None:
    """Composite temperature; non-positive readings are treated as absent."""
    match = _TEMPERATURE_PATTERN.search(text)
    if not match:
        return None
    value = int(match.group(1))
    return value if value > 0 else None


def read_wear_leveling(device: str, tools: "ToolPaths", context: "Context") -> int | None:
    """
    Read wear_leveling from `nvme intel smart-log-add`.

    Raises:
        CommandError: If the plugin command is unsupported or fails
    """
    stdout = run_command(
        [tools.nvme, "intel", "smart-log-add", device],
        context=context,
        check=True,
        timeout=tools.timeout,
    )
    return parse_wear_leveling(stdout)


def read_smart_log(device: str, tools: "ToolPaths", context: "Context") -> str:
    """Raw text of `nvme smart-log`."""
    return run_command(
        [tools.nvme, "smart-log", device],
        context=context,
        check=True,
        timeout=tools.timeout,
    )
