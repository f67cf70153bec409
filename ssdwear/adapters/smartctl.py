"""SMART attribute reads via smartctl."""

import re
from typing import TYPE_CHECKING

from ssdwear.lib.process import run_command

if TYPE_CHECKING:
    from ssdwear.core.context import Context
    from ssdwear.models import ToolPaths

# 233 Media_Wearout_Indicator, 177 Wear_Leveling_Count
WEAR_ATTRIBUTE_IDS = ("233", "177")

# ID# ATTRIBUTE_NAME FLAG VALUE WORST THRESH ...
ATTRIBUTE_ROW = re.compile(r"^\s*(\d+)\s+\S+\s+0x[0-9a-fA-F]+\s+(\d+)\s")


def parse_wear(text: str) -> int | None:
    """
    Normalized VALUE of the first wear attribute row.

    Either attribute counts; whichever appears first in the table wins.
    """
    for line in text.splitlines():
        match = ATTRIBUTE_ROW.match(line)
        if match and match.group(1) in WEAR_ATTRIBUTE_IDS:
            return int(match.group(2))
    return None


def read_wear(
    device: str,
    device_type: str,
    tools: "ToolPaths",
    context: "Context",
) -> int | None:
    """
    Read the wear indicator of one drive.

    Args:
        device: Block device to address (the drive itself or its controller)
        device_type: smartctl -d argument, e.g. "auto" or "sat+megaraid,7"
        tools: Resolved tool paths
        context: Execution context

    Returns:
        Remaining life percent, or None if no wear attribute was reported
    """
    # smartctl uses its exit status as a bitmask, so output is parsed regardless
    stdout = run_command(
        [tools.smartctl, "-A", "-d", device_type, device],
        context=context,
        timeout=tools.timeout,
    )
    return parse_wear(stdout)
