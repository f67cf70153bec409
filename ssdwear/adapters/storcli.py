"""LSI/Broadcom MegaRAID queries via storcli."""

import re
from typing import TYPE_CHECKING

from ssdwear.lib.process import run_command

if TYPE_CHECKING:
    from ssdwear.core.context import Context
    from ssdwear.models import ToolPaths

CONTROLLER_ROW = re.compile(r"^\s*(\d+)\s+\S")

# EID:Slt DID State DG Size Intf Med ...
DRIVE_ROW = re.compile(
    r"^\s*\d*:\d+\s+(\d+)\s+.*?\s(?:SATA|SAS|NVMe)\s+(SSD|HDD)\s",
    re.IGNORECASE,
)


def parse_controllers(text: str) -> list[str]:
    """Controller ids from the System Overview table of `storcli show`."""
    controllers = []
    in_overview = False
    for line in text.splitlines():
        if line.startswith("System Overview"):
            in_overview = True
            continue
        if not in_overview:
            continue
        match = CONTROLLER_ROW.match(line)
        if match:
            controllers.append(match.group(1))
    return controllers


def parse_ssd_drive_ids(text: str) -> list[str]:
    """Device ids (DID column) of drives whose medium is SSD."""
    return [
        match.group(1)
        for match in map(DRIVE_ROW.match, text.splitlines())
        if match and match.group(2).upper() == "SSD"
    ]


def list_controllers(tools: "ToolPaths", context: "Context") -> list[str]:
    """List controller ids known to storcli."""
    stdout = run_command([tools.storcli, "show"], context=context, timeout=tools.timeout)
    return parse_controllers(stdout)


def list_ssd_drives(controller_id: str, tools: "ToolPaths", context: "Context") -> list[str]:
    """List SSD device ids behind one controller."""
    stdout = run_command(
        [tools.storcli, f"/c{controller_id}", "/eall", "/sall", "show"],
        context=context,
        timeout=tools.timeout,
    )
    return parse_ssd_drive_ids(stdout)
