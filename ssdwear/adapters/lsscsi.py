"""SCSI device lookup via lsscsi."""

import re
from typing import TYPE_CHECKING

from ssdwear.lib.process import run_command

if TYPE_CHECKING:
    from ssdwear.core.context import Context
    from ssdwear.models import ToolPaths

# [H:C:T:L]  type  vendor  ...  /dev/sdX
SCSI_ROW = re.compile(r"^\[(\d+):\d+:\d+:\d+\]\s+(\S+)\s+(\S+)\s+.*?(/dev/\S+)\s*$")

RAID_VENDORS = ("LSI", "AVAGO", "BROADCOM", "DELL")


def parse_block_device(text: str, controller_id: str) -> str:
    """
    Find the block device a RAID controller exposes.

    The disk on the SCSI host numbered like the controller wins; without
    one, the first disk from a MegaRAID vendor is used. Returns "" when
    neither is present.
    """
    fallback = ""
    for line in text.splitlines():
        match = SCSI_ROW.match(line.strip())
        if not match or match.group(2) != "disk":
            continue
        host, vendor, device = match.group(1), match.group(3), match.group(4)
        if host == controller_id:
            return device
        if not fallback and vendor.upper() in RAID_VENDORS:
            fallback = device
    return fallback


def find_block_device(controller_id: str, tools: "ToolPaths", context: "Context") -> str:
    """Resolve the block device for a controller."""
    stdout = run_command([tools.lsscsi], context=context, timeout=tools.timeout)
    return parse_block_device(stdout, controller_id)
