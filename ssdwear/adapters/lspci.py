"""RAID controller lookup via lspci."""

from typing import TYPE_CHECKING

from ssdwear.lib.process import run_command
from ssdwear.models import ControllerFamily

if TYPE_CHECKING:
    from ssdwear.core.context import Context
    from ssdwear.models import ToolPaths

# Vendor strings seen on MegaRAID-family controllers
LSI_VENDORS = ("lsi", "megaraid", "avago", "broadcom")


def parse_raid_family(text: str) -> ControllerFamily | None:
    """Classify the first RAID line naming a supported vendor."""
    for line in text.splitlines():
        if "RAID" not in line:
            continue
        lowered = line.lower()
        if "3ware" in lowered:
            return ControllerFamily.THREEWARE
        if any(vendor in lowered for vendor in LSI_VENDORS):
            return ControllerFamily.LSI
    return None


def detect_raid_family(tools: "ToolPaths", context: "Context") -> ControllerFamily | None:
    """Scan the PCI device list for a supported RAID controller."""
    stdout = run_command([tools.lspci], context=context, timeout=tools.timeout)
    return parse_raid_family(stdout)
