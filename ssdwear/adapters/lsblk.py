"""Block-device listing via lsblk."""

import re
from typing import TYPE_CHECKING

from ssdwear.lib.process import run_command

if TYPE_CHECKING:
    from ssdwear.core.context import Context
    from ssdwear.models import ToolPaths

NVME_DEVICE = re.compile(r"^/dev/nvme\d+n\d+$")

# RAM-backed block devices that lsblk lists with TYPE disk
VIRTUAL_PREFIXES = ("zram", "ram")


def parse_nonrotational(text: str) -> list[str]:
    """
    Return /dev paths of physical disks whose ROTA column is 0.

    Loop devices, optical drives and RAM-backed disks report ROTA 0
    without being drives, so only TYPE disk rows outside VIRTUAL_PREFIXES
    are kept.
    """
    devices = []
    for line in text.splitlines():
        parts = line.split()
        if len(parts) < 3:
            continue
        name, rota, dev_type = parts[0], parts[1], parts[2]
        if dev_type != "disk" or name.startswith(VIRTUAL_PREFIXES):
            continue
        if rota == "0":
            devices.append(f"/dev/{name}")
    return devices


def list_nonrotational(tools: "ToolPaths", context: "Context") -> list[str]:
    """List non-rotational whole disks, in lsblk order."""
    stdout = run_command(
        [tools.lsblk, "-d", "-n", "-o", "NAME,ROTA,TYPE"],
        context=context,
        timeout=tools.timeout,
    )
    return parse_nonrotational(stdout)


def is_nvme(device: str) -> bool:
    """True for NVMe namespace paths such as /dev/nvme0n1."""
    return NVME_DEVICE.match(device) is not None
