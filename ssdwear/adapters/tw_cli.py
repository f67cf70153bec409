"""3ware controller queries via tw_cli."""

import re
from typing import TYPE_CHECKING

from ssdwear.lib.process import run_command

if TYPE_CHECKING:
    from ssdwear.core.context import Context
    from ssdwear.models import ToolPaths

CONTROLLER_ROW = re.compile(r"^(c\d+)\s")
PORT_ROW = re.compile(r"^v?p(\d+)\S*\s")


def parse_first_controller(text: str) -> str | None:
    """First controller id (c0, c1, ...) listed by `tw_cli show`."""
    for line in text.splitlines():
        match = CONTROLLER_ROW.match(line)
        if match:
            return match.group(1)
    return None


def parse_drive_ids(text: str, brand: str) -> list[str]:
    """
    Port numbers of drives whose row matches the brand filter.

    Port tokens such as ``p3`` or ``vp3`` reduce to ``3``, the form smartctl
    expects after ``-d 3ware,``.
    """
    pattern = re.compile(brand, re.IGNORECASE)
    drives = []
    for line in text.splitlines():
        match = PORT_ROW.match(line)
        if match and pattern.search(line):
            drives.append(match.group(1))
    return drives


def block_device(controller_id: str) -> str:
    """3ware 9000-series character device for a controller (c0 -> /dev/twa0)."""
    return f"/dev/twa{controller_id.lstrip('c')}"


def find_controller(tools: "ToolPaths", context: "Context") -> str | None:
    """Return the first controller id, or None when tw_cli lists none."""
    stdout = run_command([tools.tw_cli, "show"], context=context, timeout=tools.timeout)
    return parse_first_controller(stdout)


def list_drives(controller_id: str, brand: str, tools: "ToolPaths", context: "Context") -> list[str]:
    """List brand-matching drive ports on a controller."""
    stdout = run_command(
        [tools.tw_cli, f"/{controller_id}", "show"],
        context=context,
        timeout=tools.timeout,
    )
    return parse_drive_ids(stdout, brand)
