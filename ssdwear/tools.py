"""Tool availability checks."""

from typing import TYPE_CHECKING

from ssdwear.adapters.lsblk import is_nvme
from ssdwear.errors import MissingTool
from ssdwear.lib.process import check_tool
from ssdwear.models import ControllerFamily

if TYPE_CHECKING:
    from ssdwear.core.context import Context
    from ssdwear.models import ToolPaths


def required_tools(
    family: ControllerFamily,
    tools: "ToolPaths",
    devices: list[str],
) -> list[str]:
    """Executables a run against this family needs, in check order."""
    required = []
    if family == ControllerFamily.LSI:
        required += [tools.storcli, tools.lsscsi]
    elif family == ControllerFamily.THREEWARE:
        required.append(tools.tw_cli)

    if any(is_nvme(device) for device in devices):
        required.append(tools.nvme)

    required.append(tools.smartctl)
    return required


def check_tools(
    family: ControllerFamily,
    tools: "ToolPaths",
    devices: list[str],
    context: "Context",
) -> "ToolPaths":
    """
    Verify every required executable exists before any drive is queried.

    Returns:
        The tool paths, unchanged

    Raises:
        MissingTool: For the first required executable that is absent
    """
    for tool in required_tools(family, tools, devices):
        if not check_tool(tool, context=context):
            raise MissingTool(tool)
    return tools
