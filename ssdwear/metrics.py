"""Per-drive wear extraction and classification."""

from typing import TYPE_CHECKING

from ssdwear.adapters import nvme, smartctl
from ssdwear.adapters.lsblk import is_nvme
from ssdwear.lib.process import CommandError
from ssdwear.models import DriveMetric, DriverKind, Severity

if TYPE_CHECKING:
    from ssdwear.core.context import Context
    from ssdwear.core.output import Output
    from ssdwear.models import ControllerRecord, Thresholds, ToolPaths

# smartctl -d prefix per RAID driver; the drive id is appended after a comma
DEVICE_TYPES = {
    DriverKind.MEGARAID: "sat+megaraid",
    DriverKind.THREEWARE: "3ware",
}


def classify(wear: int | None, thresholds: "Thresholds") -> Severity:
    """Classify remaining life against the critical and warning thresholds."""
    if wear is None:
        return Severity.UNKNOWN
    if wear < thresholds.critical:
        return Severity.CRITICAL
    if wear < thresholds.warning:
        return Severity.WARNING
    return Severity.OK


def _nvme_metric(
    device: str,
    controller: "ControllerRecord",
    tools: "ToolPaths",
    context: "Context",
    output: "Output",
) -> DriveMetric:
    try:
        wear = nvme.read_wear_leveling(device, tools, context)
    except CommandError as e:
        output.debug(f"{device}: smart-log-add unavailable ({e})")
        wear = None

    try:
        smart_log = nvme.read_smart_log(device, tools, context)
    except CommandError as e:
        output.debug(f"{device}: smart-log failed ({e})")
        smart_log = ""

    if wear is None:
        used = nvme.parse_percentage_used(smart_log)
        if used is not None:
            wear = max(0, 100 - used)

    return DriveMetric(
        drive_id=device,
        controller_index=controller.index,
        wear=wear,
        temperature=nvme.parse_temperature(smart_log),
    )


def _smart_metric(
    drive_id: str,
    controller: "ControllerRecord",
    driver: DriverKind,
    tools: "ToolPaths",
    context: "Context",
    output: "Output",
) -> DriveMetric:
    if driver == DriverKind.AUTO:
        device, device_type = drive_id, "auto"
    else:
        device, device_type = controller.block_device, f"{DEVICE_TYPES[driver]},{drive_id}"

    try:
        wear = smartctl.read_wear(device, device_type, tools, context)
    except CommandError as e:
        output.debug(f"{device} ({device_type}): smartctl failed ({e})")
        wear = None

    return DriveMetric(drive_id=drive_id, controller_index=controller.index, wear=wear)


def extract(
    drive_id: str,
    controller: "ControllerRecord",
    driver: DriverKind,
    tools: "ToolPaths",
    context: "Context",
    output: "Output",
) -> DriveMetric:
    """
    Read the wear indicator (and NVMe temperature) for one drive.

    Tool failures are not fatal: they leave wear as None so the drive is
    reported UNKNOWN while the remaining drives are still checked.
    """
    if driver == DriverKind.AUTO and is_nvme(drive_id):
        metric = _nvme_metric(drive_id, controller, tools, context, output)
    else:
        metric = _smart_metric(drive_id, controller, driver, tools, context, output)

    output.debug(
        f"c{controller.index} {drive_id}: wear={metric.wear} temperature={metric.temperature}"
    )
    return metric
