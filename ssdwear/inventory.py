"""Controller and drive enumeration."""

from typing import TYPE_CHECKING

from ssdwear.adapters import lsscsi, storcli, tw_cli
from ssdwear.errors import NoController, UnknownController
from ssdwear.models import ControllerFamily, ControllerRecord, DriverKind

if TYPE_CHECKING:
    from ssdwear.core.context import Context
    from ssdwear.models import ToolPaths

DEFAULT_BRAND = "INTEL|Samsung"


def _enumerate_lsi(tools: "ToolPaths", context: "Context") -> list[ControllerRecord]:
    controller_ids = storcli.list_controllers(tools, context)
    if not controller_ids:
        raise NoController(
            "no controller found by storcli, check the storcli version matches the controller"
        )

    records = []
    for index, controller_id in enumerate(controller_ids):
        records.append(
            ControllerRecord(
                index=index,
                controller_id=controller_id,
                block_device=lsscsi.find_block_device(controller_id, tools, context),
                drive_ids=tuple(storcli.list_ssd_drives(controller_id, tools, context)),
            )
        )
    return records


def _enumerate_3ware(brand: str, tools: "ToolPaths", context: "Context") -> list[ControllerRecord]:
    controller_id = tw_cli.find_controller(tools, context)
    if controller_id is None:
        raise NoController(
            "no controller found by tw_cli, check the tw_cli version matches the controller"
        )

    return [
        ControllerRecord(
            index=0,
            controller_id=controller_id,
            block_device=tw_cli.block_device(controller_id),
            drive_ids=tuple(tw_cli.list_drives(controller_id, brand, tools, context)),
        )
    ]


def _enumerate_auto(devices: list[str], device_filter: str | None) -> list[ControllerRecord]:
    if device_filter:
        devices = [d for d in devices if device_filter in d]

    return [
        ControllerRecord(
            index=0,
            controller_id="0",
            block_device=devices[0] if devices else "",
            drive_ids=tuple(devices),
        )
    ]


def enumerate_drives(
    family: ControllerFamily,
    tools: "ToolPaths",
    context: "Context",
    devices: list[str],
    device_filter: str | None = None,
    brand: str = DEFAULT_BRAND,
) -> tuple[DriverKind, list[ControllerRecord]]:
    """
    List the controllers of a family and the SSDs behind each.

    Args:
        family: Detected controller family
        tools: Resolved tool paths
        context: Execution context
        devices: Non-rotational block devices (used for AUTO)
        device_filter: Substring a device path must contain (AUTO only)
        brand: Regex a 3ware drive row must match

    Returns:
        The smartctl addressing convention and the controllers, in
        discovery order with indexes 0..n-1

    Raises:
        NoController: If the controller tool lists no controller
        UnknownController: If the family has no enumeration path
    """
    if family == ControllerFamily.LSI:
        return DriverKind.MEGARAID, _enumerate_lsi(tools, context)
    if family == ControllerFamily.THREEWARE:
        return DriverKind.THREEWARE, _enumerate_3ware(brand, tools, context)
    if family == ControllerFamily.AUTO:
        return DriverKind.AUTO, _enumerate_auto(devices, device_filter)
    raise UnknownController(f"no enumeration for controller family {family.value}")


def has_solid_state(controllers: list[ControllerRecord]) -> bool:
    """True if any controller lists a non-blank drive id."""
    return any(
        drive_id.strip()
        for controller in controllers
        for drive_id in controller.drive_ids
    )
