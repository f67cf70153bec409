"""Controller family detection."""

from typing import TYPE_CHECKING

from ssdwear.adapters import lspci
from ssdwear.errors import UnknownController
from ssdwear.models import ControllerFamily

if TYPE_CHECKING:
    from ssdwear.core.context import Context
    from ssdwear.models import ToolPaths

# Checked in order; the first substring found in --card wins
OVERRIDES = (
    ("lsi", ControllerFamily.LSI),
    ("3ware", ControllerFamily.THREEWARE),
    ("auto", ControllerFamily.AUTO),
)


def family_from_override(card: str) -> ControllerFamily:
    """
    Map a --card value to a controller family.

    Raises:
        UnknownController: If the name matches no supported family
    """
    lowered = card.lower()
    for needle, family in OVERRIDES:
        if needle in lowered:
            return family
    raise UnknownController(f"unknown card type {card!r} (use lsi, 3ware or auto)")


def detect(
    override: str | None,
    devices: list[str],
    tools: "ToolPaths",
    context: "Context",
) -> ControllerFamily:
    """
    Determine the controller family for this host.

    Args:
        override: Value of --card, if given
        devices: Non-rotational block devices already listed by lsblk
        tools: Resolved tool paths
        context: Execution context

    Returns:
        The detected family

    Raises:
        UnknownController: If nothing supported is present
    """
    if override:
        return family_from_override(override)

    if devices:
        return ControllerFamily.AUTO

    family = lspci.detect_raid_family(tools, context)
    if family is None:
        raise UnknownController("no SSD and no supported RAID controller found")
    return family
