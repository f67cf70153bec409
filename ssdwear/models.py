"""Data model shared by the pipeline stages."""

from dataclasses import dataclass
from enum import Enum, IntEnum


class ControllerFamily(Enum):
    """Which controller, if any, stands between the host and its drives."""

    LOCAL = "local"
    LSI = "lsi"
    THREEWARE = "3ware"
    AUTO = "auto"


class DriverKind(Enum):
    """smartctl device-addressing convention used for a controller family."""

    MEGARAID = "megaraid"
    THREEWARE = "3ware"
    AUTO = "auto"


class Severity(IntEnum):
    """Per-drive and overall check severity."""

    OK = 0
    WARNING = 1
    CRITICAL = 2
    UNKNOWN = 3


@dataclass(frozen=True)
class Thresholds:
    """Remaining-life percentages below which a drive is flagged."""

    warning: int = 10
    critical: int = 5


@dataclass(frozen=True)
class ToolPaths:
    """Executables resolved for this run."""

    smartctl: str = "smartctl"
    nvme: str = "nvme"
    storcli: str = "storcli64"
    tw_cli: str = "tw_cli"
    lsblk: str = "lsblk"
    lspci: str = "lspci"
    lsscsi: str = "lsscsi"
    timeout: int | None = 60


@dataclass(frozen=True)
class ControllerRecord:
    """A controller and the solid-state drives found behind it."""

    index: int
    controller_id: str
    block_device: str
    drive_ids: tuple[str, ...] = ()


@dataclass(frozen=True)
class DriveMetric:
    """Values read for one drive; None means the tool gave nothing usable."""

    drive_id: str
    controller_index: int
    wear: int | None = None
    temperature: int | None = None
