"""The SSD wear check pipeline."""

import re
from dataclasses import dataclass, field

from ssdwear.adapters.lsblk import list_nonrotational
from ssdwear.core.context import Context
from ssdwear.core.logging import CheckLogger
from ssdwear.core.output import Output
from ssdwear.detect import detect
from ssdwear.errors import SETUP_EXIT_CODE, ConfigError, InvalidThresholds, SetupError
from ssdwear.inventory import DEFAULT_BRAND, enumerate_drives, has_solid_state
from ssdwear.lib.process import CommandError
from ssdwear.metrics import classify, extract
from ssdwear.models import Thresholds, ToolPaths
from ssdwear.result import DriveOutcome, aggregate, no_ssd_result
from ssdwear.tools import check_tools

CHECK_NAME = "ssd_wear"


@dataclass
class CheckSettings:
    """Everything a run needs, after config files and flags are merged."""

    thresholds: Thresholds = field(default_factory=Thresholds)
    tools: ToolPaths = field(default_factory=ToolPaths)
    card: str | None = None
    device: str | None = None
    brand: str = DEFAULT_BRAND
    test: bool = False
    nossd: bool = False


def validate_thresholds(thresholds: Thresholds) -> None:
    """
    Reject thresholds that would invert the classification.

    Raises:
        InvalidThresholds: If critical is above warning
    """
    if thresholds.critical > thresholds.warning:
        raise InvalidThresholds(
            f"critical threshold ({thresholds.critical}) must not exceed "
            f"warning threshold ({thresholds.warning})"
        )


def validate_brand(brand: str) -> None:
    """
    Reject a brand filter that is not a valid regular expression.

    Raises:
        ConfigError: If the pattern does not compile
    """
    try:
        re.compile(brand)
    except re.error as e:
        raise ConfigError(f"invalid brand pattern {brand!r}: {e}")


def run_check(
    settings: CheckSettings,
    output: Output,
    context: Context,
    logger: CheckLogger | None = None,
) -> int:
    """
    Run the check once.

    Args:
        settings: Merged configuration
        output: Collects the status and debug lines
        context: Execution context
        logger: Optional JSONL run log

    Returns:
        0 = OK, 1 = WARNING, 2 = CRITICAL, 3 = UNKNOWN drive,
        4 = setup failure; in test mode 0 = SSD found, 1 = none
    """
    logger = logger or CheckLogger(CHECK_NAME)
    tools = settings.tools

    try:
        validate_thresholds(settings.thresholds)
        validate_brand(settings.brand)
        devices = list_nonrotational(tools, context)
        output.debug(f"non-rotational devices: {devices}")
        family = detect(settings.card, devices, tools, context)
        output.debug(f"controller family: {family.value}")
        tools = check_tools(family, tools, devices, context)
        driver, controllers = enumerate_drives(
            family,
            tools,
            context,
            devices,
            device_filter=settings.device,
            brand=settings.brand,
        )
    except (SetupError, CommandError) as e:
        logger.error(str(e))
        if settings.test:
            output.debug(f"setup failed: {e}")
            return 1
        output.error(str(e))
        return SETUP_EXIT_CODE

    for controller in controllers:
        output.debug(
            f"controller {controller.index}: id={controller.controller_id} "
            f"device={controller.block_device!r} drives={list(controller.drive_ids)}"
        )

    found = has_solid_state(controllers)
    if settings.test:
        output.debug("SSD found" if found else "no SSD found")
        return 0 if found else 1

    if not found:
        result = no_ssd_result(driver, settings.nossd)
    else:
        outcomes = []
        for controller in controllers:
            for drive_id in controller.drive_ids:
                if not drive_id.strip():
                    continue
                metric = extract(drive_id, controller, driver, tools, context, output)
                outcomes.append(DriveOutcome(metric, classify(metric.wear, settings.thresholds)))
        result = aggregate(outcomes, driver)

    output.set_status(result.render())
    logger.info(
        result.render(),
        severity=result.severity.name,
        exit_code=result.exit_code,
        driver=driver.value,
    )
    return result.exit_code
