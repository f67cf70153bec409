"""Folding per-drive outcomes into one check result."""

from dataclasses import dataclass

from ssdwear.errors import SETUP_EXIT_CODE
from ssdwear.models import DriveMetric, DriverKind, Severity

EXIT_CODES = {
    Severity.OK: 0,
    Severity.WARNING: 1,
    Severity.CRITICAL: 2,
    Severity.UNKNOWN: 3,
}


@dataclass(frozen=True)
class DriveOutcome:
    """A drive's metric and the severity it was classified as."""

    metric: DriveMetric
    severity: Severity

    @property
    def label(self) -> str:
        """Drive id without the /dev/ prefix."""
        return self.metric.drive_id.removeprefix("/dev/")

    def fragment(self) -> str:
        """Human-readable part of the status line."""
        wear = "unknown" if self.metric.wear is None else str(self.metric.wear)
        text = f"c{self.metric.controller_index} {self.label} WLC/MWI {wear}"
        if self.metric.temperature is not None:
            text += f" temp {self.metric.temperature}C"
        return text

    def perfdata(self) -> list[str]:
        """Performance-data entries for this drive."""
        key = f"c{self.metric.controller_index}_{self.label}"
        entries = []
        if self.metric.wear is not None:
            entries.append(f"{key}={self.metric.wear}")
        if self.metric.temperature is not None:
            entries.append(f"{key}_temp={self.metric.temperature}")
        return entries


@dataclass(frozen=True)
class RunResult:
    """Overall outcome of one check run."""

    prefix: str
    driver: DriverKind
    fragments: tuple[str, ...]
    perfdata: tuple[str, ...]
    severity: Severity
    exit_code: int

    def render(self) -> str:
        """The single status line read by the monitoring system."""
        line = f"{self.prefix}: ({self.driver.value}) {', '.join(self.fragments)}"
        if self.perfdata:
            line += f" | {' '.join(self.perfdata)}"
        return line


def aggregate(outcomes: list[DriveOutcome], driver: DriverKind) -> RunResult:
    """
    Combine drive outcomes into the run result, in drive order.

    The prefix and the exit code are tracked separately. UNKNOWN sets both
    and is never downgraded in the prefix. A CRITICAL drive seen after an
    UNKNOWN one still sets exit code 2 but leaves the SSD UNKNOWN prefix,
    so that pair of drives reports exit 2 in one order and 3 in the other.
    WARNING only applies while everything so far was OK.
    """
    severity = Severity.OK
    exit_code = EXIT_CODES[Severity.OK]
    perfdata = []
    for outcome in outcomes:
        if outcome.severity == Severity.UNKNOWN:
            severity = Severity.UNKNOWN
            exit_code = EXIT_CODES[Severity.UNKNOWN]
        elif outcome.severity == Severity.CRITICAL:
            if severity != Severity.UNKNOWN:
                severity = Severity.CRITICAL
            exit_code = EXIT_CODES[Severity.CRITICAL]
        elif outcome.severity == Severity.WARNING and severity == Severity.OK:
            severity = Severity.WARNING
            exit_code = EXIT_CODES[Severity.WARNING]
        perfdata.extend(outcome.perfdata())

    return RunResult(
        prefix=f"SSD {severity.name}",
        driver=driver,
        fragments=tuple(o.fragment() for o in outcomes),
        perfdata=tuple(perfdata),
        severity=severity,
        exit_code=exit_code,
    )


def no_ssd_result(driver: DriverKind, accept_absence: bool) -> RunResult:
    """Result for a host where no SSD was found."""
    if accept_absence:
        return RunResult("OK", driver, ("no SSD found",), (), Severity.OK, 0)
    return RunResult(
        "UNKNOWN", driver, ("no SSD found",), (), Severity.UNKNOWN, SETUP_EXIT_CODE
    )
