"""Check output helper."""


class Output:
    """
    Collects what a check run prints.

    A monitoring system reads exactly one status line; debug lines, when
    enabled, are printed ahead of it.
    """

    def __init__(self, debug: bool = False):
        self.debug_enabled = debug
        self.debug_lines: list[str] = []
        self._status: str | None = None
        self._printed: bool = False

    def debug(self, message: str) -> None:
        """Record a diagnostic line (kept only when debugging)."""
        if self.debug_enabled:
            self.debug_lines.append(f"DEBUG: {message}")

    def error(self, message: str) -> None:
        """Record a fatal setup error; it becomes the status line."""
        self._status = f"UNKNOWN: {message}"

    def set_status(self, line: str) -> None:
        """Set the one-line check result."""
        self._status = line

    @property
    def status(self) -> str | None:
        """The status line, if one was set."""
        return self._status

    def to_plain(self) -> str:
        """Return everything that would be printed."""
        lines = list(self.debug_lines)
        if self._status is not None:
            lines.append(self._status)
        return "\n".join(lines)

    def render(self) -> None:
        """Print debug lines and the status line once."""
        if self._printed:
            return
        self._printed = True

        text = self.to_plain()
        if text:
            print(text)
