"""Process utilities for tool adapters."""

import subprocess
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ssdwear.core.context import Context


class CommandError(Exception):
    """Error running a command."""

    pass


def run_command(
    cmd: list[str],
    context: "Context | None" = None,
    check: bool = False,
    timeout: int | None = 60,
) -> str:
    """
    Run a command and return its output.

    Args:
        cmd: Command and arguments
        context: Execution context (for testing)
        check: Raise on non-zero exit
        timeout: Seconds before the command is abandoned

    Returns:
        Command stdout

    Raises:
        CommandError: If the command cannot be started, times out, or
            (with check=True) exits non-zero
    """
    if context is None:
        from ssdwear.core.context import Context
        context = Context()

    try:
        result = context.run(cmd, check=check, timeout=timeout)
    except subprocess.TimeoutExpired as e:
        raise CommandError(f"Command timed out after {timeout}s: {' '.join(cmd)}") from e
    except (OSError, subprocess.CalledProcessError) as e:
        raise CommandError(f"Command failed: {' '.join(cmd)}") from e
    return result.stdout


def check_tool(name: str, context: "Context | None" = None) -> bool:
    """
    Check if a tool exists in PATH.

    Args:
        name: Tool name or path to check
        context: Execution context (for testing)

    Returns:
        True if tool exists
    """
    if context is None:
        from ssdwear.core.context import Context
        context = Context()

    return context.check_tool(name)
