"""Fatal errors that stop a check before any drive is classified."""

SETUP_EXIT_CODE = 4


class SetupError(Exception):
    """A failure during configuration, tooling or detection."""

    exit_code = SETUP_EXIT_CODE


class ConfigError(SetupError):
    """Configuration file missing required structure or unreadable."""

    pass


class InvalidThresholds(SetupError):
    """Critical threshold above the warning threshold."""

    pass


class MissingTool(SetupError):
    """A required diagnostic executable is not installed."""

    def __init__(self, tool: str):
        super().__init__(f"{tool} not found")
        self.tool = tool


class UnknownController(SetupError):
    """The storage controller could not be classified."""

    pass


class NoController(SetupError):
    """The controller tool ran but listed no controllers."""

    pass
