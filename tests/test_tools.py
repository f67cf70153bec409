"""Tests for tool availability checks."""

import pytest

from ssdwear.errors import MissingTool
from ssdwear.models import ControllerFamily, ToolPaths
from ssdwear.tools import check_tools, required_tools


class TestRequiredTools:
    """Tests for required_tools."""

    def test_lsi(self, tools):
        """storcli and lsscsi plus smartctl."""
        assert required_tools(ControllerFamily.LSI, tools, []) == ["storcli64", "lsscsi", "smartctl"]

    def test_3ware(self, tools):
        """tw_cli plus smartctl."""
        assert required_tools(ControllerFamily.THREEWARE, tools, []) == ["tw_cli", "smartctl"]

    def test_auto_sata(self, tools):
        """smartctl only for SATA SSDs."""
        assert required_tools(ControllerFamily.AUTO, tools, ["/dev/sda"]) == ["smartctl"]

    def test_nvme_present(self, tools):
        """An NVMe device adds nvme-cli, whatever the family."""
        devices = ["/dev/sda", "/dev/nvme0n1"]
        assert required_tools(ControllerFamily.AUTO, tools, devices) == ["nvme", "smartctl"]
        assert "nvme" in required_tools(ControllerFamily.LSI, tools, devices)

    def test_storcli_override(self):
        """A configured storcli path is what gets checked."""
        tools = ToolPaths(storcli="/opt/MegaRAID/storcli/storcli64")
        assert required_tools(ControllerFamily.LSI, tools, [])[0] == "/opt/MegaRAID/storcli/storcli64"


class TestCheckTools:
    """Tests for check_tools."""

    def test_all_present(self, mock_context, tools):
        """Returns the tool paths when everything exists."""
        ctx = mock_context(tools_available=["storcli64", "lsscsi", "smartctl"])

        assert check_tools(ControllerFamily.LSI, tools, [], ctx) == tools

    def test_missing_controller_tool(self, mock_context, tools):
        """A missing vendor tool raises MissingTool naming it."""
        ctx = mock_context(tools_available=["lsscsi", "smartctl"])

        with pytest.raises(MissingTool, match="storcli64 not found") as exc_info:
            check_tools(ControllerFamily.LSI, tools, [], ctx)
        assert exc_info.value.exit_code == 4

    def test_missing_nvme(self, mock_context, tools):
        """nvme-cli is required once an NVMe device exists."""
        ctx = mock_context(tools_available=["smartctl"])

        with pytest.raises(MissingTool, match="nvme"):
            check_tools(ControllerFamily.AUTO, tools, ["/dev/nvme0n1"], ctx)

    def test_missing_smartctl(self, mock_context, tools):
        """smartctl is always required."""
        ctx = mock_context(tools_available=["tw_cli"])

        with pytest.raises(MissingTool, match="smartctl"):
            check_tools(ControllerFamily.THREEWARE, tools, [], ctx)
