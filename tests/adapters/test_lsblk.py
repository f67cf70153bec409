"""Tests for the lsblk adapter."""

import pytest

from ssdwear.adapters.lsblk import is_nvme, list_nonrotational, parse_nonrotational

LSBLK = ("lsblk", "-d", "-n", "-o", "NAME,ROTA,TYPE")


class TestParseNonrotational:
    """Tests for parse_nonrotational."""

    def test_keeps_rota_zero(self):
        """Only ROTA 0 disks are returned, in order."""
        text = "sda        0 disk\nsdb        1 disk\nnvme0n1    0 disk\n"
        assert parse_nonrotational(text) == ["/dev/sda", "/dev/nvme0n1"]

    def test_skips_virtual_devices(self):
        """loop, zram and optical devices are not drives."""
        text = "loop0  0 loop\nzram0  0 disk\nsr0    0 rom\nsda    1 disk\n"
        assert parse_nonrotational(text) == []

    def test_virtual_devices_beside_ssd(self):
        """A real SSD is still found next to virtual devices."""
        text = "loop0 0 loop\nram0 0 disk\nzram0 0 disk\nsdb 0 disk\n"
        assert parse_nonrotational(text) == ["/dev/sdb"]

    def test_empty(self):
        """No output means no devices."""
        assert parse_nonrotational("") == []

    def test_skips_malformed_lines(self):
        """Lines without ROTA and TYPE columns are ignored."""
        assert parse_nonrotational("sda\nsdc 0\n\nsdb 0 disk\n") == ["/dev/sdb"]


def test_list_nonrotational_runs_lsblk(mock_context, tools):
    """Queries whole disks with their rotational flag and type."""
    ctx = mock_context(command_outputs={LSBLK: "sda 0 disk\nsdb 1 disk\nloop0 0 loop\n"})

    assert list_nonrotational(tools, ctx) == ["/dev/sda"]


@pytest.mark.parametrize("device,expected", [
    ("/dev/nvme0n1", True),
    ("/dev/nvme12n3", True),
    ("/dev/nvme0", False),
    ("/dev/sda", False),
    ("/dev/nvme0n1p1", False),
])
def test_is_nvme(device, expected):
    """Only NVMe namespace paths count."""
    assert is_nvme(device) is expected
