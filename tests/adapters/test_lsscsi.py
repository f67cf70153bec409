"""Tests for the lsscsi adapter."""

from ssdwear.adapters.lsscsi import find_block_device, parse_block_device


class TestParseBlockDevice:
    """Tests for parse_block_device."""

    def test_keyed_by_host(self, fixture_text):
        """The disk on the controller's SCSI host is chosen."""
        text = fixture_text("lsscsi", "raid.txt")
        assert parse_block_device(text, "0") == "/dev/sdb"
        assert parse_block_device(text, "1") == "/dev/sdc"

    def test_vendor_fallback(self, fixture_text):
        """Without a host match, the first RAID-vendor disk is used."""
        text = fixture_text("lsscsi", "vendor_only.txt")
        assert parse_block_device(text, "0") == "/dev/sdd"

    def test_ignores_non_disks(self):
        """CD drives on the keyed host are skipped."""
        text = "[0:0:0:0]    cd/dvd  LSI      VIRTUAL-CDROM    1.00  /dev/sr0\n"
        assert parse_block_device(text, "0") == ""

    def test_nothing_found(self):
        """Returns an empty path when no disk qualifies."""
        assert parse_block_device("", "0") == ""


def test_find_block_device_runs_lsscsi(mock_context, tools, fixture_text):
    """Reads the SCSI device list."""
    ctx = mock_context(command_outputs={("lsscsi",): fixture_text("lsscsi", "raid.txt")})

    assert find_block_device("1", tools, ctx) == "/dev/sdc"
