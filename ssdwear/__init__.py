"""ssdwear - SSD wear-level check for directly attached and RAID-backed drives."""

__version__ = "0.1.0"
