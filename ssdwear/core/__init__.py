"""Core ssdwear functionality."""
