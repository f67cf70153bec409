"""Shared utility library for tool adapters."""
