"""Configuration loading with layered overrides."""

from pathlib import Path
from typing import Any

import yaml

from ssdwear.errors import ConfigError

SYSTEM_CONFIG = Path("/etc/ssdwear/config.yaml")

DEFAULTS: dict[str, Any] = {
    "warning": 10,
    "critical": 5,
    "brand": "INTEL|Samsung",
    "timeout": 60,
    "log_file": None,
    "tools": {
        "storcli": "storcli64",
        "tw_cli": "tw_cli",
        "smartctl": "smartctl",
        "nvme": "nvme",
        "lsblk": "lsblk",
        "lspci": "lspci",
        "lsscsi": "lsscsi",
    },
}

KNOWN_KEYS = set(DEFAULTS)


def user_config_path() -> Path:
    """Per-user config file location."""
    return Path.home() / ".config" / "ssdwear" / "config.yaml"


def load_config_file(path: Path) -> dict[str, Any]:
    """
    Load a YAML config file if it exists.

    Raises:
        ConfigError: If the file cannot be read or is not a YAML mapping
    """
    if not path.exists():
        return {}

    try:
        data = yaml.safe_load(path.read_text())
    except OSError as e:
        raise ConfigError(f"Cannot read config {path}: {e}")
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in config {path}: {e}")

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config must be a YAML mapping: {path}")

    unknown = set(data) - KNOWN_KEYS
    if unknown:
        raise ConfigError(f"Unknown config keys in {path}: {', '.join(sorted(unknown))}")

    tools = data.get("tools")
    if tools is not None and not isinstance(tools, dict):
        raise ConfigError(f"'tools' must be a mapping in {path}")

    return data


def merge_config(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Merge one layer over another; the tools mapping merges per key."""
    merged = dict(base)
    for key, value in override.items():
        if key == "tools":
            merged["tools"] = {**base.get("tools", {}), **value}
        else:
            merged[key] = value
    return merged


def load_config(extra: Path | None = None) -> dict[str, Any]:
    """
    Load configuration with system -> user -> explicit file precedence.

    Args:
        extra: Config file given on the command line (must exist)

    Returns:
        Merged configuration, starting from DEFAULTS
    """
    config = merge_config(DEFAULTS, {})
    for path in (SYSTEM_CONFIG, user_config_path()):
        config = merge_config(config, load_config_file(path))

    if extra is not None:
        if not extra.exists():
            raise ConfigError(f"Config not found: {extra}")
        config = merge_config(config, load_config_file(extra))

    return config
