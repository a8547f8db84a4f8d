"""
Configuration loading for fileops.

Settings are read from an optional YAML file with a top-level ``fileops``
mapping. Without a file every setting keeps its default, so a bare run of
the tool reads nothing from disk.
"""

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .exceptions import ConfigurationError


@dataclass
class Settings:
    """Runtime settings."""
    audit_log: Optional[str] = None  # JSONL path; None disables auditing
    color: bool = True


def load_settings(config_path: Optional[str] = None) -> Settings:
    """
    Load settings from a YAML file.

    Args:
        config_path: Path to the YAML file, or None for defaults

    Returns:
        Settings populated from the file, defaults for missing keys

    Raises:
        ConfigurationError: If the file is not valid YAML or has the wrong shape
    """
    if config_path is None:
        return Settings()

    path = Path(config_path)
    if not path.exists():
        return Settings()

    try:
        with open(path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {config_path}: {e}")

    if not isinstance(raw, dict):
        raise ConfigurationError(f"Expected a mapping in {config_path}")

    section = raw.get("fileops", raw)
    if not isinstance(section, dict):
        raise ConfigurationError(f"Expected 'fileops' to be a mapping in {config_path}")

    return _from_mapping(section)


def _from_mapping(data: Dict[str, Any]) -> Settings:
    settings = Settings()

    audit_log = data.get("audit_log")
    if audit_log is not None:
        settings.audit_log = str(audit_log)

    color = data.get("color", settings.color)
    if not isinstance(color, bool):
        raise ConfigurationError(f"'color' must be true or false, got {color!r}")
    settings.color = color

    return settings


def save_settings(settings: Settings, config_path: str) -> None:
    """Write settings back to a YAML file."""
    path = Path(config_path)
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, "w", encoding="utf-8") as f:
        yaml.dump({"fileops": asdict(settings)}, f, default_flow_style=False)
