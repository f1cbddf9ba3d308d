"""Configuration file utilities."""

from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from ..practice.generation import SessionChordConfig

DEFAULT_CONFIG_PATH = "configs/practice.yaml"


def get_project_root() -> Path:
    """Get the project root directory."""
    # Assumes this file is at chordtrainer/utils/config.py
    return Path(__file__).parent.parent.parent


def resolve_config_path(config_path: str) -> Path:
    """Resolve a config path, treating relative paths as project-relative."""
    path = Path(config_path)
    if path.is_absolute() or path.exists():
        return path
    return get_project_root() / path


def load_config(config_path: str = DEFAULT_CONFIG_PATH) -> Dict[str, Any]:
    """
    Load practice configuration from YAML file.

    Args:
        config_path: Path to YAML configuration file

    Returns:
        Configuration dictionary
    """
    path = resolve_config_path(config_path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path) as f:
        config = yaml.safe_load(f)

    return config or {}


def load_session_config(
    config_path: str = DEFAULT_CONFIG_PATH,
    overrides: Optional[Dict[str, Any]] = None,
) -> SessionChordConfig:
    """
    Build a SessionChordConfig from the 'session' block of a YAML file.

    Args:
        config_path: Path to YAML configuration file
        overrides: Keys that replace values from the file

    Returns:
        Validated session config
    """
    config = load_config(config_path)
    session = dict(config.get("session", {}))
    if overrides:
        session.update(overrides)
    return SessionChordConfig.from_dict(session)
