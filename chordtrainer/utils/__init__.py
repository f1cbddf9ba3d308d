"""Shared utilities."""

from .config import get_project_root, load_config, load_session_config

__all__ = [
    "get_project_root",
    "load_config",
    "load_session_config",
]
