"""
Configuration management for Twig.

Handles loading and merging configuration from multiple sources:
- Default settings
- User config file (~/.config/twig/config.yaml)
- Environment variables

Modified: 2026-10-19
"""

from twig.config.settings import (
    Settings,
    EditorSettings,
    KeySettings,
    LoggingSettings,
    configure_logging,
    get_config_dir,
)

__all__ = [
    "Settings",
    "EditorSettings",
    "KeySettings",
    "LoggingSettings",
    "configure_logging",
    "get_config_dir",
]
